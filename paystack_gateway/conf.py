from django.conf import settings


DEFAULT_PAYMENT_URL = 'https://api.paystack.co'
DEFAULT_REFERENCE_GENERATOR = 'paystack_gateway.utils.hashed_token'


def get_secret_key():
    return getattr(settings, 'PAYSTACK_SECRET_KEY', None)


def get_payment_url():
    return getattr(settings, 'PAYSTACK_PAYMENT_URL', None) or DEFAULT_PAYMENT_URL


def get_reference_generator_path():
    return getattr(
        settings, 'PAYSTACK_REFERENCE_GENERATOR', DEFAULT_REFERENCE_GENERATOR
    )
