from unittest.mock import MagicMock

import django
import pytest
from django.conf import settings
from requests.models import PreparedRequest


def pytest_configure():
    if not settings.configured:
        settings.configure(
            DEBUG=True,
            SECRET_KEY='paystack-gateway-tests',
            ROOT_URLCONF='tests.urls',
            INSTALLED_APPS=[
                'django.contrib.contenttypes',
                'django.contrib.auth',
                'rest_framework',
            ],
            PAYSTACK_SECRET_KEY='sk_test_secret',
            PAYSTACK_PAYMENT_URL='https://api.paystack.co',
        )
    django.setup()


def make_response(payload, status_code=200):
    response = MagicMock()
    response.status_code = status_code
    response.json.return_value = payload
    return response


def sent_request(session):
    """(method, url with query string, json body, headers) of the last request made through session"""
    args, kwargs = session.request.call_args
    prepared = PreparedRequest()
    prepared.prepare_url(args[1], kwargs.get('params'))
    return args[0], prepared.url, kwargs['json'], kwargs['headers']


@pytest.fixture
def session():
    session = MagicMock()
    session.request.return_value = make_response(
        {'status': True, 'message': 'ok', 'data': {}}
    )
    return session


@pytest.fixture
def paystack_client(session):
    from paystack_gateway import PaystackClient

    return PaystackClient(
        secret_key='sk_test_secret',
        base_url='https://api.paystack.co',
        session=session,
    )
