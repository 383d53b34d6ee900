from rest_framework import status
from rest_framework.exceptions import APIException


class PaystackError(Exception):
    """Base class for errors raised by the client itself."""


class ResponseNotAvailable(PaystackError):
    """A response was decoded before any request was dispatched."""


class AuthorizationUrlMissing(PaystackError):
    """A redirect was requested before a transaction was initialized."""


class PaymentVerificationFailed(PaystackError, APIException):
    status_code = status.HTTP_400_BAD_REQUEST
    default_detail = 'Invalid Transaction Reference'
    default_code = 'payment_verification_failed'
