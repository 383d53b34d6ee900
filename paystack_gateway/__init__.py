from .exceptions import (
    AuthorizationUrlMissing,
    PaymentVerificationFailed,
    PaystackError,
    ResponseNotAvailable,
)
from .factory import PaystackFactory
from .payload_sources import (
    EmptyPayloadSource,
    MappingPayloadSource,
    RequestPayloadSource,
)
from .paystack_provider import PaystackClient

__all__ = [
    "AuthorizationUrlMissing",
    "EmptyPayloadSource",
    "MappingPayloadSource",
    "PaymentVerificationFailed",
    "PaystackClient",
    "PaystackError",
    "PaystackFactory",
    "RequestPayloadSource",
    "ResponseNotAvailable",
]
