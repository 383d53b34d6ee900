from abc import ABC, abstractmethod

from .payload_sources import EmptyPayloadSource, RequestPayloadSource
from .paystack_provider import PaystackClient


class PaymentProviderFactory(ABC):
    """
     *** This interface provides the structure for concrete factory classes.
     *** A factory hands out a fresh client per caller, clients are never
     *** shared between requests.

    """
    @abstractmethod
    def create_client(self, request=None, **kwargs):
        pass


class PaystackFactory(PaymentProviderFactory):

    def __init__(self, secret_key=None, base_url=None, session=None):
        self.secret_key = secret_key
        self.base_url = base_url
        self.session = session

    def create_client(self, request=None, **kwargs):
        """binds the client to the inbound request when one is given"""
        payload_source = kwargs.pop('payload_source', None)
        if request is not None:
            payload_source = RequestPayloadSource(request)
        elif payload_source is None:
            payload_source = EmptyPayloadSource()
        kwargs.setdefault('secret_key', self.secret_key)
        kwargs.setdefault('base_url', self.base_url)
        kwargs.setdefault('session', self.session)
        return PaystackClient(payload_source=payload_source, **kwargs)
