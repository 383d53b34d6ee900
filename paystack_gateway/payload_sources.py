from .abstract_classes import AbstractPayloadSource


class EmptyPayloadSource(AbstractPayloadSource):

    def get(self, key, default=None):
        return default

    def has(self, key):
        return False


class MappingPayloadSource(AbstractPayloadSource):

    def __init__(self, mapping=None):
        self.mapping = dict(mapping or {})

    def get(self, key, default=None):
        return self.mapping.get(key, default)

    def has(self, key):
        return key in self.mapping


class RequestPayloadSource(AbstractPayloadSource):
    """
    Reads default payload fields from an inbound request

    *** A rest framework request exposes its parsed body as `data`,
    *** a plain django request is looked up in POST and then in GET.

    """

    def __init__(self, request):
        self.request = request

    def _sources(self):
        data = getattr(self.request, 'data', None)
        if data is not None:
            return (data, self.request.GET)
        return (self.request.POST, self.request.GET)

    def get(self, key, default=None):
        for source in self._sources():
            if key in source:
                return source.get(key)
        return default

    def has(self, key):
        return any(key in source for source in self._sources())
