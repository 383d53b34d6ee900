from django.utils.crypto import get_random_string
from django.utils.module_loading import import_string

from . import conf


def filter_empty(payload):
    """drops every field whose value is falsy (None, '', 0, False, empty containers)"""
    return {key: value for key, value in payload.items() if value}


def build_default_payload(source, fields):
    """
    Builds a payload out of the bound payload source.

    *** fields is a sequence of (payload_key, source_key) pairs, every
    *** payload_key ends up in the result, None when the source lacks it.

    """
    return {
        payload_key: source.get(source_key)
        for payload_key, source_key in fields
    }


def to_int(value):
    """truncates numeric form input such as '1500.50' to 1500"""
    if value is None or value == '':
        return None
    return int(float(value))


def hashed_token(length=32):
    return get_random_string(length)


def gen_tranx_ref():
    generator = import_string(conf.get_reference_generator_path())
    return generator()
