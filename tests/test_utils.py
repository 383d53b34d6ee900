import pytest

from paystack_gateway import MappingPayloadSource, endpoints
from paystack_gateway.utils import (
    build_default_payload,
    filter_empty,
    gen_tranx_ref,
    to_int,
)


def test_filter_empty_drops_falsy_values():
    payload = {
        'business_name': 'Shop',
        'description': '',
        'metadata': None,
        'percentage_charge': 0,
        'settlement_schedule': 'auto',
    }

    assert filter_empty(payload) == {
        'business_name': 'Shop',
        'settlement_schedule': 'auto',
    }


def test_build_default_payload_renames_and_fills_missing():
    source = MappingPayloadSource({'fname': 'Ada', 'email': 'ada@example.com'})

    payload = build_default_payload(
        source, (('email', 'email'), ('first_name', 'fname'), ('phone', 'phone'))
    )

    assert payload == {'email': 'ada@example.com', 'first_name': 'Ada', 'phone': None}


@pytest.mark.parametrize('value, expected', [
    ('500', 500),
    (500, 500),
    ('1500.50', 1500),
    ('500.0', 500),
    (None, None),
    ('', None),
])
def test_to_int(value, expected):
    assert to_int(value) == expected


def test_gen_tranx_ref_returns_distinct_references():
    references = {gen_tranx_ref() for _ in range(20)}

    assert len(references) == 20


def test_endpoints_are_relative_paths():
    paths = [
        value for name, value in vars(endpoints).items()
        if name.isupper()
    ]

    assert paths
    assert all(path.startswith('/') for path in paths)
    assert endpoints.TRANSFER_FINALIZE == '/transfer/finalize_transfer'
