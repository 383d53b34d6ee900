from types import SimpleNamespace

from django.test import RequestFactory

from paystack_gateway import (
    EmptyPayloadSource,
    MappingPayloadSource,
    RequestPayloadSource,
)


def test_empty_source_has_nothing():
    source = EmptyPayloadSource()

    assert source.get('amount') is None
    assert source.get('amount', 0) == 0
    assert source.has('amount') is False


def test_mapping_source():
    source = MappingPayloadSource({'name': 'Gold', 'desc': None})

    assert source.get('name') == 'Gold'
    assert source.has('desc') is True
    assert source.has('interval') is False


def test_request_source_reads_post_then_query():
    request = RequestFactory().post(
        '/checkout/?trxref=T123&email=query@example.com',
        {'email': 'form@example.com', 'amount': '500'},
    )
    source = RequestPayloadSource(request)

    assert source.get('email') == 'form@example.com'
    assert source.get('amount') == '500'
    assert source.get('trxref') == 'T123'
    assert source.has('trxref') is True
    assert source.get('currency') is None
    assert source.has('currency') is False


def test_request_source_prefers_parsed_data():
    request = SimpleNamespace(
        data={'amount': 700, 'metadata': {'cart_id': '2'}},
        GET={'trxref': 'T9'},
    )
    source = RequestPayloadSource(request)

    assert source.get('amount') == 700
    assert source.get('metadata') == {'cart_id': '2'}
    assert source.get('trxref') == 'T9'
