# -*- coding: utf-8 -*-
# tests/test_util.py

from decimal import Decimal

from itbit_client.drivers.itbit.util import clean_args, encode_query, extract_html_text, to_decimal_str


def test_extract_body_text():
    html = ('<!DOCTYPE html><html><head><title>503</title><style>h1 {color: red}</style></head>'
            '<body><h1>Service   Unavailable</h1>\n<script>var x = 1;</script></body></html>')
    assert extract_html_text(html) == 'Service Unavailable'


def test_extract_from_fragment_and_plain_text():
    assert extract_html_text('<p>Bad <b>Gateway</b></p>') == 'Bad Gateway'
    assert extract_html_text('upstream connect error') == 'upstream connect error'
    assert extract_html_text(b'<div>&amp; more</div>') == '& more'


def test_extract_nothing_readable():
    assert extract_html_text('') == ''
    assert extract_html_text(None) == ''
    assert extract_html_text('<html><head><title>x</title></head><body></body></html>') == ''


def test_unclosed_head_does_not_hide_body():
    assert extract_html_text('<html><head><title>t</title><body>Gateway Timeout</body>') == 'Gateway Timeout'


def test_encode_query():
    assert encode_query({}) == ''
    assert encode_query(None) == ''
    assert encode_query({'a': None}) == ''
    assert encode_query({'instrument': 'XBTUSD', 'status': None, 'page': 1}) == 'instrument=XBTUSD&page=1'
    assert encode_query({'flag': True, 'q': 'a b'}) == 'flag=true&q=a+b'


def test_clean_args_keeps_order():
    assert list(clean_args({'b': 1, 'x': None, 'a': 2})) == ['b', 'a']


def test_to_decimal_str():
    assert to_decimal_str(Decimal('0.00010000')) == '0.00010000'
    assert to_decimal_str(0.1) == '0.1'
    assert to_decimal_str(5) == '5'
    assert to_decimal_str('12.50') == '12.50'
