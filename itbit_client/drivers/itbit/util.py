# -*- coding: utf-8 -*-
# itbit_client/drivers/itbit/util.py

import time
from decimal import Decimal
from html.parser import HTMLParser
from urllib.parse import urlencode


def now_ms():
    """当前时间戳（毫秒）"""
    return int(time.time() * 1000)


def clean_args(args):
    """Drop None-valued keys, keeping insertion order."""
    if not args:
        return {}
    return {k: v for k, v in args.items() if v is not None}


def encode_query(args):
    """
    Query string for the given arguments, '' when there is nothing to encode.
    Booleans are written lower-case the way the server expects them.
    """
    args = clean_args(args)
    if not args:
        return ''
    pairs = []
    for k, v in args.items():
        if isinstance(v, bool):
            v = 'true' if v else 'false'
        pairs.append((k, v))
    return urlencode(pairs)


def to_decimal_str(x):
    """
    Amount/price to the decimal string sent on the wire.
    Decimal keeps its exact form; floats go through repr so 0.1 stays '0.1'.
    """
    if isinstance(x, Decimal):
        return format(x, 'f')
    return str(x)


class _BodyTextParser(HTMLParser):
    _SKIP = ('head', 'script', 'style', 'title', 'noscript')

    def __init__(self):
        super().__init__(convert_charrefs=True)
        self.chunks = []
        self._skip_depth = 0

    def handle_starttag(self, tag, attrs):
        # an unclosed <head> ends where <body> starts
        if tag == 'body':
            self._skip_depth = 0
        elif tag in self._SKIP:
            self._skip_depth += 1

    def handle_endtag(self, tag):
        if tag in self._SKIP and self._skip_depth:
            self._skip_depth -= 1

    def handle_data(self, data):
        if not self._skip_depth:
            self.chunks.append(data)


def extract_html_text(raw):
    """
    Best-effort visible text of an HTML document (or of any text blob).

    Markup inside <head>, <script> and <style> is dropped and whitespace is
    collapsed, so an error page like ``<h1>Service Unavailable</h1>`` yields
    ``'Service Unavailable'``. Returns '' when nothing readable is left.
    """
    if raw is None:
        return ''
    if isinstance(raw, bytes):
        raw = raw.decode('utf-8', errors='replace')
    parser = _BodyTextParser()
    parser.feed(raw)
    parser.close()
    return ' '.join(''.join(parser.chunks).split())
