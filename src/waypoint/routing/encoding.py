"""Percent-encoding for path segments and query values.

Everything outside the RFC 3986 unreserved set is encoded as UTF-8
``%XX`` escapes, so values containing ``/``, ``?``, ``&`` or ``=`` can
never change the shape of a path. Decoding is strict: a stray ``%`` or
an escape sequence that is not valid UTF-8 raises ``EncodingMismatch``.
"""

import re
from urllib.parse import quote, unquote

from waypoint.errors import EncodingMismatch

# A "%" that does not start a two-hex-digit escape
_BAD_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


def encode_segment(value: str) -> str:
    """Percent-encode *value* for use as a path segment or query value.

    Raises ``EncodingMismatch`` when *value* can't be encoded as UTF-8
    (lone surrogates).
    """
    try:
        return quote(value, safe="", encoding="utf-8", errors="strict")
    except UnicodeEncodeError as exc:
        raise EncodingMismatch(value, "value is not encodable as UTF-8") from exc


def decode_segment(text: str) -> str:
    """Decode a percent-encoded segment produced by :func:`encode_segment`.

    Raises ``EncodingMismatch`` on a truncated or non-hex escape, or
    when the escaped bytes are not valid UTF-8.
    """
    bad = _BAD_ESCAPE.search(text)
    if bad is not None:
        raise EncodingMismatch(text, f"invalid escape at offset {bad.start()}")
    try:
        return unquote(text, encoding="utf-8", errors="strict")
    except UnicodeDecodeError as exc:
        raise EncodingMismatch(text, "escaped bytes are not valid UTF-8") from exc
