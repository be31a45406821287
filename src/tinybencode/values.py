"""
The MIT License

Copyright (c) 2015 Fred Stober

Permission is hereby granted, free of charge, to any person obtaining a copy
of this software and associated documentation files (the "Software"), to deal
in the Software without restriction, including without limitation the rights
to use, copy, modify, merge, publish, distribute, sublicense, and/or sell
copies of the Software, and to permit persons to whom the Software is
furnished to do so, subject to the following conditions:

The above copyright notice and this permission notice shall be included in
all copies or substantial portions of the Software.

THE SOFTWARE IS PROVIDED "AS IS", WITHOUT WARRANTY OF ANY KIND, EXPRESS OR
IMPLIED, INCLUDING BUT NOT LIMITED TO THE WARRANTIES OF MERCHANTABILITY,
FITNESS FOR A PARTICULAR PURPOSE AND NONINFRINGEMENT. IN NO EVENT SHALL THE
AUTHORS OR COPYRIGHT HOLDERS BE LIABLE FOR ANY CLAIM, DAMAGES OR OTHER
LIABILITY, WHETHER IN AN ACTION OF CONTRACT, TORT OR OTHERWISE, ARISING FROM,
OUT OF OR IN CONNECTION WITH THE SOFTWARE OR THE USE OR OTHER DEALINGS IN
THE SOFTWARE.
"""

from .errors import (
    ERR_DUP_KEY,
    ERR_KEY_TYPE,
    ERR_NULL,
    ERR_UNSUPPORTED,
    BEncodeError,
)

BencodeValue = bytes | int | list | dict

DIGITS = b"0123456789"
INTEGER_CHARS = b"-0123456789"

marker_int = ord("i")
marker_list = ord("l")
marker_dict = ord("d")
marker_end = ord("e")
marker_sep = ord(":")


# Parse stack sentinels ############################################


class ContainerStart(object):
    __slots__ = ()


class ListStart(ContainerStart):
    __slots__ = ()


class DictionaryStart(ContainerStart):
    __slots__ = ()


LIST_START = ListStart()
DICTIONARY_START = DictionaryStart()


# Keys #############################################################


def text_bytes(text: str) -> bytes:
    try:
        return text.encode()
    except UnicodeEncodeError as e:
        raise BEncodeError(
            "cannot encode %r as UTF-8: %s" % (text[:32], e.reason), ERR_UNSUPPORTED
        ) from e


def key_bytes(key) -> bytes:
    if key is None:
        raise BEncodeError("dictionary keys cannot be None", ERR_NULL)
    if isinstance(key, str):
        return text_bytes(key)
    if isinstance(key, (bytes, bytearray, memoryview)):
        return bytes(key)
    raise BEncodeError(
        "dictionary keys must be bytes or str, not %s" % type(key).__name__,
        ERR_KEY_TYPE,
    )


def sorted_items(mapping):
    """Return (key bytes, value) pairs in ascending byte order."""
    items = []
    seen = set()
    for key, value in mapping.items():
        raw = key_bytes(key)
        if raw in seen:
            raise BEncodeError("duplicate dictionary key %r" % raw, ERR_DUP_KEY)
        if value is None:
            raise BEncodeError("value of key %r cannot be None" % raw, ERR_NULL)
        seen.add(raw)
        items.append((raw, value))
    items.sort(key=lambda item: item[0])
    return items
