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

import logging
from collections.abc import Mapping

from .errors import (
    ERR_CYCLE,
    ERR_DEPTH,
    ERR_NULL,
    ERR_UNSUPPORTED,
    BDepthError,
    BEncodeError,
)
from .options import EncodeOptions
from .utils import encode_int_digits
from .utils.threadmanager import check_cancelled
from .values import sorted_items, text_bytes

log = logging.getLogger(__name__)


class CloseContainer(object):
    __slots__ = ("container_id",)

    def __init__(self, container_id):
        self.container_id = container_id


class _Walker(object):
    """Tracks the containers currently open while encoding one value."""

    def __init__(self, options):
        self.max_depth = options.max_depth
        self.depth = 0
        self.open_ids = set() if options.detect_cycles else None

    def open(self, container):
        if self.depth >= self.max_depth:
            raise BDepthError(
                "nesting depth exceeded the maximum of %d" % self.max_depth,
                ERR_DEPTH,
            )
        container_id = id(container)
        if self.open_ids is not None:
            if container_id in self.open_ids:
                raise BEncodeError(
                    "%s contains itself" % type(container).__name__, ERR_CYCLE
                )
            self.open_ids.add(container_id)
        self.depth += 1
        return CloseContainer(container_id)

    def close(self, item):
        self.depth -= 1
        if self.open_ids is not None:
            self.open_ids.discard(item.container_id)


def bencode_proc(write, x, options, cancel=None):
    """Emit `x` through `write` using an explicit work stack.

    Containers push a CloseContainer item followed by their children in
    reverse, so popping restores the original order.
    """
    walker = _Walker(options)
    stack = [x]
    while stack:
        check_cancelled(cancel)
        x = stack.pop()
        match x:
            case CloseContainer():
                walker.close(x)
                write(b"e")
            case None:
                raise BEncodeError("cannot bencode None", ERR_NULL)
            case bool():
                raise BEncodeError("don't know how to bencode bool", ERR_UNSUPPORTED)
            case int():
                write(b"i" + encode_int_digits(x) + b"e")
            case str():
                str_bytes = text_bytes(x)
                write(b"%d:" % len(str_bytes))
                write(str_bytes)
            case bytes() | bytearray() | memoryview():
                x = bytes(x)
                write(b"%d:" % len(x))
                write(x)
            case list() | tuple():
                stack.append(walker.open(x))
                write(b"l")
                for item in reversed(x):
                    if item is None:
                        raise BEncodeError("list items cannot be None", ERR_NULL)
                    stack.append(item)
            case Mapping():
                stack.append(walker.open(x))
                write(b"d")
                for key, value in reversed(sorted_items(x)):
                    stack.append(value)
                    stack.append(key)
            case _:
                raise BEncodeError(
                    "don't know how to bencode %s" % type(x).__name__,
                    ERR_UNSUPPORTED,
                )


def bencode_into(sink, x, options=None, cancel=None):
    """Write the canonical encoding of `x` to `sink` (anything with write())."""
    options = EncodeOptions.coerce(options)
    check_cancelled(cancel)
    bencode_proc(sink.write, x, options, cancel)


def bencode(x, options=None, cancel=None) -> bytes:
    options = EncodeOptions.coerce(options)
    check_cancelled(cancel)
    result = []
    bencode_proc(result.append, x, options, cancel)
    if log.isEnabledFor(logging.DEBUG):
        log.debug("encoded %s into %d chunks" % (type(x).__name__, len(result)))
    return b"".join(result)
