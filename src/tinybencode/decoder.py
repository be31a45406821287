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

from .errors import (
    ERR_DEPTH,
    ERR_DUP_KEY,
    ERR_EXPECTED,
    ERR_INTEGER,
    ERR_INVALID_START,
    ERR_KEY_ORDER,
    ERR_KEY_TYPE,
    ERR_LENGTH,
    ERR_MISSING_VALUE,
    ERR_STACK_SHAPE,
    ERR_TRUNCATED,
    ERR_UNTERMINATED,
    ERR_UNWRAPPED,
    BDecodeError,
    BDepthError,
)
from .options import DecodeOptions
from .utils import decode_int_digits
from .utils.stream import open_source
from .utils.threadmanager import check_cancelled
from .values import (
    DICTIONARY_START,
    DIGITS,
    INTEGER_CHARS,
    LIST_START,
    ContainerStart,
    ListStart,
    marker_dict,
    marker_end,
    marker_int,
    marker_list,
    marker_sep,
)

log = logging.getLogger(__name__)

# Decoding functions ##############################################


def preview(raw, limit=32):
    """repr() of a literal, shortened for error messages."""
    if len(raw) <= limit:
        return repr(raw)
    return "%r... (%d bytes)" % (raw[:limit], len(raw))


def read_literal(source):
    """Read '-'? digits, rejecting leading zeros and negative zero.

    Returns the validated ASCII literal without converting it, so callers
    can bound its size first.
    """
    position = source.position
    raw = source.read_while(INTEGER_CHARS)
    negative = raw[:1] == b"-"
    body = raw[1:] if negative else raw
    if not body or b"-" in body:
        raise BDecodeError(
            "expected number, got %s" % preview(raw), ERR_INTEGER, position
        )
    if body[0] == DIGITS[0] and (len(body) > 1 or negative):
        raise BDecodeError(
            "numbers cannot begin with zero and cannot be negative zero, got %s"
            % preview(raw),
            ERR_INTEGER,
            position,
        )
    return raw


def read_integer_literal(source) -> int:
    return decode_int_digits(read_literal(source))


def expect(source, marker):
    char = source.peek()
    if char is None:
        raise BDecodeError(
            "unexpected end of input, expected %r" % chr(marker),
            ERR_TRUNCATED,
            source.position,
        )
    if char != marker:
        raise BDecodeError(
            "expected %r, found %r" % (chr(marker), chr(char)),
            ERR_EXPECTED,
            source.position,
        )
    source.read_one()


def read_string(source, options):
    position = source.position
    raw = read_literal(source)
    if raw[:1] == b"-":
        raise BDecodeError(
            "byte string length cannot be negative, got %s" % preview(raw),
            ERR_LENGTH,
            position,
        )
    limit = options.max_string_length
    # more digits than the limit has means a larger value
    if len(raw) > len(b"%d" % limit) or decode_int_digits(raw) > limit:
        raise BDecodeError(
            "byte string length %s exceeds the limit of %d" % (preview(raw), limit),
            ERR_LENGTH,
            position,
        )
    expect(source, marker_sep)
    return source.read_exactly(int(raw))


def read_integer(source):
    source.read_one()
    value = read_integer_literal(source)
    expect(source, marker_end)
    return value


def assemble_dictionary(items, options, cancel=None, position=None):
    """Build a dict from the alternating key/value frames of one container."""
    result = {}
    prev_key = None
    for idx in range(0, len(items), 2):
        check_cancelled(cancel)
        key = items[idx]
        if idx + 1 == len(items):
            raise BDecodeError(
                "expected value for key %r, did not receive one" % (key,),
                ERR_MISSING_VALUE,
                position,
            )
        if type(key) is not bytes:
            raise BDecodeError(
                "keys must be byte strings, got %s" % type(key).__name__,
                ERR_KEY_TYPE,
                position,
            )
        if (
            prev_key is not None
            and not options.allow_unordered_keys
            and prev_key > key
        ):
            raise BDecodeError(
                "dictionary keys were not sorted: %r after %r" % (key, prev_key),
                ERR_KEY_ORDER,
                position,
            )
        if key in result:
            raise BDecodeError(
                "key %r already exists" % (key,), ERR_DUP_KEY, position
            )
        result[key] = items[idx + 1]
        prev_key = key
    return result


def close_container(source, stack, options, cancel=None):
    source.read_one()
    pos = len(stack) - 1
    while pos >= 0 and not isinstance(stack[pos], ContainerStart):
        check_cancelled(cancel)
        pos -= 1
    if pos < 0:
        raise BDecodeError(
            "end marker without an open list or dictionary",
            ERR_UNTERMINATED,
            source.position - 1,
        )
    marker = stack[pos]
    items = stack[pos + 1 :]
    del stack[pos:]
    if isinstance(marker, ListStart):
        return items
    return assemble_dictionary(items, options, cancel, source.position - 1)


def bdecode_proc(source, options, cancel=None, first_only=False):
    """Parse tokens from `source` with an explicit stack instead of recursion.

    The stack holds finished values and LIST_START / DICTIONARY_START
    markers; an 'e' folds everything above the nearest marker into one
    value. With first_only the loop stops as soon as a single complete
    top-level value is available, leaving the rest of the input unread.
    """
    stack = []
    max_stack_size = options.max_stack_size
    while True:
        t = source.peek()
        if t is None:
            break
        check_cancelled(cancel)
        if len(stack) > max_stack_size:
            raise BDepthError(
                "stack size exceeded the maximum allowed limit of %d (position %d)"
                % (max_stack_size, source.position),
                ERR_DEPTH,
            )
        if t in DIGITS:
            frame = read_string(source, options)
        elif t == marker_int:
            frame = read_integer(source)
        elif t == marker_list:
            source.read_one()
            frame = LIST_START
        elif t == marker_dict:
            source.read_one()
            frame = DICTIONARY_START
        elif t == marker_end:
            frame = close_container(source, stack, options, cancel)
        else:
            raise BDecodeError(
                "invalid start character %r" % chr(t),
                ERR_INVALID_START,
                source.position,
            )
        stack.append(frame)
        if first_only and len(stack) == 1 and not isinstance(frame, ContainerStart):
            break
    return check_final_stack(stack, options, source.position)


def check_final_stack(stack, options, position=None):
    if any(isinstance(frame, ContainerStart) for frame in stack):
        raise BDecodeError(
            "unterminated list or dictionary at end of input",
            ERR_UNTERMINATED,
            position,
        )
    if len(stack) != 1:
        raise BDecodeError(
            "expected exactly one top-level value, found %d" % len(stack),
            ERR_STACK_SHAPE,
            position,
        )
    value = stack[0]
    if not options.allow_unwrapped_elements and not isinstance(value, (list, dict)):
        raise BDecodeError(
            "top-level %s is not wrapped in a list or dictionary"
            % type(value).__name__,
            ERR_UNWRAPPED,
            position,
        )
    return value


def bdecode_extra(msg, options=None, cancel=None):
    """Decode the first complete value of `msg` and return (value, end position)."""
    options = DecodeOptions.coerce(options)
    check_cancelled(cancel)
    source = open_source(msg)
    start = source.position
    result = bdecode_proc(source, options, cancel, first_only=True)
    if log.isEnabledFor(logging.DEBUG):
        log.debug(
            "decoded %s from bytes %d-%d"
            % (type(result).__name__, start, source.position)
        )
    return (result, source.position)


def bdecode(msg, options=None, cancel=None):
    options = DecodeOptions.coerce(options)
    check_cancelled(cancel)
    source = open_source(msg)
    result = bdecode_proc(source, options, cancel)
    if log.isEnabledFor(logging.DEBUG):
        log.debug(
            "decoded %s from %d bytes" % (type(result).__name__, source.position)
        )
    return result


def iter_bdecode(msg, options=None, cancel=None):
    """Yield each top-level value of a concatenation of bencoded values."""
    options = DecodeOptions.coerce(options)
    source = open_source(msg)
    while source.peek() is not None:
        check_cancelled(cancel)
        yield bdecode_proc(source, options, cancel, first_only=True)
