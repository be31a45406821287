"""
The MIT License

Copyright (c) 2014 Fred Stober

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


# int()/str() refuse to convert more than 4300 digits by default, so long
# literals are handled in chunks that stay below that limit.
_CHUNK_DIGITS = 4000
_CHUNK_SCALE = 10**_CHUNK_DIGITS


def decode_int_digits(digits: bytes) -> int:
    """Convert an already validated ASCII literal (optional '-', digits) to int."""
    negative = digits[:1] == b"-"
    if negative:
        digits = digits[1:]
    if len(digits) <= _CHUNK_DIGITS:
        value = int(digits)
    else:
        head = len(digits) % _CHUNK_DIGITS or _CHUNK_DIGITS
        value = int(digits[:head])
        for pos in range(head, len(digits), _CHUNK_DIGITS):
            value = value * _CHUNK_SCALE + int(digits[pos : pos + _CHUNK_DIGITS])
    return -value if negative else value


def encode_int_digits(value: int) -> bytes:
    """Canonical base-10 representation: sign if negative, no leading zeros."""
    if -_CHUNK_SCALE < value < _CHUNK_SCALE:
        return b"%d" % value
    sign = b"-" if value < 0 else b""
    value = abs(value)
    parts = []
    while value:
        value, rest = divmod(value, _CHUNK_SCALE)
        parts.append(rest)
    parts.reverse()
    tail = b"".join(b"%0*d" % (_CHUNK_DIGITS, part) for part in parts[1:])
    return sign + b"%d" % parts[0] + tail
