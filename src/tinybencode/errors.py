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


# Error codes ######################################################

ERR_INVALID_START = "ERR_INVALID_START"  # token does not start with 0-9, i, l, d or e
ERR_INTEGER = "ERR_INTEGER"  # non-digit content, leading zero or -0
ERR_LENGTH = "ERR_LENGTH"  # negative or over-limit byte string length
ERR_TRUNCATED = "ERR_TRUNCATED"  # input ended inside a token
ERR_EXPECTED = "ERR_EXPECTED"  # missing ':' after a length or 'e' after an integer
ERR_UNTERMINATED = "ERR_UNTERMINATED"  # unmatched 'e' or unclosed container
ERR_DUP_KEY = "ERR_DUP_KEY"
ERR_KEY_ORDER = "ERR_KEY_ORDER"
ERR_KEY_TYPE = "ERR_KEY_TYPE"
ERR_MISSING_VALUE = "ERR_MISSING_VALUE"
ERR_STACK_SHAPE = "ERR_STACK_SHAPE"  # zero or several top-level values
ERR_UNWRAPPED = "ERR_UNWRAPPED"  # bare top-level scalar while disallowed
ERR_UNSUPPORTED = "ERR_UNSUPPORTED"
ERR_NULL = "ERR_NULL"
ERR_CYCLE = "ERR_CYCLE"
ERR_DEPTH = "ERR_DEPTH"
ERR_CANCELLED = "ERR_CANCELLED"


class BEncodingError(Exception):
    """Base class of every error raised by the codec.

    The `code` attribute is one of the ERR_* strings above.
    """

    default_code = ERR_UNSUPPORTED

    def __init__(self, msg="", code=None):
        self.code = code or self.default_code
        super().__init__(msg or self.code)


class BDecodeError(BEncodingError):
    default_code = ERR_INVALID_START

    def __init__(self, msg="", code=None, position=None):
        self.position = position
        if position is not None:
            msg = "%s (position %d)" % (msg, position)
        super().__init__(msg, code)


class BEncodeError(BEncodingError):
    default_code = ERR_UNSUPPORTED


class BDepthError(BEncodingError):
    default_code = ERR_DEPTH


class BCancelledError(BEncodingError):
    default_code = ERR_CANCELLED
