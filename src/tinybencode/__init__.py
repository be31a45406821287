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

from .decoder import bdecode, bdecode_extra, iter_bdecode
from .encoder import bencode, bencode_into
from .errors import (
    ERR_CANCELLED,
    ERR_CYCLE,
    ERR_DEPTH,
    ERR_DUP_KEY,
    ERR_EXPECTED,
    ERR_INTEGER,
    ERR_INVALID_START,
    ERR_KEY_ORDER,
    ERR_KEY_TYPE,
    ERR_LENGTH,
    ERR_MISSING_VALUE,
    ERR_NULL,
    ERR_STACK_SHAPE,
    ERR_TRUNCATED,
    ERR_UNSUPPORTED,
    ERR_UNTERMINATED,
    ERR_UNWRAPPED,
    BCancelledError,
    BDecodeError,
    BDepthError,
    BEncodeError,
    BEncodingError,
)
from .options import DecodeOptions, EncodeOptions
from .utils.threadmanager import CancelToken
from .values import BencodeValue

__version__ = "0.1.0"

__all__ = [
    "bdecode",
    "bdecode_extra",
    "iter_bdecode",
    "bencode",
    "bencode_into",
    "BencodeValue",
    "DecodeOptions",
    "EncodeOptions",
    "CancelToken",
    "BEncodingError",
    "BDecodeError",
    "BEncodeError",
    "BDepthError",
    "BCancelledError",
    "ERR_CANCELLED",
    "ERR_CYCLE",
    "ERR_DEPTH",
    "ERR_DUP_KEY",
    "ERR_EXPECTED",
    "ERR_INTEGER",
    "ERR_INVALID_START",
    "ERR_KEY_ORDER",
    "ERR_KEY_TYPE",
    "ERR_LENGTH",
    "ERR_MISSING_VALUE",
    "ERR_NULL",
    "ERR_STACK_SHAPE",
    "ERR_TRUNCATED",
    "ERR_UNSUPPORTED",
    "ERR_UNTERMINATED",
    "ERR_UNWRAPPED",
]
