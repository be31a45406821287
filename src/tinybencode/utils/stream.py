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

from ..errors import ERR_TRUNCATED, BDecodeError


class ByteSource(object):
    """Minimal reader interface consumed by the decoder.

    Bytes are handed out as ints by peek/read_one and as bytes by
    read_exactly, so dispatch never allocates for single characters.
    """

    position = 0

    def peek(self):
        """Return the next byte without consuming it, or None at end of input."""
        raise NotImplementedError()

    def read_one(self) -> int:
        raise NotImplementedError()

    def read_exactly(self, length: int) -> bytes:
        raise NotImplementedError()

    def read_while(self, allowed: bytes) -> bytes:
        result = bytearray()
        while True:
            char = self.peek()
            if char is None or char not in allowed:
                return bytes(result)
            result.append(self.read_one())

    def _truncated(self, wanted, available):
        return BDecodeError(
            "unexpected end of input: wanted %d byte(s), %d available"
            % (wanted, available),
            ERR_TRUNCATED,
            self.position,
        )


class BufferSource(ByteSource):
    def __init__(self, data):
        self._data = data if isinstance(data, bytes) else bytes(data)
        self.position = 0

    def peek(self):
        if self.position < len(self._data):
            return self._data[self.position]
        return None

    def read_one(self) -> int:
        if self.position >= len(self._data):
            raise self._truncated(1, 0)
        char = self._data[self.position]
        self.position += 1
        return char

    def read_exactly(self, length: int) -> bytes:
        available = len(self._data) - self.position
        if length > available:
            raise self._truncated(length, available)
        start = self.position
        self.position += length
        return self._data[start : self.position]

    def read_while(self, allowed: bytes) -> bytes:
        data = self._data
        start = end = self.position
        while end < len(data) and data[end] in allowed:
            end += 1
        self.position = end
        return data[start:end]

    def remaining(self) -> int:
        return len(self._data) - self.position


class StreamSource(ByteSource):
    """Reads from a binary file object, keeping one byte of look-ahead."""

    def __init__(self, stream):
        self._stream = stream
        self._ahead = None
        self.position = 0

    def peek(self):
        if self._ahead is None:
            self._ahead = self._stream.read(1)
        if self._ahead:
            return self._ahead[0]
        return None

    def read_one(self) -> int:
        char = self.peek()
        if char is None:
            raise self._truncated(1, 0)
        self._ahead = None
        self.position += 1
        return char

    def read_exactly(self, length: int) -> bytes:
        result = bytearray()
        if length and self.peek() is not None:
            result += self._ahead
            self._ahead = None
        while len(result) < length:
            chunk = self._stream.read(length - len(result))
            if not chunk:
                self._ahead = b""
                break
            result += chunk
        self.position += len(result)
        if len(result) < length:
            raise self._truncated(length, len(result))
        return bytes(result)


def open_source(data) -> ByteSource:
    if isinstance(data, ByteSource):
        return data
    if isinstance(data, (bytes, bytearray, memoryview)):
        return BufferSource(data)
    if hasattr(data, "read"):
        return StreamSource(data)
    raise TypeError("cannot decode from %s" % type(data).__name__)
