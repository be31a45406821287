import io

from pytest import raises

from tinybencode import ERR_TRUNCATED, BDecodeError
from tinybencode.utils.stream import BufferSource, StreamSource, open_source


class TrickleStream(object):
    """File object that never returns more than two bytes per read."""

    def __init__(self, data):
        self._data = io.BytesIO(data)

    def read(self, size=-1):
        if size < 0:
            size = 2
        return self._data.read(min(size, 2))


def sources(data):
    return [BufferSource(data), StreamSource(io.BytesIO(data)), StreamSource(TrickleStream(data))]


def test_peek_and_read_one():
    for source in sources(b"ab"):
        assert source.peek() == ord("a")
        assert source.peek() == ord("a")
        assert source.position == 0
        assert source.read_one() == ord("a")
        assert source.position == 1
        assert source.read_one() == ord("b")
        assert source.peek() is None
        with raises(BDecodeError) as exc_info:
            source.read_one()
        assert exc_info.value.code == ERR_TRUNCATED


def test_read_exactly():
    for source in sources(b"4:spamrest"):
        source.read_one()
        source.read_one()
        assert source.read_exactly(4) == b"spam"
        assert source.position == 6
        assert source.read_exactly(0) == b""
        with raises(BDecodeError) as exc_info:
            source.read_exactly(5)
        assert exc_info.value.code == ERR_TRUNCATED


def test_read_while():
    for source in sources(b"-123e"):
        assert source.read_while(b"-0123456789") == b"-123"
        assert source.position == 4
        assert source.peek() == ord("e")
        assert source.read_while(b"0123456789") == b""


def test_buffer_remaining():
    source = BufferSource(bytearray(b"i1e"))
    assert source.remaining() == 3
    source.read_one()
    assert source.remaining() == 2


def test_open_source():
    buffer_source = open_source(b"le")
    assert isinstance(buffer_source, BufferSource)
    assert open_source(buffer_source) is buffer_source
    assert isinstance(open_source(memoryview(b"le")), BufferSource)
    assert isinstance(open_source(io.BytesIO(b"le")), StreamSource)
    with raises(TypeError):
        open_source(42)
