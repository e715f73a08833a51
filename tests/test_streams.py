import io

import pytest

from dbfstruct.exceptions import TruncatedInput
from dbfstruct.streams import Stream


class SlowReader:
    """File object returning at most one byte for each read()."""

    def __init__(self, data):
        self._data = io.BytesIO(data)

    def read(self, size=-1):
        return self._data.read(min(size, 1))


def test_bytes_stream_read_fully():
    stream = Stream(b'\x01\x02\x03\x04\x05')

    assert stream.read_fully(1) == b'\x01'
    assert stream.read_fully(2) == b'\x02\x03'
    assert stream.tell() == 3

    with pytest.raises(TruncatedInput):
        stream.read_fully(3)


def test_file_stream(tmp_path):
    path = tmp_path / 'data.bin'
    path.write_bytes(b'\x01\x02\x03\x04\x05')

    with Stream(str(path)) as stream:
        assert stream.owned
        assert stream.read_fully(5) == b'\x01\x02\x03\x04\x05'
        fileobj = stream.obj

    assert fileobj.closed

    with Stream(path) as stream:
        assert stream.read_fully(2) == b'\x01\x02'


def test_fileobj_stream_is_not_closed():
    fileobj = io.BytesIO(b'\x01\x02\x03')

    with Stream(fileobj) as stream:
        assert not stream.owned
        assert stream.read_fully(2) == b'\x01\x02'

    assert not fileobj.closed
    assert fileobj.tell() == 2


def test_short_reads_are_not_truncation():
    stream = Stream(SlowReader(b'\x01\x02\x03\x04'))

    assert stream.read_fully(4) == b'\x01\x02\x03\x04'
    assert stream.tell() == 4


def test_wrong_object():
    with pytest.raises(ValueError):
        Stream(42)

    with pytest.raises(ValueError):
        Stream(b'').read_fully(-1)
