import bitstring

from dbfstruct.dbf import ColumnDescriptor
from dbfstruct.dbf.utils import hexdump, describe_column


def test_hexdump():
    assert hexdump(b'') == ''

    dump = hexdump(b'\xde\xad\xbe\xef')

    assert 'deadbeef' in dump.replace(' ', '')


def test_hexdump_is_plain_text():
    no_color = bitstring.options.no_color
    bitstring.options.no_color = False
    try:
        dump = hexdump(bytes(range(64)))
        assert bitstring.options.no_color is False
    finally:
        bitstring.options.no_color = no_color

    assert '\x1b[' not in dump
    assert '3f' in dump


def test_describe_column():
    numeric = describe_column(ColumnDescriptor('PRICE', ord('N'), 8, 2))

    assert 'PRICE' in numeric
    assert 'NUMERIC' in numeric
    assert '8.2' in numeric

    unknown = describe_column(ColumnDescriptor('WHAT', ord('Z'), 4, 0))

    assert 'UNKNOWN(0x5a)' in unknown
