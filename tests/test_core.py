import pytest

from dbfstruct.core import Chunk
from dbfstruct.exceptions import TruncatedInput
from dbfstruct.fields import StructField, StringField, ArrayField
from dbfstruct.properties import Dependency


def test_chunk():
    """Check that building a Chunk from fields behaves correctly."""
    class Dummy(Chunk):
        a = StructField('I')
        b = StringField(0x10)
        c = StructField('I')

    dummy = Dummy(
        b'\xad\x0b\x00\x00' +
        b'A' * 0x10 +
        b'\xef\xbe\xad\xde'
    )

    assert dummy.get_ordered_fields_name() == ['a', 'b', 'c']

    assert dummy.a.value == 0xbad
    assert dummy.a.father is dummy
    assert dummy.b.value == b'A' * 0x10
    assert dummy.c.value == 0xdeadbeef

    assert dummy.layout == {
        'a': (0x00, 4),
        'b': (0x04, 0x10),
        'c': (0x14, 4),
    }
    assert dummy.size == 0x18
    assert dummy.isRoot


def test_fields_are_not_shared():
    class Dummy(Chunk):
        a = StructField('B')

    first = Dummy(b'\x01')
    second = Dummy(b'\x02')

    assert first.a is not second.a
    assert first.a.value == 1
    assert second.a.value == 2


def test_inheritance():
    '''subclasses inherit fields'''
    class Father(Chunk):
        field_a = StringField(0x10)
        field_b = StructField("I")

    class Son(Father):
        field_c = StringField(0x08)

    son = Son(b'A' * 16 + b'\x01\x02\x03\x04' + b'ABCDEFGH')

    assert son.get_ordered_fields_name() == [
        'field_a', 'field_b', 'field_c',
    ]
    assert son.field_b.value == 0x04030201
    assert son.field_c.value == b'ABCDEFGH'


def test_offset_dependencies():
    class TLV(Chunk):
        type   = StructField('I')
        length = StructField('I')
        data   = StringField(Dependency('.length'))
        extra  = StructField('I')

    tlv = TLV((
        b'\x01\x00\x00\x00'
        b'\x0f\x00\x00\x00'
        b'\x41\x41\x41\x41\x41\x41\x41\x41\x41\x41\x41\x41\x41\x41\x41'
        b'\x0a\x0b\x0c\x0d'
    ))

    assert tlv.type.value == 0x01
    assert tlv.length.value == 0x0f
    assert tlv.data.value == b'\x41' * 0x0f
    assert tlv.data.offset == 0x04 + 0x04
    assert tlv.extra.value == 0x0d0c0b0a
    assert tlv.extra.offset == 0x04 + 0x04 + 0x0f


def test_dependency_on_method():
    """A dependency can point to a method of the chunk computing the value."""
    class Padded(Chunk):
        total = StructField('B')
        padding = StringField(Dependency('.padding_length'))

        def padding_length(self):
            return self.total.value - self.total.size

    padded = Padded(b'\x04\x00\x00\x00')

    assert padded.padding.value == b'\x00' * 3


def test_dependency_from_root():
    class Inner(Chunk):
        data = StringField(Dependency('length'))

    class Outer(Chunk):
        length = StructField('B')
        inner  = Inner()

    outer = Outer(b'\x02AB')

    assert outer.inner.data.value == b'AB'
    assert outer.inner.data.root is outer


class Entry(Chunk):
    a = StructField('B')
    b = StructField('B')


class Table(Chunk):
    count   = StructField('B')
    entries = ArrayField(Entry(), n=Dependency('.count'))


def test_arrayfield():
    table = Table(b'\x02\x01\x02\x03\x04')

    assert len(table.entries) == 2
    assert table.entries[0] is not table.entries[1]
    assert table.entries[0].father is table.entries
    assert [(_.a.value, _.b.value) for _ in table.entries] == [(1, 2), (3, 4)]
    assert [_.offset for _ in table.entries] == [1, 3]
    assert table.size == 5


def test_arrayfield_empty():
    table = Table(b'\x00')

    assert len(table.entries) == 0
    assert table.size == 1


def test_chain_on_failure():
    """The exception tells which field was unpacking."""
    with pytest.raises(TruncatedInput) as excinfo:
        Table(b'\x02\x01\x02\x03')

    assert excinfo.value.chain == ['b', '1', 'entries']
    assert excinfo.value.path == 'entries.1.b'
    assert 'entries.1.b' in str(excinfo.value)


def test_equality():
    assert Table(b'\x01\x01\x02') == Table(b'\x01\x01\x02')
    assert Table(b'\x01\x01\x02') != Table(b'\x01\x01\x03')
