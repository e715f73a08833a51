"""
A Field is "fundamental" datatype from the format point of view, something directly
unpackable from the stream without need of knowing what surrounds it, apart from
the values it depends on.
"""
import logging
import struct
from enum import Enum

from .enum import Compliant
from .meta import FieldBase, Endianess
from .properties import Dependency, get_root_from_chunk
from .exceptions import (
    UnpackException,
    MagicException,
    MalformedHeader,
    UnrecognizedFormat,
)


class Field(FieldBase):
    """Base class to subclass from"""

    def __init__(self, *args, name=None, father=None, default=None, offset=None,
                 endianess=Endianess.LITTLE_ENDIAN, compliant=Compliant.INHERIT, is_magic=False):
        super().__init__()
        self.logger = logging.getLogger(__name__)
        self.name = name
        self.father = father
        self.default = default
        self.offset = offset
        self.endianess = endianess
        self.compliant = compliant
        self.is_magic = is_magic

        self.init()

    def init(self):
        self.value = self.value_from_default()

    def value_from_default(self):
        return self.default

    def __str__(self):
        return str(self.value)

    def __eq__(self, other):
        if not isinstance(other, Field):
            return NotImplemented

        return self.__class__ is other.__class__ and self.value == other.value

    __hash__ = None

    @property
    def root(self):
        '''Obtain the final father of this field'''
        return get_root_from_chunk(self)

    def is_compliant(self, level):
        '''Tells if the field or, via INHERIT, one of its ancestors requires the given level'''
        instance = self
        while instance is not None:
            if instance.compliant & level:
                return True
            if not instance.compliant & Compliant.INHERIT:
                break

            instance = instance.father

        return False

    def resolve(self, value):
        '''Values declared as Dependency are resolved with respect to this field.'''
        if isinstance(value, Dependency):
            return value.resolve(self)

        return value

    @property
    def size(self):
        raise NotImplementedError(f"property {self.__class__.__name__}.size not implemented")

    def unpack(self, stream):
        raise NotImplementedError('you need to implement this in the subclass')


class StructField(Field):
    """
    Simplest of the fields: mimic the behaviour of the struct module unpacking
    integers from bytes.

    The main advantage is the possibility to indicate via the "enum" argument some subclass
    of enum.Enum so to have directly a representation of the integer value of the field itself.
    """

    def __init__(self, format, default=0, enum=None, **kw):
        self.format = format
        self.enum = enum
        super().__init__(default=default, **kw)

    def __repr__(self):
        if self.enum and isinstance(self.value, Enum):
            return f'<{self.__class__.__name__}({self.value!r})>'

        return '<%s(%s)>' % (self.__class__.__name__, hex(self.value) if isinstance(self.value, int) else self.value)

    def value_from_default(self):
        if not self.enum or isinstance(self.default, self.enum):
            return self.default

        return self.enum(self.default)

    def get_format(self):
        return '%s%s' % (self.endianess.struct_prefix, self.format)

    @property
    def size(self):
        return struct.calcsize(self.get_format())

    def _unpack_struct(self, raw: bytes) -> int:
        try:
            unpacked_value = struct.unpack(self.get_format(), raw)[0]
        except struct.error as e:
            self.logger.error(e)
            raise UnpackException(str(e))

        return unpacked_value

    def _unpack_enum(self, value: int):
        try:
            return self.enum(value)
        except ValueError:
            if self.is_compliant(Compliant.ENUM):
                raise UnrecognizedFormat(f'{self.enum.__name__} has no element with value 0x{value:02x}')

            self.logger.warning(f'enum {self.enum.__name__} doesn\'t have element with value 0x{value:x} in it')

            return value

    def check_magic(self, value):
        '''A magic field must contain its default value.'''
        if value == self.default:
            return

        self.logger.warning(f'the magic doesn\'t correspond for field \'{self.name}\'')
        if self.is_compliant(Compliant.MAGIC):
            raise MagicException(f'expected magic {self.default!r}, found {value!r}')

    def unpack(self, stream):
        raw = stream.read_fully(self.size)
        value = self._unpack_struct(raw)
        if self.enum:
            value = self._unpack_enum(value)

        if self.is_magic:
            self.check_magic(value)

        self.value = value


class StringField(Field):
    """Represent a contiguous chunk of bytes; its length can be a Dependency."""

    def __init__(self, n=None, **kw):
        if n is None and 'default' not in kw:
            raise ValueError("StringField must have 'n' or 'default' indicated!")

        self.length = n if n is not None else len(kw['default'])

        super().__init__(**kw)

    def __repr__(self):
        return '<%s(%s)>' % (self.__class__.__name__, repr(self.value))

    def __len__(self):
        return len(self.value)

    def value_from_default(self):
        if self.default is not None:
            return self.default

        return b'\x00' * self.length if isinstance(self.length, int) else b''

    @property
    def size(self):
        return len(self.value)

    def unpack(self, stream):
        length = self.resolve(self.length)

        if length < 0:
            raise MalformedHeader(f'field \'{self.name}\' has a negative length ({length})')

        self.logger.debug('reading %d bytes for field \'%s\'' % (length, self.name))

        self.value = stream.read_fully(length)


class ArrayField(Field):
    '''Unpack an array of elements.

    The number of elements is given by the parameter named "n", directly
    as an integer or via a Dependency. Each element is a copy of the
    prototype passed as first argument and has the array as father.
    '''

    def __init__(self, field_cls, n=0, **kw):
        if not isinstance(n, (int, Dependency)):
            raise ValueError('n is \'%s\' must be of the right type' % n.__class__.__name__)

        self.field_cls = field_cls
        self.n = n

        kw.setdefault('default', [])

        super().__init__(**kw)

    def value_from_default(self):
        return list(self.default)

    def __repr__(self):
        return f'<{self.__class__.__name__}({self.value!r})>'

    def __getitem__(self, item):
        return self.value[item]

    def __iter__(self):
        return iter(self.value)

    def __len__(self):
        return len(self.value)

    @property
    def size(self):
        return sum(element.size for element in self.value)

    def instance_element(self):
        return self.field_cls.create(father=self)  # pass the father so that we don't lose the hierarchy

    def unpack(self, stream):
        n = self.resolve(self.n)

        if n < 0:
            raise MalformedHeader(f'field \'{self.name}\' has a negative number of elements ({n})')

        self.logger.debug('unpacking %d elements for field \'%s\'' % (n, self.name))

        self.value = []
        for index in range(n):
            element = self.instance_element()
            element.offset = stream.tell()
            try:
                element.unpack(stream)
            except UnpackException as e:
                e.chain.append(str(index))
                raise
            self.value.append(element)
