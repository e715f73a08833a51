"""
Core module for the abstraction of a file format

"""
from typing import Tuple, List, Dict

from .fields import Field
from .meta import MetaChunk
from .streams import Stream
from .exceptions import UnpackException


class Chunk(Field, metaclass=MetaChunk):
    """
    Together with Field is the main class that defines a format: the fields
    declared as class attributes, in order, are the layout of the chunk.

    A Chunk can contain sub-chunks, so it can be used itself as a field.

    If a data source is passed to the constructor (raw bytes, a path or a file object)
    the chunk is unpacked from it straight away.
    """

    def __init__(self, data=None, **kwargs):
        super().__init__(**kwargs)

        if data is not None:
            with Stream(data) as stream:
                self.logger.debug('unpacking \'%s\' from %s', self.__class__.__name__, type(stream.obj).__name__)
                self.unpack(stream)

    def init(self):
        pass

    def get_ordered_fields_name(self) -> List[str]:
        return self._meta.fields

    def get_fields(self) -> List[Tuple[str, Field]]:
        '''It returns a list of couples (name, instance) for each field.'''
        return [(_, getattr(self, _)) for _ in self.get_ordered_fields_name()]

    @property
    def value(self):
        return [field.value for _, field in self.get_fields()]

    def __eq__(self, other):
        if not isinstance(other, Chunk):
            return NotImplemented

        return self.__class__ is other.__class__ and self.get_fields() == other.get_fields()

    __hash__ = None

    def __repr__(self):
        msg = []
        for field_name, field in self.get_fields():
            msg.append('%s=%s' % (field_name, repr(field)))
        return '<%s(%s)>' % (self.__class__.__name__, ','.join(msg))

    def __str__(self):
        msg = ''
        for field_name, field in self.get_fields():
            msg += '%s: %s\n' % (field_name, repr(field))
        return msg

    @property
    def isRoot(self):
        return self.father is None

    @property
    def size(self):
        return sum(field.size for _, field in self.get_fields())

    @property
    def layout(self) -> Dict[str, Tuple[int, int]]:
        return {name: (field.offset, field.size) for name, field in self.get_fields()}

    def unpack(self, stream):
        '''This is one of the main APIs to take care of: its aim is to take a binary
        data and transform in the representation given by the class this method
        is implemented.

        The stream is consumed strictly in order, each field starting where the
        previous one ended: nothing is seeked, so any file object that can
        be read() works.

        When a field fails the exception propagates as it is, but with the name
        of the field appended to its chain so to know where the failure
        happened.
        '''
        for field_name, field in self.get_fields():
            offset = stream.tell()
            self.logger.debug('unpacking %s.%s at offset %d' % (self.__class__.__name__, field_name, offset))

            try:
                field.unpack(stream)
            except UnpackException as e:
                e.chain.append(field_name)
                raise

            field.offset = offset

        if hasattr(self, 'validate'):
            self.validate()
