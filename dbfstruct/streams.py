import io
import os
import logging

from .exceptions import TruncatedInput


logger = logging.getLogger(__name__)


class Stream(object):
    '''This is a simple wrapper around bytes/path/file objects to
    uniform their properties: the unpacking needs only to read forward
    a given amount of bytes and to know where it is.

    Only the file objects opened here (i.e. from a path) are closed here,
    the others belong to the caller.'''
    def __init__(self, obj):
        '''Here we normalize the object in order to be accessed as a normal file object'''
        self.obj = obj
        self.owned = False
        self.consumed = 0

        init_method_name = 'init_%s' % self.obj.__class__.__name__

        init_method = getattr(self, init_method_name, self.init_fileobj)

        init_method()

    def __getattr__(self, name):
        return getattr(self.obj, name)

    def __repr__(self):
        return f'<{self.__class__.__name__}({self.obj!r})>'

    def __enter__(self):
        return self

    def __exit__(self, *exc):
        self.close()

    def close(self):
        if self.owned:
            self.obj.close()
            self.owned = False

    def init_str(self):
        '''We think this is a path'''
        logger.debug('opening path \'%s\'', self.obj)
        self.obj = open(self.obj, 'rb')
        self.owned = True

    def init_bytes(self):
        '''We think these are raw bytes'''
        self.obj = io.BytesIO(self.obj)

    init_bytearray = init_bytes
    init_memoryview = init_bytes

    def init_fileobj(self):
        if isinstance(self.obj, os.PathLike):
            self.obj = os.fspath(self.obj)
            self.init_str()
            return

        if not hasattr(self.obj, 'read'):
            raise ValueError('\'%s\' is the wrong kind of object to use as stream' % self.obj.__class__.__name__)

    def tell(self):
        '''Offset with respect to where the stream was when wrapped, it doesn't
        need the underlying object to be seekable.'''
        return self.consumed

    def read_fully(self, size):
        '''Read exactly size bytes, the stream ending before is fatal.'''
        if size < 0:
            raise ValueError(f'cannot read a negative amount ({size}) of bytes')

        data = b''
        # raw file objects can return less than asked without being at the end
        while len(data) < size:
            chunk = self.obj.read(size - len(data))
            if not chunk:
                break
            data += chunk

        if len(data) != size:
            raise TruncatedInput(f'expected {size} bytes, got {len(data)}')

        self.consumed += size

        return data
