from .. import fields as base_fields
from ..enum import Compliant
from ..exceptions import (
    InvalidFieldLength,
    MalformedHeader,
    UnrecognizedFormat,
)
from .enum import DBFVersion
from .reader import (
    MAX_FIELD_LENGTH,
    HEADER_TERMINATOR,
    get_version,
    trim,
)


COLUMN_NAME_SIZE = 11


class VersionField(base_fields.StructField):
    '''First byte of the file: there is no magic in a DBF file, so an
    unknown version means that this is not a DBF file at all.'''

    def __init__(self, **kwargs):
        super().__init__('B', enum=DBFVersion, default=DBFVersion.FOXBASE_PLUS, compliant=Compliant.ENUM, **kwargs)

    def _unpack_enum(self, value):
        version = get_version(value)

        if version is None:
            raise UnrecognizedFormat(f'Unrecognized first byte in DBF file: 0x{value:02x}')

        return version


class ColumnNameField(base_fields.StringField):

    def __init__(self, **kwargs):
        super().__init__(COLUMN_NAME_SIZE, **kwargs)

    def __str__(self):
        return self.text

    @property
    def text(self):
        return trim(self.value).decode('ascii', errors='replace')


class FieldLengthField(base_fields.StructField):
    '''The maximum allowed is taken from the root chunk (if it has any).'''

    def __init__(self, **kwargs):
        super().__init__('B', **kwargs)

    @property
    def maximum(self):
        return getattr(self.root, 'max_field_length', MAX_FIELD_LENGTH)

    def unpack(self, stream):
        super().unpack(stream)

        if self.value < 0:
            raise InvalidFieldLength(f'Field length ({self.value}) is < 0')

        if self.value > self.maximum:
            raise InvalidFieldLength(
                f'Field length ({self.value}) is greater than the maximum field length ({self.maximum})')


class TerminatorField(base_fields.StructField):
    '''The byte closing the list of the column descriptors.'''

    def __init__(self, **kwargs):
        kwargs.setdefault('compliant', Compliant.MAGIC)
        super().__init__('B', default=HEADER_TERMINATOR, is_magic=True, **kwargs)

    def check_magic(self, value):
        if value == self.default:
            return

        message = f'expected header terminator 0x{self.default:02x}, found 0x{value:02x}'

        if self.is_compliant(Compliant.MAGIC):
            raise MalformedHeader(message)

        self.logger.warning(message)
