'''
# dBASE file format (DBF)

Tabular format born with dBASE II and then adopted (and extended) by a lot
of products (FoxBASE, FoxPro, Clipper, HiPer-Six...). The file is composed of

  .---------------------------------.
  | file header (32 bytes)          |
  | column descriptor 1 (32 bytes)  |
  | column descriptor 2 (32 bytes)  |
    ...
  | column descriptor N (32 bytes)  |
  | terminator (0x0d)               |
  | extra header bytes (optional)   |
  | record 1                        |
    ...
  '---------------------------------'

There is no field telling how many columns there are: it must be derived from
the size of the header, that includes also the extra bytes (if any) that the
producer appended after the terminator.

Here only the header is decoded, the stream is left at the start of the first record.

A description of the format is at <https://www.clicketyclick.dk/databases/xbase/format/dbf.html>.
'''
import logging
from datetime import datetime, timedelta, timezone
from typing import NamedTuple, Optional, Tuple

from ..core import Chunk
from .. import fields as base_fields
from ..exceptions import MalformedHeader
from ..properties import Dependency
from . import fields as dbf_fields
from .enum import DBFVersion, DBFColumnType
from .reader import MAX_FIELD_LENGTH


logger = logging.getLogger(__name__)

HEADER_PREFIX_SIZE = 32
COLUMN_DESCRIPTOR_SIZE = 32
TERMINATOR_SIZE = 1


def get_column_type(code: int) -> Optional[DBFColumnType]:
    try:
        return DBFColumnType(code)
    except ValueError:
        return None


def resolve_century(offset: int, reference_year: int) -> int:
    '''The year is stored as an offset with only two digits of meaning: if
    counting it from 2000 brings it after the reference year we assume
    the file is from the last century.

    This is a heuristic, a file from 1995 parsed with 2095 (or later) as
    reference year is dated 2095.'''
    year = offset + 2000

    if year > reference_year:
        logger.debug(f'year {year} is after {reference_year}, using {offset + 1900}')
        year = offset + 1900

    return year


def last_modified_date(offset: int, month: int, day: int, reference_year: int) -> datetime:
    '''Build the date (UTC midnight) from the three bytes as they are stored.

    Month and day are not validated but normalized as a lenient calendar
    would do: month 13 is January of the next year, day 0 is the last day of
    the previous month.'''
    year = resolve_century(offset, reference_year)

    years, month_index = divmod(month - 1, 12)
    first_of_month = datetime(year + years, month_index + 1, 1, tzinfo=timezone.utc)

    return first_of_month + timedelta(days=day - 1)


class ColumnDescriptor(NamedTuple):
    name: str
    type: int
    field_length: int
    decimal_count: int

    @property
    def column_type(self) -> Optional[DBFColumnType]:
        return get_column_type(self.type)

    def __str__(self):
        return f'{self.name}({chr(self.type)!r}, {self.field_length}, {self.decimal_count})'


class FileHeader(NamedTuple):
    '''Immutable result of the decoding of a DBF header.'''
    version: DBFVersion
    last_modified: datetime
    num_records: int
    num_bytes_in_header: int
    num_bytes_in_record: int
    columns: Tuple[ColumnDescriptor, ...]
    extra: bytes = b''

    def __str__(self):
        return (
            f'DBFFileHeader{{version={self.version.name}, lastModified={self.last_modified.date().isoformat()}, '
            f'numRecords={self.num_records}, numBytesInHeader={self.num_bytes_in_header}, '
            f'numBytesInRecord={self.num_bytes_in_record}, '
            f'cols=[{", ".join(str(_) for _ in self.columns)}]}}'
        )


class DBFColumnDescriptor(Chunk):
    '''The type code is kept as the raw byte, the reading of the values
    is not our business.'''
    field_name    = dbf_fields.ColumnNameField()
    field_type    = base_fields.StructField('B')
    data_address  = base_fields.StringField(4)
    field_length  = dbf_fields.FieldLengthField()
    decimal_count = base_fields.StructField('B')
    reserved      = base_fields.StringField(14)

    @property
    def column_type(self):
        return get_column_type(self.field_type.value)

    def validate(self):
        if self.column_type is None:
            self.logger.warning(
                f'column \'{self.field_name.text}\' has unknown type code 0x{self.field_type.value:02x}')

    def to_descriptor(self) -> ColumnDescriptor:
        return ColumnDescriptor(
            name=self.field_name.text,
            type=self.field_type.value,
            field_length=self.field_length.value,
            decimal_count=self.decimal_count.value,
        )


class DBFHeader(Chunk):
    '''
    The header of the file; the last modification date is stored as three
    bytes: year (as an offset), month and day.

    The reference year used to guess the century of the last modification
    date defaults to the current one (UTC) but can be passed explicitly
    like the maximum length allowed for a column.
    '''
    version     = dbf_fields.VersionField()
    year        = base_fields.StructField('B')
    month       = base_fields.StructField('B')
    day         = base_fields.StructField('B')
    num_records = base_fields.StructField('i')
    header_size = base_fields.StructField('h')
    record_size = base_fields.StructField('h')
    reserved    = base_fields.StringField(20)
    columns     = base_fields.ArrayField(DBFColumnDescriptor(), n=Dependency('.columns_count'))
    terminator  = dbf_fields.TerminatorField()
    extra       = base_fields.StringField(Dependency('.extra_length'))

    def __init__(self, data=None, reference_year=None, max_field_length=MAX_FIELD_LENGTH, **kwargs):
        self.reference_year = reference_year if reference_year is not None else datetime.now(timezone.utc).year
        self.max_field_length = max_field_length
        super().__init__(data, **kwargs)

    def columns_count(self):
        header_size = self.header_size.value

        if header_size < HEADER_PREFIX_SIZE:
            raise MalformedHeader(f'header size ({header_size}) is smaller than {HEADER_PREFIX_SIZE} bytes')

        return (header_size - HEADER_PREFIX_SIZE) // COLUMN_DESCRIPTOR_SIZE

    def extra_length(self):
        consumed = HEADER_PREFIX_SIZE + len(self.columns) * COLUMN_DESCRIPTOR_SIZE + TERMINATOR_SIZE
        extra = self.header_size.value - consumed

        if extra < 0:
            raise MalformedHeader(
                f'header size ({self.header_size.value}) too small for {len(self.columns)} columns and the terminator')

        return extra

    @property
    def last_modified(self):
        return last_modified_date(self.year.value, self.month.value, self.day.value, self.reference_year)

    @property
    def file_header(self) -> FileHeader:
        return FileHeader(
            version=self.version.value,
            last_modified=self.last_modified,
            num_records=self.num_records.value,
            num_bytes_in_header=self.header_size.value,
            num_bytes_in_record=self.record_size.value,
            columns=tuple(_.to_descriptor() for _ in self.columns),
            extra=self.extra.value,
        )


def parse(stream, reference_year=None, max_field_length=MAX_FIELD_LENGTH) -> FileHeader:
    '''Decode the header of a DBF file.

    The stream can be raw bytes, a path or a binary file object positioned
    at the start of the file; in the last case it's left positioned at the
    first record and it's not closed.'''
    if stream is None:
        raise ValueError('no stream to parse the header from')

    logger.debug('parsing DBF header from %s', type(stream).__name__)

    header = DBFHeader(stream, reference_year=reference_year, max_field_length=max_field_length)

    return header.file_header
