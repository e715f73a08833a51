import io
import logging

import bitstring
from bitstring import Bits

from .enum import DBFColumnType


logger = logging.getLogger(__name__)


def hexdump(data: bytes, width=80) -> str:
    '''Dump the bytes not interpreted by the decoder (reserved regions,
    vendor extra bytes) so to be able to eyeball them.

    The output is plain text, the colours bitstring uses for terminals are
    turned off while printing.'''
    if not data:
        return ''

    output = io.StringIO()

    no_color = bitstring.options.no_color
    bitstring.options.no_color = True
    try:
        Bits(data).pp('hex', width=width, stream=output)
    finally:
        bitstring.options.no_color = no_color

    return output.getvalue()


def describe_column(column) -> str:
    column_type = column.column_type
    type_name = column_type.name if column_type else f'UNKNOWN(0x{column.type:02x})'

    if column_type in (DBFColumnType.NUMERIC, DBFColumnType.FLOAT):
        return f'{column.name:<11} {type_name:<13} {column.field_length:>3}.{column.decimal_count}'

    return f'{column.name:<11} {type_name:<13} {column.field_length:>3}'
