'''
Constants and helpers shared by whoever reads DBF files: the header decoder
only needs to know which versions exist, how long a field can be and how
the names are padded.
'''
from typing import Optional

from .enum import DBFVersion


# every value a single length byte can hold
MAX_FIELD_LENGTH = 0xff

HEADER_TERMINATOR = 0x0d

NAME_PAD = 0x00


def get_version(value: int) -> Optional[DBFVersion]:
    try:
        return DBFVersion(value)
    except ValueError:
        return None


def trim(raw: bytes) -> bytes:
    '''Remove the trailing padding (not the whitespace) from a fixed-size field.'''
    end = len(raw)
    while end > 0 and raw[end - 1] == NAME_PAD:
        end -= 1

    return raw[:end]
