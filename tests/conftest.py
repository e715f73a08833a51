import struct

import pytest


def _column(name=b'NAME', type=b'C', length=10, decimals=0):
    return (
        name.ljust(11, b'\x00') +
        type +
        b'\x00' * 4 +
        bytes([length, decimals]) +
        b'\x00' * 14
    )


def _header(columns=(), version=0x03, date=(24, 5, 17), num_records=0, record_size=1,
            extra=b'', header_size=None, terminator=0x0d):
    if header_size is None:
        header_size = 32 + 32 * len(columns) + 1 + len(extra)

    return (
        bytes([version, *date]) +
        struct.pack('<ihh', num_records, header_size, record_size) +
        b'\x00' * 20 +
        b''.join(columns) +
        bytes([terminator]) +
        extra
    )


@pytest.fixture
def dbf_column():
    """Build the 32 bytes of a column descriptor."""
    return _column


@pytest.fixture
def dbf_header():
    """Build a complete header, by default with the header size consistent with its content."""
    return _header
