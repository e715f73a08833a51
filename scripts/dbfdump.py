#!/usr/bin/env python3
import sys
import os
import logging

from dbfstruct.dbf import parse
from dbfstruct.dbf.utils import hexdump, describe_column
from dbfstruct.exceptions import DBFStructException


logging.basicConfig(level=logging.DEBUG if 'DEBUG' in os.environ else logging.INFO)
logger = logging.getLogger(__name__)


def usage(progname):
    print('usage: %s <dbf file>' % progname)
    sys.exit(1)


def dump_header(hdr):
    print(f'''DBF Header:
  Version:                           {hdr.version.name} ({hdr.version.description})
  Last modified:                     {hdr.last_modified.date().isoformat()}
  Number of records:                 {hdr.num_records}
  Size of the header:                {hdr.num_bytes_in_header} (bytes)
  Size of a record:                  {hdr.num_bytes_in_record} (bytes)
  Number of columns:                 {len(hdr.columns)}''')


def dump_columns(columns):
    print('''Columns:
  [Nr] Name        Type          Len''')
    for idx, column in enumerate(columns):
        print(f'''  [{idx: >2d}] {describe_column(column)}''')


def dump_extra(extra):
    print(f'''Extra header bytes ({len(extra)}):''')
    print(hexdump(extra))


if __name__ == '__main__':
    if len(sys.argv) < 2:
        usage(sys.argv[0])

    path = sys.argv[1]

    try:
        header = parse(path)
    except DBFStructException as e:
        logger.error(f'cannot decode \'{path}\': {e}')
        sys.exit(2)

    dump_header(header)
    dump_columns(header.columns)

    if header.extra:
        dump_extra(header.extra)
