'''
This module contains the constant values found in the header of the DBF files.

The first byte of the file identifies the producer of the file (and so which
dialect of the format to expect), the type of each column is a single ASCII
letter (or symbol) in its descriptor.
'''
from enum import Enum


class DBFVersion(Enum):
    FOXBASE                     = 0x02
    FOXBASE_PLUS                = 0x03
    VISUAL_FOXPRO               = 0x30
    VISUAL_FOXPRO_AUTOINCREMENT = 0x31
    VISUAL_FOXPRO_VAR           = 0x32
    DBASE_IV_SQL_TABLE          = 0x43
    DBASE_IV_SQL_SYSTEM         = 0x63
    FOXBASE_PLUS_MEMO           = 0x83
    DBASE_IV_MEMO               = 0x8b
    DBASE_IV_SQL_TABLE_MEMO     = 0xcb
    HIPER_SIX_MEMO              = 0xe5
    FOXPRO_2X_MEMO              = 0xf5
    FOXBASE2                    = 0xfb

    @property
    def description(self):
        return VERSION_DESCRIPTIONS[self]


VERSION_DESCRIPTIONS = {
    DBFVersion.FOXBASE:                     'FoxBASE',
    DBFVersion.FOXBASE_PLUS:                'FoxBASE+/dBASE III PLUS, no memo',
    DBFVersion.VISUAL_FOXPRO:               'Visual FoxPro',
    DBFVersion.VISUAL_FOXPRO_AUTOINCREMENT: 'Visual FoxPro, autoincrement enabled',
    DBFVersion.VISUAL_FOXPRO_VAR:           'Visual FoxPro with field type Varchar or Varbinary',
    DBFVersion.DBASE_IV_SQL_TABLE:          'dBASE IV SQL table files, no memo',
    DBFVersion.DBASE_IV_SQL_SYSTEM:         'dBASE IV SQL system files, no memo',
    DBFVersion.FOXBASE_PLUS_MEMO:           'FoxBASE+/dBASE III PLUS, with memo',
    DBFVersion.DBASE_IV_MEMO:               'dBASE IV with memo',
    DBFVersion.DBASE_IV_SQL_TABLE_MEMO:     'dBASE IV SQL table files, with memo',
    DBFVersion.HIPER_SIX_MEMO:              'HiPer-Six format with SMT memo file',
    DBFVersion.FOXPRO_2X_MEMO:              'FoxPro 2.x (or earlier) with memo',
    DBFVersion.FOXBASE2:                    'FoxBASE',
}


class DBFColumnType(Enum):
    '''Only the code is decoded here, what the values look like is up to
    whoever reads the records.'''
    CHARACTER     = ord('C')
    DATE          = ord('D')
    FLOAT         = ord('F')
    LOGICAL       = ord('L')
    MEMO          = ord('M')
    NUMERIC       = ord('N')
    BINARY        = ord('B')
    GENERAL       = ord('G')
    PICTURE       = ord('P')
    CURRENCY      = ord('Y')
    DATETIME      = ord('T')
    INTEGER       = ord('I')
    VARCHAR       = ord('V')
    VARIANT       = ord('X')
    TIMESTAMP     = ord('@')
    DOUBLE        = ord('O')
    AUTOINCREMENT = ord('+')

    @property
    def code(self):
        return chr(self.value)
