from enum import Flag


class Compliant(Flag):
    '''How strictly the unpacked data must follow the declared format.

    A field with INHERIT set asks its father when its own flags don't
    settle the question.'''
    NONE    = 0
    ENUM    = 1 << 0  # values outside the enum are fatal
    MAGIC   = 1 << 1  # wrong magic/sentinel values are fatal
    INHERIT = 1 << 2
    STRICT  = ENUM | MAGIC
