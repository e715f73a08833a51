class DBFStructException(Exception):
    '''Base class to extend in order to throw exception in dbfstruct.

    It takes a message and the chain of the layers that caused the exception:
    each enclosing chunk appends the name of the field that was unpacking, so
    the chain goes from the innermost field to the outermost.
    '''

    def __init__(self, message='', chain=None):
        self.message = message
        self.chain = chain if chain is not None else []
        super().__init__(message)

    @property
    def path(self):
        return '.'.join(reversed(self.chain))

    def __str__(self):
        if not self.chain:
            return self.message

        return f'{self.message} (at {self.path})'


class UnpackException(DBFStructException):
    pass


class TruncatedInput(UnpackException):
    '''The stream ended before a fixed-size field was fully read.'''
    pass


class UnrecognizedFormat(UnpackException):
    '''A value that must belong to an enumeration doesn't.'''
    pass


class InvalidFieldLength(UnpackException):
    pass


class MagicException(UnpackException):
    pass


class MalformedHeader(MagicException):
    '''Some structural invariant of the format is violated: wrong sentinel
    values or declared sizes that don't add up.'''
    pass
