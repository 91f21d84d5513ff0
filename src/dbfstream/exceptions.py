class DbfException(Exception):
    """An exception to handle dbf specific problems."""


class DbfFormatError(DbfException):
    """The header is not a dbf header this reader understands."""


class DbfVersionError(DbfFormatError):
    pass


class BadHeaderLength(DbfFormatError):
    pass


class ShortReadError(DbfException, EOFError):
    """The stream ended before a complete header or record was read."""


class MissingFieldError(DbfException, KeyError):
    pass
