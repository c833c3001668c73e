class ConversionError(Exception):
    pass


class ParseError(ConversionError):
    """Source export is missing, unreadable or structurally malformed."""


class DataError(ConversionError):
    """A value that must be numeric could not be parsed."""


class IoError(ConversionError):
    """Destination trace file could not be opened, written or flushed."""
