class LabelsDBError(Exception):
    """Base class for everything that can go wrong while editing labels.db"""


class ReadError(LabelsDBError):
    pass


class TruncatedDataError(ReadError):
    """Fewer bytes were available than a fixed-size read expects"""


class WriteError(LabelsDBError):
    pass


class FormatError(LabelsDBError, ValueError):
    """A signature or the shape of the index is invalid"""


class IndexFullError(FormatError, WriteError):
    """The merged index no longer fits before the image table"""


class DecodeError(LabelsDBError):
    """A source image could not be decoded"""


class EncodeError(LabelsDBError):
    """A decoded image could not be turned into a pixel block"""
