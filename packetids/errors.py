class PacketIdsError(Exception):
    """Base class for every error that aborts a generation run."""


class FetchError(PacketIdsError):
    """The protocol document could not be downloaded."""


class DecodeError(PacketIdsError):
    """The downloaded body is not valid JSON."""


class SchemaError(PacketIdsError):
    """The protocol document does not have the expected shape."""


class FileError(PacketIdsError):
    """The output file could not be written."""
