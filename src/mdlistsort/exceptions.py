"""Custom exceptions for mdlistsort."""


class MdListSortError(Exception):
    """Base exception for mdlistsort operations."""


class BufferAccessError(MdListSortError):
    """Error raised by a host buffer."""


class LineOutOfRangeError(BufferAccessError):
    """Requested line does not exist in the buffer."""


class CommandError(MdListSortError):
    """Error while registering or dispatching a command."""
