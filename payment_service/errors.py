class StorageError(Exception):
    """The database rejected or could not serve a query."""


class UpstreamError(Exception):
    """An outbound HTTP call failed before a response was received."""
