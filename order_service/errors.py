class UpstreamError(Exception):
    """The payment service could not be reached."""


class DecodeError(Exception):
    """The payment service answered with something that is not a payment."""
