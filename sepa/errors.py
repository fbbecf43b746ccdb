# *-* coding: utf-8 *-*


class SepaError(Exception):
    """Base class of every error raised while building an application request."""


class ParameterError(SepaError, KeyError):
    """A required request parameter is missing or empty."""

    def __str__(self):
        # KeyError quotes its argument, keep the message readable
        return Exception.__str__(self)


class InvalidCommand(SepaError, ValueError):
    """The command is not one of the supported application request commands."""


class ConfigurationError(SepaError):
    """A template or schema shipped with the library is missing or unusable."""


class SigningError(SepaError, ValueError):
    """The private key or certificate cannot be used to sign the request."""
