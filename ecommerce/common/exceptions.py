from typing import Any


class InternalException(Exception):
    """
    All internal exceptions should inherit from this. Carries a human readable
    message and a context payload for logging
    """

    default_detail = 'Internal failure.'

    def __init__(self, message: str | None = None, context: dict[Any, Any] | Any = None):
        self.message = message or self.default_detail
        self.context = context or dict()
        super().__init__(self.message)

    def __str__(self) -> str:
        return f'{self.__class__.__name__}({self.message})'


class DataFormatException(InternalException):
    """
    Raised when a structured-data object cannot be decoded into a record.
    `context` holds the decoder's error list when one is available
    """

    default_detail = 'Malformed structured data.'
