"""Exceptions raised by the JSON:API mapper.

Both errors signal a caller-side contract violation. They are raised and
never caught inside the package.
"""


class JSONAPIMapperError(Exception):
    """Base class for mapper errors."""


class InvalidResourceTypeError(JSONAPIMapperError, ValueError):
    """The resource type name is empty or not a string."""

    def __init__(self, type_: object) -> None:
        self.type_ = type_
        super().__init__(f"Resource type must be a non-empty string, got {type_!r}.")


class UnsupportedDataError(JSONAPIMapperError, TypeError):
    """The data is neither a supported record nor a collection of records."""

    def __init__(self, data: object) -> None:
        self.data = data
        super().__init__(
            f"Cannot map object of type {type(data).__name__!r}: "
            "expected a mapped instance or a collection of mapped instances."
        )
