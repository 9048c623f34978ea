class SimpleHashtagError(Exception):
    """Base class for every error raised by simple_hashtag."""


class InvalidArgument(SimpleHashtagError, TypeError):
    """A value of an unsupported type was passed to a tag operation."""

    def __init__(self, value: object, operation: str):
        self.value = value
        self.operation = operation
        super().__init__(
            f"{operation}() expects str, list, tuple or TagList values, "
            f"got {type(value).__name__}: {value!r}"
        )


class ConfigurationError(SimpleHashtagError, ValueError):
    """The tag configuration is unusable."""
