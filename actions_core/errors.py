"""Exceptions raised while serializing responses."""


class SerializationError(Exception):
    """Base class for serializer failures."""


class UnsupportedResponseKind(SerializationError):
    """Raised when a response is neither a dialog nor a direct response."""

    def __init__(self, response: object) -> None:
        self.response_type = type(response).__name__
        super().__init__(
            f"Unable to serialize the response: unsupported kind {self.response_type}"
        )
