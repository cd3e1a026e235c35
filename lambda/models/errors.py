class ExampleServiceError(Exception):
    """Base class for every error raised by the example sentence service."""

    status_code = 500
    public_message = "Internal server error"


class ValidationError(ExampleServiceError):
    """The requested word was rejected. The message is safe to show to the caller."""

    status_code = 400

    @property
    def public_message(self) -> str:
        return str(self)


class EmptyInputError(ValidationError):
    pass


class EncodingError(ValidationError):
    pass


class LengthError(ValidationError):
    pass


class InjectionError(ValidationError):
    pass


class CharsetError(ValidationError):
    pass


class RepetitionError(ValidationError):
    pass


class ServerError(ExampleServiceError):
    """Server side fault. Details go to the logs, never to the caller."""


class ModelClientInitError(ServerError):
    pass


class ModelInvocationError(ServerError):
    pass


class ModelResponseShapeError(ServerError):
    pass


class SerializationError(ServerError):
    pass


class EntryParseError(ExampleServiceError):
    """A single block of the model reply could not be parsed."""
