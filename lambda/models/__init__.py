from .models import SentenceRecord, ParseOutcome, ResponseEnvelope, RequestPayload, InferenceConfig, Message, MessageContent, ModelReply, ReplyOutput, ReplyMessage
from .errors import ExampleServiceError, ValidationError, EmptyInputError, EncodingError, LengthError, InjectionError, CharsetError, RepetitionError, ServerError, ModelClientInitError, ModelInvocationError, ModelResponseShapeError, SerializationError, EntryParseError

__all__ = ['SentenceRecord', 'ParseOutcome', 'ResponseEnvelope', 'RequestPayload', 'InferenceConfig', 'Message', 'MessageContent', 'ModelReply', 'ReplyOutput', 'ReplyMessage',
           'ExampleServiceError', 'ValidationError', 'EmptyInputError', 'EncodingError', 'LengthError', 'InjectionError', 'CharsetError', 'RepetitionError',
           'ServerError', 'ModelClientInitError', 'ModelInvocationError', 'ModelResponseShapeError', 'SerializationError', 'EntryParseError']
