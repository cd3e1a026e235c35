from pydantic import BaseModel, ConfigDict, Field


class SentenceRecord(BaseModel):
    model_config = ConfigDict(frozen=True)

    target: str
    english: str
    pronunciation: str


class ParseOutcome(BaseModel):
    language: str = ""
    sentences: list[SentenceRecord] = []
    errors: list[str] = []


class ResponseEnvelope(BaseModel):
    message: str
    language: str = ""
    sentences: list[SentenceRecord] = []


# Bedrock request body
class MessageContent(BaseModel):
    text: str


class Message(BaseModel):
    role: str = "user"
    content: list[MessageContent]


class InferenceConfig(BaseModel):
    max_new_tokens: int


class RequestPayload(BaseModel):
    inferenceConfig: InferenceConfig
    messages: list[Message]


# Bedrock reply body, only the fields we read
class ReplyMessage(BaseModel):
    content: list[MessageContent] = Field(min_length=1)


class ReplyOutput(BaseModel):
    message: ReplyMessage


class ModelReply(BaseModel):
    output: ReplyOutput
