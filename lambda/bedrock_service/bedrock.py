import os
from functools import lru_cache

import boto3
from botocore.exceptions import BotoCoreError, ClientError
from pydantic import ValidationError as PydanticValidationError

from models import (
    InferenceConfig,
    Message,
    MessageContent,
    ModelClientInitError,
    ModelInvocationError,
    ModelReply,
    ModelResponseShapeError,
    RequestPayload,
    SerializationError,
)
from utils import logging

AWS_REGION = os.getenv("AWS_REGION", "us-east-1")
BEDROCK_MODEL_ID = os.getenv("BEDROCK_MODEL_ID", "amazon.nova-lite-v1:0")
BEDROCK_MAX_NEW_TOKENS = int(os.getenv("BEDROCK_MAX_NEW_TOKENS", "1000"))

PROMPT_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "resources", "prompts")


def create_client(region_name: str = AWS_REGION):
    """Build the bedrock-runtime client once at startup; the caller decides what to do on failure."""
    try:
        return boto3.client("bedrock-runtime", region_name=region_name)
    except (BotoCoreError, ClientError) as e:
        logging.error(f"Could not create Bedrock client for region {region_name}: {str(e)}")
        raise ModelClientInitError(str(e)) from e


@lru_cache(maxsize=None)
def load_prompt_template(name: str) -> str:
    template_path = os.path.join(PROMPT_DIR, f"{name}.txt")
    try:
        with open(template_path, "r", encoding="utf-8") as f:
            return f.read()
    except FileNotFoundError as e:
        logging.error(f"Error loading prompt template from {template_path}: {str(e)}")
        raise


def build_prompt(word: str) -> str:
    return load_prompt_template("example_sentences").format(word=word)


def build_payload(prompt: str, max_new_tokens: int = BEDROCK_MAX_NEW_TOKENS) -> bytes:
    payload = RequestPayload(
        inferenceConfig=InferenceConfig(max_new_tokens=max_new_tokens),
        messages=[Message(role="user", content=[MessageContent(text=prompt)])],
    )
    try:
        return payload.model_dump_json().encode("utf-8")
    except ValueError as e:
        raise SerializationError(f"Could not serialize Bedrock payload: {str(e)}") from e


def invoke_model(client, body: bytes, model_id: str = BEDROCK_MODEL_ID) -> bytes:
    try:
        response = client.invoke_model(
            modelId=model_id,
            body=body,
            contentType="application/json",
            accept="application/json",
        )
        return response["body"].read()
    except (BotoCoreError, ClientError) as e:
        logging.exception(f"Error calling Bedrock model {model_id}: {str(e)}")
        raise ModelInvocationError(str(e)) from e


def extract_text(raw_body: bytes | str) -> str:
    try:
        reply = ModelReply.model_validate_json(raw_body)
    except PydanticValidationError as e:
        raise ModelResponseShapeError(f"Unexpected Bedrock reply shape: {e.error_count()} error(s)") from e
    return reply.output.message.content[0].text


def generate_reply_text(client, word: str) -> str:
    logging.info(f"Generating example sentences for word {word}")
    body = build_payload(build_prompt(word))
    raw_output = invoke_model(client, body)
    logging.debug(f"Received response from Bedrock: {raw_output!r}")
    return extract_text(raw_output)
