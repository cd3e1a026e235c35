"""Shared fixtures: a fake Bedrock client and canned model replies."""

from __future__ import annotations

import io
import json

import pytest
from botocore.exceptions import ClientError

FIVE_ENTRIES = [
    ("Bonjour, Marie !", "Hello, Marie!", "bohn-ZHOOR, mah-REE"),
    ("Il dit bonjour à ses voisins.", "He says hello to his neighbours.", "eel dee bohn-ZHOOR ah say vwah-ZAN"),
    ("Bonjour à tous.", "Hello everyone.", "bohn-ZHOOR ah TOOS"),
    ("Un simple bonjour suffit.", "A simple hello is enough.", "uhn SAMPL bohn-ZHOOR soo-FEE"),
    ("Dis bonjour de ma part.", "Say hello for me.", "dee bohn-ZHOOR duh mah PAR"),
]


def render_entries(entries) -> str:
    return "\n\n".join(f"T: {t}\nE: {e}\nP: {p}" for t, e, p in entries)


def bedrock_reply(text: str) -> bytes:
    return json.dumps({
        "output": {"message": {"role": "assistant", "content": [{"text": text}]}},
        "stopReason": "end_turn",
    }).encode("utf-8")


class FakeBedrockClient:
    """Stands in for the bedrock-runtime client; records every invoke_model call."""

    def __init__(self, body: bytes | None = None, error: Exception | None = None):
        self.body = body
        self.error = error
        self.calls: list[dict] = []

    def invoke_model(self, **kwargs):
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        return {"body": io.BytesIO(self.body), "contentType": "application/json"}


@pytest.fixture
def five_entry_text() -> str:
    return "Language: French\n\n" + render_entries(FIVE_ENTRIES)


@pytest.fixture
def broken_third_entry_text() -> str:
    entries = render_entries(FIVE_ENTRIES).split("\n\n")
    entries[2] = "T: Bonjour à tous.\nE: Hello everyone."
    return "Language: French\n\n" + "\n\n".join(entries)


@pytest.fixture
def fake_client_factory():
    def make(text: str | None = None, body: bytes | None = None, error: Exception | None = None) -> FakeBedrockClient:
        if body is None and text is not None:
            body = bedrock_reply(text)
        return FakeBedrockClient(body=body, error=error)

    return make


@pytest.fixture
def throttling_error() -> ClientError:
    return ClientError(
        {"Error": {"Code": "ThrottlingException", "Message": "Too many requests"}},
        "InvokeModel",
    )
