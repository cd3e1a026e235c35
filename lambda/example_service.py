from typing import Callable, Optional

import bedrock_service
import parser_service
from models import ResponseEnvelope, SentenceRecord
from utils import logging
from validation_service import validate_word

SUCCESS_MESSAGE = "Success"
FAILURE_MESSAGE = "Failed to generate examples"


def assemble(language: str, sentences: list[SentenceRecord], errors: list[str]) -> ResponseEnvelope:
    # Partial results are still returned, the message only says whether every block parsed
    message = SUCCESS_MESSAGE if not errors else FAILURE_MESSAGE
    return ResponseEnvelope(message=message, language=language, sentences=list(sentences))


def generate_examples(raw_word: str, client, notify: Optional[Callable[[str], None]] = None) -> ResponseEnvelope:
    word = validate_word(raw_word)
    logging.info(f"Word queried: {word}")

    if notify is not None:
        notify(word)

    reply_text = bedrock_service.generate_reply_text(client, word)
    outcome = parser_service.parse_response(reply_text)

    for error in outcome.errors:
        logging.warning(f"Failed to parse model output for {word}: {error}")

    logging.info(f"Parsed {len(outcome.sentences)} sentences ({len(outcome.errors)} errors) for {word} @ {outcome.language or 'unknown'}")
    return assemble(outcome.language, outcome.sentences, outcome.errors)
