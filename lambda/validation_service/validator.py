import os
import re
import unicodedata
from urllib.parse import unquote_plus

from models import (
    CharsetError,
    EmptyInputError,
    EncodingError,
    InjectionError,
    LengthError,
    RepetitionError,
)

MIN_WORD_LENGTH = int(os.getenv("MIN_WORD_LENGTH", "1"))
MAX_WORD_LENGTH = int(os.getenv("MAX_WORD_LENGTH", "30"))

BLOCKED_CHARACTERS = ("<", ">")
SQL_INJECTION_PATTERNS = ("SELECT", "INSERT", "UPDATE", "DELETE", "DROP", "UNION", "--", ";")
ALLOWED_PUNCTUATION = frozenset("-'\"")
# Unicode White_Space; str.isspace() also accepts the U+001C-U+001F separators
WHITESPACE = "\t\n\v\f\r \x85\xa0\u1680" + "".join(chr(c) for c in range(0x2000, 0x200B)) + "\u2028\u2029\u202f\u205f\u3000"
REPEATED_SEQUENCES = ("---", "   ")

# A '%' must always start a two digit hex escape
_BAD_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


def _percent_decode(word: str) -> str:
    if _BAD_ESCAPE.search(word):
        raise EncodingError(f"invalid URL encoding: malformed escape in {word!r}")
    try:
        return unquote_plus(word, errors="strict")
    except UnicodeDecodeError as e:
        raise EncodingError(f"invalid URL encoding: {e.reason}") from e


def _is_allowed(char: str) -> bool:
    # L* covers letters of any script, M* combining, spacing and enclosing marks
    category = unicodedata.category(char)
    return category[0] in ("L", "M") or char in WHITESPACE or char in ALLOWED_PUNCTUATION


def validate_word(raw: str, min_length: int = MIN_WORD_LENGTH, max_length: int = MAX_WORD_LENGTH) -> str:
    """
    Decode and check a word received from the caller.

    Rules run in a fixed order and the first failing one wins, so every input
    maps to exactly one outcome: the decoded word, or one ValidationError subclass.
    Length is counted in code points.
    """
    word = (raw or "").strip(WHITESPACE)
    if not word:
        raise EmptyInputError("word cannot be empty")

    decoded = _percent_decode(word)

    if len(decoded) < min_length:
        raise LengthError(f'"{decoded}" must be at least {min_length} character')
    if len(decoded) > max_length:
        raise LengthError(f'"{decoded}" must not exceed {max_length} characters')

    if any(c in decoded for c in BLOCKED_CHARACTERS):
        raise InjectionError(f'"{decoded}" contains invalid characters')

    upper = decoded.upper()
    for pattern in SQL_INJECTION_PATTERNS:
        if pattern in upper:
            raise InjectionError(f'"{decoded}" contains invalid patterns')

    if not all(_is_allowed(c) for c in decoded):
        raise CharsetError(f'"{decoded}" contains invalid characters (only letters, spaces, and basic punctuation are allowed)')

    if any(seq in decoded for seq in REPEATED_SEQUENCES):
        raise RepetitionError(f'"{decoded}" contains too many consecutive special characters')

    return decoded
