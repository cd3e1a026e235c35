import re

from models import EntryParseError, ParseOutcome, SentenceRecord

LANGUAGE_PREFIX = "Language:"

# Line prefix -> SentenceRecord field
PREFIXES = {
    "T: ": "target",
    "E: ": "english",
    "P: ": "pronunciation",
}

LINES_PER_ENTRY = len(PREFIXES)

# One or more blank (or whitespace only) lines
_BLOCK_SEPARATOR = re.compile(r"\n[ \t\r]*\n\s*")


def split_language(raw_text: str) -> tuple[str, str]:
    """Return (language, body); language is empty when the header line is absent."""
    lines = raw_text.split("\n")
    if lines and lines[0].startswith(LANGUAGE_PREFIX):
        language = lines[0][len(LANGUAGE_PREFIX):].strip()
        return language, "\n".join(lines[1:])
    return "", raw_text


def parse_entry(entry: str) -> SentenceRecord:
    lines = entry.strip().split("\n")

    if len(lines) != LINES_PER_ENTRY:
        raise EntryParseError(f"invalid entry format: expected {LINES_PER_ENTRY} lines, got {len(lines)}")

    fields = {}
    seen = {prefix: 0 for prefix in PREFIXES}
    for line in lines:
        for prefix, field in PREFIXES.items():
            if line.startswith(prefix):
                fields[field] = line[len(prefix):]
                seen[prefix] += 1
                break

    # Absent prefixes are reported before duplicated ones
    unmatched = [p for p, count in seen.items() if count == 0] + [p for p, count in seen.items() if count > 1]
    if unmatched:
        raise EntryParseError(f"missing expected line with prefix '{unmatched[0]}'")

    return SentenceRecord(**fields)


def parse_response(raw_text: str) -> ParseOutcome:
    """
    Parse the model reply into a language tag and sentence records.

    A malformed block is reported in ``errors`` as ``entry <n>: <reason>``
    (1-based) and the remaining blocks are still parsed.
    """
    language, body = split_language(raw_text)
    body = body.strip()

    outcome = ParseOutcome(language=language)
    if not body:
        return outcome

    for index, entry in enumerate(_BLOCK_SEPARATOR.split(body), start=1):
        try:
            outcome.sentences.append(parse_entry(entry))
        except EntryParseError as e:
            outcome.errors.append(f"entry {index}: {e}")

    return outcome
