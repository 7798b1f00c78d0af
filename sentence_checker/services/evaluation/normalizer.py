import re
from typing import Any, List

_NON_LETTER = re.compile(r"[^a-z\s]")
_WHITESPACE = re.compile(r"\s+")


def normalize(text: Any) -> str:
    '''
    Canonical form used by the keyword checks: lowercase, every character that is
    not a-z or whitespace becomes a space, whitespace collapsed and trimmed.
    Digits and apostrophes go too, so "don't" -> "don t".
    Missing / non-string input is treated as an empty string.
    '''
    if not isinstance(text, str):
        return ""
    cleaned = _NON_LETTER.sub(" ", text.lower())
    return _WHITESPACE.sub(" ", cleaned).strip()


def tokenize(normalized: str) -> List[str]:
    return [w for w in normalized.split(" ") if w]
