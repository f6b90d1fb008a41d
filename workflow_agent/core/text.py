# workflow_agent/core/text.py
from __future__ import annotations

"""String helpers shared by the step synthesizer and plan assembler."""

import re

_WHITESPACE = re.compile(r"\s+")
_SENTENCE_BREAKS = re.compile(r"[\r\n.!?]+")
_TITLE_BREAKS = re.compile(r"[.!?\n]")
_STANDALONE_NUMBER = re.compile(r"\b\d+\b", re.ASCII)

MIN_SENTENCE_LENGTH = 6


def text_length(value: str) -> int:
    """Length in UTF-16 code units, so astral characters such as emoji count twice."""
    return len(value.encode("utf-16-le", "surrogatepass")) // 2


def sanitize_brief(brief: str) -> str:
    return _WHITESPACE.sub(" ", brief or "").strip()


def extract_sentences(brief: str) -> list[str]:
    """Candidate sentences in brief order; fragments of 6 chars or fewer are dropped."""
    pieces = (p.strip() for p in _SENTENCE_BREAKS.split(brief))
    return [p for p in pieces if text_length(p) > MIN_SENTENCE_LENGTH]


def first_raw_sentence(brief: str) -> str:
    """First fragment of the brief, untrimmed and unfiltered."""
    return _TITLE_BREAKS.split(brief, maxsplit=1)[0]


def strip_first_number(sentence: str) -> str:
    return _STANDALONE_NUMBER.sub("", sentence, count=1).strip()


def title_case(value: str) -> str:
    """Lower-case everything, then capitalise the first letter of each space-separated word."""
    return " ".join(word[:1].upper() + word[1:] for word in value.lower().split(" "))


def sentence_case(value: str) -> str:
    trimmed = value.strip()
    return trimmed[:1].upper() + trimmed[1:]


def format_minutes(value: float) -> str:
    # 10.0 -> "10", 3.3333333333333335 stays as-is
    number = int(value) if float(value).is_integer() else value
    return f"{number} min"
