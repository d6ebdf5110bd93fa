"""Token and syllable dataclasses produced by the tokenizer.

WHY: The tokenizer and the transformer need a shared, well-typed
intermediate form. Free text is split into syllables, whitespace runs,
apostrophe separators and punctuation; the transformer renders each of
these independently.

HOW: Four frozen dataclasses form a closed union:
  SyllableToken    — one parsed Mandarin syllable (wraps a Syllable)
  PunctuationToken — one literal punctuation character
  SeparatorToken   — an apostrophe marking a syllable boundary (xi1'an1)
  SpaceToken       — a whitespace run, collapsed to one token

RULES:
- Tokens are immutable and own their data (plain strings and ints)
- Syllable.rhyme is never empty
- Syllable.tone is whatever digit was written; 0-5 are valid, anything
  else is rejected later by the transformer, not here
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union


@dataclass(frozen=True)
class Syllable:
    """One Mandarin syllable split into onset, rhyme and tone.

    RULES:
    - full: the matched source text, used in error messages
    - onset: the initial as written (case kept), or None for a zero onset
    - rhyme: the final; rewritten for IPA lookup when the target format is IPA
    - tone: the trailing digit, or None when the syllable has no tone number
    """

    full: str
    onset: Optional[str]
    rhyme: str
    tone: Optional[int] = None


@dataclass(frozen=True)
class SyllableToken:
    syllable: Syllable


@dataclass(frozen=True)
class PunctuationToken:
    text: str


@dataclass(frozen=True)
class SeparatorToken:
    pass


@dataclass(frozen=True)
class SpaceToken:
    pass


Token = Union[SyllableToken, PunctuationToken, SeparatorToken, SpaceToken]
