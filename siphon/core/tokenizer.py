"""Composite-pattern tokenizer for Pinyin text.

WHY: Input is free text mixing numbered Pinyin syllables with spaces,
apostrophe separators and punctuation ("zhe4 shi4 xi1'an1, hao3!").
The transformer needs an ordered token stream that reproduces the
original layout, with every syllable already split into onset, rhyme
and tone.

HOW: A single compiled regex with four named alternatives is run over
the text with finditer(). At each position the alternatives are tried
in priority order: syllable, whitespace run, apostrophe, punctuation.
For IPA targets the captured rhyme is rewritten so that it matches the
keys of RHYME_IPA (palatal ü after j/q/x, apical vowels after
retroflex and dental sibilants, y/w glides folded into i/u).

RULES:
- Initials zh/ch/sh are tried before single letters; y and w are
  never initials, they belong to the rime
- Matching is case-insensitive for syllables; onset case is preserved
- A whitespace run becomes exactly one SpaceToken
- Characters matched by no alternative are dropped without error
- An empty rime aborts the whole call with RhymeNotFoundError
- Tone digits are not validated here
"""

from __future__ import annotations

import functools
import logging
import re
from typing import List, Optional

from siphon.core.tokens import (
    PunctuationToken,
    SeparatorToken,
    SpaceToken,
    Syllable,
    SyllableToken,
    Token,
)
from siphon.errors import PatternError, RhymeNotFoundError
from siphon.formats import Format

logger = logging.getLogger(__name__)

_TOKEN_PATTERN = r"""
    (?i:                                                   # case-insensitive
        (?P<syllable>
            (?P<initial>zh|ch|sh|[bpmfdtnlgkhjqxrzcs]?)    # optional initial (excluding y and w)
            (?P<rime>(?:y|w)?[aeiouüv]{1,3}(?:ng|n)?(?:r)?) # required rime
            (?P<tone>\d?)                                  # optional tone
        )
    )
    |(?P<space>\s+)
    |(?P<quote>')
    |(?P<punctuation>[,!?.\-:"=])
"""

_PALATAL_ONSETS = frozenset({"j", "q", "x"})
_RETROFLEX_ONSETS = frozenset({"zh", "ch", "sh", "r"})
_DENTAL_ONSETS = frozenset({"z", "c", "s"})


@functools.lru_cache(maxsize=None)
def get_pattern() -> "re.Pattern[str]":
    """Compile the tokenizer pattern once.

    Raises:
        PatternError: If the pattern does not compile.
    """
    try:
        return re.compile(_TOKEN_PATTERN, re.VERBOSE)
    except re.error as exc:
        raise PatternError(exc) from exc


def normalize_rhyme(onset: Optional[str], rhyme: str) -> str:
    """Rewrite a Pinyin rhyme into the spelling used by RHYME_IPA.

    HOW: First an onset-conditioned rewrite, then glide folding:
      j/q/x       → every "u" becomes "ü"  (ju → jü)
      zh/ch/sh/r  → every "i" becomes "r"  (shi → sh + r)
      z/c/s       → every "i" becomes "z"  (si → s + z)
    then "yu"→"ü", "y"→"i", "ii"→"i", "w"→"u", "uu"→"u".

    RULES:
    - The order of replacements is significant (yi → ii → i, wu → uu → u)
    - Onset comparison ignores case
    """
    key = onset.lower() if onset else None
    if key in _PALATAL_ONSETS:
        rhyme = rhyme.replace("u", "ü")
    elif key in _RETROFLEX_ONSETS:
        rhyme = rhyme.replace("i", "r")
    elif key in _DENTAL_ONSETS:
        rhyme = rhyme.replace("i", "z")

    return (
        rhyme.replace("yu", "ü")
        .replace("y", "i")
        .replace("ii", "i")
        .replace("w", "u")
        .replace("uu", "u")
    )


def _build_syllable(match: "re.Match[str]", fmt: Format) -> Syllable:
    full = match.group("syllable")
    onset = match.group("initial") or None

    rhyme = match.group("rime")
    if not rhyme:
        raise RhymeNotFoundError(full)

    tone_text = match.group("tone")
    tone = int(tone_text) if tone_text else None

    if fmt.is_ipa:
        rhyme = normalize_rhyme(onset, rhyme)

    return Syllable(full=full, onset=onset, rhyme=rhyme, tone=tone)


def tokenize(text: str, fmt: Format = Format.PINYIN_DIACRITIC) -> List[Token]:
    """Split normalized text into an ordered list of tokens.

    Args:
        text: NFC-normalized input text.
        fmt: Target output format. Only decides whether syllable rhymes
             are rewritten for IPA lookup.

    Returns:
        Tokens in source order. Unrecognized characters produce no token.

    Raises:
        RhymeNotFoundError: If a syllable match captured an empty rime.
        PatternError: If the tokenizer pattern fails to compile.
    """
    tokens: List[Token] = []

    for match in get_pattern().finditer(text):
        if match.group("syllable") is not None:
            tokens.append(SyllableToken(_build_syllable(match, fmt)))
        elif match.group("space") is not None:
            tokens.append(SpaceToken())
        elif match.group("quote") is not None:
            tokens.append(SeparatorToken())
        elif match.group("punctuation") is not None:
            tokens.append(PunctuationToken(match.group("punctuation")))

    logger.debug("Tokenized %d characters into %d tokens", len(text), len(tokens))
    return tokens
