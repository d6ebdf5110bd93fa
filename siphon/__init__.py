"""siphon — Mandarin Pinyin to diacritic Pinyin and IPA converter.

WHY: Linguists and typesetters type Mandarin as numbered Pinyin
("zhe4 shi4") but need it printed with tone marks (zhè shì), tone
contours (zhe⁵¹) or as IPA (tʂɤ⁵¹), often inside LaTeX documents.

HOW: Two-stage pipeline: tokenize (split text into syllables, spaces,
separators and punctuation) then transform (render every token in the
selected Format). Each stage is a pure function and independently
testable.

RULES:
- The core consumes NFC text; normalize_text() / Converter handle that
- One bad syllable fails the whole conversion (SiphonError subclasses)
- Unrecognized characters are dropped from the output
"""

from siphon.converter import Converter, convert, normalize_text
from siphon.core.tokenizer import tokenize
from siphon.core.tokens import (
    PunctuationToken,
    SeparatorToken,
    SpaceToken,
    Syllable,
    SyllableToken,
    Token,
)
from siphon.core.transformer import transform
from siphon.errors import SiphonError
from siphon.formats import Format

__version__ = "1.6.0"

__all__ = [
    "Converter",
    "Format",
    "PunctuationToken",
    "SeparatorToken",
    "SiphonError",
    "SpaceToken",
    "Syllable",
    "SyllableToken",
    "Token",
    "convert",
    "normalize_text",
    "tokenize",
    "transform",
]
