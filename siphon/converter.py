"""Converter object tying normalization, tokenizing and rendering together.

WHY: Library users and the CLI both want "give me this text in that
format" with a remembered format and LaTeX wrapper, without wiring the
tokenizer and transformer by hand each time.

HOW: Converter is a small dataclass holding the configuration. Input
text is stored as whitespace-separated words (the shape argv delivers)
and joined with single spaces on use. normalized_text() applies NFC so
decomposed diacritics (u + U+0308) match the tokenizer's ü.

RULES:
- tokenize() and transform() use the converter's own format, so a token
  list is always rendered with the rhyme normalization it was built for
- Normalization that changes the input is reported at INFO level
- Errors from the core propagate unchanged
"""

from __future__ import annotations

import logging
import unicodedata
from dataclasses import dataclass, field
from typing import Iterable, List

from siphon.config import DEFAULT_LATEX_WRAPPER
from siphon.core.tokenizer import tokenize
from siphon.core.tokens import Token
from siphon.core.transformer import transform
from siphon.formats import Format

logger = logging.getLogger(__name__)


def normalize_text(text: str) -> str:
    """Compose combining diacritics (NFC) so ü and marked vowels are single characters."""
    return unicodedata.normalize("NFC", text)


@dataclass
class Converter:
    """Pinyin conversion settings plus the text to convert.

    Attributes:
        fmt: Output format.
        latex_wrapper: LaTeX command name for PINYIN_LATEX / IPA_LATEX.
        words: Input text split on whitespace.
        debug: Whether the caller asked for debug output.
    """

    fmt: Format = Format.PINYIN_DIACRITIC
    latex_wrapper: str = DEFAULT_LATEX_WRAPPER
    words: List[str] = field(default_factory=list)
    debug: bool = False

    @classmethod
    def from_text(cls, text: str, **kwargs) -> "Converter":
        return cls(words=text.split(), **kwargs)

    @property
    def text(self) -> str:
        return " ".join(self.words)

    def normalized_text(self) -> str:
        text = self.text
        normalized = normalize_text(text)
        if normalized != text:
            logger.info("Input text has been normalized as -> %r", normalized)
        return normalized

    def tokenize(self) -> List[Token]:
        return tokenize(self.normalized_text(), self.fmt)

    def transform(self, tokens: Iterable[Token]) -> str:
        return transform(tokens, self.fmt, self.latex_wrapper)

    def convert(self) -> str:
        """Normalize, tokenize and render the stored text."""
        return self.transform(self.tokenize())


def convert(
    text: str,
    fmt: Format = Format.PINYIN_DIACRITIC,
    wrapper: str = DEFAULT_LATEX_WRAPPER,
) -> str:
    """Convert numbered Pinyin text in one call.

    Unlike Converter, the text is used as given (only NFC-normalized);
    its whitespace is kept.
    """
    tokens = tokenize(normalize_text(text), fmt)
    return transform(tokens, fmt, wrapper)
