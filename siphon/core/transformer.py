"""Render tokens in a selected output format.

WHY: Each of the five output formats renders a syllable differently:
the syllable text is either Pinyin or IPA, and the tone is either a
diacritic, superscript digits, or a LaTeX command. Everything else
(spaces, separators, punctuation) is rendered the same way across
formats except the apostrophe separator.

HOW: render_syllable() is one exhaustive if/elif over Format returning
a (syllable text, tone text) pair. render_token() handles the other
token kinds. transform() renders every token in order and joins the
results.

RULES:
- Pinyin formats never consult ONSET_IPA / RHYME_IPA
- An untoned syllable renders with empty tone text in every format
- SeparatorToken → "'" under PINYIN_DIACRITIC, "" otherwise
- SpaceToken → " "; PunctuationToken → its own text
- The first error aborts the whole transform; no partial output
"""

from __future__ import annotations

import logging
from typing import Iterable, Tuple

from siphon.core.ipa import to_ipa
from siphon.core.pinyin import mark_tone, spell
from siphon.core.tones import to_superscript, tone_contour, wrap_latex
from siphon.core.tokens import (
    PunctuationToken,
    SeparatorToken,
    SpaceToken,
    Syllable,
    SyllableToken,
    Token,
)
from siphon.formats import Format

logger = logging.getLogger(__name__)


def render_syllable(syllable: Syllable, fmt: Format, wrapper: str) -> Tuple[str, str]:
    """Render one syllable as a (syllable text, tone text) pair.

    Args:
        syllable: The parsed syllable. For IPA formats its rhyme must
                  already be normalized by the tokenizer.
        fmt: Target output format.
        wrapper: LaTeX command name, used by the LaTeX formats only.

    Raises:
        ToneConversionError: If the tone is outside 0-5.
        InvalidInitialError: IPA formats, onset has no IPA entry.
        InvalidRhymeError: IPA formats, rhyme has no IPA entry.
    """
    if fmt is Format.PINYIN_DIACRITIC:
        return spell(syllable.onset, mark_tone(syllable)), ""

    if fmt is Format.PINYIN_SUPERSCRIPT:
        contour = tone_contour(syllable)
        return spell(syllable.onset, syllable.rhyme), to_superscript(contour)

    if fmt is Format.PINYIN_LATEX:
        contour = tone_contour(syllable)
        return spell(syllable.onset, syllable.rhyme), wrap_latex(contour, wrapper)

    if fmt is Format.IPA_SUPERSCRIPT:
        contour = tone_contour(syllable)
        return to_ipa(syllable), to_superscript(contour)

    if fmt is Format.IPA_LATEX:
        contour = tone_contour(syllable)
        return to_ipa(syllable), wrap_latex(contour, wrapper)

    raise ValueError("Unsupported format: {!r}".format(fmt))


def render_token(token: Token, fmt: Format, wrapper: str) -> str:
    """Render any token to its final text."""
    if isinstance(token, SyllableToken):
        text, tone = render_syllable(token.syllable, fmt, wrapper)
        return text + tone
    if isinstance(token, SeparatorToken):
        # Only diacritic Pinyin still needs the boundary (xī'ān vs xiān)
        return "'" if fmt is Format.PINYIN_DIACRITIC else ""
    if isinstance(token, SpaceToken):
        return " "
    if isinstance(token, PunctuationToken):
        return token.text
    raise TypeError("Not a token: {!r}".format(token))


def transform(tokens: Iterable[Token], fmt: Format, wrapper: str) -> str:
    """Render a token sequence and concatenate the results in order.

    Args:
        tokens: Tokens from tokenize(), produced for the same ``fmt``.
        fmt: Target output format.
        wrapper: LaTeX command name (without the backslash).

    Returns:
        The converted text.
    """
    parts = [render_token(token, fmt, wrapper) for token in tokens]
    logger.debug("Rendered %d tokens as %s", len(parts), fmt.name)
    return "".join(parts)
