"""Tone number → contour string, and the two ways of typesetting it."""

from __future__ import annotations

from siphon.core.tables import SUPERSCRIPT_DIGITS, TONE_CONTOURS
from siphon.core.tokens import Syllable
from siphon.errors import ToneConversionError


def tone_contour(syllable: Syllable) -> str:
    """Return the Chao contour for the syllable's tone ("" when untoned).

    Raises:
        ToneConversionError: If the tone is outside 0-5.
    """
    if syllable.tone is None:
        return ""
    try:
        return TONE_CONTOURS[syllable.tone]
    except KeyError:
        raise ToneConversionError(syllable.full) from None


def to_superscript(contour: str) -> str:
    """Replace each digit with its superscript glyph; other characters pass through."""
    return "".join(SUPERSCRIPT_DIGITS.get(c, c) for c in contour)


def wrap_latex(contour: str, wrapper: str) -> str:
    r"""Wrap a contour in a LaTeX command: ``"51"`` → ``\wrapper{51}``.

    An empty contour stays empty. The wrapper is inserted verbatim.
    """
    if not contour:
        return ""
    return "\\{}{{{}}}".format(wrapper, contour)
