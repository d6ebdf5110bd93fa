"""Pinyin spelling rules: tone-mark placement and ü restoration.

WHY: Numbered Pinyin (zhe4, lve4) is a typing convenience. Printed text
needs the tone written as a diacritic over the right vowel, and the
keyboard stand-in ``v`` written as ``ü``.

HOW: mark_tone() picks the tone-bearing vowel by the standard
orthographic priority and substitutes its marked form from
TONE_DIACRITICS. spell() joins onset and rhyme and restores ü.

RULES:
- "iu" → the mark goes on "u" (liù)
- otherwise the first of a, e, o present takes the mark (xiào, guō)
- otherwise the first of i, u, ü, v present (nǐ, lǜ)
- no candidate (apical z/r) → rhyme unchanged, not an error
- only the first occurrence of the chosen vowel is replaced
- tones 0 and 5, and a missing tone, leave the rhyme unmarked
"""

from __future__ import annotations

from siphon.core.tables import TONE_DIACRITICS
from siphon.core.tokens import Syllable
from siphon.errors import ToneConversionError

_PRIMARY_VOWELS = ("a", "e", "o")
_FALLBACK_VOWELS = ("i", "u", "ü", "v")


def _tone_vowel(rhyme: str) -> str | None:
    if "iu" in rhyme:
        return "u"
    for vowel in _PRIMARY_VOWELS + _FALLBACK_VOWELS:
        if vowel in rhyme:
            return vowel
    return None


def mark_tone(syllable: Syllable) -> str:
    """Return the syllable's rhyme with its tone written as a diacritic.

    Raises:
        ToneConversionError: If the tone is outside 0-5.
    """
    tone = syllable.tone
    if tone is None or tone in (0, 5):
        return syllable.rhyme
    if not 1 <= tone <= 4:
        raise ToneConversionError(syllable.full)

    vowel = _tone_vowel(syllable.rhyme)
    if vowel is None:
        return syllable.rhyme
    return syllable.rhyme.replace(vowel, TONE_DIACRITICS[vowel][tone - 1], 1)


def spell(onset: str | None, rhyme: str) -> str:
    """Join onset and rhyme, writing the ``v`` stand-in as ``ü``."""
    return "{}{}".format(onset or "", rhyme).replace("v", "ü")
