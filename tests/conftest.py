"""Shared test fixtures for the siphon test suite.

WHY: Several test modules convert the same reference sentence and build
Syllable values by hand. Keeping them here avoids drift between modules.

HOW: Plain constants for the reference sentence and its expected
renderings, plus a fixture returning a Syllable factory.

RULES:
- Expected strings come from the original tool's own regression test
- Every ü is the precomposed U+00FC
"""

from typing import Optional

import pytest

from siphon.core.tokenizer import get_pattern
from siphon.core.tokens import Syllable

_SENTENCE = "zhe4 shi4 yi2ge0 ce4shi4, yi ya yang yu yue yuan, zher4 shi4 nar3"

_SENTENCE_IPA_SUPERSCRIPT = (
    "tʂɤ⁵¹ ʂʅ⁵¹ i³⁵kɤ⁰ tsʰɤ⁵¹ʂʅ⁵¹, i jɑ jɑŋ y ɥœ ɥɛn, tʂɤʵ⁵¹ ʂʅ⁵¹ nɐʵ²¹⁴"
)

_SENTENCE_PINYIN_SUPERSCRIPT = (
    "zhe⁵¹ shi⁵¹ yi³⁵ge⁰ ce⁵¹shi⁵¹, yi ya yang yu yue yuan, zher⁵¹ shi⁵¹ nar²¹⁴"
)


@pytest.fixture
def make_syllable():
    """Factory for Syllable values: make_syllable("zhe4", "zh", "e", 4)."""

    def _make(full: str, onset: Optional[str], rhyme: str, tone: Optional[int]) -> Syllable:
        return Syllable(full=full, onset=onset, rhyme=rhyme, tone=tone)

    return _make


@pytest.fixture
def fresh_pattern():
    """Clear the compiled-pattern cache before and after the test."""
    get_pattern.cache_clear()
    yield
    get_pattern.cache_clear()


@pytest.fixture
def reference_sentence():
    """The regression sentence with its IPA and Pinyin superscript renderings."""
    return {
        "text": _SENTENCE,
        "ipa_superscript": _SENTENCE_IPA_SUPERSCRIPT,
        "pinyin_superscript": _SENTENCE_PINYIN_SUPERSCRIPT,
    }
