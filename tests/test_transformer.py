"""Unit tests for syllable and token rendering.

WHY: The transformer carries the phonological rules: which vowel takes
the tone mark, how tone numbers become contours, how onsets and rhymes
map to IPA. A mistake here shows up in print.

HOW: Tests exercise mark_tone(), the tone helpers, to_ipa() and the
format dispatch in render_syllable()/render_token() on hand-built
Syllable values, independent of the tokenizer.

RULES:
- Syllables are built with the make_syllable fixture
- For IPA cases the rhyme is given already normalized
"""

import pytest

from siphon.core.ipa import to_ipa
from siphon.core.pinyin import mark_tone, spell
from siphon.core.tones import to_superscript, tone_contour, wrap_latex
from siphon.core.tokens import (
    PunctuationToken,
    SeparatorToken,
    SpaceToken,
    SyllableToken,
)
from siphon.core.transformer import render_syllable, render_token, transform
from siphon.errors import (
    InvalidInitialError,
    InvalidRhymeError,
    ToneConversionError,
)
from siphon.formats import Format


class TestToneContour:

    @pytest.mark.parametrize("tone,contour", [
        (0, "0"), (1, "55"), (2, "35"), (3, "214"), (4, "51"), (5, "0"),
    ])
    def test_contours(self, make_syllable, tone, contour):
        assert tone_contour(make_syllable("ma", "m", "a", tone)) == contour

    def test_missing_tone_is_empty(self, make_syllable):
        assert tone_contour(make_syllable("ma", "m", "a", None)) == ""

    def test_invalid_tone_names_syllable(self, make_syllable):
        with pytest.raises(ToneConversionError) as exc_info:
            tone_contour(make_syllable("ma6", "m", "a", 6))
        assert exc_info.value.syllable == "ma6"
        assert "ma6" in str(exc_info.value)

    def test_superscript_digits(self):
        assert to_superscript("0") == "⁰"
        assert to_superscript("55") == "⁵⁵"
        assert to_superscript("35") == "³⁵"
        assert to_superscript("214") == "²¹⁴"
        assert to_superscript("51") == "⁵¹"

    def test_superscript_passes_non_digits(self):
        assert to_superscript("5x1") == "⁵x¹"
        assert to_superscript("") == ""

    def test_latex_wrapper(self):
        assert wrap_latex("214", "textsuperscript") == "\\textsuperscript{214}"
        assert wrap_latex("51", "UP") == "\\UP{51}"
        assert wrap_latex("", "UP") == ""


class TestDiacriticPlacement:
    """mark_tone() vowel priority."""

    @pytest.mark.parametrize("tone,expected", [
        (0, "zhe"), (1, "zhē"), (2, "zhé"), (3, "zhě"), (4, "zhè"),
    ])
    def test_all_tones_on_e(self, make_syllable, tone, expected):
        assert "zh" + mark_tone(make_syllable("zhe", "zh", "e", tone)) == expected

    @pytest.mark.parametrize("tone,expected", [
        (0, "diu"), (1, "diū"), (2, "diú"), (3, "diǔ"), (4, "diù"),
    ])
    def test_iu_marks_u(self, make_syllable, tone, expected):
        word, tone_text = render_syllable(
            make_syllable("diu", "d", "iu", tone), Format.PINYIN_DIACRITIC, "UP"
        )
        assert word + tone_text == expected

    @pytest.mark.parametrize("onset,rhyme,tone,expected", [
        ("x", "iao", 3, "iǎo"),
        ("g", "uo", 1, "uō"),
        ("x", "ie", 4, "iè"),
        ("g", "ui", 4, "uì"),
        ("n", "i", 3, "ǐ"),
        ("l", "v", 4, "ǜ"),
        ("n", "ü", 3, "ǚ"),
        ("l", "ve", 4, "vè"),
    ])
    def test_priority(self, make_syllable, onset, rhyme, tone, expected):
        assert mark_tone(make_syllable(onset + rhyme, onset, rhyme, tone)) == expected

    def test_neutral_and_missing_tone_leave_rhyme(self, make_syllable):
        assert mark_tone(make_syllable("ma5", "m", "a", 5)) == "a"
        assert mark_tone(make_syllable("ma0", "m", "a", 0)) == "a"
        assert mark_tone(make_syllable("ma", "m", "a", None)) == "a"

    def test_no_candidate_vowel_is_not_an_error(self, make_syllable):
        assert mark_tone(make_syllable("shi4", "sh", "r", 4)) == "r"

    def test_only_first_occurrence_is_marked(self, make_syllable):
        assert mark_tone(make_syllable("aa1", None, "aa", 1)) == "āa"

    def test_invalid_tone(self, make_syllable):
        with pytest.raises(ToneConversionError):
            mark_tone(make_syllable("ma9", "m", "a", 9))

    def test_spell_restores_u_umlaut(self):
        assert spell("l", "vè") == "lüè"
        assert spell(None, "ve") == "üe"


class TestIPALookup:

    def test_onset_and_rhyme(self, make_syllable):
        assert to_ipa(make_syllable("zhe4", "zh", "e", 4)) == "tʂɤ"
        assert to_ipa(make_syllable("hao3", "h", "ao", 3)) == "xɑw"

    def test_zero_onset(self, make_syllable):
        assert to_ipa(make_syllable("an1", None, "an", 1)) == "an"

    def test_onset_lookup_ignores_case(self, make_syllable):
        assert to_ipa(make_syllable("Zhe4", "Zh", "e", 4)) == "tʂɤ"

    def test_apical_vowels(self, make_syllable):
        assert to_ipa(make_syllable("shi4", "sh", "r", 4)) == "ʂʅ"
        assert to_ipa(make_syllable("si4", "s", "z", 4)) == "sɿ"

    def test_erhua(self, make_syllable):
        assert to_ipa(make_syllable("zher4", "zh", "er", 4)) == "tʂɤʵ"
        assert to_ipa(make_syllable("nar3", "n", "ar", 3)) == "nɐʵ"

    def test_unknown_rhyme(self, make_syllable):
        with pytest.raises(InvalidRhymeError) as exc_info:
            to_ipa(make_syllable("giai1", "g", "iai", 1))
        assert exc_info.value.syllable == "giai1"

    def test_unknown_initial(self, make_syllable):
        with pytest.raises(InvalidInitialError) as exc_info:
            to_ipa(make_syllable("va1", "v", "a", 1))
        assert exc_info.value.syllable == "va1"


class TestRenderSyllable:
    """Format dispatch in render_syllable()."""

    def test_pinyin_superscript(self, make_syllable):
        syl = make_syllable("lve4", "l", "ve", 4)
        assert render_syllable(syl, Format.PINYIN_SUPERSCRIPT, "UP") == ("lüe", "⁵¹")

    def test_pinyin_latex(self, make_syllable):
        syl = make_syllable("zhe4", "zh", "e", 4)
        assert render_syllable(syl, Format.PINYIN_LATEX, "textsuperscript") == (
            "zhe", "\\textsuperscript{51}",
        )

    def test_pinyin_diacritic_has_no_tone_text(self, make_syllable):
        syl = make_syllable("lve4", "l", "ve", 4)
        assert render_syllable(syl, Format.PINYIN_DIACRITIC, "UP") == ("lüè", "")

    def test_ipa_latex(self, make_syllable):
        syl = make_syllable("zhe3", "zh", "e", 3)
        assert render_syllable(syl, Format.IPA_LATEX, "UP") == ("tʂɤ", "\\UP{214}")

    def test_ipa_superscript(self, make_syllable):
        syl = make_syllable("zhe3", "zh", "e", 3)
        assert render_syllable(syl, Format.IPA_SUPERSCRIPT, "UP") == ("tʂɤ", "²¹⁴")

    @pytest.mark.parametrize("tone", [1, 2, 3, 4, 5])
    def test_ipa_superscript_tone_never_empty(self, make_syllable, tone):
        _, tone_text = render_syllable(
            make_syllable("ma", "m", "a", tone), Format.IPA_SUPERSCRIPT, "UP"
        )
        assert tone_text

    @pytest.mark.parametrize("fmt", list(Format))
    def test_untoned_syllable_has_empty_tone_text(self, make_syllable, fmt):
        _, tone_text = render_syllable(make_syllable("de", "d", "e", None), fmt, "UP")
        assert tone_text == ""

    @pytest.mark.parametrize("fmt", list(Format))
    def test_invalid_tone_fails_in_every_format(self, make_syllable, fmt):
        with pytest.raises(ToneConversionError):
            render_syllable(make_syllable("ma8", "m", "a", 8), fmt, "UP")

    def test_pinyin_formats_skip_ipa_tables(self, make_syllable):
        syl = make_syllable("giai1", "g", "iai", 1)
        assert render_syllable(syl, Format.PINYIN_SUPERSCRIPT, "UP") == ("giai", "⁵⁵")


class TestRenderToken:

    def test_separator_kept_only_for_diacritics(self):
        for fmt in Format:
            expected = "'" if fmt is Format.PINYIN_DIACRITIC else ""
            assert render_token(SeparatorToken(), fmt, "UP") == expected

    @pytest.mark.parametrize("fmt", list(Format))
    def test_space_and_punctuation(self, fmt):
        assert render_token(SpaceToken(), fmt, "UP") == " "
        assert render_token(PunctuationToken("?"), fmt, "UP") == "?"

    def test_transform_keeps_order(self, make_syllable):
        tokens = [
            SyllableToken(make_syllable("ni3", "n", "i", 3)),
            PunctuationToken(","),
            SpaceToken(),
            SyllableToken(make_syllable("hao3", "h", "ao", 3)),
        ]
        assert transform(tokens, Format.PINYIN_DIACRITIC, "UP") == "nǐ, hǎo"

    def test_one_bad_syllable_fails_whole_transform(self, make_syllable):
        tokens = [
            SyllableToken(make_syllable("ni3", "n", "i", 3)),
            SpaceToken(),
            SyllableToken(make_syllable("hao7", "h", "ao", 7)),
        ]
        with pytest.raises(ToneConversionError):
            transform(tokens, Format.IPA_SUPERSCRIPT, "UP")
