"""Static phonological lookup tables.

WHY: The transformer maps Pinyin onsets, rhymes and tones onto IPA,
tone contours and diacritic glyphs. Keeping the tables as plain data,
separate from the logic, makes them easy to audit against a phonology
reference and to extend.

HOW: Module-level dicts, built once at import and never mutated.

RULES:
- ONSET_IPA keys are lowercase; callers lowercase the onset before lookup
- RHYME_IPA keys are rhymes *after* IPA normalization (see tokenizer),
  plus the ``v``-spelled variants of the ü finals
- ``z`` and ``r`` stand for the apical ("buzzing") vowels after
  z/c/s and zh/ch/sh/r respectively
- Every ü in this module is the precomposed U+00FC
"""

from __future__ import annotations

# ---------------------------------------------------------------------------
# Onsets (initials)
# ---------------------------------------------------------------------------

ONSET_IPA: dict[str, str] = {
    "b": "p",
    "p": "pʰ",
    "m": "m",
    "f": "f",
    "d": "t",
    "t": "tʰ",
    "n": "n",
    "l": "l",
    "g": "k",
    "k": "kʰ",
    "h": "x",
    "j": "tɕ",
    "q": "tɕʰ",
    "x": "ɕ",
    "zh": "tʂ",
    "ch": "tʂʰ",
    "sh": "ʂ",
    "r": "ʐ",
    "z": "ts",
    "c": "tsʰ",
    "s": "s",
}

# ---------------------------------------------------------------------------
# Rhymes (finals)
# ---------------------------------------------------------------------------

RHYME_IPA: dict[str, str] = {
    # a
    "a": "ɑ",
    "ai": "aj",
    "ao": "ɑw",
    "an": "an",
    "ang": "ɑŋ",
    # e
    "e": "ɤ",
    "ei": "ej",
    "en": "ən",
    "eng": "əŋ",
    # o
    "o": "wʌ",
    "uo": "wʌ",
    "ou": "ɤw",
    "ong": "ʊŋ",
    # i
    "i": "i",
    "ia": "jɑ",
    "iao": "jɑw",
    "ie": "jɛ",
    "iu": "jɤw",
    "iou": "jɤw",
    "ian": "jɛn",
    "iang": "jɑŋ",
    "in": "in",
    "ing": "iŋ",
    "iong": "jʊŋ",
    # u
    "u": "u",
    "ua": "wɑ",
    "uai": "waj",
    "uan": "wan",
    "uang": "wɑŋ",
    "ui": "wej",
    "uei": "wej",
    "un": "wən",
    "uen": "wən",
    "ueng": "wəŋ",
    # ü
    "ü": "y",
    "v": "y",
    "üe": "ɥœ",
    "ve": "ɥœ",
    "üan": "ɥɛn",
    "van": "ɥɛn",
    "ün": "yn",
    "vn": "yn",
    "üen": "yn",
    # apical -i
    "z": "ɿ",
    "r": "ʅ",

    # Erhua
    "ar": "ɐʵ",
    "air": "ɐʵ",
    "aor": "ɑʊʵ",
    "anr": "ɐʵ",
    "angr": "ɑ̃ʵ",
    "er": "ɤʵ",
    "eir": "ɚ",
    "enr": "ɚ",
    "engr": "ɤ̃ʵ",
    "or": "wɔʵ",
    "uor": "wɔʵ",
    "our": "ɤʊʵ",
    "ongr": "ʊ̃ʵ",
    "ir": "jɚ",
    "iar": "jɐʵ",
    "iaor": "jɑʊʵ",
    "ier": "jɛʵ",
    "iur": "jɤʊʵ",
    "iour": "jɤʊʵ",
    "ianr": "jɐʵ",
    "iangr": "jɑ̃ʵ",
    "inr": "jɚ",
    "ingr": "jɤ̃ʵ",
    "iongr": "jʊ̃ʵ",
    "ur": "uʵ",
    "uar": "wɐʵ",
    "uair": "wɐʵ",
    "uanr": "wɐʵ",
    "uangr": "wɑ̃ʵ",
    "uir": "wɚ",
    "ueir": "wɚ",
    "unr": "wɚ",
    "uenr": "wɚ",
    "uengr": "wɤ̃ʵ",
    "ür": "ɥɚ",
    "üer": "ɥœʵ",
    "üanr": "ɥɐʵ",
    "ünr": "ɥɚ",
    "üenr": "ɥɚ",
    "vr": "ɥɚ",
    "ver": "ɥœʵ",
    "vanr": "ɥɐʵ",
    "vnr": "ɥɚ",
    # apical -i + r
    "rr": "ɚ",
    "zr": "ɚ",
}

# ---------------------------------------------------------------------------
# Tones
# ---------------------------------------------------------------------------

TONE_CONTOURS: dict[int, str] = {
    0: "0",
    1: "55",
    2: "35",
    3: "214",
    4: "51",
    5: "0",
}
"""Tone number → Chao tone-letter contour. 0 and 5 both denote the neutral tone."""

TONE_DIACRITICS: dict[str, tuple[str, str, str, str]] = {
    "a": ("ā", "á", "ǎ", "à"),
    "e": ("ē", "é", "ě", "è"),
    "o": ("ō", "ó", "ǒ", "ò"),
    "i": ("ī", "í", "ǐ", "ì"),
    "u": ("ū", "ú", "ǔ", "ù"),
    "ü": ("ǖ", "ǘ", "ǚ", "ǜ"),
    "v": ("ǖ", "ǘ", "ǚ", "ǜ"),
}
"""Vowel → marked forms for tones 1-4. ``v`` is the keyboard stand-in for ü."""

SUPERSCRIPT_DIGITS: dict[str, str] = dict(zip("0123456789", "⁰¹²³⁴⁵⁶⁷⁸⁹"))
