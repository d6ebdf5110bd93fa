"""Output formats and their command-line names.

WHY: The CLI, the converter and the transformer all need the same closed
set of output notations, and users type them under several names
("ipa", "latex", "tex" all mean IPA with LaTeX tone numbers).

HOW: Format is an Enum whose value is the canonical short name.
FORMAT_ALIASES maps every accepted spelling (canonical names included)
to its member; Format.from_name() does the case-insensitive lookup.

RULES:
- Exactly five formats; adding one means updating the transformer dispatch
- Names and aliases are lowercase; lookup lowercases the input
- Unknown names raise ValueError listing the canonical names
"""

from __future__ import annotations

import enum


class Format(enum.Enum):
    """Transcription format of the output text."""

    PINYIN_DIACRITIC = "dia"
    """Pinyin with diacritics, e.g. ``zhè``."""

    PINYIN_SUPERSCRIPT = "pysup"
    """Pinyin with superscript tone contour, e.g. ``zhe⁵¹``."""

    PINYIN_LATEX = "num"
    """Pinyin with the contour in a LaTeX command, e.g. ``zhe\\textsuperscript{51}``."""

    IPA_LATEX = "ipa"
    """IPA with the contour in a LaTeX command, e.g. ``tʂɤ\\textsuperscript{51}``."""

    IPA_SUPERSCRIPT = "sup"
    """IPA with superscript tone contour, e.g. ``tʂɤ⁵¹``."""

    @property
    def is_ipa(self) -> bool:
        return self in (Format.IPA_LATEX, Format.IPA_SUPERSCRIPT)

    @property
    def is_latex(self) -> bool:
        return self in (Format.PINYIN_LATEX, Format.IPA_LATEX)

    @classmethod
    def from_name(cls, name: str) -> "Format":
        """Resolve a format name or alias, ignoring case.

        Raises:
            ValueError: If the name matches no format.
        """
        key = name.strip().lower()
        if key in FORMAT_ALIASES:
            return FORMAT_ALIASES[key]
        raise ValueError(
            "Unknown format '{}'. Available: {}".format(
                name, ", ".join(f.value for f in cls)
            )
        )


FORMAT_ALIASES: dict[str, Format] = {
    # Pinyin with diacritics
    "dia": Format.PINYIN_DIACRITIC,
    "pydia": Format.PINYIN_DIACRITIC,
    "pinyindia": Format.PINYIN_DIACRITIC,
    "diacritic": Format.PINYIN_DIACRITIC,
    "pinyindiacritic": Format.PINYIN_DIACRITIC,
    # Pinyin with superscript numbers
    "pysup": Format.PINYIN_SUPERSCRIPT,
    "pinyinsup": Format.PINYIN_SUPERSCRIPT,
    "pinyinsuper": Format.PINYIN_SUPERSCRIPT,
    "pinyinsuperscript": Format.PINYIN_SUPERSCRIPT,
    # Pinyin with LaTeX-wrapped numbers
    "num": Format.PINYIN_LATEX,
    "number": Format.PINYIN_LATEX,
    "pynum": Format.PINYIN_LATEX,
    "pylatex": Format.PINYIN_LATEX,
    "pinyinlatex": Format.PINYIN_LATEX,
    # IPA with LaTeX-wrapped numbers
    "ipa": Format.IPA_LATEX,
    "ipatex": Format.IPA_LATEX,
    "ipalatex": Format.IPA_LATEX,
    "tex": Format.IPA_LATEX,
    "latex": Format.IPA_LATEX,
    # IPA with superscript numbers
    "sup": Format.IPA_SUPERSCRIPT,
    "ipasup": Format.IPA_SUPERSCRIPT,
    "ipasuper": Format.IPA_SUPERSCRIPT,
    "super": Format.IPA_SUPERSCRIPT,
    "superscript": Format.IPA_SUPERSCRIPT,
}
