"""Exception types raised by the tokenizer and the transformer.

WHY: Callers (the converter, the CLI, tests) need typed exceptions to tell
a malformed syllable apart from an unmapped rhyme or a bad tone digit, and
every message must name the syllable that caused it.

HOW: One base class, SiphonError, with a subclass per failure kind. Each
carries the offending syllable's original text in ``syllable``.

RULES:
- Every error aborts the whole tokenize/transform call
- Nothing here is retried or downgraded to a warning
- ``syllable`` is the matched source text, or None when no syllable applies
"""

from __future__ import annotations

from typing import Optional


class SiphonError(Exception):
    """Base class for all conversion errors."""

    def __init__(self, message: str, syllable: Optional[str] = None) -> None:
        self.syllable = syllable
        super().__init__(message)


class RhymeNotFoundError(SiphonError):
    """Raised when a syllable match captured an empty rime.

    The pattern anchors on a required rime, so this signals an internal
    inconsistency rather than bad input.
    """

    def __init__(self, syllable: str) -> None:
        super().__init__(
            "Missing vowels in the input text: {!r}".format(syllable),
            syllable,
        )


class InvalidInitialError(SiphonError):
    """Raised when an onset has no IPA mapping."""

    def __init__(self, syllable: str) -> None:
        super().__init__("The initial is not valid: {}".format(syllable), syllable)


class InvalidRhymeError(SiphonError):
    """Raised when a (normalized) rhyme has no IPA mapping."""

    def __init__(self, syllable: str) -> None:
        super().__init__("The rhyme is not valid: {}".format(syllable), syllable)


class ToneConversionError(SiphonError):
    """Raised when a tone digit is outside 0-5."""

    def __init__(self, syllable: str) -> None:
        super().__init__(
            "There are tones messed up in your input! -> {}".format(syllable),
            syllable,
        )


class PatternError(SiphonError):
    """Raised when the tokenizer pattern fails to compile."""

    def __init__(self, cause: Exception) -> None:
        self.cause = cause
        super().__init__("Could not compile tokenizer pattern: {}".format(cause))
