"""Onset and rhyme lookup into IPA."""

from __future__ import annotations

from siphon.core.tables import ONSET_IPA, RHYME_IPA
from siphon.core.tokens import Syllable
from siphon.errors import InvalidInitialError, InvalidRhymeError


def to_ipa(syllable: Syllable) -> str:
    """Map a syllable's onset and (already normalized) rhyme to IPA.

    The onset is looked up lowercased; the rhyme is looked up as is.

    Raises:
        InvalidInitialError: If the onset has no IPA entry.
        InvalidRhymeError: If the rhyme has no IPA entry.
    """
    onset = ""
    if syllable.onset is not None:
        onset = ONSET_IPA.get(syllable.onset.lower())
        if onset is None:
            raise InvalidInitialError(syllable.full)

    rhyme = RHYME_IPA.get(syllable.rhyme)
    if rhyme is None:
        raise InvalidRhymeError(syllable.full)

    return onset + rhyme
