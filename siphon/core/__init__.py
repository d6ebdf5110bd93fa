"""Tokenizer, transformer and lookup tables.

WHY: The core package holds everything with algorithmic content: the
composite tokenizer pattern, the per-syllable rendering rules, and the
phonological tables they read.

HOW: tokens.py defines the data structures, tokenizer.py builds them
from text, transformer.py renders them in a selected Format, with
pinyin.py, ipa.py and tones.py holding the per-notation rules and
tables.py the static data.

RULES:
- Everything here is a pure function of its inputs
- No I/O and no Unicode normalization; callers pass NFC text
"""
