"""Configuration defaults and .env loading.

WHY: Typesetters usually convert a whole manuscript with the same
notation and the same LaTeX macro. Letting them set those once in a
.env file (or the environment) saves repeating -f/-r on every call.

HOW: python-dotenv loads the .env file on import. Defaults are read
from the environment into module-level constants that the CLI uses as
argparse defaults.

RULES:
- SIPHON_FORMAT: any format name or alias (default "dia")
- SIPHON_LATEX_WRAPPER: LaTeX command name without backslash
  (default "textsuperscript")
- SIPHON_DEBUG: "true" enables debug output (default "false")
- Explicit CLI flags always win over these defaults
"""

from __future__ import annotations

import os

from dotenv import load_dotenv

# Load .env from the working directory (where the command is run from)
load_dotenv()

DEFAULT_FORMAT = os.getenv("SIPHON_FORMAT", "dia")
DEFAULT_LATEX_WRAPPER = os.getenv("SIPHON_LATEX_WRAPPER", "textsuperscript")
DEFAULT_DEBUG = os.getenv("SIPHON_DEBUG", "false").strip().lower() == "true"

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"
"""Format string for the CLI's stderr log handler."""
