# topmark:header:start
#
#   project      : CarbonCat
#   file         : constants.py
#   file_relpath : src/carboncat/constants.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CarbonCat Constants."""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as get_version

try:
    CARBONCAT_VERSION: str = get_version("carboncat")
except PackageNotFoundError:  # running from a source tree without installation
    CARBONCAT_VERSION = "0.0.0"

PROGRAM_NAME: str = "carboncat"

#: Name that designates standard input in a source list.
STDIN_NAME: str = "-"

#: Read size for the verbatim fast path.
FAST_CHUNK_SIZE: int = 64 * 1024

#: Read size for the annotated line engine.
LINE_CHUNK_SIZE: int = 31 * 1024

#: Width of the right-justified line-number field (followed by a TAB).
LINE_NUMBER_WIDTH: int = 6
