# topmark:header:start
#
#   project      : CarbonCat
#   file         : __init__.py
#   file_relpath : src/carboncat/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CarbonCat package.

CarbonCat concatenates byte streams the way ``cat`` does: it copies its inputs
to one output, optionally numbering lines, marking line ends, escaping tabs and
non-printable bytes, and squeezing runs of blank lines. The output does not
depend on how the input is chunked by the I/O layer.

The typed programmatic surface lives in `carboncat.api`; the console script
is `carboncat.cli.main.cli`.
"""

from __future__ import annotations
