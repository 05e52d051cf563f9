# topmark:header:start
#
#   project      : CarbonCat
#   file         : __main__.py
#   file_relpath : src/carboncat/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running CarbonCat via ``python -m carboncat``.

It delegates directly to `carboncat.cli.main.cli`, ensuring a single,
authoritative CLI entry point regardless of how CarbonCat is launched.

Examples:
    Number the lines of two files::

        python -m carboncat -n a.txt b.txt
"""

from __future__ import annotations

from carboncat.cli.main import cli

if __name__ == "__main__":
    cli()
