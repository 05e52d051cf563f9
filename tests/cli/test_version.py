# topmark:header:start
#
#   project      : CarbonCat
#   file         : test_version.py
#   file_relpath : tests/cli/test_version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test: ``--version`` output."""

from __future__ import annotations

import importlib

from carboncat.cli.main import cli
from carboncat.constants import CARBONCAT_VERSION, PROGRAM_NAME
from tests.cli.conftest import assert_SUCCESS, run_cli
from tests.conftest import mark_cli


@mark_cli
def test_version_prints_program_and_version() -> None:
    """It should print ``carboncat v<version>`` and exit before reading input."""
    result = run_cli(["--version"], input_bytes=b"should not be copied")

    assert_SUCCESS(result)
    assert result.stdout == f"{PROGRAM_NAME} v{CARBONCAT_VERSION}\n"


def test_module_entry_point_is_the_cli() -> None:
    """``python -m carboncat`` runs the same command object as the console script."""
    module = importlib.import_module("carboncat.__main__")
    assert module.cli is cli
