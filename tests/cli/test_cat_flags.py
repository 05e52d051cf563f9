# topmark:header:start
#
#   project      : CarbonCat
#   file         : test_cat_flags.py
#   file_relpath : tests/cli/test_cat_flags.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI test: the ``cat`` formatting flags and source handling.

Standard output must contain exactly the rendered bytes, with nothing else
mixed in.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from tests.cli.conftest import assert_SUCCESS, run_cli, run_cli_in
from tests.conftest import mark_cli, parametrize

if TYPE_CHECKING:
    from pathlib import Path

    from click.testing import Result


@mark_cli
def test_no_flags_copies_stdin_verbatim() -> None:
    data = b"a\tb\r\n\x00\xff\n"
    result: Result = run_cli([], input_bytes=data)
    assert_SUCCESS(result)
    assert result.stdout_bytes == data


@mark_cli
@parametrize(
    ("argv", "expected"),
    [
        (["-n"], b"     1\ta\n     2\t\n     3\tb\n"),
        (["--number"], b"     1\ta\n     2\t\n     3\tb\n"),
        (["-b"], b"     1\ta\n\n     2\tb\n"),
        (["-b", "-n"], b"     1\ta\n\n     2\tb\n"),
        (["-n", "-b"], b"     1\ta\n\n     2\tb\n"),
        (["-E"], b"a$\n$\nb$\n"),
        (["-s"], b"a\n\nb\n"),
    ],
)
def test_numbering_and_ends(argv: list[str], expected: bytes) -> None:
    """Numbering flags and ``-E``; ``-b`` wins over ``-n`` in any order."""
    result: Result = run_cli(argv, input_bytes=b"a\n\nb\n")
    assert_SUCCESS(result)
    assert result.stdout_bytes == expected


@mark_cli
@parametrize(
    ("argv", "expected"),
    [
        (["-T"], b"x^Iy\x01\r\n"),
        (["-v"], b"x\ty^A^M\n"),
        (["-A"], b"x^Iy^A^M$\n"),
        (["--show-all"], b"x^Iy^A^M$\n"),
        (["-e"], b"x\ty^A^M$\n"),
        (["-t"], b"x^Iy^A^M\n"),
        (["-vET"], b"x^Iy^A^M$\n"),
        (["-E"], b"x\ty\x01^M$\n"),
    ],
)
def test_escape_flags(argv: list[str], expected: bytes) -> None:
    """Composite flags expand to their documented combinations."""
    result: Result = run_cli(argv, input_bytes=b"x\ty\x01\r\n")
    assert_SUCCESS(result)
    assert result.stdout_bytes == expected


@mark_cli
def test_u_is_accepted_and_ignored() -> None:
    result: Result = run_cli(["-u"], input_bytes=b"abc")
    assert_SUCCESS(result)
    assert result.stdout_bytes == b"abc"


@mark_cli
def test_files_and_stdin_in_order(tmp_path: Path) -> None:
    (tmp_path / "f").write_bytes(b"first\n")
    (tmp_path / "g").write_bytes(b"last\n")
    result: Result = run_cli_in(tmp_path, ["-n", "f", "-", "g"], input_bytes=b"middle\n")
    assert_SUCCESS(result)
    assert result.stdout_bytes == b"     1\tfirst\n     2\tmiddle\n     3\tlast\n"


@mark_cli
def test_numbering_continues_across_files(tmp_path: Path) -> None:
    (tmp_path / "a").write_bytes(b"one")
    (tmp_path / "b").write_bytes(b" two\n\n\n\nthree\n")
    result: Result = run_cli_in(tmp_path, ["-ns", "a", "b"])
    assert_SUCCESS(result)
    assert result.stdout_bytes == b"     1\tone two\n     2\t\n     3\tthree\n"


@mark_cli
def test_crlf_split_across_files(tmp_path: Path) -> None:
    (tmp_path / "a").write_bytes(b"x\r")
    (tmp_path / "b").write_bytes(b"\n")
    result: Result = run_cli_in(tmp_path, ["-E", "a", "b"])
    assert_SUCCESS(result)
    assert result.stdout_bytes == b"x^M$\n"


@mark_cli
def test_stdout_carries_no_diagnostics() -> None:
    result: Result = run_cli(["--verbose", "--verbose", "-n"], input_bytes=b"a\n")
    assert_SUCCESS(result)
    assert result.stdout_bytes == b"     1\ta\n"


@mark_cli
def test_help_lists_cat_flags() -> None:
    result: Result = run_cli(["--help"])
    assert_SUCCESS(result)
    for flag in ("--show-all", "--number-nonblank", "--show-ends", "--squeeze-blank", "-u"):
        assert flag in result.output
