# topmark:header:start
#
#   project      : CarbonCat
#   file         : test_options.py
#   file_relpath : tests/config/test_options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for `Options` / `MutableOptions`: setters, merging and flag expansion."""

from __future__ import annotations

import dataclasses
from typing import Any

import pytest

from carboncat.config import MutableOptions, NumberingMode, Options, RenderMode
from carboncat.core.errors import ConfigError


def test_defaults_select_fast_path() -> None:
    options = Options()
    assert options.numbering is NumberingMode.NONE
    assert options.can_write_fast()
    assert options.render_mode is RenderMode.VERBATIM
    assert options.end_of_line == b"\n"
    assert options.tab_marker == b"\t"


@pytest.mark.parametrize(
    "options",
    [
        Options(numbering=NumberingMode.ALL),
        Options(numbering=NumberingMode.NON_EMPTY),
        Options(show_ends=True),
        Options(squeeze_blank=True),
        Options(show_tabs=True),
        Options(show_nonprinting=True),
    ],
)
def test_any_option_disables_fast_path(options: Options) -> None:
    assert not options.can_write_fast()


def test_render_mode_precedence() -> None:
    assert Options(show_tabs=True).render_mode is RenderMode.TABS
    both = Options(show_tabs=True, show_nonprinting=True)
    assert both.render_mode is RenderMode.NONPRINTING
    assert both.tab_marker == b"^I"
    assert Options(show_ends=True).end_of_line == b"$\n"


def test_with_setters_return_copies() -> None:
    base = Options()
    changed = (
        base.with_numbering(NumberingMode.ALL)
        .with_show_ends()
        .with_squeeze_blank()
        .with_show_tabs()
        .with_show_nonprinting()
    )
    assert base == Options()
    assert changed == Options(
        numbering=NumberingMode.ALL,
        show_ends=True,
        squeeze_blank=True,
        show_tabs=True,
        show_nonprinting=True,
    )
    assert changed.with_show_ends(False).show_ends is False


def test_options_are_frozen() -> None:
    with pytest.raises(dataclasses.FrozenInstanceError):
        Options().show_ends = True  # type: ignore[misc]


def test_thaw_freeze_roundtrip() -> None:
    options = Options(numbering=NumberingMode.NON_EMPTY, squeeze_blank=True)
    assert options.thaw().freeze() == options


def test_merge_is_last_wins_and_none_inherits() -> None:
    low = MutableOptions(numbering=NumberingMode.ALL, show_ends=True)
    high = MutableOptions(show_ends=False, show_tabs=True)
    merged = low.merge_with(high)
    assert merged == MutableOptions(
        numbering=NumberingMode.ALL,
        show_ends=False,
        show_tabs=True,
    )


def test_resolve_against_base() -> None:
    base = Options(show_ends=True, squeeze_blank=True)
    resolved = MutableOptions(squeeze_blank=False).resolve(base)
    assert resolved == Options(show_ends=True, squeeze_blank=False)


def test_to_toml_dict() -> None:
    table = Options(numbering=NumberingMode.NON_EMPTY, show_tabs=True).to_toml_dict()
    assert table == {
        "number": "nonblank",
        "show_ends": False,
        "squeeze_blank": False,
        "show_tabs": True,
        "show_nonprinting": False,
    }
    assert MutableOptions.from_toml_table(table).freeze() == Options(
        numbering=NumberingMode.NON_EMPTY, show_tabs=True
    )


@pytest.mark.parametrize(
    ("name", "expected"),
    [
        ("all", NumberingMode.ALL),
        ("ALL", NumberingMode.ALL),
        ("none", NumberingMode.NONE),
        ("nonblank", NumberingMode.NON_EMPTY),
        ("non-empty", NumberingMode.NON_EMPTY),
        ("non_empty", NumberingMode.NON_EMPTY),
        ("nonempty", NumberingMode.NON_EMPTY),
        ("bogus", None),
        (None, None),
    ],
)
def test_numbering_from_name(name: str | None, expected: NumberingMode | None) -> None:
    assert NumberingMode.from_name(name) is expected


@pytest.mark.parametrize(
    ("value", "expected"),
    [
        ("all", NumberingMode.ALL),
        ("nonblank", NumberingMode.NON_EMPTY),
        (True, NumberingMode.ALL),
        (False, NumberingMode.NONE),
    ],
)
def test_from_toml_table_number(value: Any, expected: NumberingMode) -> None:
    assert MutableOptions.from_toml_table({"number": value}).numbering is expected


@pytest.mark.parametrize(
    "table",
    [
        {"number": "sometimes"},
        {"number": 3},
        {"show_ends": "yes"},
        {"squeeze_blank": 1},
    ],
)
def test_from_toml_table_rejects_bad_values(table: dict[str, Any]) -> None:
    with pytest.raises(ConfigError) as excinfo:
        MutableOptions.from_toml_table(table, source="demo.toml")
    assert str(excinfo.value).startswith("demo.toml: ")


def test_from_toml_table_ignores_unknown_keys(caplog: pytest.LogCaptureFixture) -> None:
    with caplog.at_level("WARNING"):
        m = MutableOptions.from_toml_table({"colour": True, "show_tabs": True}, source="x.toml")
    assert m == MutableOptions(show_tabs=True)
    assert "colour" in caplog.text


def test_from_toml_table_empty() -> None:
    assert MutableOptions.from_toml_table(None) == MutableOptions()
    assert MutableOptions.from_toml_table({}) == MutableOptions()


@pytest.mark.parametrize(
    ("flags", "expected"),
    [
        ({}, Options()),
        ({"show_all": True}, Options(show_ends=True, show_tabs=True, show_nonprinting=True)),
        ({"e": True}, Options(show_ends=True, show_nonprinting=True)),
        ({"t": True}, Options(show_tabs=True, show_nonprinting=True)),
        ({"number": True}, Options(numbering=NumberingMode.ALL)),
        ({"number_nonblank": True}, Options(numbering=NumberingMode.NON_EMPTY)),
        (
            {"number": True, "number_nonblank": True},
            Options(numbering=NumberingMode.NON_EMPTY),
        ),
        ({"squeeze_blank": True, "show_tabs": True}, Options(squeeze_blank=True, show_tabs=True)),
    ],
)
def test_from_cli_args(flags: dict[str, bool], expected: Options) -> None:
    assert MutableOptions.from_cli_args(flags).freeze() == expected


def test_cli_flags_do_not_unset_config_values() -> None:
    from_config = MutableOptions(squeeze_blank=True, numbering=NumberingMode.ALL)
    merged = from_config.merge_with(MutableOptions.from_cli_args({"show_ends": True}))
    assert merged.freeze() == Options(
        numbering=NumberingMode.ALL, squeeze_blank=True, show_ends=True
    )
