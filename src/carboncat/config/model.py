# topmark:header:start
#
#   project      : CarbonCat
#   file         : model.py
#   file_relpath : src/carboncat/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Formatting options model and merge policy.

This module defines:
    - `Options`: an immutable, runtime snapshot read by the line engine.
    - `MutableOptions`: a tri-state builder used while layering defaults,
      config files and CLI flags; it can be frozen into `Options` and thawed
      back for edits.

Immutability:
    - `Options` is ``frozen=True``. Its ``with_*`` methods return an updated
      copy, so fluent construction never touches the original value.

TOML mapping:

    [tool.carboncat]            # or a top-level table in carboncat.toml
    number = "nonblank"         # "none" | "nonblank" | "all" (or a boolean)
    show_ends = true
    squeeze_blank = true
    show_tabs = false
    show_nonprinting = false
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Any

from carboncat.config.logging import get_logger
from carboncat.config.types import NumberingMode, RenderMode
from carboncat.core.errors import ConfigError

if TYPE_CHECKING:
    from collections.abc import Mapping

    from carboncat.config.logging import CarboncatLogger
    from carboncat.config.types import ArgsLike

logger: CarboncatLogger = get_logger(__name__)

#: Boolean option names shared by `Options`, `MutableOptions` and the TOML table.
BOOL_KEYS: tuple[str, ...] = (
    "show_ends",
    "squeeze_blank",
    "show_tabs",
    "show_nonprinting",
)

#: TOML key for the numbering mode.
NUMBER_KEY: str = "number"


# ------------------ Immutable runtime options ------------------


@dataclass(frozen=True, slots=True)
class Options:
    """Immutable formatting options for one engine run.

    Attributes:
        numbering (NumberingMode): Whether and when to emit a line-number prefix.
        show_ends (bool): Display ``$`` before each line terminator.
        squeeze_blank (bool): Collapse runs of blank output lines into one.
        show_tabs (bool): Display TAB bytes as ``^I``.
        show_nonprinting (bool): Use ``^`` and ``M-`` notation, except for LF and TAB.
    """

    numbering: NumberingMode = NumberingMode.NONE
    show_ends: bool = False
    squeeze_blank: bool = False
    show_tabs: bool = False
    show_nonprinting: bool = False

    def with_numbering(self, numbering: NumberingMode) -> Options:
        """Return a copy with ``numbering`` updated."""
        return replace(self, numbering=numbering)

    def with_show_ends(self, show_ends: bool = True) -> Options:
        """Return a copy with ``show_ends`` updated."""
        return replace(self, show_ends=show_ends)

    def with_squeeze_blank(self, squeeze_blank: bool = True) -> Options:
        """Return a copy with ``squeeze_blank`` updated."""
        return replace(self, squeeze_blank=squeeze_blank)

    def with_show_tabs(self, show_tabs: bool = True) -> Options:
        """Return a copy with ``show_tabs`` updated."""
        return replace(self, show_tabs=show_tabs)

    def with_show_nonprinting(self, show_nonprinting: bool = True) -> Options:
        """Return a copy with ``show_nonprinting`` updated."""
        return replace(self, show_nonprinting=show_nonprinting)

    def can_write_fast(self) -> bool:
        """Return True if input can be copied verbatim, without any annotation.

        This is the sole branch point between the fast copy and the line engine:
        any enabled option forces the annotated path.
        """
        return not (
            self.show_tabs
            or self.show_nonprinting
            or self.show_ends
            or self.squeeze_blank
            or self.numbering is not NumberingMode.NONE
        )

    @property
    def tab_marker(self) -> bytes:
        """Bytes written for a TAB by the non-printing renderer."""
        return b"^I" if self.show_tabs else b"\t"

    @property
    def end_of_line(self) -> bytes:
        """Bytes written for each emitted line terminator."""
        return b"$\n" if self.show_ends else b"\n"

    @property
    def render_mode(self) -> RenderMode:
        """Body renderer selected by precedence: non-printing > tabs > verbatim."""
        if self.show_nonprinting:
            return RenderMode.NONPRINTING
        if self.show_tabs:
            return RenderMode.TABS
        return RenderMode.VERBATIM

    def thaw(self) -> MutableOptions:
        """Return a mutable builder with every field set explicitly.

        Returns:
            MutableOptions: A builder initialized from this snapshot.
        """
        return MutableOptions(
            numbering=self.numbering,
            show_ends=self.show_ends,
            squeeze_blank=self.squeeze_blank,
            show_tabs=self.show_tabs,
            show_nonprinting=self.show_nonprinting,
        )

    def to_toml_dict(self) -> dict[str, Any]:
        """Convert these options into a TOML-serializable table.

        Returns:
            dict[str, Any]: Table with primitive values only.
        """
        return {
            NUMBER_KEY: self.numbering.value,
            "show_ends": self.show_ends,
            "squeeze_blank": self.squeeze_blank,
            "show_tabs": self.show_tabs,
            "show_nonprinting": self.show_nonprinting,
        }


# ------------------ Mutable builder ------------------


@dataclass
class MutableOptions:
    """Mutable builder for `Options`, suitable for config loading/merging.

    This class is merged in a **last-wins** manner: defaults, then config files
    in the order given, then CLI flags.

    Attributes:
        numbering (NumberingMode | None): See `Options`. `None` means "inherit".
        show_ends (bool | None): See `Options`. `None` means "inherit".
        squeeze_blank (bool | None): See `Options`. `None` means "inherit".
        show_tabs (bool | None): See `Options`. `None` means "inherit".
        show_nonprinting (bool | None): See `Options`. `None` means "inherit".
    """

    numbering: NumberingMode | None = None
    show_ends: bool | None = None
    squeeze_blank: bool | None = None
    show_tabs: bool | None = None
    show_nonprinting: bool | None = None

    def merge_with(self, other: MutableOptions) -> MutableOptions:
        """Return a new MutableOptions by applying ``other`` over ``self`` (last-wins).

        ``None`` fields in ``other`` do not override explicit values in ``self``.

        Args:
            other (MutableOptions): The options whose values override current ones.

        Returns:
            MutableOptions: Merged options.
        """

        def pick(current: Any, override: Any) -> Any:
            return override if override is not None else current

        return MutableOptions(
            numbering=pick(self.numbering, other.numbering),
            show_ends=pick(self.show_ends, other.show_ends),
            squeeze_blank=pick(self.squeeze_blank, other.squeeze_blank),
            show_tabs=pick(self.show_tabs, other.show_tabs),
            show_nonprinting=pick(self.show_nonprinting, other.show_nonprinting),
        )

    def resolve(self, base: Options) -> Options:
        """Resolve tri-state fields against a base frozen snapshot.

        Args:
            base (Options): Base options that provide values for unset fields.

        Returns:
            Options: A fully-resolved immutable snapshot.
        """
        return Options(
            numbering=base.numbering if self.numbering is None else self.numbering,
            show_ends=base.show_ends if self.show_ends is None else self.show_ends,
            squeeze_blank=(
                base.squeeze_blank if self.squeeze_blank is None else self.squeeze_blank
            ),
            show_tabs=base.show_tabs if self.show_tabs is None else self.show_tabs,
            show_nonprinting=(
                base.show_nonprinting if self.show_nonprinting is None else self.show_nonprinting
            ),
        )

    def freeze(self) -> Options:
        """Freeze to concrete `Options`, using the all-disabled defaults for unset fields."""
        return self.resolve(Options())

    @classmethod
    def from_toml_table(
        cls,
        tbl: Mapping[str, Any] | None,
        *,
        source: str = "<config>",
    ) -> MutableOptions:
        """Create a MutableOptions from a TOML table mapping.

        Unspecified keys become ``None`` (inherit at freeze time). Unknown keys
        are logged and ignored.

        Args:
            tbl (Mapping[str, Any] | None): Table with keys matching the TOML mapping.
            source (str): Name of the config source, used in messages.

        Returns:
            MutableOptions: Parsed options.

        Raises:
            ConfigError: If a value has the wrong type or names an unknown numbering mode.
        """
        if not tbl:
            return cls()

        for key in tbl:
            if key != NUMBER_KEY and key not in BOOL_KEYS:
                logger.warning("%s: ignoring unknown option '%s'", source, key)

        def pick_bool(key: str) -> bool | None:
            if key not in tbl:
                return None
            value = tbl[key]
            if not isinstance(value, bool):
                raise ConfigError(f"{source}: '{key}' must be a boolean, got {value!r}")
            return value

        return cls(
            numbering=_numbering_from_toml(tbl.get(NUMBER_KEY), source=source),
            show_ends=pick_bool("show_ends"),
            squeeze_blank=pick_bool("squeeze_blank"),
            show_tabs=pick_bool("show_tabs"),
            show_nonprinting=pick_bool("show_nonprinting"),
        )

    @classmethod
    def from_cli_args(cls, args: ArgsLike) -> MutableOptions:
        """Create a MutableOptions from parsed ``cat`` flags.

        Flags can only switch options on; flags that were not given stay ``None``
        so that config files still apply. Composite flags expand as follows:
        ``-A`` = ``-vET``, ``-e`` = ``-vE``, ``-t`` = ``-vT``. ``-b`` overrides ``-n``
        regardless of their order.

        Args:
            args (ArgsLike): Mapping with boolean keys ``show_all``, ``number_nonblank``,
                ``e``, ``show_ends``, ``number``, ``squeeze_blank``, ``t``,
                ``show_tabs`` and ``show_nonprinting``. Missing keys count as False.

        Returns:
            MutableOptions: Options holding only what the flags switched on.
        """
        show_all = bool(args.get("show_all"))
        e_flag = bool(args.get("e"))
        t_flag = bool(args.get("t"))

        numbering: NumberingMode | None = None
        if args.get("number_nonblank"):
            numbering = NumberingMode.NON_EMPTY
        elif args.get("number"):
            numbering = NumberingMode.ALL

        def flag(enabled: bool) -> bool | None:
            return True if enabled else None

        return cls(
            numbering=numbering,
            show_ends=flag(show_all or e_flag or bool(args.get("show_ends"))),
            squeeze_blank=flag(bool(args.get("squeeze_blank"))),
            show_tabs=flag(show_all or t_flag or bool(args.get("show_tabs"))),
            show_nonprinting=flag(
                show_all or e_flag or t_flag or bool(args.get("show_nonprinting"))
            ),
        )


def _numbering_from_toml(value: Any, *, source: str) -> NumberingMode | None:
    """Parse the ``number`` TOML value (a mode name or a boolean)."""
    if value is None:
        return None
    if isinstance(value, bool):
        return NumberingMode.ALL if value else NumberingMode.NONE
    if isinstance(value, str):
        mode = NumberingMode.from_name(value)
        if mode is not None:
            return mode
    choices = ", ".join(m.value for m in NumberingMode)
    raise ConfigError(f"{source}: '{NUMBER_KEY}' must be one of {choices}, got {value!r}")
