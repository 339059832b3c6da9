# topmark:header:start
#
#   project      : NumStrFmt
#   file         : model.py
#   file_relpath : src/numstrfmt/config/model.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Configuration model for NumStrFmt.

Two classes split the lifecycle of a configuration:

* `MutableFormatConfig` is the builder. Its options are tri-state
  (``None`` means "inherit"), so layers merge non-destructively in the order
  defaults → config files → CLI/API arguments (last wins).
* `FormatConfig` is the frozen, fully resolved snapshot returned by
  `MutableFormatConfig.freeze()`. Its symbols, field and filler settings are
  concrete and validated.

Symbol resolution at freeze time:
    1. Start from the named ``preset`` (NOP when unset).
    2. A ``currency`` (with ``currency_leading``) replaces it with the simple
       currency layout.
    3. Explicit ``[symbols.positive|negative|zero]`` tables replace the spec
       of their sign class.

A layer that sets ``preset`` or ``currency`` discards the per-sign tables of
the layers below it. Setting ``preset`` also discards a lower ``currency``.

Bad user values never raise here: they are recorded in the config's
`DiagnosticLog` and the offending value is ignored.

TOML mapping:

    [symbols]
    preset = "us"
    currency = "$"
    currency_leading = true

    [symbols.negative]
    leading = "("
    trailing = ")"

    [field]
    length = 12
    justify = "right"

    [filler]
    chars = "-"
    count = 10
"""

from __future__ import annotations

from dataclasses import dataclass, field, fields
from pathlib import Path
from typing import TYPE_CHECKING, Any

from numstrfmt.config.io import (
    TomlTable,
    get_int_value_or_none,
    get_string_value_or_none,
    get_table_value,
    is_toml_table,
    load_defaults_dict,
    load_toml_dict,
)
from numstrfmt.config.keys import Toml
from numstrfmt.config.logging import get_logger
from numstrfmt.constants import AUTO_FIELD_LENGTH
from numstrfmt.core.diagnostics import DiagnosticLog, FrozenDiagnosticLog
from numstrfmt.core.errors import InvalidFillerError, InvalidSymbolSpecError, UnknownPresetError
from numstrfmt.rendering.number_string import format_number_string
from numstrfmt.symbols.number_symbol_spec import NumberSymbolSpec
from numstrfmt.symbols.presets import get_preset
from numstrfmt.symbols.symbols_spec import NumberSymbolsSpec
from numstrfmt.symbols.types import TextJustify
from numstrfmt.text.filler_format import TextFillerFieldFormat

if TYPE_CHECKING:
    from collections.abc import Iterable, Mapping

    from numstrfmt.config.logging import NumStrLogger
    from numstrfmt.rendering.number_string import NumberLike

logger: NumStrLogger = get_logger(__name__)

DEFAULTS_SOURCE = "<defaults>"

_DEFAULT_FILLER_CHARS = "-"
_DEFAULT_FILLER_COUNT = 10

_KNOWN_SECTIONS = (Toml.SECTION_SYMBOLS, Toml.SECTION_FIELD, Toml.SECTION_FILLER)


def _int_arg(
    args: Mapping[str, Any], key: str, diagnostics: DiagnosticLog, *, src: str
) -> int | None:
    """Return ``args[key]`` when it is an integer; report any other non-``None`` value."""
    value = args.get(key)
    if value is None:
        return None
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    diagnostics.add_error(f"{src}: {key} must be an integer, got {value!r}")
    return None


@dataclass(frozen=True, slots=True)
class FormatConfig:
    """Immutable, fully resolved formatting configuration.

    Attributes:
        preset (str | None): Name of the preset the symbols started from.
        currency (str | None): Simple currency symbol, when one was configured.
        symbols (NumberSymbolsSpec): Resolved positive/negative/zero symbols.
            Treat as read-only; use `thaw()` to derive a modified config.
        field_length (int): Width of the number field (``-1`` = content width).
        justify (TextJustify): Justification inside the number field.
        filler (TextFillerFieldFormat): Filler field with margins.
        config_files (tuple[str, ...]): Sources merged into this config, in order.
        diagnostics (FrozenDiagnosticLog): Problems found while building it.
    """

    preset: str | None
    currency: str | None
    symbols: NumberSymbolsSpec
    field_length: int
    justify: TextJustify
    filler: TextFillerFieldFormat
    config_files: tuple[str, ...] = ()
    diagnostics: FrozenDiagnosticLog = field(default_factory=FrozenDiagnosticLog)

    def format(self, value: NumberLike) -> str:
        """Render ``value`` with this configuration's symbols and field settings."""
        return format_number_string(
            value,
            self.symbols,
            field_length=self.field_length,
            justify=self.justify,
        )

    def thaw(self) -> MutableFormatConfig:
        """Return a mutable builder that freezes back to an equal config."""
        return MutableFormatConfig(
            preset=self.preset,
            currency=self.currency,
            sign_tables={
                name: self.symbols.spec_for_name(name).copy_out() for name in Toml.SIGN_TABLES
            },
            field_length=self.field_length,
            justify=self.justify,
            filler_chars=self.filler.filler.filler_chars,
            filler_count=self.filler.filler.repeat_count,
            left_margin=self.filler.left_margin,
            right_margin=self.filler.right_margin,
            config_files=list(self.config_files),
            diagnostics=DiagnosticLog.from_iterable(self.diagnostics),
        )

    def to_toml_dict(self) -> TomlTable:
        """Serialize the resolved configuration to a TOML-friendly dict.

        The sign tables are always written out, so the output reproduces the
        symbols even when the preset registry changes.
        """
        symbols: TomlTable = {}
        if self.preset is not None:
            symbols[Toml.KEY_PRESET] = self.preset
        symbols.update(self.symbols.to_toml_table())
        return {
            Toml.SECTION_SYMBOLS: symbols,
            Toml.SECTION_FIELD: {
                Toml.KEY_LENGTH: self.field_length,
                Toml.KEY_JUSTIFY: self.justify.key,
            },
            Toml.SECTION_FILLER: self.filler.to_toml_table(),
        }


@dataclass
class MutableFormatConfig:
    """Mutable builder for `FormatConfig`, merged last-wins across layers.

    Attributes:
        preset (str | None): Named symbol preset.
        currency (str | None): Simple currency symbol; ``""`` selects the simple
            signed-number layout.
        currency_leading (bool | None): Place the simple currency before the digits.
        sign_tables (dict[str, NumberSymbolSpec]): Explicit specs keyed by
            ``"positive"``, ``"negative"`` or ``"zero"``.
        field_length (int | None): Number field width.
        justify (TextJustify | None): Justification in the number field.
        filler_chars (str | None): Filler characters.
        filler_count (int | None): Filler repeat count.
        left_margin (str | None): Filler left margin.
        right_margin (str | None): Filler right margin.
        config_files (list[str]): Sources merged so far.
        diagnostics (DiagnosticLog): Problems found so far.
    """

    preset: str | None = None
    currency: str | None = None
    currency_leading: bool | None = None
    sign_tables: dict[str, NumberSymbolSpec] = field(default_factory=lambda: {})
    field_length: int | None = None
    justify: TextJustify | None = None
    filler_chars: str | None = None
    filler_count: int | None = None
    left_margin: str | None = None
    right_margin: str | None = None
    config_files: list[str] = field(default_factory=lambda: [])
    diagnostics: DiagnosticLog = field(default_factory=DiagnosticLog)

    # ---- construction ----

    @classmethod
    def from_defaults(cls) -> MutableFormatConfig:
        """Return a builder initialized from the bundled default TOML."""
        return cls.from_toml_dict(load_defaults_dict(), config_file=DEFAULTS_SOURCE)

    @classmethod
    def from_toml_file(cls, path: Path | str) -> MutableFormatConfig:
        """Return a builder from a TOML file (``pyproject.toml`` uses ``[tool.numstrfmt]``)."""
        p = Path(path)
        diagnostics = DiagnosticLog()
        data = load_toml_dict(p, diagnostics=diagnostics)
        cfg = cls.from_toml_dict(data, config_file=str(p))
        cfg.diagnostics = DiagnosticLog.from_iterable([*diagnostics, *cfg.diagnostics])
        return cfg

    @classmethod
    def from_toml_dict(
        cls,
        data: Mapping[str, Any],
        *,
        config_file: str | None = None,
    ) -> MutableFormatConfig:
        """Parse a configuration table.

        Args:
            data (Mapping[str, Any]): Parsed TOML.
            config_file (str | None): Name of the source, recorded in
                ``config_files`` and used in diagnostics.

        Returns:
            MutableFormatConfig: The parsed layer; unset keys stay ``None``.
        """
        cfg = cls()
        src = config_file or "<dict>"
        if config_file is not None:
            cfg.config_files.append(config_file)
        table: TomlTable = dict(data)

        for key in table:
            if key not in _KNOWN_SECTIONS:
                cfg.diagnostics.add_warning(f"{src}: unknown section [{key}] ignored")

        cfg._parse_symbols(get_table_value(table, Toml.SECTION_SYMBOLS), src)
        cfg._parse_field(get_table_value(table, Toml.SECTION_FIELD), src)
        cfg._parse_filler(get_table_value(table, Toml.SECTION_FILLER), src)
        logger.debug("Parsed config layer %s: %r", src, cfg)
        return cfg

    def _parse_symbols(self, tbl: TomlTable, src: str) -> None:
        where = f"{src}: {Toml.SECTION_SYMBOLS}"
        preset = get_string_value_or_none(
            tbl, Toml.KEY_PRESET, where=where, diagnostics=self.diagnostics
        )
        if preset is not None:
            self.set_preset(preset, src=src)

        currency = get_string_value_or_none(
            tbl, Toml.KEY_CURRENCY, where=where, diagnostics=self.diagnostics
        )
        if currency is not None:
            self.set_currency(currency, src=src)

        leading = tbl.get(Toml.KEY_CURRENCY_LEADING)
        if isinstance(leading, bool):
            self.currency_leading = leading
        elif leading is not None:
            self.diagnostics.add_warning(
                f"Ignoring [{where}].{Toml.KEY_CURRENCY_LEADING}: expected a boolean"
            )

        for name in Toml.SIGN_TABLES:
            sub = tbl.get(name)
            if sub is None:
                continue
            if not is_toml_table(sub):
                self.diagnostics.add_warning(f"Ignoring [{where}].{name}: expected a table")
                continue
            try:
                self.sign_tables[name] = NumberSymbolSpec.from_toml_table(sub)
            except InvalidSymbolSpecError as exc:
                self.diagnostics.add_error(f"{src}: [symbols.{name}] {exc}")

    def _parse_field(self, tbl: TomlTable, src: str) -> None:
        where = f"{src}: {Toml.SECTION_FIELD}"
        length = get_int_value_or_none(
            tbl, Toml.KEY_LENGTH, where=where, diagnostics=self.diagnostics
        )
        if length is not None:
            self.set_field_length(length, src=src)

        justify = get_string_value_or_none(
            tbl, Toml.KEY_JUSTIFY, where=where, diagnostics=self.diagnostics
        )
        if justify is not None:
            self.set_justify(justify, src=src)

    def _parse_filler(self, tbl: TomlTable, src: str) -> None:
        where = f"{src}: {Toml.SECTION_FILLER}"
        diags = self.diagnostics
        chars = get_string_value_or_none(tbl, Toml.KEY_CHARS, where=where, diagnostics=diags)
        if chars is not None:
            self.filler_chars = chars
        count = get_int_value_or_none(tbl, Toml.KEY_COUNT, where=where, diagnostics=diags)
        if count is not None:
            self.filler_count = count
        left = get_string_value_or_none(tbl, Toml.KEY_LEFT_MARGIN, where=where, diagnostics=diags)
        if left is not None:
            self.left_margin = left
        right = get_string_value_or_none(
            tbl, Toml.KEY_RIGHT_MARGIN, where=where, diagnostics=diags
        )
        if right is not None:
            self.right_margin = right

    # ---- validated setters ----

    def set_preset(self, name: str, *, src: str = "<args>") -> bool:
        """Select a named preset; unknown names are reported and ignored."""
        try:
            get_preset(name)
        except UnknownPresetError as exc:
            self.diagnostics.add_error(f"{src}: {exc}")
            return False
        self.preset = name
        return True

    def set_currency(self, currency: str, *, src: str = "<args>") -> bool:
        """Set the simple currency symbol; unusable symbols are reported and ignored."""
        try:
            NumberSymbolsSpec.new_simple_currency(currency)
        except InvalidSymbolSpecError as exc:
            self.diagnostics.add_error(f"{src}: invalid currency {currency!r}: {exc}")
            return False
        self.currency = currency
        return True

    def set_field_length(self, length: int, *, src: str = "<args>") -> bool:
        """Set the number field width; values below ``-1`` are reported and ignored."""
        if length < AUTO_FIELD_LENGTH:
            self.diagnostics.add_error(
                f"{src}: field length must be -1 or greater, got {length}"
            )
            return False
        self.field_length = length
        return True

    def set_justify(self, raw: str | TextJustify, *, src: str = "<args>") -> bool:
        """Set the justification; unknown values are reported and ignored."""
        justify = raw if isinstance(raw, TextJustify) else TextJustify.parse(raw)
        if justify is None:
            self.diagnostics.add_error(
                f"{src}: unknown justification {raw!r} (expected one of "
                f"{', '.join(TextJustify.keys())})"
            )
            return False
        self.justify = justify
        return True

    # ---- merging ----

    def merge_with(self, other: MutableFormatConfig) -> MutableFormatConfig:
        """Return a new builder with ``other`` applied over ``self`` (last wins).

        ``None`` fields in ``other`` do not override values in ``self``.

        Args:
            other (MutableFormatConfig): The layer whose values take precedence.

        Returns:
            MutableFormatConfig: The merged builder.
        """

        def pick(current: Any, override: Any) -> Any:
            return override if override is not None else current

        layout_reset = other.preset is not None or other.currency is not None
        sign_tables = {} if layout_reset else {k: v.copy_out() for k, v in self.sign_tables.items()}
        sign_tables.update({k: v.copy_out() for k, v in other.sign_tables.items()})

        currency = self.currency
        if other.preset is not None:
            currency = None
        currency = pick(currency, other.currency)

        merged = MutableFormatConfig(
            preset=pick(self.preset, other.preset),
            currency=currency,
            currency_leading=pick(self.currency_leading, other.currency_leading),
            sign_tables=sign_tables,
            field_length=pick(self.field_length, other.field_length),
            justify=pick(self.justify, other.justify),
            filler_chars=pick(self.filler_chars, other.filler_chars),
            filler_count=pick(self.filler_count, other.filler_count),
            left_margin=pick(self.left_margin, other.left_margin),
            right_margin=pick(self.right_margin, other.right_margin),
            config_files=[*self.config_files, *other.config_files],
            diagnostics=DiagnosticLog.from_iterable([*self.diagnostics, *other.diagnostics]),
        )
        logger.debug("Merged config layers: %s", merged.config_files)
        return merged

    @classmethod
    def load_merged(
        cls,
        paths: Iterable[Path | str] = (),
        *,
        use_defaults: bool = True,
    ) -> MutableFormatConfig:
        """Merge the bundled defaults (optionally) and ``paths`` in order."""
        cfg = cls.from_defaults() if use_defaults else cls()
        for path in paths:
            cfg = cfg.merge_with(cls.from_toml_file(path))
        return cfg

    def apply_args(self, args: Mapping[str, Any]) -> MutableFormatConfig:
        """Apply CLI/API overrides in place and return ``self``.

        Recognized keys: ``preset``, ``currency``, ``currency_leading``,
        ``field_length``, ``justify``, ``filler_chars``, ``filler_count``,
        ``left_margin``, ``right_margin``. ``None`` values are skipped.
        """
        overrides = MutableFormatConfig()
        src = "<args>"
        if args.get("preset") is not None:
            overrides.set_preset(str(args["preset"]), src=src)
        if args.get("currency") is not None:
            overrides.set_currency(str(args["currency"]), src=src)
        if args.get("currency_leading") is not None:
            overrides.currency_leading = bool(args["currency_leading"])
        field_length = _int_arg(args, "field_length", overrides.diagnostics, src=src)
        if field_length is not None:
            overrides.set_field_length(field_length, src=src)
        if args.get("justify") is not None:
            overrides.set_justify(args["justify"], src=src)
        for key in ("filler_chars", "left_margin", "right_margin"):
            if args.get(key) is not None:
                setattr(overrides, key, str(args[key]))
        filler_count = _int_arg(args, "filler_count", overrides.diagnostics, src=src)
        if filler_count is not None:
            overrides.filler_count = filler_count

        merged = self.merge_with(overrides)
        for f in fields(merged):
            setattr(self, f.name, getattr(merged, f.name))
        return self

    # ---- freezing ----

    def _resolve_symbols(self) -> NumberSymbolsSpec:
        symbols = NumberSymbolsSpec.new_nop()
        if self.preset is not None:
            try:
                symbols = get_preset(self.preset)
            except UnknownPresetError as exc:
                self.diagnostics.add_error(str(exc))
        if self.currency is not None:
            leading = True if self.currency_leading is None else self.currency_leading
            try:
                symbols = NumberSymbolsSpec.new_simple_currency(self.currency, leading=leading)
            except InvalidSymbolSpecError as exc:
                self.diagnostics.add_error(f"invalid currency {self.currency!r}: {exc}")
        for name, spec in self.sign_tables.items():
            try:
                symbols.set_spec_for_name(name, spec)
            except InvalidSymbolSpecError as exc:
                self.diagnostics.add_error(f"[symbols.{name}] {exc}")
        return symbols

    def _resolve_filler(self) -> TextFillerFieldFormat:
        chars = _DEFAULT_FILLER_CHARS if self.filler_chars is None else self.filler_chars
        count = _DEFAULT_FILLER_COUNT if self.filler_count is None else self.filler_count
        try:
            return TextFillerFieldFormat.new(
                chars,
                count,
                left_margin=self.left_margin or "",
                right_margin=self.right_margin or "",
            )
        except InvalidFillerError as exc:
            self.diagnostics.add_error(f"[filler] {exc}; using defaults")
            return TextFillerFieldFormat.new(_DEFAULT_FILLER_CHARS, _DEFAULT_FILLER_COUNT)

    def freeze(self) -> FormatConfig:
        """Resolve all settings and return an immutable `FormatConfig`."""
        symbols = self._resolve_symbols()
        filler = self._resolve_filler()
        return FormatConfig(
            preset=self.preset,
            currency=self.currency,
            symbols=symbols,
            field_length=AUTO_FIELD_LENGTH if self.field_length is None else self.field_length,
            justify=self.justify or TextJustify.RIGHT,
            filler=filler,
            config_files=tuple(self.config_files),
            diagnostics=self.diagnostics.freeze(),
        )
