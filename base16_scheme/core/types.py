"""Shared types: BaseIndex, RgbColor, Format, ColorField, TemplateField, Command, Report."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from typing import Any

from base16_scheme.core.errors import ColorDecodeError

HEX_DIGITS = frozenset('0123456789abcdefABCDEF')


def _decode_hex(text: str, n_bytes: int) -> bytes:
    """Decode exactly n_bytes of hex. Raises ValueError otherwise."""
    if len(text) != n_bytes * 2 or not all(c in HEX_DIGITS for c in text):
        raise ValueError(f'expected {n_bytes * 2} hex digits, got {text!r}')
    return bytes.fromhex(text)


@dataclass(frozen=True, order=True)
class BaseIndex:
    """Key of a scheme color: one byte, written as ``baseXX``."""

    value: int

    def __post_init__(self) -> None:
        if not 0 <= self.value <= 0xFF:
            raise ValueError(f'BaseIndex out of range: {self.value}')

    @classmethod
    def parse(cls, text: str) -> BaseIndex:
        if not isinstance(text, str) or not text.startswith('base'):
            raise ColorDecodeError(f'{text!r} should start with "base"')
        try:
            (number,) = _decode_hex(text[4:], 1)
        except ValueError as e:
            raise ColorDecodeError(f'{text!r}: expected a hex number between 00 and FF ({e})') from e
        return cls(number)

    def __str__(self) -> str:
        return f'base{self.value:02X}'


@dataclass(frozen=True, order=True)
class RgbColor:
    """Three bytes, written as six lowercase hex digits."""

    r: int
    g: int
    b: int

    def __post_init__(self) -> None:
        for channel in (self.r, self.g, self.b):
            if not 0 <= channel <= 0xFF:
                raise ValueError(f'RgbColor channel out of range: {channel}')

    @classmethod
    def parse(cls, text: str) -> RgbColor:
        if not isinstance(text, str):
            raise ColorDecodeError(f'color must be a hex string, got {text!r}')
        try:
            r, g, b = _decode_hex(text, 3)
        except ValueError as e:
            raise ColorDecodeError(f'invalid color {text!r}: {e}') from e
        return cls(r, g, b)

    def as_tuple(self) -> tuple[int, int, int]:
        return (self.r, self.g, self.b)

    def __str__(self) -> str:
        return f'{self.r:02x}{self.g:02x}{self.b:02x}'


class OutputFormat(str, Enum):
    """Output kind of a color field."""

    HEX = 'hex'
    RGB = 'rgb'
    DEC = 'dec'
    HSL = 'hsl'


class Variant(str, Enum):
    """Channel or composite selected by a color field.

    RGB is the whole color (``hex`` with no suffix); BGR is the byte-swapped
    whole color. H, S and L only make sense under HSL.
    """

    RGB = 'rgb'
    R = 'r'
    G = 'g'
    B = 'b'
    BGR = 'bgr'
    H = 'h'
    S = 's'
    L = 'l'


CHANNELS = (Variant.R, Variant.G, Variant.B)
HSL_PARTS = (Variant.H, Variant.S, Variant.L)

# Selectors the grammar accepts after each output keyword
LEGAL_VARIANTS: dict[OutputFormat, tuple[Variant, ...]] = {
    OutputFormat.HEX: (Variant.RGB, *CHANNELS, Variant.BGR),
    OutputFormat.RGB: CHANNELS,
    OutputFormat.DEC: CHANNELS,
    OutputFormat.HSL: HSL_PARTS,
}


@dataclass(frozen=True, order=True)
class Format:
    output_format: OutputFormat
    output_variant: Variant

    @property
    def is_supported(self) -> bool:
        return self.output_variant in LEGAL_VARIANTS[self.output_format]

    def __str__(self) -> str:
        if self.output_format is OutputFormat.HEX and self.output_variant is Variant.RGB:
            return 'hex'
        return f'{self.output_format.value}-{self.output_variant.value}'


@dataclass(frozen=True, order=True)
class ColorField:
    """A parsed ``baseXX-<format>`` field."""

    index: BaseIndex
    format: Format

    @classmethod
    def parse(cls, name: str) -> ColorField:
        """Parse strictly. Raises FieldParseError if name is not a color field."""
        from base16_scheme.core.field_parser import parse_color_field

        return parse_color_field(name)

    def __str__(self) -> str:
        return f'{self.index}-{self.format}'


class FieldKind(str, Enum):
    SCHEME_NAME = 'scheme-name'
    SCHEME_AUTHOR = 'scheme-author'
    SCHEME_SLUG = 'scheme-slug'
    COLOR = 'color'
    UNPARSABLE = 'unparsable'


@dataclass(frozen=True, order=True)
class TemplateField:
    """What a template field name refers to.

    ``color`` is set only when ``kind`` is COLOR.
    """

    kind: FieldKind
    color: ColorField | None = None

    @classmethod
    def color_field(cls, color: ColorField) -> TemplateField:
        return cls(FieldKind.COLOR, color)

    @property
    def is_parsed(self) -> bool:
        return self.kind is not FieldKind.UNPARSABLE


SCHEME_NAME = TemplateField(FieldKind.SCHEME_NAME)
SCHEME_AUTHOR = TemplateField(FieldKind.SCHEME_AUTHOR)
SCHEME_SLUG = TemplateField(FieldKind.SCHEME_SLUG)
UNPARSABLE = TemplateField(FieldKind.UNPARSABLE)


class Command:
    """A self-registering CLI command.

    Usage in a command module:
        command = Command(name='inspect', help='Show every color of a scheme')

        @command.arguments
        def add_arguments(parser):
            parser.add_argument(...)

        @command.run
        def run(scheme, report, args):
            ...
    """

    def __init__(self, name: str, help: str = ''):
        self.name = name
        self.help = help
        self._run_fn: Callable | None = None
        self._arguments_fn: Callable | None = None

    def run(self, fn: Callable) -> Callable:
        """Decorator to register the run function."""
        self._run_fn = fn
        return fn

    def arguments(self, fn: Callable) -> Callable:
        """Decorator to register a function adding command-specific arguments."""
        self._arguments_fn = fn
        return fn

    def add_arguments(self, parser: Any) -> None:
        if self._arguments_fn is not None:
            self._arguments_fn(parser)

    def execute(self, scheme: Any, report: Report, args: Any) -> int:
        """Execute the command's run function. Returns the process exit code."""
        if self._run_fn is None:
            raise RuntimeError(f'Command {self.name} has no run function')
        return self._run_fn(scheme, report, args) or 0


@dataclass
class Report:
    """Accumulates per-color and per-field results for text/JSON output."""

    scheme_path: str = ''
    scheme_name: str = ''
    scheme_author: str = ''
    scheme_slug: str = ''
    colors: dict[str, dict[str, Any]] = field(default_factory=dict)
    fields: dict[str, str | None] = field(default_factory=dict)
    files: list[str] = field(default_factory=list)

    def add_color(self, index: BaseIndex, data: dict[str, Any]) -> None:
        """Add results for a color, merging with anything already recorded."""
        key = str(index)
        if key not in self.colors:
            self.colors[key] = {}
        self.colors[key].update(data)

    def add_field(self, name: str, value: str | None) -> None:
        self.fields[name] = value

    def add_file(self, path: str) -> None:
        self.files.append(path)

    @property
    def missing_fields(self) -> list[str]:
        return [name for name, value in self.fields.items() if value is None]
