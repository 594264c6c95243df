"""Render an RgbColor in a given Format.

Every legal (output format, variant) pair has exactly one entry in
``_RENDERERS``. Pairs outside the table (rgb-bgr, dec-rgb, hex-h, ...) are
representable but render as the empty string.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from base16_scheme.core.hsl import rgb_to_hsl
from base16_scheme.core.types import Format, OutputFormat, RgbColor, Variant


def _dec(channel: int) -> str:
    return f'{channel / 255.0:.2f}'


_RENDERERS: dict[Format, Callable[[RgbColor], str]] = {
    Format(OutputFormat.HEX, Variant.RGB): lambda c: f'{c.r:02x}{c.g:02x}{c.b:02x}',
    Format(OutputFormat.HEX, Variant.R): lambda c: f'{c.r:02x}',
    Format(OutputFormat.HEX, Variant.G): lambda c: f'{c.g:02x}',
    Format(OutputFormat.HEX, Variant.B): lambda c: f'{c.b:02x}',
    Format(OutputFormat.HEX, Variant.BGR): lambda c: f'{c.b:02x}{c.g:02x}{c.r:02x}',
    Format(OutputFormat.RGB, Variant.R): lambda c: str(c.r),
    Format(OutputFormat.RGB, Variant.G): lambda c: str(c.g),
    Format(OutputFormat.RGB, Variant.B): lambda c: str(c.b),
    Format(OutputFormat.DEC, Variant.R): lambda c: _dec(c.r),
    Format(OutputFormat.DEC, Variant.G): lambda c: _dec(c.g),
    Format(OutputFormat.DEC, Variant.B): lambda c: _dec(c.b),
    Format(OutputFormat.HSL, Variant.H): lambda c: f'{rgb_to_hsl(c).hue:.2f}',
    Format(OutputFormat.HSL, Variant.S): lambda c: f'{rgb_to_hsl(c).saturation:.2f}',
    Format(OutputFormat.HSL, Variant.L): lambda c: f'{rgb_to_hsl(c).luminance:.2f}',
}


def format_color(color: RgbColor, fmt: Format) -> str:
    renderer = _RENDERERS.get(fmt)
    if renderer is None:
        return ''
    return renderer(color)


@dataclass(frozen=True, order=True)
class ColorValue:
    """A resolved color field: the color plus how to print it.

    Always truthy as a template section gate, even when the format renders
    empty.
    """

    color: RgbColor
    format: Format

    def is_truthy(self) -> bool:
        return True

    def __str__(self) -> str:
        return format_color(self.color, self.format)
