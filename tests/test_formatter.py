"""Tests for base16_scheme.core.formatter — per-format rendering."""

from base16_scheme.core.formatter import ColorValue, format_color
from base16_scheme.core.types import LEGAL_VARIANTS, Format, OutputFormat, RgbColor, Variant

COLOR = RgbColor.parse('7cafc2')


def fmt(output: OutputFormat, variant: Variant) -> Format:
    return Format(output, variant)


class TestHex:
    def test_whole(self):
        assert format_color(COLOR, fmt(OutputFormat.HEX, Variant.RGB)) == '7cafc2'

    def test_bgr(self):
        assert format_color(COLOR, fmt(OutputFormat.HEX, Variant.BGR)) == 'c2af7c'

    def test_channels(self):
        assert format_color(COLOR, fmt(OutputFormat.HEX, Variant.R)) == '7c'
        assert format_color(COLOR, fmt(OutputFormat.HEX, Variant.G)) == 'af'
        assert format_color(COLOR, fmt(OutputFormat.HEX, Variant.B)) == 'c2'

    def test_zero_padded(self):
        color = RgbColor(1, 0, 15)
        assert format_color(color, fmt(OutputFormat.HEX, Variant.RGB)) == '01000f'
        assert format_color(color, fmt(OutputFormat.HEX, Variant.B)) == '0f'


class TestRgb:
    def test_channels(self):
        assert format_color(COLOR, fmt(OutputFormat.RGB, Variant.R)) == '124'
        assert format_color(COLOR, fmt(OutputFormat.RGB, Variant.G)) == '175'
        assert format_color(COLOR, fmt(OutputFormat.RGB, Variant.B)) == '194'

    def test_no_padding(self):
        assert format_color(RgbColor(7, 0, 0), fmt(OutputFormat.RGB, Variant.R)) == '7'


class TestDec:
    def test_channels(self):
        assert format_color(COLOR, fmt(OutputFormat.DEC, Variant.R)) == '0.49'
        assert format_color(COLOR, fmt(OutputFormat.DEC, Variant.G)) == '0.69'
        assert format_color(COLOR, fmt(OutputFormat.DEC, Variant.B)) == '0.76'

    def test_bounds(self):
        assert format_color(RgbColor(0, 255, 0), fmt(OutputFormat.DEC, Variant.R)) == '0.00'
        assert format_color(RgbColor(0, 255, 0), fmt(OutputFormat.DEC, Variant.G)) == '1.00'


class TestHsl:
    def test_parts(self):
        assert format_color(COLOR, fmt(OutputFormat.HSL, Variant.H)) == '196.29'
        assert format_color(COLOR, fmt(OutputFormat.HSL, Variant.S)) == '0.36'
        assert format_color(COLOR, fmt(OutputFormat.HSL, Variant.L)) == '0.62'

    def test_grey(self):
        grey = RgbColor(128, 128, 128)
        assert format_color(grey, fmt(OutputFormat.HSL, Variant.H)) == '0.00'
        assert format_color(grey, fmt(OutputFormat.HSL, Variant.S)) == '0.00'
        assert format_color(grey, fmt(OutputFormat.HSL, Variant.L)) == '0.50'

    def test_red(self):
        red = RgbColor(255, 0, 0)
        assert format_color(red, fmt(OutputFormat.HSL, Variant.H)) == '0.00'
        assert format_color(red, fmt(OutputFormat.HSL, Variant.S)) == '1.00'
        assert format_color(red, fmt(OutputFormat.HSL, Variant.L)) == '0.50'


class TestUnsupportedFormats:
    def test_rgb_and_dec_composites_render_empty(self):
        for output in (OutputFormat.RGB, OutputFormat.DEC):
            for variant in (Variant.RGB, Variant.BGR):
                assert format_color(COLOR, fmt(output, variant)) == ''

    def test_every_illegal_pair_renders_empty(self):
        for output in OutputFormat:
            for variant in Variant:
                rendered = format_color(COLOR, fmt(output, variant))
                if variant in LEGAL_VARIANTS[output]:
                    assert rendered != ''
                else:
                    assert rendered == ''


class TestColorValue:
    def test_str(self):
        assert str(ColorValue(COLOR, fmt(OutputFormat.HEX, Variant.BGR))) == 'c2af7c'

    def test_truthy_even_when_empty(self):
        value = ColorValue(COLOR, fmt(OutputFormat.RGB, Variant.BGR))
        assert str(value) == ''
        assert value.is_truthy()
