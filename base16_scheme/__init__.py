"""base16_scheme: base16 template fields, formats and schemes."""

from base16_scheme.core.errors import (
    Base16Error,
    ColorDecodeError,
    FieldParseError,
    SchemeFormatError,
    TemplateSyntaxError,
)
from base16_scheme.core.field_parser import parse_color_field, parse_field
from base16_scheme.core.formatter import ColorValue, format_color
from base16_scheme.core.hsl import Hsl, np_rgb_to_hsl, rgb_to_hsl
from base16_scheme.core.scheme import Scheme, create_slug, dump_scheme, load_scheme, parse_scheme_string
from base16_scheme.core.types import (
    BaseIndex,
    ColorField,
    FieldKind,
    Format,
    OutputFormat,
    RgbColor,
    TemplateField,
    Variant,
)
from base16_scheme.template import Template, render_template

__version__ = '0.1.0'

__all__ = [
    # value types
    'BaseIndex',
    'RgbColor',
    'Format',
    'OutputFormat',
    'Variant',
    'ColorField',
    'FieldKind',
    'TemplateField',
    # parsing and formatting
    'parse_field',
    'parse_color_field',
    'format_color',
    'ColorValue',
    'Hsl',
    'rgb_to_hsl',
    'np_rgb_to_hsl',
    # schemes
    'Scheme',
    'create_slug',
    'load_scheme',
    'parse_scheme_string',
    'dump_scheme',
    # templates
    'Template',
    'render_template',
    # errors
    'Base16Error',
    'FieldParseError',
    'ColorDecodeError',
    'SchemeFormatError',
    'TemplateSyntaxError',
    '__version__',
]
