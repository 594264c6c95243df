"""Scanner for template field names.

Grammar for color fields:

    color-field := "base" HEXDIGIT HEXDIGIT "-" format-body
    format-body := "hex" ["-" ("r"|"g"|"b"|"bgr")]
                 | "rgb" "-" ("r"|"g"|"b")
                 | "dec" "-" ("r"|"g"|"b")
                 | "hsl" "-" ("h"|"s"|"l")

Hex digits are case-insensitive, keywords are not. The whole name must be
consumed. The grammar is small and fixed, so this is a single left-to-right
pass over a keyword table rather than a regex.
"""

from base16_scheme.core.errors import FieldParseError
from base16_scheme.core.types import (
    HEX_DIGITS,
    LEGAL_VARIANTS,
    SCHEME_AUTHOR,
    SCHEME_NAME,
    SCHEME_SLUG,
    UNPARSABLE,
    BaseIndex,
    ColorField,
    Format,
    OutputFormat,
    TemplateField,
    Variant,
)

LITERAL_FIELDS: dict[str, TemplateField] = {
    'scheme-name': SCHEME_NAME,
    'scheme': SCHEME_NAME,
    'scheme-author': SCHEME_AUTHOR,
    'scheme-slug': SCHEME_SLUG,
}

_PREFIX = 'base'


def parse_field(name: str) -> TemplateField:
    """Parse a field name. Never raises: unknown names give UNPARSABLE."""
    literal = LITERAL_FIELDS.get(name)
    if literal is not None:
        return literal
    color = _scan_color_field(name)
    if color is None:
        return UNPARSABLE
    return TemplateField.color_field(color)


def parse_color_field(name: str) -> ColorField:
    """Parse a ``baseXX-<format>`` name. Raises FieldParseError on mismatch."""
    color = _scan_color_field(name)
    if color is None:
        raise FieldParseError(name)
    return color


def parse_format(body: str) -> Format | None:
    """Parse the part after ``baseXX-``, e.g. ``hex-bgr``. None on mismatch."""
    keyword, sep, suffix = body.partition('-')
    try:
        output_format = OutputFormat(keyword)
    except ValueError:
        return None

    if not sep:
        # Only hex has a bare form
        if output_format is OutputFormat.HEX:
            return Format(OutputFormat.HEX, Variant.RGB)
        return None

    try:
        variant = Variant(suffix)
    except ValueError:
        return None
    # "hex-rgb" is not in the grammar even though RGB is hex's whole-color selector
    if variant is Variant.RGB or variant not in LEGAL_VARIANTS[output_format]:
        return None
    return Format(output_format, variant)


def _scan_color_field(name: str) -> ColorField | None:
    if not isinstance(name, str) or not name.startswith(_PREFIX):
        return None
    pos = len(_PREFIX)

    digits = name[pos : pos + 2]
    if len(digits) != 2 or not all(c in HEX_DIGITS for c in digits):
        return None
    pos += 2

    if name[pos : pos + 1] != '-':
        return None
    pos += 1

    fmt = parse_format(name[pos:])
    if fmt is None:
        return None
    return ColorField(BaseIndex(int(digits, 16)), fmt)
