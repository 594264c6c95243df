"""Error types raised by base16_scheme."""


class Base16Error(Exception):
    """Base class for every error raised by this package."""


class FieldParseError(Base16Error):
    """A template field name does not match the color-field grammar."""

    def __init__(self, name: str):
        super().__init__(f'Not a color field: {name!r}')
        self.name = name


class ColorDecodeError(Base16Error, ValueError):
    """A color index or color value in a scheme document is not valid hex."""


class SchemeFormatError(Base16Error, ValueError):
    """A scheme document has the wrong shape (not a mapping, missing name/author)."""


class TemplateSyntaxError(Base16Error):
    """A template is not valid UTF-8, or has a section tag that is never closed or closed out of order."""
