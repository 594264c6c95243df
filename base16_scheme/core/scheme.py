"""Scheme model, field resolution and YAML scheme documents.

A scheme document looks like:

    scheme: "Ocean"
    author: "Chris Kempson (http://chriskempson.com)"
    base00: "2b303b"
    base01: "343d46"
    ...

``scheme`` and ``author`` are required. Every other key must be a ``baseXX``
index mapping to a six-digit hex color. The slug is never read from or
written to the document; call ``create_slug()`` after loading.
"""

from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass, field
from typing import Any

import numpy as np
import yaml

from base16_scheme.core.errors import ColorDecodeError, SchemeFormatError
from base16_scheme.core.field_parser import parse_field
from base16_scheme.core.formatter import ColorValue
from base16_scheme.core.hsl import np_rgb_to_hsl
from base16_scheme.core.types import BaseIndex, ColorField, FieldKind, RgbColor

_log = logging.getLogger('base16_scheme.core.scheme')

NAME_KEY = 'scheme'
AUTHOR_KEY = 'author'

# Rendered for {{scheme-slug}} when create_slug() was never called. Kept for
# compatibility with existing templates.
SLUG_PLACEHOLDER = 'scheme-slug'


def create_slug(scheme_name: str) -> str:
    """Lowercase the name and turn spaces into dashes."""
    return ''.join('-' if c == ' ' else c.lower() for c in scheme_name)


@dataclass(frozen=True)
class Scheme:
    scheme: str
    author: str
    colors: dict[BaseIndex, RgbColor] = field(default_factory=dict)
    slug: str = ''

    # colors is a dict, so schemes compare by value but are not hashable
    __hash__ = None

    def __post_init__(self) -> None:
        # Keep colors in ascending index order regardless of input order
        object.__setattr__(self, 'colors', dict(sorted(self.colors.items())))

    # ------------------ metadata ------------------
    @property
    def scheme_name(self) -> str:
        return self.scheme

    @property
    def scheme_author(self) -> str:
        return self.author

    @property
    def scheme_slug(self) -> str:
        return self.slug

    def create_slug(self) -> Scheme:
        """Return a copy with the slug derived from the scheme name."""
        return dataclasses.replace(self, slug=create_slug(self.scheme))

    # ------------------ lookup ------------------
    def color(self, color_field: ColorField) -> ColorValue | None:
        """Resolve a color field. None if the scheme has no such index."""
        color = self.colors.get(color_field.index)
        if color is None:
            return None
        return ColorValue(color, color_field.format)

    def render_field(self, name: str) -> str | None:
        """Text for a template field, or None if it is not found.

        This is the "render as text" hook the template engine calls for
        every ``{{name}}``.
        """
        parsed = parse_field(name)
        if parsed.kind is FieldKind.SCHEME_NAME:
            return self.scheme_name
        if parsed.kind is FieldKind.SCHEME_AUTHOR:
            return self.scheme_author
        if parsed.kind is FieldKind.SCHEME_SLUG:
            return self.scheme_slug or SLUG_PLACEHOLDER
        if parsed.kind is FieldKind.COLOR and parsed.color is not None:
            value = self.color(parsed.color)
            return None if value is None else str(value)
        return None

    def field_truthy(self, name: str) -> bool:
        """Section gate for ``{{#name}}`` / ``{{^name}}``: True if the field resolves."""
        parsed = parse_field(name)
        if parsed.kind is FieldKind.COLOR and parsed.color is not None:
            value = self.color(parsed.color)
            return value is not None and value.is_truthy()
        return parsed.is_parsed

    def is_truthy(self) -> bool:
        return True

    # ------------------ bulk ------------------
    def rgb_array(self) -> np.ndarray:
        """Colors as an (N, 3) uint8 array, in index order."""
        if not self.colors:
            return np.zeros((0, 3), dtype=np.uint8)
        return np.array([c.as_tuple() for c in self.colors.values()], dtype=np.uint8)

    def hsl_table(self) -> dict[BaseIndex, tuple[float, float, float]]:
        """(hue, saturation, luminance) for every color, converted in one pass."""
        hsl = np_rgb_to_hsl(self.rgb_array())
        return {index: (float(h), float(s), float(l)) for index, (h, s, l) in zip(self.colors, hsl)}

    # ------------------ serialization ------------------
    @classmethod
    def from_dict(cls, data: Any) -> Scheme:
        """Build a Scheme from a decoded document. The slug is left empty."""
        if not isinstance(data, dict):
            raise SchemeFormatError(f'scheme document must be a mapping, got {type(data).__name__}')
        for key in (NAME_KEY, AUTHOR_KEY):
            if key not in data:
                raise SchemeFormatError(f'scheme document is missing {key!r}')
            if not isinstance(data[key], str):
                raise SchemeFormatError(f'{key!r} must be a string, got {data[key]!r}')

        colors: dict[BaseIndex, RgbColor] = {}
        for key, value in data.items():
            if key in (NAME_KEY, AUTHOR_KEY):
                continue
            index = BaseIndex.parse(key)
            try:
                color = RgbColor.parse(value)
            except ColorDecodeError as e:
                raise ColorDecodeError(f'{key}: {e}') from e
            if index in colors:
                _log.warning('%s given more than once; keeping %s', index, color)
            colors[index] = color

        return cls(scheme=data[NAME_KEY], author=data[AUTHOR_KEY], colors=colors)

    def to_dict(self) -> dict[str, str]:
        """Serialization order: scheme, author, then colors by index. No slug."""
        out = {NAME_KEY: self.scheme, AUTHOR_KEY: self.author}
        for index, color in self.colors.items():
            out[str(index)] = str(color)
        return out


def parse_scheme_string(text: str) -> Scheme:
    """Parse a YAML scheme document and derive its slug."""
    try:
        # BaseLoader keeps every scalar a string, so 000000 is not read as 0
        data = yaml.load(text, Loader=yaml.BaseLoader)
    except yaml.YAMLError as e:
        raise SchemeFormatError(f'invalid YAML: {e}') from e
    scheme = Scheme.from_dict(data).create_slug()
    _log.debug('parsed scheme %r with %d colors', scheme.scheme, len(scheme.colors))
    return scheme


def load_scheme(path: str) -> Scheme:
    """Load a YAML scheme file from disk."""
    try:
        with open(path, encoding='utf-8') as f:
            text = f.read()
    except UnicodeDecodeError as e:
        raise SchemeFormatError(f'{path}: not valid UTF-8 ({e})') from e
    return parse_scheme_string(text)


def dump_scheme(scheme: Scheme) -> str:
    """YAML text for a scheme, keys in serialization order."""
    return yaml.safe_dump(scheme.to_dict(), sort_keys=False, allow_unicode=True)
