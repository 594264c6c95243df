"""Minimal mustache-style renderer for base16 templates.

Supports what base16 templates use:

    {{name}}            escaped value of a field
    {{{name}}}          raw value
    {{& name}}          raw value
    {{#name}}..{{/name}}  body rendered once if the field resolves
    {{^name}}..{{/name}}  body rendered if the field does not resolve
    {{! comment}}       dropped

Field lookup goes through two hooks on the context object:
``render_field(name) -> str | None`` and ``field_truthy(name) -> bool``.
Fields that are not found render as nothing.
"""

from __future__ import annotations

import html
import re
from dataclasses import dataclass, field
from typing import Protocol

from base16_scheme.core.errors import TemplateSyntaxError

TAG_RE = re.compile(r'{{({\s*([^{}]+?)\s*}|([#^/!&]?)\s*(.*?)\s*)}}', re.DOTALL)


class FieldContext(Protocol):
    def render_field(self, name: str) -> str | None: ...

    def field_truthy(self, name: str) -> bool: ...


@dataclass
class _Node:
    kind: str  # 'text', 'var', 'raw', 'section', 'inverted'
    value: str = ''
    children: list[_Node] = field(default_factory=list)


def _tokenize(text: str) -> list[_Node]:
    """Build the node tree. Raises TemplateSyntaxError on unbalanced sections."""
    root = _Node('root')
    stack: list[_Node] = [root]
    pos = 0
    for m in TAG_RE.finditer(text):
        if m.start() > pos:
            stack[-1].children.append(_Node('text', text[pos : m.start()]))
        pos = m.end()

        if m.group(2) is not None:
            stack[-1].children.append(_Node('raw', m.group(2)))
            continue

        sigil, name = m.group(3), m.group(4)
        if sigil == '!':
            continue
        if sigil == '&':
            stack[-1].children.append(_Node('raw', name))
        elif sigil in ('#', '^'):
            node = _Node('section' if sigil == '#' else 'inverted', name)
            stack[-1].children.append(node)
            stack.append(node)
        elif sigil == '/':
            if len(stack) == 1 or stack[-1].value != name:
                raise TemplateSyntaxError(f'unexpected closing tag {{{{/{name}}}}}')
            stack.pop()
        else:
            stack[-1].children.append(_Node('var', name))

    if len(stack) > 1:
        raise TemplateSyntaxError(f'section {stack[-1].value!r} is never closed')
    if pos < len(text):
        root.children.append(_Node('text', text[pos:]))
    return root.children


def _escape(value: str) -> str:
    # mustache escape set: & < > "
    return html.escape(value, quote=False).replace('"', '&quot;')


def _render_nodes(nodes: list[_Node], context: FieldContext, out: list[str]) -> None:
    for node in nodes:
        if node.kind == 'text':
            out.append(node.value)
        elif node.kind in ('var', 'raw'):
            value = context.render_field(node.value)
            if value is None:
                continue
            out.append(_escape(value) if node.kind == 'var' else value)
        elif node.kind == 'section':
            if context.field_truthy(node.value):
                _render_nodes(node.children, context, out)
        elif node.kind == 'inverted':
            if not context.field_truthy(node.value):
                _render_nodes(node.children, context, out)


class Template:
    """A parsed template. Parse once, render against many schemes."""

    def __init__(self, source: str):
        self.source = source
        self._nodes = _tokenize(source)

    def render(self, context: FieldContext) -> str:
        out: list[str] = []
        _render_nodes(self._nodes, context, out)
        return ''.join(out)


def render_template(source: str, context: FieldContext) -> str:
    return Template(source).render(context)


def template_fields(source: str) -> list[str]:
    """Every distinct field name referenced by a template, in order of first use."""
    names: list[str] = []
    for m in TAG_RE.finditer(source):
        if m.group(2) is not None:
            name = m.group(2)
        elif m.group(3) in ('!', '/'):
            continue
        else:
            name = m.group(4)
        if name not in names:
            names.append(name)
    return names
