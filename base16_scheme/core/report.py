"""Report builder — text and JSON output for base16-scheme commands."""

import json
import os
from typing import Any

from base16_scheme.core.types import Report


def format_text(report: Report) -> str:
    """Format report as human-readable text."""
    lines = []
    header = f'base16-scheme: {report.scheme_name}'
    if report.scheme_author:
        header += f' by {report.scheme_author}'
    if report.scheme_path:
        header += f' — {os.path.basename(report.scheme_path)} ({len(report.colors)} colors)'
    lines.append(header)
    if report.scheme_slug:
        lines.append(f'slug: {report.scheme_slug}')
    lines.append('')

    for index, data in report.colors.items():
        parts = [f'{index}']
        if 'hex' in data:
            parts.append(f'#{data["hex"]}')
        if 'rgb' in data:
            r, g, b = data['rgb']
            parts.append(f'rgb({r:>3},{g:>3},{b:>3})')
        if 'hsl' in data:
            h, s, l = data['hsl']
            parts.append(f'hsl({h:6.2f},{s:.2f},{l:.2f})')
        lines.append('  '.join(parts))

    if report.colors and report.fields:
        lines.append('')

    for name, value in report.fields.items():
        shown = value if value is not None else '(not found)'
        lines.append(f'{name} = {shown}')

    for path in report.files:
        lines.append(f'wrote {path}')

    missing = report.missing_fields
    if report.fields:
        lines.append('')
        lines.append(f'FOUND {len(report.fields) - len(missing)}/{len(report.fields)} fields')
    return '\n'.join(lines)


def format_json(report: Report) -> str:
    """Format report as JSON."""
    obj: dict[str, Any] = {
        'scheme': report.scheme_name,
        'author': report.scheme_author,
        'slug': report.scheme_slug,
    }
    if report.scheme_path:
        obj['path'] = report.scheme_path

    obj['colors'] = []
    for index, data in report.colors.items():
        obj['colors'].append({'index': index, **data})

    if report.fields:
        obj['fields'] = dict(report.fields)
        obj['summary'] = {
            'total': len(report.fields),
            'found': len(report.fields) - len(report.missing_fields),
            'missing': report.missing_fields,
        }
    if report.files:
        obj['files'] = list(report.files)
    return json.dumps(obj, indent=2)
