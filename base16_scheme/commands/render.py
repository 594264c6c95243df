"""Render a mustache template against a base16 scheme.

Every {{field}} in the template is resolved against the scheme:
scheme-name (or scheme), scheme-author, scheme-slug, and color fields
like base0D-hex, base00-hex-bgr, base08-rgb-r, base05-dec-g, base0A-hsl-h.
Unknown or unresolvable fields render as nothing.

The template defaults to $BASE16_TEMPLATE. Output goes to stdout unless
--output is given.

Example:
    base16-scheme render -s ocean.yaml templates/default.mustache
    base16-scheme render -s ocean.yaml templates/default.mustache -o colors.conf
"""

import sys

from base16_scheme.core.env import TEMPLATE_VAR, resolve_path
from base16_scheme.core.errors import TemplateSyntaxError
from base16_scheme.core.types import Command, Report
from base16_scheme.template import Template

command = Command(
    name='render',
    help='Render a mustache template against the scheme.',
)


@command.arguments
def add_arguments(parser) -> None:
    parser.add_argument('template', nargs='?', help=f'Template file (default: ${TEMPLATE_VAR})')
    parser.add_argument('-o', '--output', help='Write the rendered text here instead of stdout')


@command.run
def run(scheme, report: Report, args) -> int:
    path = resolve_path(args.template, TEMPLATE_VAR)
    if path is None:
        print(f'Error: no template given and ${TEMPLATE_VAR} is not set', file=sys.stderr)
        return 1

    try:
        with open(path, encoding='utf-8') as f:
            source = f.read()
    except UnicodeDecodeError as e:
        raise TemplateSyntaxError(f'{path}: not valid UTF-8 ({e})') from e
    template = Template(source)
    rendered = template.render(scheme)

    if args.output:
        with open(args.output, 'w', encoding='utf-8') as f:
            f.write(rendered)
        report.add_file(args.output)
        print(f'base16-scheme: wrote {args.output}', file=sys.stderr)
    else:
        sys.stdout.write(rendered)
    return 0
