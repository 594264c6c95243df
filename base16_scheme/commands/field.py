"""Resolve individual template fields against a scheme.

Prints each field with its rendered value, or "(not found)" if the
scheme does not define it or the name is not a valid field. Exits 1 if
any field was not found, so it can gate scripts.

Example:
    base16-scheme field -s ocean.yaml base00-hex base0D-hsl-h scheme-slug
    base16-scheme field -s ocean.yaml base0A-dec-r --json
"""

from base16_scheme.core.types import Command, Report

command = Command(
    name='field',
    help='Resolve individual fields (e.g. base0D-hex) against the scheme.',
)


@command.arguments
def add_arguments(parser) -> None:
    parser.add_argument('fields', nargs='+', metavar='FIELD', help='Field names to resolve')


@command.run
def run(scheme, report: Report, args) -> int:
    for name in args.fields:
        report.add_field(name, scheme.render_field(name))
    return 1 if report.missing_fields else 0
