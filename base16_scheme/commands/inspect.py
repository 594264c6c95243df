"""Show every color of a scheme as hex, rgb and hsl.

HSL values for the whole scheme are computed in one vectorized pass.

Example:
    base16-scheme inspect -s ocean.yaml
    base16-scheme inspect -s ocean.yaml --json
"""

from base16_scheme.core.types import Command, Report

command = Command(
    name='inspect',
    help='Show every color of the scheme as hex, rgb and hsl.',
)


@command.run
def run(scheme, report: Report, args) -> None:
    hsl = scheme.hsl_table()
    for index, color in scheme.colors.items():
        h, s, l = hsl[index]
        report.add_color(
            index,
            {
                'hex': str(color),
                'rgb': list(color.as_tuple()),
                'hsl': [round(h, 2), round(s, 2), round(l, 2)],
            },
        )
