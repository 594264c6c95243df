"""base16-scheme — Render base16 color-scheme templates and inspect schemes.

Usage: base16-scheme [--env-file PATH] [-v] <command> [-s SCHEME] [options]

Commands are auto-discovered from base16_scheme/commands/.
Each command module's docstring is its documentation.
Run `base16-scheme help <command>` for full module docs.

Environment variables / .env loading:
  OS environment variables are always used first.
  If a variable is not set, base16-scheme looks for a .env file starting from
  the current directory and walking up, stopping at the nearest .git boundary.
  Use --env-file to override the .env location explicitly.
"""

import argparse
import importlib
import logging
import sys

from base16_scheme import registry
from base16_scheme.core.env import SCHEME_VAR, TEMPLATE_VAR, load_env, resolve_path
from base16_scheme.core.errors import Base16Error
from base16_scheme.core.report import format_json, format_text
from base16_scheme.core.scheme import load_scheme
from base16_scheme.core.types import Report

# Commands that print their own output instead of a report
SELF_PRINTING = {'render'}


def _load_command_module(name: str) -> object:
    """Load the raw module for a command (for docstring access)."""
    return importlib.import_module(f'base16_scheme.commands.{name}')


def _short_help(name: str, fallback: str) -> str:
    doc = (_load_command_module(name).__doc__ or '').strip()
    return doc.splitlines()[0] if doc else fallback


def _build_parser() -> argparse.ArgumentParser:
    commands = registry.all_commands()

    epilog = (
        'Examples:\n'
        '  base16-scheme render -s ocean.yaml default.mustache\n'
        '  base16-scheme render -s ocean.yaml default.mustache -o colors.conf\n'
        '  base16-scheme field -s ocean.yaml base0D-hex base0D-hsl-h scheme-slug\n'
        '  base16-scheme inspect -s ocean.yaml --json\n'
        '  base16-scheme swatch -s ocean.yaml ocean.png\n'
        '  base16-scheme help render\n'
        '\n'
        'Environment (set in .env or environment):\n'
        f'  {SCHEME_VAR}    default for --scheme\n'
        f'  {TEMPLATE_VAR}  default template for render\n'
    )
    parser = argparse.ArgumentParser(
        prog='base16-scheme',
        description='Render base16 color-scheme templates and inspect schemes.',
        epilog=epilog,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    parser.add_argument(
        '--env-file',
        metavar='PATH',
        default=None,
        help='Path to .env file (default: walk up from cwd to .git boundary)',
    )
    parser.add_argument('-v', '--verbose', action='store_true', help='Log debug output to stderr')
    sub = parser.add_subparsers(dest='command', help='Command to run')

    for name, cmd in sorted(commands.items()):
        p = sub.add_parser(name, help=_short_help(name, cmd.help))
        p.add_argument('-s', '--scheme', help=f'Path to scheme YAML (default: ${SCHEME_VAR})')
        p.add_argument('-j', '--json', action='store_true', help='Output JSON instead of text')
        cmd.add_arguments(p)

    help_parser = sub.add_parser('help', help='Print full docs for a command')
    help_parser.add_argument('topic', nargs='?', help='Command name')

    return parser


def _print_help(topic: str | None) -> int:
    """Print full module docstring for a command."""
    commands = registry.all_commands()

    if topic is None:
        print('Available commands:\n')
        for name, cmd in sorted(commands.items()):
            print(f'  {name:<10} {_short_help(name, cmd.help)}')
        print('\nRun: base16-scheme help <command> for full docs.')
        return 0

    if topic not in commands:
        print(f'Unknown command: {topic}', file=sys.stderr)
        print(f'Available: {", ".join(sorted(commands))}', file=sys.stderr)
        return 1

    doc = (_load_command_module(topic).__doc__ or '').strip()
    if not doc:
        print(f'(No module docs for {topic!r})')
        return 0
    print(doc)
    return 0


def run(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format='%(name)s: %(message)s')

    # Load .env before anything else; OS env vars always win
    env_path = load_env(env_file=args.env_file)
    if env_path:
        print(f'base16-scheme: loaded {env_path}', file=sys.stderr)

    if not args.command:
        parser.print_help()
        return 1

    if args.command == 'help':
        return _print_help(args.topic)

    scheme_path = resolve_path(args.scheme, SCHEME_VAR)
    if scheme_path is None:
        print(f'Error: no scheme given (use --scheme or set ${SCHEME_VAR})', file=sys.stderr)
        return 1

    try:
        scheme = load_scheme(scheme_path)
    except FileNotFoundError:
        print(f'Error: scheme not found: {scheme_path}', file=sys.stderr)
        return 1
    except Base16Error as e:
        print(f'Error: {scheme_path}: {e}', file=sys.stderr)
        return 1

    report = Report(
        scheme_path=scheme_path,
        scheme_name=scheme.scheme_name,
        scheme_author=scheme.scheme_author,
        scheme_slug=scheme.scheme_slug,
    )

    cmd = registry.get(args.command)
    try:
        code = cmd.execute(scheme, report, args)
    except FileNotFoundError as e:
        print(f'Error: file not found: {e.filename}', file=sys.stderr)
        return 1
    except Base16Error as e:
        print(f'Error: {e}', file=sys.stderr)
        return 1

    if args.command in SELF_PRINTING:
        pass
    elif args.json:
        print(format_json(report))
    else:
        print(format_text(report))
    return code


def main() -> None:
    sys.exit(run())


if __name__ == '__main__':
    main()
