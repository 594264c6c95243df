"""Integration tests: run base16-scheme commands end to end through the CLI."""

import json
import os
import shutil
from pathlib import Path

import numpy as np
import pytest
from base16_scheme.__main__ import run
from base16_scheme.commands.swatch import build_swatch
from base16_scheme.core.env import SCHEME_VAR, TEMPLATE_VAR
from base16_scheme.registry import all_commands, discover, get
from PIL import Image

TESTS_DIR = Path(__file__).parent
FIXTURES_DIR = TESTS_DIR / 'fixtures'
OCEAN = FIXTURES_DIR / 'ocean.yaml'
DEFAULT_TEMPLATE = FIXTURES_DIR / 'default.mustache'


@pytest.fixture(autouse=True)
def isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Run each test in an empty repo so no stray .env is picked up."""
    (tmp_path / '.git').mkdir()
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv(SCHEME_VAR, raising=False)
    monkeypatch.delenv(TEMPLATE_VAR, raising=False)
    return tmp_path


class TestRegistry:
    def test_discovers_all_commands(self):
        assert set(discover()) == {'field', 'inspect', 'render', 'swatch'}

    def test_get_unknown(self):
        with pytest.raises(KeyError, match='Available'):
            get('nope')

    def test_commands_have_help(self):
        for name, cmd in all_commands().items():
            assert cmd.help, name


class TestRender:
    def test_render_to_stdout(self, capsys):
        code = run(['render', '-s', str(OCEAN), str(DEFAULT_TEMPLATE)])
        out = capsys.readouterr().out
        assert code == 0
        assert 'background = #2b303b' in out
        assert '(ocean)' in out

    def test_render_to_file(self, tmp_path: Path, capsys):
        target = tmp_path / 'out' / 'colors.conf'
        target.parent.mkdir()
        code = run(['render', '-s', str(OCEAN), str(DEFAULT_TEMPLATE), '-o', str(target)])
        assert code == 0
        assert 'accent_bgr = 0xb3a18f' in target.read_text()
        assert 'wrote' in capsys.readouterr().err

    def test_template_from_env(self, monkeypatch: pytest.MonkeyPatch, capsys):
        monkeypatch.setenv(TEMPLATE_VAR, str(DEFAULT_TEMPLATE))
        assert run(['render', '-s', str(OCEAN)]) == 0
        assert 'foreground = #c0c5ce' in capsys.readouterr().out

    def test_template_from_dotenv(self, isolated_cwd: Path, capsys):
        shutil.copy(OCEAN, isolated_cwd / 'ocean.yaml')
        (isolated_cwd / 'tpl.mustache').write_text('{{scheme-slug}}:{{base08-hex}}')
        (isolated_cwd / '.env').write_text(f'{SCHEME_VAR}=ocean.yaml\n{TEMPLATE_VAR}=tpl.mustache\n')
        try:
            assert run(['render']) == 0
            captured = capsys.readouterr()
            assert captured.out == 'ocean:bf616a'
            assert 'loaded' in captured.err
        finally:
            os.environ.pop(SCHEME_VAR, None)
            os.environ.pop(TEMPLATE_VAR, None)

    def test_no_template(self, capsys):
        assert run(['render', '-s', str(OCEAN)]) == 1
        assert TEMPLATE_VAR in capsys.readouterr().err

    def test_missing_template_file(self, capsys):
        assert run(['render', '-s', str(OCEAN), 'missing.mustache']) == 1
        assert 'missing.mustache' in capsys.readouterr().err

    def test_unclosed_section(self, tmp_path: Path, capsys):
        tpl = tmp_path / 'bad.mustache'
        tpl.write_text('{{#base00-hex}}never closed')
        assert run(['render', '-s', str(OCEAN), str(tpl)]) == 1
        assert 'never closed' in capsys.readouterr().err

    def test_template_not_utf8(self, tmp_path: Path, capsys):
        tpl = tmp_path / 'binary.mustache'
        tpl.write_bytes(b'\xff{{base00-hex}}')
        assert run(['render', '-s', str(OCEAN), str(tpl)]) == 1
        assert 'UTF-8' in capsys.readouterr().err


class TestField:
    def test_resolves_fields(self, capsys):
        code = run(['field', '-s', str(OCEAN), 'base0D-hex', 'base0D-hex-bgr', 'scheme-slug'])
        out = capsys.readouterr().out
        assert code == 0
        assert 'base0D-hex = 8fa1b3' in out
        assert 'base0D-hex-bgr = b3a18f' in out
        assert 'scheme-slug = ocean' in out
        assert 'FOUND 3/3 fields' in out

    def test_missing_field_exit_code(self, capsys):
        code = run(['field', '-s', str(OCEAN), 'base10-hex', 'base00-rgb'])
        out = capsys.readouterr().out
        assert code == 1
        assert 'base10-hex = (not found)' in out
        assert 'base00-rgb = (not found)' in out

    def test_json(self, capsys):
        run(['field', '-s', str(OCEAN), '--json', 'base08-rgb-r', 'base10-hex'])
        data = json.loads(capsys.readouterr().out)
        assert data['fields'] == {'base08-rgb-r': '191', 'base10-hex': None}
        assert data['summary'] == {'total': 2, 'found': 1, 'missing': ['base10-hex']}


class TestInspect:
    def test_json(self, capsys):
        assert run(['inspect', '-s', str(OCEAN), '--json']) == 0
        data = json.loads(capsys.readouterr().out)
        assert data['scheme'] == 'Ocean'
        assert data['slug'] == 'ocean'
        assert [c['index'] for c in data['colors']][:3] == ['base00', 'base01', 'base02']
        first = data['colors'][0]
        assert first['hex'] == '2b303b'
        assert first['rgb'] == [43, 48, 59]
        assert len(first['hsl']) == 3

    def test_text(self, capsys):
        assert run(['inspect', '-s', str(OCEAN)]) == 0
        out = capsys.readouterr().out
        assert out.startswith('base16-scheme: Ocean by Chris Kempson')
        assert 'base0F  #ab7967' in out


class TestSwatch:
    def test_writes_png(self, tmp_path: Path, capsys):
        target = tmp_path / 'swatch.png'
        assert run(['swatch', '-s', str(OCEAN), str(target), '--size', '4']) == 0
        with Image.open(target) as img:
            assert img.size == (32, 8)
            assert img.getpixel((0, 0)) == (0x2B, 0x30, 0x3B, 255)
            assert img.getpixel((5, 1)) == (0x34, 0x3D, 0x46, 255)
            assert img.getpixel((1, 5)) == (0xBF, 0x61, 0x6A, 255)
        assert str(target) in capsys.readouterr().out

    def test_partial_last_row_transparent(self):
        rgb = np.array([[255, 0, 0], [0, 255, 0], [0, 0, 255]], dtype=np.uint8)
        img = build_swatch(rgb, size=2, columns=2)
        assert img.size == (4, 4)
        assert img.getpixel((3, 3))[3] == 0

    def test_invalid_size(self):
        with pytest.raises(ValueError):
            build_swatch(np.zeros((1, 3), dtype=np.uint8), size=0)

    @pytest.mark.parametrize('flag', ['--size', '--columns'])
    def test_zero_from_cli(self, tmp_path: Path, capsys, flag: str):
        target = tmp_path / 'swatch.png'
        assert run(['swatch', '-s', str(OCEAN), str(target), flag, '0']) == 1
        assert 'must be positive' in capsys.readouterr().err
        assert not target.exists()


class TestErrors:
    def test_no_scheme(self, capsys):
        assert run(['inspect']) == 1
        assert SCHEME_VAR in capsys.readouterr().err

    def test_scheme_not_found(self, capsys):
        assert run(['inspect', '-s', 'nope.yaml']) == 1
        assert 'scheme not found' in capsys.readouterr().err

    def test_bad_scheme(self, tmp_path: Path, capsys):
        bad = tmp_path / 'bad.yaml'
        bad.write_text('scheme: X\nauthor: Y\nbase00: "#123456"\n')
        assert run(['inspect', '-s', str(bad)]) == 1
        assert 'base00' in capsys.readouterr().err

    def test_scheme_not_utf8(self, tmp_path: Path, capsys):
        bad = tmp_path / 'latin1.yaml'
        bad.write_bytes(b'scheme: "Oc\xe9an"\nauthor: A\nbase00: "000000"\n')
        assert run(['field', '-s', str(bad), 'base00-hex']) == 1
        assert 'UTF-8' in capsys.readouterr().err

    def test_no_command(self, capsys):
        assert run([]) == 1

    def test_help_lists_commands(self, capsys):
        assert run(['help']) == 0
        out = capsys.readouterr().out
        for name in ('field', 'inspect', 'render', 'swatch'):
            assert name in out

    def test_help_for_command(self, capsys):
        assert run(['help', 'render']) == 0
        assert 'mustache' in capsys.readouterr().out

    def test_help_unknown(self, capsys):
        assert run(['help', 'nope']) == 1
