"""Tests for the render-terrain command"""
import json

import pytest

from isometric_terrain.config.terrain_config import RenderConfig
from isometric_terrain.generation.catalog import ColorMode
from isometric_terrain.render_terrain import build_parser, main, render_all

from conftest import SAMPLE_WEEKS, calendar_dict, make_calendar


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    for name in ('TERRAIN_HEMISPHERE', 'TERRAIN_OUTPUT_DIR', 'TERRAIN_IDENTITY'):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def calendar_file(tmp_path):
    path = tmp_path / 'calendar.json'
    path.write_text(json.dumps(calendar_dict(SAMPLE_WEEKS)))
    return path


class TestRenderAll:
    """Test rendering every configured mode"""

    def test_writes_one_svg_per_mode(self, tmp_path):
        """Test both modes are written in configured order"""
        config = RenderConfig(output_dir=tmp_path / 'out')
        scenes = render_all(make_calendar(SAMPLE_WEEKS), config)
        assert [scene.mode for scene in scenes] == [ColorMode.DARK, ColorMode.LIGHT]
        for mode in ('dark', 'light'):
            svg = (tmp_path / 'out' / f'terrain-{mode}.svg').read_text(encoding='utf-8')
            assert svg.startswith('<svg')
            assert "octocat&apos;s contributions" in svg

    def test_preview_written(self, tmp_path):
        """Test previews are written beside the documents"""
        config = RenderConfig(output_dir=tmp_path, modes=(ColorMode.DARK,))
        render_all(make_calendar(SAMPLE_WEEKS), config, title='T', preview=True)
        assert (tmp_path / 'terrain-dark.png').exists()
        assert not (tmp_path / 'terrain-light.svg').exists()


class TestMain:
    """Test the command line entry point"""

    def test_parser_modes(self):
        """Test modes are restricted to known values"""
        args = build_parser().parse_args(['c.json', '--modes', 'light'])
        assert args.modes == ['light']
        with pytest.raises(SystemExit):
            build_parser().parse_args(['c.json', '--modes', 'sepia'])

    def test_main_renders(self, calendar_file, tmp_path, capsys):
        """Test a full run writes files and prints the summary"""
        out = tmp_path / 'renders'
        code = main([str(calendar_file), '--output', str(out), '--user', 'mona', '--config', str(tmp_path / 'none.json')])
        assert code == 0
        assert (out / 'terrain-dark.svg').exists()
        assert (out / 'terrain-light.svg').exists()
        printed = capsys.readouterr().out
        assert 'Contributions' in printed
        assert 'Most active' in printed

    def test_invalid_calendar(self, tmp_path):
        """Test a malformed calendar exits with status 1"""
        path = tmp_path / 'bad.json'
        path.write_text('{"weeks": 3}')
        assert main([str(path), '--output', str(tmp_path)]) == 1

    def test_invalid_year(self, tmp_path):
        """Test a calendar with a non-numeric year exits with status 1"""
        path = tmp_path / 'bad_year.json'
        path.write_text(json.dumps({**calendar_dict(SAMPLE_WEEKS), 'year': 'soon'}))
        assert main([str(path), '--output', str(tmp_path)]) == 1

    def test_missing_calendar(self, tmp_path):
        """Test a missing calendar exits with status 1"""
        assert main([str(tmp_path / 'nope.json'), '--output', str(tmp_path)]) == 1
