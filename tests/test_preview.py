"""Tests for the raster preview"""
import pytest
from PIL import Image

from isometric_terrain.generation.catalog import ColorMode
from isometric_terrain.generation.projection import IsoCell
from isometric_terrain.rendering.compositor import RenderOptions, compose_scene
from isometric_terrain.rendering.palette import ElevationColors
from isometric_terrain.rendering.preview import TerrainPreviewRenderer, render_preview

COLORS = ElevationColors(top='#ff0000', left='rgb(0,255,0)', right='#0000ff')


class TestTerrainPreviewRenderer:
    """Test block rasterization"""

    def test_rejects_bad_scale(self):
        """Test scales below one are refused"""
        with pytest.raises(ValueError):
            TerrainPreviewRenderer(100, 50, scale=0)

    def test_empty_canvas(self):
        """Test an empty scene is just background"""
        renderer = TerrainPreviewRenderer(40, 20, scale=3, background_color=(1, 2, 3))
        img = renderer.render_cells([])
        assert isinstance(img, Image.Image)
        assert img.mode == 'RGB'
        assert img.size == (120, 60)
        assert img.getpixel((0, 0)) == (1, 2, 3)

    def test_block_faces(self):
        """Test the top face and the side faces are filled"""
        cell = IsoCell(week=0, day=0, intensity=50, height=6, x=20, y=10, colors=COLORS)
        img = TerrainPreviewRenderer(40, 30, scale=1).render_cells([cell])
        assert img.getpixel((20, 10)) == (255, 0, 0)
        assert img.getpixel((16, 15)) == (0, 255, 0)
        assert img.getpixel((24, 15)) == (0, 0, 255)


class TestRenderPreview:
    """Test previews of composed scenes"""

    def test_scene_preview(self, sample_calendar, quiet_stats):
        """Test the preview matches the scene canvas and mode background"""
        scene = compose_scene(sample_calendar, quiet_stats, RenderOptions(identity='octocat', mode=ColorMode.LIGHT))
        img = render_preview(scene, scale=2)
        assert img.size == (scene.width * 2, scene.height * 2)
        assert img.getpixel((1, 1)) != (0, 0, 0)
