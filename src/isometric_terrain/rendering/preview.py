"""
Raster preview of the terrain.

Draws only the block faces (no decorations, effects or text) into a Pillow
image, which is enough to eyeball the elevation and palette of a render
without an SVG viewer.
"""
import logging
from typing import Iterable, List, Sequence, Tuple

from PIL import Image, ImageColor, ImageDraw

from isometric_terrain.generation.projection import TILE_HALF_HEIGHT as THH
from isometric_terrain.generation.projection import TILE_HALF_WIDTH as THW
from isometric_terrain.generation.projection import IsoCell
from isometric_terrain.rendering.compositor import Scene
from isometric_terrain.rendering.palette import MODE_CHROME

logger = logging.getLogger(__name__)

Point = Tuple[float, float]


class TerrainPreviewRenderer:
    """Rasterizes projected cells as flat-shaded blocks"""

    def __init__(
        self,
        width: int,
        height: int,
        scale: int = 2,
        background_color: Tuple[int, int, int] = (13, 17, 23),
    ):
        """
        Initialize preview renderer.

        Args:
            width: Canvas width in scene units
            height: Canvas height in scene units
            scale: Integer upscaling factor
            background_color: RGB fill behind the terrain
        """
        if scale < 1:
            raise ValueError(f"Preview scale must be at least 1, got {scale}")
        self.width = width
        self.height = height
        self.scale = scale
        self.background_color = background_color

    def _scaled(self, coords: Iterable[Point]) -> List[Point]:
        return [(x * self.scale, y * self.scale) for x, y in coords]

    def _draw_block(self, draw: ImageDraw.ImageDraw, cell: IsoCell):
        cx, cy, h = cell.x, cell.y, cell.height
        if h > 0:
            left = [(cx - THW, cy), (cx, cy + THH), (cx, cy + THH + h), (cx - THW, cy + h)]
            right = [(cx + THW, cy), (cx, cy + THH), (cx, cy + THH + h), (cx + THW, cy + h)]
            draw.polygon(self._scaled(left), fill=ImageColor.getrgb(cell.colors.left))
            draw.polygon(self._scaled(right), fill=ImageColor.getrgb(cell.colors.right))
        top = [(cx, cy - THH), (cx + THW, cy), (cx, cy + THH), (cx - THW, cy)]
        draw.polygon(self._scaled(top), fill=ImageColor.getrgb(cell.colors.top))

    def render_cells(self, iso_cells: Sequence[IsoCell]) -> Image.Image:
        """
        Render cells back to front.

        Args:
            iso_cells: Cells already in drawing order

        Returns:
            RGB image of size (width * scale, height * scale)
        """
        img = Image.new('RGB', (self.width * self.scale, self.height * self.scale), self.background_color)
        draw = ImageDraw.Draw(img)
        for cell in iso_cells:
            self._draw_block(draw, cell)
        logger.info(f"Rasterized {len(iso_cells)} blocks at {self.scale}x")
        return img


def render_preview(scene: Scene, scale: int = 2) -> Image.Image:
    """Preview image for a composed scene, on the mode's subtle background"""
    background = ImageColor.getrgb(MODE_CHROME[scene.mode].bg_subtle)
    renderer = TerrainPreviewRenderer(scene.width, scene.height, scale=scale, background_color=background)
    return renderer.render_cells(scene.iso_cells)
