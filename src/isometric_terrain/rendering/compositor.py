"""
Scene composition: runs every stage for one color mode and stacks the layers.

Usage:
    calendar = load_calendar(Path('calendar.json'))
    stats = compute_stats(calendar)
    svg = render_svg(calendar, stats, RenderOptions(identity='octocat', mode=ColorMode.DARK))
"""
import logging
from dataclasses import dataclass, field
from datetime import date
from typing import List, Optional, Sequence, Tuple

from isometric_terrain.data.activity import ContributionCalendar, ContributionStats
from isometric_terrain.generation.biomes import BiomeMap, generate_biome_map
from isometric_terrain.generation.catalog import ColorMode, Hemisphere
from isometric_terrain.generation.decorations import PlacedDecoration, select_decorations
from isometric_terrain.generation.intensity import normalize_weeks
from isometric_terrain.generation.landmarks import PlacedLandmark, select_landmarks
from isometric_terrain.generation.projection import DEFAULT_ORIGIN, IsoCell, to_iso_cells
from isometric_terrain.generation.seasons import compute_season_rotation
from isometric_terrain.generation.shared import DAYS, WEEKS, hash_string, make_rng
from isometric_terrain.rendering import effects
from isometric_terrain.rendering.blocks import render_terrain_blocks
from isometric_terrain.rendering.decoration_glyphs import render_decorations
from isometric_terrain.rendering.landmark_glyphs import render_glow_defs, render_landmarks
from isometric_terrain.rendering.palette import TerrainPalette, get_week_palettes
from isometric_terrain.rendering.svg import svg_root, svg_style

logger = logging.getLogger(__name__)

DEFAULT_WIDTH = 840
DEFAULT_HEIGHT = 240
REFERENCE_WEEK = 26

LAYER_ORDER: Tuple[str, ...] = (
    'style',
    'celestials',
    'clouds',
    'terrain-blocks',
    'water-overlays',
    'water-ripples',
    'decorations',
    'landmarks',
    'snow-particles',
    'falling-petals',
    'falling-leaves',
    'terrain-overlays',
    'title',
    'stats-bar',
)


@dataclass(frozen=True)
class RenderOptions:
    """
    Inputs that shape one render besides the calendar itself.

    Attributes:
        identity: Seeds every random stage; usually the username
        title: Text drawn top-left; defaults to the identity
        mode: Color mode to render
        hemisphere: Aligns the seasonal cycle
        width: Canvas width in pixels
        height: Canvas height in pixels
        origin: Screen position of cell (0, 0)
        today: Fallback season anchor when the calendar has no days
    """
    identity: str
    title: Optional[str] = None
    mode: ColorMode = ColorMode.DARK
    hemisphere: Hemisphere = Hemisphere.NORTH
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    origin: Tuple[float, float] = DEFAULT_ORIGIN
    today: Optional[date] = None


@dataclass(frozen=True)
class Layer:
    name: str
    content: str


@dataclass(frozen=True)
class Scene:
    """A composed render, still split into its named layers"""
    mode: ColorMode
    width: int
    height: int
    layers: Tuple[Layer, ...]
    defs: str = ''
    rotation: int = 0
    seed: int = 0
    iso_cells: Tuple[IsoCell, ...] = field(default=(), repr=False)
    decorations: Tuple[PlacedDecoration, ...] = field(default=(), repr=False)
    landmarks: Tuple[PlacedLandmark, ...] = ()

    def layer(self, name: str) -> str:
        for layer in self.layers:
            if layer.name == name:
                return layer.content
        raise KeyError(name)


def scene_seeds(identity: str, mode: ColorMode, year: Optional[int]) -> Tuple[int, Optional[int]]:
    """Main seed and, when the year is known, the variant seed"""
    seed = hash_string(identity + mode.value)
    variant_seed = hash_string(identity + str(year)) if year is not None else None
    return seed, variant_seed


def season_rotation(calendar: ContributionCalendar, hemisphere: Hemisphere, today: Optional[date] = None) -> int:
    oldest = calendar.oldest_date or today or date.today()
    return compute_season_rotation(oldest, hemisphere)


def _off_landmarks(decorations: Sequence[PlacedDecoration], landmarks: Sequence[PlacedLandmark]) -> List[PlacedDecoration]:
    taken = {landmark.key for landmark in landmarks}
    return [d for d in decorations if d.cell.key not in taken]


def compose_scene(calendar: ContributionCalendar, stats: ContributionStats, options: RenderOptions) -> Scene:
    """
    Run every stage for one mode and collect the layers in drawing order.

    Args:
        calendar: Weeks of activity, oldest first
        stats: Statistics for landmark gating and the stats bar
        options: Identity, mode, hemisphere and canvas

    Returns:
        Scene whose layers follow LAYER_ORDER
    """
    mode = options.mode
    seed, variant_seed = scene_seeds(options.identity, mode, calendar.year)
    rotation = season_rotation(calendar, options.hemisphere, options.today)

    week_palettes: Tuple[TerrainPalette, ...] = get_week_palettes(mode, rotation, WEEKS)
    palette = week_palettes[REFERENCE_WEEK]

    cells = normalize_weeks(calendar.weeks)
    iso_cells = to_iso_cells(cells, palette, options.origin)
    biome_map: BiomeMap = generate_biome_map(WEEKS, DAYS, make_rng(seed, 'biomes'))

    decorations = select_decorations(
        iso_cells,
        make_rng(seed, 'decorations'),
        make_rng(seed if variant_seed is None else variant_seed, 'variants'),
        biome_map,
        rotation,
    )
    landmarks = select_landmarks(iso_cells, make_rng(seed, 'landmarks'), stats, biome_map)
    decorations = _off_landmarks(decorations, landmarks)

    contents = {
        'style': svg_style(effects.render_terrain_css(iso_cells, biome_map)),
        'celestials': effects.render_celestials(make_rng(seed, 'celestials'), palette),
        'clouds': effects.render_clouds(make_rng(seed, 'clouds'), palette),
        'terrain-blocks': render_terrain_blocks(iso_cells, week_palettes, rotation, biome_map),
        'water-overlays': effects.render_water_overlays(iso_cells, palette, biome_map),
        'water-ripples': effects.render_water_ripples(iso_cells, palette, biome_map, make_rng(seed, 'ripples')),
        'decorations': render_decorations(decorations, week_palettes),
        'landmarks': render_landmarks(landmarks, week_palettes),
        'snow-particles': effects.render_snow(iso_cells, rotation, make_rng(seed, 'snow')),
        'falling-petals': effects.render_petals(iso_cells, rotation, palette, make_rng(seed, 'petals')),
        'falling-leaves': effects.render_leaves(iso_cells, rotation, palette, make_rng(seed, 'leaves')),
        'terrain-overlays': effects.render_animated_overlays(iso_cells, palette),
        'title': effects.render_title(options.title or options.identity, palette),
        'stats-bar': effects.render_stats_bar(stats, palette),
    }

    logger.info(
        f"Composed {mode.value} scene for {options.identity}: {len(iso_cells)} cells, "
        f"{len(decorations)} decorations, {len(landmarks)} landmarks, rotation {rotation}"
    )
    return Scene(
        mode=mode,
        width=options.width,
        height=options.height,
        layers=tuple(Layer(name, contents[name]) for name in LAYER_ORDER),
        defs=render_glow_defs(mode),
        rotation=rotation,
        seed=seed,
        iso_cells=tuple(iso_cells),
        decorations=tuple(decorations),
        landmarks=tuple(landmarks),
    )


def scene_to_svg(scene: Scene) -> str:
    content = '\n'.join(layer.content for layer in scene.layers)
    return svg_root(scene.width, scene.height, content, defs=scene.defs)


def render_svg(calendar: ContributionCalendar, stats: ContributionStats, options: RenderOptions) -> str:
    return scene_to_svg(compose_scene(calendar, stats, options))
