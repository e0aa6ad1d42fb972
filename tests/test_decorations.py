"""Tests for decoration pools and selection"""
from collections import Counter

import pytest

from isometric_terrain.generation.biomes import BiomeContext, generate_biome_map
from isometric_terrain.generation.catalog import CSS_ANIMATED, SMIL_ANIMATED, ColorMode
from isometric_terrain.generation.catalog import DecorationType as D
from isometric_terrain.generation.decorations import (
    CSS_BUDGET,
    CSS_FALLBACK,
    LEVEL_POOLS,
    MAX_CHANCE,
    SMIL_BUDGET,
    SMIL_FALLBACK,
    SMOKE_BUDGET,
    AnimationBudget,
    DecorationPool,
    apply_season,
    blend_with_biome,
    compute_richness,
    get_level_pool,
    select_decorations,
)
from isometric_terrain.generation.intensity import normalize_weeks
from isometric_terrain.generation.projection import cell_lookup, to_iso_cells
from isometric_terrain.generation.shared import make_rng
from isometric_terrain.rendering.palette import get_terrain_palette

from conftest import make_calendar


def _iso(calendar):
    return to_iso_cells(normalize_weeks(calendar.weeks), get_terrain_palette(ColorMode.DARK))


def _select(calendar, seed=42, variant_seed=None, rotation=0, with_biomes=True):
    cells = _iso(calendar)
    biome_map = generate_biome_map(52, 7, make_rng(seed, 'biomes')) if with_biomes else None
    return select_decorations(
        cells,
        make_rng(seed, 'decorations'),
        make_rng(seed if variant_seed is None else variant_seed, 'variants'),
        biome_map,
        rotation,
    )


class TestLevelPools:
    """Test the intensity bands"""

    def test_band_count(self):
        """Test the band table covers 0-99 in ascending order"""
        maxima = [band.max_intensity for band in LEVEL_POOLS]
        assert len(LEVEL_POOLS) == 18
        assert maxima == sorted(maxima)
        assert maxima[-1] == 99

    def test_lookup(self):
        """Test band lookup by intensity"""
        assert get_level_pool(0).chance == 0.06
        assert D.WHALE in get_level_pool(12).types
        assert D.CASTLE in get_level_pool(99).types
        assert get_level_pool(150) == get_level_pool(99)


class TestPoolShaping:
    """Test biome and season adjustments"""

    def test_river_floor_chance(self):
        """Test rivers raise the chance to their floor"""
        pool = blend_with_biome(get_level_pool(0), BiomeContext(is_river=True), 0)
        assert pool.chance == 0.35
        assert D.REEDS in pool.types

    def test_pond_additions(self):
        """Test high-intensity ponds get fountains"""
        pool = blend_with_biome(get_level_pool(85), BiomeContext(is_pond=True), 85)
        assert D.FOUNTAIN in pool.types

    def test_chance_is_capped(self):
        """Test stacked bonuses never exceed the cap"""
        biome = BiomeContext(near_water=True, forest_density=1.0)
        pool = blend_with_biome(DecorationPool((D.BUSH,), 0.64), biome, 99)
        assert pool.chance == MAX_CHANCE

    def test_dense_forest_adds_three_sets(self):
        """Test dense forests add trees three times"""
        pool = blend_with_biome(DecorationPool((), 0.3), BiomeContext(forest_density=0.9), 50)
        assert Counter(pool.types)[D.OWL] == 3

    def test_season_removes_and_adds(self):
        """Test winter strips flowers and adds snow"""
        pool = apply_season(DecorationPool((D.FLOWER, D.ROCK), 0.2), week=0, rotation=0, intensity=10)
        assert D.FLOWER not in pool.types
        assert D.ROCK in pool.types
        assert D.SNOWDRIFT in pool.types
        assert pool.chance == 0.2


class TestRichness:
    """Test the neighborhood score"""

    def test_uniform_grid(self, uniform_calendar):
        """Test a saturated grid is fully rich, edges included"""
        cells = _iso(uniform_calendar)
        lookup = cell_lookup(cells)
        assert {compute_richness(c, lookup) for c in cells} == {1.0}

    def test_isolated_cell(self):
        """Test a lone cell has no richness"""
        cells = _iso(make_calendar([[5]]))
        assert compute_richness(cells[0], cell_lookup(cells)) == 0.0


class TestAnimationBudget:
    """Test animation caps and substitutions"""

    def test_smil_exhaustion(self):
        """Test motion-script types fall back once the budget is spent"""
        budget = AnimationBudget(smil=1)
        assert budget.admit_smil(D.SEAGULL) is D.SEAGULL
        assert budget.admit_smil(D.SEAGULL) is SMIL_FALLBACK
        assert budget.substitutions == 1

    def test_css_exhaustion(self):
        """Test style-sheet types fall back once the budget is spent"""
        budget = AnimationBudget(css=0)
        assert budget.admit_css(D.CATTAIL) is CSS_FALLBACK

    def test_static_types_are_free(self):
        """Test static types never consume budget"""
        budget = AnimationBudget()
        assert budget.admit_smil(D.ROCK) is D.ROCK
        assert budget.admit_css(D.ROCK) is D.ROCK
        assert budget.smil == SMIL_BUDGET and budget.css == CSS_BUDGET

    def test_smoke_fallback(self):
        """Test smoke uses the caller's fallback when spent"""
        budget = AnimationBudget(smoke=0)
        assert budget.admit_smoke(D.SMOKE, D.TORCH) is D.TORCH
        assert budget.admit_smoke(D.ROCK, D.TORCH) is D.ROCK


class TestSelectDecorations:
    """Test whole-grid selection"""

    def test_zero_activity_is_bare(self, zero_calendar):
        """Test an inactive calendar gets no decorations"""
        assert _select(zero_calendar) == []

    def test_deterministic(self, year_calendar):
        """Test equal seeds give equal placements"""
        assert _select(year_calendar) == _select(year_calendar)

    def test_places_something(self, year_calendar):
        """Test an active year is decorated"""
        assert len(_select(year_calendar)) > 20

    def test_at_most_two_per_cell(self, year_calendar):
        """Test no cell holds more than two decorations"""
        per_cell = Counter(d.cell.key for d in _select(year_calendar))
        assert max(per_cell.values()) <= 2

    def test_budgets_respected(self, uniform_calendar):
        """Test animation caps hold over a busy grid"""
        placed = _select(uniform_calendar)
        types = [d.type for d in placed]
        assert sum(t in SMIL_ANIMATED for t in types) <= SMIL_BUDGET
        assert sum(t in CSS_ANIMATED for t in types) <= CSS_BUDGET
        assert types.count(D.SMOKE) <= SMOKE_BUDGET

    def test_offsets_and_variants(self, year_calendar):
        """Test offsets stay near the cell and variants stay in range"""
        for decoration in _select(year_calendar):
            assert abs(decoration.offset_x) <= 2
            assert abs(decoration.offset_y) <= 1
            assert decoration.variant in (0, 1, 2)
            assert decoration.x == decoration.cell.x + decoration.offset_x

    def test_variant_seed_only_changes_variants(self, year_calendar):
        """Test reseeding variants keeps cells and types"""
        first = _select(year_calendar, variant_seed=1)
        second = _select(year_calendar, variant_seed=2)
        assert [(d.cell.key, d.type) for d in first] == [(d.cell.key, d.type) for d in second]
        assert [d.variant for d in first] != [d.variant for d in second]

    @pytest.mark.parametrize('rotation', [0, 13, 26, 39])
    def test_seasonal_exclusions(self, year_calendar, rotation):
        """Test winter weeks never show summer beach gear"""
        from isometric_terrain.generation.seasons import get_season_zone

        for decoration in _select(year_calendar, rotation=rotation):
            if get_season_zone(decoration.cell.week, rotation) == 0:
                assert decoration.type not in (D.PARASOL, D.SWIMMING_POOL, D.FLOWER)

    def test_without_biomes_or_seasons(self, year_calendar):
        """Test selection works with neither layer"""
        cells = _iso(year_calendar)
        placed = select_decorations(cells, make_rng(1, 'decorations'), make_rng(1, 'variants'))
        assert placed
