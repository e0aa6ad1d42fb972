"""
Render a contribution calendar as isometric terrain.

Writes one SVG per color mode (terrain-dark.svg, terrain-light.svg) and,
with --preview, a PNG of the bare terrain beside each.

Usage:
    uv run render-terrain calendar.json --user octocat --output out/
    uv run python -m isometric_terrain.render_terrain calendar.json --modes dark --preview
"""
import argparse
import logging
import sys
from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv
from tabulate import tabulate

from isometric_terrain.config.terrain_config import RenderConfig, load_render_config
from isometric_terrain.data.activity import (
    ContributionCalendar,
    ContributionStats,
    InvalidCalendarError,
    compute_stats,
    load_calendar,
)
from isometric_terrain.generation.catalog import ColorMode, Hemisphere
from isometric_terrain.rendering.compositor import RenderOptions, Scene, compose_scene, scene_to_svg
from isometric_terrain.rendering.preview import render_preview

logger = logging.getLogger(__name__)

LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'


def render_mode(
    calendar: ContributionCalendar,
    stats: ContributionStats,
    config: RenderConfig,
    mode: ColorMode,
    title: str,
    preview: bool = False,
) -> Scene:
    """Compose one mode and write its files"""
    identity = config.identity or calendar.username
    options = RenderOptions(
        identity=identity,
        title=title,
        mode=mode,
        hemisphere=config.hemisphere,
        width=config.width,
        height=config.height,
        origin=config.origin,
    )
    scene = compose_scene(calendar, stats, options)

    config.output_dir.mkdir(parents=True, exist_ok=True)
    svg_path = config.output_dir / f'terrain-{mode.value}.svg'
    svg_path.write_text(scene_to_svg(scene), encoding='utf-8')
    logger.info(f"Wrote {svg_path}")

    if preview:
        png_path = config.output_dir / f'terrain-{mode.value}.png'
        render_preview(scene, scale=config.preview_scale).save(png_path)
        logger.info(f"Wrote {png_path}")
    return scene


def render_all(
    calendar: ContributionCalendar,
    config: RenderConfig,
    title: Optional[str] = None,
    preview: bool = False,
) -> List[Scene]:
    """
    Render every configured mode concurrently.

    Modes share no state, so each runs in its own worker.

    Returns:
        Scenes in the configured mode order
    """
    stats = compute_stats(calendar)
    title = title or config.title_for(calendar.username)

    scenes = {}
    with ThreadPoolExecutor(max_workers=len(config.modes) or 1) as executor:
        futures = {
            executor.submit(render_mode, calendar, stats, config, mode, title, preview): mode
            for mode in config.modes
        }
        for future in as_completed(futures):
            scenes[futures[future]] = future.result()

    return [scenes[mode] for mode in config.modes]


def print_summary(stats: ContributionStats, scenes: List[Scene]) -> None:
    rows = [
        ['Contributions', stats.total],
        ['Longest streak', f'{stats.longest_streak}d'],
        ['Current streak', f'{stats.current_streak}d'],
        ['Most active', stats.most_active_day],
    ]
    print(tabulate(rows, headers=['Statistic', 'Value']))

    landmark_rows = [
        [scene.mode.value, landmark.type.value, landmark.tier.value, landmark.week, landmark.day]
        for scene in scenes
        for landmark in scene.landmarks
    ]
    if landmark_rows:
        print()
        print(tabulate(landmark_rows, headers=['Mode', 'Landmark', 'Tier', 'Week', 'Day']))
    else:
        print('\nNo landmarks placed')


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Render a contribution calendar as isometric terrain")
    parser.add_argument('calendar', type=Path, help='Path to the calendar JSON')
    parser.add_argument('--user', help='Username to seed and title the render with')
    parser.add_argument('--title', help='Title text (default from the config title template)')
    parser.add_argument('--output', type=Path, help='Output directory')
    parser.add_argument('--hemisphere', choices=[h.value for h in Hemisphere], help='Season alignment')
    parser.add_argument(
        '--modes',
        nargs='+',
        choices=[m.value for m in ColorMode],
        help='Color modes to render (default: all)',
    )
    parser.add_argument('--config', type=Path, help='Path to a terrain_config.json')
    parser.add_argument('--preview', action='store_true', help='Also write a PNG preview per mode')
    parser.add_argument('--verbose', '-v', action='store_true', help='Debug logging')
    return parser


def apply_args(config: RenderConfig, args: argparse.Namespace) -> RenderConfig:
    if args.output is not None:
        config.output_dir = args.output
    if args.hemisphere is not None:
        config.hemisphere = Hemisphere(args.hemisphere)
    if args.modes:
        config.modes = tuple(ColorMode(m) for m in args.modes)
    return config


def main(argv: Optional[List[str]] = None) -> int:
    load_dotenv()
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format=LOG_FORMAT,
    )

    config = apply_args(load_render_config(args.config), args)

    try:
        calendar = load_calendar(args.calendar, username=args.user)
    except InvalidCalendarError as e:
        logger.error(f"Invalid calendar {args.calendar}: {e}")
        return 1
    except FileNotFoundError:
        logger.error(f"Calendar not found: {args.calendar}")
        return 1

    scenes = render_all(calendar, config, title=args.title, preview=args.preview)
    print_summary(compute_stats(calendar), scenes)
    return 0


if __name__ == '__main__':
    sys.exit(main())
