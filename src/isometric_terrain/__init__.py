"""
Isometric terrain dioramas from contribution calendars.

A calendar of daily activity counts becomes a 52 x 7 field of isometric
blocks whose height, color, vegetation and settlements grow with activity,
tinted by season and rendered to a standalone animated SVG.
"""

from isometric_terrain.generation.catalog import ColorMode, Hemisphere
from isometric_terrain.rendering.compositor import RenderOptions, compose_scene, render_svg, scene_to_svg

__all__ = ["ColorMode", "Hemisphere", "RenderOptions", "compose_scene", "render_svg", "scene_to_svg"]
