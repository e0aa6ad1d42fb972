"""Render configuration: canvas geometry, modes, output location"""
import json
import logging
import os
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Dict, Optional, Tuple

from isometric_terrain.generation.catalog import ColorMode, Hemisphere
from isometric_terrain.generation.projection import DEFAULT_ORIGIN, TILE_HALF_HEIGHT, TILE_HALF_WIDTH
from isometric_terrain.rendering.compositor import DEFAULT_HEIGHT, DEFAULT_WIDTH

logger = logging.getLogger(__name__)

__all__ = [
    'DEFAULT_HEIGHT',
    'DEFAULT_ORIGIN',
    'DEFAULT_WIDTH',
    'RenderConfig',
    'TILE_HALF_HEIGHT',
    'TILE_HALF_WIDTH',
    'load_render_config',
]

ENV_HEMISPHERE = 'TERRAIN_HEMISPHERE'
ENV_OUTPUT_DIR = 'TERRAIN_OUTPUT_DIR'
ENV_IDENTITY = 'TERRAIN_IDENTITY'


@dataclass
class RenderConfig:
    """Settings shared by every render of one CLI invocation"""
    width: int = DEFAULT_WIDTH
    height: int = DEFAULT_HEIGHT
    origin: Tuple[float, float] = DEFAULT_ORIGIN
    hemisphere: Hemisphere = Hemisphere.NORTH
    modes: Tuple[ColorMode, ...] = (ColorMode.DARK, ColorMode.LIGHT)
    output_dir: Path = field(default_factory=lambda: Path('output'))
    title_template: str = "{username}'s contributions"
    preview_scale: int = 2
    identity: Optional[str] = None

    def title_for(self, username: str) -> str:
        return self.title_template.format(username=username)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'width': self.width,
            'height': self.height,
            'origin': list(self.origin),
            'hemisphere': self.hemisphere.value,
            'modes': [mode.value for mode in self.modes],
            'output_dir': str(self.output_dir),
            'title_template': self.title_template,
            'preview_scale': self.preview_scale,
            'identity': self.identity,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'RenderConfig':
        """
        Build a config from parsed JSON. Missing keys keep their defaults.

        Raises:
            ValueError: for an unknown mode or hemisphere
        """
        defaults = cls()
        origin = data.get('origin')
        return cls(
            width=int(data.get('width', defaults.width)),
            height=int(data.get('height', defaults.height)),
            origin=(float(origin[0]), float(origin[1])) if origin else defaults.origin,
            hemisphere=Hemisphere(data.get('hemisphere', defaults.hemisphere.value)),
            modes=tuple(ColorMode(m) for m in data.get('modes', [m.value for m in defaults.modes])),
            output_dir=Path(data.get('output_dir', defaults.output_dir)),
            title_template=data.get('title_template', defaults.title_template),
            preview_scale=int(data.get('preview_scale', defaults.preview_scale)),
            identity=data.get('identity'),
        )


def apply_env_overrides(config: RenderConfig) -> RenderConfig:
    """Environment variables win over the file"""
    overrides: Dict[str, Any] = {}
    hemisphere = os.getenv(ENV_HEMISPHERE)
    if hemisphere:
        overrides['hemisphere'] = Hemisphere(hemisphere.lower())
    output_dir = os.getenv(ENV_OUTPUT_DIR)
    if output_dir:
        overrides['output_dir'] = Path(output_dir)
    identity = os.getenv(ENV_IDENTITY)
    if identity:
        overrides['identity'] = identity
    if overrides:
        logger.debug(f"Environment overrides: {sorted(overrides)}")
    return replace(config, **overrides)


def load_render_config(config_path: Optional[Path] = None) -> RenderConfig:
    """
    Load render settings from a JSON file.

    Args:
        config_path: Path to the config file. If None, looks for
            terrain_config.json in the working directory.

    Returns:
        RenderConfig with environment overrides applied

    If the config file doesn't exist, the defaults are used.
    """
    if config_path is None:
        config_path = Path('terrain_config.json')

    if config_path.exists():
        with open(config_path) as f:
            config = RenderConfig.from_dict(json.load(f))
        logger.info(f"Loaded render config from {config_path}")
    else:
        config = RenderConfig()

    return apply_env_overrides(config)
