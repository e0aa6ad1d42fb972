"""
Glyph primitives for decorations and landmarks.

A glyph is data: a few variants, each a tuple of Shapes drawn around a local
origin at the foot of the object. Paint attributes name entries of the asset
color table (e.g. 'trunk', 'roof_a'); values starting with '#', 'rgb', 'url('
or equal to 'none' are used verbatim. Resolving names against the palette at
render time is what lets one glyph table serve every mode and season.

Usage:
    tree = Glyph(variants=((rect(-0.4, -3, 0.8, 3, 'trunk'), circle(0, -4, 2, 'leaf')),))
    svg = tree.render(120, 40, variant=0, assets=palette.assets)
"""
from dataclasses import dataclass
from typing import Iterable, Mapping, Optional, Set, Tuple

from isometric_terrain.rendering.svg import fmt, points

Attrs = Tuple[Tuple[str, object], ...]

_LITERAL_PREFIXES = ('#', 'rgb', 'url(')


def is_literal_color(value: str) -> bool:
    return value == 'none' or value.startswith(_LITERAL_PREFIXES)


def _paint(fill: str, style: dict) -> Attrs:
    """Fill plus an optional stroke, both palette-resolved"""
    paint = (('fill', fill),)
    if 'stroke' in style:
        paint += (('stroke', style.pop('stroke')),)
    return paint


def _style(style: Mapping[str, object]) -> Attrs:
    """Keyword style arguments to SVG attribute names (stroke_width -> stroke-width)"""
    return tuple((name.replace('_', '-'), value) for name, value in style.items())


@dataclass(frozen=True)
class Shape:
    """One SVG element with palette-resolved paint"""
    tag: str
    geometry: Attrs
    paint: Attrs = ()
    style: Attrs = ()
    children: Tuple['Shape', ...] = ()
    extra: str = ''

    def render(self, assets: Mapping[str, str]) -> str:
        attrs = [f'{name}="{_value(value)}"' for name, value in self.geometry]
        for name, value in self.paint:
            color = value if is_literal_color(value) else assets[value]
            attrs.append(f'{name}="{color}"')
        attrs.extend(f'{name}="{_value(value)}"' for name, value in self.style)
        head = ' '.join([self.tag] + attrs)
        inner = ''.join(child.render(assets) for child in self.children) + self.extra
        if inner:
            return f'<{head}>{inner}</{self.tag}>'
        return f'<{head}/>'

    def color_keys(self) -> Set[str]:
        keys = {value for _, value in self.paint if not is_literal_color(value)}
        for child in self.children:
            keys |= child.color_keys()
        return keys


def _value(value: object) -> str:
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return fmt(value)
    return str(value)


# =============================================================================
# Shape constructors
# =============================================================================

def poly(coords: Iterable[Tuple[float, float]], fill: str, **style) -> Shape:
    return Shape('polygon', (('points', points(coords)),), _paint(fill, style), _style(style))


def rect(x: float, y: float, width: float, height: float, fill: str, **style) -> Shape:
    return Shape(
        'rect',
        (('x', x), ('y', y), ('width', width), ('height', height)),
        _paint(fill, style),
        _style(style),
    )


def ellipse(cx: float, cy: float, rx: float, ry: float, fill: str, **style) -> Shape:
    return Shape('ellipse', (('cx', cx), ('cy', cy), ('rx', rx), ('ry', ry)), _paint(fill, style), _style(style))


def circle(cx: float, cy: float, r: float, fill: str, **style) -> Shape:
    return Shape('circle', (('cx', cx), ('cy', cy), ('r', r)), _paint(fill, style), _style(style))


def line(x1: float, y1: float, x2: float, y2: float, stroke: str, width: float = 0.4, **style) -> Shape:
    return Shape(
        'line',
        (('x1', x1), ('y1', y1), ('x2', x2), ('y2', y2)),
        (('stroke', stroke),),
        (('stroke-width', width),) + _style(style),
    )


def path(d: str, fill: str = 'none', stroke: Optional[str] = None, width: float = 0.4, **style) -> Shape:
    paint = (('fill', fill),)
    extra_style = _style(style)
    if stroke is not None:
        paint += (('stroke', stroke),)
        extra_style = (('stroke-width', width),) + extra_style
    return Shape('path', (('d', d),), paint, extra_style)


def moving(shapes: Iterable[Shape], animation: str, transform: Optional[str] = None) -> Shape:
    """Group of shapes driven by an inline animation element"""
    geometry = (('transform', transform),) if transform else ()
    return Shape('g', geometry, children=tuple(shapes), extra=animation)


def bob(dx: float, dy: float, dur: float) -> str:
    """Back-and-forth translation"""
    return (
        f'<animateTransform attributeName="transform" type="translate" '
        f'values="0,0;{fmt(dx)},{fmt(dy)};0,0" dur="{fmt(dur)}s" repeatCount="indefinite"/>'
    )


def spin(dur: float, cx: float = 0, cy: float = 0) -> str:
    return (
        f'<animateTransform attributeName="transform" type="rotate" '
        f'values="0 {fmt(cx)} {fmt(cy)};360 {fmt(cx)} {fmt(cy)}" dur="{fmt(dur)}s" repeatCount="indefinite"/>'
    )


def flicker(low: float, high: float, dur: float) -> str:
    return (
        f'<animate attributeName="opacity" values="{fmt(high)};{fmt(low)};{fmt(high)}" '
        f'dur="{fmt(dur)}s" repeatCount="indefinite"/>'
    )


def rise(height: float, dur: float) -> str:
    """Upward drift that fades out, for smoke and steam"""
    return (
        f'<animateTransform attributeName="transform" type="translate" '
        f'values="0,0;0,{fmt(-height)}" dur="{fmt(dur)}s" repeatCount="indefinite"/>'
        f'<animate attributeName="opacity" values="0.7;0" dur="{fmt(dur)}s" repeatCount="indefinite"/>'
    )


# =============================================================================
# Glyph
# =============================================================================

@dataclass(frozen=True)
class Glyph:
    """
    Drawable decoration or landmark.

    Attributes:
        variants: Alternative drawings; a placement's variant picks one modulo the count
        css_class: Optional class on an inner group, for style-sheet animation
    """
    variants: Tuple[Tuple[Shape, ...], ...]
    css_class: Optional[str] = None

    def __post_init__(self):
        if not self.variants or not all(self.variants):
            raise ValueError("A glyph needs at least one non-empty variant")

    def shapes(self, variant: int) -> Tuple[Shape, ...]:
        return self.variants[variant % len(self.variants)]

    def color_keys(self) -> Set[str]:
        keys: Set[str] = set()
        for shapes in self.variants:
            for shape in shapes:
                keys |= shape.color_keys()
        return keys

    @property
    def is_animated(self) -> bool:
        return self.css_class is not None or any(
            shape.extra for shapes in self.variants for shape in shapes
        )

    def render(self, x: float, y: float, variant: int, assets: Mapping[str, str]) -> str:
        body = ''.join(shape.render(assets) for shape in self.shapes(variant))
        if self.css_class:
            body = f'<g class="{self.css_class}">{body}</g>'
        return f'<g transform="translate({fmt(x)},{fmt(y)})">{body}</g>'


def check_glyph_table(name: str, table: Mapping, expected: Iterable, color_keys: Set[str]) -> None:
    """
    Fail fast on an incomplete glyph table or an unknown color name.

    Raises:
        RuntimeError: if an entry is missing or paints with an unknown color
    """
    missing = [member.value for member in expected if member not in table]
    if missing:
        raise RuntimeError(f"{name} has no glyph for: {', '.join(missing)}")
    for key, glyph in table.items():
        unknown = glyph.color_keys() - color_keys
        if unknown:
            raise RuntimeError(f"{name}[{key.value}] uses unknown colors: {sorted(unknown)}")
