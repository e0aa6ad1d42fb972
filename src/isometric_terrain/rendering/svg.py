"""
Small SVG string builders.

Numbers are printed in their shortest round-trip form with integral values
shown without a decimal point, so identical inputs always produce identical
markup.
"""
from typing import Iterable, Tuple, Union

Number = Union[int, float]

SVG_NAMESPACE = 'http://www.w3.org/2000/svg'

_XML_ESCAPES = (
    ('&', '&amp;'),
    ('<', '&lt;'),
    ('>', '&gt;'),
    ('"', '&quot;'),
    ("'", '&apos;'),
)


def fmt(value: Number) -> str:
    """Shortest stable text for a number (405.0 -> '405')."""
    if isinstance(value, int):
        return str(value)
    if value.is_integer():
        return str(int(value))
    return repr(value)


def fixed(value: float, digits: int = 1) -> str:
    """Fixed-point text, trailing zeros kept."""
    return f'{value:.{digits}f}'


def points(coords: Iterable[Tuple[Number, Number]]) -> str:
    """Polygon points attribute from (x, y) pairs."""
    return ' '.join(f'{fmt(x)},{fmt(y)}' for x, y in coords)


def escape_xml(text: str) -> str:
    for raw, escaped in _XML_ESCAPES:
        text = text.replace(raw, escaped)
    return text


def format_number(n: int) -> str:
    """Thousands-separated integer (12345 -> '12,345')"""
    return f'{n:,}'


def svg_style(css: str) -> str:
    return f'<style><![CDATA[{css}]]></style>'


def svg_root(width: int, height: int, content: str, defs: str = '') -> str:
    """Wrap content in an <svg> root with an optional <defs> block."""
    head = f'<svg xmlns="{SVG_NAMESPACE}" viewBox="0 0 {width} {height}" width="{width}" height="{height}">'
    defs_block = f'<defs>{defs}</defs>' if defs else ''
    return f'{head}{defs_block}{content}</svg>'
