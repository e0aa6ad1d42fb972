"""Tests for the SVG string helpers"""
import pytest

from isometric_terrain.rendering.svg import escape_xml, fixed, fmt, format_number, points, svg_root, svg_style


class TestNumbers:
    """Test number formatting"""

    @pytest.mark.parametrize('value, expected', [(405, '405'), (405.0, '405'), (12.5, '12.5'), (-0.25, '-0.25')])
    def test_fmt(self, value, expected):
        """Test integral values drop the decimal point"""
        assert fmt(value) == expected

    def test_fixed(self):
        """Test fixed-point text keeps trailing zeros"""
        assert fixed(3.0) == '3.0'
        assert fixed(0.456, 2) == '0.46'

    def test_points(self):
        """Test polygon point lists"""
        assert points([(0, 1.5), (2.0, 3)]) == '0,1.5 2,3'

    def test_format_number(self):
        """Test thousands separators"""
        assert format_number(1234567) == '1,234,567'


class TestDocument:
    """Test document-level builders"""

    def test_escape_xml(self):
        """Test markup characters are escaped, ampersands first"""
        assert escape_xml('a < b & "c"') == 'a &lt; b &amp; &quot;c&quot;'

    def test_style_block(self):
        """Test style sheets are wrapped in CDATA"""
        assert svg_style('.a{}') == '<style><![CDATA[.a{}]]></style>'

    def test_root_without_defs(self):
        """Test no defs block is written when there are none"""
        svg = svg_root(10, 20, '<g/>')
        assert svg == '<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 10 20" width="10" height="20"><g/></svg>'

    def test_root_with_defs(self):
        """Test defs come before the content"""
        assert '<defs><x/></defs><g/>' in svg_root(10, 20, '<g/>', defs='<x/>')
