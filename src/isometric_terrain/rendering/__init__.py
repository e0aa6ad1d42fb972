"""
SVG rendering for the terrain: palettes, blocks, glyphs, effects and the
scene compositor, plus a Pillow raster preview.
"""
