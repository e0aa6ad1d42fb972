"""
Deterministic generation stages for the terrain.

Each stage is a pure function of its inputs plus a random generator derived
from the render seed:
- intensity normalization of raw counts
- seasonal zones and tints
- biome layer (rivers, ponds, forests)
- isometric projection and depth ordering
- decoration and landmark selection
"""
