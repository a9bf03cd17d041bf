"""Biome classification of terrain heights."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable, List


class Biome(IntEnum):
    """Kinds of terrain a map cell can belong to."""

    OCEAN = 0
    BEACH = 1
    GRASSLAND = 2
    FOREST = 3
    DESERT = 4
    MOUNTAIN = 5


MOUNTAIN_LEVEL = 120


def _trunc_div(a: int, b: int) -> int:
    """Integer division truncating towards zero."""
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b >= 0) else -quotient


def height_filtering(noise: int, x: int, y: int, side_size: int) -> float:
    """Blend a noise value with a falloff towards the edges of a square map."""
    nx = float(_trunc_div(2 * int(x), int(side_size)) - 1)
    ny = float(_trunc_div(2 * int(y), int(side_size)) - 1)
    distance = 1 - (1 - nx * nx) * (1 - ny * ny)
    return (int(noise) + (1 - distance)) / 2


@dataclass
class BiomeClassifier:
    """Maps heights on a 0..255 scale, with a moisture value, to biomes."""

    water_level: int = 90
    beach_level: int = 91
    name: str = "EXAMPLE"

    def classify(self, x: float, y: float, avg: float) -> Biome:
        """Classify a cell from its height ``avg`` and moisture ``y``.

        ``x`` is accepted for symmetry with the noise channels but unused.
        """
        if avg < self.water_level:
            return Biome.OCEAN
        if avg < self.beach_level:
            return Biome.BEACH
        if avg > MOUNTAIN_LEVEL:
            return Biome.MOUNTAIN
        if avg < MOUNTAIN_LEVEL:
            if y < 20:
                return Biome.DESERT
            if y < 60:
                return Biome.GRASSLAND
            if y < 100:
                return Biome.FOREST
        return Biome.GRASSLAND

    def altitude_filter(self, heights: Iterable[float]) -> List[Biome]:
        """Split heights into ocean, beach and grassland by level alone."""
        result = []
        for height in heights:
            if height < self.water_level:
                result.append(Biome.OCEAN)
            elif height < self.beach_level:
                result.append(Biome.BEACH)
            else:
                result.append(Biome.GRASSLAND)
        return result