"""Seeded randomness for map generation.

Every map draws from two sources: a numpy generator that picks terrain per
tile and an OpenSimplex field that the noise generator samples. Both are
derived from the configured seed through :class:`numpy.random.SeedSequence`,
so one seed always reproduces the same map.
"""

from __future__ import annotations

from dataclasses import dataclass

from numpy.random import PCG64, Generator, SeedSequence
from opensimplex import OpenSimplex

# Spawn keys separating the two sources drawn from one seed.
_TILE_PICKS = 0
_TERRAIN_NOISE = 1


@dataclass(frozen=True)
class MapRandomness:
    """Randomness sources for one map, derived from ``seed``.

    Each call returns a fresh source, so generating twice from the same
    instance yields the same map.
    """

    seed: int

    def _sequence(self, key: int) -> SeedSequence:
        return SeedSequence(self.seed, spawn_key=(key,))

    def tile_generator(self) -> Generator:
        """Generator used to pick a terrain type for each tile."""

        return Generator(PCG64(self._sequence(_TILE_PICKS)))

    def terrain_noise(self) -> OpenSimplex:
        """Noise field sampled by the banded terrain generator."""

        # OpenSimplex wants a signed 64-bit seed; one 32-bit word is plenty.
        (word,) = self._sequence(_TERRAIN_NOISE).generate_state(1)
        return OpenSimplex(seed=int(word))

    def sample(self, noise: OpenSimplex, x: int, z: int, frequency: float) -> float:
        """Noise at tile ``(x, z)`` rescaled from [-1, 1] to [0, 1]."""

        value = 0.5 + 0.5 * noise.noise2(x * frequency, z * frequency)
        return min(max(value, 0.0), 1.0)


__all__ = ["MapRandomness"]
