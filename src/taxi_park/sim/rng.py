# sim/rng.py
from __future__ import annotations

from functools import cache
from zlib import crc32

import numpy as np


def _u32(x: int) -> int:
    return int(x & 0xFFFFFFFF)


def _tag(s: str) -> int:
    return _u32(crc32(s.encode("utf-8")))


class RNGRegistry:
    """
    Deterministic registry of numpy.random.Generator streams.
    Entropy path: [master_seed, crc32(scenario), crc32(stream), *parts]
    """

    def __init__(self, master_seed: int, *, scenario: str | int = 0):
        self.master_seed = _u32(master_seed)
        self.scenario_tag = _tag(str(scenario))

    @cache
    def _generator(self, stream: str, parts: tuple[int, ...]) -> np.random.Generator:
        ss = np.random.SeedSequence(
            entropy=[self.master_seed, self.scenario_tag, _tag(stream), *parts]
        )
        return np.random.Generator(np.random.PCG64(ss))

    def stream(self, name: str) -> np.random.Generator:
        """Named stream; the same name always returns the same (cached) generator."""
        return self._generator(name, ())

    def substream(self, name: str, *parts: int | str) -> np.random.Generator:
        """Stream keyed by entity, e.g. reg.substream("costs", driver_index)."""
        norm = tuple(_u32(p) if isinstance(p, int) else _tag(str(p)) for p in parts)
        return self._generator(name, norm)
