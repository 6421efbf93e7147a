# ufsuite/analysis/experiments.py
from __future__ import annotations

import random
import time
from dataclasses import dataclass
from typing import List

from ufsuite.core.unionfind import DisjointSet

MODES = ("until_connected", "single_pass")


@dataclass
class PairRun:
    n: int
    pairs: int        # random pairs drawn
    merges: int       # pairs that joined two distinct components
    components: int   # components left at the end
    elapsed_s: float
    mode: str = "until_connected"
    seed: int = 0


def pairs_to_connect(n: int, rng: random.Random, path_compression: bool = False) -> PairRun:
    """
    Draw random pairs (j, k) until a single component remains.

    Every pair drawn is counted; only the ones that were not yet connected
    are merged, so merges == n - 1 for n >= 1.
    """
    uf = DisjointSet(n, path_compression)
    pairs = 0
    merges = 0
    t0 = time.perf_counter()
    while uf.components() > 1:
        j = rng.randrange(n)
        k = rng.randrange(n)
        pairs += 1
        if not uf.connected(k, j):
            uf.union(j, k)
            merges += 1
    elapsed = time.perf_counter() - t0
    return PairRun(n=n, pairs=pairs, merges=merges, components=uf.components(), elapsed_s=elapsed)


def single_pass(n: int, rng: random.Random, path_compression: bool = False) -> PairRun:
    """
    Draw exactly n random pairs and merge the unconnected ones.
    The remaining component count is n - merges.
    """
    uf = DisjointSet(n, path_compression)
    merges = 0
    t0 = time.perf_counter()
    for _ in range(n):
        j = rng.randrange(n)
        k = rng.randrange(n)
        if not uf.connected(k, j):
            uf.union(j, k)
            merges += 1
    elapsed = time.perf_counter() - t0
    return PairRun(
        n=n,
        pairs=n,
        merges=merges,
        components=uf.components(),
        elapsed_s=elapsed,
        mode="single_pass",
    )


def doubling_sizes(start: int, stop: int) -> List[int]:
    if start < 1:
        raise ValueError("start must be >= 1.")
    if stop < start:
        raise ValueError("stop must be >= start.")
    out: List[int] = []
    n = start
    while n <= stop:
        out.append(n)
        n *= 2
    return out


@dataclass
class SweepConfig:
    n_start: int = 500
    n_stop: int = 64000
    seeds_per_n: int = 5
    path_compression: bool = False
    mode: str = "until_connected"   # or "single_pass"
    random_seed: int = 0

    def __post_init__(self) -> None:
        if self.n_start < 1:
            raise ValueError("n_start must be >= 1.")
        if self.n_stop < self.n_start:
            raise ValueError("n_stop must be >= n_start.")
        if self.seeds_per_n <= 0:
            raise ValueError("seeds_per_n must be >= 1.")
        if self.mode not in MODES:
            raise ValueError(f"mode must be one of {MODES}, got {self.mode!r}.")


def run_sweep(cfg: SweepConfig) -> List[PairRun]:
    """
    One run per (n, seed) with n doubling from n_start to n_stop.
    Each run gets its own deterministic RNG.
    """
    experiment = pairs_to_connect if cfg.mode == "until_connected" else single_pass
    runs: List[PairRun] = []
    for n in doubling_sizes(cfg.n_start, cfg.n_stop):
        for s in range(cfg.seeds_per_n):
            rng = random.Random(cfg.random_seed * 1_000_003 + n * 31 + s)
            run = experiment(n, rng, path_compression=cfg.path_compression)
            run.seed = s
            runs.append(run)
    return runs
