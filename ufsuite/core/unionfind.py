# ufsuite/core/unionfind.py
from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Dict, List, Optional, TextIO, Union


class InvalidArgumentError(ValueError):
    """Raised when a structure cannot be built from the given arguments."""


class OutOfRangeError(IndexError):
    """Raised when a site index falls outside [0, n)."""


@dataclass
class UnionFindConfig:
    path_compression: bool = True


class DisjointSet:
    """
    Height-weighted quick-union over sites 0..n-1, with optional
    single-pass path halving in find().

    Merge policy (roots ri, rj):
      - equal heights: rj goes under ri, height[ri] grows by one
      - shorter tree goes under the taller one otherwise

    union() decrements the component count even when both sites already
    share a root. Use connect() when the count has to stay exact.
    """

    def __init__(self, n: int, config: Union[UnionFindConfig, bool, None] = None):
        if isinstance(n, bool) or not isinstance(n, int):
            raise InvalidArgumentError(f"n must be an int, got {type(n).__name__}.")
        if n < 0:
            raise InvalidArgumentError(f"n must be >= 0, got {n}.")
        if config is None:
            config = UnionFindConfig()
        elif isinstance(config, bool):
            config = UnionFindConfig(path_compression=config)
        elif not isinstance(config, UnionFindConfig):
            raise InvalidArgumentError(
                f"config must be a UnionFindConfig, a bool or None, got {type(config).__name__}."
            )

        self.config = config
        self.parent: List[int] = list(range(n))
        self.height: List[int] = [1] * n
        self.count = n

    @property
    def path_compression(self) -> bool:
        return self.config.path_compression

    def set_path_compression(self, path_compression: bool) -> None:
        """Testing only. Existing paths are left as they are."""
        self.config = UnionFindConfig(path_compression=bool(path_compression))

    # --- queries ---

    def components(self) -> int:
        return self.count

    def size(self) -> int:
        return len(self.parent)

    def __len__(self) -> int:
        return len(self.parent)

    def find(self, p: int) -> int:
        """
        Root of the component containing p.

        With compression on, every node strictly below the root is
        repointed at its grandparent while walking up, and the walk
        continues from the node's original parent.
        """
        self._validate(p)
        node = p
        while True:
            up = self.parent[node]
            if up == node:
                return node
            if self.config.path_compression:
                self.parent[node] = self.parent[up]
            node = up

    def connected(self, p: int, q: int) -> bool:
        # both sites are checked before find() can compress anything
        self._validate(p)
        self._validate(q)
        return self.find(p) == self.find(q)

    def groups(self) -> Dict[int, List[int]]:
        out: Dict[int, List[int]] = {}
        for i in range(len(self.parent)):
            r = self.find(i)
            out.setdefault(r, []).append(i)
        return out

    # --- mutation ---

    def union(self, p: int, q: int) -> None:
        self._validate(p)
        self._validate(q)
        # merge step repeats both lookups
        self._merge_components(self.find(p), self.find(q))
        self.count -= 1

    def connect(self, p: int, q: int) -> None:
        if not self.connected(p, q):
            self.union(p, q)

    def _merge_components(self, i: int, j: int) -> None:
        ri = self.find(i)
        rj = self.find(j)
        if ri == rj:
            return

        if self.height[ri] == self.height[rj]:
            self.parent[rj] = ri
            self.height[ri] += 1
        elif self.height[ri] < self.height[rj]:
            self.parent[ri] = rj
        else:
            self.parent[rj] = ri

    def _validate(self, p: int) -> None:
        n = len(self.parent)
        if isinstance(p, bool) or not isinstance(p, int) or p < 0 or p >= n:
            raise OutOfRangeError(f"index {p} is not between 0 and {n - 1}")

    # --- diagnostics ---

    def dump(self) -> str:
        return "\n".join(
            f"{i}: {self.parent[i]}, {self.height[i]}" for i in range(len(self.parent))
        )

    def show(self, file: Optional[TextIO] = None) -> None:
        out = file if file is not None else sys.stdout
        text = self.dump()
        if text:
            print(text, file=out)

    def __str__(self) -> str:
        return (
            "DisjointSet:"
            f"\n  count: {self.count}"
            f"\n  path compression? {self.config.path_compression}"
            f"\n  parents: {self.parent}"
            f"\n  heights: {self.height}"
        )

    def __repr__(self) -> str:
        return (
            f"DisjointSet(n={len(self.parent)}, count={self.count}, "
            f"path_compression={self.config.path_compression})"
        )
