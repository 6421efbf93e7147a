# ufsuite/analysis/stats.py
from __future__ import annotations
from typing import Dict, Any, List, Optional
import math
import statistics as stats

from ufsuite.analysis.experiments import PairRun


def _nlnn(n: int) -> float:
    return n * math.log(n)


def summarize_runs(runs: List[PairRun]) -> Dict[str, Any]:
    """
    Per-n summary of a sweep.

    Returns:
      {
        "<n>": {
          "n_samples": ...,
          "pairs_mean": ...,
          "pairs_std": ...,
          "pairs_stderr": ...,
          "merges_mean": ...,
          "components_mean": ...,
          "elapsed_mean_s": ...,
          "pairs_over_nlnn": ...,   # None for n < 2
        },
        ...
      }
    """
    by_n: Dict[int, List[PairRun]] = {}
    for r in runs:
        by_n.setdefault(r.n, []).append(r)

    out: Dict[str, Any] = {}
    for n in sorted(by_n):
        subset = by_n[n]
        pairs = [float(r.pairs) for r in subset]
        pairs_mean = float(stats.mean(pairs))
        pairs_std = float(stats.stdev(pairs)) if len(pairs) > 1 else 0.0
        out[str(n)] = {
            "n_samples": len(subset),
            "pairs_mean": pairs_mean,
            "pairs_std": pairs_std,
            "pairs_stderr": pairs_std / math.sqrt(len(pairs)),
            "merges_mean": float(stats.mean(r.merges for r in subset)),
            "components_mean": float(stats.mean(r.components for r in subset)),
            "elapsed_mean_s": float(stats.mean(r.elapsed_s for r in subset)),
            "pairs_over_nlnn": pairs_mean / _nlnn(n) if n >= 2 else None,
        }
    return out


def fit_pairs_coefficient(runs: List[PairRun]) -> float:
    """
    Least-squares c in pairs ≈ c · n ln n (line through the origin).
    Runs with n < 2 carry no information and are skipped.
    """
    xs: List[float] = []
    ys: List[float] = []
    for r in runs:
        if r.n >= 2:
            xs.append(_nlnn(r.n))
            ys.append(float(r.pairs))
    if not xs:
        return float("nan")
    sxx = sum(x * x for x in xs)
    sxy = sum(x * y for x, y in zip(xs, ys))
    return sxy / sxx


def pairs_ratio_values(runs: List[PairRun]) -> List[Optional[float]]:
    return [r.pairs / _nlnn(r.n) if r.n >= 2 else None for r in runs]
