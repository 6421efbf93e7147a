# ufsuite/scripts/run_pair_plots.py
from __future__ import annotations

import json
import math
import time
from pathlib import Path
from typing import Dict, List

import matplotlib.pyplot as plt

from ufsuite.analysis.experiments import SweepConfig, run_sweep, doubling_sizes
from ufsuite.analysis.stats import summarize_runs, fit_pairs_coefficient, pairs_ratio_values


def main() -> None:
    outdir = Path("results") / "pair_plots"
    outdir.mkdir(parents=True, exist_ok=True)
    stamp = time.strftime("%Y%m%d_%H%M%S")

    cfgs: Dict[str, SweepConfig] = {
        "compressed": SweepConfig(n_start=250, n_stop=32000, seeds_per_n=10, path_compression=True),
        "plain": SweepConfig(n_start=250, n_stop=32000, seeds_per_n=10, path_compression=False),
    }

    out: Dict[str, Dict] = {}
    ratios: List[float] = []
    for label, cfg in cfgs.items():
        runs = run_sweep(cfg)
        out[label] = {
            "per_n": summarize_runs(runs),
            "pairs_coefficient": fit_pairs_coefficient(runs),
        }
        ratios.extend(x for x in pairs_ratio_values(runs) if x is not None)

    json_path = outdir / f"run_{stamp}.json"
    json_path.write_text(json.dumps(out, indent=2), encoding="utf-8")

    ns = doubling_sizes(250, 32000)

    # pairs vs n, both modes, with the 0.5 n ln n reference
    plt.figure()
    for label in cfgs:
        per_n = out[label]["per_n"]
        ys = [per_n[str(n)]["pairs_mean"] for n in ns]
        es = [per_n[str(n)]["pairs_stderr"] for n in ns]
        plt.errorbar(ns, ys, yerr=es, fmt="o-", label=label)
    plt.plot(ns, [0.5 * n * math.log(n) for n in ns], "k--", label="0.5 n ln n")
    plt.xscale("log", base=2)
    plt.yscale("log")
    plt.title("Random pairs drawn until one component remains")
    plt.xlabel("n")
    plt.ylabel("pairs")
    plt.legend()
    plt.tight_layout()
    plt.savefig(outdir / f"pairs_vs_n_{stamp}.png", dpi=160)

    if ratios:
        plt.figure()
        plt.hist(ratios, bins=20)
        plt.title("pairs / (n ln n) across runs")
        plt.xlabel("pairs / (n ln n)")
        plt.ylabel("count")
        plt.tight_layout()
        plt.savefig(outdir / f"ratio_hist_{stamp}.png", dpi=160)

    # mean wall time per run, compressed vs plain
    plt.figure()
    for label in cfgs:
        per_n = out[label]["per_n"]
        plt.plot(ns, [per_n[str(n)]["elapsed_mean_s"] for n in ns], "o-", label=label)
    plt.xscale("log", base=2)
    plt.yscale("log")
    plt.title("Mean wall time per run")
    plt.xlabel("n")
    plt.ylabel("seconds")
    plt.legend()
    plt.tight_layout()
    plt.savefig(outdir / f"elapsed_vs_n_{stamp}.png", dpi=160)

    print(json.dumps(out, indent=2))
    print("Saved:", str(json_path))


if __name__ == "__main__":
    main()
