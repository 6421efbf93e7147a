# ufsuite/scripts/run_pair_sweep.py
from __future__ import annotations

import json
import os
import time
from dataclasses import asdict
from typing import Dict, Any, List

from ufsuite.analysis.experiments import SweepConfig, run_sweep, MODES
from ufsuite.analysis.stats import summarize_runs, fit_pairs_coefficient


def _mkdir(path: str) -> None:
    os.makedirs(path, exist_ok=True)


def main() -> None:
    out_dir = os.path.join("results", "pair_sweep")
    _mkdir(out_dir)
    stamp = time.strftime("%Y%m%d_%H%M%S")
    out_jsonl = os.path.join(out_dir, f"sweep_{stamp}.jsonl")
    out_summary = os.path.join(out_dir, f"sweep_{stamp}.summary.json")

    summary: Dict[str, Any] = {
        "timestamp": stamp,
        "modes": {},
    }

    for mode in MODES:
        cfg = SweepConfig(
            n_start=500,
            n_stop=256000,
            seeds_per_n=5,
            path_compression=True,
            mode=mode,
            random_seed=0,
        )
        runs = run_sweep(cfg)

        rows: List[Dict[str, Any]] = []
        for run in runs:
            row = asdict(run)
            rows.append(row)
            with open(out_jsonl, "a", encoding="utf-8") as f:
                f.write(json.dumps(row) + "\n")

        block: Dict[str, Any] = {
            "config": asdict(cfg),
            "per_n": summarize_runs(runs),
        }
        # single-pass always draws n pairs; the fit only means something until connected
        if mode == "until_connected":
            block["pairs_coefficient"] = fit_pairs_coefficient(runs)
        summary["modes"][mode] = block

    with open(out_summary, "w", encoding="utf-8") as f:
        json.dump(summary, f, indent=2)

    print(json.dumps(summary, indent=2))
    print(f"Saved JSONL: {out_jsonl}")
    print(f"Saved summary: {out_summary}")


if __name__ == "__main__":
    main()
