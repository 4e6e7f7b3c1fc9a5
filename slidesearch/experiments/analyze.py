#!/usr/bin/env python3
"""Summarise runner CSVs: one row per (heuristic, evaluation, depth, solvable)."""
from __future__ import annotations
import argparse
from pathlib import Path
from typing import Iterable, List, Optional, Union

import numpy as np
import pandas as pd

GROUP = ["heuristic", "evaluation", "depth", "solvable"]


def sem(x):
    x = np.asarray(x, float)
    n = np.sum(~np.isnan(x))
    return 0.0 if n <= 1 else np.nanstd(x, ddof=1) / np.sqrt(n)


def load_results(paths: Iterable[Union[str, Path]]) -> pd.DataFrame:
    frames = []
    for p in paths:
        df = pd.read_csv(p)
        df["file"] = Path(p).name
        frames.append(df)
    if not frames:
        return pd.DataFrame()
    df = pd.concat(frames, ignore_index=True)
    df["termination"] = df["termination"].fillna("ok")
    if "solvable" not in df.columns:
        df["solvable"] = 1
    return df


def summarize(df: pd.DataFrame) -> pd.DataFrame:
    if df.empty:
        return pd.DataFrame()
    df = df.assign(solved=(df["termination"] == "ok").astype(float))
    out = (df.groupby(GROUP, sort=True)
             .agg(runs=("expanded", "size"),
                  solved_frac=("solved", "mean"),
                  expanded_mean=("expanded", "mean"),
                  expanded_median=("expanded", "median"),
                  expanded_sem=("expanded", sem),
                  generated_mean=("generated", "mean"),
                  swaps_mean=("swaps", "mean"),
                  time_mean=("time_sec", "mean"))
             .reset_index())
    return out


def main(argv: Optional[List[str]] = None):
    ap = argparse.ArgumentParser(description="Aggregate A* runner results")
    ap.add_argument("csv", nargs="+", type=Path)
    ap.add_argument("--out", type=Path, default=None, help="Write the summary table as CSV")
    args = ap.parse_args(argv)

    table = summarize(load_results(args.csv))
    if table.empty:
        print("No rows.")
        return
    print(table.to_string(index=False, float_format=lambda v: f"{v:.3f}"))
    if args.out is not None:
        args.out.parent.mkdir(parents=True, exist_ok=True)
        table.to_csv(args.out, index=False)
        print(f"Wrote {args.out}")


if __name__ == "__main__":
    main()
