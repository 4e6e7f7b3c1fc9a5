#!/usr/bin/env python3
import subprocess, sys
from pathlib import Path

def run(cmd):
    print("Running:", cmd)
    r = subprocess.run(cmd, shell=True)
    if r.returncode != 0:
        sys.exit(r.returncode)

def main():
    Path("results").mkdir(exist_ok=True)
    run("python -m slidesearch.experiments.runner --n 3 --depths 6 10 14 --per_depth 10 "
        "--heuristics misplaced manhattan --evaluations g+h --out results/heuristics.csv")
    run("python -m slidesearch.experiments.runner --n 3 --depths 6 10 14 --per_depth 10 "
        "--heuristics manhattan --evaluations h g g+h --max_expanded 200000 --out results/evaluations.csv")
    run("python -m slidesearch.experiments.analyze results/heuristics.csv results/evaluations.csv "
        "--out results/summary.csv")

if __name__ == "__main__":
    main()
