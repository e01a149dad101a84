#!/usr/bin/env python3
"""Empirical cost of SkipMap operations measured in traversal steps.

For every size n = 2**k the experiment fills a fresh map with 0..n-1, then
re-sets, looks up and removes the middle key, recording the step count of
each call.  Steps grow logarithmically with n; the plot makes that visible.
"""

import argparse
import json
import logging
import math
from pathlib import Path
from typing import Dict, List

import numpy as np
import plotly.graph_objects as go
from tqdm import tqdm

from skipmap import SkipMap, SkipMapConfig, StepCounter
from skipmap.counters import OPERATIONS
from skipmap.numerals import spell

LOGGER = logging.getLogger(__name__)


class Metrics:
    def __init__(self):
        self.sizes: List[int] = []
        self.steps: Dict[str, List[List[int]]] = {op: [] for op in OPERATIONS}
        self.heights: List[List[int]] = []

    def to_dict(self) -> Dict:
        return {
            "sizes": self.sizes,
            "heights": {"mean": [float(np.mean(h)) for h in self.heights]},
            **{
                op: {
                    "mean": [float(np.mean(s)) for s in samples],
                    "p50": [float(np.percentile(s, 50)) for s in samples],
                    "p95": [float(np.percentile(s, 95)) for s in samples],
                }
                for op, samples in self.steps.items()
            },
        }

    def plot_steps(self, title: str, output_path: Path):
        fig = go.Figure()

        for op, samples in self.steps.items():
            fig.add_trace(go.Scatter(
                x=self.sizes,
                y=[np.mean(s) for s in samples],
                error_y={"type": "data", "array": [np.std(s) for s in samples]},
                mode="lines+markers",
                name=f"{op} steps",
            ))

        # Reference curve: expected descent length ~ 2 * log2(n)
        fig.add_trace(go.Scatter(
            x=self.sizes,
            y=[2 * math.log2(max(n, 2)) for n in self.sizes],
            mode="lines",
            line={"dash": "dot"},
            name="2·log2(n)",
        ))

        fig.update_layout(
            title=title,
            xaxis_title="Entries",
            xaxis_type="log",
            yaxis_title="Steps per call",
        )

        fig.write_html(output_path)


class StepExperiment:
    def __init__(self, max_exponent: int, trials: int, seed: int):
        self.sizes = [2 ** k for k in range(max_exponent + 1)]
        self.trials = trials
        self.seed = seed
        self.metrics = Metrics()

    def run(self):
        for n in tqdm(self.sizes, desc="SkipMap steps"):
            samples: Dict[str, List[int]] = {op: [] for op in OPERATIONS}
            heights: List[int] = []
            for trial in range(self.trials):
                counter = StepCounter()
                slm = SkipMap(config=SkipMapConfig(seed=self.seed + trial), counter=counter)
                for i in range(n):
                    slm.set(i, spell(i))
                heights.append(slm.height)
                mid = n // 2
                slm.set(mid, spell(mid))
                slm.get(mid)
                slm.remove(mid)
                for op in OPERATIONS:
                    samples[op].append(counter.last[op])
            self.metrics.sizes.append(n)
            self.metrics.heights.append(heights)
            for op in OPERATIONS:
                self.metrics.steps[op].append(samples[op])
            LOGGER.debug("n=%d mean get steps=%.2f", n, np.mean(samples["get"]))
        return self.metrics


def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("--max-exponent", type=int, default=12, help="Largest size is 2**max_exponent")
    parser.add_argument("--trials", type=int, default=20, help="Maps built per size")
    parser.add_argument("--seed", type=int, default=0, help="Base random seed")
    parser.add_argument("--output", type=Path, default=Path("experiment_results"), help="Output directory")
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S")

    args.output.mkdir(parents=True, exist_ok=True)

    metrics = StepExperiment(args.max_exponent, args.trials, args.seed).run()

    metrics.plot_steps(
        "SkipMap steps per operation",
        args.output / "steps.html"
    )

    with open(args.output / "metrics.json", "w") as f:
        json.dump(metrics.to_dict(), f, indent=2)
    LOGGER.info("results written to %s", args.output)


if __name__ == "__main__":
    main()
