#!/usr/bin/env python3
"""Benchmark suite for pybf: latency, threaded throughput and false-positive rate."""

import argparse
import json
import os
import time
from concurrent.futures import ThreadPoolExecutor
from pathlib import Path
from typing import Dict, List

import numpy as np
import plotly.graph_objects as go
from tqdm import tqdm

from pybf import BloomFilter

class Metrics:
    def __init__(self):
        self.add_latencies: List[float] = []
        self.test_latencies: List[float] = []
        self.false_positive_rate: float = 0.0
        self.target_rate: float = 0.0
        self.threaded_ops_per_sec: float = 0.0

    def to_dict(self) -> Dict:
        return {
            "add_latencies": {
                "p50": np.percentile(self.add_latencies, 50),
                "p95": np.percentile(self.add_latencies, 95),
                "p99": np.percentile(self.add_latencies, 99),
            },
            "test_latencies": {
                "p50": np.percentile(self.test_latencies, 50),
                "p95": np.percentile(self.test_latencies, 95),
                "p99": np.percentile(self.test_latencies, 99),
            },
            "false_positive_rate": self.false_positive_rate,
            "target_rate": self.target_rate,
            "threaded_ops_per_sec": self.threaded_ops_per_sec,
        }

    def plot_latencies(self, title: str, output_path: Path):
        fig = go.Figure()

        fig.add_trace(go.Box(
            y=self.add_latencies,
            name="Add Latency",
            boxpoints="outliers"
        ))

        fig.add_trace(go.Box(
            y=self.test_latencies,
            name="Test Latency",
            boxpoints="outliers"
        ))

        fig.update_layout(
            title=title,
            yaxis_title="Latency (µs)",
            boxmode="group"
        )

        fig.write_html(output_path)

class BenchmarkSuite:
    def __init__(self, num_entries: int, fp_rate: float, key_size: int, threads: int):
        self.num_entries = num_entries
        self.fp_rate = fp_rate
        self.threads = threads
        self.metrics = Metrics()
        self.metrics.target_rate = fp_rate
        self._keys = [os.urandom(key_size) for _ in range(num_entries)]
        # one byte longer than any member, so never equal to one
        self._strangers = [b"\x00" + os.urandom(key_size) for _ in range(num_entries)]

    def run_latency_benchmark(self) -> BloomFilter:
        bf = BloomFilter.from_capacity(self.num_entries, self.fp_rate)

        for key in tqdm(self._keys, desc="pybf Add"):
            start = time.perf_counter()
            bf.add(key)
            self.metrics.add_latencies.append((time.perf_counter() - start) * 1e6)

        for key in tqdm(self._keys, desc="pybf Test"):
            start = time.perf_counter()
            bf.test(key)
            self.metrics.test_latencies.append((time.perf_counter() - start) * 1e6)

        return bf

    def run_false_positive_benchmark(self, bf: BloomFilter):
        hits = sum(bf.test(key) for key in tqdm(self._strangers, desc="pybf FP"))
        self.metrics.false_positive_rate = hits / len(self._strangers)

    def run_threaded_benchmark(self):
        bf = BloomFilter.from_capacity(self.num_entries, self.fp_rate)
        chunks = [self._keys[i::self.threads] for i in range(self.threads)]

        def work(chunk: List[bytes]):
            for key in chunk:
                bf.add(key)
                bf.test(key)

        start = time.perf_counter()
        with ThreadPoolExecutor(max_workers=self.threads) as pool:
            list(pool.map(work, chunks))
        elapsed = time.perf_counter() - start
        self.metrics.threaded_ops_per_sec = 2 * self.num_entries / elapsed

def main():
    parser = argparse.ArgumentParser()
    parser.add_argument("--size", type=int, default=100000, help="Number of entries")
    parser.add_argument("--fp", type=float, default=0.01, help="Target false-positive rate")
    parser.add_argument("--key-size", type=int, default=16, help="Size of keys in bytes")
    parser.add_argument("--threads", type=int, default=8, help="Worker threads for the mixed workload")
    parser.add_argument("--output", type=Path, default=Path("benchmark_results"), help="Output directory")
    args = parser.parse_args()

    args.output.mkdir(parents=True, exist_ok=True)

    suite = BenchmarkSuite(args.size, args.fp, args.key_size, args.threads)
    bf = suite.run_latency_benchmark()
    suite.run_false_positive_benchmark(bf)
    suite.run_threaded_benchmark()

    metrics = suite.metrics
    print(f"{bf!r}: observed FP rate {metrics.false_positive_rate:.4%} (target {args.fp:.4%}), "
          f"{metrics.threaded_ops_per_sec:,.0f} ops/s on {args.threads} threads")

    metrics.plot_latencies(
        "pybf Latency Distribution",
        args.output / "pybf_latencies.html"
    )

    with open(args.output / "metrics.json", "w") as f:
        json.dump({"pybf": metrics.to_dict()}, f, indent=2)

if __name__ == "__main__":
    main()
