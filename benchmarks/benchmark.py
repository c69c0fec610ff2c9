import os
import time
import random
import logging
import platform
from typing import Dict, List, Tuple

import pandas as pd
import matplotlib
matplotlib.use("Agg")
import matplotlib.pyplot as plt
import psutil

from bmsearch.search.boyermoore import BoyerMoore
from bmsearch.search.scan import scan
from bmsearch.search.algorithms.naive import brute_force_scan

logger = logging.getLogger("bmsearch.benchmarks")

DNA_ALPHABET = "ACGT"


def boyer_moore_scan(pattern: str, text: str, alphabet: str) -> Tuple[List[int], int, int]:
    return scan(BoyerMoore(pattern, alphabet), pattern, text)


class Benchmark:
    def __init__(self, output_dir: str = "benchmark_results", alphabet: str = DNA_ALPHABET, seed: int = 0):
        self.output_dir = output_dir
        self.alphabet = alphabet
        self.rng = random.Random(seed)
        self.algorithms = {
            "BoyerMoore": lambda pattern, text: boyer_moore_scan(pattern, text, self.alphabet),
            "Naive": brute_force_scan,
        }
        self.results: Dict[str, List[Dict]] = {}
        os.makedirs(output_dir, exist_ok=True)

    def log_system_info(self) -> None:
        logger.info("System information:")
        logger.info("  - OS: %s %s", platform.system(), platform.release())
        logger.info("  - CPU: %s cores", psutil.cpu_count(logical=True))
        mem = psutil.virtual_memory()
        logger.info("  - Memory: %dGB total, %dGB available", mem.total // (1024**3), mem.available // (1024**3))

    def generate_text(self, size: int) -> str:
        return ''.join(self.rng.choices(self.alphabet, k=size))

    def generate_patterns(self, text: str, length: int, count: int) -> List[str]:
        """Half of the patterns are cut from the text, the rest are random."""
        patterns = []
        for index in range(count):
            if index % 2 == 0 and len(text) >= length:
                start = self.rng.randrange(len(text) - length + 1)
                patterns.append(text[start:start + length])
            else:
                patterns.append(''.join(self.rng.choices(self.alphabet, k=length)))
        return patterns

    def run_benchmark(self, text_sizes: List[int], pattern_lengths: List[int], patterns_per_size: int = 5) -> None:
        self.results.clear()
        total_steps = len(text_sizes) * len(pattern_lengths) * len(self.algorithms)
        current_step = 0

        for size in text_sizes:
            text = self.generate_text(size)
            for length in pattern_lengths:
                patterns = self.generate_patterns(text, length, patterns_per_size)
                for algo_name, algo in self.algorithms.items():
                    current_step += 1
                    print(f"Running benchmark: {current_step}/{total_steps} - Algorithm: {algo_name}, "
                          f"Text: {size}, Pattern: {length}", end='\r')

                    self.results.setdefault(algo_name, [])
                    total_time = 0.0
                    total_alignments = 0
                    total_comparisons = 0
                    for pattern in patterns:
                        start = time.perf_counter()
                        _, alignments, comparisons = algo(pattern, text)
                        total_time += time.perf_counter() - start
                        total_alignments += alignments
                        total_comparisons += comparisons

                    self.results[algo_name].append({
                        "text_size": size,
                        "pattern_length": length,
                        "avg_search_time": 1000 * total_time / len(patterns),
                        "avg_alignments": total_alignments / len(patterns),
                        "avg_comparisons": total_comparisons / len(patterns),
                    })

        print("\nBenchmark completed.")

    def plot_figure(self, df: pd.DataFrame, x: str, y: str, xlabel: str, ylabel: str, filename: str, log_scale_y: bool = False) -> None:
        plt.figure(figsize=(15, 10))
        for algo in df["algorithm"].unique():
            algo_data = df[df["algorithm"] == algo].groupby(x, as_index=False)[y].mean()
            plt.plot(algo_data[x], algo_data[y], marker='o', label=algo)
        if log_scale_y:
            plt.yscale('log')
        plt.xlabel(xlabel)
        plt.ylabel(ylabel + " [Log Scale]" if log_scale_y else ylabel)
        plt.legend()
        plt.tight_layout()
        plt.savefig(filename)
        plt.close()

    def to_dataframe(self) -> pd.DataFrame:
        data = []
        for algo_name, results in self.results.items():
            for result in results:
                data.append(dict(result, algorithm=algo_name))
        return pd.DataFrame(data)

    def generate_report(self) -> pd.DataFrame:
        df = self.to_dataframe()
        self.plot_figure(
            df, "text_size", "avg_search_time",
            "Text Size (symbols)", "Average Search Time (ms)",
            os.path.join(self.output_dir, "time-speed.png"), log_scale_y=True,
        )
        self.plot_figure(
            df, "pattern_length", "avg_comparisons",
            "Pattern Length (symbols)", "Average Comparisons",
            os.path.join(self.output_dir, "comparisons.png"), log_scale_y=True,
        )
        self.plot_figure(
            df, "text_size", "avg_alignments",
            "Text Size (symbols)", "Average Alignments",
            os.path.join(self.output_dir, "alignments.png"),
        )

        df.to_csv(os.path.join(self.output_dir, "benchmark_results.csv"), index=False)

        with open(os.path.join(self.output_dir, "benchmark_report.txt"), 'w') as f:
            f.write("Benchmark Summary\n")
            f.write("==================\n\n")
            f.write(f"Alphabet: {self.alphabet!r}\n\n")
            f.write(f"{'Algorithm':<20}{'Avg Search Time (ms)':<25}{'Avg Alignments':<20}{'Avg Comparisons':<20}\n")
            f.write("=" * 85 + "\n")
            for algo in df["algorithm"].unique():
                algo_data = df[df["algorithm"] == algo]
                f.write(f"{algo:<20}{algo_data['avg_search_time'].mean():<25.4f}"
                        f"{algo_data['avg_alignments'].mean():<20.1f}"
                        f"{algo_data['avg_comparisons'].mean():<20.1f}\n")
        return df
