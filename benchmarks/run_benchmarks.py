import argparse
import logging

from benchmarks.benchmark import Benchmark, DNA_ALPHABET


def main():
    parser = argparse.ArgumentParser(description="Compare Boyer-Moore against brute force search")
    parser.add_argument("--sizes", type=int, nargs="+", default=[1_000, 10_000, 50_000, 100_000],
                        help="Text sizes to test (in symbols)")
    parser.add_argument("--pattern-lengths", type=int, nargs="+", default=[4, 8, 16, 32],
                        help="Pattern lengths to test")
    parser.add_argument("--patterns", type=int, default=5,
                        help="Patterns searched per text size and pattern length")
    parser.add_argument("--alphabet", default=DNA_ALPHABET,
                        help="Alphabet random texts are drawn from")
    parser.add_argument("--seed", type=int, default=0, help="Random seed")
    parser.add_argument("--output-dir", default="benchmark_results",
                        help="Directory for benchmark results")
    args = parser.parse_args()

    logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(levelname)s] %(name)s: %(message)s")

    benchmark = Benchmark(args.output_dir, alphabet=args.alphabet, seed=args.seed)
    benchmark.log_system_info()

    print("Running benchmarks...")
    print("===================")
    print(f"Text sizes: {args.sizes}")
    print(f"Pattern lengths: {args.pattern_lengths}")
    print()

    benchmark.run_benchmark(
        text_sizes=args.sizes,
        pattern_lengths=args.pattern_lengths,
        patterns_per_size=args.patterns,
    )

    print("\nGenerating reports...")
    benchmark.generate_report()

    print(f"\nBenchmark results saved to {args.output_dir}")
    print("Files generated:")
    print(f"- {args.output_dir}/time-speed.png")
    print(f"- {args.output_dir}/comparisons.png")
    print(f"- {args.output_dir}/alignments.png")
    print(f"- {args.output_dir}/benchmark_results.csv")
    print(f"- {args.output_dir}/benchmark_report.txt")


if __name__ == "__main__":
    main()
