import argparse
import sys

from access_pattern import AccessPatternGenerator
from config import (ACCESSES_PER_PROCESS, PHYSICAL_MEMORY_SIZE, PROCESS_SIZES,
                    RANDOM_SEED, SimulationConfig)
from mmu import MMU, MMUError
import report


def run_simulation(page_size, physical_memory_size=PHYSICAL_MEMORY_SIZE,
                   process_sizes=PROCESS_SIZES, accesses_per_process=ACCESSES_PER_PROCESS,
                   seed=RANDOM_SEED, verbose=False):
    mmu = MMU(page_size, physical_memory_size)
    generator = AccessPatternGenerator(seed)

    if verbose:
        print(f"\n{'='*60}")
        print(f"Running page size {page_size} B ({mmu.num_frames} frames)")
        print(f"{'='*60}")

    pids = [mmu.create_process(size) for size in process_sizes]

    for i, pid in enumerate(pids):
        process = mmu.get_process(pid)
        pattern = generator.generate(process.num_pages, accesses_per_process)
        is_write = i % 2 == 0

        for page_num in pattern:
            try:
                mmu.access_memory(pid, page_num, is_write)
            except MMUError:
                continue

    for pid in pids:
        mmu.terminate_process(pid)

    if verbose:
        print(f"\nResults:")
        print(mmu.stats)
        print(f"{'='*60}\n")

    return mmu.stats


def run_sweep(config, verbose=False):
    return [
        run_simulation(page_size, config.physical_memory_size, config.process_sizes,
                       config.accesses_per_process, seed=config.seed, verbose=verbose)
        for page_size in config.page_sizes
    ]


def parse_args(argv=None):
    parser = argparse.ArgumentParser(
        description="Page size analysis: page faults vs internal fragmentation"
    )
    parser.add_argument(
        "-m", "--physical-memory",
        type=int, default=PHYSICAL_MEMORY_SIZE,
        help="Physical memory size in bytes (default: %(default)s)",
    )
    parser.add_argument(
        "-p", "--page-sizes",
        type=int, nargs="+", default=None,
        help="Page sizes to sweep, in bytes",
    )
    parser.add_argument(
        "-s", "--process-sizes",
        type=int, nargs="+", default=None,
        help="Requested memory of each process, in bytes",
    )
    parser.add_argument(
        "-a", "--accesses",
        type=int, default=ACCESSES_PER_PROCESS,
        help="Memory accesses per process (default: %(default)s)",
    )
    parser.add_argument(
        "--seed",
        type=int, default=RANDOM_SEED,
        help="Seed for the access pattern generator (default: %(default)s)",
    )
    parser.add_argument(
        "-g", "--graph",
        default=None,
        help="Save a comparison chart to this image file",
    )
    parser.add_argument(
        "--no-chart",
        dest="chart", action="store_false",
        help="Leave the ASCII chart out of the report",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Print the statistics of every run as it finishes",
    )
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)

    try:
        config = SimulationConfig(
            physical_memory_size=args.physical_memory,
            page_sizes=args.page_sizes,
            process_sizes=args.process_sizes,
            accesses_per_process=args.accesses,
            seed=args.seed,
        )
    except ValueError as e:
        print(f"error: {e}", file=sys.stderr)
        sys.exit(2)

    results = run_sweep(config, verbose=args.verbose)
    report.print_report(results, config.physical_memory_size,
                        len(config.process_sizes), config.accesses_per_process,
                        chart=args.chart)

    if args.graph:
        from generate_graphs import plot_results
        plot_results(results, args.graph)
        print(f"\nGraph saved as '{args.graph}'")


if __name__ == '__main__':
    main()
