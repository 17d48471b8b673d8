import argparse
import json
from pathlib import Path
import sys

from econochella.config import DEFAULT_FESTIVAL_PATH, DEFAULT_ITERATIONS, DEFAULT_SEED, DEFAULT_REPORT_EVERY
from econochella.util.parser import parse_input, build_festival
from econochella.util.schedule_visualizer import visualize
from econochella.util.sa_logger import SimulatedAnnealingLogger
from econochella.local_search.rules_engine import calculate_value
from econochella.local_search.simulated_annealing import run_local_search


def parse_arguments(argv=None):
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description='Festival line-up optimiser (simulated annealing)')

    group = parser.add_mutually_exclusive_group()
    group.add_argument('--input', type=str,
                       help='Path to a festival JSON file (default: the bundled reference festival)')
    group.add_argument('--test', type=int, metavar='N_ACTS',
                       help='Generate a random catalogue of N_ACTS acts instead')

    parser.add_argument('--iterations', type=int, default=DEFAULT_ITERATIONS,
                        help=f'Number of proposed moves (default: {DEFAULT_ITERATIONS})')
    parser.add_argument('--temperature', type=float,
                        help='Fixed annealing temperature (default: from the festival file)')
    parser.add_argument('--budget', type=int,
                        help='Override the budget of the festival file')
    parser.add_argument('--seed', type=int, default=DEFAULT_SEED,
                        help=f'Random seed (default: {DEFAULT_SEED})')
    parser.add_argument('--report-every', type=int, default=DEFAULT_REPORT_EVERY,
                        help='Print progress every n iterations, 0 for no progress output')

    parser.add_argument('--output', type=str,
                        help='Write the best line-up to this JSON file')
    parser.add_argument('--log', type=str, help='Path to log file for simulated annealing output')
    parser.add_argument('--history', type=str, help='Save the per-iteration search history as JSON')
    parser.add_argument('--plot', type=str, help='Save a PNG plot of the running and best value')

    return parser.parse_args(argv)


def main(argv=None):
    """Main entry point for the line-up optimiser."""
    args = parse_arguments(argv)

    try:
        if args.test is not None:
            from econochella.util.data_generator import generate_test_data_parsed
            parsed_data = generate_test_data_parsed(args.test, seed=args.seed)
        else:
            input_path = Path(args.input) if args.input else DEFAULT_FESTIVAL_PATH
            if not input_path.exists():
                print(f"Error: Input file {input_path} not found")
                return 1
            parsed_data = parse_input(input_path)

        if args.budget is not None:
            if args.budget <= 0:
                print(f"Error: Budget must be positive, got {args.budget}")
                return 1
            parsed_data["budget"] = args.budget
        temperature = args.temperature if args.temperature is not None else parsed_data["temperature"]

        festival = build_festival(parsed_data)
        print(f"Loaded {len(festival.acts)} acts, {len(festival.rules)} rules, budget {festival.budget}")

        sa_logger = SimulatedAnnealingLogger() if (args.history or args.plot) else None

        best_festival = run_local_search(
            festival,
            log_file_path=args.log,
            iterations=args.iterations,
            temperature=temperature,
            seed=args.seed,
            report_every=args.report_every,
            sa_logger=sa_logger
        )

        print()
        visualize(best_festival)

        if args.output:
            output_path = Path(args.output)
            output_path.parent.mkdir(parents=True, exist_ok=True)
            result = best_festival.to_json()
            result["value"] = calculate_value(best_festival)
            with open(output_path, 'w', encoding='utf-8') as f:
                json.dump(result, f, indent=2, ensure_ascii=False)
            print(f"Line-up written to {args.output}")

        if sa_logger is not None:
            if args.history:
                sa_logger.save_log(args.history)
                print(f"Search history written to {args.history}")
            if args.plot:
                sa_logger.create_plot(args.plot)

        return 0

    except Exception as e:
        print(f"Error: {str(e)}")
        import traceback
        traceback.print_exc()
        return 1


if __name__ == "__main__":
    sys.exit(main())
