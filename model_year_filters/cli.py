"""
Command-line interface for the model-year filter tool.
"""

import argparse
import logging
import sys
from pathlib import Path

from .debug_filter import synthesize_debug_filter
from .filter_optimizer import optimize_filter
from .models import format_filter
from .planner import FilterPlanner
from .reporting import export_plan_csv, export_worksheets, print_summary, save_results_json
from .support import format_support_info, summarize_support
from .workbench import load_workbench


logger = logging.getLogger(__name__)


def _show_command(workbench, command_id: str) -> None:
    command = workbench.find_command(command_id)
    snapshot = workbench.support.get_support(command.command_id)
    print(format_support_info(summarize_support(command.command_id, snapshot)))
    print(f"Current filter: {format_filter(command.production_filter)}")
    print(f"Current debug filter: {format_filter(command.debug_filter)}")

    debug_filter = synthesize_debug_filter(
        snapshot.supported, workbench.generations, command.production_filter
    )
    if debug_filter is None:
        print("Debug filter: no confirmed support, keep \"dbg\": true")
    else:
        print(f"Debug filter: {format_filter(debug_filter)}")

    optimized = optimize_filter(snapshot.supported, snapshot.unsupported, workbench.generations)
    if optimized is None:
        print("Optimized filter: insufficient evidence")
    else:
        print(f"Optimized filter: {format_filter(optimized)}")


def main():
    """Main entry point for the CLI."""
    parser = argparse.ArgumentParser(
        description="Derive debug and production model-year filters from support evidence"
    )

    parser.add_argument(
        "--input",
        required=True,
        help="Workbench JSON with generations, commands and support years"
    )

    parser.add_argument(
        "--command",
        default=None,
        help="Only show support and derived filters for this command id"
    )

    parser.add_argument(
        "--get-worksheets",
        action="store_true",
        help="Export the plan to an Excel file with one sheet per change type"
    )

    parser.add_argument(
        "--output-dir",
        default="./output",
        help="Output directory for results. Default: ./output"
    )

    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging"
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(message)s",
    )

    input_path = Path(args.input)
    try:
        workbench = load_workbench(input_path)
    except (OSError, ValueError) as e:
        print(f"Error: could not load {input_path}: {e}", file=sys.stderr)
        sys.exit(1)

    if args.command:
        try:
            _show_command(workbench, args.command)
        except KeyError as e:
            print(f"Error: {e.args[0]}", file=sys.stderr)
            sys.exit(1)
        return

    output_dir = Path(args.output_dir)
    planner = FilterPlanner.from_source(workbench)

    try:
        results = planner.analyze(workbench.commands, workbench.support)
        print_summary(str(input_path), results)

        name = input_path.stem
        results_file = save_results_json(results, output_dir, name)
        print(f"\nResults saved to: {results_file}")

        plan_file = export_plan_csv(results, output_dir, name)
        print(f"Plan saved to: {plan_file}")

        if args.get_worksheets:
            excel_file = export_worksheets(results, output_dir, name)
            print(f"Worksheets saved to: {excel_file}")

    except Exception as e:
        logger.exception("Planning failed")
        print(f"\nError during planning: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
