"""CLI tool for printing the truth table of a propositional formula."""

import argparse
import logging
import sys
from typing import Optional, Sequence

from truthtab.global_params import Settings, global_settings
from truthtab.logic.connectives import CONNECTIVES
from truthtab.logic.parser import parse
from truthtab.table.generator import compute_truth_table
from truthtab.table.render import FORMATS, render
from truthtab.utils.exceptions import TruthTabException

LABELS = {
    "TF": ("T", "F"),
    "VF": ("V", "F"),
    "10": ("1", "0"),
}


def create_parser() -> argparse.ArgumentParser:
    """
    Create and configure the argument parser.

    Returns:
        argparse.ArgumentParser: Configured argument parser
    """
    parser = argparse.ArgumentParser(
        description="Print the truth table of a propositional formula",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="Example: truthtab '(P ∧ Q) -> R' --format markdown",
    )
    parser.add_argument("expression", nargs="?",
                        help="Formula, e.g. '(P ∧ Q) → R' or '(P & Q) -> R'")
    parser.add_argument("--format", choices=sorted(FORMATS), default="text",
                        help="Output format (default: text)")
    parser.add_argument("--labels", choices=sorted(LABELS), default="TF",
                        help="Truth labels for true/false cells (default: TF)")
    parser.add_argument("--result-header", default=global_settings.result_header,
                        help="Header of the result column (default: %(default)s)")
    parser.add_argument("--max-variables", type=int, default=global_settings.max_variables,
                        help="Reject formulas with more distinct variables "
                             "(default: %(default)s)")
    parser.add_argument("--classify", action="store_true",
                        help="Also report whether the formula is a tautology, "
                             "a contradiction or contingent (uses z3)")
    parser.add_argument("--verify", action="store_true",
                        help="Cross-check every row with z3")
    parser.add_argument("--list-operators", action="store_true",
                        help="List the accepted connectives and exit")
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level (default: WARNING)"
    )
    return parser


def list_operators() -> str:
    lines = []
    for info in CONNECTIVES.values():
        spellings = ", ".join((info.symbol,) + info.aliases)
        lines.append(f"{info.name:<14} {spellings:<12} {info.description}")
    return "\n".join(lines) + "\n"


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Main entry point for the truth table CLI.

    Args:
        argv: Optional command line arguments (defaults to sys.argv)

    Returns:
        int: Exit code (0 for success, 1 for error)
    """
    parser = create_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=getattr(logging, args.log_level.upper()),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    if args.list_operators:
        sys.stdout.write(list_operators())
        return 0
    if args.expression is None:
        parser.error("an expression is required")

    true_label, false_label = LABELS[args.labels]
    try:
        settings = global_settings.replace(
            max_variables=args.max_variables,
            true_label=true_label,
            false_label=false_label,
            result_header=args.result_header,
        )
    except ValueError as e:
        parser.error(str(e))

    try:
        node = parse(args.expression, settings)
        table = compute_truth_table(node, settings, args.expression)
    except TruthTabException as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    logging.info("Formula %s has %d variables", node, len(table.variables))
    try:
        output = render(table, args.format, settings)
    except ValueError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    sys.stdout.write(output)

    if args.classify or args.verify:
        # z3 is only needed for these options
        from truthtab.translator import z3_translator  # pylint: disable=import-outside-toplevel
        if args.classify:
            print(f"Classification: {z3_translator.classify(node).value}")
        if args.verify:
            mismatches = z3_translator.verify_table(table, node)
            if mismatches:
                print(f"Error: rows {mismatches} disagree with z3", file=sys.stderr)
                return 1
            print("Verified: all rows agree with z3")
    return 0


if __name__ == "__main__":
    sys.exit(main())
