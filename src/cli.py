"""Command line driver: print a random (or the worked-example) Clifford circuit."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import List, Optional

try:  # pragma: no cover - handled during package import
    from .codec import ParseError, circuit_to_text, display, parse_qubit_count, parse_seed
    from .tableau import Tableau, FIGURE5_ROWS
except ImportError:  # pragma: no cover - legacy import path
    from codec import ParseError, circuit_to_text, display, parse_qubit_count, parse_seed  # type: ignore
    from tableau import Tableau, FIGURE5_ROWS  # type: ignore


logger = logging.getLogger(__name__)


def _qubit_count(text: str) -> int:
    try:
        return parse_qubit_count(text)
    except ParseError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def _seed(text: str) -> int:
    try:
        return parse_seed(text)
    except ParseError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="cliffordtools",
        description=(
            "Sample a random n-qubit Clifford circuit by repeated tableau sweeps. "
            "n = 0 runs the figure 5 worked example instead."
        ),
    )
    parser.add_argument("n", type=_qubit_count, help="Number of qubits (0 for the worked example)")
    parser.add_argument("--seed", type=_seed, default=None, help="Seed for the random generator")
    parser.add_argument(
        "--keep-signs",
        action="store_true",
        help="Skip the sign corrections; row patterns are still canonicalised.",
    )
    parser.add_argument(
        "--show-rows",
        action="store_true",
        help="Print the tableau rows before and after the sweeps.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose (debug) logging.")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    if args.n == 0:
        logger.debug("Running the figure 5 example")
        tableau = Tableau.from_strings(FIGURE5_ROWS)
    else:
        tableau = Tableau.random(args.n, seed=args.seed)

    if args.show_rows:
        for row in tableau.rows:
            print(display(row))
        print()

    circuit = tableau.run(fix_signs=not args.keep_signs)
    sys.stdout.write(circuit_to_text(circuit))

    if args.show_rows:
        print()
        for row in tableau.rows:
            print(display(row))
    return 0


if __name__ == "__main__":
    sys.exit(main())
