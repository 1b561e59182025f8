from __future__ import annotations

import argparse
import logging
import os
import sys
from pathlib import Path
from typing import List, Optional

from .bitvector import BitVector
from .errors import SingularMatrixError
from .functions import PolynomialFunctionGF2
from .matrix import EnhancedBitMatrix
from .randomness import RandomBits
from .render import to_latex_string, to_string
from .serialization import dumps, read_json, write_json

SEED_ENV_VAR = "GF2ALGEBRA_SEED"


def _default_seed() -> Optional[int]:
    raw = os.environ.get(SEED_ENV_VAR)
    if raw is None or not raw.strip():
        return None
    try:
        return int(raw)
    except ValueError as exc:
        raise ValueError(f"{SEED_ENV_VAR} must be an integer, got {raw!r}.") from exc


def _rng(seed: Optional[int]) -> RandomBits:
    return RandomBits(seed if seed is not None else _default_seed())


def _run_random_function(args: argparse.Namespace) -> int:
    f = PolynomialFunctionGF2.random_function(
        args.input_length, args.output_length, _rng(args.seed)
    )
    if args.out is None:
        print(dumps(f, indent=2, sort_keys=True))
    else:
        write_json(args.out, f)
        print(f"wrote {args.out} ({len(f.monomials)} monomials)")
    return 0


def _run_eval(args: argparse.Namespace) -> int:
    f = read_json(args.path)
    lhs = BitVector.from_string(args.input)
    rhs = BitVector.from_string(args.rhs) if args.rhs is not None else None
    print(f.apply(lhs, rhs).to_string())
    return 0


def _run_render(args: argparse.Namespace) -> int:
    f = read_json(args.path)
    if args.latex:
        print(to_latex_string(f, function_name=args.name))
    else:
        print(to_string(f), end="")
    return 0


def _run_invert(args: argparse.Namespace) -> int:
    try:
        m = EnhancedBitMatrix.random_invertible(
            args.size, _rng(args.seed), max_attempts=args.attempts
        )
    except SingularMatrixError as exc:
        print(str(exc), file=sys.stderr)
        return 1
    print("M =")
    print(m)
    print("M^-1 =")
    print(m.inverse())
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="gf2algebra")
    parser.add_argument("--verbose", action="store_true", help="Verbose logging.")
    sub = parser.add_subparsers(dest="command", required=True)

    rf = sub.add_parser("random-function", help="Draw a random polynomial function as JSON.")
    rf.add_argument("--input-length", type=int, required=True)
    rf.add_argument("--output-length", type=int, required=True)
    rf.add_argument("--seed", type=int, default=None, help=f"Defaults to ${SEED_ENV_VAR}.")
    rf.add_argument("--out", type=Path, default=None, help="Write JSON here instead of stdout.")

    ev = sub.add_parser("eval", help="Evaluate a stored function on a bit string.")
    ev.add_argument("path", type=Path)
    ev.add_argument("--input", required=True, help="Bits, index 0 first, e.g. 0110.")
    ev.add_argument("--rhs", default=None, help="Optional bits appended to --input.")

    rd = sub.add_parser("render", help="Print a stored function row by row.")
    rd.add_argument("path", type=Path)
    rd.add_argument("--latex", action="store_true")
    rd.add_argument("--name", default="f", help="Function name for LaTeX output.")

    inv = sub.add_parser("invert", help="Draw a random invertible matrix and its inverse.")
    inv.add_argument("--size", type=int, required=True)
    inv.add_argument("--seed", type=int, default=None, help=f"Defaults to ${SEED_ENV_VAR}.")
    inv.add_argument("--attempts", type=int, default=100)

    args = parser.parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    handlers = {
        "random-function": _run_random_function,
        "eval": _run_eval,
        "render": _run_render,
        "invert": _run_invert,
    }
    try:
        return handlers[args.command](args)
    except (ValueError, OSError) as exc:
        print(f"gf2algebra: {exc}", file=sys.stderr)
        return 2


if __name__ == "__main__":
    raise SystemExit(main())
