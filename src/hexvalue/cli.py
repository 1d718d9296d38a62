# hexvalue/cli.py
from __future__ import annotations

import argparse
import logging
import sys
from typing import Iterable, Sequence

from . import __version__
from .__about__ import LOGGER_NAME, about_text
from .errors import HexValueError
from .logic import bytes_to_ascii_runs, parse_int_maybe
from .value import HexValue

logger = logging.getLogger(LOGGER_NAME)

# name -> (min, max) number of integer arguments
EXTRACT_ARITY = {
    "left": (1, 1),
    "right": (1, 1),
    "slice": (1, 2),
    "mid": (1, 2),
    "u1": (1, 1),
    "u2": (1, 1),
    "un": (2, 2),
}


# ---------- helpers ----------
def _print_kv(key: str, value: str | Iterable[str]) -> None:
    if isinstance(value, (list, tuple)):
        print(f"{key}: {' '.join(str(v) for v in value)}")
    else:
        print(f"{key}: {value}")

def _as_bin_per_byte(value: HexValue) -> list[str]:
    return [f"{b:08b}" for b in value]

def _read_value(text: str | None) -> HexValue:
    src = text if text is not None else sys.stdin.read()
    return HexValue.from_hex(src)


# ---------- subcommands ----------
def cmd_about(args: argparse.Namespace) -> int:
    print(about_text())
    return 0


def cmd_hex(args: argparse.Namespace) -> int:
    value = _read_value(args.hex)

    _print_kv("Hex", value.to_hex())
    _print_kv("Bytes", [f"{b:02X}" for b in value])
    _print_kv("Binary", _as_bin_per_byte(value))

    runs = bytes_to_ascii_runs(value)
    if runs:
        _print_kv("ASCII", "".join(runs))

    _print_kv("Length", str(value.size))
    return 0


def cmd_ascii(args: argparse.Namespace) -> int:
    value = HexValue.from_ascii(args.text)
    _print_kv("Hex", value.to_hex())
    _print_kv("Length", str(value.size))
    return 0


def cmd_digest(args: argparse.Namespace) -> int:
    src = args.input if args.input is not None else sys.stdin.read()
    value = HexValue.from_ascii(src) if args.ascii else HexValue.from_hex(src)
    _print_kv(args.algorithm.upper(), value.digest(args.algorithm).to_hex())
    return 0


def cmd_bitwise(args: argparse.Namespace) -> int:
    a = HexValue.from_hex(args.a)
    if args.op == "not":
        if args.b is not None:
            raise HexValueError("not takes a single operand")
        result = a.not_()
    else:
        if args.b is None:
            raise HexValueError(f"{args.op} needs two operands")
        b = HexValue.from_hex(args.b)
        result = {"and": a.and_, "or": a.or_, "xor": a.xor}[args.op](b)
    _print_kv("Hex", result.to_hex())
    return 0


def cmd_extract(args: argparse.Namespace) -> int:
    lo, hi = EXTRACT_ARITY[args.op]
    if not lo <= len(args.numbers) <= hi:
        expected = str(lo) if lo == hi else f"{lo}..{hi}"
        raise HexValueError(
            f"{args.op} takes {expected} integer argument(s), got {len(args.numbers)}"
        )
    value = HexValue.from_hex(args.hex)
    result = getattr(value, args.op)(*args.numbers)
    _print_kv("Hex", result.to_hex())
    _print_kv("Length", str(result.size))
    return 0


def cmd_pad(args: argparse.Namespace) -> int:
    value = HexValue.from_hex(args.hex)
    pad = value.lpad if args.side == "left" else value.rpad
    result = pad(args.length, args.byte)
    _print_kv("Hex", result.to_hex())
    _print_kv("Length", str(result.size))
    return 0


# ---------- parser ----------
def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="hexvalue",
        description="Inspect and transform hex byte values (CLI)"
    )
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    p.add_argument("-v", "--verbose", action="store_true", help="enable debug logging")

    sp = p.add_subparsers(dest="cmd")

    # about
    pab = sp.add_parser("about", help="show name, version and copyright")
    pab.set_defaults(func=cmd_about)

    # hex
    ph = sp.add_parser("hex", help="inspect a sequence of hex bytes")
    ph.add_argument("hex", nargs="?", help="hex like 'C8:58:B3' or 'C858B3' (stdin if omitted)")
    ph.set_defaults(func=cmd_hex)

    # ascii
    pa = sp.add_parser("ascii", help="encode ASCII text as hex")
    pa.add_argument("text", help="ASCII text")
    pa.set_defaults(func=cmd_ascii)

    # digest
    pd = sp.add_parser("digest", help="MD5 / SHA-1 / SHA-256 of a value")
    pd.add_argument("algorithm", choices=("md5", "sha1", "sha256"))
    pd.add_argument("input", nargs="?", help="hex input (stdin if omitted)")
    pd.add_argument("--ascii", action="store_true", help="treat input as ASCII text instead of hex")
    pd.set_defaults(func=cmd_digest)

    # bitwise
    pb = sp.add_parser("bitwise", help="byte-wise and/or/xor/not")
    pb.add_argument("op", choices=("and", "or", "xor", "not"))
    pb.add_argument("a", help="first operand (hex)")
    pb.add_argument("b", nargs="?", help="second operand (hex), same size as the first")
    pb.set_defaults(func=cmd_bitwise)

    # extract
    pe = sp.add_parser("extract", help="take a sub-range of a value")
    pe.add_argument("op", choices=tuple(EXTRACT_ARITY))
    pe.add_argument("hex", help="hex input")
    pe.add_argument("numbers", nargs="*", type=parse_int_maybe, help="index/length arguments")
    pe.set_defaults(func=cmd_extract)

    # pad
    pp = sp.add_parser("pad", help="pad a value to a total length")
    pp.add_argument("side", choices=("left", "right"))
    pp.add_argument("hex", help="hex input")
    pp.add_argument("length", type=parse_int_maybe, help="total length in bytes")
    pp.add_argument("--byte", type=parse_int_maybe, default=0, help="pad byte (default: 0x00)")
    pp.set_defaults(func=cmd_pad)

    return p


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if not getattr(args, "cmd", None):
        parser.print_help()
        return 0

    try:
        return args.func(args)
    except HexValueError as exc:
        logger.debug("%s failed", args.cmd, exc_info=True)
        parser.error(str(exc))


if __name__ == "__main__":
    raise SystemExit(main())
