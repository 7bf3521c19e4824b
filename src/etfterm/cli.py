from __future__ import annotations
import argparse, logging, sys
from pathlib import Path

from .binary.decoder import TermDecoder
from .binary.reader import decode_base64, load_bytes
from .errors import FormatError
from .jsonio.write import write_json
from .models.options import DecoderOptions
from .models.term import Mapping, Sequence

logger = logging.getLogger(__name__)

def _options(args) -> DecoderOptions:
    return DecoderOptions(
        max_depth=args.max_depth,
        signed_int32=args.signed_int32,
        nil_as_sequence=args.nil_as_sequence,
    )

def _depth(text: str) -> int:
    n = int(text)
    if n < 1:
        raise argparse.ArgumentTypeError("must be >= 1")
    return n

def _read_raw(path: str) -> bytes:
    if path == "-":
        return sys.stdin.buffer.read()
    return load_bytes(Path(path))

def _decode(args):
    """Returns (term, consumed, total) for the INPUT argument."""
    raw = _read_raw(args.input)
    if args.base64:
        term = decode_base64(raw, _options(args))
        return term, None, len(raw)
    dec = TermDecoder(raw, _options(args))
    term = dec.parse()
    return term, dec.consumed, len(raw)

def cmd_to_json(args) -> int:
    term, _, _ = _decode(args)
    text = write_json(term, pretty=not args.compact)
    if args.output:
        with open(args.output, "w", encoding="utf-8") as out:
            out.write(text + "\n")
    else:
        print(text)
    return 0

def cmd_info(args) -> int:
    term, consumed, total = _decode(args)
    line = f"kind={term.kind}"
    if isinstance(term, (Sequence, Mapping)):
        line += f" size={len(term)}"
    if consumed is not None:
        line += f" consumed={consumed}/{total}"
    print(line)
    return 0

def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="etfterm", description="Erlang external term format decoder")
    p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    p.add_argument("--max-depth", type=_depth, default=128, help="Reject nesting deeper than N composites")
    p.add_argument("--nil-as-sequence", action="store_true", help="Decode NIL_EXT as an empty list instead of an empty map")
    p.add_argument("--signed-int32", action="store_true", help="Read INTEGER_EXT as a signed (two's complement) value")
    sub = p.add_subparsers(dest="cmd", required=True)

    sp = sub.add_parser("to-json", help="decode a term and print it as JSON")
    sp.add_argument("input", help="Encoded file, or '-' for stdin")
    sp.add_argument("output", nargs="?", help="Write JSON here instead of stdout")
    sp.add_argument("--base64", action="store_true", help="Input holds base64 text")
    sp.add_argument("--compact", action="store_true", help="No indentation")
    sp.set_defaults(func=cmd_to_json)

    sp = sub.add_parser("info", help="one-line summary of the top-level term")
    sp.add_argument("input", help="Encoded file, or '-' for stdin")
    sp.add_argument("--base64", action="store_true", help="Input holds base64 text")
    sp.set_defaults(func=cmd_info)

    return p

def main(argv=None) -> int:
    p = build_parser()
    ns = p.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if ns.verbose else logging.WARNING,
        format="%(name)s: %(levelname)s: %(message)s",
    )
    try:
        return ns.func(ns)
    except FormatError as e:
        logger.error("error [%s]: %s", e.code, e)
        return 2
    except OSError as e:
        logger.error("%s", e)
        return 1

if __name__ == "__main__":
    raise SystemExit(main())
