from __future__ import annotations

import argparse
import json
import logging
import sys
from dataclasses import asdict, is_dataclass

from .api import from_files
from .errors import FileReadError, OffsetBoundaryError


logger = logging.getLogger(__name__)

_LOG_LEVELS = ("debug", "info", "warning", "error", "critical")


def _to_jsonable(obj):
    if is_dataclass(obj):
        return {k: _to_jsonable(v) for k, v in asdict(obj).items()}
    if isinstance(obj, (tuple, list)):
        return [_to_jsonable(x) for x in obj]
    if isinstance(obj, dict):
        return {str(k): _to_jsonable(v) for k, v in obj.items()}
    return obj


def _offset(s: str) -> int:
    v = int(s, 0)
    if v < 0:
        raise argparse.ArgumentTypeError(f"offset must be non-negative: {s}")
    return v


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(
        prog="sourcefiles",
        description="Concatenate files and map byte offsets back to file:line:col",
    )
    ap.add_argument("files", nargs="+", help="Files to concatenate, in order")
    ap.add_argument(
        "-o",
        "--offset",
        type=_offset,
        action="append",
        default=[],
        help="Byte offset to resolve (repeatable)",
    )
    ap.add_argument(
        "--span",
        nargs=2,
        type=_offset,
        action="append",
        default=[],
        metavar=("START", "END"),
        help="Byte span to resolve (repeatable)",
    )
    ap.add_argument("--json", action="store_true", help="Print results as JSON")
    ap.add_argument("--log-level", choices=_LOG_LEVELS, default="warning")
    args = ap.parse_args(argv)

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s - %(levelname)-8s - %(name)s - %(message)s",
    )

    try:
        sm = from_files(args.files)
    except FileReadError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    logger.info("indexed %d files, %d bytes", len(sm), sm.size)

    try:
        offsets = [(o, sm.resolve_offset(o)) for o in args.offset]
        spans = [((s, e), sm.resolve_offset_span(s, e)) for s, e in args.span]
    except OffsetBoundaryError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    if args.json:
        payload = {
            "files": [{"name": n, "lines": c} for n, c in sm.files()],
            "size": sm.size,
            "offsets": [{"offset": o, "position": _to_jsonable(p)} for o, p in offsets],
            "spans": [
                {"start": s, "end": e, "span": _to_jsonable(sp)} for (s, e), sp in spans
            ],
        }
        print(json.dumps(payload, indent=2, sort_keys=True))
    else:
        for o, p in offsets:
            print(f"{o}\t{p.format() if p else '-'}")
        for (s, e), sp in spans:
            out = f"{sp.start.format()}-{sp.end.format()}" if sp else "-"
            print(f"{s}..{e}\t{out}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
