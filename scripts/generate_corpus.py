from __future__ import annotations

import argparse
from pathlib import Path

from sourcefiles import from_files
from sourcefiles.testing import generate_corpus_files


def main(argv: list[str] | None = None) -> int:
    ap = argparse.ArgumentParser(prog="generate_corpus", description="Write a seeded text corpus to disk")
    ap.add_argument("--seed", type=int, default=1)
    ap.add_argument("--count", type=int, default=1000)
    ap.add_argument("--out", default="tests/fixtures/generated_corpus")
    args = ap.parse_args(argv)

    out_dir = Path(args.out).resolve() / f"seed_{args.seed}_count_{args.count}"
    out_dir.mkdir(parents=True, exist_ok=True)

    paths: list[Path] = []
    for rel, src in generate_corpus_files(seed=args.seed, count=args.count):
        p = out_dir / rel
        # Bytes, not text mode, so CRLF endings are written as generated.
        p.write_bytes(src.encode("utf-8"))
        paths.append(p)

    sm = from_files(paths)
    print(str(out_dir))
    print(f"{len(sm)} non-empty files, {len(sm.line_lengths)} lines, {sm.size} bytes")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
