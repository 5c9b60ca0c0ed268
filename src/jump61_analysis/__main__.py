from __future__ import annotations

import sys

from .cli.analyze_selfplay import main as analyze_main


def main(argv: list[str] | None = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)

    if not argv:
        return analyze_main([])

    cmd = argv[0].lower()
    rest = argv[1:]

    if cmd in {"analyze", "analysis", "selfplay"}:
        return analyze_main(rest)

    # Bare flags are passed straight to analyze
    if cmd.startswith("-"):
        return analyze_main(argv)

    print("Usage:")
    print("  python -m jump61_analysis analyze [--games N] [--size N] [--depth D] [--outdir figures]")
    return 2


if __name__ == "__main__":
    raise SystemExit(main())
