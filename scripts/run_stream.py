"""Command line harness for sampling a seeded xorshift128+ stream."""

import argparse
import json
import logging
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
DEFAULT_LOG_PATH = PROJECT_ROOT / "stream_logs" / "latest_run.json"

if PROJECT_ROOT.as_posix() not in sys.path:
    sys.path.insert(0, PROJECT_ROOT.as_posix())

from xorshift128plus import StreamConfig, run_stream
from xorshift128plus.stream import SEED_WIDTHS


def _parse_seed(value: str) -> int:
    """Accept decimal or 0x-prefixed hex seeds."""

    try:
        seed = int(value, 0)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(
            f"Seed must be a decimal or 0x-prefixed integer, received '{value}'."
        ) from exc
    if seed < 0:
        raise argparse.ArgumentTypeError("Seed must be non-negative.")
    return seed


def _parse_level(value: str) -> int:
    level = logging.getLevelName(value.strip().upper())
    if not isinstance(level, int):
        raise argparse.ArgumentTypeError(f"Unknown log level '{value}'.")
    return level


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Sample a deterministic xorshift128+ stream")
    parser.add_argument(
        "--seed",
        type=_parse_seed,
        default=4293262078,
        help="Generator seed (accepts decimal or 0x-prefixed hex)",
    )
    parser.add_argument(
        "--seed_width",
        type=int,
        choices=SEED_WIDTHS,
        default=32,
        help="Seed width in bits: 32/64 expand via splitmix64, 128 loads the state verbatim",
    )
    parser.add_argument("--count", type=int, default=10, help="Number of samples to draw")
    parser.add_argument("--bins", type=int, default=10, help="Histogram bins over [0, 1)")
    parser.add_argument(
        "--log_level",
        type=_parse_level,
        default=logging.WARNING,
        help="Logging level for diagnostics written to stderr (e.g. INFO, DEBUG)",
    )
    parser.add_argument(
        "--log",
        nargs="?",
        type=Path,
        const=DEFAULT_LOG_PATH,
        help=(
            "Persist the JSON report to disk. Provide a path or pass the flag alone to use "
            "stream_logs/latest_run.json under the repository root."
        ),
    )
    return parser


def main() -> None:
    parser = build_parser()
    args = parser.parse_args()
    logging.basicConfig(level=args.log_level)

    cfg = StreamConfig(
        seed=args.seed,
        seed_width=args.seed_width,
        count=args.count,
        bins=args.bins,
    )
    try:
        result = run_stream(cfg)
    except ValueError as exc:
        parser.error(str(exc))

    log_path: Path | None = args.log
    if log_path is not None:
        if not log_path.is_absolute():
            log_path = (PROJECT_ROOT / log_path).resolve()

        log_path.parent.mkdir(parents=True, exist_ok=True)
        log_path.write_text(json.dumps(result, indent=2))

    print(json.dumps(result, indent=2))


if __name__ == "__main__":
    main()
