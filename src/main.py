"""CLI entry point for language ranking lookups."""

from __future__ import annotations

import argparse
import json
import logging
import sys

from domain.models import DateSelector
from domain.results import FutureDateRejected
from services import pipeline

EXIT_FUTURE_DATE = 2


def _selector(args: argparse.Namespace) -> DateSelector:
    return DateSelector(year=args.year, month=args.month)


def cmd_rankings(args: argparse.Namespace) -> int:
    selector = _selector(args)
    if args.strict:
        outcome = pipeline.resolve_rankings(selector)
        if isinstance(outcome, FutureDateRejected):
            print(f"error: {outcome.reason}", file=sys.stderr)
            return EXIT_FUTURE_DATE
        rankings = pipeline.rankings_or_fallback(outcome)
    else:
        rankings = pipeline.get_rankings(selector)
    if args.json:
        print(json.dumps([r.to_dict() for r in rankings], indent=2, ensure_ascii=False))
        return 0
    for r in rankings:
        print(f"{r.rank:>3}  {r.prev_rank:>3}  {r.name:<24} {r.rating:>8}  {r.change}")
    return 0


def cmd_detail(args: argparse.Namespace) -> int:
    detail = pipeline.get_language_detail(args.name, _selector(args))
    if args.json:
        print(json.dumps(detail.to_dict(), indent=2, ensure_ascii=False))
        return 0
    print(f"{detail.name} (rank {detail.rank}, rating {detail.rating})")
    print(f"  {detail.description}")
    print(f"  use cases:  {', '.join(detail.use_cases)}")
    print(f"  frameworks: {', '.join(detail.frameworks)}")
    return 0


def _add_period_args(p: argparse.ArgumentParser) -> None:
    p.add_argument("--year", type=int, help="Historical year")
    p.add_argument("--month", type=int, choices=range(1, 13), metavar="1-12", help="Historical month")
    p.add_argument("--json", action="store_true", help="Output JSON")


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(prog="langrank")
    p.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    sub = p.add_subparsers(dest="command", required=True)

    rankings = sub.add_parser("rankings", help="Show the language ranking table")
    _add_period_args(rankings)
    rankings.add_argument(
        "--strict", action="store_true", help="Fail instead of serving fallback for future dates"
    )
    rankings.set_defaults(func=cmd_rankings)

    detail = sub.add_parser("detail", help="Show details for one language")
    detail.add_argument("name", help="Language name (case-insensitive)")
    _add_period_args(detail)
    detail.set_defaults(func=cmd_detail)

    return p


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    return args.func(args)


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
