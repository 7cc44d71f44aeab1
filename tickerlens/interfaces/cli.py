"""
TickerLens — command-line caller
================================

Resolves chat messages and symbols from the terminal.

Usage:
    tickerlens resolve How is Solana performing today?
    tickerlens resolve --json "should I buy apple"
    tickerlens describe TESLA

Exit codes:
    0  a symbol was resolved
    1  no symbol found; ask the user to clarify
    2  invalid input
"""

import argparse
import logging
import sys
from typing import Optional, Sequence

from tickerlens.application.symbols.describe_asset import DescribeAssetUseCase
from tickerlens.application.symbols.dtos import DescribeAssetQuery, ResolveAssetCommand
from tickerlens.application.symbols.resolve_asset import ResolveAssetUseCase, build_engine
from tickerlens.core.config import Settings, settings as default_settings
from tickerlens.domain.symbols.entities import ResolvedAsset
from tickerlens.domain.symbols.errors import SymbolResolutionError
from tickerlens.interfaces.schemas import ResolvedAssetSchema, ResolveResponse
from tickerlens.shared.logging import configure_logging

logger = logging.getLogger("tickerlens")

EXIT_OK = 0
EXIT_UNRESOLVED = 1
EXIT_INVALID = 2


def _build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tickerlens",
        description=f"{settings.project_name} {settings.version}: resolve tickers from free text",
    )
    parser.add_argument("--log-level", default=settings.log_level, help="DEBUG, INFO, WARNING, ERROR")
    sub = parser.add_subparsers(dest="command", required=True)

    resolve = sub.add_parser("resolve", help="Extract a symbol from a chat message")
    resolve.add_argument("text", nargs="+", help="Message text (words are joined with spaces)")
    resolve.add_argument("--json", action="store_true", help="Print JSON instead of plain text")
    resolve.add_argument("--no-correct", action="store_true", help="Skip company-name corrections")

    describe = sub.add_parser("describe", help="Classify a symbol and show its provider id")
    describe.add_argument("symbol")
    describe.add_argument("--json", action="store_true", help="Print JSON instead of plain text")
    return parser


def _format_asset(asset: ResolvedAsset) -> str:
    line = f"{asset.symbol}\t{asset.asset_class.value}"
    if asset.is_crypto:
        line += f"\t{asset.provider_id}"
    return line


def _run_resolve(args: argparse.Namespace, settings: Settings) -> int:
    use_case = ResolveAssetUseCase(engine=build_engine(settings))
    result = use_case.execute(
        ResolveAssetCommand(text=" ".join(args.text), apply_correction=not args.no_correct)
    )

    if args.json:
        print(ResolveResponse.from_result(result).model_dump_json())
    elif result.asset is not None:
        print(_format_asset(result.asset))
    else:
        print("No symbol found. Which stock or crypto asset do you mean?")

    return EXIT_OK if result.resolved else EXIT_UNRESOLVED


def _run_describe(args: argparse.Namespace) -> int:
    asset = DescribeAssetUseCase().execute(DescribeAssetQuery(symbol=args.symbol))
    if args.json:
        print(ResolvedAssetSchema.from_asset(asset).model_dump_json())
    else:
        print(_format_asset(asset))
    return EXIT_OK


def main(argv: Optional[Sequence[str]] = None, settings: Optional[Settings] = None) -> int:
    settings = settings or default_settings
    args = _build_parser(settings).parse_args(argv)
    configure_logging(args.log_level)

    try:
        if args.command == "resolve":
            return _run_resolve(args, settings)
        return _run_describe(args)
    except SymbolResolutionError as exc:
        logger.error("%s", exc.message)
        return EXIT_INVALID


if __name__ == "__main__":
    sys.exit(main())
