# -*- coding: utf-8 -*-
"""
Solana Wallet Metrics Enricher
------------------------------
Fills two columns of a Google Sheet for every wallet address listed in the
sheet (or in a CSV file):

- Activities:   total activity count shown on the wallet's Solscan page
- Holdings PnL: Holdings PnL figure shown on the wallet's Jupiter portfolio page

Both values are read from the rendered pages with Playwright. Rows whose two
result cells are already filled are skipped, so an interrupted run can simply be
started again.

Setup:
1. Install the package: pip install -e .
2. Install Playwright browsers: playwright install chromium
3. Create a .env file with SHEET_ID and GOOGLE_SERVICE_ACCOUNT_JSON
   (optional: SHEET_NAME, CSV_PATH, START_ROW, HEADLESS, RATE_LIMIT_MS,
   MAX_RETRIES, BACKOFF_BASE_MS, TIMEOUT_MS, SETTLE_DELAY_MS,
   SCREENSHOT_DIR, CONTINUE_ON_ERROR)

Usage:
    python enrich_wallets.py
    python enrich_wallets.py --headed           # watch the browser, solve challenges by hand
    python enrich_wallets.py --csv wallets.csv  # read wallets from a CSV file
"""

import argparse
import asyncio
import dataclasses
import sys
from typing import List, Optional

from colorama import init

from api_clients.sheets_client import SheetRowStore, SheetsClient
from config.settings import Settings, load_settings
from core.browser import open_browser_page
from core.wallet_enricher import WalletEnricher
from models.wallet_record import EnrichmentSummary
from utils.helpers import print_error, print_header, print_info, print_key_value, print_success
from wallets.sources import load_wallets_from_csv, select_wallet_records


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Solana Wallet Metrics Enricher",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python enrich_wallets.py                      # settings from .env
  python enrich_wallets.py --headed             # show the browser window
  python enrich_wallets.py --continue-on-error  # log failed wallets and keep going
        """,
    )
    parser.add_argument("--env-file", help="Path to a .env file (default: search from cwd)")
    parser.add_argument("--csv", dest="csv_path", help="CSV file with a wallet/address column")
    parser.add_argument("--start-row", type=int, help="First sheet row holding a wallet")
    parser.add_argument(
        "--headed", action="store_true", help="Run the browser with a visible window"
    )
    parser.add_argument(
        "--continue-on-error",
        action="store_true",
        help="Keep processing the next wallet when one wallet fails",
    )
    return parser


def apply_overrides(settings: Settings, args: argparse.Namespace) -> Settings:
    """Command line flags win over environment settings."""
    overrides = {}
    if args.csv_path:
        overrides["csv_path"] = args.csv_path
    if args.start_row is not None:
        overrides["start_row"] = args.start_row
    if args.headed:
        overrides["headless"] = False
    if args.continue_on_error:
        overrides["continue_on_error"] = True
    return dataclasses.replace(settings, **overrides) if overrides else settings


def print_summary(summary: EnrichmentSummary) -> None:
    print_header("Run Summary", width=40)
    print_key_value("Rows processed", summary.processed)
    print_key_value("Rows skipped", summary.skipped)
    print_key_value("Rows failed", summary.failed)


async def run(settings: Settings) -> EnrichmentSummary:
    """Loads wallets, enriches them in one browser session and writes results."""
    settings.validate()
    client = SheetsClient.from_service_account(settings.sheet_id, settings.service_account_json)
    row_store = SheetRowStore(client, settings.sheet_name, settings.start_row)

    csv_records = load_wallets_from_csv(settings.csv_path, settings.start_row)
    records = select_wallet_records(csv_records, row_store.load_wallets)
    if not records:
        print_info("No wallets found to process.")
        return EnrichmentSummary()

    print_header("Wallet Metrics Enricher")
    async with open_browser_page(settings) as page:
        enricher = WalletEnricher(page, row_store, settings)
        summary = await enricher.run(records)

    print_summary(summary)
    print_success("Run complete")
    return summary


def main(argv: Optional[List[str]] = None) -> int:
    """Console entry point; returns the process exit code."""
    init(autoreset=True)
    args = build_parser().parse_args(argv)

    try:
        settings = apply_overrides(load_settings(env_file=args.env_file), args)
        asyncio.run(run(settings))
    except KeyboardInterrupt:
        print("\nOperation cancelled by user. Exiting.")
        return 130
    except Exception as e:
        print_error("Fatal error", {"error": str(e)})
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
