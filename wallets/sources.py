# -*- coding: utf-8 -*-
"""
Wallet Sources
--------------
Builds the ordered list of wallet records from a CSV file or from rows read out
of the sheet. Row indices are assigned consecutively from the start row.
"""

import csv
from typing import Any, Callable, Dict, List, Optional, Sequence

from config.constants import CSV_WALLET_COLUMNS
from core.exceptions import WalletSourceError
from models.wallet_record import WalletRecord
from utils.helpers import print_info


def _cell(row: Sequence[Any], index: int) -> Optional[str]:
    if index >= len(row) or row[index] is None:
        return None
    value = str(row[index]).strip()
    return value or None


def _wallet_column(fieldnames: Sequence[str]) -> Optional[str]:
    by_lower = {name.strip().lower(): name for name in fieldnames if name}
    for candidate in CSV_WALLET_COLUMNS:
        if candidate in by_lower:
            return by_lower[candidate]
    return None


def wallet_records_from_rows(rows: Sequence[Sequence[Any]], start_row: int) -> List[WalletRecord]:
    """Sheet rows (A..D) to records: wallet in A, activities in C, Holdings PnL in D."""
    return [
        WalletRecord(
            wallet=_cell(row, 0),
            row_index=start_row + index,
            existing_activities=_cell(row, 2),
            existing_holdings_pnl=_cell(row, 3),
        )
        for index, row in enumerate(rows)
    ]


def load_wallets_from_csv(csv_path: Optional[str], start_row: int) -> List[WalletRecord]:
    """
    Reads wallets from a CSV file with a header row.

    The wallet column is the first header matching "wallet" or "address"
    (case-insensitive). Empty lines are skipped; a row of empty cells keeps
    its row index and comes back without a wallet. Values are trimmed.
    """
    if not csv_path:
        return []

    try:
        with open(csv_path, "r", encoding="utf-8-sig", newline="") as f:
            reader = csv.DictReader(f)
            column = _wallet_column(reader.fieldnames or [])
            rows: List[Dict[str, Any]] = list(reader)
    except OSError as e:
        raise WalletSourceError(f"Could not read wallet CSV {csv_path}: {e}") from e

    records = []
    for index, row in enumerate(rows):
        wallet = (row.get(column) or "").strip() if column else ""
        records.append(WalletRecord(wallet=wallet or None, row_index=start_row + index))
    print_info(f"Loaded {len(records)} wallets from CSV", {"path": csv_path})
    return records


def select_wallet_records(
    csv_records: List[WalletRecord], sheet_loader: Callable[[], List[WalletRecord]]
) -> List[WalletRecord]:
    """CSV records win when there are any; otherwise the sheet is read."""
    if csv_records:
        return csv_records
    records = sheet_loader()
    print_info(f"Loaded {len(records)} wallet rows from sheet")
    return records
