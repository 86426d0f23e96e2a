"""Unit tests for CSV and sheet wallet sources."""

import os
import tempfile
import unittest

from core.exceptions import WalletSourceError
from models.wallet_record import WalletRecord
from wallets.sources import load_wallets_from_csv, select_wallet_records, wallet_records_from_rows


class CsvSourceTests(unittest.TestCase):
    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()

    def tearDown(self):
        self._tmp.cleanup()

    def write_csv(self, content):
        path = os.path.join(self._tmp.name, "wallets.csv")
        with open(path, "w", encoding="utf-8") as f:
            f.write(content)
        return path

    def test_wallet_column_and_row_offsets(self):
        path = self.write_csv("Wallet,label\n  AAA  ,one\n\nBBB,two\n")

        records = load_wallets_from_csv(path, start_row=2)

        self.assertEqual(
            records, [WalletRecord("AAA", 2), WalletRecord("BBB", 3)]
        )

    def test_address_column_is_accepted(self):
        path = self.write_csv("ADDRESS\nCCC\n")
        self.assertEqual(load_wallets_from_csv(path, 10), [WalletRecord("CCC", 10)])

    def test_missing_wallet_cell_keeps_its_row(self):
        path = self.write_csv("wallet,label\n,empty\nDDD,x\n")

        records = load_wallets_from_csv(path, 2)

        self.assertEqual([r.wallet for r in records], [None, "DDD"])
        self.assertEqual([r.row_index for r in records], [2, 3])

    def test_row_of_empty_cells_keeps_its_index(self):
        path = self.write_csv("wallet,note\nAAA,x\n,\nBBB,y\n")

        records = load_wallets_from_csv(path, start_row=2)

        self.assertEqual(
            [(r.wallet, r.row_index) for r in records], [("AAA", 2), (None, 3), ("BBB", 4)]
        )

    def test_no_path_means_no_records(self):
        self.assertEqual(load_wallets_from_csv(None, 2), [])

    def test_unreadable_file(self):
        with self.assertRaises(WalletSourceError):
            load_wallets_from_csv(os.path.join(self._tmp.name, "missing.csv"), 2)


class SheetRowsTests(unittest.TestCase):
    def test_rows_map_columns_a_c_d(self):
        rows = [["W1", "note", "12", "3.5"], ["W2"], [], ["W4", "", " ", ""]]

        records = wallet_records_from_rows(rows, start_row=2)

        self.assertEqual(records[0], WalletRecord("W1", 2, "12", "3.5"))
        self.assertTrue(records[0].is_fully_populated)
        self.assertEqual(records[1], WalletRecord("W2", 3))
        self.assertFalse(records[2].has_wallet)
        self.assertEqual(records[3].row_index, 5)
        self.assertFalse(records[3].is_fully_populated)


class SelectWalletRecordsTests(unittest.TestCase):
    def test_csv_records_take_precedence(self):
        csv_records = [WalletRecord("CSV", 2)]

        def sheet_loader():
            raise AssertionError("sheet should not be read")

        self.assertEqual(select_wallet_records(csv_records, sheet_loader), csv_records)

    def test_falls_back_to_sheet(self):
        sheet_records = [WalletRecord("SHEET", 2)]
        self.assertEqual(select_wallet_records([], lambda: sheet_records), sheet_records)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
