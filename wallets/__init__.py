"""Wallet list sources (CSV file or sheet rows)."""
