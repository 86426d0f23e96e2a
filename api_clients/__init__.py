"""Google Sheets access."""
