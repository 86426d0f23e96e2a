"""Enrichment pipeline: browser session, orchestration and error types."""
