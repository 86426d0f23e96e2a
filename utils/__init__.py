"""Console output, rate limiting and retry helpers."""
