"""Settings and constants for the wallet metrics enricher."""
