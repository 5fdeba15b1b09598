"""Command-line interface for authclient."""
