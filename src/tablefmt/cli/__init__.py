"""Command line interface for tablefmt."""
