"""Command-line interface for the MRP engine."""
