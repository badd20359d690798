"""Command-line interface for smallrye-info."""
