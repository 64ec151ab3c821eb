"""Command-line interface for repo2html."""
