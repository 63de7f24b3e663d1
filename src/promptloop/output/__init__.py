"""Rich/JSON output for the CLI."""
