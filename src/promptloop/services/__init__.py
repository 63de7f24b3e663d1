"""The prompt-read-validate loop and its result types."""
