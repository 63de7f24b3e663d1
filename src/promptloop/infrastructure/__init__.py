"""Console I/O primitives."""
