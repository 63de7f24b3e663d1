"""Configuration: settings, discovery, and logging."""
