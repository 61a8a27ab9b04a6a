"""Configuration: settings, config discovery, and logging."""
