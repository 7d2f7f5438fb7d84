"""Configuration: settings resolution, config discovery, logging."""
