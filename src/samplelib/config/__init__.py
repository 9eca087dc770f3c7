"""Configuration layer: models, settings, discovery, and logging setup."""
