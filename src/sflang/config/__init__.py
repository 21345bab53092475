"""Configuration — section models, discovery, settings, and logging setup."""
