"""Configuration, paths, clock and startup checks."""
