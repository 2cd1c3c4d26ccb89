"""YAML-backed settings and example data."""
