"""Configuration: TOML/env/CLI settings and logging setup."""
