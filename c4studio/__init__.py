"""c4studio: multi-level architecture models with validation and deterministic layout."""

__version__ = "0.1.0"
