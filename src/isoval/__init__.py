"""isoval: typed ISO 20022 / FedNow records with structural validation."""

__version__ = "0.1.0"
