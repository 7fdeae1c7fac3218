"""Lingvo: contacts, translated direct messages, and a social feed."""

__version__ = "1.0.0"
