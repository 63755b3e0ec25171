"""Normalizer GitHub — extração do evento ping do registry."""

from .normalizer import normalize_ping_event

__all__ = ["normalize_ping_event"]
