"""
general.
========

Does: Group domain-agnostic helpers (tokenization, debug logging).
"""

__all__: list[str] = []
__docformat__ = "google"
