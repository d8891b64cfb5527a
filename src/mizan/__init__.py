"""Mizan — Zakat eligibility and Hijri calendar engine."""

__version__ = "0.1.0"
