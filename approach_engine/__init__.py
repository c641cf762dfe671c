"""Approach Engine: outreach targeting, cooldown and timing optimization."""

__version__ = "0.1.0"
