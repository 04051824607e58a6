"""Noor - prayer time, Qibla and Zakat calculation service."""

__version__ = "0.1.0"
