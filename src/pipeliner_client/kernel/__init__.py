"""Kernel – errors, time formatting, entity model and ports."""
