"""Helpers shared across checkpoint modules."""
