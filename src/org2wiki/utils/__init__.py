"""Utility helpers shared by the renderers."""
