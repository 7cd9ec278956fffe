"""Helpers for visualizing gel analysis results."""
