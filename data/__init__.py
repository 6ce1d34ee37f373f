"""Seed dataset and synthetic data helpers."""
