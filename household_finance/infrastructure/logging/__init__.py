"""Logging helpers for the household finance dashboard."""
