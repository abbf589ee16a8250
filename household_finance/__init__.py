"""Household finance dashboard package."""
