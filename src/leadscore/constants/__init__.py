"""Shared constants for leadscore."""
