"""Shared helpers for asana-flow."""
