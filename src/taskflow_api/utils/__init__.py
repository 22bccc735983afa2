"""Shared helpers for the TaskFlow package."""
