"""Shared schemas and enums."""
