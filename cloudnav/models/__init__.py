"""Data models for CloudNav."""
