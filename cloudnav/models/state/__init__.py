"""Navigation state models."""
