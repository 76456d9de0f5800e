"""Credential profile discovery."""

from cloudnav.controllers.profiles.loader import load_profiles, profile_matches

__all__ = ["load_profiles", "profile_matches"]
