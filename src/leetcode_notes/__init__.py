"""Render LeetCode problems into markdown notes and keep their solutions in sync."""

__version__ = "0.1.0"
