"""
Top-level package for the Social Media API.

All functionality lives in submodules under ``app``.
"""

__all__ = []
