# blog_api/auth/__init__.py
"""
Authentication modules for the blog API.

This package contains:
- identity.py: Canonical authenticated identity model
"""
from blog_api.auth.identity import Identity

__all__ = ["Identity"]
