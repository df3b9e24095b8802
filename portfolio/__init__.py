"""
Portfolio site content layer.

Project cards and markdown blog posts, loaded and indexed for a rendering
collaborator.
"""

__version__ = "1.0.0"
