"""
Services module.

Authoring-time checks against external services.
"""

from portfolio.services.link_checker import LinkChecker, LinkCheckResult

__all__ = [
    "LinkChecker",
    "LinkCheckResult",
]
