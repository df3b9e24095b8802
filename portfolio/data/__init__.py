"""
Authored site data.
"""

from portfolio.data.projects_data import PROJECTS, get_projects

__all__ = [
    "PROJECTS",
    "get_projects",
]
