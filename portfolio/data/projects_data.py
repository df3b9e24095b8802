"""
Project cards, in display order.

The first entry renders first. Edit this list to change the projects page.
"""

from typing import List

from portfolio.models.project import Project

PROJECTS: List[Project] = [
    Project(
        title="Mossaik",
        description=(
            "This project started as a remake of WickedBackgrounds, but it turned "
            "into a full featured design tool. It's a design tool to create "
            "patterns, waves, blobs and other shapes."
        ),
        img_src="/static/images/mossaik.png",
        href="https://mossaik.app/",
    ),
    Project(
        title="Oxbow UI",
        description=(
            "Collection of HTML blocks to build pages and apps faster. The blocks "
            "are done with Tailwind CSS, which makes easy to copy and paste the "
            "blocks. All the blocks are design by Mike Andreuzza and I've worked "
            "adding authentication, security and tweaks."
        ),
        img_src="/static/images/oxbow.png",
        href="https://oxbowui.com/",
    ),
    Project(
        title="Wicked Backgrounds",
        description=(
            "This is a small side project I did to generate svg backgrounds. it's "
            "been featured on many websites like Codrops, Speckyboy or even in "
            "CSS-Tricks. UI design done by Mike Andreuzza."
        ),
        img_src="/static/images/wickedbackgrounds.png",
        href="https://www.wickedbackgrounds.com",
    ),
]


def get_projects() -> List[Project]:
    """Return the project cards in display order."""
    return list(PROJECTS)
