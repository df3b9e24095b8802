"""
Project card record.

A Project is authored once in `portfolio.data.projects_data` and rendered as a
card. Title and description are always present; the link and image are
optional and simply left out of the card when absent.
"""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Project:
    """
    A single project shown on the projects page.

    Attributes:
        title: Short project name.
        description: Longer description shown on the card.
        href: Optional link to the project.
        img_src: Optional path of the card image (serialized as ``imgSrc``).
    """

    title: str
    description: str
    href: Optional[str] = None
    img_src: Optional[str] = None

    def __post_init__(self) -> None:
        """Validate fields after initialization."""
        self.validate()

    def validate(self) -> None:
        """
        Validate that required fields are present.

        Raises:
            ValueError: If validation fails.
        """
        errors = []

        if not isinstance(self.title, str) or not self.title.strip():
            errors.append("title is required and cannot be empty")

        if not isinstance(self.description, str) or not self.description.strip():
            errors.append("description is required and cannot be empty")

        if errors:
            raise ValueError(f"Project validation failed: {'; '.join(errors)}")

    def to_dict(self) -> dict:
        """
        Convert to the external ``{title, description, href?, imgSrc?}`` shape.

        Absent optional fields are omitted rather than emitted as null.
        """
        data = {"title": self.title, "description": self.description}
        if self.href:
            data["href"] = self.href
        if self.img_src:
            data["imgSrc"] = self.img_src
        return data

    @classmethod
    def from_dict(cls, data: dict) -> "Project":
        """Create a Project from the external shape (accepts ``imgSrc`` or ``img_src``)."""
        return cls(
            title=data.get("title", ""),
            description=data.get("description", ""),
            href=data.get("href") or None,
            img_src=data.get("imgSrc", data.get("img_src")) or None,
        )

    def __str__(self) -> str:
        return self.title
