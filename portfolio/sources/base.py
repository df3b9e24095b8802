"""
Base post source abstraction.

Defines the interface every blog post source implements, so the collection
can be built from a content directory or from posts held in memory.
"""

from abc import ABC, abstractmethod
from typing import List

from portfolio.models.blog_post import BlogPost


class PostSource(ABC):
    """
    Abstract base class for all post sources.

    Attributes:
        name: Identifier for this source (e.g., "filesystem", "memory").
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Return the name of this source, used in build summaries."""
        pass

    @abstractmethod
    def load_posts(self) -> List[BlogPost]:
        """
        Load every post this source holds, drafts included.

        Unlike a best-effort fetch, a document that cannot be parsed must
        raise: a malformed post is an authoring error that fails the build.

        Returns:
            List of BlogPost instances in no particular order.

        Raises:
            FrontMatterError: If a document's front-matter is invalid.
            DuplicateSlugError: If two documents share a slug.
        """
        pass

    def __str__(self) -> str:
        return f"PostSource({self.name})"

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} name={self.name!r}>"
