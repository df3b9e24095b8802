"""
Filesystem post source.

Reads markdown documents from the blog directory. Each file's path relative
to the directory, without its extension, is the post slug:

    data/blog/code-sample.md         -> code-sample
    data/blog/nested/route/post.mdx  -> nested/route/post
"""

from pathlib import Path
from typing import Dict, List, Union

from portfolio.config import BLOG_DIR
from portfolio.content.errors import DuplicateSlugError, FrontMatterError
from portfolio.models.blog_post import BlogPost
from portfolio.sources.base import PostSource

DOCUMENT_EXTENSIONS = (".md", ".mdx")


class FileSystemPostSource(PostSource):
    """
    Loads posts from ``*.md`` / ``*.mdx`` files under a directory.

    Usage:
        source = FileSystemPostSource("data/blog")
        posts = source.load_posts()
    """

    def __init__(self, root: Union[str, Path, None] = None, encoding: str = "utf-8"):
        self.root = Path(root) if root else BLOG_DIR
        self.encoding = encoding

    @property
    def name(self) -> str:
        return "filesystem"

    def document_paths(self) -> List[Path]:
        """Every document under the root, sorted for a stable load order."""
        if not self.root.is_dir():
            raise FileNotFoundError(f"Blog directory not found: {self.root}")
        return sorted(
            path for path in self.root.rglob("*")
            if path.is_file() and path.suffix.lower() in DOCUMENT_EXTENSIONS
        )

    def slug_for(self, path: Path) -> str:
        relative = path.relative_to(self.root).with_suffix("")
        return relative.as_posix()

    def load_post(self, path: Path) -> BlogPost:
        """Parse a single document. Errors name the file."""
        try:
            text = path.read_text(encoding=self.encoding)
        except UnicodeDecodeError as e:
            raise FrontMatterError(f"not valid {self.encoding}: {e}", str(path)) from e
        return BlogPost.from_document(text, slug=self.slug_for(path), source=str(path))

    def load_posts(self) -> List[BlogPost]:
        posts: List[BlogPost] = []
        seen: Dict[str, Path] = {}

        for path in self.document_paths():
            post = self.load_post(path)
            if post.slug in seen:
                raise DuplicateSlugError(post.slug, str(seen[post.slug]), str(path))
            seen[post.slug] = path
            posts.append(post)

        return posts
