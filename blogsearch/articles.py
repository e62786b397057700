"""
Article storage on the local filesystem.

Articles are plain files directly inside the article directory. The file
name is the public article name; the full path is the document id used by
the search index.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Union

from .errors import NotFoundError

logger = logging.getLogger(__name__)

PREVIEW_CHARS = 200


def article_title(file_name: str) -> str:
    """
    Display name of an article file: last extension dropped, underscores as spaces.
    
    Examples:
        >>> article_title("my_first_post.md")
        'my first post'
        >>> article_title("notes.v2.md")
        'notes.v2'
    """
    return Path(file_name).stem.replace("_", " ")


def make_preview(content: str) -> str:
    """First PREVIEW_CHARS characters followed by "...", even for short articles"""
    return f"{content[:PREVIEW_CHARS]}..."


@dataclass
class MiniArticle:
    """Summary shown for an article in listings and search results"""
    name: str
    title: str
    preview: Optional[str]


class ArticleStore:
    """Read access to the article directory"""
    
    def __init__(self, articles_dir: Union[str, Path]):
        self.articles_dir = Path(articles_dir)
    
    def list_articles(self) -> List[str]:
        """
        Names of all articles, sorted by file name.
        
        Raises:
            NotFoundError: article directory cannot be listed
        """
        try:
            entries = list(self.articles_dir.iterdir())
        except OSError as e:
            logger.warning(f"Cannot list article directory {self.articles_dir}: {e}")
            raise NotFoundError(f"Article directory not found: {self.articles_dir}") from e
        
        return sorted(entry.name for entry in entries if entry.is_file())
    
    def read_article(self, name: str) -> str:
        """
        Full text of the article with the given file name.
        
        Raises:
            NotFoundError: unknown article, unreadable file or a name that
                points outside the article directory
        """
        root = self.articles_dir.resolve()
        path = (self.articles_dir / name).resolve()
        if path.parent != root:
            logger.warning(f"Rejected article name outside {root}: {name!r}")
            raise NotFoundError(f"Article not found: {name}")
        
        return self._read(path)
    
    def read_document(self, doc_id: str) -> str:
        """Full text of a search hit, addressed by its document id (path)"""
        return self._read(Path(doc_id))
    
    def _read(self, path: Path) -> str:
        try:
            return path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"ERROR reading article {path}: {e}")
            raise NotFoundError(f"Article not found: {path.name}") from e
    
    def mini_article(self, doc_id: str) -> MiniArticle:
        """
        Title and preview of an article addressed by document id (path).
        
        The preview is None when the file cannot be read (e.g. an indexed
        article deleted since), so one stale entry does not fail a listing.
        """
        name = Path(doc_id).name
        try:
            preview = make_preview(self.read_document(doc_id))
        except NotFoundError:
            preview = None
        return MiniArticle(name=name, title=article_title(name), preview=preview)
    
    def list_mini_articles(self) -> List[MiniArticle]:
        """Mini articles for list_articles(), in the same order"""
        return [self.mini_article(str(self.articles_dir / name)) for name in self.list_articles()]
