"""
Persisted index cache.

The index lives in one JSON file. Loading never fails on bad content (the
cache falls back to an empty index and rebuilds), and saving is best-effort:
a failed write is logged and the search still answers.

Writes go to a temporary file in the same directory and are moved over the
target with os.replace, so readers never see a half-written index.
"""

import logging
import os
import tempfile
from pathlib import Path
from typing import Union

from pydantic import ValidationError

from ..errors import IndexIOError
from .models import CorpusIndex

logger = logging.getLogger(__name__)


class IndexCache:
    """Loads and saves the CorpusIndex at a fixed path"""
    
    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
    
    def load(self) -> CorpusIndex:
        """
        Read the persisted index, creating an empty cache file if missing.
        
        Returns:
            Parsed index, or an empty index when the file content is not a
            valid persisted index (empty file included)
        
        Raises:
            IndexIOError: file cannot be created or opened
        """
        if not self.path.exists():
            logger.warning(f"Index cache {self.path} missing, creating it")
            try:
                self.path.parent.mkdir(parents=True, exist_ok=True)
                self.path.touch()
            except OSError as e:
                raise IndexIOError(f"Cannot create index cache {self.path}: {e}") from e
        
        try:
            raw = self.path.read_bytes()
        except OSError as e:
            raise IndexIOError(f"Cannot open index cache {self.path}: {e}") from e
        
        try:
            return CorpusIndex.from_json(raw)
        except ValidationError as e:
            if raw.strip():
                logger.warning(f"Index cache {self.path} is malformed, starting from an empty index: {e.error_count()} errors")
            else:
                logger.debug(f"Index cache {self.path} is empty")
            return CorpusIndex.empty()
    
    def save(self, index: CorpusIndex) -> bool:
        """
        Overwrite the persisted index.
        
        Returns:
            True if written, False if the write failed (failure is logged only)
        """
        tmp_name = None
        try:
            payload = index.to_json()
            directory = self.path.parent
            directory.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(prefix=f".{self.path.name}.", suffix=".tmp", dir=directory)
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(payload)
            os.replace(tmp_name, self.path)
            tmp_name = None
            logger.debug(f"Saved index cache {self.path}: {len(index.documents)} documents")
            return True
        except (OSError, ValueError) as e:
            logger.warning(f"Failed to save index cache {self.path}: {e}")
            return False
        finally:
            if tmp_name is not None:
                try:
                    os.unlink(tmp_name)
                except OSError:
                    pass  # Temp file may not exist
    
    def clear(self) -> None:
        """Delete the persisted index so the next scan re-reads every article"""
        try:
            self.path.unlink()
            logger.info(f"Cleared index cache {self.path}")
        except FileNotFoundError:
            pass
