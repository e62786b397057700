"""
Corpus scanner - adds unseen articles of a directory to the index.

Only the immediate entries of the article directory are considered. Entries
already present in the index are never re-read, so an edited article keeps
its old term counts until its entry is removed from the persisted index.
"""

import logging
import os
from collections import Counter
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Union

from ..errors import NotFoundError
from .models import CorpusIndex, Document
from .tokenizer import normalize

logger = logging.getLogger(__name__)


@dataclass
class ScanWarning:
    """An entry that was skipped instead of failing the scan"""
    path: str
    reason: str


@dataclass
class ScanResult:
    index: CorpusIndex
    added: List[str] = field(default_factory=list)
    warnings: List[ScanWarning] = field(default_factory=list)


def build_document(text: str) -> Document:
    """
    Count stemmed terms of one article.
    
    Example:
        >>> doc = build_document("Rust rust go")
        >>> doc.term_counts, doc.length
        ({'rust': 2, 'go': 1}, 3)
    """
    terms = normalize(text)
    return Document(term_counts=dict(Counter(terms)), length=len(terms))


def scan_directory(directory: Union[str, Path], index: CorpusIndex) -> ScanResult:
    """
    Index every regular file of directory that the index does not know yet.
    
    Document ids are the directory string as given joined with the entry
    name, so "./articles" yields "./articles/a.md".
    
    The index is updated in place. Unreadable files are skipped and reported
    in ScanResult.warnings. Afterwards index.doc_count is the number of
    directory entries visited in this pass (sub-directories and skipped
    files included).
    
    Raises:
        NotFoundError: directory cannot be listed
    """
    try:
        with os.scandir(directory) as it:
            entries = sorted(it, key=lambda e: e.name)
    except OSError as e:
        logger.warning(f"Cannot list article directory {directory}: {e}")
        raise NotFoundError(f"Article directory not found: {directory}") from e
    
    result = ScanResult(index=index)
    
    for entry in entries:
        doc_id = entry.path
        if doc_id in index.documents:
            continue
        
        try:
            if not entry.is_file():
                continue
            with open(doc_id, "r", encoding="utf-8") as f:
                content = f.read()
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"Skipping unreadable article {doc_id}: {e}")
            result.warnings.append(ScanWarning(path=doc_id, reason=str(e)))
            continue
        
        document = build_document(content)
        index.documents[doc_id] = document
        result.added.append(doc_id)
        logger.debug(f"Indexed {doc_id}: {len(document.term_counts)} unique terms, {document.length} tokens")
    
    index.doc_count = len(entries)
    
    if result.added:
        logger.info(f"Scanned {directory}: {len(result.added)} new documents, {len(index.documents)} total")
    
    return result
