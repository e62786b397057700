"""
Tokenizer shared by indexing and querying.

Pipeline:
1. Split on whitespace
2. Lowercase each token
3. Apply Snowball stemming

No punctuation stripping and no stopword removal: a token is exactly what
whitespace delimits, so document length counts every token.
"""

from typing import Iterable, List

from .stemmer import stem


def normalize(text: str) -> List[str]:
    """
    Turn raw text into a list of stemmed, lowercased terms.
    
    Args:
        text: Raw document or query text
    
    Returns:
        Terms in original order, repeats preserved
    
    Examples:
        >>> normalize("Rust rust Go")
        ['rust', 'rust', 'go']
        
        >>> normalize("Searching articles")
        ['search', 'articl']
        
        >>> normalize("   ")
        []
    """
    if not text:
        return []
    
    return [stem(token.lower()) for token in text.split()]


def normalize_query(terms: Iterable[str]) -> List[str]:
    """Normalize already-split query terms with the same rules as documents"""
    query: List[str] = []
    for term in terms:
        query.extend(normalize(term))
    return query
