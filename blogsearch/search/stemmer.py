"""
Snowball Stemmer for English (via NLTK).

Uses the Snowball stemming algorithm (improved Porter2 stemmer):
https://snowballstem.org/

Examples:
- "articles" → "articl"
- "searching" → "search"
- "running" → "run"
"""

from nltk.stem.snowball import SnowballStemmer

# Initialize stemmer once (thread-safe, reusable)
_stemmer = SnowballStemmer('english')


def stem(word: str) -> str:
    """
    Stem a single lowercase word using the Snowball algorithm.
    
    Examples:
        >>> stem("searching")
        'search'
        >>> stem("rust")
        'rust'
    """
    return _stemmer.stem(word)
