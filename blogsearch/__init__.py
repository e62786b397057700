"""Blog search - serves a personal article corpus and ranks it with BM25"""

__version__ = "0.1.0"
