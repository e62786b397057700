"""
Corpus index data model and its persisted JSON shape.

Persisted layout (key spelling is part of the on-disk format):
{
    "word_count": {
        "<document_id>": {"word_count": {"<term>": <count>}, "lenght": <int>},
        ...
    },
    "lenght": <int>
}
"""

from typing import Dict

from pydantic import BaseModel, ConfigDict, Field


class Document(BaseModel):
    """Term frequencies and token count of one article"""
    model_config = ConfigDict(populate_by_name=True)
    
    term_counts: Dict[str, int] = Field(..., alias="word_count")
    length: int = Field(..., alias="lenght", description="Total tokens, repeats included")


class CorpusIndex(BaseModel):
    """
    All indexed documents keyed by document id (file path).
    
    doc_count is the N used for IDF and average document length. It is set
    by the scanner to the number of directory entries visited, which can be
    larger than len(documents).
    """
    model_config = ConfigDict(populate_by_name=True)
    
    documents: Dict[str, Document] = Field(..., alias="word_count")
    doc_count: int = Field(..., alias="lenght")
    
    @classmethod
    def empty(cls) -> "CorpusIndex":
        return cls(documents={}, doc_count=0)
    
    @classmethod
    def from_json(cls, raw: str) -> "CorpusIndex":
        """Parse persisted JSON (raises pydantic.ValidationError on bad input)"""
        return cls.model_validate_json(raw)
    
    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True)
    
    def total_length(self) -> int:
        return sum(doc.length for doc in self.documents.values())
