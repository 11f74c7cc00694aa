from typing import List, Optional
from pydantic import BaseModel, Field


class RelatedWords(BaseModel):
    """ One entry of a relatedWords response """
    relationshipType: str
    words: List[str] = []


class WordFrequency(BaseModel):
    """ One entry of a spelling lookup response """
    word: Optional[str] = None
    score: float = Field(ge=0)
    tags: List[str] = []
