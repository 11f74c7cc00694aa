from typing import List, Optional
from pydantic import BaseModel, Field, field_validator
from ...enums import CloudKind
from ..data_models import LayoutOptions
from ..data_models.word_cloud import DEFAULT_WORD_SIZE


class CloudSpec(BaseModel):
    """ Describes which words a cloud shows and how it is drawn

    Fields:
        name: str
        kind: CloudKind
        target: str, surface the render adapter draws on
        keyword: Optional[str], only use rows containing this token
        part_of_speech: Optional[str], only keep tokens of this part of speech
        max_words: Optional[int], keep the first n unique words
        shuffle: bool, randomize word order before slicing
        min_frequency: Optional[float], drop words scoring below this
        default_size: float
        min_font_size: float
        max_font_size: float
        layout: LayoutOptions
    """
    name: str
    kind: CloudKind = CloudKind.UNCATEGORIZED
    target: str
    keyword: Optional[str] = None
    part_of_speech: Optional[str] = None
    max_words: Optional[int] = Field(default=None, ge=0)
    shuffle: bool = False
    min_frequency: Optional[float] = None
    default_size: float = DEFAULT_WORD_SIZE
    min_font_size: float = 10
    max_font_size: float = 42
    layout: LayoutOptions = LayoutOptions()

    @field_validator("kind", mode="before")
    @classmethod
    def parse_kind(cls, value):
        if isinstance(value, str):
            return CloudKind(value.split(".")[-1].lower())
        return value

    @field_validator("max_font_size")
    @classmethod
    def check_font_range(cls, value, info):
        min_font_size = info.data.get("min_font_size")
        if min_font_size is not None and value < min_font_size:
            raise ValueError("max_font_size must not be smaller than min_font_size")
        return value


class RenderTaskArgs(BaseModel):
    clouds: Optional[List[str]] = None
