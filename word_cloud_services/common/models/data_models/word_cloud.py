from pydantic import BaseModel, Field

DEFAULT_WORD_SIZE = 20


class WeightedWord(BaseModel):
    text: str
    weight: float = Field(default=DEFAULT_WORD_SIZE, ge=0)


class RenderItem(BaseModel):
    """ A word and the font size it should be drawn with """
    text: str
    size: float


class LayoutOptions(BaseModel):
    """ Describes the surface a cloud is laid out on

    Fields:
        width: int
        height: int
        padding: int, space kept around every word
    """
    width: int = 1200
    height: int = 720
    padding: int = 20
