""" Word cloud variants

Every cloud holds a word list and a target surface, loads whatever data it
needs through an `EnrichmentClient` and hands `RenderItem`s to a render
adapter.
"""
import logging
from abc import ABC, abstractmethod
from logging import Logger
from typing import List, Optional, Sequence, Union

from word_cloud_services.common.core import DegenerateRange, EmptyInput
from word_cloud_services.common.enums import CloudKind
from word_cloud_services.common.models.data_models import (LayoutOptions,
                                                           RenderItem,
                                                           WeightedWord)
from word_cloud_services.common.models.data_models.word_cloud import DEFAULT_WORD_SIZE
from word_cloud_services.common.models.request_models import CloudSpec

from .enrichment import EnrichmentClient
from .render_adapter import BaseRenderAdapter
from .selection import threshold_filter

logging.basicConfig(format="%(asctime)s | %(levelname)s | %(funcName)s | %(message)s",
                    datefmt="%Y-%m-%d %H:%M:%S")
cloud_logger = logging.getLogger(__name__)
cloud_logger.setLevel(logging.DEBUG)

MIN_FONT_SIZE = 10
MAX_FONT_SIZE = 42


def _text_of(word: Union[str, WeightedWord]) -> str:
    return word.text if isinstance(word, WeightedWord) else word


def _default_items(words: Sequence[Union[str, WeightedWord]], size: float) -> List[RenderItem]:
    return [RenderItem(text=_text_of(word), size=size) for word in words]


def _linear_scale(value: float, lowest: float, highest: float,
                  min_size: float, max_size: float) -> float:
    if highest == lowest:
        raise DegenerateRange(lowest)
    return min_size + (value - lowest) * (max_size - min_size) / (highest - lowest)


def scale_font_sizes(weights: Sequence[float],
                     min_size: float = MIN_FONT_SIZE,
                     max_size: float = MAX_FONT_SIZE,
                     logger: Logger = cloud_logger) -> List[float]:
    """ Map weights linearly onto [min_size, max_size]

    All-equal weights are drawn at `min_size`.

    Raises:
        EmptyInput: no weights to scale
    """
    if len(weights) == 0:
        raise EmptyInput("Cannot scale font sizes of an empty word list")

    lowest, highest = min(weights), max(weights)
    try:
        return [_linear_scale(weight, lowest, highest, min_size, max_size)
                for weight in weights]
    except DegenerateRange as e:
        logger.warning(f"{e}, falling back to font size {min_size}")
        return [min_size for _ in weights]


class BaseCloud(ABC):

    def __init__(self,
                 words: Sequence[Union[str, WeightedWord]],
                 target: str,
                 render_adapter: BaseRenderAdapter,
                 layout: Optional[LayoutOptions] = None,
                 logger: Logger = cloud_logger):
        self.words = list(words)
        self.target = target
        self._render_adapter = render_adapter
        self._layout = layout or LayoutOptions()
        self._logger = logger

    def __repr__(self):
        return f"<{self.__class__.__name__} target={self.target} words={len(self.words)}>"

    def _draw(self, items: List[RenderItem]) -> List[RenderItem]:
        self._render_adapter.render(items, self.target, self._layout)
        return items

    @abstractmethod
    async def load_data(self, client: EnrichmentClient) -> None:
        return NotImplemented

    @abstractmethod
    def render(self) -> List[RenderItem]:
        return NotImplemented


class WordCloud(BaseCloud):
    """ Draws every word at the same size """

    def __init__(self,
                 words: Sequence[Union[str, WeightedWord]],
                 target: str,
                 render_adapter: BaseRenderAdapter,
                 layout: Optional[LayoutOptions] = None,
                 default_size: float = DEFAULT_WORD_SIZE,
                 logger: Logger = cloud_logger):
        super().__init__(words, target, render_adapter, layout, logger)
        self._default_size = default_size

    async def load_data(self, client: EnrichmentClient) -> None:
        pass

    def layout_and_render(self) -> List[RenderItem]:
        return self._draw(_default_items(self.words, self._default_size))

    def render(self) -> List[RenderItem]:
        return self.layout_and_render()


class SynonymCloud(BaseCloud):
    """ Replaces its words by their synonyms, drawn at the same size """

    def __init__(self,
                 words: Sequence[str],
                 target: str,
                 render_adapter: BaseRenderAdapter,
                 credential: str,
                 layout: Optional[LayoutOptions] = None,
                 default_size: float = DEFAULT_WORD_SIZE,
                 logger: Logger = cloud_logger):
        super().__init__(words, target, render_adapter, layout, logger)
        self._credential = credential
        self._default_size = default_size

    async def expand(self, client: EnrichmentClient) -> None:
        synonyms = await client.fetch_synonyms([_text_of(word) for word in self.words],
                                               self._credential)
        self._logger.info(f"Expanded {len(self.words)} words into {len(synonyms)} synonyms")
        self.words = synonyms

    async def load_data(self, client: EnrichmentClient) -> None:
        await self.expand(client)

    def render(self) -> List[RenderItem]:
        return self._draw(_default_items(self.words, self._default_size))


class FrequencyCloud(BaseCloud):
    """ Sizes words by how common they are """

    def __init__(self,
                 words: Sequence[Union[str, WeightedWord]],
                 target: str,
                 render_adapter: BaseRenderAdapter,
                 layout: Optional[LayoutOptions] = None,
                 min_font_size: float = MIN_FONT_SIZE,
                 max_font_size: float = MAX_FONT_SIZE,
                 logger: Logger = cloud_logger):
        super().__init__(words, target, render_adapter, layout, logger)
        self._min_font_size = min_font_size
        self._max_font_size = max_font_size

    async def score_and_scale(self, client: EnrichmentClient) -> None:
        texts = [_text_of(word) for word in self.words]
        frequency_index = await client.fetch_frequencies(texts)
        self.words = [WeightedWord(text=text, weight=frequency_index.get(text, 0))
                      for text in texts]

    async def load_data(self, client: EnrichmentClient) -> None:
        await self.score_and_scale(client)

    def _weighted_words(self) -> List[WeightedWord]:
        # words that were never scored weigh 0
        return [word if isinstance(word, WeightedWord) else WeightedWord(text=word, weight=0)
                for word in self.words]

    def filter_by_threshold(self, min_weight: float) -> None:
        self.words = threshold_filter(self._weighted_words(), min_weight)

    def render(self) -> List[RenderItem]:
        words = self._weighted_words()
        try:
            sizes = scale_font_sizes([word.weight for word in words],
                                     self._min_font_size, self._max_font_size,
                                     logger=self._logger)
        except EmptyInput as e:
            self._logger.warning(f"Nothing to draw on {self.target}: {e}")
            return []

        return self._draw([RenderItem(text=word.text, size=size)
                           for word, size in zip(words, sizes)])


class CloudFactory(object):
    """ Builds the cloud variant described by a `CloudSpec` """

    @classmethod
    def create(cls, spec: CloudSpec, words: Sequence[str],
               render_adapter: BaseRenderAdapter, credential: str = "") -> BaseCloud:
        kind = CloudKind(spec.kind)
        if kind == CloudKind.SYNONYM:
            return SynonymCloud(words, spec.target, render_adapter, credential,
                                layout=spec.layout, default_size=spec.default_size)
        elif kind == CloudKind.FREQUENCY:
            return FrequencyCloud(words, spec.target, render_adapter, layout=spec.layout,
                                  min_font_size=spec.min_font_size,
                                  max_font_size=spec.max_font_size)
        return WordCloud(words, spec.target, render_adapter,
                         layout=spec.layout, default_size=spec.default_size)
