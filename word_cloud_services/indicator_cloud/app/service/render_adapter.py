import logging
import os
import random
from abc import ABC, abstractmethod
from logging import Logger
from typing import Callable, Optional, Sequence

from wordcloud import WordCloud as WordCloudLayout
from word_cloud_services.common.models.data_models import LayoutOptions, RenderItem

logging.basicConfig(format="%(asctime)s | %(levelname)s | %(funcName)s | %(message)s",
                    datefmt="%Y-%m-%d %H:%M:%S")
render_logger = logging.getLogger(__name__)
render_logger.setLevel(logging.DEBUG)

CATEGORY_10 = (
    "#1f77b4", "#ff7f0e", "#2ca02c", "#d62728", "#9467bd",
    "#8c564b", "#e377c2", "#7f7f7f", "#bcbd22", "#17becf",
)


class BaseRenderAdapter(ABC):
    """ Lays out words and draws them on a target surface """

    @abstractmethod
    def render(self, items: Sequence[RenderItem], target: str,
               layout: Optional[LayoutOptions] = None) -> None:
        return NotImplemented


class WordCloudImageRenderer(BaseRenderAdapter):
    """ Draws clouds into image files with the wordcloud library

    `target` is the path of the image to write. Font sizes are passed as
    relative frequencies, so the largest item is drawn at its own size and
    the others proportionally smaller.
    """

    def __init__(self,
                 layout_class: Callable = WordCloudLayout,
                 palette: Sequence[str] = CATEGORY_10,
                 background_color: str = "white",
                 random_source: random.Random = random,
                 logger: Logger = render_logger):
        self._layout_class = layout_class
        self._palette = palette
        self._background_color = background_color
        self._random_source = random_source
        self._logger = logger

    def _pick_color(self, word, font_size, position, orientation, random_state=None, **kwargs) -> str:
        return self._random_source.choice(self._palette)

    def render(self, items: Sequence[RenderItem], target: str,
               layout: Optional[LayoutOptions] = None) -> None:
        if len(items) == 0:
            self._logger.warning(f"No words to draw on {target}, skipped.")
            return

        layout = layout or LayoutOptions()
        sizes = {}
        for item in items:
            sizes[item.text] = max(item.size, sizes.get(item.text, 0))

        cloud = self._layout_class(
            width=layout.width,
            height=layout.height,
            margin=layout.padding,
            background_color=self._background_color,
            color_func=self._pick_color,
            relative_scaling=1,
            max_font_size=int(max(sizes.values())),
            max_words=len(sizes),
        ).generate_from_frequencies(sizes)

        target_dir = os.path.dirname(target)
        if target_dir:
            os.makedirs(target_dir, exist_ok=True)
        cloud.to_file(target)
        self._logger.info(f"Drew {len(sizes)} words on {target}")
