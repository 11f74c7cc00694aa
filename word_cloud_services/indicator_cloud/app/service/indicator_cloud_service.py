import logging
import random
import traceback
from logging import Logger
from typing import Callable, Dict, List, Mapping, Optional, Sequence

from word_cloud_services.common.models.data_models import RenderItem
from word_cloud_services.common.models.request_models import CloudSpec

from .clouds import BaseCloud, CloudFactory, FrequencyCloud
from .enrichment import EnrichmentClient
from .extractor import WordExtractor
from .render_adapter import BaseRenderAdapter
from .selection import bounded_unique, shuffle

logging.basicConfig(format="%(asctime)s | %(levelname)s | %(funcName)s | %(message)s",
                    datefmt="%Y-%m-%d %H:%M:%S")
cloud_service_logger = logging.getLogger(__name__)
cloud_service_logger.setLevel(logging.DEBUG)


class IndicatorCloudService(object):
    """ Renders word clouds from the indicator names of a dataset

    Every cloud is described by a `CloudSpec`: which rows and words it draws
    from, how the words are selected and which cloud variant draws them.
    A cloud that fails is logged and skipped, the others are still drawn.
    """

    def __init__(self,
                 extractor: WordExtractor,
                 enrichment_client: EnrichmentClient,
                 render_adapter: BaseRenderAdapter,
                 cloud_specs: Sequence[Mapping],
                 dataset_path: str,
                 text_field: str = "indicator_name",
                 credential: str = "",
                 part_of_speech_classifiers: Optional[Dict[str, Callable[[str], bool]]] = None,
                 cloud_factory: CloudFactory = CloudFactory,
                 random_source: random.Random = random,
                 logger: Logger = cloud_service_logger):
        self._extractor = extractor
        self._enrichment_client = enrichment_client
        self._render_adapter = render_adapter
        self._cloud_specs = [CloudSpec.model_validate(spec) for spec in cloud_specs]
        self._dataset_path = dataset_path
        self._text_field = text_field
        self._credential = credential
        self._part_of_speech_classifiers = part_of_speech_classifiers or {}
        self._cloud_factory = cloud_factory
        self._random_source = random_source
        self._logger = logger

    @property
    def cloud_specs(self) -> List[CloudSpec]:
        return self._cloud_specs

    def select_words(self, rows: Sequence[Mapping], spec: CloudSpec) -> List[str]:
        if spec.keyword:
            words = self._extractor.subset(rows, self._text_field, spec.keyword)
        else:
            words = self._extractor.extract(rows, self._text_field)

        if spec.part_of_speech:
            if spec.part_of_speech not in self._part_of_speech_classifiers:
                raise KeyError(f"No classifier for part of speech \"{spec.part_of_speech}\"")
            words = self._extractor.classify(
                words, self._part_of_speech_classifiers[spec.part_of_speech])
        if spec.max_words is not None:
            words = bounded_unique(words, spec.max_words)
        if spec.shuffle:
            words = shuffle(words, self._random_source)
        return words

    async def draw(self, rows: Sequence[Mapping], spec: CloudSpec) -> List[RenderItem]:
        words = self.select_words(rows, spec)
        cloud: BaseCloud = self._cloud_factory.create(
            spec, words, self._render_adapter, credential=self._credential)
        self._logger.info(f"Drawing {spec.name} cloud: {cloud}")

        await cloud.load_data(self._enrichment_client)
        if isinstance(cloud, FrequencyCloud) and spec.min_frequency is not None:
            cloud.filter_by_threshold(spec.min_frequency)
        return cloud.render()

    async def run(self, cloud_names: Optional[List[str]] = None) -> Dict[str, List[RenderItem]]:
        """ Draw the configured clouds, or only those named in `cloud_names`

        Returns:
            cloud name -> items handed to the render adapter, failed clouds excluded
        """
        rows = self._extractor.load_rows(self._dataset_path)
        specs = [spec for spec in self._cloud_specs
                 if cloud_names is None or spec.name in cloud_names]

        rendered = {}
        for spec in specs:
            try:
                rendered[spec.name] = await self.draw(rows, spec)
            except Exception as e:
                traceback.print_exc()
                self._logger.error(f"Failed to draw {spec.name} cloud: {e}")

        self._logger.info(f"Drew {len(rendered)}/{len(specs)} clouds")
        return rendered
