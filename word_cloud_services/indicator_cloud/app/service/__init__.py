from .extractor import WordExtractor, contains_substring
from .selection import bounded_unique, shuffle, threshold_filter
from .enrichment import EnrichmentClient
from .render_adapter import BaseRenderAdapter, WordCloudImageRenderer
from .clouds import (BaseCloud, WordCloud, SynonymCloud, FrequencyCloud,
                     CloudFactory, scale_font_sizes)
from .indicator_cloud_service import IndicatorCloudService
