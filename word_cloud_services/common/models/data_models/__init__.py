""" This module contains domain models used and returned by core components and services.
"""

from .word_cloud import WeightedWord, RenderItem, LayoutOptions
from .enrichment import RelatedWords, WordFrequency
