""" Order sensitive transforms applied to word lists before they become clouds
"""
import random
from typing import Iterable, List, Sequence

from word_cloud_services.common.models.data_models import WeightedWord

from .extractor import unique


def bounded_unique(vocabulary: Iterable[str], n: int) -> List[str]:
    if n < 0:
        raise ValueError(f"n must not be negative, got {n}")
    return unique(vocabulary)[:n]


def shuffle(vocabulary: Iterable[str], random_source: random.Random = random) -> List[str]:
    """ Return a uniformly shuffled copy of `vocabulary` """
    shuffled = list(vocabulary)
    random_source.shuffle(shuffled)
    return shuffled


def threshold_filter(weighted: Sequence[WeightedWord], min_weight: float) -> List[WeightedWord]:
    return [word for word in weighted if word.weight >= min_weight]
