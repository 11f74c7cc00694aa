import logging
from typing import Callable, Dict, List, Optional, Type

from pydantic import ValidationError
from word_cloud_services.common.core import (BaseRequestClient,
                                             EnrichmentError,
                                             MalformedResponse)
from word_cloud_services.common.models.data_models import WordFrequency
from word_cloud_services.common.utils import throttled

from .base import RESTfulRPCService

logging.basicConfig(format="%(asctime)s | %(levelname)s | %(funcName)s | %(message)s",
                    datefmt="%Y-%m-%d %H:%M:%S")
rpc_service_logger = logging.getLogger(__name__)
rpc_service_logger.setLevel(logging.DEBUG)


class FrequencyService(RESTfulRPCService):
    """ Scores word usage with a Datamuse style spelling lookup

    GET {endpoint}?sp={word}&md=f
    """

    def __init__(self, remote_service_endpoint: str,
                 request_client: BaseRequestClient,
                 response_model: Type[WordFrequency] = WordFrequency,
                 throttled_fetch: Callable = throttled,
                 max_concurrency: Optional[int] = 50,
                 logger: logging.Logger = rpc_service_logger):
        if max_concurrency is not None and max_concurrency < 1:
            raise ValueError(f"max_concurrency must be at least 1, got: {max_concurrency}")
        self._remote_service_endpoint = remote_service_endpoint
        self._request_client = request_client
        self._response_model = response_model
        self._throttled_fetch = throttled_fetch
        self._max_concurrency = max_concurrency
        self._logger = logger

    async def get_frequency(self, word: str) -> float:
        """ Score of the best spelling match, 0 when nothing matches """
        resp_data = await self._get_json(
            word, self._remote_service_endpoint, params={"sp": word, "md": "f"})

        if type(resp_data) is not list:
            raise MalformedResponse(word, f"Expected a list of matches for \"{word}\", got: {resp_data}")
        if len(resp_data) == 0:
            return 0

        try:
            return self._response_model.model_validate(resp_data[0]).score
        except ValidationError as e:
            raise MalformedResponse(word, f"Unexpected match for \"{word}\": {e}") from e

    async def fetch_frequencies(self, words: List[str]) -> Dict[str, float]:
        results = await self._throttled_fetch(
            self._max_concurrency, [self.get_frequency(word) for word in words])

        frequency_index = {}
        for word, result in zip(words, results):
            if isinstance(result, EnrichmentError):
                self._logger.error(f"Failed to fetch frequency for \"{word}\": {result}")
                frequency_index[word] = 0
            elif isinstance(result, BaseException):
                raise result
            else:
                frequency_index[word] = result
        return frequency_index
