import logging
from typing import List, Type
from urllib.parse import quote

from pydantic import ValidationError
from word_cloud_services.common.core import (BaseRequestClient,
                                             EnrichmentError,
                                             MalformedResponse)
from word_cloud_services.common.enums import RelationshipType
from word_cloud_services.common.models.data_models import RelatedWords

from .base import RESTfulRPCService

logging.basicConfig(format="%(asctime)s | %(levelname)s | %(funcName)s | %(message)s",
                    datefmt="%Y-%m-%d %H:%M:%S")
rpc_service_logger = logging.getLogger(__name__)
rpc_service_logger.setLevel(logging.DEBUG)


class SynonymService(RESTfulRPCService):
    """ Looks up related words with a Wordnik style relatedWords endpoint

    GET {endpoint}/{word}/relatedWords?useCanonical=true&api_key={key}
    """

    def __init__(self, remote_service_endpoint: str,
                 request_client: BaseRequestClient,
                 response_model: Type[RelatedWords] = RelatedWords,
                 logger: logging.Logger = rpc_service_logger):
        self._remote_service_endpoint = remote_service_endpoint.rstrip("/")
        self._request_client = request_client
        self._response_model = response_model
        self._logger = logger

    def _build_url(self, word: str) -> str:
        return f"{self._remote_service_endpoint}/{quote(word, safe='')}/relatedWords"

    async def get_related_words(self, word: str, api_key: str) -> List[RelatedWords]:
        resp_data = await self._get_json(
            word, self._build_url(word),
            params={"useCanonical": "true", "api_key": api_key})

        if type(resp_data) is not list:
            raise MalformedResponse(word, f"Expected a list of related words for \"{word}\", got: {resp_data}")

        related_words = []
        for entry in resp_data:
            try:
                related_words.append(self._response_model.model_validate(entry))
            except ValidationError as e:
                self._logger.warning(f"Skipped related words entry for \"{word}\": {e}")
        return related_words

    async def fetch_synonyms(self, words: List[str], api_key: str) -> List[str]:
        """ Collect the synonyms of every word, one request at a time

        Words that fail are logged and skipped. Synonyms shared by several
        source words appear once per source word.
        """
        synonyms = []

        for word in words:
            try:
                related_words = await self.get_related_words(word, api_key)
            except EnrichmentError as e:
                self._logger.error(f"Failed to fetch related words for \"{word}\": {e}")
                continue

            for entry in related_words:
                if entry.relationshipType == RelationshipType.SYNONYM.value:
                    synonyms.extend(entry.words)
            self._logger.debug(f"Collected synonyms for \"{word}\", total: {len(synonyms)}")

        return synonyms
