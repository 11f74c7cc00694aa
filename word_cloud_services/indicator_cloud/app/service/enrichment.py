from typing import Dict, List

from ..rpc import FrequencyService, SynonymService


class EnrichmentClient(object):
    """ Expands and scores words through the remote word services
    """

    def __init__(self, synonym_service: SynonymService, frequency_service: FrequencyService):
        self._synonym_service = synonym_service
        self._frequency_service = frequency_service

    async def fetch_synonyms(self, words: List[str], credential: str) -> List[str]:
        return await self._synonym_service.fetch_synonyms(words, api_key=credential)

    async def fetch_frequencies(self, words: List[str]) -> Dict[str, float]:
        return await self._frequency_service.fetch_frequencies(words)
