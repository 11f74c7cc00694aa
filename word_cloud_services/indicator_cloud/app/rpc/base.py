import asyncio
from typing import Any

from aiohttp import ClientError
from word_cloud_services.common.core import (BaseRequestClient,
                                             MalformedResponse,
                                             ServiceUnavailable,
                                             TransportError)
from word_cloud_services.common.enums import RequestStatus


class RESTfulRPCService(object):

    def __init__(self, remote_service_endpoint: str, request_client: BaseRequestClient):
        self._remote_service_endpoint = remote_service_endpoint
        self._request_client = request_client

    @property
    def remote_service_endpoint(self) -> str:
        return self._remote_service_endpoint

    async def _get_json(self, word: str, url: str, params: dict = {}) -> Any:
        """ GET a JSON document on behalf of `word`

        Raises:
            ServiceUnavailable: non-success status
            TransportError: the request could not complete
            MalformedResponse: body is not JSON
        """
        try:
            async with self._request_client.get(url, params=params) as resp:
                if RequestStatus.from_status_code(resp.status) != RequestStatus.SUCCESS:
                    raise ServiceUnavailable(word, resp.status, getattr(resp, "reason", "") or "")
                try:
                    return await resp.json(content_type=None)
                except ValueError as e:
                    raise MalformedResponse(word, f"Response for \"{word}\" is not JSON: {e}") from e
        except asyncio.TimeoutError as e:
            raise TransportError(word, f"Request for \"{word}\" timed out") from e
        except ClientError as e:
            raise TransportError(word, f"Request for \"{word}\" failed: {e}") from e
