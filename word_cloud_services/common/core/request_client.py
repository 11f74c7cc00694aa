from abc import ABC, abstractmethod
from aiohttp import ClientSession, ClientTimeout
from typing import Any, Optional, Type, TypeVar

ResponseContext = TypeVar("ResponseContext")
TracebackType = TypeVar("TracebackType")


class BaseRequestClient(ABC):
    """ Base class all request client classes
    """

    @abstractmethod
    def get(self, url: str, params: dict = {}) -> Any:
        return NotImplemented


class RequestClient(BaseRequestClient):
    """ Handles HTTP Request and Connection Pooling

    Every request is bounded by `request_timeout` seconds.
    """

    def __init__(self,
                 headers: dict = {},
                 cookies: dict = {},
                 request_timeout: Optional[float] = 10,
                 client_class: Type[ClientSession] = ClientSession):
        self._client = client_class(headers=headers,
                                    cookies=cookies,
                                    timeout=ClientTimeout(total=request_timeout))

    def get(self, url: str, params: dict = {}) -> ResponseContext:
        return self._client.get(url=url, params=params)

    async def __aenter__(self) -> "RequestClient":
        return self

    async def __aexit__(
        self,
        exc_type: Optional[Type[BaseException]],
        exc_val: Optional[BaseException],
        exc_tb: Optional[TracebackType],
    ) -> None:
        await self._client.close()

    async def close(self):
        await self._client.close()
