""" Frequency service test cases
"""
import asyncio

import aiohttp
import pytest
from word_cloud_services.common.core import (MalformedResponse,
                                             ServiceUnavailable,
                                             TransportError)
from word_cloud_services.common.enums import RequestStatus
from word_cloud_services.common.utils import throttled
from ..conftest import FakeRequestClient, FakeResponse
from ...app.rpc import FrequencyService

ENDPOINT = "https://api.datamuse.com/words"

MATCHES = {
    "cat": [{"word": "cat", "score": 9134, "tags": ["f:52.34"]}],
    "rate": [{"word": "rate", "score": 2051, "tags": ["f:171.79"]}],
    "male": [{"word": "male", "score": 12}, {"word": "males", "score": 3}],
}


def spelling_handler(url, params):
    word = params["sp"]
    if word == "offline":
        raise aiohttp.ClientConnectionError("Cannot connect to host")
    if word == "slow":
        raise asyncio.TimeoutError()
    if word == "busy":
        return FakeResponse(status=503, reason="Service Unavailable")
    if word == "odd":
        return FakeResponse(payload=[{"word": "odd"}])
    return FakeResponse(payload=MATCHES.get(word, []))


@pytest.fixture
def request_client():
    return FakeRequestClient(spelling_handler)


@pytest.fixture
def frequency_service(request_client):
    return FrequencyService(remote_service_endpoint=ENDPOINT, request_client=request_client)


@pytest.mark.asyncio
async def test_unknown_word_scores_zero(frequency_service):
    frequency_index = await frequency_service.fetch_frequencies(["cat", "zzzNotAWordzzz"])

    assert len(frequency_index) == 2
    assert frequency_index["cat"] == 9134
    assert frequency_index["zzzNotAWordzzz"] == 0


@pytest.mark.asyncio
async def test_best_match_score_is_used(frequency_service, request_client):
    frequency_index = await frequency_service.fetch_frequencies(["male"])

    assert frequency_index == {"male": 12}
    url, params = request_client.requests[0]
    assert url == ENDPOINT
    assert params == {"sp": "male", "md": "f"}


@pytest.mark.asyncio
async def test_failed_requests_keep_every_word(frequency_service):
    words = ["cat", "offline", "slow", "busy", "odd", "rate"]
    frequency_index = await frequency_service.fetch_frequencies(words)

    assert list(frequency_index) == words
    assert frequency_index == {"cat": 9134, "offline": 0, "slow": 0,
                               "busy": 0, "odd": 0, "rate": 2051}


@pytest.mark.asyncio
async def test_requests_run_concurrently_within_limit(request_client):
    frequency_service = FrequencyService(remote_service_endpoint=ENDPOINT,
                                         request_client=request_client,
                                         max_concurrency=2)
    await frequency_service.fetch_frequencies(["cat", "rate", "male", "dog", "bird"])

    assert len(request_client.requests) == 5
    assert request_client.max_in_flight == 2


@pytest.mark.asyncio
async def test_unbounded_requests_all_start_together(request_client):
    frequency_service = FrequencyService(remote_service_endpoint=ENDPOINT,
                                         request_client=request_client,
                                         max_concurrency=None)
    await frequency_service.fetch_frequencies(["cat", "rate", "male"])

    assert request_client.max_in_flight == 3


@pytest.mark.asyncio
@pytest.mark.parametrize("word, error", [
    ("offline", TransportError),
    ("slow", TransportError),
    ("busy", ServiceUnavailable),
    ("odd", MalformedResponse),
])
async def test_get_frequency_raises_typed_errors(frequency_service, word, error):
    with pytest.raises(error) as exc_info:
        await frequency_service.get_frequency(word)
    assert exc_info.value.word == word


@pytest.mark.parametrize("status_code, status", [
    (200, RequestStatus.SUCCESS),
    (301, RequestStatus.REDIRECTED),
    (404, RequestStatus.NOT_FOUND),
    (429, RequestStatus.TOO_MANY_REQUESTS),
    (503, RequestStatus.SERVER_ERROR),
    (999, RequestStatus.UNKNOWN),
])
def test_request_status_from_status_code(status_code, status):
    assert RequestStatus.from_status_code(status_code) == status


@pytest.mark.parametrize("max_concurrency", [0, -1])
def test_concurrency_limit_below_one_is_rejected(request_client, max_concurrency):
    with pytest.raises(ValueError):
        FrequencyService(remote_service_endpoint=ENDPOINT,
                         request_client=request_client,
                         max_concurrency=max_concurrency)


@pytest.mark.asyncio
async def test_throttled_rejects_zero_limit():
    with pytest.raises(ValueError):
        await throttled(0, [])
