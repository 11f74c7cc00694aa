from .request_client import BaseRequestClient, RequestClient
from .exceptions import (
    EnrichmentError, ServiceUnavailable, TransportError, MalformedResponse,
    EmptyInput, DegenerateRange
)
