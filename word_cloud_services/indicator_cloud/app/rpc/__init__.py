from .base import RESTfulRPCService
from .synonym_service import SynonymService
from .frequency_service import FrequencyService
