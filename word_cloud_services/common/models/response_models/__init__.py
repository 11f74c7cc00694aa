from .base import Response
