""" Exceptions raised while enriching and scaling words
"""


class EnrichmentError(Exception):
    """ A remote word lookup failed for a single word """

    def __init__(self, word: str, message: str = ""):
        self.word = word
        super().__init__(message or f"Failed to enrich word \"{word}\"")


class ServiceUnavailable(EnrichmentError):
    """ The remote service answered with a non-success status """

    def __init__(self, word: str, status_code: int, reason: str = ""):
        self.status_code = status_code
        super().__init__(word, f"Service responded {status_code} {reason} for \"{word}\"".rstrip())


class TransportError(EnrichmentError):
    """ The request could not complete (connection error or timeout) """


class MalformedResponse(EnrichmentError):
    """ The remote service answered successfully with an unexpected body """


class EmptyInput(ValueError):
    """ An operation requiring at least one word received none """


class DegenerateRange(ValueError):
    """ All weights are equal, so no linear range can be derived """

    def __init__(self, value: float):
        self.value = value
        super().__init__(f"Cannot scale a range where min == max == {value}")
