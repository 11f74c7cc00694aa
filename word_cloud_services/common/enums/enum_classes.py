from enum import Enum


class RequestStatus(str, Enum):
    """ Maps common HTTP status codes to their corresponding meanings
    """
    SUCCESS = 'success'
    TIMEOUT = 'timeout'
    CLIENT_ERROR = 'client_error'
    SERVER_ERROR = 'server_error'
    BAD_REQUEST = 'bad_request'
    UNAUTHORIZED = 'unauthorized'
    FORBIDDEN = 'forbidden'
    NOT_FOUND = 'not_found'
    INTERNAL_SERVER_ERROR = 'internal_server_error'
    TOO_MANY_REQUESTS = 'too_many_requests'
    REDIRECTED = 'redirected'
    UNKNOWN = 'unknown'

    @classmethod
    def from_status_code(cls, status_code: int):
        """ Convert a status code to its string representation """
        if 200 <= status_code <= 206:
            return cls.SUCCESS
        elif 300 <= status_code <= 309:
            return cls.REDIRECTED
        elif status_code == 400:
            return cls.BAD_REQUEST
        elif status_code == 401:
            return cls.UNAUTHORIZED
        elif status_code == 403:
            return cls.FORBIDDEN
        elif status_code == 404:
            return cls.NOT_FOUND
        elif status_code == 429:
            return cls.TOO_MANY_REQUESTS
        elif 405 <= status_code <= 499:
            return cls.CLIENT_ERROR
        elif status_code == 500:
            return cls.INTERNAL_SERVER_ERROR
        elif 501 <= status_code <= 599:
            return cls.SERVER_ERROR
        return cls.UNKNOWN


class CloudKind(str, Enum):
    """ Word cloud variants

    One of:
        UNCATEGORIZED,
        SYNONYM,
        FREQUENCY
    """
    UNCATEGORIZED: str = 'uncategorized'
    SYNONYM: str = 'synonym'
    FREQUENCY: str = 'frequency'


class RelationshipType(str, Enum):
    """ Relationship types tagged on related words by the synonym service """
    SYNONYM: str = 'synonym'
    ANTONYM: str = 'antonym'
    HYPERNYM: str = 'hypernym'
    SAME_CONTEXT: str = 'same-context'
