from typing import Generic, Optional, TypeVar

from pydantic import BaseModel

DataT = TypeVar('DataT')


class Response(BaseModel, Generic[DataT]):
    """ A generic response model

    Usage:
        print(Response[int](data=1, message='ok', statusCode=200, status='success'))
        #> data=1 message='ok' statusCode=200 status='success'
    """
    data: Optional[DataT] = None
    message: str = ""
    statusCode: int = 200
    status: str = "success"
