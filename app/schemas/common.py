from typing import Union
from pydantic import BaseModel


class DeletedResponse(BaseModel):
    """Schema for delete responses"""
    deleted: Union[int, str]

