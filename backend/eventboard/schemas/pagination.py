"""Generic paginated response envelope."""
from typing import Generic, Optional, TypeVar
from pydantic import BaseModel

T = TypeVar("T")


class Paginated(BaseModel, Generic[T]):
    items: list[T]
    current_page: int
    limit: int
    total: Optional[int] = None
    total_pages: Optional[int] = None

    model_config = {"from_attributes": True}
