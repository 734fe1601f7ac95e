"""Offset/limit pagination over an ordered ``Select``."""
import logging
import math
from dataclasses import dataclass, field
from typing import Any, Callable, Generic, Optional, TypeVar

from sqlalchemy import Select, func, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

logger = logging.getLogger(__name__)

T = TypeVar("T")

DEFAULT_LIMIT = 3


@dataclass(frozen=True)
class PaginateOptions:
    page: int = 1
    limit: int = DEFAULT_LIMIT
    with_total: bool = False

    @property
    def current_page(self) -> int:
        # Pages below 1 are treated as page 1
        return max(1, self.page)

    @property
    def offset(self) -> int:
        return (self.current_page - 1) * self.limit


@dataclass
class PaginatedResult(Generic[T]):
    items: list[T] = field(default_factory=list)
    current_page: int = 1
    limit: int = DEFAULT_LIMIT
    total: Optional[int] = None
    total_pages: Optional[int] = None


def count_rows(db: Session, query: Select) -> int:
    """Row count of ``query`` ignoring its order, offset and limit."""
    stmt = select(func.count()).select_from(
        query.order_by(None).offset(None).limit(None).subquery()
    )
    return db.scalar(stmt) or 0


def fetch_window(
    db: Session,
    query: Select,
    options: PaginateOptions,
    transform: Optional[Callable[[Any], T]] = None,
) -> list[T]:
    """Rows ``[offset, offset + limit)`` of ``query`` in the query's own order."""
    result = db.execute(query.offset(options.offset).limit(options.limit))
    if transform is None:
        return list(result.scalars())
    return [transform(row) for row in result]


def paginate(
    db: Session,
    query: Select,
    options: PaginateOptions,
    transform: Optional[Callable[[Any], T]] = None,
    operation: str = "paginate",
) -> PaginatedResult[T]:
    """Fetch one page of ``query`` and, when requested, the total row count.

    The window fetch and the count are independent statements; neither is
    retried and any storage error is logged and re-raised, so a partial
    page is never returned.
    """
    if options.limit < 1:
        raise ValueError("limit must be a positive integer")

    try:
        items = fetch_window(db, query, options, transform)
        total = count_rows(db, query) if options.with_total else None
    except SQLAlchemyError:
        logger.exception(
            "%s failed (page=%d, limit=%d, with_total=%s)",
            operation, options.current_page, options.limit, options.with_total,
        )
        raise

    result = PaginatedResult(items=items, current_page=options.current_page, limit=options.limit)
    if total is not None:
        result.total = total
        result.total_pages = math.ceil(total / options.limit)
    logger.debug(
        "%s: page %d returned %d item(s), total=%s",
        operation, result.current_page, len(items), total,
    )
    return result
