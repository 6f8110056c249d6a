"""Pagination validation schema."""

from pydantic import Field

from alramy.core.validation.base import Schema
from alramy.core.validation.fields import Integer

DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 20
MAX_PAGE_SIZE = 100


class PaginationQuery(Schema):
    """Page request. Both fields default when omitted."""

    page: Integer = Field(default=DEFAULT_PAGE, gt=0)
    page_size: Integer = Field(default=DEFAULT_PAGE_SIZE, gt=0, le=MAX_PAGE_SIZE)
