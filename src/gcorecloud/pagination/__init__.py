"""Link-following pagination over collection endpoints."""

from gcorecloud.pagination.page import (
    Link,
    LinkedPage,
    Page,
    PageResult,
    extract_next_url,
    parse_links,
)
from gcorecloud.pagination.pager import Pager, PagerState

__all__ = [
    "Link",
    "LinkedPage",
    "Page",
    "PageResult",
    "Pager",
    "PagerState",
    "extract_next_url",
    "parse_links",
]
