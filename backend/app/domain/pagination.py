"""
Pagination bookkeeping for list screens

The backend paginates; the console only tracks which page is shown, what
query produced it, and how many pages exist. List responses come in
several shapes depending on the resource, extract_pagination reads all
of them.
"""
import math
from dataclasses import dataclass, field
from typing import Any, Dict, List, Tuple, Union

ELLIPSIS = "..."


@dataclass
class PageState:
    """State of one paginated, searchable list"""

    current_page: int = 1
    total_pages: int = 1
    limit: int = 10
    search: str = ""
    filters: Dict[str, Any] = field(default_factory=dict)

    def query_params(self) -> Dict[str, Any]:
        params = {"page": self.current_page, "limit": self.limit, "search": self.search}
        params.update(self.filters)
        return params

    def set_search(self, term: str) -> None:
        """New search text starts again from the first page"""
        self.search = term or ""
        self.current_page = 1

    def set_filter(self, name: str, value: Any) -> None:
        self.filters[name] = value
        self.current_page = 1

    def go_to(self, page: int) -> bool:
        """Move to a page; out-of-range pages and the current page are ignored"""
        if 1 <= page <= self.total_pages and page != self.current_page:
            self.current_page = page
            return True
        return False

    def next(self) -> None:
        self.current_page = min(self.current_page + 1, self.total_pages)

    def previous(self) -> None:
        self.current_page = max(self.current_page - 1, 1)

    @property
    def has_next(self) -> bool:
        return self.current_page < self.total_pages

    @property
    def has_previous(self) -> bool:
        return self.current_page > 1

    def update_total(self, total_pages: int) -> None:
        self.total_pages = max(int(total_pages or 1), 1)

    def visible_pages(self, max_visible: int = 5) -> List[Union[int, str]]:
        """
        Page links to render

        All pages when they fit; otherwise a window starting two pages
        before the current one, followed by "..." when more pages remain.
        """
        if self.total_pages <= max_visible:
            return list(range(1, self.total_pages + 1))

        start = max(1, self.current_page - 2)
        end = min(self.total_pages, start + max_visible - 1)
        pages: List[Union[int, str]] = list(range(start, end + 1))
        if end < self.total_pages:
            pages.append(ELLIPSIS)
        return pages

    def to_dict(self, max_visible: int = 5) -> Dict[str, Any]:
        return {
            "current_page": self.current_page,
            "total_pages": self.total_pages,
            "limit": self.limit,
            "has_next": self.has_next,
            "has_previous": self.has_previous,
            "visible_pages": self.visible_pages(max_visible),
        }


def _get(mapping: Any, *path: str) -> Any:
    current = mapping
    for key in path:
        if not isinstance(current, dict):
            return None
        current = current.get(key)
    return current


def extract_pagination(response: Any, list_key: str, limit: int = 10) -> Tuple[List[Any], int]:
    """
    Read (items, total_pages) from a list response

    Shapes seen on the backend:
        {"<key>": [...], "totalPages": n}
        {"<key>": [...], "pagination": {"totalPages": n}}
        {"data": {"<key>": [...], "pagination": {"totalPages": n}}}
        {"data": {"<key>": [...], "totalPages": n}}
        {"roles": [...] | "data": [...], "total": n}

    Missing totals fall back to ceil(total / limit), then to 1.
    """
    if isinstance(response, list):
        return response, 1

    data = _get(response, "data")

    items = _get(response, list_key)
    if items is None and isinstance(data, dict):
        items = data.get(list_key)
    if items is None and isinstance(data, list):
        items = data
    if not isinstance(items, list):
        items = []

    total_pages = (
        _get(response, "totalPages")
        or _get(response, "pagination", "totalPages")
        or _get(data, "pagination", "totalPages")
        or _get(data, "totalPages")
    )

    if not total_pages:
        total = (
            _get(response, "total")
            or _get(response, "pagination", "total")
            or _get(data, "pagination", "total")
            or _get(data, "total")
        )
        if total and limit:
            total_pages = math.ceil(int(total) / limit)

    return items, max(int(total_pages or 1), 1)
