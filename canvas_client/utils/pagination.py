"""Lazy iteration over paginated API responses.

List endpoints return one page of results along with a ``link`` header naming
the next page. PaginatedSequence buffers every page it has seen and fetches the
next one only when iteration runs past the buffered items.
"""

import logging
from typing import TYPE_CHECKING, Any, Iterator, List, Optional

import httpx

from ..errors import ParseError
from .link_header import parse_link_header

if TYPE_CHECKING:
    from .http_client import HttpClient

logger = logging.getLogger(__name__)


class PaginatedSequence:
    """Forward-only, restartable sequence over a paginated collection.

    Each call to ``iter()`` starts again from the first buffered item; pages that
    were already fetched are never requested twice. Not thread-safe: a sequence
    belongs to the caller that obtained it.

    Example:
        >>> courses = client.get("/courses?per_page=10")
        >>> for course in courses:
        ...     print(course["name"])
    """

    def __init__(
        self,
        response: httpx.Response,
        http_client: "HttpClient",
        wrapper_element: Optional[str] = None,
    ):
        """
        Initialize the sequence from the first page.

        Args:
            response: Response holding the first page and its link header
            http_client: Authenticated client used for continuation pages
            wrapper_element: Name of the JSON field holding the item list, for
                endpoints that wrap their results (e.g. 'enrollment_terms')
        """
        self._http_client = http_client
        self._wrapper_element = wrapper_element
        self._items: List[Any] = []
        self._next_url: Optional[str] = None
        self._parse_response(response)

    @property
    def buffered(self) -> tuple:
        """Items fetched so far, in server order."""
        return tuple(self._items)

    @property
    def next_url(self) -> Optional[str]:
        """URL of the next unfetched page, or None when exhausted."""
        return self._next_url

    @property
    def has_next_page(self) -> bool:
        """Whether the server announced another page."""
        return self._next_url is not None

    def fetch_next_page(self) -> int:
        """Fetch and buffer the next page.

        Returns:
            Number of items appended (0 when there is no next page)

        Raises:
            ApiError: If the page request fails
            ParseError: If the page cannot be decoded
        """
        if self._next_url is None:
            return 0
        response = self._http_client.send("GET", self._next_url)
        return self._parse_response(response)

    def to_list(self) -> List[Any]:
        """Fetch all remaining pages and return every item as a list."""
        return list(self)

    def __iter__(self) -> Iterator[Any]:
        position = 0
        while True:
            while position >= len(self._items):
                if self._next_url is None:
                    return
                self.fetch_next_page()
            yield self._items[position]
            position += 1

    def __repr__(self) -> str:
        return (
            f"PaginatedSequence(buffered={len(self._items)}, "
            f"has_next_page={self.has_next_page})"
        )

    def _parse_response(self, response: httpx.Response) -> int:
        """Decode a page, append its items and record the next page URL.

        State is only updated once the whole page has been decoded so a failure
        leaves previously buffered items and the pending URL intact.
        """
        contents = self._http_client.decode_json(response)
        if self._wrapper_element:
            if not isinstance(contents, dict) or self._wrapper_element not in contents:
                raise ParseError(
                    f"Response page has no '{self._wrapper_element}' element"
                )
            contents = contents[self._wrapper_element]
        if not isinstance(contents, list):
            raise ParseError(
                f"Expected a list of items, got {type(contents).__name__}"
            )

        links = parse_link_header(response.headers.get("link", ""))

        self._items.extend(contents)
        self._next_url = links.get("next")
        logger.debug(
            "Buffered %d items (next page: %s)", len(contents), self._next_url or "none"
        )
        return len(contents)
