"""Link header parsing for paginated responses.

Pagination headers are defined at
https://canvas.instructure.com/doc/api/file.pagination.html and look like::

    <https://host/api/v1/courses?page=2&per_page=10>; rel="next",
    <https://host/api/v1/courses?page=1&per_page=10>; rel="first"
"""

import re
from typing import Dict

from ..errors import ParseError

# Split only at commas that start a new <...> entry so commas inside URLs survive.
_ENTRY_SEPARATOR = re.compile(r",\s*(?=<)")
_REL_PARAM = re.compile(r'^rel\s*=\s*(?:"([^"]*)"|([^\s";]+))$', re.IGNORECASE)


def _parse_entry(entry: str) -> tuple[str, list[str]]:
    """Parse a single ``<url>; rel="name"`` entry into its URL and relation names."""
    entry = entry.strip()
    close_pos = entry.find(">")
    if not entry.startswith("<") or close_pos == -1:
        raise ParseError(f"Link header entry is missing angle brackets: {entry!r}")

    url = entry[1:close_pos].strip()
    params = entry[close_pos + 1 :].split(";")
    if params[0].strip():
        raise ParseError(f"Unexpected text after URL in link header entry: {entry!r}")

    for param in params[1:]:
        match = _REL_PARAM.match(param.strip())
        if match:
            rel_value = match.group(1) if match.group(1) is not None else match.group(2)
            names = rel_value.split()
            if names:
                return url, names

    raise ParseError(f"Link header entry has no rel attribute: {entry!r}")


def parse_link_header(header_value: str) -> Dict[str, str]:
    """Parse a Link header value into a relation name to URL mapping.

    When the same relation appears more than once the last entry wins.

    Args:
        header_value: Raw ``link`` header value

    Returns:
        Dictionary mapping relation names (``next``, ``prev``, ``first``,
        ``last``, ``current``) to URLs

    Raises:
        ParseError: If an entry is not of the form ``<URL>; rel="name"``

    Examples:
        >>> parse_link_header('<https://x/a?page=2>; rel="next", <https://x/a?page=1>; rel="prev"')
        {'next': 'https://x/a?page=2', 'prev': 'https://x/a?page=1'}
        >>> parse_link_header("")
        {}
    """
    links: Dict[str, str] = {}
    if not header_value or not header_value.strip():
        return links

    for entry in _ENTRY_SEPARATOR.split(header_value.strip()):
        url, names = _parse_entry(entry)
        for name in names:
            links[name] = url

    return links
