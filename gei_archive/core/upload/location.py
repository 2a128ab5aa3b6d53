"""Helpers for the continuation URLs issued by the storage service."""
from typing import Mapping, Optional, Sequence, Union
from urllib.parse import urljoin, urlsplit, parse_qs

from ..exceptions import MissingLocationHeaderError, MissingSessionGuidError

HeaderValues = Union[str, Sequence[str]]


def find_location(headers: Optional[Mapping[str, HeaderValues]]) -> Optional[str]:
    """
    Find the Location header value.
    
    The first header named ``Location`` (any case) wins; its first value
    is returned.
    
    Args:
        headers: Response headers, single- or multi-valued
        
    Returns:
        The header value, or None if absent or empty
    """
    if not headers:
        return None
    
    for name, values in headers.items():
        if name.lower() != 'location':
            continue
        if isinstance(values, str):
            return values or None
        for value in values:
            return value or None
        return None
    
    return None


def get_next_url(headers: Optional[Mapping[str, HeaderValues]], base_url: str) -> str:
    """
    Resolve the Location header against ``base_url``.
    
    Raises:
        MissingLocationHeaderError: If there is no usable Location header
    """
    location = find_location(headers)
    if not location:
        raise MissingLocationHeaderError()
    return urljoin(base_url, location)


def extract_session_guid(url: str) -> str:
    """
    Get the ``guid`` query parameter from a part upload URL.
    
    Raises:
        MissingSessionGuidError: If the URL has no guid
    """
    guids = parse_qs(urlsplit(url).query).get('guid')
    if not guids or not guids[0]:
        raise MissingSessionGuidError(url)
    return guids[0]
