"""
General utility functions shared by the resolvers.
Ported from yt-dlp's utils.py helpers.
"""

import html
import re
from datetime import date, datetime
from typing import Any
from urllib.parse import parse_qsl, urlencode, urlparse


def clean_html(raw_html: str) -> str:
    """Remove HTML tags and decode entities. Line breaks become newlines."""
    text = re.sub(r"<br\s*/?>", "\n", raw_html, flags=re.IGNORECASE)
    clean = re.sub(r"<[^>]+>", "", text)
    return html.unescape(clean).strip()


def traverse_obj(obj: Any, *paths: Any, default: Any = None) -> Any:
    """
    Traverse nested dicts/lists safely.
    Ported from yt-dlp's traverse_obj utility.

    Usage:
        traverse_obj(data, 'key1')
        traverse_obj(data, ('key1', 'key2'), ('alt_key1', 'alt_key2'))
    """
    for path in paths:
        if isinstance(path, (list, tuple)):
            result = obj
            for key in path:
                if result is None:
                    break
                if isinstance(result, dict):
                    result = result.get(key)
                elif isinstance(result, (list, tuple)):
                    try:
                        result = result[key]
                    except (IndexError, TypeError):
                        result = None
                else:
                    result = None
            if result is not None:
                return result
        else:
            if isinstance(obj, dict) and path in obj:
                return obj[path]
    return default


def find_descendants(obj: Any, key: str) -> list[Any]:
    """Collect the values stored under *key* at any depth (JSONPath ``$..key``)."""
    found = []
    if isinstance(obj, dict):
        for k, v in obj.items():
            if k == key:
                found.append(v)
            found.extend(find_descendants(v, key))
    elif isinstance(obj, list):
        for item in obj:
            found.extend(find_descendants(item, key))
    return found


def int_or_none(v: Any, scale: int = 1) -> int | None:
    """Convert value to int or return None."""
    if v is None:
        return None
    try:
        return int(v) // scale
    except (ValueError, TypeError):
        return None


def float_or_none(v: Any, scale: float = 1.0) -> float | None:
    """Convert value to float or return None."""
    if v is None:
        return None
    try:
        return float(v) / scale
    except (ValueError, TypeError):
        return None


def count_or_none(v: Any) -> int | None:
    """Parse a displayed count like '1,234,567', ignoring separators."""
    if v is None:
        return None
    digits = re.sub(r"[^\d]", "", str(v))
    return int(digits) if digits else None


def date_or_none(v: Any) -> date | None:
    """Parse an ISO date (YYYY-MM-DD, optionally followed by a time) or return None."""
    if not v:
        return None
    try:
        return datetime.strptime(str(v).strip()[:10], "%Y-%m-%d").date()
    except ValueError:
        return None


def str_or_none(v: Any) -> str | None:
    """Convert value to string or return None."""
    if v is None:
        return None
    result = str(v).strip()
    return result if result else None


def split_query(query: str) -> dict[str, str]:
    """Decode a ``key=value&key=value`` string. Repeated keys keep the last value."""
    return dict(parse_qsl(query, keep_blank_values=True))


def set_query_parameter(url: str, key: str, value: str) -> str:
    """Set (or replace) a single query parameter on a URL."""
    parsed = urlparse(url)
    params = parse_qsl(parsed.query, keep_blank_values=True)
    params = [(k, v) for k, v in params if k != key]
    params.append((key, value))
    return parsed._replace(query=urlencode(params)).geturl()


def set_route_parameter(url: str, key: str, value: str) -> str:
    """Set a ``/key/value`` path segment pair, appending it when absent."""
    pattern = rf"/{re.escape(key)}/[^/]*"
    replacement = f"/{key}/{value}"
    if re.search(pattern, url):
        return re.sub(pattern, lambda _: replacement, url, count=1)
    return url.rstrip("/") + replacement


def parse_size(size: str | None) -> tuple[int, int] | None:
    """Parse a ``WIDTHxHEIGHT`` size string."""
    if not size:
        return None
    match = re.fullmatch(r"\s*(\d+)\s*x\s*(\d+)\s*", size)
    if not match:
        return None
    return int(match.group(1)), int(match.group(2))
