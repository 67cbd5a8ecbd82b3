"""
Base class shared by the resolvers.
Ported from yt-dlp's InfoExtractor helper patterns.
"""

import json
import logging
import re
from typing import Any

from ..core.http_client import HTTPClient
from ..exceptions import ParseError

logger = logging.getLogger(__name__)


class BaseResolver:
    """
    Common plumbing for resolvers: page download plus regex and embedded
    JSON search over the downloaded text.
    """

    def __init__(self, http: HTTPClient):
        self.http = http

    async def _download_webpage(self, url: str, **kwargs) -> str:
        """Download a webpage and return the text."""
        return await self.http.get_text(url, **kwargs)

    def _search_regex(
        self,
        pattern: str,
        text: str,
        name: str = "value",
        default: Any = None,
        group: int | str = 1,
        flags: int = 0,
    ) -> Any:
        """Search for a regex pattern in text. Returns default if not found."""
        match = re.search(pattern, text, flags)
        if match:
            try:
                return match.group(group)
            except (IndexError, re.error):
                return default
        if default is not None:
            return default
        raise ParseError(name)

    def _search_json(
        self,
        start_pattern: str,
        text: str,
        name: str = "JSON",
        default: Any = None,
    ) -> Any:
        """Search for a JSON object/array following a ``key:`` or ``var =`` pattern in text."""
        match = re.search(rf"{start_pattern}\s*[=:]\s*", text)
        if not match or match.end() >= len(text) or text[match.end()] not in ("{", "["):
            if default is not None:
                return default
            raise ParseError(name)

        start = match.end()
        bracket = text[start]
        end_bracket = "}" if bracket == "{" else "]"
        depth = 0
        in_string = False
        escape = False

        for i in range(start, len(text)):
            c = text[i]
            if escape:
                escape = False
                continue
            if c == "\\":
                escape = True
                continue
            if c == '"':
                in_string = not in_string
                continue
            if in_string:
                continue
            if c == bracket:
                depth += 1
            elif c == end_bracket:
                depth -= 1
                if depth == 0:
                    try:
                        return json.loads(text[start : i + 1])
                    except json.JSONDecodeError:
                        logger.debug(f"Invalid JSON for {name}")
                        break

        if default is not None:
            return default
        raise ParseError(name)
