"""
DASH (MPD) manifest parser for YouTube's ``dashmpd`` documents.

YouTube's manifests list one Representation per itag. Static streams carry a
single BaseURL with the content length embedded in it (``clen/12345``);
live and post-live streams are delivered per segment and reference their
initialization segment as ``sq/0``.
"""

import logging
import re
from xml.etree import ElementTree as ET

from ..exceptions import ParseError
from ..utils.helpers import int_or_none

logger = logging.getLogger(__name__)

_CONTENT_LENGTH_RE = re.compile(r"clen[/=](\d+)")

# Initialization references of segmented representations look like ".../sq/0"
_SEGMENTED_MARKER = "sq/"


class DashRepresentation:
    """A single Representation node of a manifest."""

    def __init__(
        self,
        itag: int,
        url: str,
        bitrate: int | None = None,
        content_length: int | None = None,
        is_audio: bool = False,
        width: int | None = None,
        height: int | None = None,
        frame_rate: int | None = None,
        is_segmented: bool = False,
    ):
        self.itag = itag
        self.url = url
        self.bitrate = bitrate
        self.content_length = content_length
        self.is_audio = is_audio
        self.width = width
        self.height = height
        self.frame_rate = frame_rate
        self.is_segmented = is_segmented

    def __repr__(self):
        kind = "audio" if self.is_audio else "video"
        return f"<DashRepresentation itag={self.itag} {kind} segmented={self.is_segmented}>"


def strip_namespaces(root: ET.Element) -> ET.Element:
    """Drop ``{namespace}`` prefixes from every tag and attribute, in place."""
    for element in root.iter():
        if isinstance(element.tag, str) and element.tag.startswith("{"):
            element.tag = element.tag.split("}", 1)[1]
        for name in [n for n in element.attrib if n.startswith("{")]:
            element.attrib[name.split("}", 1)[1]] = element.attrib.pop(name)
    return root


def parse_manifest(content: str | bytes) -> list[DashRepresentation]:
    """
    Parse a YouTube DASH manifest.

    Returns every Representation in document order, segmented ones included
    (flagged with ``is_segmented``).

    Raises:
        ParseError: the document is not valid XML or a Representation lacks
            its id or BaseURL.
    """
    if isinstance(content, str):
        content = content.encode("utf-8")
    try:
        root = strip_namespaces(ET.fromstring(content))
    except ET.ParseError as e:
        logger.warning(f"Failed to parse DASH manifest: {e}")
        raise ParseError("DASH manifest") from e

    representations = []
    for rep in root.iter("Representation"):
        itag = int_or_none(rep.get("id"))
        base_url = rep.findtext("BaseURL")
        if itag is None or not base_url:
            raise ParseError("DASH representation id or BaseURL")
        base_url = base_url.strip()

        init = next(rep.iter("Initialization"), None)
        source_url = init.get("sourceURL", "") if init is not None else ""

        clen = _CONTENT_LENGTH_RE.search(base_url)

        representations.append(
            DashRepresentation(
                itag=itag,
                url=base_url,
                bitrate=int_or_none(rep.get("bandwidth")),
                content_length=int(clen.group(1)) if clen else None,
                is_audio=rep.find("AudioChannelConfiguration") is not None,
                width=int_or_none(rep.get("width")),
                height=int_or_none(rep.get("height")),
                frame_rate=_parse_frame_rate(rep.get("frameRate")),
                is_segmented=_SEGMENTED_MARKER in source_url,
            )
        )

    return representations


def _parse_frame_rate(value: str | None) -> int | None:
    """Parse frame rate, handling fractional notation like '30000/1001'."""
    if not value:
        return None
    if "/" in value:
        num, _, den = value.partition("/")
        try:
            return round(float(num) / float(den))
        except (ValueError, ZeroDivisionError):
            return None
    try:
        return round(float(value))
    except ValueError:
        return None
