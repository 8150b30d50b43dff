"""
Figma URL Parser
Parse Figma design URLs to extract file key and node ID
"""

import logging
import re
from typing import Optional, Tuple
from urllib.parse import parse_qs, unquote, urlparse

_FILE_KEY_PATTERN = re.compile(r"/(?:file|design)/([a-zA-Z0-9]+)")
_BARE_KEY_PATTERN = re.compile(r"^[a-zA-Z0-9]+$")


def parse_figma_url(url: str) -> Tuple[Optional[str], Optional[str]]:
    """
    Parse a Figma design URL and extract the file key and node id (if present).

    A bare file key is accepted as-is.

    Returns:
        (file_key or None, node_id or None)
    """
    url = unquote(url.strip())

    if _BARE_KEY_PATTERN.match(url):
        return url, None

    match = _FILE_KEY_PATTERN.search(url)
    file_key = match.group(1) if match else None

    node_id = None
    parsed = urlparse(url)
    # 쿼리에서 역슬래시 제거
    query_str = parsed.query.replace("\\", "")
    logging.debug(f"Query string: {query_str}")
    if query_str:
        qs = parse_qs(query_str)
        if "node-id" in qs:
            node_id = qs["node-id"][0].replace("-", ":")
        elif "id" in qs:
            node_id = qs["id"][0].replace("-", ":")
    if not node_id and parsed.fragment:
        frag = parse_qs(parsed.fragment)
        if "node-id" in frag:
            node_id = frag["node-id"][0].replace("-", ":")

    return file_key, node_id
