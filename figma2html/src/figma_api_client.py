"""
Figma REST API Client
Figma API와 상호작용하는 클라이언트
"""

import logging
import time
from typing import Any, Dict, List, Optional

import requests

from figma2html.core.config import get_setting
from figma2html.core.exception.error_codes import ErrorCode
from figma2html.core.exception.exceptions import FigmaApiException, ServiceException

RETRYABLE_STATUS_CODES = (429, 503)

STATUS_ERROR_CODES = {
    403: ErrorCode.FIGMA_FORBIDDEN,
    404: ErrorCode.FIGMA_NOT_FOUND,
    429: ErrorCode.FIGMA_RATE_LIMITED,
}


class FigmaApiClient:
    """Figma REST API 클라이언트"""

    def __init__(
        self,
        api_token: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        max_retries: Optional[int] = None,
        retry_base_delay: Optional[float] = None,
    ):
        settings = get_setting()
        self.api_token = api_token or settings.FIGMA_API_TOKEN
        if not self.api_token:
            raise ServiceException(ErrorCode.MISSING_TOKEN)

        self.base_url = base_url or settings.FIGMA_API_BASE_URL
        self.timeout = timeout if timeout is not None else settings.FIGMA_API_TIMEOUT
        self.max_retries = (
            max_retries if max_retries is not None else settings.FIGMA_MAX_RETRIES
        )
        self.retry_base_delay = (
            retry_base_delay
            if retry_base_delay is not None
            else settings.FIGMA_RETRY_BASE_DELAY
        )
        self.headers = {
            "X-Figma-Token": self.api_token,
            "Content-Type": "application/json",
        }

    def get_file(self, file_key: str) -> Optional[Dict[str, Any]]:
        """파일 전체를 가져와 document 루트 노드를 반환"""
        data = self._request(f"{self.base_url}/files/{file_key}")
        return data.get("document")

    def get_file_nodes(self, file_key: str, node_ids: List[str]) -> Dict[str, Any]:
        """지정한 노드들의 document를 node id 기준으로 반환"""
        data = self._request(
            f"{self.base_url}/files/{file_key}/nodes",
            params={"ids": ",".join(node_ids)},
        )
        nodes = {}
        for node_id, node_data in (data.get("nodes") or {}).items():
            if node_data and node_data.get("document"):
                nodes[node_id] = node_data["document"]
        return nodes

    def _request(
        self, url: str, params: Optional[Dict[str, str]] = None
    ) -> Dict[str, Any]:
        attempt = 0
        while True:
            try:
                response = requests.get(
                    url, headers=self.headers, params=params, timeout=self.timeout
                )
                response.raise_for_status()
                return response.json()
            except requests.RequestException as e:
                status = e.response.status_code if e.response is not None else None
                retryable = status is None or status in RETRYABLE_STATUS_CODES

                if retryable and attempt < self.max_retries:
                    delay = self.retry_base_delay * (2**attempt)
                    logging.warning(
                        f"[FIGMA API] Request failed (status={status}), "
                        f"retrying in {delay}s ({attempt + 1}/{self.max_retries})"
                    )
                    time.sleep(delay)
                    attempt += 1
                    continue

                logging.error(f"[FIGMA API] Request to {url} failed: {e}")
                raise FigmaApiException(
                    STATUS_ERROR_CODES.get(status, ErrorCode.FIGMA_API_ERROR),
                    _error_message(e.response),
                    upstream_status=status,
                ) from e


def _error_message(response: Optional[requests.Response]) -> str:
    default = ErrorCode.FIGMA_API_ERROR.message
    if response is None:
        return default
    try:
        return response.json().get("err") or default
    except ValueError:
        return default
