import logging
from typing import Any, Dict, Optional

from figma2html.convert_html.service.convert_html_service_abc import (
    ConvertHtmlServiceABC,
)
from figma2html.core.exception.error_codes import ErrorCode
from figma2html.core.exception.exceptions import ServiceException
from figma2html.src.figma_api_client import FigmaApiClient
from figma2html.src.figma_api_mapper import figma_api_to_domain
from figma2html.src.figma_types import ConversionResult
from figma2html.src.figma_url_parser import parse_figma_url
from figma2html.src.html_generator import HtmlGenerator


class ConvertHtmlService(ConvertHtmlServiceABC):
    def __init__(self, html_generator: Optional[HtmlGenerator] = None):
        self.html_generator = html_generator or HtmlGenerator()

    def convert(
        self,
        file_key: str,
        token: str,
        node_id: Optional[str] = None,
    ) -> ConversionResult:
        parsed_key, url_node_id = parse_figma_url(file_key)
        if not parsed_key:
            raise ServiceException(ErrorCode.INVALID_FIGMA_URL)
        node_id = node_id or url_node_id

        api_client = FigmaApiClient(token)
        raw_document = self._fetch_figma_data(api_client, parsed_key, node_id)

        root_node = figma_api_to_domain(raw_document)
        result = self.html_generator.convert(root_node)

        logging.info(
            f"[CONVERT] file={parsed_key} node={node_id or '-'} "
            f"html={len(result.html)}B css={len(result.css)}B"
        )
        return result

    def _fetch_figma_data(
        self, api_client: FigmaApiClient, file_key: str, node_id: Optional[str]
    ) -> Optional[Dict[str, Any]]:
        if not node_id:
            return api_client.get_file(file_key)

        nodes = api_client.get_file_nodes(file_key, [node_id])
        if node_id not in nodes:
            raise ServiceException(
                ErrorCode.FIGMA_NOT_FOUND, f"Node {node_id} not found in {file_key}"
            )
        return nodes[node_id]


# FastAPI Depends 용 DI 팩토리
def get_convert_html_service() -> ConvertHtmlService:
    return ConvertHtmlService()
