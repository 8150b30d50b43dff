"""
Figma to HTML - Python Implementation
Figma 디자인을 HTML/CSS로 변환하는 메인 CLI 인터페이스
"""

import html
import json
import os
import sys
from typing import Any, Dict, Optional, Tuple

import click
from colorama import Fore, Style, init

from figma2html.core.exception.error_codes import ErrorCode
from figma2html.core.exception.exceptions import ServiceException
from figma2html.core.log.logging import get_logging

from .figma_api_client import FigmaApiClient
from .figma_api_mapper import figma_api_to_domain
from .figma_types import ConversionResult
from .figma_url_parser import parse_figma_url
from .html_generator import HtmlGenerator
from .utils import sanitize_filename

logger = get_logging()

# 컬러 출력 초기화
init()


class FigmaToHtml:
    """Figma를 HTML/CSS로 변환하는 메인 클래스"""

    def __init__(self, api_token: Optional[str] = None):
        self.api_token = api_token
        self.html_generator = HtmlGenerator()

    def convert_from_url(self, figma_url: str, output_dir: str = "output") -> str:
        """Figma URL(또는 파일 키)을 가져와 변환 후 파일로 저장하고 출력 경로를 반환"""
        logger.info(f"{Fore.BLUE}🔄 Figma URL 파싱 중: {figma_url}{Style.RESET_ALL}")
        file_key, node_id = parse_figma_url(figma_url)
        if not file_key:
            raise click.BadParameter(
                "잘못된 Figma URL입니다. 올바른 Figma 디자인 URL을 제공해주세요."
            )

        api_client = FigmaApiClient(self.api_token)
        if node_id:
            nodes = api_client.get_file_nodes(file_key, [node_id])
            if node_id not in nodes:
                raise ServiceException(
                    ErrorCode.FIGMA_NOT_FOUND, f"Node {node_id} not found in {file_key}"
                )
            raw_node = nodes[node_id]
        else:
            raw_node = api_client.get_file(file_key)
        logger.info(f"{Fore.GREEN}✅ Figma 데이터 가져오기 성공{Style.RESET_ALL}")

        return self.convert_raw(raw_node, output_dir)

    def convert_raw(self, raw_node: Optional[Dict[str, Any]], output_dir: str) -> str:
        """REST API 형식의 노드 dict를 변환하여 파일로 저장"""
        root_node = figma_api_to_domain(raw_node)
        result = self.html_generator.convert(root_node)
        return self._save_output_files(
            result, root_node.name or "figma_design", output_dir
        )

    def _save_output_files(
        self, result: ConversionResult, node_name: str, output_dir: str
    ) -> str:
        html_path, css_path = self._output_paths(node_name, output_dir)
        os.makedirs(os.path.dirname(html_path), exist_ok=True)

        with open(html_path, "w", encoding="utf-8") as f:
            f.write(
                self._generate_complete_html(
                    result.html, os.path.basename(css_path), node_name
                )
            )
        with open(css_path, "w", encoding="utf-8") as f:
            f.write(result.css)

        logger.info(f"HTML: {html_path}")
        logger.info(f"CSS: {css_path}")
        return os.path.dirname(html_path)

    def _output_paths(self, node_name: str, output_dir: str) -> Tuple[str, str]:
        name = sanitize_filename(node_name)
        output_path = os.path.join(output_dir, name)
        return (
            os.path.join(output_path, f"{name}.html"),
            os.path.join(output_path, f"{name}.css"),
        )

    def _generate_complete_html(
        self, html_content: str, css_filename: str, title: str
    ) -> str:
        return f"""<!DOCTYPE html>
<html lang="en">
<head>
    <meta charset="UTF-8">
    <meta name="viewport" content="width=device-width, initial-scale=1.0">
    <title>{html.escape(title)}</title>
    <link rel="stylesheet" href="{html.escape(css_filename)}">
</head>
<body>
{html_content}
</body>
</html>"""


@click.group()
def cli() -> None:
    """Figma to HTML - Figma 디자인을 HTML/CSS로 변환"""
    pass


@cli.command()
@click.argument("figma_url")
@click.option("--output", "-o", default="output", help="생성된 파일의 출력 디렉토리")
@click.option(
    "--token", "-t", help="Figma API 토큰 (또는 FIGMA_API_TOKEN 환경변수 설정)"
)
def convert(figma_url: str, output: str, token: Optional[str]) -> None:
    """
    Figma 디자인을 HTML/CSS로 변환

    FIGMA_URL: Figma 디자인 URL 또는 파일 키
    """
    try:
        output_path = FigmaToHtml(token).convert_from_url(figma_url, output)
        logger.info(f"{Fore.GREEN}🎉 {output_path}에 저장되었습니다{Style.RESET_ALL}")
    except ServiceException as e:
        logger.error(f"{Fore.RED}❌ {e.message}{Style.RESET_ALL}")
        sys.exit(1)


@cli.command()
@click.argument("json_file", type=click.Path(exists=True, dir_okay=False))
@click.option("--output", "-o", default="output", help="생성된 파일의 출력 디렉토리")
def render(json_file: str, output: str) -> None:
    """
    저장된 Figma REST 응답(JSON)을 오프라인으로 변환

    JSON_FILE: files API 응답 전체 또는 단일 노드 JSON
    """
    try:
        with open(json_file, "r", encoding="utf-8") as f:
            data = json.load(f)
    except json.JSONDecodeError as e:
        logger.error(f"{Fore.RED}❌ JSON 파싱 실패: {e}{Style.RESET_ALL}")
        sys.exit(1)

    raw_node = data.get("document", data) if isinstance(data, dict) else None
    try:
        output_path = FigmaToHtml().convert_raw(raw_node, output)
        logger.info(f"{Fore.GREEN}🎉 {output_path}에 저장되었습니다{Style.RESET_ALL}")
    except ServiceException as e:
        logger.error(f"{Fore.RED}❌ {e.message}{Style.RESET_ALL}")
        sys.exit(1)


@cli.command()
@click.argument("figma_url")
def info(figma_url: str) -> None:
    """Figma 디자인 URL 정보 확인"""
    file_key, node_id = parse_figma_url(figma_url)
    if not file_key:
        logger.error(f"{Fore.RED}❌ 잘못된 Figma URL{Style.RESET_ALL}")
        logger.warning(
            f"{Fore.YELLOW}💡 예상 형식: https://www.figma.com/design/[file-key]/[name]?node-id=[node-id]{Style.RESET_ALL}"
        )
        sys.exit(1)

    click.echo(f"file_key: {file_key}")
    click.echo(f"node_id: {node_id or '-'}")
    if not node_id:
        logger.debug("특정 노드가 선택되지 않음 (전체 파일 변환)")


if __name__ == "__main__":
    cli()
