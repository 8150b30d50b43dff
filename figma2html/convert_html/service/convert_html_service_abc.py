from abc import ABC, abstractmethod
from typing import Optional

from figma2html.src.figma_types import ConversionResult


class ConvertHtmlServiceABC(ABC):
    @abstractmethod
    def convert(
        self,
        file_key: str,
        token: str,
        node_id: Optional[str] = None,
    ) -> ConversionResult:
        """
        Figma 파일(또는 노드)을 가져와 HTML/CSS로 변환합니다.

        Args:
            file_key: Figma 파일 키 또는 Figma 디자인 URL
            token: Figma API 토큰
            node_id: 특정 노드만 변환할 경우의 노드 ID

        Returns:
            html / css 변환 결과
        """
        pass
