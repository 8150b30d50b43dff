from fastapi import APIRouter, Depends
from fastapi.concurrency import run_in_threadpool

from figma2html.convert_html.controller.dto.convert_html_dto import (
    FigmaConvertRequestDTO,
    FigmaConvertResponseDTO,
)
from figma2html.convert_html.service.convert_html_service import (
    ConvertHtmlService,
    get_convert_html_service,
)

router = APIRouter(prefix="/figma", tags=["figma"])


@router.post("/convert", response_model=FigmaConvertResponseDTO)
async def convert(
    body: FigmaConvertRequestDTO,
    service: ConvertHtmlService = Depends(get_convert_html_service),
) -> FigmaConvertResponseDTO:
    """Figma 파일을 가져와 HTML/CSS로 변환"""
    result = await run_in_threadpool(
        service.convert, body.file_key, body.token, body.node_id
    )
    return FigmaConvertResponseDTO(html=result.html, css=result.css)
