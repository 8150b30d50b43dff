from typing import Optional

from figma2html.core.exception.error_codes import ErrorCode


class ServiceException(Exception):
    def __init__(
        self,
        error_code: ErrorCode,
        message: Optional[str] = None,
    ):
        self.error_code = error_code
        self.message = message or error_code.message
        super().__init__(self.message)

    @property
    def status_code(self) -> int:
        return self.error_code.status_code


class InvalidInputException(ServiceException):
    def __init__(self, message: Optional[str] = None):
        super().__init__(ErrorCode.INVALID_INPUT, message)


class FigmaApiException(ServiceException):
    """Figma REST API 호출 실패 (재시도 후 최종 실패 포함)"""

    def __init__(
        self,
        error_code: ErrorCode,
        message: Optional[str] = None,
        upstream_status: Optional[int] = None,
    ):
        super().__init__(error_code, message)
        self.upstream_status = upstream_status
