"""
서비스 예외 정의 및 에러 응답 생성
"""
from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse, PlainTextResponse
from app.utils.logger import setup_logger

logger = setup_logger(__name__)


class ImageToolError(Exception):
    """클라이언트에 그대로 노출해도 안전한 메시지를 가진 기본 예외"""

    status_code = 500
    kind = 'processing_error'
    default_message = 'Internal server error.'

    def __init__(self, message: str = None, reason: str = None):
        self.message = message or self.default_message
        # 서버 로그 전용 상세 원인
        self.reason = reason
        super().__init__(self.message)


class MissingUploadError(ImageToolError):
    """이미지 파일이 업로드되지 않음"""
    status_code = 400
    kind = 'missing_input'
    default_message = 'No image uploaded.'


class InvalidDirectiveError(ImageToolError):
    """지원하지 않는 변환 옵션"""
    status_code = 400
    kind = 'invalid_directive'

    def __init__(self, field: str, value):
        self.field = field
        self.value = value
        super().__init__(f"Invalid {field}: {value}")


class InvalidRequestError(ImageToolError):
    """폼 데이터 형식 오류"""
    status_code = 400
    kind = 'invalid_request'
    default_message = 'Invalid request.'


class UploadTooLargeError(ImageToolError):
    status_code = 413
    kind = 'upload_too_large'
    default_message = 'Image exceeds the upload size limit.'


class ProcessingError(ImageToolError):
    """디코딩/인코딩/배경 제거 실패. 원인은 서버 로그에만 기록"""
    status_code = 500
    kind = 'processing_error'
    default_message = 'Error processing image.'


class ProcessingTimeoutError(ImageToolError):
    status_code = 504
    kind = 'timeout'
    default_message = 'Image processing timed out.'


def wants_json(request: Request) -> bool:
    """Accept 헤더가 JSON 을 요청하는지 확인"""
    return 'application/json' in request.headers.get('accept', '')


async def image_tool_error_handler(request: Request, exc: ImageToolError):
    """예외를 평문(기본) 또는 JSON 에러 응답으로 변환"""
    if exc.status_code >= 500:
        cause = exc.reason or exc.__cause__ or exc.message
        logger.error(f"{request.method} {request.url.path} 처리 실패 ({exc.kind}): {cause}")
    else:
        logger.debug(f"{request.method} {request.url.path} -> {exc.status_code} ({exc.kind})")

    if wants_json(request):
        return JSONResponse(
            status_code=exc.status_code,
            content={"error": exc.kind, "detail": exc.message},
        )
    return PlainTextResponse(exc.message, status_code=exc.status_code)


async def validation_error_handler(request: Request, exc: RequestValidationError):
    """FastAPI 검증 오류도 동일한 평문/JSON 에러 형식으로 변환"""
    errors = exc.errors()
    if any('image' in error.get('loc', ()) for error in errors):
        error = MissingUploadError()
    else:
        error = InvalidRequestError()
    logger.debug(f"요청 검증 실패: {errors}")
    return await image_tool_error_handler(request, error)
