""" 메인 라우터 - API 엔드포인트만 담당 """
import os
import asyncio
from typing import Optional, Union
from fastapi import APIRouter, UploadFile, File, Form, HTTPException
from fastapi.responses import FileResponse, Response
from starlette.datastructures import UploadFile as StarletteUploadFile

from app.core.errors import (
    ImageToolError,
    MissingUploadError,
    ProcessingError,
    ProcessingTimeoutError,
    UploadTooLargeError,
)
from app.schemas.requests import TransformDirective
from app.services.background_remover import BackgroundRemover
from app.services.image_optimizer import ImageOptimizer
from app.utils.logger import setup_logger
from config.settings import API_CONFIG, PATHS

logger = setup_logger(__name__)
router = APIRouter()

MAX_CONCURRENT = API_CONFIG['MAX_CONCURRENT_REQUESTS']
semaphore = asyncio.Semaphore(MAX_CONCURRENT)

# === 입력 검증 함수들 ===
async def read_upload(image: Union[UploadFile, str, None]) -> bytes:
    """업로드 파일을 메모리로 읽음. 파일이 아니거나 없으면 MissingUploadError"""
    # image 가 일반 텍스트 필드로 전송된 경우에도 파일 누락으로 처리
    if not isinstance(image, StarletteUploadFile) or not image.filename:
        raise MissingUploadError()

    max_bytes = API_CONFIG['MAX_UPLOAD_BYTES']
    contents = await image.read(max_bytes + 1) if max_bytes else await image.read()
    if max_bytes and len(contents) > max_bytes:
        raise UploadTooLargeError()

    logger.debug(f"업로드 수신: {image.filename} ({image.content_type}, {len(contents)} bytes)")
    return contents

# === 실행 헬퍼 ===
async def run_blocking(func, *args):
    """블로킹 작업을 별도 스레드에서 실행 (설정된 경우 타임아웃 적용)"""
    timeout = API_CONFIG['REQUEST_TIMEOUT']
    task = asyncio.to_thread(func, *args)
    if not timeout:
        return await task
    try:
        return await asyncio.wait_for(task, timeout=timeout)
    except asyncio.TimeoutError:
        raise ProcessingTimeoutError(reason=f"{func.__qualname__} exceeded {timeout}s")

# === API 엔드포인트들 ===
@router.get("/", include_in_schema=False)
async def index():
    """정적 메인 페이지"""
    index_path = os.path.join(PATHS['STATIC_DIR'], PATHS['INDEX_FILE'])
    if not os.path.isfile(index_path):
        raise HTTPException(status_code=404, detail="Not Found")
    return FileResponse(index_path, media_type="text/html")

@router.get("/health")
async def health_check():
    """서비스 상태 확인"""
    return {"status": "healthy", "service": "image-tool"}

@router.post("/optimize")
async def optimize_image(
    image: Union[UploadFile, str, None] = File(None),
    format: Optional[str] = Form(None),
    quality: Optional[str] = Form(None),
    width: Optional[str] = Form(None),
    height: Optional[str] = Form(None),
    fit: Optional[str] = Form(None),
    rotate: Optional[str] = Form(None),
    grayscale: Optional[str] = Form(None),
    flip: Optional[str] = Form(None),
    flop: Optional[str] = Form(None),
) -> Response:
    """
    이미지 리사이즈/회전/효과/포맷 변환
    - image: 업로드할 이미지 파일
    - format: jpeg / webp(기본) / png / avif / tiff / gif
    - quality: 1~100 (기본 80)
    - width, height: 목표 크기 (원본보다 커지지 않음)
    - fit: cover / contain / fill / inside(기본) / outside
    - rotate: 시계 방향 회전 각도
    - grayscale, flip, flop: "true" 인 경우에만 적용
    """
    contents = await read_upload(image)

    options = {
        'format': format, 'quality': quality, 'width': width, 'height': height, 'fit': fit,
        'rotate': rotate, 'grayscale': grayscale, 'flip': flip, 'flop': flop,
    }
    provided = {k: v for k, v in options.items() if v is not None}
    logger.info(f"Optimizing with options: {provided}")

    directive = TransformDirective.from_form(**options)

    try:
        result = await run_blocking(ImageOptimizer.optimize, contents, directive)
    except ImageToolError:
        raise
    except Exception as e:
        raise ProcessingError(reason=f"{type(e).__name__}: {e}") from e

    return Response(content=result, media_type=directive.media_type)

@router.post("/remove-bg")
async def remove_background(image: Union[UploadFile, str, None] = File(None)) -> Response:
    """
    이미지 배경 제거
    - image: 업로드할 이미지 파일

    반환값: 배경이 제거된 이미지 (PNG, 투명 배경)
    """
    contents = await read_upload(image)
    logger.info("Removing background at 100% quality...")

    async with semaphore:
        try:
            result = await run_blocking(BackgroundRemover.remove_background, contents)
        except ImageToolError:
            raise
        except Exception as e:
            raise ProcessingError('Error removing background.', reason=f"{type(e).__name__}: {e}") from e

    logger.info("Background removal complete.")
    return Response(content=result, media_type="image/png")
