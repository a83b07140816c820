""" 출력 포맷별 인코딩 전담 클래스 """
import io
from PIL import Image
from app.services.image_processing.image_resizer import has_alpha
from app.utils.logger import setup_logger
from config.settings import IMAGE_OPTIONS, SUPPORTED_FORMATS

logger = setup_logger(__name__)


class ImageEncoder:
    """포맷별 저장 옵션 계산 및 인코딩"""

    @staticmethod
    def save_options(output_format: str, quality: int) -> dict:
        """
        포맷별 Pillow 저장 옵션

        Args:
            output_format: jpeg / webp / png / avif / tiff / gif
            quality: 요청 품질 (1~100)

        Returns:
            dict: Image.save 에 전달할 키워드 인자
        """
        if output_format == 'jpeg':
            return {'quality': quality, 'progressive': True}
        if output_format == 'webp':
            return {'quality': quality}
        if output_format == 'png':
            compress_level = min(quality // 10, IMAGE_OPTIONS['PNG_MAX_COMPRESS_LEVEL'])
            return {'compress_level': compress_level, 'quality': quality}
        if output_format == 'avif':
            avif_quality = quality - IMAGE_OPTIONS['AVIF_QUALITY_OFFSET']
            return {'quality': avif_quality if avif_quality > 0 else 1}
        if output_format == 'tiff':
            # Pillow 은 jpeg 압축에서만 TIFF quality 를 받음
            return {'compression': 'jpeg', 'quality': quality}
        # gif 는 품질 옵션 없음
        return {}

    @staticmethod
    def prepare_mode(image: Image.Image, output_format: str) -> Image.Image:
        """포맷이 지원하는 컬러 모드로 변환"""
        mode = image.mode

        if output_format in ('jpeg', 'tiff'):
            if mode in ('L', 'RGB', 'CMYK'):
                return image
            return image.convert('L' if mode in ('LA', 'La', 'I', 'I;16') else 'RGB')

        if output_format in ('webp', 'avif'):
            if mode in ('RGB', 'RGBA'):
                return image
            return image.convert('RGBA' if has_alpha(image) else 'RGB')

        if output_format == 'png' and mode == 'CMYK':
            return image.convert('RGB')

        return image

    @staticmethod
    def encode(image: Image.Image, output_format: str, quality: int) -> bytes:
        """이미지를 요청 포맷으로 인코딩하여 바이트 반환"""
        pil_format = SUPPORTED_FORMATS[output_format]
        options = ImageEncoder.save_options(output_format, quality)
        prepared = ImageEncoder.prepare_mode(image, output_format)

        buffer = io.BytesIO()
        prepared.save(buffer, format=pil_format, **options)
        logger.debug(f"인코딩 완료: {pil_format} {options} ({buffer.tell()} bytes)")
        return buffer.getvalue()
