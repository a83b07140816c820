"""
이미지 최적화(리사이즈/회전/효과/포맷 변환) 서비스
"""
import io
from PIL import Image, ImageOps, UnidentifiedImageError
from app.core.errors import ProcessingError
from app.schemas.requests import TransformDirective
from app.services.image_processing.image_encoder import ImageEncoder
from app.services.image_processing.image_resizer import ImageResizer, has_alpha, to_workable_mode
from app.utils.logger import setup_logger

# 로거 설정
logger = setup_logger(__name__)


class ImageOptimizer:
    """이미지 최적화 서비스"""

    @staticmethod
    def optimize(data: bytes, directive: TransformDirective) -> bytes:
        """
        업로드된 이미지에 변환 옵션을 적용하고 인코딩

        처리 순서: 디코딩 -> 90도 단위 회전 -> 리사이즈 -> 임의 각도 회전 -> 흑백 -> 상하 반전 -> 좌우 반전 -> 인코딩
        90도 단위 회전은 리사이즈 전에 적용하여 width/height 가 최종 결과의 방향을 기준으로 하도록 함
        """
        image = ImageOptimizer.decode(data)
        logger.debug(f"입력 - 포맷: {image.format}, 모드: {image.mode}, 크기: {image.size}")

        try:
            right_angle = directive.rotate % 90 == 0

            # 1. 90도 단위 회전
            if directive.rotate != 0 and right_angle:
                image = ImageOptimizer.rotate(image, directive.rotate)

            # 2. 리사이즈
            if directive.wants_resize:
                image = ImageResizer.resize(image, directive.width, directive.height, directive.fit)

            # 3. 임의 각도 회전
            if directive.rotate != 0 and not right_angle:
                image = ImageOptimizer.rotate(image, directive.rotate)

            # 4. 효과
            if directive.grayscale:
                image = ImageOptimizer.grayscale(image)
            if directive.flip:
                image = ImageOps.flip(image)
            if directive.flop:
                image = ImageOps.mirror(image)

            # 5. 포맷 및 품질
            return ImageEncoder.encode(image, directive.format, directive.quality)
        except (OSError, ValueError, KeyError) as e:
            raise ProcessingError(reason=f"{type(e).__name__}: {e}") from e

    @staticmethod
    def decode(data: bytes) -> Image.Image:
        """바이트를 PIL 이미지로 디코딩 (애니메이션은 첫 프레임)"""
        try:
            image = Image.open(io.BytesIO(data))
            image.load()
        except (UnidentifiedImageError, OSError, ValueError) as e:
            raise ProcessingError(reason=f"{type(e).__name__}: {e}") from e
        return image

    @staticmethod
    def rotate(image: Image.Image, angle: int) -> Image.Image:
        """시계 방향 회전. 캔버스는 확장되고 빈 영역은 투명(알파 없으면 검정)"""
        image = to_workable_mode(image)
        # PIL 은 반시계 방향 기준
        return image.rotate(-angle, resample=Image.Resampling.BICUBIC, expand=True)

    @staticmethod
    def grayscale(image: Image.Image) -> Image.Image:
        """알파 채널은 유지한 채 흑백 변환"""
        if has_alpha(image):
            return image.convert('RGBA').convert('LA')
        return image.convert('L')
