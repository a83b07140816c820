""" 이미지 크기 조정 전담 클래스 """
from typing import Optional
from PIL import Image, ImageOps
from app.utils.logger import setup_logger

# 로거 설정
logger = setup_logger(__name__)

RESAMPLE = Image.Resampling.LANCZOS

# 리샘플링 시 품질 저하가 있는 모드 (팔레트, 1비트)
_PALETTE_MODES = ('1', 'P', 'PA')


def has_alpha(image: Image.Image) -> bool:
    """알파 채널(또는 투명 팔레트) 보유 여부"""
    return image.mode in ('RGBA', 'RGBa', 'LA', 'La', 'PA') or 'transparency' in image.info


def to_workable_mode(image: Image.Image) -> Image.Image:
    """팔레트 이미지는 LANCZOS/BICUBIC 처리를 위해 RGB(A)로 변환"""
    if image.mode in _PALETTE_MODES:
        return image.convert('RGBA' if has_alpha(image) else 'RGB')
    return image


class ImageResizer:
    """fit 모드별 리사이즈 (확대 금지)"""

    @staticmethod
    def resize(
        image: Image.Image,
        width: Optional[int],
        height: Optional[int],
        fit: str = 'inside',
    ) -> Image.Image:
        """
        요청한 박스 크기와 fit 모드에 맞게 리사이즈

        Args:
            image: 원본 이미지
            width: 목표 너비 (없으면 None)
            height: 목표 높이 (없으면 None)
            fit: cover / contain / fill / inside / outside

        Returns:
            Image.Image: 리사이즈된 이미지 (원본보다 커지지 않음)
        """
        if not width and not height:
            return image

        image = to_workable_mode(image)
        src_w, src_h = image.size

        # 한쪽 크기만 주어지면 모든 fit 모드가 비율 유지 축소와 같음
        if not width or not height:
            scale = width / src_w if width else height / src_h
            result = ImageResizer._scale(image, scale)
        elif fit == 'fill':
            box = (min(width, src_w), min(height, src_h))
            result = image.resize(box, RESAMPLE) if box != image.size else image
        elif fit == 'cover':
            box = (min(width, src_w), min(height, src_h))
            result = ImageOps.fit(image, box, method=RESAMPLE) if box != image.size else image
        elif fit == 'contain':
            result = ImageResizer._contain(image, (min(width, src_w), min(height, src_h)))
        elif fit == 'outside':
            scale = max(width / src_w, height / src_h)
            result = ImageResizer._scale(image, scale)
        else:
            scale = min(width / src_w, height / src_h)
            result = ImageResizer._scale(image, scale)

        logger.debug(f"이미지 리사이즈({fit}): {image.size} -> {result.size}")
        return result

    @staticmethod
    def _scale(image: Image.Image, scale: float) -> Image.Image:
        """비율 유지 축소. scale 이 1 이상이면 원본 그대로 반환"""
        if scale >= 1:
            return image
        new_size = (
            max(1, round(image.size[0] * scale)),
            max(1, round(image.size[1] * scale)),
        )
        return image.resize(new_size, RESAMPLE)

    @staticmethod
    def _contain(image: Image.Image, box: tuple) -> Image.Image:
        """박스 안에 맞춘 뒤 남는 영역을 투명(또는 검정)으로 채움"""
        if box == image.size:
            return image

        if has_alpha(image) and image.mode != 'RGBA':
            image = image.convert('RGBA')
        elif image.mode not in ('RGB', 'RGBA', 'L'):
            image = image.convert('RGB')

        if image.mode == 'RGBA':
            color = (0, 0, 0, 0)
        elif image.mode == 'L':
            color = 0
        else:
            color = (0, 0, 0)
        return ImageOps.pad(image, box, method=RESAMPLE, color=color)
