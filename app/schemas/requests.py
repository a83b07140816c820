"""
API 요청 스키마 정의
"""
import re
from typing import Optional
from app.core.errors import InvalidDirectiveError, ProcessingError
from config.settings import FIT_MODES, IMAGE_OPTIONS, SUPPORTED_FORMATS

# 앞쪽 정수 부분만 인식 ("80px" -> 80, "12.9" -> 12)
_LEADING_INT = re.compile(r'^\s*([+-]?\d+)')


def parse_int(value) -> Optional[int]:
    """문자열 앞부분의 정수를 파싱. 정수로 시작하지 않으면 None"""
    if value is None:
        return None
    if isinstance(value, int):
        return value
    match = _LEADING_INT.match(str(value))
    return int(match.group(1)) if match else None


def is_true(value) -> bool:
    """정확히 문자열 "true" 인 경우에만 참"""
    return value == 'true'


def _is_blank(value) -> bool:
    return value is None or (isinstance(value, str) and value.strip() == '')


class TransformDirective:
    """이미지 최적화 요청 옵션"""

    def __init__(
        self,
        format: str = IMAGE_OPTIONS['DEFAULT_FORMAT'],
        quality: int = IMAGE_OPTIONS['DEFAULT_QUALITY'],
        width: Optional[int] = None,
        height: Optional[int] = None,
        fit: str = IMAGE_OPTIONS['DEFAULT_FIT'],
        rotate: int = 0,
        grayscale: bool = False,
        flip: bool = False,
        flop: bool = False,
    ):
        if format not in SUPPORTED_FORMATS:
            raise InvalidDirectiveError('format', format)
        if fit not in FIT_MODES:
            raise InvalidDirectiveError('fit', fit)

        self.format = format
        self.quality = min(max(quality, IMAGE_OPTIONS['MIN_QUALITY']), IMAGE_OPTIONS['MAX_QUALITY'])
        self.width = width
        self.height = height
        self.fit = fit
        self.rotate = rotate
        self.grayscale = grayscale
        self.flip = flip
        self.flop = flop

    @property
    def media_type(self) -> str:
        return f"image/{self.format}"

    @property
    def wants_resize(self) -> bool:
        return bool(self.width or self.height)

    @classmethod
    def from_form(
        cls,
        format=None,
        quality=None,
        width=None,
        height=None,
        fit=None,
        rotate=None,
        grayscale=None,
        flip=None,
        flop=None,
    ) -> 'TransformDirective':
        """
        multipart 폼 문자열로부터 옵션 생성

        - 비어있는 필드는 기본값 사용, format/fit 은 앞뒤 공백 제거
        - width/height 가 숫자가 아니거나 0 이면 리사이즈 하지 않음
        - quality/rotate 가 숫자가 아니거나 width/height 가 음수이면 ProcessingError
        - 지원하지 않는 format/fit 은 InvalidDirectiveError
        """
        output_format = IMAGE_OPTIONS['DEFAULT_FORMAT'] if _is_blank(format) else format.strip()
        fit_mode = IMAGE_OPTIONS['DEFAULT_FIT'] if _is_blank(fit) else fit.strip()

        if _is_blank(quality):
            q = IMAGE_OPTIONS['DEFAULT_QUALITY']
        else:
            q = parse_int(quality)
            if q is None:
                raise ProcessingError(reason=f"quality is not a number: {quality!r}")

        w = cls._parse_dimension('width', width)
        h = cls._parse_dimension('height', height)

        angle = 0
        if not _is_blank(rotate):
            angle = parse_int(rotate)
            if angle is None:
                raise ProcessingError(reason=f"rotate is not a number: {rotate!r}")

        return cls(
            format=output_format,
            quality=q,
            width=w,
            height=h,
            fit=fit_mode,
            rotate=angle,
            grayscale=is_true(grayscale),
            flip=is_true(flip),
            flop=is_true(flop),
        )

    @staticmethod
    def _parse_dimension(name, value) -> Optional[int]:
        if _is_blank(value):
            return None
        size = parse_int(value)
        if not size:
            return None
        if size < 0:
            raise ProcessingError(reason=f"{name} must be positive: {size}")
        return size

    def __repr__(self):
        return (
            f"TransformDirective(format={self.format}, quality={self.quality}, "
            f"width={self.width}, height={self.height}, fit={self.fit}, rotate={self.rotate}, "
            f"grayscale={self.grayscale}, flip={self.flip}, flop={self.flop})"
        )
