#!/usr/bin/env python
"""
출력 포맷별 인코딩 시간 및 결과 크기 비교 테스트 스크립트
"""

import sys
import os

# 모듈 경로 추가
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '../..')))

import io
import time
import argparse
import pytest
from PIL import Image, features
from app.schemas.requests import TransformDirective
from app.services.image_optimizer import ImageOptimizer
from app.utils.logger import setup_logger

# 로거 설정
logger = setup_logger(__name__)

FORMATS = ['jpeg', 'webp', 'png', 'tiff', 'gif'] + (['avif'] if features.check('avif') else [])


def load_image_bytes(image_path=None, size=(1024, 768)):
    """이미지 파일을 읽거나, 경로가 없으면 그라디언트 이미지를 생성"""
    if image_path:
        with open(image_path, 'rb') as f:
            return f.read()

    gradient = Image.linear_gradient('L')
    image = Image.merge('RGB', (gradient, gradient.transpose(Image.Transpose.ROTATE_90), gradient)).resize(size)
    buffer = io.BytesIO()
    image.save(buffer, format='PNG')
    return buffer.getvalue()


def measure_formats(data, quality=80, repeat=3):
    """포맷별 평균 인코딩 시간(초)과 결과 크기(bytes) 측정"""
    results = {}
    for output_format in FORMATS:
        directive = TransformDirective.from_form(format=output_format, quality=str(quality))

        start_time = time.time()
        for _ in range(repeat):
            output = ImageOptimizer.optimize(data, directive)
        elapsed = (time.time() - start_time) / repeat

        results[output_format] = {'time': elapsed, 'size': len(output)}
        logger.info(f"{output_format:>5}: {elapsed * 1000:8.1f} ms, {len(output) / 1024:8.1f} KB")
    return results


@pytest.mark.performance
def test_all_formats_encode():
    results = measure_formats(load_image_bytes(size=(256, 192)), repeat=1)

    assert set(results) == set(FORMATS)
    assert all(result['size'] > 0 for result in results.values())


@pytest.mark.performance
def test_lower_quality_webp_is_not_larger():
    data = load_image_bytes(size=(256, 192))
    high = ImageOptimizer.optimize(data, TransformDirective(format='webp', quality=95))
    low = ImageOptimizer.optimize(data, TransformDirective(format='webp', quality=30))

    assert len(low) <= len(high)


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="포맷별 인코딩 성능 비교")
    parser.add_argument("--image", help="테스트할 이미지 경로 (없으면 생성)")
    parser.add_argument("--quality", type=int, default=80, help="인코딩 품질")
    parser.add_argument("--repeat", type=int, default=3, help="반복 횟수")
    args = parser.parse_args()

    measure_formats(load_image_bytes(args.image), quality=args.quality, repeat=args.repeat)
