""" 포맷별 인코딩 옵션 테스트 """
import io

import pytest
from PIL import Image

from app.services.image_processing.image_encoder import ImageEncoder


def test_png_compression_level_is_tenth_of_quality():
    options = ImageEncoder.save_options('png', 55)
    assert options['compress_level'] == 5
    assert options['quality'] == 55


@pytest.mark.parametrize('quality, level', [(1, 0), (9, 0), (10, 1), (99, 9), (100, 9)])
def test_png_compression_level_stays_in_range(quality, level):
    assert ImageEncoder.save_options('png', quality)['compress_level'] == level


@pytest.mark.parametrize('quality, expected', [(80, 70), (11, 1), (10, 1), (5, 1), (1, 1)])
def test_avif_quality_offset_floors_at_one(quality, expected):
    assert ImageEncoder.save_options('avif', quality) == {'quality': expected}


def test_jpeg_is_progressive():
    assert ImageEncoder.save_options('jpeg', 75) == {'quality': 75, 'progressive': True}


def test_webp_and_tiff_pass_quality():
    assert ImageEncoder.save_options('webp', 64) == {'quality': 64}
    assert ImageEncoder.save_options('tiff', 64) == {'compression': 'jpeg', 'quality': 64}


def test_gif_has_no_quality():
    assert ImageEncoder.save_options('gif', 90) == {}


def test_jpeg_encode_drops_alpha():
    image = Image.new('RGBA', (40, 30), (0, 0, 255, 128))
    data = ImageEncoder.encode(image, 'jpeg', 80)

    decoded = Image.open(io.BytesIO(data))
    assert decoded.format == 'JPEG'
    assert decoded.mode == 'RGB'
    assert decoded.info.get('progressive')


@pytest.mark.parametrize('output_format, pil_format', [
    ('webp', 'WEBP'),
    ('png', 'PNG'),
    ('tiff', 'TIFF'),
    ('gif', 'GIF'),
])
def test_encode_produces_requested_format(output_format, pil_format):
    image = Image.new('LA', (40, 30), (128, 255))
    data = ImageEncoder.encode(image, output_format, 80)

    decoded = Image.open(io.BytesIO(data))
    assert decoded.format == pil_format
    assert decoded.size == (40, 30)
