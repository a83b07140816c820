""" 테스트 공용 fixture """
import io
import os

import pytest
from fastapi.testclient import TestClient
from PIL import Image

from config.settings import BACKGROUND_REMOVAL, PATHS


def make_image_bytes(size=(400, 200), mode='RGB', fmt='PNG', color=(200, 30, 30)):
    """테스트용 단색 이미지 바이트 생성"""
    if mode == 'RGBA' and len(color) == 3:
        color = color + (255,)
    if mode in ('L', 'P'):
        image = Image.new('RGB', size, color).convert(mode)
    else:
        image = Image.new(mode, size, color)
    buffer = io.BytesIO()
    image.save(buffer, format=fmt)
    return buffer.getvalue()


def open_response_image(response):
    image = Image.open(io.BytesIO(response.content))
    image.load()
    return image


def temp_inputs(folder):
    """임시 폴더에 남아있는 업로드 임시 파일 목록"""
    prefix = BACKGROUND_REMOVAL['TEMP_PREFIX']
    return [name for name in os.listdir(folder) if name.startswith(prefix)]


@pytest.fixture
def temp_dir(tmp_path, monkeypatch):
    folder = tmp_path / 'temp'
    monkeypatch.setitem(PATHS, 'TEMP_DIR', str(folder))
    return folder


@pytest.fixture
def client(temp_dir):
    from app import create_app
    with TestClient(create_app()) as test_client:
        yield test_client


@pytest.fixture
def png_bytes():
    return make_image_bytes()


class FakeRembg:
    """rembg.remove 대체: 왼쪽 절반을 투명하게 만든 RGBA 이미지를 반환"""

    def __init__(self, temp_folder, error=None):
        self.temp_folder = temp_folder
        self.error = error
        self.calls = []

    def __call__(self, image, session=None, **kwargs):
        self.calls.append({
            'size': image.size,
            'session': session,
            'temp_files': temp_inputs(self.temp_folder),
            'kwargs': kwargs,
        })
        if self.error is not None:
            raise self.error

        result = image.convert('RGBA')
        width, height = result.size
        result.paste((0, 0, 0, 0), (0, 0, width // 2, height))
        return result


class FakeSessionManager:
    def __init__(self):
        self.session = object()

    def get_session(self):
        return self.session


@pytest.fixture
def fake_rembg(temp_dir, monkeypatch):
    import app.services.background_remover as background_remover

    fake = FakeRembg(temp_dir)
    monkeypatch.setattr(background_remover, 'remove', fake)
    monkeypatch.setattr(background_remover, 'get_session_manager', FakeSessionManager)
    return fake
