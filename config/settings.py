import os
from pathlib import Path

# 프로젝트 루트 디렉토리
BASE_DIR = Path(__file__).resolve().parent.parent

# =============================================================================
# 이미지 최적화 관련 설정
# =============================================================================

# 출력 포맷 -> Pillow 포맷 이름
SUPPORTED_FORMATS = {
    'jpeg': 'JPEG',
    'webp': 'WEBP',
    'png': 'PNG',
    'avif': 'AVIF',
    'tiff': 'TIFF',
    'gif': 'GIF',
}

# 리사이즈 fit 모드
FIT_MODES = ('cover', 'contain', 'fill', 'inside', 'outside')

# 요청 필드 기본값
IMAGE_OPTIONS = {
    'DEFAULT_FORMAT': 'webp',
    'DEFAULT_QUALITY': 80,
    'DEFAULT_FIT': 'inside',
    'MIN_QUALITY': 1,
    'MAX_QUALITY': 100,
    'AVIF_QUALITY_OFFSET': 10,          # avif 는 요청 품질보다 10 낮게 인코딩
    'PNG_MAX_COMPRESS_LEVEL': 9,        # Pillow PNG 압축 레벨 범위: 0~9
}

# =============================================================================
# 배경 제거 관련 설정
# =============================================================================

BACKGROUND_REMOVAL = {
    'MODEL_NAME': os.getenv('REMBG_MODEL', 'u2net'),
    'PRELOAD_MODEL': False,             # 앱 시작 시 세션 미리 생성
    'ALPHA_MATTING': False,
    'PNG_COMPRESS_LEVEL': 6,            # PNG 는 무손실이므로 최대 품질과 무관
    'TEMP_PREFIX': 'temp_input_',
    'STALE_TEMP_MAX_AGE_HOURS': 24,
}

# =============================================================================
# 서비스 및 처리 관련 설정
# =============================================================================

# API 서버 설정
API_CONFIG = {
    'MAX_CONCURRENT_REQUESTS': 2,       # 배경 제거 동시 처리 요청 수
    'REQUEST_TIMEOUT': None,            # 초 단위, None 이면 제한 없음
    'MAX_UPLOAD_BYTES': 25 * 1024 * 1024,
}

# 경로 설정
PATHS = {
    'TEMP_DIR': os.getenv('TEMP_DIR', str(BASE_DIR / 'temp')),
    'STATIC_DIR': os.getenv('STATIC_DIR', str(BASE_DIR / 'static')),
    'INDEX_FILE': 'app.html',
}

# 로깅 설정
LOGGING = {
    'LEVEL': 'INFO',
    'FORMAT': '[%(asctime)s] %(levelname)-8s [%(name)s] %(message)s',
    'DATE_FORMAT': '%Y-%m-%d %H:%M:%S',
    'COLORS': {
        'DEBUG': '\033[36m',    # Cyan
        'INFO': '\033[32m',     # Green
        'WARNING': '\033[33m',  # Yellow
        'ERROR': '\033[31m',    # Red
        'CRITICAL': '\033[35m', # Magenta
        'RESET': '\033[0m'      # Reset
    }
}
