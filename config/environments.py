"""환경별 설정을 관리하는 모듈"""
import os
from config.settings import LOGGING

# 환경 변수에서 현재 환경 가져오기 (기본값: development)
ENV = os.getenv('ENV', 'development')

# 호스팅 환경에서 포트를 PORT 환경 변수로 전달
DEFAULT_PORT = 3000


def _parse_origins(value):
    """콤마로 구분된 CORS origin 목록 파싱"""
    return [origin.strip() for origin in value.split(',') if origin.strip()]


# 환경별 설정
ENVIRONMENTS = {
    # 로컬 개발용
    'development': {
        'DEBUG': False,
        'TESTING': False,
        'HOST': os.getenv('HOST', '0.0.0.0'),
        'PORT': int(os.getenv('PORT', DEFAULT_PORT)),
        'CORS_ORIGINS': ['*'],
        'LOGGING': {
            'LEVEL': 'DEBUG',
            'FORMAT': LOGGING['FORMAT'],
            'DATE_FORMAT': LOGGING['DATE_FORMAT'],
            'COLORS': LOGGING['COLORS']
        }
    },

    # 운영 서버(실제 서비스 환경)
    'production': {
        'DEBUG': False,
        'TESTING': False,
        'HOST': os.getenv('HOST', '0.0.0.0'),
        'PORT': int(os.getenv('PORT', DEFAULT_PORT)),
        'CORS_ORIGINS': _parse_origins(os.getenv('CORS_ORIGINS', '*')),
        'LOGGING': {
            'LEVEL': 'INFO',
            'FORMAT': LOGGING['FORMAT'],
            'DATE_FORMAT': LOGGING['DATE_FORMAT'],
            'COLORS': LOGGING['COLORS']
        }
    },
}

def get_environment():
    """현재 환경의 설정을 반환하는 함수"""
    if ENV not in ENVIRONMENTS:
        print(f"알 수 없는 환경: '{ENV}'. '개발(development)' 환경으로 설정됩니다.")
        return ENVIRONMENTS['development']
    return ENVIRONMENTS[ENV]

# 현재 환경의 설정 가져오기
current_env = get_environment()
