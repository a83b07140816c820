""" 로깅 설정을 관리하는 모듈 """
import logging
import sys
from config.environments import current_env

LOG_CONFIG = current_env['LOGGING']

# 로거 중복 설정 방지를 위한 캐시
_loggers = {}

class ColoredFormatter(logging.Formatter):
    """로그 레벨별 색상 포맷터"""

    def format(self, record):
        levelname = record.levelname
        colors = LOG_CONFIG['COLORS']
        if levelname in colors:
            # 다른 핸들러에 색상 코드가 새지 않도록 복사본을 포맷
            record = logging.makeLogRecord(record.__dict__)
            record.levelname = f"{colors[levelname]}{levelname}{colors['RESET']}"
        return super().format(record)

def _create_formatter():
    """터미널이 색상을 지원하는 경우에만 색상 포맷터 사용"""
    if sys.stdout.isatty():
        return ColoredFormatter(LOG_CONFIG['FORMAT'], datefmt=LOG_CONFIG['DATE_FORMAT'])
    return logging.Formatter(LOG_CONFIG['FORMAT'], datefmt=LOG_CONFIG['DATE_FORMAT'])

def setup_logger(name):
    """ 로거 설정 및 반환 """
    if name in _loggers:
        return _loggers[name]

    logger = logging.getLogger(name)

    if logger.handlers:
        _loggers[name] = logger
        return logger

    level = getattr(logging, LOG_CONFIG['LEVEL'])
    logger.setLevel(level)
    logger.propagate = False

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)
    console_handler.setFormatter(_create_formatter())
    logger.addHandler(console_handler)

    _loggers[name] = logger
    return logger

def configure_library_loggers():
    """외부 라이브러리 로거 레벨 조정 (너무 verbose한 로그 억제)"""
    logging.getLogger('PIL').setLevel(logging.WARNING)
    logging.getLogger('uvicorn').setLevel(logging.INFO)
    logging.getLogger('onnxruntime').setLevel(logging.WARNING)
