"""
rembg 세션 관리 모듈
"""
import threading
from rembg import new_session
from app.utils.logger import setup_logger
from config.settings import BACKGROUND_REMOVAL

# 로거 설정
logger = setup_logger(__name__)

class SessionManager:
    """rembg 세션 관리 클래스"""

    _instance = None
    _lock = threading.Lock()

    def __new__(cls):
        """싱글톤 패턴 구현"""
        with cls._lock:
            if cls._instance is None:
                cls._instance = super(SessionManager, cls).__new__(cls)
                cls._instance._initialize()
            return cls._instance

    def _initialize(self):
        """초기화"""
        self.session = None
        self.session_lock = threading.Lock()
        self.model_name = BACKGROUND_REMOVAL['MODEL_NAME']

    def get_session(self):
        """rembg 세션 반환 (필요시 생성, 스레드 안전)"""
        # 이미 생성되었는지 빠르게 확인
        if self.session is not None:
            return self.session

        # 잠금 획득 후 다시 확인
        with self.session_lock:
            if self.session is None:
                try:
                    logger.info(f"rembg 세션 생성 중... (모델: {self.model_name})")
                    self.session = new_session(self.model_name)
                    logger.info("rembg 세션 생성 완료")
                except Exception as e:
                    logger.error(f"rembg 세션 생성 중 오류 발생: {str(e)}")
                    raise

        return self.session

# 싱글톤 인스턴스 제공 함수
def get_session_manager():
    return SessionManager()
