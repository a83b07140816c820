""" FastAPI 애플리케이션 생성 및 초기화를 담당하는 모듈 """
import os
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles
from fastapi.exceptions import RequestValidationError
from app.core.errors import ImageToolError, image_tool_error_handler, validation_error_handler
from app.utils.image_utils import cleanup_old_files
from app.utils.logger import setup_logger, configure_library_loggers
from config.environments import current_env
from config.settings import BACKGROUND_REMOVAL, PATHS

# 로거 설정
logger = setup_logger(__name__)

def initialize_temp_dir():
    """임시 디렉토리 생성 및 오래된 임시 파일 정리 (실패 시 시작 중단)"""
    temp_dir = PATHS['TEMP_DIR']
    try:
        os.makedirs(temp_dir, exist_ok=True)
    except OSError as e:
        logger.error(f"임시 디렉토리 생성 실패: {temp_dir} ({str(e)})")
        raise
    logger.debug(f"임시 디렉토리 확인/생성: {temp_dir}")

    cleanup_old_files(
        temp_dir,
        pattern=f"{BACKGROUND_REMOVAL['TEMP_PREFIX']}*",
        max_age_hours=BACKGROUND_REMOVAL['STALE_TEMP_MAX_AGE_HOURS'],
    )

def initialize_models():
    """설정된 경우 rembg 세션을 미리 생성"""
    if not BACKGROUND_REMOVAL['PRELOAD_MODEL']:
        logger.debug("rembg 세션은 첫 요청 시 생성됩니다")
        return

    from app.core.session_manager import get_session_manager
    get_session_manager().get_session()

def configure_cors(app: FastAPI):
    """CORS 미들웨어를 설정하는 함수"""
    origins = current_env['CORS_ORIGINS']
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        # 와일드카드 origin 과 credentials 는 함께 사용할 수 없음
        allow_credentials='*' not in origins,
        allow_methods=["*"],
        allow_headers=["*"],
        expose_headers=["*"],
        max_age=3600,
    )
    logger.info("CORS 설정이 완료되었습니다")

def configure_static(app: FastAPI):
    """정적 파일 서빙 (API 라우트 뒤에 마운트해야 함)"""
    static_dir = PATHS['STATIC_DIR']
    if not os.path.isdir(static_dir):
        logger.warning(f"정적 파일 디렉토리가 없습니다: {static_dir}")
        return
    app.mount("/", StaticFiles(directory=static_dir), name="static")
    logger.debug(f"정적 파일 디렉토리: {static_dir}")

def create_app() -> FastAPI:
    """FastAPI 애플리케이션을 생성하고 설정하는 메인 함수"""
    # 1. FastAPI 인스턴스 생성
    app = FastAPI(
        title="Image Tool API",
        description="이미지 최적화 및 배경 제거 API",
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc",
    )

    # 2. 기본 설정들 적용
    configure_library_loggers()
    configure_cors(app)
    app.add_exception_handler(ImageToolError, image_tool_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)

    # 3. 임시 디렉토리 준비 (서버가 요청을 받기 전에 한 번만 실행)
    initialize_temp_dir()

    # 4. 모델 초기화
    initialize_models()

    # 5. 라우터 등록 후 정적 파일 마운트
    from app.routes import router
    app.include_router(router)
    configure_static(app)

    logger.info("FastAPI 애플리케이션 생성이 완료되었습니다")
    return app
