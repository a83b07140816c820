"""
배경 제거 서비스의 메인 로직
"""
import io
from PIL import Image
from rembg import remove
from app.core.errors import ProcessingError
from app.core.session_manager import get_session_manager
from app.utils.image_utils import temporary_upload
from app.utils.logger import setup_logger
from config.settings import BACKGROUND_REMOVAL, PATHS

# 로거 설정
logger = setup_logger(__name__)

class BackgroundRemover:
    """배경 제거 서비스"""

    @staticmethod
    def remove_background(data: bytes) -> bytes:
        """
        업로드 이미지의 배경을 제거하여 투명 배경 PNG 바이트 반환

        업로드 바이트는 임시 파일로 저장한 뒤 처리하며,
        임시 파일은 성공/실패와 관계없이 삭제된다.
        """
        total_steps = 3

        with temporary_upload(data, PATHS['TEMP_DIR'], BACKGROUND_REMOVAL['TEMP_PREFIX']) as temp_path:
            try:
                # 1. 이미지 로드
                logger.info(f"Step 1/{total_steps}: 이미지 로드 ({temp_path})")
                with Image.open(temp_path) as source:
                    source.load()
                    image = source.convert('RGBA') if source.mode not in ('RGB', 'RGBA') else source.copy()

                # 2. 배경 제거
                logger.info(f"Step 2/{total_steps}: 배경 제거 시작 (크기: {image.size})")
                session = get_session_manager().get_session()
                result = remove(
                    image,
                    session=session,
                    alpha_matting=BACKGROUND_REMOVAL['ALPHA_MATTING'],
                    post_process_mask=False,
                )

                # 3. PNG 인코딩
                logger.info(f"Step 3/{total_steps}: PNG 인코딩")
                return BackgroundRemover._to_png(result)
            except ProcessingError:
                raise
            except Exception as e:
                logger.error(f"배경 제거 중 오류 발생: {str(e)}")
                raise ProcessingError('Error removing background.', reason=str(e)) from e

    @staticmethod
    def _to_png(result) -> bytes:
        """rembg 결과(PIL 이미지 또는 바이트)를 RGBA PNG 바이트로 변환"""
        if isinstance(result, (bytes, bytearray)):
            result = Image.open(io.BytesIO(result))

        buffer = io.BytesIO()
        result.convert('RGBA').save(
            buffer,
            format='PNG',
            compress_level=BACKGROUND_REMOVAL['PNG_COMPRESS_LEVEL'],
        )
        return buffer.getvalue()
