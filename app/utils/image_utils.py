""" 임시 파일 관련 유틸리티 함수들을 관리하는 모듈 """
import os
import time
import glob
import uuid
from contextlib import contextmanager
from app.utils.logger import setup_logger

# 로거 설정
logger = setup_logger(__name__)

def unique_temp_path(folder, prefix):
    """ 요청마다 충돌하지 않는 임시 파일 경로 생성 (밀리초 타임스탬프 + uuid) """
    timestamp = int(time.time() * 1000)
    return os.path.join(folder, f"{prefix}{timestamp}_{uuid.uuid4().hex}")

@contextmanager
def temporary_upload(data, folder, prefix):
    """
    업로드 바이트를 임시 파일로 저장하고 경로를 넘겨줌.
    블록을 벗어나면 성공/실패와 관계없이 파일 삭제
    """
    path = unique_temp_path(folder, prefix)
    try:
        with open(path, 'wb') as f:
            f.write(data)
        yield path
    finally:
        try:
            os.remove(path)
        except FileNotFoundError:
            pass
        except OSError as e:
            logger.warning(f"임시 파일 삭제 실패: {path} ({str(e)})")

def cleanup_old_files(folder, pattern, max_age_hours=24):
    """오래된 임시 파일들을 정리합니다."""
    try:
        current_time = time.time()
        max_age_seconds = max_age_hours * 3600

        # 패턴에 맞는 파일 목록
        file_list = glob.glob(os.path.join(folder, pattern))

        removed_count = 0
        for file_path in file_list:
            file_age = current_time - os.path.getmtime(file_path)
            if file_age > max_age_seconds:
                os.remove(file_path)
                removed_count += 1

        if removed_count > 0:
            logger.info(f"{removed_count}개의 오래된 임시 파일이 정리되었습니다.")

        return removed_count
    except OSError as e:
        logger.error(f"파일 정리 중 오류 발생: {str(e)}")
        return 0
