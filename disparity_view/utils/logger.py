"""
로깅 설정 유틸리티

뷰어 실행 로그를 콘솔과 파일에 동시 출력
파일명은 실행 이름(bag 디렉토리 이름)과 동기화
예: data/rosbag2_stereo → logs/rosbag2_stereo_241030.log
"""

import logging
import re
import sys
import time
from pathlib import Path
from typing import Union


def setup_logger(
    run_name: str,
    log_level: Union[int, str] = logging.INFO,
    log_dir: Union[str, Path] = "logs"
) -> tuple[logging.Logger, Path]:
    """
    로거 설정 및 초기화

    Args:
        run_name: 실행 이름 (로그 파일명 생성에 사용)
        log_level: 로그 레벨 (기본값: logging.INFO, 'DEBUG' 같은 문자열도 허용)
        log_dir: 로그 파일을 저장할 디렉토리 (기본값: "logs")

    Returns:
        tuple[logging.Logger, Path]: 설정된 로거와 로그 파일 경로

    Example:
        >>> logger, log_file = setup_logger("rosbag2_stereo")
        >>> logger.info("Playback started")
        # 콘솔: 2024-10-30 14:30:20,123 - INFO - Playback started
        # 파일: logs/rosbag2_stereo_241030.log에 동일 내용 기록
    """
    if isinstance(log_level, str):
        log_level = logging.getLevelName(log_level.upper())
        if not isinstance(log_level, int):
            log_level = logging.INFO

    # 이름에 6자리 숫자(YYMMDD 형식)가 있으면 그대로 사용
    if re.search(r'\d{6}', run_name):
        log_filename = f"{run_name}.log"
    else:
        timestamp = time.strftime("%y%m%d")
        log_filename = f"{run_name}_{timestamp}.log"

    log_path = Path(log_dir)
    log_path.mkdir(parents=True, exist_ok=True)
    log_file = log_path / log_filename

    logging.basicConfig(
        level=log_level,
        format='%(asctime)s - %(levelname)s - %(message)s',
        handlers=[
            logging.FileHandler(log_file, encoding='utf-8', mode='w'),  # 파일 핸들러
            logging.StreamHandler(sys.stdout)  # 콘솔 핸들러
        ],
        force=True  # 기존 설정 덮어쓰기
    )

    logger = logging.getLogger()

    logger.info("="*60)
    logger.info("DISPARITY VIEWER STARTED")
    logger.info(f"Run name: {run_name}")
    logger.info(f"Log file: {log_file}")
    logger.info("="*60)

    return logger, log_file


def log_summary(
    logger: logging.Logger,
    log_file: Path,
    stats: dict,
    total_time: float
):
    """
    재생 완료 후 요약 로그 출력

    Args:
        logger: 로거 인스턴스
        log_file: 로그 파일 경로
        stats: 통계 정보 딕셔너리
        total_time: 총 처리 시간 (초)

    Example:
        >>> stats = {
        ...     'topic': '/stereo/disparity',
        ...     'received': 120,
        ...     'rendered': 117,
        ...     'skipped_degenerate': 3,
        ... }
        >>> log_summary(logger, log_file, stats, 12.4)
    """
    logger.info("="*60)
    logger.info("PLAYBACK COMPLETE - SUMMARY")
    logger.info("="*60)

    logger.info(f"Topic: {stats.get('topic', '')} (transport: {stats.get('transport', 'default')})")
    logger.info(f"Received frames: {stats.get('received', 0)}")
    logger.info(f"Rendered frames: {stats.get('rendered', 0)}")
    logger.info("-" * 20)

    logger.info(f"Skipped - no disparity range: {stats.get('skipped_degenerate', 0)}")
    logger.info(f"Skipped - unsupported encoding: {stats.get('skipped_encoding', 0)}")
    logger.info(f"Skipped - malformed frame: {stats.get('skipped_malformed', 0)}")

    if 'width' in stats:
        logger.info(f"Last resolution: {stats['width']}x{stats['height']}")

    logger.info(f"Total time: {total_time:.2f}s")
    logger.info(f"Log file saved: {log_file}")
    logger.info("="*60)
