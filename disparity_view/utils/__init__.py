"""
Utility functions for the disparity viewer

- logger: 로깅 설정 및 요약 출력
- config: config.yaml 로드
"""

from .logger import setup_logger, log_summary
from .config import load_config, DEFAULT_CONFIG

__all__ = [
    'setup_logger',
    'log_summary',
    'load_config',
    'DEFAULT_CONFIG',
]
