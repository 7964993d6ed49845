"""
config.yaml 로드 유틸리티

파일이 없거나 형식이 잘못된 경우 기본값을 사용하고,
일부 항목만 있는 경우 섹션 단위로 기본값 위에 덮어씀
"""

import copy
import logging
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml

logger = logging.getLogger(__name__)

DEFAULT_CONFIG: Dict[str, Dict[str, Any]] = {
    "ros_topics": {
        "disparity": None,  # None이면 bag에서 찾은 첫 번째 disparity 토픽
    },
    "visualization": {
        "entity_path": "disparity/image",
        "playback_delay_s": 0.0,  # 프레임 사이 대기 시간
    },
    "logging": {
        "level": "INFO",
        "log_dir": "logs",
    },
}


def load_config(config_path: Optional[Union[str, Path]]) -> Dict[str, Dict[str, Any]]:
    """
    config.yaml 로드 (기본값과 병합)

    Args:
        config_path: 설정 파일 경로 (None이면 기본값만 사용)

    Returns:
        dict: 섹션별 설정 ('ros_topics', 'visualization', 'logging')
    """
    config = copy.deepcopy(DEFAULT_CONFIG)
    if config_path is None:
        return config

    config_path = Path(config_path)
    try:
        with open(config_path, "r", encoding="utf-8") as f:
            loaded = yaml.safe_load(f) or {}
    except (FileNotFoundError, yaml.YAMLError) as e:
        logger.warning(f"config not found or invalid ({config_path}): {e}. Using defaults.")
        return config

    if not isinstance(loaded, dict):
        logger.warning(f"config root must be a mapping: {config_path}. Using defaults.")
        return config

    for section, values in config.items():
        overrides = loaded.get(section)
        if isinstance(overrides, dict):
            values.update({k: v for k, v in overrides.items() if k in values})
    return config
