"""
Disparity View - stereo disparity map viewer

stereo_msgs/DisparityImage 토픽을 고정 컬러 테이블로 시각화하는 패키지
- color_table: 256색 고정 컬러 테이블
- color_mapper: disparity → RGB 컬러 이미지 변환
- source_catalog: disparity 토픽 탐색 / (topic, transport) 선택
- bag_source: ROS2 Bag 입력
- viewer: 표시 상태 관리 및 Rerun 재생 파이프라인
"""

from .color_table import COLOR_TABLE, COLOR_TABLE_RGB, TABLE_CHANNEL_ORDER
from .color_mapper import (
    ColorImage,
    DegenerateRangeError,
    DisparityFrame,
    MalformedFrameError,
    MappingError,
    UnsupportedEncodingError,
    map_to_color,
)
from .source_catalog import (
    DISPARITY_TYPES,
    SelectableSource,
    SourceDescriptor,
    filter_sources,
    parse_label,
)

__all__ = [
    "COLOR_TABLE",
    "COLOR_TABLE_RGB",
    "TABLE_CHANNEL_ORDER",
    "ColorImage",
    "DegenerateRangeError",
    "DisparityFrame",
    "MalformedFrameError",
    "MappingError",
    "UnsupportedEncodingError",
    "map_to_color",
    "DISPARITY_TYPES",
    "SelectableSource",
    "SourceDescriptor",
    "filter_sources",
    "parse_label",
]
