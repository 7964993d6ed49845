# bag_source.py
"""
ROS2 Bag 입력 모듈

- rosbag2 경로 확인
- 토픽 목록(SourceDescriptor) 추출
- 선택된 disparity 토픽의 stereo_msgs/DisparityImage 메시지를 DisparityFrame으로 변환
"""

import logging
from pathlib import Path
from typing import Iterator, List, Tuple

from rosbags.rosbag2 import Reader
from rosbags.typesys import Stores, get_typestore

from .color_mapper import DisparityFrame
from .source_catalog import SourceDescriptor

logger = logging.getLogger(__name__)


def check_rosbag_path(bag_path: Path) -> bool:
    """ROSBAG 경로 확인"""
    # 경로 확인
    if not bag_path.exists():
        logger.error(f"Rosbag path does not exist: {bag_path}")
        return False

    # metadata.yaml 존재 확인
    metadata_file = bag_path / "metadata.yaml"
    if not metadata_file.exists():
        logger.error(f"metadata.yaml not found: {metadata_file}")
        return False
    return True


def frame_from_msg(msg) -> DisparityFrame:
    """stereo_msgs/DisparityImage 메시지 → DisparityFrame (검증은 map_to_color에서)"""
    image = msg.image
    return DisparityFrame(
        width=int(image.width),
        height=int(image.height),
        step=int(image.step),
        encoding=image.encoding,
        data=image.data,
        min_disparity=float(msg.min_disparity),
        max_disparity=float(msg.max_disparity),
        is_bigendian=bool(image.is_bigendian),
    )


def list_sources(bag_path: Path) -> List[SourceDescriptor]:
    """rosbag2의 connection 정보로부터 (토픽, 메시지 타입) 목록 생성"""
    with Reader(bag_path) as reader:
        return [SourceDescriptor(c.topic, c.msgtype) for c in reader.connections]


def count_messages(bag_path: Path, topic: str) -> int:
    """토픽의 메시지 개수 (진행률 표시용)"""
    with Reader(bag_path) as reader:
        return sum(c.msgcount for c in reader.connections if c.topic == topic)


def iter_disparity_frames(bag_path: Path, topic: str) -> Iterator[Tuple[int, DisparityFrame]]:
    """
    선택된 토픽의 메시지를 순서대로 읽어 (timestamp_ns, DisparityFrame)으로 반환

    Args:
        bag_path (Path): rosbag2 경로
        topic (str): disparity 토픽 이름 (예: '/stereo/disparity')
    """
    # ROS2 Foxy 형식의 메시지 타입 스토어 로드
    typestore = get_typestore(Stores.ROS2_FOXY)

    with Reader(bag_path) as reader:
        conns = [c for c in reader.connections if c.topic == topic]
        if not conns:
            logger.warning(f"Topic not found in bag: {topic}")
            return

        for conn, timestamp, rawdata in reader.messages(conns):
            msg = typestore.deserialize_cdr(rawdata, conn.msgtype)
            yield timestamp, frame_from_msg(msg)
