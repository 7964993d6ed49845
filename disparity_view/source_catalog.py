# source_catalog.py
"""
Disparity 토픽 탐색/필터링 모듈

ROS 토픽 목록(이름 + 메시지 타입)에서 원하는 타입의 토픽만 골라
선택 가능한 (topic, transport) 쌍으로 변환

- '/stereo/disparity'            → ('/stereo/disparity', 'default')
- '/stereo/disparity/compressed' → ('/stereo/disparity/compressed', 'default')
                                   ('/stereo/disparity', 'compressed')

콤보박스 같은 선택 UI에서는 (topic, transport)를 공백으로 이은 label 문자열을 사용
(label ↔ SelectableSource 변환은 이 모듈에서만 수행)
"""

from typing import Iterable, List, NamedTuple, Set

# ROS1 / ROS2(rosbags) 표기 모두 허용
DISPARITY_TYPES = frozenset({
    "stereo_msgs/DisparityImage",
    "stereo_msgs/msg/DisparityImage",
})

DEFAULT_TRANSPORT = "default"

# image_transport 플러그인 토픽 접미사
KNOWN_TRANSPORTS = frozenset({
    "compressed",
    "compressedDepth",
    "theora",
    "zstd",
    "ffmpeg",
})

TOPIC_SEPARATOR = "/"
LABEL_SEPARATOR = " "


class SourceDescriptor(NamedTuple):
    """토픽 이름과 선언된 메시지 타입"""
    name: str
    declared_type: str


class SelectableSource(NamedTuple):
    """선택 가능한 (topic, transport) 쌍"""
    topic_path: str
    transport: str = DEFAULT_TRANSPORT

    @property
    def label(self) -> str:
        """선택 UI용 평문 label ('<topic> <transport>', default transport는 topic만)"""
        if self.transport == DEFAULT_TRANSPORT:
            return self.topic_path
        return f"{self.topic_path}{LABEL_SEPARATOR}{self.transport}"

    @property
    def topic_name(self) -> str:
        """메시지가 실제로 발행되는 전체 토픽 이름"""
        if self.transport == DEFAULT_TRANSPORT:
            return self.topic_path
        return f"{self.topic_path}{TOPIC_SEPARATOR}{self.transport}"


def _split_transport(name: str):
    """마지막 경로 세그먼트가 transport 접미사면 (topic, suffix), 아니면 None"""
    index = name.rfind(TOPIC_SEPARATOR)
    if index <= 0:
        return None
    suffix = name[index + 1:]
    if suffix not in KNOWN_TRANSPORTS:
        return None
    return name[:index], suffix


def filter_sources(descriptors: Iterable[SourceDescriptor],
                   wanted_types: Iterable[str] = DISPARITY_TYPES) -> Set[SelectableSource]:
    """
    원하는 메시지 타입의 토픽만 선택 가능한 소스로 변환

    Args:
        descriptors: 전체 토픽 목록
        wanted_types: 허용할 메시지 타입 태그

    Returns:
        Set[SelectableSource]: 중복 없는 선택 가능한 소스 집합 (순서 없음)
    """
    wanted = set(wanted_types)
    sources = set()
    for name, declared_type in descriptors:
        if declared_type not in wanted:
            continue

        # raw 토픽
        sources.add(SelectableSource(name, DEFAULT_TRANSPORT))

        split = _split_transport(name)
        if split is not None:
            sources.add(SelectableSource(*split))
    return sources


def parse_label(label: str) -> SelectableSource:
    """label 문자열 → SelectableSource (공백이 없으면 default transport)"""
    topic, sep, transport = label.partition(LABEL_SEPARATOR)
    if not sep or not transport:
        return SelectableSource(topic, DEFAULT_TRANSPORT)
    return SelectableSource(topic, transport)


def display_label(label: str) -> str:
    """표시용 문자열: 공백을 다시 '/'로 ('/a/b compressed' → '/a/b/compressed')"""
    return label.replace(LABEL_SEPARATOR, TOPIC_SEPARATOR)


def topic_labels(sources: Iterable[SelectableSource]) -> List[str]:
    """정렬된 label 목록 (맨 앞은 '선택 없음'을 뜻하는 빈 문자열)"""
    labels = {source.label for source in sources}
    labels.add("")
    return sorted(labels)
