# view.py
"""
Disparity 표시 상태 관리 모듈

선택 UI(토픽 목록) 와 표시 대상(sink) 사이에서
- 토픽 목록 label 생성 및 선택 유지
- 토픽 변경 시 이미지 초기화
- 프레임 변환 실패 시 이전 이미지 유지
를 담당
"""

import logging
from typing import Callable, Iterable, List, Optional

from ..color_mapper import (
    ColorImage,
    DegenerateRangeError,
    DisparityFrame,
    MalformedFrameError,
    UnsupportedEncodingError,
    map_to_color,
)
from ..source_catalog import (
    DISPARITY_TYPES,
    SelectableSource,
    SourceDescriptor,
    filter_sources,
    parse_label,
    topic_labels,
)

logger = logging.getLogger(__name__)

ImageSink = Callable[[Optional[ColorImage]], None]


class DisparityView:
    def __init__(self, sink: Optional[ImageSink] = None):
        """
        Args:
            sink: 표시할 이미지를 받는 콜백 (None을 받으면 화면 초기화)
        """
        self.sink = sink
        self.labels: List[str] = [""]
        self.current_label = ""
        self.image: Optional[ColorImage] = None
        self.stats = {
            "received": 0,
            "rendered": 0,
            "skipped_degenerate": 0,
            "skipped_encoding": 0,
            "skipped_malformed": 0,
        }
        self._warned = set()

    @property
    def current_source(self) -> SelectableSource:
        return parse_label(self.current_label)

    # ---------------------------------------------------------
    # 토픽 목록 / 선택
    # ---------------------------------------------------------
    def update_topic_list(self, descriptors: Iterable[SourceDescriptor]) -> List[str]:
        """토픽 목록 갱신 후 이전 선택 복원 (없어졌으면 '선택 없음')"""
        selected = self.current_label
        self.labels = topic_labels(filter_sources(descriptors, DISPARITY_TYPES))
        self.select_topic(selected)
        return self.labels

    def select_topic(self, label: str) -> SelectableSource:
        """label이 목록에 없으면 빈 label(선택 없음) 선택"""
        if label not in self.labels:
            label = ""
        if label != self.current_label:
            self.current_label = label
            self.on_topic_changed()
        return self.current_source

    def on_topic_changed(self):
        # 토픽이 바뀌면 이미지 초기화
        self._show(None)
        source = self.current_source
        if source.topic_path:
            logger.info(f"Selected topic: {source.topic_path} (transport: {source.transport})")

    # ---------------------------------------------------------
    # 프레임 처리
    # ---------------------------------------------------------
    def on_frame(self, frame: DisparityFrame) -> bool:
        """
        프레임을 컬러 이미지로 변환해 표시

        Returns:
            bool: 새 이미지를 표시했으면 True, 건너뛰었으면 False (이전 이미지 유지)
        """
        self.stats["received"] += 1
        try:
            image = map_to_color(frame)
        except DegenerateRangeError as e:
            # 스테레오 매칭 결과가 아직 없는 프레임 (자주 발생)
            self.stats["skipped_degenerate"] += 1
            logger.debug(f"Skipping frame: {e}")
            return False
        except UnsupportedEncodingError as e:
            self.stats["skipped_encoding"] += 1
            self._warn_once(str(e))
            return False
        except MalformedFrameError as e:
            self.stats["skipped_malformed"] += 1
            self._warn_once(f"Malformed frame: {e}")
            return False

        self.stats["rendered"] += 1
        self._show(image)
        return True

    def _show(self, image: Optional[ColorImage]):
        self.image = image
        if self.sink is not None:
            self.sink(image)

    def _warn_once(self, message: str):
        if message not in self._warned:
            self._warned.add(message)
            logger.warning(f"{message} - skipping frames")
