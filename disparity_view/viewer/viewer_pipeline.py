# viewer_pipeline.py
"""
ViewerPipeline 모듈

ROS2 Bag의 stereo_msgs/DisparityImage 토픽을 재생하며
disparity 영상을 컬러맵으로 변환해 Rerun 뷰어에 표시하는 파이프라인 클래스

주요 처리 단계:
1) 설정 로드 및 로그 초기화
2) ROS Bag 토픽 탐색 및 disparity 토픽 선택
3) Rerun 초기화 (blueprint / description)
4) 프레임 재생: DisparityFrame → ColorImage → rr.Image
5) 결과 요약 로그 출력

주요 클래스:
- ViewerPipeline: 전체 재생 프로세스를 관리하고 실행하는 메인 파이프라인 클래스
- RerunImageSink: DisparityView의 이미지를 Rerun entity로 로깅
"""

import logging
import sys
import time
from pathlib import Path
from typing import Iterable, Optional

import numpy as np
import rerun as rr
from tqdm import tqdm

from ..bag_source import check_rosbag_path, count_messages, iter_disparity_frames, list_sources
from ..color_mapper import ColorImage
from ..source_catalog import SelectableSource, parse_label
from ..utils.config import load_config
from ..utils.logger import log_summary, setup_logger
from .rerun_blueprint import log_description, setup_rerun_blueprint
from .view import DisparityView


def choose_topic(labels: Iterable[str],
                 requested: Optional[str] = None,
                 configured: Optional[str] = None) -> Optional[str]:
    """
    재생할 토픽 label 선택

    우선순위: 명령행 --topic → config.yaml ros_topics.disparity → 첫 번째 토픽
    요청한 토픽이 '/a/b/compressed' 처럼 전체 이름이어도 label과 비교
    """
    labels = [label for label in labels if label]
    by_name = {parse_label(label).topic_name: label for label in labels}

    for candidate in (requested, configured):
        if not candidate:
            continue
        if candidate in labels:
            return candidate
        if candidate in by_name:
            return by_name[candidate]
    return labels[0] if labels else None


class RerunImageSink:
    """DisparityView 이미지를 Rerun entity로 로깅 (None이면 entity 초기화)"""

    def __init__(self, entity_path: str):
        self.entity_path = entity_path

    def __call__(self, image: Optional[ColorImage]):
        if image is None:
            rr.log(self.entity_path, rr.Clear(recursive=False))
        else:
            rr.log(self.entity_path, rr.Image(image.array))


class ViewerPipeline:
    def __init__(self, args):
        """
        Args:
            args: argparse.Namespace - 명령행 인자 (bag_path, topic, config, no_spawn)
        """
        self.args = args
        self.start_time = time.time()
        self.bag_path = Path(args.bag_path)

        # 설정 로드
        self.config = load_config(getattr(args, "config", None))
        self.entity_path = self.config["visualization"]["entity_path"]
        self.playback_delay_s = float(self.config["visualization"]["playback_delay_s"] or 0.0)

        # 로거 설정
        log_cfg = self.config["logging"]
        _, self.log_file = setup_logger(self.bag_path.name or "disparity_view",
                                        log_level=log_cfg["level"], log_dir=log_cfg["log_dir"])
        self.logger = logging.getLogger(__name__)

        # sink는 Rerun 초기화 후 연결
        self.view = DisparityView()
        self.source: Optional[SelectableSource] = None

    def select_source(self) -> Optional[SelectableSource]:
        """bag의 토픽 목록에서 disparity 토픽 선택"""
        labels = self.view.update_topic_list(list_sources(self.bag_path))
        self.logger.info(f"Selectable disparity sources: {[label for label in labels if label]}")

        label = choose_topic(labels, getattr(self.args, "topic", None),
                             self.config["ros_topics"]["disparity"])
        if label is None:
            self.logger.error(f"No stereo_msgs/DisparityImage topic found in {self.bag_path}")
            return None

        self.source = self.view.select_topic(label)
        return self.source

    def _init_rerun(self):
        app_id = f"disparity_view_{self.bag_path.name}"
        rr.init(app_id, spawn=not getattr(self.args, "no_spawn", False))
        setup_rerun_blueprint(self.entity_path)
        log_description(self.source.topic_name, self.source.transport)
        self.view.sink = RerunImageSink(self.entity_path)

    def play(self):
        """선택된 토픽의 프레임을 순서대로 변환해 표시"""
        topic = self.source.topic_name
        total_messages = count_messages(self.bag_path, topic)
        self.logger.info(f"Total messages to play: {total_messages}")

        for timestamp, frame in tqdm(
            iter_disparity_frames(self.bag_path, topic),
            desc="Playing disparity",
            unit="msg",
            total=total_messages,
            file=sys.stderr,
            ncols=120,
            mininterval=0.5,
            leave=True
        ):
            # time synchronization
            rr.set_time("rec_time", timestamp=np.datetime64(timestamp, "ns"))
            self.view.on_frame(frame)

            if self.playback_delay_s > 0:
                time.sleep(self.playback_delay_s)

    def generate_summary(self):
        """재생 요약 로그 출력"""
        stats = dict(self.view.stats)
        stats["topic"] = self.source.topic_path if self.source else ""
        stats["transport"] = self.source.transport if self.source else ""
        if self.view.image is not None:
            stats["width"] = self.view.image.width
            stats["height"] = self.view.image.height
        log_summary(self.logger, self.log_file, stats, time.time() - self.start_time)

    def run(self) -> bool:
        """전체 파이프라인 실행 (재생할 토픽이 없으면 False)"""
        try:
            # 1. rosbag 경로 확인
            if not check_rosbag_path(self.bag_path):
                return False

            # 2. 토픽 선택
            if self.select_source() is None:
                return False

            # 3. Rerun 초기화
            self._init_rerun()

            # 4. 재생
            self.play()

            # 5. 요약
            self.generate_summary()
            return True

        except Exception as e:
            self.logger.error(f"Pipeline failed: {e}")
            raise
