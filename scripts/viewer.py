# viewer.py
"""
ZED / stereo ROS2 Bag disparity 뷰어

[기본 사용법]
    uv run -- python scripts/viewer.py <bag_path>

[예제]
    # config.yaml의 ros_topics.disparity 토픽 재생
    uv run -- python scripts/viewer.py data/rosbag2_stereo

    # 토픽 직접 지정 (compressed transport 포함)
    uv run -- python scripts/viewer.py data/rosbag2_stereo --topic "/stereo/disparity compressed"

    # Rerun 뷰어를 띄우지 않고 기존 뷰어에 연결
    uv run -- python scripts/viewer.py data/rosbag2_stereo --no-spawn

[주요 옵션]
    bag_path   : ROS2 bag 디렉토리 경로 (필수)
    --topic    : 재생할 disparity 토픽 (label 또는 전체 토픽 이름)
    --config   : 설정 파일 경로 (기본값: config.yaml)
    --no-spawn : Rerun 뷰어 프로세스를 새로 띄우지 않음
"""

import autorootcwd
import argparse
import sys

from disparity_view.viewer.viewer_pipeline import ViewerPipeline


def parse_arguments():
    """명령행 인자 파싱"""
    ap = argparse.ArgumentParser(description="ROS2 bag disparity → Rerun viewer")
    ap.add_argument("bag_path", type=str, help="Path to the ROS bag directory.")
    ap.add_argument("--topic", type=str, default=None, help="Disparity topic to play.")
    ap.add_argument("--config", type=str, default="config.yaml", help="Path to the config file.")
    ap.add_argument("--no-spawn", action="store_true", help="Do not spawn a new Rerun viewer.")
    return ap.parse_args()


def main():
    """메인 함수"""
    args = parse_arguments()
    pipeline = ViewerPipeline(args)
    if not pipeline.run():
        sys.exit(1)


if __name__ == "__main__":
    main()
