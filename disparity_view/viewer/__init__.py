"""Disparity 표시 상태 관리 및 Rerun 재생 파이프라인

ViewerPipeline은 rerun을 import하므로 필요한 곳에서 직접 import하세요.
예: from disparity_view.viewer.viewer_pipeline import ViewerPipeline
"""

from .view import DisparityView

__all__ = [
    "DisparityView",
]
