# color_mapper.py
"""
Disparity → 컬러 이미지 변환 모듈

stereo_msgs/DisparityImage의 32FC1 disparity 영상을 고정 컬러 테이블로 매핑해
사람이 볼 수 있는 RGB 이미지로 변환

처리 단계:
1) 입력 검증 (유효 범위 / 인코딩 / 버퍼 크기)
2) row stride(step)를 고려해 float32 disparity 행렬 복원
3) [min_disparity, max_disparity] → [0, 255] 인덱스 정규화 (+0.5 후 절삭, clamp)
4) 컬러 테이블 LUT 적용 (BGR) → RGB 변환

주요 구성:
- DisparityFrame: 입력 프레임 (불변)
- ColorImage: 출력 RGB 이미지
- map_to_color: 변환 함수 (상태 없음, 동일 입력 → 동일 출력)
"""

from dataclasses import dataclass
from typing import Union

import cv2
import numpy as np

from .color_table import COLOR_TABLE, TABLE_SIZE

# sensor_msgs/image_encodings TYPE_32FC1
ENCODING_32FC1 = "32FC1"
BYTES_PER_SAMPLE = 4

# cv2.applyColorMap의 사용자 LUT 형식 (256 x 1 x 3, CV_8UC3)
_COLOR_LUT = COLOR_TABLE.reshape(TABLE_SIZE, 1, 3).copy()


# -------------------------------------------------------------
# 예외
# -------------------------------------------------------------
class MappingError(ValueError):
    """disparity 프레임을 컬러 이미지로 변환할 수 없음"""


class DegenerateRangeError(MappingError):
    """유효한 disparity 범위가 없음 (아직 스테레오 매칭 결과가 없는 프레임 등)"""


class UnsupportedEncodingError(MappingError):
    """32FC1 이외의 픽셀 인코딩"""


class MalformedFrameError(MappingError):
    """step 또는 버퍼 크기가 width/height와 맞지 않음"""


# -------------------------------------------------------------
# 데이터 타입
# -------------------------------------------------------------
@dataclass(frozen=True)
class DisparityFrame:
    """
    한 번의 업데이트로 전달되는 disparity 프레임

    Attributes:
        width, height: 이미지 해상도 (픽셀)
        step: 한 행이 차지하는 바이트 수 (정렬 때문에 width * 4보다 클 수 있음)
        encoding: 픽셀 인코딩 태그 (예: '32FC1')
        data: 최소 height * step 바이트의 읽기 전용 버퍼
        min_disparity, max_disparity: 유효 disparity 범위
        is_bigendian: float 샘플의 바이트 순서
    """

    width: int
    height: int
    step: int
    encoding: str
    data: Union[bytes, memoryview, np.ndarray]
    min_disparity: float
    max_disparity: float
    is_bigendian: bool = False

    @classmethod
    def from_array(cls, disparity: np.ndarray, min_disparity: float,
                   max_disparity: float) -> "DisparityFrame":
        """2차원 float 배열로부터 빈틈 없는(step = width * 4) little-endian 프레임 생성"""
        disp = np.ascontiguousarray(disparity, dtype="<f4")
        if disp.ndim != 2:
            raise ValueError(f"disparity must be 2-D, got shape {disp.shape}")
        height, width = disp.shape
        return cls(
            width=width,
            height=height,
            step=width * BYTES_PER_SAMPLE,
            encoding=ENCODING_32FC1,
            data=disp.tobytes(),
            min_disparity=float(min_disparity),
            max_disparity=float(max_disparity),
        )

    def __repr__(self) -> str:
        return (
            f"DisparityFrame(width={self.width}, height={self.height}, "
            f"step={self.step}, encoding={self.encoding!r}, "
            f"min_disparity={self.min_disparity}, max_disparity={self.max_disparity})"
        )


@dataclass(frozen=True)
class ColorImage:
    """R, G, B 순서의 uint8 [H, W, 3] 이미지 (step = width * 3)"""

    array: np.ndarray

    @property
    def width(self) -> int:
        return self.array.shape[1]

    @property
    def height(self) -> int:
        return self.array.shape[0]

    @property
    def step(self) -> int:
        return self.width * 3

    def tobytes(self) -> bytes:
        return self.array.tobytes()


# -------------------------------------------------------------
# 변환
# -------------------------------------------------------------
def _check_frame(frame: DisparityFrame) -> float:
    """입력 검증 후 정규화 배율(scale)을 반환"""
    if frame.min_disparity == 0.0 and frame.max_disparity == 0.0:
        raise DegenerateRangeError("min_disparity and max_disparity are both 0")
    if frame.encoding != ENCODING_32FC1:
        raise UnsupportedEncodingError(f"Unsupported encoding: {frame.encoding}")

    with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
        scale = np.float32(255.0) / (np.float32(frame.max_disparity) - np.float32(frame.min_disparity))
    if not np.isfinite(scale):
        raise DegenerateRangeError(
            f"Degenerate disparity range [{frame.min_disparity}, {frame.max_disparity}]"
        )

    row_bytes = frame.width * BYTES_PER_SAMPLE
    if frame.width < 0 or frame.height < 0 or frame.step < row_bytes:
        raise MalformedFrameError(
            f"step {frame.step} too small for width {frame.width} (need {row_bytes})"
        )
    n_bytes = np.frombuffer(frame.data, dtype=np.uint8).size
    if n_bytes < frame.height * frame.step:
        raise MalformedFrameError(
            f"buffer holds {n_bytes} bytes, "
            f"need {frame.height * frame.step}"
        )
    return scale


def disparity_to_array(frame: DisparityFrame) -> np.ndarray:
    """row padding을 제거한 float32 [H, W] disparity 행렬 복원"""
    buf = np.frombuffer(frame.data, dtype=np.uint8, count=frame.height * frame.step)
    rows = buf.reshape(frame.height, frame.step)[:, :frame.width * BYTES_PER_SAMPLE]
    dtype = np.dtype(">f4" if frame.is_bigendian else "<f4")
    disp = np.ascontiguousarray(rows).view(dtype).reshape(frame.height, frame.width)
    return disp.astype(np.float32)


def disparity_to_index(disp: np.ndarray, min_disparity: float, scale: np.float32) -> np.ndarray:
    """
    disparity → 컬러 테이블 인덱스 (uint8)

    index = trunc((d - min) * scale + 0.5), [0, 255]로 clamp
    - 뺄셈/곱셈은 float32, +0.5는 float64로 계산
    - NaN → 0 (회색), +inf → 255, -inf → 0
    """
    with np.errstate(invalid="ignore", over="ignore"):
        v = (disp - np.float32(min_disparity)) * scale
        v = v.astype(np.float64) + 0.5
    v = np.nan_to_num(v, nan=0.0, posinf=255.0, neginf=0.0)
    # [0, 255]로 먼저 자른 뒤 절삭해도 결과는 같음 (-1 < v < 0 → 0)
    return np.clip(v, 0.0, 255.0).astype(np.uint8)


def map_to_color(frame: DisparityFrame) -> ColorImage:
    """
    DisparityFrame을 RGB 컬러 이미지로 변환

    Args:
        frame: 32FC1 disparity 프레임

    Returns:
        ColorImage: R, G, B 순서, step = width * 3

    Raises:
        DegenerateRangeError: 유효 범위 없음 (min == max == 0, 또는 배율이 유한하지 않음)
        UnsupportedEncodingError: 32FC1이 아닌 인코딩
        MalformedFrameError: step / 버퍼 크기 불일치

    Example:
        >>> frame = DisparityFrame.from_array(np.array([[0.0, 10.0]]), 0.0, 10.0)
        >>> map_to_color(frame).array[0, 1]   # COLOR_TABLE_RGB[255]
        array([  0,   0, 255], dtype=uint8)
    """
    scale = _check_frame(frame)

    if frame.width == 0 or frame.height == 0:
        return ColorImage(np.zeros((frame.height, frame.width, 3), dtype=np.uint8))

    disp = disparity_to_array(frame)
    index = disparity_to_index(disp, frame.min_disparity, scale)

    # LUT 적용 (테이블은 BGR 순서) → RGB
    color_bgr = cv2.applyColorMap(index, _COLOR_LUT)
    color_rgb = cv2.cvtColor(color_bgr, cv2.COLOR_BGR2RGB)
    return ColorImage(np.ascontiguousarray(color_rgb))
