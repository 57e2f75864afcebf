"""
フレーム前処理モジュール

カメラのYUV420SP（NV21）フレームを受け取り、
    検証 → 輝度面の抽出（グレースケール化） → ガウシアンぼかし → YUV420SPへ再構成
を行う。出力のクロマ面はすべて中間値（128）で、色情報を持たない。

使用例:
    from src.vision import FramePreprocessor, FrameRequest

    preprocessor = FramePreprocessor()
    response = preprocessor.preprocess(FrameRequest(pixels=data, width=640, height=480))
"""
import logging
from typing import Tuple

import cv2
import numpy as np

from . import environment
from .constants import BLUR_BORDER_TYPE, BLUR_KERNEL_SIZE, BLUR_SIGMA, NEUTRAL_CHROMA
from .errors import (
    InvalidDimensions,
    MalformedBuffer,
    MissingImageData,
    ProcessingFailure,
)
from .frame import (
    BYTES_LIKE,
    FrameRequest,
    FrameResponse,
    chroma_rows,
    expected_buffer_length,
    is_valid_dimension,
)

logger = logging.getLogger(__name__)


class FramePreprocessor:
    """
    YUV420SPフレームのグレースケール化＋ぼかし

    状態を持たないため、スレッド間で共有して構わない。
    """

    def __init__(
        self,
        kernel_size: Tuple[int, int] = BLUR_KERNEL_SIZE,
        sigma: float = BLUR_SIGMA,
        border_type: int = BLUR_BORDER_TYPE,
        neutral_chroma: int = NEUTRAL_CHROMA,
    ):
        self.kernel_size = kernel_size
        self.sigma = sigma
        self.border_type = border_type
        self.neutral_chroma = neutral_chroma

    def validate(self, request: FrameRequest) -> None:
        """
        リクエストを検証

        Raises:
            MissingImageData: 画像データが未指定・空・バイト列でない
            InvalidDimensions: 幅・高さが不正
            MalformedBuffer: バッファ長が一致しない
        """
        if not isinstance(request.pixels, BYTES_LIKE):
            raise MissingImageData()

        width, height = request.width, request.height
        if not (is_valid_dimension(width) and is_valid_dimension(height)):
            raise InvalidDimensions()

        if len(request.pixels) == 0:
            raise MissingImageData()

        expected = expected_buffer_length(width, height)
        if len(request.pixels) != expected:
            raise MalformedBuffer(
                f"Expected {expected} bytes for {width}x{height} YUV420SP frame, "
                f"got {len(request.pixels)}"
            )

    def decode(self, pixels: bytes, width: int, height: int) -> np.ndarray:
        """YUV420SPバッファから輝度面（height x width）を取り出す"""
        yuv = np.frombuffer(pixels, dtype=np.uint8).reshape(height + chroma_rows(height), width)
        return np.ascontiguousarray(yuv[:height])

    def blur(self, gray: np.ndarray) -> np.ndarray:
        """ガウシアンぼかし（境界は端の画素を複製）"""
        return cv2.GaussianBlur(gray, self.kernel_size, self.sigma, borderType=self.border_type)

    def encode(self, gray: np.ndarray) -> bytes:
        """グレースケール画像をYUV420SPに戻す（クロマ面は中間値）"""
        height, width = gray.shape[:2]
        yuv = np.full((height + chroma_rows(height), width), self.neutral_chroma, dtype=np.uint8)
        yuv[:height] = gray
        return yuv.tobytes()

    def preprocess(self, request: FrameRequest) -> FrameResponse:
        """
        フレームを前処理

        Args:
            request: YUV420SPフレーム

        Returns:
            FrameResponse: ぼかし済みグレースケールのYUV420SPフレーム

        Raises:
            EnvironmentUnavailable: OpenCVが初期化できていない
            MissingImageData, InvalidDimensions, MalformedBuffer: リクエスト不正
            ProcessingFailure: 処理中の想定外エラー
        """
        environment.require_ready()
        self.validate(request)

        try:
            gray = self.decode(request.pixels, request.width, request.height)
            blurred = self.blur(gray)
            pixels = self.encode(blurred)
        except (cv2.error, ValueError, MemoryError) as e:
            logger.exception(f"前処理失敗: {request.width}x{request.height}")
            raise ProcessingFailure(str(e) or type(e).__name__) from e

        logger.debug(f"前処理完了: {request.width}x{request.height}, {len(pixels)} bytes")
        return FrameResponse(pixels=pixels, width=request.width, height=request.height)


_default_preprocessor = FramePreprocessor()


def preprocess(request: FrameRequest) -> FrameResponse:
    """既定設定の FramePreprocessor で前処理"""
    return _default_preprocessor.preprocess(request)
