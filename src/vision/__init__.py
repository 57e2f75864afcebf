"""
画像前処理モジュール

カメラのYUV420SPフレームをグレースケール化・ぼかしして返す。

- FramePreprocessor: 前処理本体
- PreprocessingChannel: ホストアプリ向けメソッドチャネル
- environment: OpenCVの一回限りの初期化
"""
from . import environment
from .channel import ChannelResult, MethodCall, PreprocessingChannel, ResultStatus
from .constants import (
    BLUR_BORDER_TYPE,
    BLUR_KERNEL_SIZE,
    CHANNEL_NAME,
    ErrorCode,
    METHOD_PREPROCESS_IMAGE,
    NEUTRAL_CHROMA,
)
from .errors import (
    EnvironmentUnavailable,
    InvalidDimensions,
    MalformedBuffer,
    MissingImageData,
    PreprocessError,
    ProcessingFailure,
)
from .frame import FrameRequest, FrameResponse, expected_buffer_length
from .preprocessor import FramePreprocessor, preprocess

__all__ = [
    # 定数
    "BLUR_BORDER_TYPE",
    "BLUR_KERNEL_SIZE",
    "CHANNEL_NAME",
    "ErrorCode",
    "METHOD_PREPROCESS_IMAGE",
    "NEUTRAL_CHROMA",
    # エラー
    "PreprocessError",
    "EnvironmentUnavailable",
    "InvalidDimensions",
    "MissingImageData",
    "MalformedBuffer",
    "ProcessingFailure",
    # フレーム
    "FrameRequest",
    "FrameResponse",
    "expected_buffer_length",
    # 前処理
    "FramePreprocessor",
    "preprocess",
    "environment",
    # チャネル
    "MethodCall",
    "ChannelResult",
    "ResultStatus",
    "PreprocessingChannel",
]
