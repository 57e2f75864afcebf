"""前処理エラー定義"""
from typing import Optional

from .constants import ErrorCode


class PreprocessError(Exception):
    """前処理エラーの基底クラス"""

    error_code: ErrorCode = ErrorCode.OPENCV_ERROR

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.error_code.message
        super().__init__(self.message)

    @property
    def code(self) -> str:
        return self.error_code.code


class EnvironmentUnavailable(PreprocessError):
    """OpenCVが初期化されていない・利用できない"""
    error_code = ErrorCode.OPENCV_INIT


class InvalidDimensions(PreprocessError):
    """幅・高さが未指定、0以下、または整数でない"""
    error_code = ErrorCode.INVALID_DIMENSIONS


class MissingImageData(PreprocessError):
    """画像データが未指定または空"""
    error_code = ErrorCode.INVALID_IMAGE


class MalformedBuffer(PreprocessError):
    """バッファ長が幅・高さから求めた長さと一致しない"""
    error_code = ErrorCode.MALFORMED_BUFFER


class ProcessingFailure(PreprocessError):
    """デコード・ぼかし・エンコード中の想定外エラー"""
    error_code = ErrorCode.OPENCV_ERROR
