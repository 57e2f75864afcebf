"""
前処理パイプラインの定数定義

ホスト側（カメラアプリ）とのインターフェースに現れる値をまとめる。
"""
from enum import Enum

import cv2

# メソッドチャネル
CHANNEL_NAME = "opencv/preprocessing"
METHOD_PREPROCESS_IMAGE = "preprocessImage"

# ガウシアンぼかし
BLUR_KERNEL_SIZE = (5, 5)
BLUR_SIGMA = 0.0  # 0 = カーネルサイズから自動算出
BLUR_BORDER_TYPE = cv2.BORDER_REPLICATE

# 出力クロマ面の中間値（色情報なし）
NEUTRAL_CHROMA = 128


class ErrorCode(Enum):
    """エラーコード定義（コード文字列, 既定メッセージ）"""
    OPENCV_INIT = ("OPENCV_INIT", "Failed to initialize OpenCV")
    INVALID_DIMENSIONS = ("INVALID_DIMENSIONS", "Width or height not provided")
    INVALID_IMAGE = ("INVALID_IMAGE", "No image data provided")
    MALFORMED_BUFFER = ("MALFORMED_BUFFER", "Image buffer length does not match dimensions")
    OPENCV_ERROR = ("OPENCV_ERROR", "Image processing failed")

    def __init__(self, code: str, message: str):
        self._code = code
        self._message = message

    @property
    def code(self) -> str:
        return self._code

    @property
    def message(self) -> str:
        return self._message
