"""
メソッドチャネル（ホストアプリとの境界）

チャネル "opencv/preprocessing" で受け付けるメソッドは preprocessImage のみ。
呼び出しは必ず以下のいずれかで完了する:
    - success: 処理済みフレーム
    - error: エラーコード＋メッセージ
    - not_implemented: 未対応のメソッド
"""
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional

from . import environment
from .constants import CHANNEL_NAME, ErrorCode, METHOD_PREPROCESS_IMAGE
from .errors import PreprocessError
from .frame import FrameRequest
from .preprocessor import FramePreprocessor

logger = logging.getLogger(__name__)


class ResultStatus(Enum):
    SUCCESS = "success"
    ERROR = "error"
    NOT_IMPLEMENTED = "not_implemented"


@dataclass(frozen=True)
class MethodCall:
    """メソッド呼び出し"""
    method: str
    arguments: Dict[str, Any] = field(default_factory=dict)


@dataclass(frozen=True)
class ChannelResult:
    """メソッド呼び出しの結果"""
    status: ResultStatus
    payload: Optional[bytes] = None
    code: Optional[str] = None
    message: Optional[str] = None

    @classmethod
    def success(cls, payload: bytes) -> "ChannelResult":
        return cls(status=ResultStatus.SUCCESS, payload=payload)

    @classmethod
    def error(cls, code: str, message: str) -> "ChannelResult":
        return cls(status=ResultStatus.ERROR, code=code, message=message)

    @classmethod
    def not_implemented(cls) -> "ChannelResult":
        return cls(status=ResultStatus.NOT_IMPLEMENTED)

    @property
    def is_success(self) -> bool:
        return self.status is ResultStatus.SUCCESS


class PreprocessingChannel:
    """preprocessImage を FramePreprocessor に橋渡しする"""

    name = CHANNEL_NAME

    def __init__(self, preprocessor: Optional[FramePreprocessor] = None):
        self.preprocessor = preprocessor or FramePreprocessor()

    def initialize(self) -> environment.EnvironmentStatus:
        """起動時の初期化（失敗時は EnvironmentUnavailable）"""
        return environment.initialize()

    def invoke(self, call: MethodCall) -> ChannelResult:
        """
        メソッドを実行

        例外は送出せず、必ず ChannelResult を返す。
        """
        if call.method != METHOD_PREPROCESS_IMAGE:
            logger.debug(f"未対応のメソッド: {call.method}")
            return ChannelResult.not_implemented()

        try:
            request = FrameRequest.from_arguments(call.arguments)
            response = self.preprocessor.preprocess(request)
        except PreprocessError as e:
            logger.warning(f"{call.method} 失敗: {e.code} {e.message}")
            return ChannelResult.error(e.code, e.message)
        except Exception as e:
            logger.exception(f"{call.method} 想定外のエラー")
            return ChannelResult.error(ErrorCode.OPENCV_ERROR.code, str(e) or ErrorCode.OPENCV_ERROR.message)

        return ChannelResult.success(response.pixels)
