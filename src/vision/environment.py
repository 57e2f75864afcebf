"""
OpenCV実行環境の初期化

プロセス起動時（または最初のリクエスト時）に一度だけ確認し、結果を保持する。
初期化に失敗した場合は以降のリクエストも EnvironmentUnavailable とする。
"""
import logging
import threading
from dataclasses import dataclass
from typing import Optional

import cv2
import numpy as np

from .constants import BLUR_BORDER_TYPE, BLUR_KERNEL_SIZE, BLUR_SIGMA
from .errors import EnvironmentUnavailable

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EnvironmentStatus:
    """初期化結果"""
    ready: bool
    opencv_version: Optional[str] = None
    error: Optional[str] = None


_lock = threading.Lock()
_status: Optional[EnvironmentStatus] = None


def _probe() -> str:
    """OpenCVが使えるか小さな画像で確認し、バージョンを返す"""
    version = cv2.__version__
    sample = np.zeros((BLUR_KERNEL_SIZE[1], BLUR_KERNEL_SIZE[0]), dtype=np.uint8)
    cv2.GaussianBlur(sample, BLUR_KERNEL_SIZE, BLUR_SIGMA, borderType=BLUR_BORDER_TYPE)
    return version


def initialize() -> EnvironmentStatus:
    """
    OpenCVを初期化（2回目以降は保持した結果を返す）

    Returns:
        EnvironmentStatus: 初期化成功時のステータス

    Raises:
        EnvironmentUnavailable: 初期化に失敗した場合
    """
    global _status
    with _lock:
        if _status is None:
            try:
                version = _probe()
            except (cv2.error, AttributeError, RuntimeError, ImportError) as e:
                logger.error(f"OpenCV初期化失敗: {e}")
                _status = EnvironmentStatus(ready=False, error=str(e))
            else:
                logger.info(f"OpenCV初期化完了: version={version}")
                _status = EnvironmentStatus(ready=True, opencv_version=version)
        status = _status

    if not status.ready:
        raise EnvironmentUnavailable()
    return status


def require_ready() -> EnvironmentStatus:
    """初期化済みであることを確認（未初期化なら初期化する）"""
    return initialize()


def is_ready() -> bool:
    """初期化に成功しているか（初期化は行わない）"""
    status = _status
    return status is not None and status.ready


def current_status() -> Optional[EnvironmentStatus]:
    return _status


def reset() -> None:
    """保持している初期化結果を破棄"""
    global _status
    with _lock:
        _status = None
