"""共通データスキーマ（Pydantic）"""
from typing import Optional, Dict, Any, Literal
from pydantic import BaseModel, Field
from datetime import datetime


# ===== メソッドチャネル関連 =====
class MethodCallRequest(BaseModel):
    """メソッド呼び出しリクエスト（imageはBase64文字列）"""
    method: str
    arguments: Dict[str, Any] = Field(default_factory=dict)


class ChannelError(BaseModel):
    """タグ付きエラー"""
    code: str
    message: str
    details: Optional[Any] = None


class ChannelResponse(BaseModel):
    """メソッド呼び出しの結果"""
    status: Literal["success", "error", "not_implemented"]
    result: Optional[str] = Field(default=None, description="処理済みフレーム（Base64）")
    error: Optional[ChannelError] = None


# ===== 共通 =====
class HealthCheck(BaseModel):
    """ヘルスチェックレスポンス"""
    service: str
    status: str  # "healthy", "degraded", "unhealthy"
    version: str
    timestamp: datetime
    opencv_version: Optional[str] = None
