"""設定管理モジュール"""
import os
import yaml
from typing import Optional, Dict, Any
from pathlib import Path


class Config:
    """YAML設定ファイルと環境変数をまとめて扱う設定クラス"""

    def __init__(self, config_path: Optional[str] = None, data: Optional[Dict[str, Any]] = None):
        """
        Args:
            config_path: 設定ファイルのパス（YAML形式）
            data: 直接与える設定値（config_pathより優先）
        """
        self.config_path = config_path
        self.config_data: Dict[str, Any] = {}
        if data is not None:
            self.config_data = data
        elif config_path and Path(config_path).exists():
            with open(config_path, 'r', encoding='utf-8') as f:
                self.config_data = yaml.safe_load(f) or {}

    def get(self, key: str, default: Any = None) -> Any:
        """設定値を取得（環境変数を優先）"""
        # preprocess.max_frame_bytes -> PREPROCESS_MAX_FRAME_BYTES
        env_value = os.getenv(key.upper().replace('.', '_'))
        if env_value is not None:
            return env_value

        value: Any = self.config_data
        for k in key.split('.'):
            if not isinstance(value, dict):
                return default
            value = value.get(k)
        return value if value is not None else default

    def get_int(self, key: str, default: int = 0) -> int:
        """整数値を取得"""
        value = self.get(key, default)
        try:
            return int(value)
        except (ValueError, TypeError):
            return default

    def get_bool(self, key: str, default: bool = False) -> bool:
        """真偽値を取得"""
        value = self.get(key, default)
        if isinstance(value, bool):
            return value
        if isinstance(value, str):
            return value.lower() in ('true', '1', 'yes', 'on')
        return default


def load_config(service_name: str) -> Config:
    """services/<service_name>/config.yaml をロード"""
    config_path = Path(__file__).parent.parent / "services" / service_name / "config.yaml"
    return Config(str(config_path) if config_path.exists() else None)
