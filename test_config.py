"""設定・ロガーのテスト"""
import logging

from shared.config import Config, load_config
from shared.logger import setup_logger


def test_yaml_values(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text("service:\n  name: demo\n  port: 9000\npreprocess:\n  eager_init: false\n", encoding="utf-8")
    config = Config(str(path))
    assert config.get("service.name") == "demo"
    assert config.get_int("service.port") == 9000
    assert config.get_bool("preprocess.eager_init", True) is False
    assert config.get("service.missing", "x") == "x"
    assert config.get("service.name.deeper", "d") == "d"


def test_env_overrides_yaml(monkeypatch):
    config = Config(data={"preprocess": {"max_frame_bytes": 100, "eager_init": False}})
    monkeypatch.setenv("PREPROCESS_MAX_FRAME_BYTES", "2048")
    monkeypatch.setenv("PREPROCESS_EAGER_INIT", "yes")
    assert config.get_int("preprocess.max_frame_bytes") == 2048
    assert config.get_bool("preprocess.eager_init") is True


def test_get_int_fallback():
    config = Config(data={"service": {"port": "abc"}})
    assert config.get_int("service.port", 8003) == 8003


def test_missing_file():
    config = Config("/nonexistent/config.yaml")
    assert config.config_data == {}


def test_load_preprocessor_config():
    config = load_config("preprocessor")
    assert config.get("service.name") == "preprocessor"
    assert config.get_int("preprocess.max_frame_bytes") > 0


def test_setup_logger_does_not_duplicate_handlers(tmp_path):
    first = setup_logger("test-preprocessor", "DEBUG", str(tmp_path))
    second = setup_logger("test-preprocessor", "INFO")
    assert first is second
    assert len(second.handlers) == 2
    assert second.level == logging.INFO
    assert (tmp_path / "test-preprocessor.log").exists()
