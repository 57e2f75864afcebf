import pytest

from src.vision import environment


@pytest.fixture(autouse=True)
def reset_environment():
    """テストごとにOpenCV初期化状態を破棄"""
    environment.reset()
    yield
    environment.reset()
