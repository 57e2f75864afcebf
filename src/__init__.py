"""
src パッケージ
再利用可能なモジュールを提供
"""

from src.vision import FramePreprocessor, PreprocessingChannel

__all__ = ['FramePreprocessor', 'PreprocessingChannel']
