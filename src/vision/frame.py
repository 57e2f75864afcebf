"""
フレームデータ定義

YUV420SP（NV21）形式のフレーム:
    - 輝度面（Y）: width * height バイト
    - クロマ面（VU交互）: width * (height // 2) バイト
"""
from dataclasses import dataclass
from typing import Any, Mapping

from .errors import InvalidDimensions, MissingImageData

BYTES_LIKE = (bytes, bytearray, memoryview)


def chroma_rows(height: int) -> int:
    """クロマ面の行数"""
    return height // 2


def expected_buffer_length(width: int, height: int) -> int:
    """幅・高さから求めたYUV420SPバッファ長"""
    return width * (height + chroma_rows(height))


def is_valid_dimension(value: Any) -> bool:
    # boolはintのサブクラスなので除外
    return isinstance(value, int) and not isinstance(value, bool) and value > 0


@dataclass(frozen=True)
class FrameRequest:
    """前処理リクエスト"""
    pixels: bytes
    width: int
    height: int

    @property
    def expected_length(self) -> int:
        return expected_buffer_length(self.width, self.height)

    @classmethod
    def from_arguments(cls, arguments: Mapping[str, Any]) -> "FrameRequest":
        """
        呼び出し引数（image, width, height）から生成

        型が合わない値は未指定と同じ扱いにする。
        検証順: imageの有無・型 → width/height → imageが空でないか

        Raises:
            MissingImageData: imageが未指定・空・バイト列でない
            InvalidDimensions: width/heightが未指定・0以下・整数でない
        """
        image = arguments.get("image")
        if not isinstance(image, BYTES_LIKE):
            raise MissingImageData()

        width = arguments.get("width")
        height = arguments.get("height")
        if not (is_valid_dimension(width) and is_valid_dimension(height)):
            raise InvalidDimensions()

        if len(image) == 0:
            raise MissingImageData()

        return cls(pixels=bytes(image), width=width, height=height)


@dataclass(frozen=True)
class FrameResponse:
    """前処理結果（YUV420SP、クロマ面は中間値）"""
    pixels: bytes
    width: int
    height: int

    @property
    def luma_plane(self) -> bytes:
        return self.pixels[:self.width * self.height]

    @property
    def chroma_plane(self) -> bytes:
        return self.pixels[self.width * self.height:]

    def __len__(self) -> int:
        return len(self.pixels)
