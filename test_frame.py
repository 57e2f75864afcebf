"""FrameRequest / FrameResponse のテスト"""
import pytest

from src.vision import (
    FrameRequest,
    FrameResponse,
    InvalidDimensions,
    MissingImageData,
    expected_buffer_length,
)


def test_from_arguments():
    request = FrameRequest.from_arguments({"image": bytearray(24), "width": 4, "height": 4})
    assert request.pixels == bytes(24)
    assert isinstance(request.pixels, bytes)
    assert (request.width, request.height) == (4, 4)
    assert request.expected_length == 24


def test_from_arguments_accepts_memoryview():
    request = FrameRequest.from_arguments({"image": memoryview(b"\x01" * 6), "width": 2, "height": 2})
    assert request.pixels == b"\x01" * 6


@pytest.mark.parametrize("image", [None, b"", "not bytes", 123, [1, 2, 3]])
def test_from_arguments_missing_image(image):
    with pytest.raises(MissingImageData) as excinfo:
        FrameRequest.from_arguments({"image": image, "width": 4, "height": 4})
    assert excinfo.value.message == "No image data provided"


def test_from_arguments_without_image_key():
    with pytest.raises(MissingImageData):
        FrameRequest.from_arguments({"width": 4, "height": 4})


@pytest.mark.parametrize(
    "arguments",
    [
        {"width": 4},
        {"height": 4},
        {},
        {"width": 0, "height": 4},
        {"width": 4, "height": -1},
        {"width": "4", "height": 4},
        {"width": 4.0, "height": 4},
        {"width": True, "height": 4},
    ],
)
def test_from_arguments_invalid_dimensions(arguments):
    with pytest.raises(InvalidDimensions) as excinfo:
        FrameRequest.from_arguments({"image": b"\x00" * 24, **arguments})
    assert excinfo.value.code == "INVALID_DIMENSIONS"
    assert excinfo.value.message == "Width or height not provided"


def test_absent_image_checked_before_dimensions():
    with pytest.raises(MissingImageData):
        FrameRequest.from_arguments({"width": 0, "height": 0})


@pytest.mark.parametrize("width,height", [(0, 4), (4, 0), (None, None)])
def test_empty_image_with_bad_dimensions(width, height):
    with pytest.raises(InvalidDimensions):
        FrameRequest.from_arguments({"image": b"", "width": width, "height": height})


@pytest.mark.parametrize("width,height,expected", [(4, 4, 24), (640, 480, 460800), (3, 3, 12), (2, 1, 2)])
def test_expected_buffer_length(width, height, expected):
    assert expected_buffer_length(width, height) == expected


def test_response_planes():
    response = FrameResponse(pixels=bytes(range(6)), width=2, height=2)
    assert response.luma_plane == bytes([0, 1, 2, 3])
    assert response.chroma_plane == bytes([4, 5])
    assert len(response) == 6
