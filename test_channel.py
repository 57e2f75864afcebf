"""PreprocessingChannel のテスト"""
import pytest

from src.vision import (
    CHANNEL_NAME,
    ChannelResult,
    FramePreprocessor,
    MethodCall,
    NEUTRAL_CHROMA,
    PreprocessingChannel,
    ResultStatus,
    environment,
)


@pytest.fixture
def channel():
    return PreprocessingChannel()


def frame_arguments(width=4, height=4, value=60):
    return {"image": bytes([value]) * (width * height + width * (height // 2)), "width": width, "height": height}


def test_channel_name():
    assert PreprocessingChannel.name == CHANNEL_NAME == "opencv/preprocessing"


def test_preprocess_image_success(channel):
    result = channel.invoke(MethodCall("preprocessImage", frame_arguments()))
    assert result.is_success
    assert len(result.payload) == 24
    assert result.payload[:16] == bytes([60]) * 16
    assert result.payload[16:] == bytes([NEUTRAL_CHROMA]) * 8
    assert result.code is None


@pytest.mark.parametrize("method", ["preprocess", "PreprocessImage", "", "getVersion"])
def test_unknown_method_not_implemented(channel, method):
    result = channel.invoke(MethodCall(method, frame_arguments()))
    assert result.status is ResultStatus.NOT_IMPLEMENTED
    assert result.payload is None
    assert result.code is None


@pytest.mark.parametrize(
    "arguments,code",
    [
        ({"width": 4, "height": 4}, "INVALID_IMAGE"),
        ({"image": b"", "width": 4, "height": 4}, "INVALID_IMAGE"),
        ({"image": b"\x00" * 24}, "INVALID_DIMENSIONS"),
        ({"image": b"\x00" * 24, "width": 0, "height": 4}, "INVALID_DIMENSIONS"),
        ({"image": b"\x00" * 20, "width": 4, "height": 4}, "MALFORMED_BUFFER"),
    ],
)
def test_error_codes(channel, arguments, code):
    result = channel.invoke(MethodCall("preprocessImage", arguments))
    assert result.status is ResultStatus.ERROR
    assert result.code == code
    assert result.message
    assert result.payload is None


def test_opencv_init_error(monkeypatch, channel):
    def broken_probe():
        raise RuntimeError("no OpenCV")

    monkeypatch.setattr(environment, "_probe", broken_probe)
    result = channel.invoke(MethodCall("preprocessImage", frame_arguments()))
    assert result == ChannelResult.error("OPENCV_INIT", "Failed to initialize OpenCV")


def test_unexpected_exception_becomes_opencv_error(monkeypatch):
    preprocessor = FramePreprocessor()

    def broken(request):
        raise KeyError("lost plane")

    monkeypatch.setattr(preprocessor, "preprocess", broken)
    result = PreprocessingChannel(preprocessor).invoke(MethodCall("preprocessImage", frame_arguments()))
    assert result.status is ResultStatus.ERROR
    assert result.code == "OPENCV_ERROR"
    assert "lost plane" in result.message


def test_initialize(channel):
    status = channel.initialize()
    assert status.ready
    assert environment.is_ready()
