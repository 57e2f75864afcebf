"""Preprocessor Service - カメラフレームの前処理（グレースケール＋ぼかし）"""
import sys
import base64
import binascii
from pathlib import Path
from datetime import datetime
from typing import Optional

# 親ディレクトリをパスに追加
sys.path.insert(0, str(Path(__file__).parent.parent.parent))

from fastapi import FastAPI, HTTPException, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import Response
from fastapi.middleware.cors import CORSMiddleware

from shared.config import load_config
from shared.logger import setup_logger
from shared.schemas import ChannelError, ChannelResponse, HealthCheck, MethodCallRequest
from src.vision import (
    CHANNEL_NAME,
    EnvironmentUnavailable,
    ErrorCode,
    FramePreprocessor,
    FrameRequest,
    MethodCall,
    PreprocessError,
    PreprocessingChannel,
    ResultStatus,
    environment,
)


# 設定とロガーの初期化
config = load_config("preprocessor")
logger = setup_logger(
    service_name=config.get("service.name", "preprocessor"),
    log_level=config.get("logging.level", "INFO"),
    log_dir=config.get("logging.directory")
)
# src.vision 側のログも同じ出力先へ
setup_logger(
    service_name="src.vision",
    log_level=config.get("logging.level", "INFO"),
    log_dir=config.get("logging.directory")
)

# FastAPIアプリ
app = FastAPI(title="Preprocessor Service", version=config.get("service.version", "1.0.0"))

# CORS設定
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

MAX_FRAME_BYTES = config.get_int("preprocess.max_frame_bytes", 4096 * 3072 * 3 // 2)

preprocessor = FramePreprocessor()
channel = PreprocessingChannel(preprocessor)

# エラーコード → HTTPステータス
HTTP_STATUS = {
    ErrorCode.OPENCV_INIT.code: 503,
    ErrorCode.INVALID_DIMENSIONS.code: 400,
    ErrorCode.INVALID_IMAGE.code: 400,
    ErrorCode.MALFORMED_BUFFER.code: 400,
    ErrorCode.OPENCV_ERROR.code: 500,
}


@app.on_event("startup")
async def startup_event():
    """起動時処理"""
    logger.info("Preprocessor Service起動")
    if config.get_bool("preprocess.eager_init", True):
        try:
            status = channel.initialize()
            logger.info(f"OpenCV準備完了: {status.opencv_version}")
        except EnvironmentUnavailable as e:
            # 起動は継続し、各リクエストで OPENCV_INIT を返す
            logger.error(f"OpenCV初期化エラー: {e}")


@app.on_event("shutdown")
async def shutdown_event():
    """終了時処理"""
    logger.info("Preprocessor Service終了")


@app.get("/health", response_model=HealthCheck)
async def health_check():
    """ヘルスチェック"""
    status = environment.current_status()
    return HealthCheck(
        service=config.get("service.name", "preprocessor"),
        status="healthy" if environment.is_ready() else "degraded",
        version=config.get("service.version", "1.0.0"),
        timestamp=datetime.now(),
        opencv_version=status.opencv_version if status else None
    )


def _decode_image_argument(value):
    """Base64文字列をバイト列に変換（不正な値は画像なしとして扱う）"""
    if not isinstance(value, str):
        return None
    try:
        return base64.b64decode(value, validate=True)
    except (binascii.Error, ValueError):
        return None


def _check_frame_size(size: int) -> None:
    if size > MAX_FRAME_BYTES:
        raise HTTPException(status_code=413, detail=f"フレームが大きすぎます（最大 {MAX_FRAME_BYTES} bytes）")


# 同期関数として定義（FastAPIがスレッドプールで実行）
@app.post(f"/channel/{CHANNEL_NAME}", response_model=ChannelResponse)
def invoke_channel(request: MethodCallRequest):
    """メソッドチャネル呼び出し（imageはBase64）"""
    arguments = dict(request.arguments)
    if "image" in arguments:
        arguments["image"] = _decode_image_argument(arguments["image"])
        if arguments["image"] is not None:
            _check_frame_size(len(arguments["image"]))

    result = channel.invoke(MethodCall(method=request.method, arguments=arguments))

    if result.status is ResultStatus.SUCCESS:
        return ChannelResponse(
            status=result.status.value,
            result=base64.b64encode(result.payload).decode('ascii')
        )
    if result.status is ResultStatus.ERROR:
        return ChannelResponse(
            status=result.status.value,
            error=ChannelError(code=result.code, message=result.message)
        )
    return ChannelResponse(status=result.status.value)


@app.post("/preprocess")
async def preprocess_raw(request: Request, width: Optional[int] = None, height: Optional[int] = None):
    """
    生のYUV420SPフレームを前処理

    ボディ: application/octet-stream、幅・高さはクエリパラメータ
    """
    body = await request.body()
    _check_frame_size(len(body))

    try:
        frame = FrameRequest.from_arguments({"image": body, "width": width, "height": height})
        result = await run_in_threadpool(preprocessor.preprocess, frame)
    except PreprocessError as e:
        logger.warning(f"前処理エラー: {e.code} {e.message}")
        raise HTTPException(
            status_code=HTTP_STATUS.get(e.code, 500),
            detail={"code": e.code, "message": e.message}
        )

    return Response(
        content=result.pixels,
        media_type="application/octet-stream",
        headers={"X-Frame-Width": str(result.width), "X-Frame-Height": str(result.height)}
    )


def main():
    """uvicornでサービスを起動"""
    import uvicorn
    uvicorn.run(
        app,
        host=config.get("service.host", "0.0.0.0"),
        port=config.get_int("service.port", 8003),
        log_level=str(config.get("logging.level", "info")).lower()
    )


if __name__ == "__main__":
    main()
