import hashlib
import io
import logging
from dataclasses import dataclass

from PIL import Image

from app.core.config import settings

logger = logging.getLogger(__name__)


@dataclass
class NormalizedImage:
    content: bytes
    format: str | None
    width: int
    height: int
    resized: bool = False


def fingerprint(content: bytes) -> str:
    """업로드될 바이트의 SHA-256 hex digest. 중복 판정 키로 사용합니다."""
    return hashlib.sha256(content).hexdigest()


def target_size(width: int, height: int, max_dimension: int) -> tuple[int, int]:
    longest = max(width, height)
    if longest <= max_dimension:
        return width, height

    scale = max_dimension / longest
    if width >= height:
        return max_dimension, max(1, round(height * scale))
    return max(1, round(width * scale)), max_dimension


def normalize_image(
    content: bytes,
    max_dimension: int | None = None,
    quality: int | None = None,
) -> NormalizedImage:
    """큰 이미지를 축소하고 원본 포맷으로 재인코딩합니다.

    어떤 이유로든 실패하면 원본 바이트를 그대로 돌려줍니다.
    """
    max_dimension = max_dimension or settings.MAX_IMAGE_DIMENSION
    quality = quality or settings.IMAGE_QUALITY

    try:
        with Image.open(io.BytesIO(content)) as img:
            fmt = img.format
            width, height = img.size
            new_width, new_height = target_size(width, height, max_dimension)
            resized = (new_width, new_height) != (width, height)

            if resized:
                logger.info(f"Resizing {fmt} image {width}x{height} -> {new_width}x{new_height}")
                out = img.resize((new_width, new_height), Image.Resampling.LANCZOS)
            else:
                out = img

            buffer = io.BytesIO()
            # 방향(Orientation) 태그와 색 프로파일은 그대로 옮깁니다
            save_options = {"format": fmt, "quality": quality}
            if img.info.get("exif"):
                save_options["exif"] = img.info["exif"]
            if img.info.get("icc_profile"):
                save_options["icc_profile"] = img.info["icc_profile"]
            out.save(buffer, **save_options)
    except Exception as e:
        logger.warning(f"Image normalization failed, uploading original bytes: {e}")
        return NormalizedImage(content=content, format=None, width=0, height=0)

    return NormalizedImage(
        content=buffer.getvalue(),
        format=fmt,
        width=new_width,
        height=new_height,
        resized=resized,
    )
