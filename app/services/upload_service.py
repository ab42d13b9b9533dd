import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from fastapi import HTTPException, UploadFile, status
from starlette.concurrency import run_in_threadpool

from app.core.config import settings
from app.core.media import MediaClient
from app.schemas.upload import UploadFailure, UploadSuccess
from app.services import photo_service
from app.services.image_service import fingerprint, normalize_image

if TYPE_CHECKING:
    from prisma import Prisma

logger = logging.getLogger(__name__)


@dataclass
class UploadItem:
    filename: str
    content_type: str
    content: bytes

    @property
    def size(self) -> int:
        return len(self.content)


def _get_extension(filename: str) -> str:
    return filename.rsplit(".", 1)[-1].lower() if "." in filename else ""


def validate_batch(files: list[UploadFile] | None) -> list[UploadFile]:
    """배치 전체를 검증합니다. 파일 하나라도 허용되지 않으면 요청 전체가 실패합니다."""
    if not files:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={"code": "UPLOAD_001", "message": "No files uploaded"},
        )

    if len(files) > settings.MAX_UPLOAD_FILES:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={
                "code": "UPLOAD_002",
                "message": f"Too many files: at most {settings.MAX_UPLOAD_FILES} per upload",
            },
        )

    for file in files:
        filename = file.filename or ""
        ext = _get_extension(filename)
        content_type = (file.content_type or "").lower()
        if content_type not in settings.ALLOWED_IMAGE_TYPES.get(ext, set()):
            raise HTTPException(
                status_code=status.HTTP_415_UNSUPPORTED_MEDIA_TYPE,
                detail={
                    "code": "UPLOAD_003",
                    "message": f"Unsupported file type: {filename} ({content_type or 'unknown'}). "
                    f"Allowed: {', '.join(sorted(settings.ALLOWED_IMAGE_TYPES))}",
                },
            )

    return files


async def _read_item(file: UploadFile) -> UploadItem:
    content = await file.read()
    return UploadItem(
        filename=file.filename or "",
        content_type=file.content_type or "",
        content=content,
    )


async def process_file(db: "Prisma", media: MediaClient, index: int, item: UploadItem):
    """파일 하나를 정규화 → 해시 → 중복 확인 → 업로드 순서로 처리합니다."""
    normalized = await run_in_threadpool(normalize_image, item.content)
    fp = fingerprint(normalized.content)

    existing = await photo_service.find_by_fingerprint(db, fp)
    if existing:
        logger.info(f"Duplicate content for {item.filename}, reusing photo {existing.id}")
        return UploadSuccess(
            fileIndex=index,
            filename=item.filename,
            url=existing.url,
            publicId=existing.publicId,
            width=existing.width,
            height=existing.height,
            thumbnail=existing.thumbnailUrl,
            fingerprint=fp,
            reused=True,
        )

    asset = await media.upload(normalized.content, item.filename)
    return UploadSuccess(
        fileIndex=index,
        filename=item.filename,
        url=asset.url,
        publicId=asset.public_id,
        width=asset.width,
        height=asset.height,
        thumbnail=asset.thumbnail,
        fingerprint=fp,
        reused=False,
    )


async def upload_photos(db: "Prisma", media: MediaClient, files: list[UploadFile] | None) -> list:
    files = validate_batch(files)
    logger.info(f"Upload request received: {len(files)} files")

    # 원격 서비스 부하를 제한하기 위해 파일을 하나씩 처리합니다
    results: list[UploadSuccess | UploadFailure] = []
    for index, file in enumerate(files):
        filename = file.filename or ""
        try:
            item = await _read_item(file)
            results.append(await process_file(db, media, index, item))
        except Exception as e:
            logger.error(f"Upload failed for file {index} ({filename}): {e}")
            results.append(UploadFailure(fileIndex=index, filename=filename, error=str(e)))

    if not any(isinstance(r, UploadSuccess) for r in results):
        causes = "; ".join(f"{r.filename}: {r.error}" for r in results)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail={"code": "UPLOAD_004", "message": f"All uploads failed: {causes}"},
        )

    return results


async def ping_media_host(media: MediaClient) -> dict:
    try:
        result = await media.ping()
    except Exception as e:
        logger.error(f"Cloudinary test failed: {e}")
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            detail={"code": "UPLOAD_005", "message": f"Cloudinary connection failed: {e}"},
        )
    return {"status": "Cloudinary connected", "result": result}
