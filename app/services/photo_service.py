import logging
from typing import TYPE_CHECKING

from fastapi import HTTPException, status
from prisma.errors import UniqueViolationError

from app.core.media import MediaClient
from app.schemas.photo import PhotoCreateRequest, PhotoUpdateRequest

if TYPE_CHECKING:
    from prisma import Prisma

logger = logging.getLogger(__name__)


async def find_by_fingerprint(db: "Prisma", fingerprint: str):
    """같은 콘텐츠로 이미 등록된 사진을 찾습니다."""
    return await db.photo.find_first(where={"fingerprint": fingerprint})


async def _get_or_404(db: "Prisma", photo_id: str):
    photo = await db.photo.find_unique(where={"id": photo_id})
    if photo is None:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail={"code": "PHOTO_001", "message": "Photo not found"},
        )
    return photo


async def list_photos(db: "Prisma", category: str | None = None, search: str | None = None):
    where: dict = {}
    if category:
        where["categoryId"] = category
    if search:
        where["OR"] = [
            {"title": {"contains": search, "mode": "insensitive"}},
            {"tags": {"has": search.strip().lower()}},
        ]
    return await db.photo.find_many(where=where, order={"createdAt": "desc"})


async def get_photo(db: "Prisma", photo_id: str):
    return await _get_or_404(db, photo_id)


def _duplicate_content(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_409_CONFLICT,
        detail={"code": "PHOTO_002", "message": f"A photo with this content already exists ({detail})"},
    )


async def create_photo(db: "Prisma", data: PhotoCreateRequest):
    # 지문이 있는 경우 먼저 등록된 사진이 우선합니다
    if data.fingerprint is not None:
        existing = await find_by_fingerprint(db, data.fingerprint)
        if existing:
            raise _duplicate_content(existing.id)

    try:
        photo = await db.photo.create(data=data.model_dump())
    except UniqueViolationError:
        # 조회와 저장 사이에 같은 지문이 먼저 저장된 경우
        logger.warning(f"Concurrent create lost the fingerprint race for {data.publicId}")
        raise _duplicate_content(data.fingerprint or data.publicId)

    logger.info(f"Photo {photo.id} created from {data.publicId}")
    return photo


async def update_photo(db: "Prisma", photo_id: str, data: PhotoUpdateRequest):
    await _get_or_404(db, photo_id)

    update_data: dict = {}
    if data.title is not None:
        update_data["title"] = data.title
    if data.description is not None:
        update_data["description"] = data.description
    if data.tags is not None:
        update_data["tags"] = data.tags
    if data.categoryId is not None:
        update_data["categoryId"] = data.categoryId

    if not update_data:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail={"code": "PHOTO_003", "message": "Nothing to update"},
        )

    return await db.photo.update(where={"id": photo_id}, data=update_data)


async def delete_photo(db: "Prisma", media: MediaClient, photo_id: str) -> None:
    photo = await _get_or_404(db, photo_id)
    await db.photo.delete(where={"id": photo_id})

    try:
        await media.destroy(photo.publicId)
    except Exception as e:
        logger.error(f"Failed to delete remote asset {photo.publicId}: {e}")
