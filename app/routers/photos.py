from typing import Optional

from fastapi import APIRouter, Depends, Query, Response, status

from app.core.deps import get_current_admin, get_db, get_media_client
from app.core.media import MediaClient
from app.schemas.common import ErrorResponse, SuccessResponse
from app.schemas.photo import PhotoCreateRequest, PhotoResponse, PhotoUpdateRequest
from app.services import photo_service

router = APIRouter(prefix="/api/photos", tags=["Photos"])


@router.get(
    "",
    response_model=SuccessResponse[list[PhotoResponse]],
    summary="사진 목록",
    description="최신순으로 사진을 조회합니다. category로 카테고리를, search로 제목/태그를 필터링합니다.",
)
async def list_photos(
    category: Optional[str] = Query(default=None),
    search: Optional[str] = Query(default=None),
    db=Depends(get_db),
):
    photos = await photo_service.list_photos(db, category=category, search=search)
    return SuccessResponse(data=[PhotoResponse.model_validate(p) for p in photos])


@router.get(
    "/{photo_id}",
    response_model=SuccessResponse[PhotoResponse],
    summary="사진 상세",
    responses={
        404: {"model": ErrorResponse, "description": "사진 없음 (PHOTO_001)"},
    },
)
async def get_photo(photo_id: str, db=Depends(get_db)):
    photo = await photo_service.get_photo(db, photo_id)
    return SuccessResponse(data=PhotoResponse.model_validate(photo))


@router.post(
    "",
    response_model=SuccessResponse[PhotoResponse],
    status_code=status.HTTP_201_CREATED,
    summary="사진 등록",
    description="업로드 결과(url, publicId, fingerprint 등)로 사진을 등록합니다.",
    responses={
        409: {"model": ErrorResponse, "description": "같은 콘텐츠의 사진이 이미 존재 (PHOTO_002)"},
    },
)
async def create_photo(
    data: PhotoCreateRequest,
    current_admin=Depends(get_current_admin),
    db=Depends(get_db),
):
    photo = await photo_service.create_photo(db, data)
    return SuccessResponse(data=PhotoResponse.model_validate(photo))


@router.put(
    "/{photo_id}",
    response_model=SuccessResponse[PhotoResponse],
    summary="사진 수정",
    description="제목, 설명, 태그, 카테고리를 수정합니다.",
    responses={
        400: {"model": ErrorResponse, "description": "수정할 내용 없음 (PHOTO_003)"},
        404: {"model": ErrorResponse, "description": "사진 없음 (PHOTO_001)"},
    },
)
async def update_photo(
    photo_id: str,
    data: PhotoUpdateRequest,
    current_admin=Depends(get_current_admin),
    db=Depends(get_db),
):
    photo = await photo_service.update_photo(db, photo_id, data)
    return SuccessResponse(data=PhotoResponse.model_validate(photo))


@router.delete(
    "/{photo_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="사진 삭제",
    description="사진 레코드와 Cloudinary 원본을 삭제합니다.",
    responses={
        404: {"model": ErrorResponse, "description": "사진 없음 (PHOTO_001)"},
    },
)
async def delete_photo(
    photo_id: str,
    current_admin=Depends(get_current_admin),
    db=Depends(get_db),
    media: MediaClient = Depends(get_media_client),
):
    await photo_service.delete_photo(db, media, photo_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
