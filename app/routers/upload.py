from fastapi import APIRouter, Depends, File, UploadFile

from app.core.deps import get_current_admin, get_db, get_media_client
from app.core.media import MediaClient
from app.schemas.common import ErrorResponse
from app.schemas.upload import CloudinaryPingResponse, UploadResult
from app.services import upload_service

router = APIRouter(prefix="/api/upload", tags=["Upload"])


@router.get(
    "/test-cloudinary",
    response_model=CloudinaryPingResponse,
    summary="Cloudinary 연결 확인",
    description="미디어 호스트에 ping을 보내 연결 상태를 확인합니다.",
    responses={
        500: {"model": ErrorResponse, "description": "Cloudinary 연결 실패 (UPLOAD_005)"},
    },
)
async def test_cloudinary(media: MediaClient = Depends(get_media_client)):
    return await upload_service.ping_media_host(media)


@router.post(
    "/photo",
    response_model=list[UploadResult],
    summary="사진 업로드",
    description="최대 10장의 이미지를 업로드합니다. 큰 이미지는 3000px 이하로 축소되며, "
    "이미 등록된 콘텐츠는 다시 업로드하지 않고 reused=true로 반환합니다. "
    "결과 배열은 요청한 파일 순서와 같고 파일별 성공/실패를 포함합니다.",
    responses={
        400: {"model": ErrorResponse, "description": "파일 없음/개수 초과 (UPLOAD_001, UPLOAD_002)"},
        415: {"model": ErrorResponse, "description": "지원하지 않는 파일 형식 (UPLOAD_003)"},
        500: {"model": ErrorResponse, "description": "모든 파일 업로드 실패 (UPLOAD_004)"},
    },
)
async def upload_photo(
    files: list[UploadFile] | None = File(default=None),
    current_admin=Depends(get_current_admin),
    db=Depends(get_db),
    media: MediaClient = Depends(get_media_client),
):
    return await upload_service.upload_photos(db, media, files)
