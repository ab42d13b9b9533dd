from typing import Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from app.core.config import settings
from app.core.media import MediaClient
from app.core.security import decode_access_token

security_scheme = HTTPBearer(auto_error=False)

_db = None
_media_client = None


def get_prisma():
    """Prisma 클라이언트는 처음 사용할 때 생성합니다."""
    global _db
    if _db is None:
        from prisma import Prisma

        _db = Prisma()
    return _db


async def get_db():
    return get_prisma()


def get_media_client() -> MediaClient:
    global _media_client
    if _media_client is None:
        _media_client = MediaClient(
            cloud_name=settings.CLOUDINARY_CLOUD_NAME,
            api_key=settings.CLOUDINARY_API_KEY,
            api_secret=settings.CLOUDINARY_API_SECRET,
            folder=settings.CLOUDINARY_FOLDER,
            timeout=settings.CLOUDINARY_TIMEOUT_SECONDS,
            thumbnail_size=settings.THUMBNAIL_SIZE,
        )
    return _media_client


async def get_current_admin(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security_scheme),
    database=Depends(get_db),
):
    if not credentials or not credentials.credentials:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail={"code": "AUTH_003", "message": "No token provided"},
        )

    admin_id = decode_access_token(credentials.credentials)
    if admin_id is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail={"code": "AUTH_003", "message": "Invalid token"},
        )

    admin = await database.admin.find_unique(where={"id": admin_id})
    if admin is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail={"code": "AUTH_001", "message": "Admin not found"},
        )

    return admin
