from typing import TYPE_CHECKING

from fastapi import HTTPException, status

from app.core.security import create_access_token, hash_password, verify_password

if TYPE_CHECKING:
    from prisma import Prisma


def _invalid_credentials() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail={"code": "AUTH_001", "message": "Invalid email or password"},
    )


async def login(db: "Prisma", email: str, password: str) -> dict:
    admin = await db.admin.find_unique(where={"email": email})
    if not admin:
        raise _invalid_credentials()

    if not verify_password(password, admin.passwordHash):
        raise _invalid_credentials()

    return {
        "admin": admin,
        "accessToken": create_access_token(subject=admin.id, email=admin.email),
    }


async def upsert_admin(db: "Prisma", email: str, password: str, name: str):
    """기본 관리자 계정을 만들거나 비밀번호를 갱신합니다."""
    password_hash = hash_password(password)
    existing = await db.admin.find_first()
    if existing:
        return await db.admin.update(
            where={"id": existing.id},
            data={"email": email, "passwordHash": password_hash, "name": name},
        )
    return await db.admin.create(
        data={"email": email, "passwordHash": password_hash, "name": name}
    )
