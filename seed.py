"""기본 관리자 계정 생성 스크립트.

    python seed.py
"""
import asyncio
import logging

from app.core.config import settings
from app.core.deps import get_prisma
from app.services import auth_service

logger = logging.getLogger("seed")


async def seed() -> None:
    db = get_prisma()
    await db.connect()
    try:
        admin = await auth_service.upsert_admin(
            db,
            email=settings.ADMIN_EMAIL,
            password=settings.ADMIN_PASSWORD,
            name=settings.ADMIN_NAME,
        )
        logger.info(f"Admin ready: {admin.email}")
    finally:
        await db.disconnect()


if __name__ == "__main__":
    logging.basicConfig(level=settings.LOG_LEVEL)
    asyncio.run(seed())
