import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from app.core.config import settings
from app.core.deps import get_prisma
from app.routers import auth, photos, upload

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
)


@asynccontextmanager
async def lifespan(app: FastAPI):
    db = get_prisma()
    await db.connect()
    yield
    await db.disconnect()


app = FastAPI(
    title="Photography Portfolio API",
    description="포트폴리오 사이트 백엔드: 관리자 인증, 사진 카탈로그, Cloudinary 업로드",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE"],
    allow_headers=["Content-Type", "Authorization"],
)


app.include_router(auth.router)
app.include_router(photos.router)
app.include_router(upload.router)


@app.get("/health")
async def health_check():
    return {"status": "ok"}
