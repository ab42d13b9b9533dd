from datetime import datetime

from pydantic import BaseModel, Field, field_validator


def _normalize_tags(tags: list[str] | None) -> list[str] | None:
    # 태그 검색은 소문자 완전 일치로 합니다
    if tags is None:
        return None
    return [t.strip().lower() for t in tags if t.strip()]


class PhotoCreateRequest(BaseModel):
    title: str = Field(min_length=1, max_length=200, examples=["Golden hour at the ghats"])
    description: str = ""
    tags: list[str] = []
    categoryId: str | None = None
    url: str = Field(description="Cloudinary secure URL")
    thumbnailUrl: str
    publicId: str
    width: int = 0
    height: int = 0
    fingerprint: str | None = Field(
        default=None,
        min_length=64,
        max_length=64,
        description="SHA-256 content fingerprint returned by the upload endpoint",
    )

    @field_validator("tags")
    @classmethod
    def _lowercase_tags(cls, v):
        return _normalize_tags(v)


class PhotoUpdateRequest(BaseModel):
    title: str | None = Field(default=None, min_length=1, max_length=200)
    description: str | None = None
    tags: list[str] | None = None
    categoryId: str | None = None

    @field_validator("tags")
    @classmethod
    def _lowercase_tags(cls, v):
        return _normalize_tags(v)


class PhotoResponse(BaseModel):
    id: str
    title: str
    description: str
    tags: list[str]
    categoryId: str | None = None
    url: str
    thumbnailUrl: str
    publicId: str
    width: int
    height: int
    downloads: int = 0
    fingerprint: str | None = None
    createdAt: datetime
    updatedAt: datetime

    model_config = {"from_attributes": True}
