from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Database
    DATABASE_URL: str

    # JWT
    JWT_SECRET_KEY: str
    JWT_ALGORITHM: str = "HS256"
    ACCESS_TOKEN_EXPIRE_MINUTES: int = 60 * 24

    # Cloudinary
    CLOUDINARY_CLOUD_NAME: str = ""
    CLOUDINARY_API_KEY: str = ""
    CLOUDINARY_API_SECRET: str = ""
    CLOUDINARY_FOLDER: str = "photos"
    CLOUDINARY_TIMEOUT_SECONDS: int = 60

    # App
    APP_ENV: str = "development"
    CORS_ORIGINS: str = "http://localhost:3000"
    LOG_LEVEL: str = "INFO"

    # Seed admin
    ADMIN_EMAIL: str = "admin@photoplatform.com"
    ADMIN_PASSWORD: str = "admin123"
    ADMIN_NAME: str = "Admin User"

    # Upload pipeline
    MAX_UPLOAD_FILES: int = 10
    MAX_IMAGE_DIMENSION: int = 3000
    IMAGE_QUALITY: int = 80
    THUMBNAIL_SIZE: int = 300
    # 확장자별로 허용되는 MIME 타입
    ALLOWED_IMAGE_TYPES: dict[str, set[str]] = {
        "jpeg": {"image/jpeg", "image/jpg"},
        "jpg": {"image/jpeg", "image/jpg"},
        "png": {"image/png"},
        "webp": {"image/webp"},
        "heic": {"image/heic"},
        "tiff": {"image/tiff"},
        "tif": {"image/tiff"},
    }

    @property
    def cors_origins_list(self) -> list[str]:
        return [origin.strip() for origin in self.CORS_ORIGINS.split(",")]

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
