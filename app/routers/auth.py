from fastapi import APIRouter, Depends

from app.core.deps import get_current_admin, get_db
from app.schemas.auth import AdminResponse, AuthResponse, LoginRequest
from app.schemas.common import ErrorResponse, SuccessResponse
from app.services import auth_service

router = APIRouter(prefix="/api/auth", tags=["Auth"])


@router.post(
    "/login",
    response_model=SuccessResponse[AuthResponse],
    summary="관리자 로그인",
    description="이메일과 비밀번호로 로그인합니다. 성공 시 Bearer 토큰을 발급합니다.",
    responses={
        401: {"model": ErrorResponse, "description": "잘못된 이메일 또는 비밀번호 (AUTH_001)"},
    },
)
async def login(data: LoginRequest, db=Depends(get_db)):
    result = await auth_service.login(db, data.email, data.password)
    return SuccessResponse(
        data=AuthResponse(
            admin=AdminResponse.model_validate(result["admin"]),
            accessToken=result["accessToken"],
        ),
    )


@router.get(
    "/me",
    response_model=SuccessResponse[AdminResponse],
    summary="내 정보 조회",
    responses={
        401: {"model": ErrorResponse, "description": "인증 실패 (AUTH_003)"},
    },
)
async def me(current_admin=Depends(get_current_admin)):
    return SuccessResponse(data=AdminResponse.model_validate(current_admin))
