"""Authentication routes"""

from fastapi import APIRouter, Depends, status

from ...api.dependencies import get_unit_of_work, get_notifier
from ...application.use_cases.register_user import RegisterUserUseCase
from ...application.use_cases.login_user import LoginUserUseCase
from ...application.use_cases.verify_code import VerifyCodeUseCase, ResendVerificationUseCase
from ...application.use_cases.token_use_cases import RefreshTokenUseCase, LogoutUserUseCase
from ...application.dtos.user_dtos import (
    CreateUserDto, LoginUserDto, VerifyCodeDto, ResendOtpDto, RefreshTokenDto, LogoutDto,
    SessionBundleDto, AccessTokenDto, MessageResponse
)
from ...domain.enums import VerificationChannel
from ...domain.repositories.unit_of_work import IUnitOfWork
from ...infrastructure.external_services.notification_dispatcher import NotificationDispatcher

router = APIRouter()


@router.post("/register", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
async def register_user(
    user_data: CreateUserDto,
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work),
    notifier: NotificationDispatcher = Depends(get_notifier)
):
    """Register a new user and send both verification codes"""
    use_case = RegisterUserUseCase(unit_of_work, notifier)
    await use_case.execute(user_data)
    return MessageResponse(
        message="User registered successfully. Please verify your email and mobile number."
    )


@router.post("/login", response_model=SessionBundleDto)
async def login_user(
    login_data: LoginUserDto,
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work)
):
    """Login user"""
    return await LoginUserUseCase(unit_of_work).execute(login_data)


@router.post("/verify/email", response_model=MessageResponse)
async def verify_email(
    request: VerifyCodeDto,
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work)
):
    await VerifyCodeUseCase(unit_of_work).execute(request.username, request.code, VerificationChannel.EMAIL)
    return MessageResponse(message="Email verified successfully")


@router.post("/verify/mobile", response_model=MessageResponse)
async def verify_mobile(
    request: VerifyCodeDto,
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work)
):
    await VerifyCodeUseCase(unit_of_work).execute(request.username, request.code, VerificationChannel.MOBILE)
    return MessageResponse(message="Mobile number verified successfully")


@router.post("/resend-otp", response_model=MessageResponse)
async def resend_otp(
    request: ResendOtpDto,
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work),
    notifier: NotificationDispatcher = Depends(get_notifier)
):
    """Issue a fresh code, replacing any pending one"""
    channel = VerificationChannel.from_request(request.type)
    await ResendVerificationUseCase(unit_of_work, notifier).execute(request.username, channel)
    if channel == VerificationChannel.EMAIL:
        return MessageResponse(message="Verification email sent successfully")
    return MessageResponse(message="Verification SMS sent successfully")


@router.post("/refresh", response_model=AccessTokenDto)
async def refresh_token(
    request: RefreshTokenDto,
    unit_of_work: IUnitOfWork = Depends(get_unit_of_work)
):
    """Refresh access token"""
    return await RefreshTokenUseCase(unit_of_work).execute(request.refresh_token)


@router.post("/logout", response_model=MessageResponse)
async def logout(request: LogoutDto):
    await LogoutUserUseCase().execute(request.refresh_token)
    return MessageResponse(message="Logged out successfully")
