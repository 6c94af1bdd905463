"""Authentication endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from app.api.deps import get_db
from app.core.exceptions import AuthenticationError
from app.core.middleware import login_limiter
from app.core.security import create_access_token, verify_password
from app.repositories import user_repository
from app.schemas.user import SignInRequest, SignInResponse, UserResponse

router = APIRouter()


@router.post("/sign-in", response_model=SignInResponse, dependencies=[Depends(login_limiter)])
async def sign_in(
    credentials: SignInRequest,
    db: Annotated[AsyncSession, Depends(get_db)],
) -> SignInResponse:
    """Sign in with email and password and open a session."""
    user = await user_repository.find_by_email(db, credentials.email)

    if not user or not verify_password(credentials.password, user.password):
        raise AuthenticationError("Invalid email or password")

    token = create_access_token(user.id)
    await user_repository.create_session(db, user.id, token)

    return SignInResponse(user=UserResponse.model_validate(user), token=token)
