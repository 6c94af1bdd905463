"""User and session persistence."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.models.user import Session, User


class UserRepository:
    """Queries and writes against the users and sessions tables."""

    async def find_by_email(self, db: AsyncSession, email: str) -> User | None:
        result = await db.execute(select(User).where(User.email == email))
        return result.scalar_one_or_none()

    async def find_session_by_token(self, db: AsyncSession, token: str) -> Session | None:
        """Get the session a token was issued for, with its user."""
        result = await db.execute(
            select(Session).where(Session.token == token).options(selectinload(Session.user))
        )
        return result.scalar_one_or_none()

    async def create_session(self, db: AsyncSession, user_id: int, token: str) -> Session:
        session = Session(user_id=user_id, token=token)
        db.add(session)
        await db.flush()
        return session


user_repository = UserRepository()
