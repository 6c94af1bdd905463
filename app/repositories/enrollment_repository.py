"""Enrollment persistence."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.enrollment import Enrollment


class EnrollmentRepository:
    async def find_by_user_id(self, db: AsyncSession, user_id: int) -> Enrollment | None:
        result = await db.execute(select(Enrollment).where(Enrollment.user_id == user_id))
        return result.scalar_one_or_none()


enrollment_repository = EnrollmentRepository()
