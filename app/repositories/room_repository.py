"""Room persistence."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.hotel import Room


class RoomRepository:
    """Queries against the rooms table."""

    async def find_by_id(self, db: AsyncSession, room_id: int) -> Room | None:
        result = await db.execute(select(Room).where(Room.id == room_id))
        return result.scalar_one_or_none()

    async def find_by_id_for_update(self, db: AsyncSession, room_id: int) -> Room | None:
        """Get a room and hold its row lock until the transaction ends.

        Every admission into a room goes through this lock, so counting the
        room's bookings and writing the new one cannot interleave with
        another request targeting the same room.
        """
        result = await db.execute(select(Room).where(Room.id == room_id).with_for_update())
        return result.scalar_one_or_none()


room_repository = RoomRepository()
