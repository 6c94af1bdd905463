#!/usr/bin/env python3
"""Create a user with a properly hashed password."""

import asyncio

from app.core.security import get_password_hash
from app.database import get_db_context
from app.repositories import user_repository
from app.models.user import User


async def create_user(
    email: str = "guest@hotelbooking.dev",
    password: str = "Test@1234",
) -> int:
    """Create a user, or reset the password of an existing one."""
    async with get_db_context() as session:
        existing = await user_repository.find_by_email(session, email)

        if existing:
            existing.password = get_password_hash(password)
            await session.flush()
            print(f"Updated existing user: {email}")
            user_id = existing.id
        else:
            user = User(email=email, password=get_password_hash(password))
            session.add(user)
            await session.flush()
            print(f"Created user: {email}")
            user_id = user.id

    print(f"User ID: {user_id}")
    print(f"Email: {email}")
    print(f"Password: {password}")
    return user_id


if __name__ == "__main__":
    import argparse

    parser = argparse.ArgumentParser(description="Create a user")
    parser.add_argument("--email", default="guest@hotelbooking.dev", help="User email")
    parser.add_argument("--password", default="Test@1234", help="User password")

    args = parser.parse_args()

    asyncio.run(create_user(email=args.email, password=args.password))
