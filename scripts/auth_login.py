#!/usr/bin/env python3
"""
Sign in to the booking API and keep the session token in ``.token``.

Usage:
    python scripts/auth_login.py
    python scripts/auth_login.py --email guest@hotelbooking.dev --password Test@1234
"""

import argparse
import sys
from pathlib import Path

import httpx

BASE_URL = "http://localhost:8000"
TOKEN_FILE = Path(__file__).parent.parent / ".token"


def load_token() -> str | None:
    """Token saved by the last successful sign-in, if any."""
    if not TOKEN_FILE.exists():
        return None
    return TOKEN_FILE.read_text().strip() or None


def login(email: str, password: str, base_url: str = BASE_URL) -> str:
    """Open a session for the user and return its token."""
    response = httpx.post(
        f"{base_url}/auth/sign-in",
        json={"email": email, "password": password},
        timeout=10.0,
    )

    if response.status_code != 200:
        error = response.json() if response.text else {}
        print(f"ERROR ({response.status_code}) {error.get('name', '')}: {error.get('message', response.text)}")
        sys.exit(1)

    session = response.json()
    TOKEN_FILE.write_text(session["token"])

    user = session["user"]
    print(f"Signed in as user {user['id']} ({user['email']})")
    print(f"Token saved to {TOKEN_FILE}")

    return session["token"]


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Sign in to the booking API")
    parser.add_argument("--email", default="guest@hotelbooking.dev")
    parser.add_argument("--password", default="Test@1234")
    parser.add_argument("--base-url", default=BASE_URL)
    args = parser.parse_args()

    login(args.email, args.password, args.base_url)
