#!/usr/bin/env python3
"""
Booking and transfer flow script.

DO NOT ADD BUSINESS LOGIC HERE.
This script only orchestrates API calls.
All rules live in the backend.

Usage:
    python scripts/flow_book_and_transfer.py --room-id 1 --new-room-id 2

Flow:
    1. Sign in
    2. Reserve a room
    3. Read the booking back
    4. Move the booking to another room
    5. Read the booking back again
"""

import argparse
import json
import sys

import httpx

from auth_login import BASE_URL, load_token, login


def api_request(
    token: str, method: str, endpoint: str, data: dict | None = None, base_url: str = BASE_URL
) -> dict:
    """Make authenticated API request."""
    headers = {"Authorization": f"Bearer {token}"}
    response = httpx.request(
        method,
        f"{base_url}{endpoint}",
        headers=headers,
        json=data,
        timeout=10.0,
        follow_redirects=True,
    )
    return {"status": response.status_code, "data": response.json() if response.text else {}}


def print_step(step: int, title: str):
    """Print step header."""
    print(f"\n{'='*60}")
    print(f"STEP {step}: {title}")
    print("="*60)


def print_result(result: dict) -> bool:
    """Print result; return False on an error status."""
    if result["status"] >= 400:
        print(f"ERROR ({result['status']}): {json.dumps(result['data'], indent=2)}")
        return False

    print(f"Status: {result['status']}")
    print(json.dumps(result["data"], indent=2))
    return True


def main():
    parser = argparse.ArgumentParser(description="Reserve a room, then move the booking")
    parser.add_argument("--room-id", type=int, required=True, help="Room to reserve")
    parser.add_argument("--new-room-id", type=int, required=True, help="Room to move to")
    parser.add_argument("--email", default="guest@hotelbooking.dev")
    parser.add_argument("--password", default="Test@1234")
    parser.add_argument("--base-url", default=BASE_URL)
    parser.add_argument("--reuse-token", action="store_true", help="Use the token saved by auth_login.py")
    args = parser.parse_args()

    print_step(1, "Sign in")
    token = load_token() if args.reuse_token else None
    if token is None:
        token = login(args.email, args.password, args.base_url)

    print_step(2, "Reserve room")
    created = api_request(token, "POST", "/booking", {"roomId": args.room_id}, args.base_url)
    if not print_result(created):
        sys.exit(1)
    booking_id = created["data"]["bookingId"]

    print_step(3, "Read booking")
    if not print_result(api_request(token, "GET", "/booking", base_url=args.base_url)):
        sys.exit(1)

    print_step(4, "Transfer booking")
    moved = api_request(
        token, "PUT", f"/booking/{booking_id}", {"roomId": args.new_room_id}, args.base_url
    )
    if not print_result(moved):
        sys.exit(1)

    print_step(5, "Read booking after transfer")
    if not print_result(api_request(token, "GET", "/booking", base_url=args.base_url)):
        sys.exit(1)

    print("\nFlow completed")


if __name__ == "__main__":
    main()
