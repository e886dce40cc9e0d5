#!/usr/bin/env python3
"""Exercise a running Postboard API end to end.

Checks health, creates a user and a post for that user, then lists both
collections and prints the envelopes.

Usage:
  cd services/api
  python -m postboard.main            # in another shell
  python -m scripts.smoke_api

Optional:
  API_BASE_URL=http://localhost:8080
"""

import asyncio
import json
import os
import sys

import httpx
from dotenv import load_dotenv

load_dotenv()


def _print(label: str, payload: object) -> None:
    print(f"--- {label}")
    print(json.dumps(payload, indent=2))


def _require_success(label: str, envelope: dict) -> dict:
    if not envelope.get("success"):
        raise SystemExit(f"{label} failed: {envelope.get('error')}")
    return envelope["data"]


async def main() -> int:
    base_url = os.getenv("API_BASE_URL", "http://localhost:8080").rstrip("/")

    async with httpx.AsyncClient(base_url=base_url, timeout=10.0) as client:
        r = await client.get("/health")
        r.raise_for_status()
        _print("health", r.json())

        r = await client.post(
            "/api/users",
            json={"email": "smoke@example.com", "name": "Smoke Test", "metadata": {"source": "smoke"}},
        )
        user = _require_success("create user", r.json())
        _print("created user", user)

        r = await client.post(
            "/api/posts",
            json={
                "authorId": user["id"],
                "title": "Smoke post",
                "content": "Posted by scripts.smoke_api",
                "tags": ["smoke"],
                "publish": True,
            },
        )
        post = _require_success("create post", r.json())
        _print("created post", post)

        r = await client.post(
            "/api/posts",
            json={"authorId": "user-does-not-exist", "title": "Orphan", "content": "x"},
        )
        orphan = r.json()
        if orphan.get("success") or orphan.get("error") != "Author not found":
            print(f"Unexpected response for unknown author: {orphan}", file=sys.stderr)
            return 1

        for path in ("/api/users", "/api/posts"):
            r = await client.get(path, params={"page": 1, "pageSize": 10})
            r.raise_for_status()
            _print(path, r.json())

    return 0


if __name__ == "__main__":
    raise SystemExit(asyncio.run(main()))
