# /// script
# requires-python = ">=3.9"
# dependencies = [
#     "cachet[fastapi]",
#     "httpx",
# ]
#
# [tool.uv.sources]
# cachet = { path = "../", editable = true }
# ///


import asyncio
import time

import httpx
from fastapi import FastAPI

from cachet.asgi import ASGICacheControlMiddleware
from cachet.fastapi import cache

app = FastAPI()


@app.get("/items/", dependencies=[cache("5s")])
async def read_items():
    return {"created_at": time.time()}


@app.get("/me/", dependencies=[cache("private", {"maxAge": "1m", "noTransform": True})])
async def read_me():
    return {"name": "John"}


@app.get("/health/")
async def health():
    return {"status": "ok"}


async def main():
    transport = httpx.ASGITransport(app=ASGICacheControlMiddleware(app, "no-store"))
    async with httpx.AsyncClient(transport=transport) as client:
        for path in ("/items/", "/me/", "/health/"):
            response = await client.get(f"http://testserver{path}")
            print(f"{path}: Cache-Control: {response.headers.get('cache-control')}")


if __name__ == "__main__":
    asyncio.run(main())
