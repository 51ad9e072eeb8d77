"""List products, optionally filtered by ``?q=``."""

from chirp import Request

PRODUCTS = ("Burrow mug", "Trowel", "Lantern")


async def get(request: Request) -> dict:
    query = (request.query.get("q") or "").strip().lower()
    return {"products": [name for name in PRODUCTS if query in name.lower()]}
