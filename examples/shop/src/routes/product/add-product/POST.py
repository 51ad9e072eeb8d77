"""Create a product from a form submission."""

from chirp import Redirect, Request


async def post(request: Request) -> Redirect:
    form = await request.form()
    name = form.get("name", "").strip()
    return Redirect(f"/api/product?q={name}")
