from fastapi import APIRouter, Request
from fastapi.templating import Jinja2Templates

from rng_coin.config import settings, PACKAGE_ROOT, INDEX_PATHS, COIN_PATH, COINS_PATH

router = APIRouter()
templates = Jinja2Templates(directory=str(PACKAGE_ROOT / "templates"))


def get_base_context() -> dict:
    """Path constants and names shared by all templates."""
    return {
        "app_name": settings.server.name,
        "coin_path": COIN_PATH,
        "coins_path": COINS_PATH,
        "example_flips": settings.coin.example_flips,
    }


async def index(request: Request):
    return templates.TemplateResponse(request, "index.html", get_base_context())


for index_path in INDEX_PATHS:
    router.add_api_route(index_path, index, methods=["GET"])
