from fastapi import APIRouter, Depends

from rng_coin.config import settings, COIN_PATH, COINS_PATH
from rng_coin.core.coin import coin
from rng_coin.core.validation import parse_flips

router = APIRouter()


def flip_count(flips: str) -> int:
    """Validate the {flips} path parameter before the handler runs."""
    return parse_flips(
        flips,
        minimum=settings.coin.min_flips,
        maximum=settings.coin.max_flips,
    )


@router.get(COIN_PATH)
async def flip_coin():
    return {"coin-flip": coin.flip()}


@router.get(COINS_PATH)
async def flip_coins(count: int = Depends(flip_count)):
    return {"coin-flips": coin.flip_many(count)}
