"""Settings routes."""

from fastapi import APIRouter, Form, Request

from ...engine import get_muscle_chains
from ...models.progress import AppSettings
from ...services.settings import set_next_workout_type, set_rest_timer
from . import get_store

router = APIRouter(prefix="/settings", tags=["settings"])


def settings_to_response(settings: AppSettings) -> dict:
    return {
        **settings.to_dict(),
        "label": settings.current_workout_type.label,
        "muscle_chains": [
            mc.value for mc in get_muscle_chains(settings.current_workout_type)
        ],
    }


@router.get("")
async def get_settings(request: Request):
    """Current settings and the next workout's muscle chains."""
    return settings_to_response(await get_store(request).get_settings())


@router.post("/next")
async def update_next_workout(request: Request, workout_type: str = Form(...)):
    """Manually set which workout comes next."""
    return settings_to_response(
        await set_next_workout_type(get_store(request), workout_type)
    )


@router.post("/rest-timer")
async def update_rest_timer(request: Request, seconds: int = Form(...)):
    """Set the rest timer in seconds."""
    return settings_to_response(await set_rest_timer(get_store(request), seconds))
