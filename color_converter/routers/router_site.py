from fastapi import APIRouter
from fastapi.responses import RedirectResponse

# where main mounts the static dir
SITE_PATH = "/site"

router = APIRouter(tags=["site"])


@router.get("/", include_in_schema=False)
def site_root() -> RedirectResponse:
    return RedirectResponse(url=SITE_PATH)
