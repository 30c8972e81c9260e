# api/index.py
from fastapi import Depends, FastAPI, HTTPException, Path
from fastapi.responses import RedirectResponse
from pydantic import BaseModel, Field

from game_crafter.config import ROUTE_NAMESPACE, configure_logging, get_pages_bucket, get_sandbox_root
from game_crafter.data_class import page_route
from game_crafter.pages import PageService
from game_crafter.pipeline import publish_from_sandbox
from game_crafter.sandbox import LocalSandbox
from game_crafter.supabase_client import public_url
from game_crafter.supabase_pages import SupabasePageService

configure_logging()

app = FastAPI()

CHAT_ID_PATTERN = r"^[A-Za-z0-9_-]+$"


class PublishReq(BaseModel):
    chat_id: str = Field(min_length=1, pattern=CHAT_ID_PATTERN)
    title: str | None = None


def get_page_service() -> PageService:
    return SupabasePageService()


@app.post("/api/publish")
def publish(req: PublishReq, service: PageService = Depends(get_page_service)):
    workspace = get_sandbox_root() / req.chat_id
    report = publish_from_sandbox(LocalSandbox(workspace), req.chat_id, service, title=req.title)
    if report.status == "error":
        raise HTTPException(status_code=400, detail=report.error)
    return report.to_dict()


@app.get(f"/{ROUTE_NAMESPACE}/{{chat_id}}")
def play_game(chat_id: str = Path(pattern=CHAT_ID_PATTERN), t: int | None = None):
    """Send the player to the rendered page in the public bucket."""
    path = SupabasePageService.document_path(page_route(chat_id))
    url = public_url(f"{get_pages_bucket()}/{path}")
    if t is not None:
        url = f"{url}?t={t}"
    return RedirectResponse(url, status_code=307)
