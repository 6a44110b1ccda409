import logging
from urllib.parse import quote

from fastapi import APIRouter, Depends, HTTPException, Query, Request
from fastapi.responses import HTMLResponse, Response
from fastapi.templating import Jinja2Templates
from sqlalchemy.orm import Session

from badgeworks.core.config import settings
from badgeworks.core.errors import BadgeworksError
from badgeworks.core.settings_static import TEMPLATES_DIR
from badgeworks.core.storage import Storage
from badgeworks.core.utils_imgs import fetch_image_bytes, render_award_card_png
from badgeworks.deps import get_db, get_storage
from badgeworks.domain.awards.service import get_award_details, list_awards
from badgeworks.schemas.award import AwardDetailsOut

log = logging.getLogger("public")
router = APIRouter(tags=["public"])
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


def _share_links(award: dict, share_url: str) -> dict:
    text = f"I just received the {award['badge_name']} badge! Check it out:"
    return {
        "twitter": f"https://twitter.com/intent/tweet?text={quote(text)}&url={quote(share_url, safe='')}",
        "linkedin": f"https://www.linkedin.com/sharing/share-offsite/?url={quote(share_url, safe='')}",
    }


@router.get("/", response_class=HTMLResponse)
def home(request: Request):
    return templates.TemplateResponse(request, "index.html", {"title": "Badges with Personality"})


@router.get("/a/{permalink}", response_class=HTMLResponse)
def award_page(permalink: str, request: Request, db: Session = Depends(get_db)):
    award = get_award_details(db, permalink)
    if not award:
        return templates.TemplateResponse(
            request, "not_found.html", {"title": "Award Not Found"}, status_code=404
        )
    share_url = settings.share_url_for(permalink)
    return templates.TemplateResponse(request, "award.html", {
        "title": f"{award['badge_name']} - {award['person_name']} | Badges with Personality",
        "award": award,
        "share_url": share_url,
        "share_links": _share_links(award, share_url),
        "og_image_url": f"{settings.PUBLIC_BASE_URL}/api/og?permalink={quote(permalink)}",
    })


@router.get("/hof", response_class=HTMLResponse)
def hall_of_fame(request: Request, db: Session = Depends(get_db)):
    return templates.TemplateResponse(request, "hof.html", {
        "title": "Hall of Fame | Badges with Personality",
        "awards": list_awards(db),
    })


@router.get("/api/awards/{permalink}", response_model=AwardDetailsOut)
def award_json(permalink: str, db: Session = Depends(get_db)):
    award = get_award_details(db, permalink)
    if not award:
        raise HTTPException(status_code=404, detail="Award not found")
    return award


def _load_badge_image(url: str, storage: Storage) -> bytes | None:
    try:
        if url.startswith(("http://", "https://", "data:")):
            return fetch_image_bytes(url)
        return storage.read(url)
    except BadgeworksError as e:
        log.warning("og: no se pudo cargar %s: %s", url, e)
        return None


@router.get("/api/og")
def og_image(
    permalink: str | None = Query(default=None),
    db: Session = Depends(get_db),
    storage: Storage = Depends(get_storage),
):
    if not permalink:
        raise HTTPException(status_code=400, detail="Missing permalink")
    award = get_award_details(db, permalink)
    if not award:
        raise HTTPException(status_code=404, detail="Award not found")

    png = render_award_card_png(award, _load_badge_image(award["thumb_blob_url"], storage))
    return Response(content=png, media_type="image/png",
                    headers={"Cache-Control": "public, max-age=3600"})
