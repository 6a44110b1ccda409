import logging

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from badgeworks.ai.brief import generate_badge_brief
from badgeworks.ai.image import generate_badge_image, random_seed
from badgeworks.ai.providers import ImageProvider, TextProvider
from badgeworks.core.config import settings
from badgeworks.core.errors import BadgeworksError, ProviderError
from badgeworks.core.slugs import generate_slug
from badgeworks.core.storage import Storage
from badgeworks.core.style_templates import STYLE_TEMPLATES
from badgeworks.core.suggestions import get_suggestions, CATEGORIES
from badgeworks.core.utils_imgs import process_and_store_badge
from badgeworks.db import Base
from badgeworks.deps import get_db, require_admin, get_text_provider, get_image_provider, get_storage
from badgeworks.domain.awards import service
from badgeworks.domain.awards.service import BadgeNotFound, AwardNotFound
from badgeworks.schemas.award import PublishAwardIn, PublishAwardOut, AwardDetailsOut, PersonOut, ProjectOut
from badgeworks.schemas.badge import BadgeOut, GenerateImageOut
from badgeworks.schemas.brief import PreviewBriefIn, GenerateImageIn

log = logging.getLogger("admin")
router = APIRouter(prefix="/api/admin", tags=["admin"], dependencies=[Depends(require_admin)])


# ---------- Paso 1 -> 2: brief ----------
@router.post("/preview-prompt")
def preview_prompt(payload: PreviewBriefIn, provider: TextProvider = Depends(get_text_provider)):
    try:
        brief = generate_badge_brief(
            provider, payload.name, payload.description, payload.style,
            style_template=payload.styleTemplate,
            reference_style=payload.referenceStyle,
        )
    except ProviderError:
        log.exception("preview-prompt: fallo del proveedor de texto")
        raise HTTPException(status_code=500, detail="Failed to generate badge brief")

    return {
        **brief.model_dump(),
        "_metadata": {
            "styleTemplate": payload.styleTemplate,
            "referenceStyle": payload.referenceStyle,
            "quality": payload.quality or "standard",
        },
    }


# ---------- Paso 2 -> 3: imagen + badge ----------
@router.post("/generate-image", response_model=GenerateImageOut)
def generate_image(
    payload: GenerateImageIn,
    db: Session = Depends(get_db),
    provider: ImageProvider = Depends(get_image_provider),
    storage: Storage = Depends(get_storage),
):
    try:
        image_url, actual_prompt = generate_badge_image(
            provider, payload.brief, payload.style,
            quality=payload.quality,
            style_template=payload.styleTemplate,
            reference_style=payload.referenceStyle,
        )
        slug = generate_slug(payload.name)
        stored = process_and_store_badge(image_url, slug, storage)
        badge = service.create_badge(
            db,
            slug=slug,
            name=payload.name,
            style_key=payload.style,
            prompt=payload.brief.image_prompt,
            actual_prompt=actual_prompt,
            style_template=payload.styleTemplate,
            reference_style=payload.referenceStyle,
            quality_setting=payload.quality or "standard",
            model_used=provider.model,
            seed=random_seed(),
            image_blob_url=stored.image_url,
            thumb_blob_url=stored.thumb_url,
            created_by=payload.createdBy,
        )
    except (BadgeworksError, SQLAlchemyError):
        log.exception("generate-image: fallo generando/guardando la insignia")
        raise HTTPException(status_code=500, detail="Failed to generate and store badge")

    return {"success": True, "badge": badge, "actualPrompt": actual_prompt}


# ---------- Paso 4 -> 5: publicar ----------
@router.post("/publish-award", response_model=PublishAwardOut)
def publish_award(payload: PublishAwardIn, db: Session = Depends(get_db)):
    try:
        award = service.publish_award(
            db,
            badge_id=str(payload.badge_id),
            person=payload.person.model_dump(),
            project=payload.project.model_dump(),
            citation=payload.citation,
        )
    except BadgeNotFound:
        raise HTTPException(status_code=404, detail="Badge not found")
    except SQLAlchemyError:
        log.exception("publish-award: error de base de datos")
        raise HTTPException(status_code=500, detail="Failed to publish award")

    permalink = award.public_permalink
    return {
        "success": True,
        "award": award,
        "permalink": permalink,
        "shareUrl": settings.share_url_for(permalink),
    }


@router.delete("/delete-award")
def delete_award(id: str | None = Query(default=None), db: Session = Depends(get_db)):
    if not id:
        raise HTTPException(status_code=400, detail="Award ID is required")
    try:
        service.delete_award(db, id)
    except AwardNotFound:
        raise HTTPException(status_code=404, detail="Award not found")
    except SQLAlchemyError:
        log.exception("delete-award: error de base de datos")
        raise HTTPException(status_code=500, detail="Failed to delete award")
    return {"success": True}


@router.post("/migrate")
def migrate(db: Session = Depends(get_db)):
    """Crea las cuatro tablas si no existen (para hosts sin acceso a alembic)."""
    try:
        Base.metadata.create_all(bind=db.get_bind())
    except SQLAlchemyError:
        log.exception("migrate: fallo creando el esquema")
        raise HTTPException(status_code=500, detail="Migration failed")
    log.info("esquema creado/verificado")
    return {"success": True, "message": "Database schema created successfully!"}


# ---------- Vistas del panel ----------
@router.get("/awards", response_model=list[AwardDetailsOut])
def list_awards(db: Session = Depends(get_db)):
    return service.list_awards(db)


@router.get("/badges", response_model=list[BadgeOut])
def list_badges(db: Session = Depends(get_db)):
    return service.list_badges(db)


@router.get("/people", response_model=list[PersonOut])
def list_people(db: Session = Depends(get_db)):
    return service.list_people(db)


@router.get("/projects", response_model=list[ProjectOut])
def list_projects(db: Session = Depends(get_db)):
    return service.list_projects(db)


@router.get("/style-templates")
def style_templates():
    return [t.to_dict() for t in STYLE_TEMPLATES.values()]


@router.get("/suggestions")
def suggestions(category: str | None = Query(default=None)):
    return {"categories": CATEGORIES, "suggestions": get_suggestions(category)}
