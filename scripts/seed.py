# scripts/seed.py
import sys
from pathlib import Path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from sqlalchemy import select, func
from badgeworks.db import Base, SessionLocal, engine
from badgeworks.domain.awards.service import create_badge, publish_award
from badgeworks.models.badge import Badge

DEMO_PERMALINK = "demo1234"

DEMO_BADGE = dict(
    slug="code-champion",
    name="Code Champion",
    style_key="round-medal-minimal",
    prompt="A flat, minimal round medal badge with code symbols",
    model_used="seed-data",
    seed=12345,
    image_blob_url="https://placehold.co/1024x1024/1E3A8A/F59E0B.png?text=Code+Champion",
    thumb_blob_url="https://placehold.co/512x512/1E3A8A/F59E0B.png?text=Code+Champion",
    created_by="system",
)
DEMO_PERSON = dict(
    name="Alex Developer",
    handle="alexdev",
    title="Senior Engineer",
    avatar_url="https://api.dicebear.com/7.x/avataaars/svg?seed=alex",
)
DEMO_PROJECT = dict(name="Badge System", short_desc="AI-powered achievement badge generation platform")
DEMO_CITATION = "For exceptional contribution to building the badge generation system"


def seed(db) -> bool:
    """Inserta la insignia/award de demo. No hace nada si ya hay badges."""
    if db.execute(select(func.count()).select_from(Badge)).scalar_one() > 0:
        return False
    badge = create_badge(db, **DEMO_BADGE)
    publish_award(
        db,
        badge_id=badge.id,
        person=DEMO_PERSON,
        project=DEMO_PROJECT,
        citation=DEMO_CITATION,
        permalink=DEMO_PERMALINK,
    )
    return True


def main():
    Base.metadata.create_all(bind=engine)
    db = SessionLocal()
    try:
        if seed(db):
            print("Seed OK. Award de ejemplo: /a/%s" % DEMO_PERMALINK)
        else:
            print("La base ya tiene datos; seed omitido")
    finally:
        db.close()

if __name__ == "__main__":
    main()
