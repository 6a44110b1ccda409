import logging

from sqlalchemy import select, delete
from sqlalchemy.orm import Session

from badgeworks.core.errors import BadgeworksError
from badgeworks.core.slugs import generate_permalink
from badgeworks.models.award import Award
from badgeworks.models.badge import Badge
from badgeworks.models.person import Person
from badgeworks.models.project import Project

log = logging.getLogger("awards")


class BadgeNotFound(BadgeworksError): ...
class AwardNotFound(BadgeworksError): ...


def create_badge(db: Session, **fields) -> Badge:
    badge = Badge(**fields)
    db.add(badge)
    try:
        db.commit()
    except Exception:
        db.rollback()
        raise
    db.refresh(badge)
    log.info("badge creada id=%s slug=%s", badge.id, badge.slug)
    return badge


def publish_award(db: Session, *, badge_id: str, person: dict, project: dict,
                  citation: str, permalink: str | None = None) -> Award:
    """
    Crea Person + Project + Award en UNA transacción: si el insert del award
    falla (p.ej. permalink repetido) no quedan personas/proyectos huérfanos.
    Person y Project nunca se deduplican: cada publicación crea filas nuevas.
    """
    if db.get(Badge, badge_id) is None:
        raise BadgeNotFound(badge_id)

    try:
        p = Person(
            name=person["name"],
            handle=person.get("handle"),
            title=person.get("title"),
            avatar_url=person.get("avatar_url"),
        )
        pr = Project(name=project["name"], short_desc=project.get("short_desc"))
        db.add_all([p, pr])
        db.flush()  # ids para el award

        award = Award(
            badge_id=badge_id,
            person_id=p.id,
            project_id=pr.id,
            citation=citation,
            public_permalink=permalink or generate_permalink(),
        )
        db.add(award)
        db.commit()
    except Exception:
        db.rollback()
        raise
    db.refresh(award)
    log.info("award publicado id=%s permalink=%s", award.id, award.public_permalink)
    return award


def delete_award(db: Session, award_id: str) -> None:
    """Borra solo la fila del award; badge, persona y proyecto se conservan."""
    try:
        result = db.execute(delete(Award).where(Award.id == award_id))
        if result.rowcount == 0:
            raise AwardNotFound(award_id)
        db.commit()
    except Exception:
        db.rollback()
        raise
    log.info("award borrado id=%s", award_id)


def _details_query():
    return (
        select(
            Award.id,
            Award.badge_id,
            Award.person_id,
            Award.project_id,
            Award.citation,
            Award.public_permalink,
            Award.created_at,
            Badge.name.label("badge_name"),
            Badge.image_blob_url,
            Badge.thumb_blob_url,
            Badge.style_key,
            Person.name.label("person_name"),
            Person.handle.label("person_handle"),
            Person.title.label("person_title"),
            Person.avatar_url.label("person_avatar"),
            Project.name.label("project_name"),
            Project.short_desc.label("project_desc"),
        )
        .join(Badge, Award.badge_id == Badge.id)
        .join(Person, Award.person_id == Person.id)
        .join(Project, Award.project_id == Project.id)
    )


def get_award_details(db: Session, permalink: str) -> dict | None:
    row = db.execute(
        _details_query().where(Award.public_permalink == permalink).limit(1)
    ).mappings().first()
    return dict(row) if row else None


def list_awards(db: Session) -> list[dict]:
    rows = db.execute(_details_query().order_by(Award.created_at.desc())).mappings().all()
    return [dict(r) for r in rows]


def list_badges(db: Session) -> list[Badge]:
    return db.execute(select(Badge).order_by(Badge.created_at.desc())).scalars().all()


def list_people(db: Session) -> list[Person]:
    return db.execute(select(Person).order_by(Person.name)).scalars().all()


def list_projects(db: Session) -> list[Project]:
    return db.execute(select(Project).order_by(Project.name)).scalars().all()
