# scripts/create_award.py
"""
Recorre el asistente completo contra un servidor en marcha:

    python scripts/create_award.py --name "Code Warrior" --description "shipped a compiler" \
        --person "Ada" --project "Compiler X" --citation "For shipping a compiler"

La clave de admin sale de --admin-key o de ADMIN_KEY en el entorno/.env.
"""
import argparse
import json
import sys
from pathlib import Path
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import requests

from badgeworks.core.config import settings
from badgeworks.schemas.brief import BADGE_STYLES
from badgeworks.wizard import AdminWizard


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(description="Crea y publica un award de punta a punta")
    p.add_argument("--base-url", default="http://localhost:8000")
    p.add_argument("--admin-key", default=settings.ADMIN_KEY)
    p.add_argument("--name", required=True)
    p.add_argument("--description", required=True)
    p.add_argument("--style", choices=BADGE_STYLES, default="round-medal-minimal")
    p.add_argument("--style-template")
    p.add_argument("--reference-style")
    p.add_argument("--quality", choices=("standard", "hd"))
    p.add_argument("--person", required=True, help="nombre del premiado")
    p.add_argument("--handle")
    p.add_argument("--title")
    p.add_argument("--avatar-url")
    p.add_argument("--project", required=True)
    p.add_argument("--project-desc", help="por defecto, la descripción de la insignia")
    p.add_argument("--citation", required=True)
    p.add_argument("--created-by", default="admin")
    return p


def run(args, session) -> int:
    wiz = AdminWizard(session, args.admin_key, base_url=args.base_url)

    if not wiz.preview_brief(
        args.name, args.description, args.style,
        style_template=args.style_template,
        reference_style=args.reference_style,
        quality=args.quality,
    ):
        print(f"[1/4] brief: {wiz.error}", file=sys.stderr)
        return 1
    print("[1/4] brief:", json.dumps(wiz.brief, ensure_ascii=False))

    if not wiz.generate_image(created_by=args.created_by):
        print(f"[2/4] imagen: {wiz.error}", file=sys.stderr)
        return 1
    print("[2/4] imagen:", wiz.badge["image_blob_url"])

    person = {"name": args.person, "handle": args.handle, "title": args.title, "avatar_url": args.avatar_url}
    project = {"name": args.project, "short_desc": args.project_desc or args.description}
    if not wiz.enter_recipient(person, project, args.citation):
        print(f"[3/4] datos del premiado: {wiz.error}", file=sys.stderr)
        return 1

    if not wiz.publish():
        print(f"[4/4] publicar: {wiz.error}", file=sys.stderr)
        return 1
    print("[4/4] publicado:", wiz.share_url or f"/a/{wiz.permalink}")
    return 0


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    if not args.admin_key:
        print("Falta la clave de admin (--admin-key o ADMIN_KEY)", file=sys.stderr)
        return 2
    with requests.Session() as session:
        return run(args, session)

if __name__ == "__main__":
    sys.exit(main())
