import json
import logging

from badgeworks import deps
from badgeworks.core.config import settings
from badgeworks.core.errors import ProviderError
from badgeworks.main import app
from badgeworks.models import Award, Badge, Person, Project

from conftest import VALID_BRIEF


def test_health_check(client):
    response = client.get("/health")
    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_admin_routes_require_auth(client):
    assert client.get("/api/admin/awards").status_code == 401
    bad = client.get("/api/admin/awards", headers={"Authorization": "Bearer wrong"})
    assert bad.status_code == 401
    assert bad.json()["detail"] == "Unauthorized"


def test_preview_prompt_returns_brief(client, admin_headers, text_provider):
    resp = client.post("/api/admin/preview-prompt", headers=admin_headers, json={
        "name": "Code Warrior", "description": "shipped a compiler", "style": "round-medal-minimal",
    })
    assert resp.status_code == 200
    data = resp.json()
    for key in ("short_title", "icon_concept", "colors", "image_prompt"):
        assert key in data
    assert set(data["colors"]) == {"primary", "accent", "bg"}
    assert data["_metadata"]["quality"] == "standard"

    _, user_prompt = text_provider.calls[0]
    assert "Name: Code Warrior" in user_prompt
    assert "shipped a compiler" in user_prompt


def test_preview_prompt_passes_style_template(client, admin_headers, text_provider):
    resp = client.post("/api/admin/preview-prompt", headers=admin_headers, json={
        "name": "Code Warrior", "description": "shipped a compiler", "style": "shield-crest-modern",
        "styleTemplate": "gaming-achievement", "referenceStyle": "neon outlines",
    })
    assert resp.status_code == 200
    assert resp.json()["_metadata"]["styleTemplate"] == "gaming-achievement"
    _, user_prompt = text_provider.calls[0]
    assert "Style Guide:" in user_prompt
    assert "Additional style notes: neon outlines" in user_prompt


def test_preview_prompt_falls_back_on_garbage(client, admin_headers, text_provider):
    text_provider.reply = "Sure! Here is a great badge idea, no JSON though."
    resp = client.post("/api/admin/preview-prompt", headers=admin_headers, json={
        "name": "Code Warrior", "description": "shipped a compiler", "style": "ribbon-plaque",
    })
    assert resp.status_code == 200
    data = resp.json()
    assert data["short_title"] == "Code Warrior"
    assert data["colors"]["primary"] == "#7C2D12"
    assert "shipped a compiler" in data["icon_concept"]


def test_preview_prompt_provider_error_is_500(client, admin_headers, text_provider):
    text_provider.error = ProviderError("[fake] non-200: 503")
    resp = client.post("/api/admin/preview-prompt", headers=admin_headers, json={
        "name": "Code Warrior", "description": "shipped a compiler", "style": "round-medal-minimal",
    })
    assert resp.status_code == 500
    assert resp.json()["detail"] == "Failed to generate badge brief"


def test_invalid_request_is_400(client, admin_headers):
    resp = client.post("/api/admin/preview-prompt", headers=admin_headers, json={
        "name": "", "style": "watercolor",
    })
    assert resp.status_code == 400
    body = resp.json()
    assert body["detail"] == "Invalid request data"
    assert isinstance(body["errors"], list) and body["errors"]


def test_generate_image_stores_badge(client, admin_headers, session, image_provider, storage):
    resp = client.post("/api/admin/generate-image", headers=admin_headers, json={
        "name": "Code Warrior", "style": "round-medal-minimal", "brief": VALID_BRIEF, "quality": "hd",
    })
    assert resp.status_code == 200
    data = resp.json()
    badge = data["badge"]
    assert data["success"] is True
    assert badge["slug"].startswith("code-warrior-")
    assert badge["image_blob_url"] == f"/media/badges/{badge['slug']}/full.png"
    assert badge["thumb_blob_url"] == f"/media/badges/{badge['slug']}/thumb.webp"
    assert badge["model_used"] == "fake-image"
    assert badge["quality_setting"] == "hd"
    assert badge["prompt"] == VALID_BRIEF["image_prompt"]
    assert 0 <= badge["seed"] < 1_000_000

    # el prompt exacto se devuelve y se guarda para auditoría
    assert data["actualPrompt"] == image_provider.prompts[0][0]
    assert badge["actual_prompt"] == data["actualPrompt"]
    assert image_provider.prompts[0][1] == "hd"

    assert (storage.root / "badges" / badge["slug"] / "full.png").exists()
    assert session.get(Badge, badge["id"]) is not None


def test_generate_image_failure_is_500(client, admin_headers, session, image_provider):
    image_provider.error = ProviderError("[fake] Failed to generate image")
    resp = client.post("/api/admin/generate-image", headers=admin_headers, json={
        "name": "Code Warrior", "style": "round-medal-minimal", "brief": VALID_BRIEF,
    })
    assert resp.status_code == 500
    assert resp.json()["detail"] == "Failed to generate and store badge"
    assert session.query(Badge).count() == 0


def test_generate_image_rejects_undecodable_image(client, admin_headers, image_provider):
    image_provider.url = "data:image/png;base64,bm90IGFuIGltYWdl"
    resp = client.post("/api/admin/generate-image", headers=admin_headers, json={
        "name": "Code Warrior", "style": "round-medal-minimal", "brief": VALID_BRIEF,
    })
    assert resp.status_code == 500


def test_generate_image_rejects_long_title(client, admin_headers):
    brief = dict(VALID_BRIEF, short_title="Much Too Long A Title")
    resp = client.post("/api/admin/generate-image", headers=admin_headers, json={
        "name": "Code Warrior", "style": "round-medal-minimal", "brief": brief,
    })
    assert resp.status_code == 400


def test_publish_award(client, make_badge, publish, session):
    badge = make_badge()
    data = publish(badge["id"])
    assert data["success"] is True
    assert len(data["permalink"]) == 8
    assert data["shareUrl"].endswith(f"/a/{data['permalink']}")
    assert data["award"]["badge_id"] == badge["id"]

    person = session.get(Person, data["award"]["person_id"])
    assert person.handle == "ada"
    assert person.title == "Compiler Engineer"


def test_publish_unknown_badge_is_404(client, admin_headers):
    resp = client.post("/api/admin/publish-award", headers=admin_headers, json={
        "badge_id": "8b0d7a52-2f5e-4a47-9a53-0c5a1e9d2b11",
        "person": {"name": "Ada"},
        "project": {"name": "Compiler X", "short_desc": "A compiler"},
        "citation": "For shipping a compiler",
    })
    assert resp.status_code == 404


def test_publish_rejects_bad_payload(client, admin_headers, make_badge):
    badge = make_badge()
    resp = client.post("/api/admin/publish-award", headers=admin_headers, json={
        "badge_id": badge["id"],
        "person": {"name": "Ada", "avatar_url": "ftp://example.com/ada.png"},
        "project": {"name": "Compiler X", "short_desc": "A compiler"},
        "citation": "",
    })
    assert resp.status_code == 400


def test_delete_award_keeps_related_rows(client, admin_headers, make_badge, publish, session):
    badge = make_badge()
    award = publish(badge["id"])["award"]

    resp = client.delete("/api/admin/delete-award", params={"id": award["id"]}, headers=admin_headers)
    assert resp.status_code == 200
    assert resp.json() == {"success": True}

    session.expire_all()
    assert session.get(Award, award["id"]) is None
    assert session.get(Badge, badge["id"]) is not None
    assert session.get(Person, award["person_id"]) is not None
    assert session.get(Project, award["project_id"]) is not None


def test_delete_award_requires_id(client, admin_headers):
    resp = client.delete("/api/admin/delete-award", headers=admin_headers)
    assert resp.status_code == 400
    assert resp.json()["detail"] == "Award ID is required"


def test_delete_unknown_award_is_404(client, admin_headers):
    resp = client.delete("/api/admin/delete-award", params={"id": "nope"}, headers=admin_headers)
    assert resp.status_code == 404


def test_listings(client, admin_headers, make_badge, publish):
    badge = make_badge()
    publish(badge["id"])

    awards = client.get("/api/admin/awards", headers=admin_headers).json()
    assert len(awards) == 1
    assert awards[0]["badge_name"] == "Code Warrior"
    assert awards[0]["person_name"] == "Ada"
    assert awards[0]["project_name"] == "Compiler X"

    assert len(client.get("/api/admin/badges", headers=admin_headers).json()) == 1
    assert client.get("/api/admin/people", headers=admin_headers).json()[0]["name"] == "Ada"
    assert client.get("/api/admin/projects", headers=admin_headers).json()[0]["name"] == "Compiler X"


def test_style_templates_and_suggestions(client, admin_headers):
    templates = client.get("/api/admin/style-templates", headers=admin_headers).json()
    assert {t["id"] for t in templates} >= {"flat-modern", "gaming-achievement"}

    resp = client.get("/api/admin/suggestions", params={"category": "AI Integration"}, headers=admin_headers)
    data = resp.json()
    assert "AI Integration" in data["categories"]
    assert data["suggestions"]
    assert all(s["category"] == "AI Integration" for s in data["suggestions"])


def test_migrate_is_idempotent(client, admin_headers):
    for _ in range(2):
        resp = client.post("/api/admin/migrate", headers=admin_headers)
        assert resp.status_code == 200
        assert resp.json()["success"] is True


def test_end_to_end_award_flow(client, admin_headers):
    brief = client.post("/api/admin/preview-prompt", headers=admin_headers, json={
        "name": "Code Warrior", "description": "shipped a compiler", "style": "round-medal-minimal",
    }).json()
    brief.pop("_metadata")

    badge = client.post("/api/admin/generate-image", headers=admin_headers, json={
        "name": "Code Warrior", "style": "round-medal-minimal", "brief": brief,
    }).json()["badge"]
    assert badge["thumb_blob_url"] and badge["image_blob_url"]

    published = client.post("/api/admin/publish-award", headers=admin_headers, json={
        "badge_id": badge["id"],
        "person": {"name": "Ada"},
        "project": {"name": "Compiler X", "short_desc": "shipped a compiler"},
        "citation": "For shipping a compiler",
    }).json()
    permalink = published["permalink"]
    assert len(permalink) == 8
    assert published["shareUrl"].endswith(f"/a/{permalink}")

    page = client.get(f"/a/{permalink}")
    assert page.status_code == 200
    for text in ("Code Warrior", "Ada", "Compiler X", "For shipping a compiler"):
        assert text in page.text

    client.delete("/api/admin/delete-award", params={"id": published["award"]["id"]}, headers=admin_headers)
    assert client.get(f"/a/{permalink}").status_code == 404
    assert client.get(f"/api/awards/{permalink}").status_code == 404


def test_publish_rejects_blank_fields(client, admin_headers, make_badge, session):
    badge = make_badge()
    base = {
        "badge_id": badge["id"],
        "person": {"name": "Ada"},
        "project": {"name": "Compiler X", "short_desc": "A compiler"},
        "citation": "For shipping a compiler",
    }
    for blanked in (
        dict(base, citation="    "),
        dict(base, person={"name": "   "}),
        dict(base, project={"name": "\t", "short_desc": "A compiler"}),
        dict(base, project={"name": "Compiler X", "short_desc": "  "}),
    ):
        resp = client.post("/api/admin/publish-award", headers=admin_headers, json=blanked)
        assert resp.status_code == 400
        assert resp.json()["detail"] == "Invalid request data"
    assert session.query(Award).count() == 0
    assert session.query(Person).count() == 0


def test_publish_trims_text_fields(client, admin_headers, make_badge, session):
    badge = make_badge()
    resp = client.post("/api/admin/publish-award", headers=admin_headers, json={
        "badge_id": badge["id"],
        "person": {"name": "  Ada  "},
        "project": {"name": " Compiler X ", "short_desc": "A compiler "},
        "citation": "  For shipping a compiler  ",
    })
    assert resp.status_code == 200
    award = resp.json()["award"]
    assert award["citation"] == "For shipping a compiler"
    assert session.get(Person, award["person_id"]).name == "Ada"
    assert session.get(Project, award["project_id"]).name == "Compiler X"


def test_preview_rejects_blank_name(client, admin_headers):
    resp = client.post("/api/admin/preview-prompt", headers=admin_headers, json={
        "name": "   ", "description": "shipped a compiler", "style": "round-medal-minimal",
    })
    assert resp.status_code == 400


def test_misconfigured_text_provider_hides_details(client, admin_headers, monkeypatch, caplog):
    app.dependency_overrides.pop(deps.get_text_provider)
    monkeypatch.setattr(settings, "TEXT_PROVIDER", "mystery")

    with caplog.at_level(logging.ERROR, logger="deps"):
        resp = client.post("/api/admin/preview-prompt", headers=admin_headers, json={
            "name": "Code Warrior", "description": "shipped a compiler", "style": "round-medal-minimal",
        })
    assert resp.status_code == 500
    assert resp.json()["detail"] == "AI provider not configured"
    assert "mystery" not in resp.text
    # el detalle queda en el log
    assert "mystery" in caplog.text


def test_misconfigured_image_provider_hides_details(client, admin_headers, monkeypatch, caplog):
    app.dependency_overrides.pop(deps.get_image_provider)
    monkeypatch.setattr(settings, "IMAGE_PROVIDER", "anthropic")

    with caplog.at_level(logging.ERROR, logger="deps"):
        resp = client.post("/api/admin/generate-image", headers=admin_headers, json={
            "name": "Code Warrior", "style": "round-medal-minimal", "brief": VALID_BRIEF,
        })
    assert resp.status_code == 500
    assert resp.json()["detail"] == "AI provider not configured"
    assert "IMAGE_PROVIDER" not in resp.text
    assert "IMAGE_PROVIDER desconocido" in caplog.text
