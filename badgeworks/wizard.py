# badgeworks/wizard.py
"""
Cliente del asistente de admin (pasos 1-5).

El estado del formulario vive solo aquí, en memoria del cliente: nada se
persiste hasta publish(). Cada paso hacia adelante hace una sola llamada HTTP
(salvo enter_recipient, que es local); back() nunca llama al servidor.

Funciona con cualquier sesión compatible con requests (requests.Session o el
TestClient de FastAPI).
"""
import logging
from enum import Enum
from typing import Any, Optional

import requests
from pydantic import ValidationError

from badgeworks.core.errors import BadgeworksError
from badgeworks.schemas.award import PersonIn, ProjectIn

log = logging.getLogger("wizard")


class WizardStep(str, Enum):
    DRAFT = "draft"
    BRIEF_PREVIEWED = "brief_previewed"
    IMAGE_GENERATED = "image_generated"
    RECIPIENT_ENTERED = "recipient_entered"
    PUBLISHED = "published"


_ORDER = list(WizardStep)


class WizardStateError(BadgeworksError):
    """Se llamó a un paso desde un estado que no le corresponde."""


class AdminWizard:
    def __init__(self, session, admin_key: str, base_url: str = ""):
        self.session = session
        self.admin_key = admin_key
        self.base_url = base_url.rstrip("/")
        self.step = WizardStep.DRAFT
        self.error: Optional[str] = None

        # paso 1
        self.name: Optional[str] = None
        self.description: Optional[str] = None
        self.style: str = "round-medal-minimal"
        self.style_template: Optional[str] = None
        self.reference_style: Optional[str] = None
        self.quality: Optional[str] = None
        # paso 2
        self.brief: Optional[dict] = None
        # paso 3
        self.badge: Optional[dict] = None
        self.actual_prompt: Optional[str] = None
        # paso 4
        self.person: Optional[dict] = None
        self.project: Optional[dict] = None
        self.citation: Optional[str] = None
        # paso 5
        self.award: Optional[dict] = None
        self.permalink: Optional[str] = None
        self.share_url: Optional[str] = None

    # ---------- helpers ----------
    def _require(self, *steps: WizardStep) -> None:
        if self.step not in steps:
            allowed = ", ".join(s.value for s in steps)
            raise WizardStateError(f"paso actual {self.step.value}; se esperaba {allowed}")

    def _call(self, method: str, path: str, **kwargs) -> Optional[dict]:
        """Una llamada al API de admin. Devuelve el JSON o None (y deja self.error)."""
        headers = {"Authorization": f"Bearer {self.admin_key}"}
        try:
            resp = self.session.request(method, f"{self.base_url}{path}", headers=headers, **kwargs)
        except requests.RequestException as e:
            self.error = f"Network error: {e}"
            log.warning("%s %s falló: %s", method, path, e)
            return None

        try:
            data = resp.json()
        except ValueError:
            data = None

        if resp.status_code != 200:
            detail = data.get("detail") if isinstance(data, dict) else None
            self.error = detail if isinstance(detail, str) else f"HTTP {resp.status_code}"
            log.warning("%s %s -> %s (%s)", method, path, resp.status_code, self.error)
            return None
        if not isinstance(data, dict):
            self.error = "Unexpected response from server"
            return None

        self.error = None
        return data

    # ---------- paso 1 -> 2 ----------
    def preview_brief(
        self,
        name: str,
        description: str,
        style: str = "round-medal-minimal",
        *,
        style_template: Optional[str] = None,
        reference_style: Optional[str] = None,
        quality: Optional[str] = None,
    ) -> bool:
        self._require(WizardStep.DRAFT)
        self.name, self.description, self.style = name, description, style
        self.style_template, self.reference_style, self.quality = style_template, reference_style, quality

        data = self._call("POST", "/api/admin/preview-prompt", json={
            "name": name,
            "description": description,
            "style": style,
            "styleTemplate": style_template,
            "referenceStyle": reference_style,
            "quality": quality,
        })
        if data is None:
            return False
        data.pop("_metadata", None)
        self.brief = data
        self.step = WizardStep.BRIEF_PREVIEWED
        return True

    # ---------- paso 2 -> 3 ----------
    def generate_image(self, created_by: str = "admin") -> bool:
        self._require(WizardStep.BRIEF_PREVIEWED)
        data = self._call("POST", "/api/admin/generate-image", json={
            "name": self.name,
            "style": self.style,
            "brief": self.brief,
            "createdBy": created_by,
            "styleTemplate": self.style_template,
            "referenceStyle": self.reference_style,
            "quality": self.quality,
        })
        if data is None:
            return False
        self.badge = data["badge"]
        self.actual_prompt = data.get("actualPrompt")
        self.step = WizardStep.IMAGE_GENERATED
        return True

    # ---------- paso 3 -> 4 (local) ----------
    def enter_recipient(self, person: dict[str, Any], project: dict[str, Any], citation: str) -> bool:
        self._require(WizardStep.IMAGE_GENERATED)
        try:
            person_in = PersonIn(**person)
            project_in = ProjectIn(**project)
        except ValidationError as e:
            self.error = e.errors()[0].get("msg", "Invalid recipient data")
            return False
        if not (citation or "").strip():
            self.error = "Citation is required"
            return False

        self.person = person_in.model_dump()
        self.project = project_in.model_dump()
        self.citation = citation.strip()
        self.error = None
        self.step = WizardStep.RECIPIENT_ENTERED
        return True

    # ---------- paso 4 -> 5 ----------
    def publish(self) -> bool:
        self._require(WizardStep.RECIPIENT_ENTERED)
        data = self._call("POST", "/api/admin/publish-award", json={
            "badge_id": self.badge["id"],
            "person": self.person,
            "project": self.project,
            "citation": self.citation,
        })
        if data is None:
            return False
        self.award = data["award"]
        self.permalink = data["permalink"]
        self.share_url = data["shareUrl"]
        self.step = WizardStep.PUBLISHED
        return True

    def back(self) -> WizardStep:
        """Retrocede un paso sin tocar el servidor ni borrar lo ya cargado."""
        if self.step is WizardStep.PUBLISHED:
            raise WizardStateError("el award ya está publicado")
        idx = _ORDER.index(self.step)
        if idx > 0:
            self.step = _ORDER[idx - 1]
        self.error = None
        return self.step
