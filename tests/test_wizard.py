import pytest

from badgeworks.core.errors import ProviderError
from badgeworks.models import Award, Badge
from badgeworks.wizard import AdminWizard, WizardStateError, WizardStep

from conftest import ADMIN_KEY

ADA = {"name": "Ada", "handle": "@ada"}
COMPILER_X = {"name": "Compiler X", "short_desc": "shipped a compiler"}


@pytest.fixture
def wizard(client):
    return AdminWizard(client, ADMIN_KEY)


def test_full_flow(wizard, client):
    assert wizard.step is WizardStep.DRAFT

    assert wizard.preview_brief("Code Warrior", "shipped a compiler")
    assert wizard.step is WizardStep.BRIEF_PREVIEWED
    assert wizard.brief["short_title"] == "Code Warrior"
    assert "_metadata" not in wizard.brief

    assert wizard.generate_image()
    assert wizard.step is WizardStep.IMAGE_GENERATED
    assert wizard.badge["thumb_blob_url"]
    assert wizard.actual_prompt

    assert wizard.enter_recipient(ADA, COMPILER_X, "For shipping a compiler")
    assert wizard.step is WizardStep.RECIPIENT_ENTERED
    assert wizard.person["handle"] == "ada"

    assert wizard.publish()
    assert wizard.step is WizardStep.PUBLISHED
    assert len(wizard.permalink) == 8
    assert wizard.share_url.endswith(f"/a/{wizard.permalink}")
    assert client.get(f"/a/{wizard.permalink}").status_code == 200


def test_nothing_persisted_before_publish(wizard, session):
    wizard.preview_brief("Code Warrior", "shipped a compiler")
    wizard.generate_image()
    wizard.enter_recipient(ADA, COMPILER_X, "For shipping a compiler")
    assert session.query(Award).count() == 0


def test_failed_step_keeps_state(wizard, text_provider):
    text_provider.error = ProviderError("[fake] timeout")
    assert not wizard.preview_brief("Code Warrior", "shipped a compiler")
    assert wizard.step is WizardStep.DRAFT
    assert wizard.error == "Failed to generate badge brief"

    # el admin reintenta
    text_provider.error = None
    assert wizard.preview_brief("Code Warrior", "shipped a compiler")
    assert wizard.error is None


def test_failed_image_keeps_brief(wizard, image_provider):
    wizard.preview_brief("Code Warrior", "shipped a compiler")
    image_provider.error = ProviderError("[fake] quota")
    assert not wizard.generate_image()
    assert wizard.step is WizardStep.BRIEF_PREVIEWED
    assert wizard.brief is not None
    assert wizard.error == "Failed to generate and store badge"


def test_invalid_recipient_is_local(wizard):
    wizard.preview_brief("Code Warrior", "shipped a compiler")
    wizard.generate_image()
    assert not wizard.enter_recipient({"name": ""}, COMPILER_X, "For shipping a compiler")
    assert wizard.step is WizardStep.IMAGE_GENERATED
    assert wizard.error

    assert not wizard.enter_recipient(ADA, COMPILER_X, "   ")
    assert wizard.error == "Citation is required"


def test_back_is_local_and_keeps_data(wizard, session):
    wizard.preview_brief("Code Warrior", "shipped a compiler")
    wizard.generate_image()
    badge_id = wizard.badge["id"]

    assert wizard.back() is WizardStep.BRIEF_PREVIEWED
    assert wizard.badge["id"] == badge_id
    assert wizard.brief is not None
    assert wizard.back() is WizardStep.DRAFT
    assert wizard.back() is WizardStep.DRAFT
    assert session.query(Badge).count() == 1


def test_steps_out_of_order(wizard):
    with pytest.raises(WizardStateError):
        wizard.generate_image()
    with pytest.raises(WizardStateError):
        wizard.publish()


def test_published_is_terminal(wizard):
    wizard.preview_brief("Code Warrior", "shipped a compiler")
    wizard.generate_image()
    wizard.enter_recipient(ADA, COMPILER_X, "For shipping a compiler")
    wizard.publish()
    with pytest.raises(WizardStateError):
        wizard.back()


def test_wrong_key_reports_error(client):
    wizard = AdminWizard(client, "wrong")
    assert not wizard.preview_brief("Code Warrior", "shipped a compiler")
    assert wizard.error == "Unauthorized"
