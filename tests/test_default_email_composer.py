MODULE = "app.adapters.driven.email_composer_default"

import types
from importlib import import_module

from app.domain.entities import SubscriptionRequest

m = import_module(MODULE)


def _patch_settings(monkeypatch, **overrides):
    base = dict(
        PRODUCT_NAME="IF97",
        LIST_OWNER_MAILBOX="if97@hummeling.com",
        SENDER_MAILBOX="engineering@hummeling.com",
        SUBJECT="IF97 mailing list",
    )
    base.update(overrides)
    monkeypatch.setattr(f"{MODULE}.settings", types.SimpleNamespace(**base), raising=True)


def test_compose_list_add_goes_to_owner_with_user_line(monkeypatch):
    _patch_settings(monkeypatch)
    data = SubscriptionRequest(name="Jane Doe", address="jane@example.com")

    msg = m.DefaultEmailComposer().compose_list_add(data)

    assert msg.to == "if97@hummeling.com"
    assert msg.subject == "IF97 mailing list"
    assert msg.text == "Jane Doe <jane@example.com>"
    assert msg.sender == "engineering@hummeling.com"


def test_compose_confirmation_goes_to_subscriber(monkeypatch):
    _patch_settings(monkeypatch)
    data = SubscriptionRequest(name="Jane Doe", address="jane@example.com")

    msg = m.DefaultEmailComposer().compose_confirmation(data)

    assert msg.to == "jane@example.com"
    assert msg.subject == "IF97 mailing list"
    assert msg.sender == "engineering@hummeling.com"
    assert msg.text.startswith("Dear Jane Doe,\n\n")
    assert "Thank you for your interest in IF97 Java library!" in msg.text
    assert "Send us a message when you want to be removed." in msg.text
    assert msg.text.endswith("www.hummeling.com")


def test_compose_uses_configured_product_and_mailboxes(monkeypatch):
    _patch_settings(
        monkeypatch,
        PRODUCT_NAME="Steam",
        LIST_OWNER_MAILBOX="list@test",
        SENDER_MAILBOX="noreply@test",
        SUBJECT="Steam mailing list",
    )
    data = SubscriptionRequest(name="", address="x@test.org")
    composer = m.DefaultEmailComposer()

    notice = composer.compose_list_add(data)
    confirmation = composer.compose_confirmation(data)

    assert notice.to == "list@test"
    assert notice.text == " <x@test.org>"
    assert confirmation.subject == "Steam mailing list"
    assert "interest in Steam Java library" in confirmation.text
    assert confirmation.text.startswith("Dear ,")
