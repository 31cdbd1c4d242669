import pytest

from app.cms.content import NEW_ITEM_ID, ContentRegistry, UnknownContentType
from app.cms.editor import Mergeable
from app.cms.modules import pages
from app.cms.modules.pages.models import Page, Submission


def test_registry_new_and_names():
    reg = ContentRegistry()
    pages.register(reg)
    assert reg.names() == ["Page", "Submission"]
    p = reg.new("Page")
    assert isinstance(p, Page)
    assert p.id == NEW_ITEM_ID


def test_registry_load_uses_loader_and_status():
    calls = []

    def loader(item_id, status):
        calls.append((item_id, status))
        return Page(id=item_id, title="Loaded") if item_id == 7 else None

    reg = ContentRegistry()
    reg.register("Page", Page, loader=loader)

    assert reg.load("Page", 7, "pending").title == "Loaded"
    assert reg.load("Page", 8) is None
    assert calls == [(7, "pending"), (8, "")]
    # new items never hit the loader
    assert isinstance(reg.load("Page", NEW_ITEM_ID), Page)
    assert len(calls) == 2


def test_registry_load_without_loader_returns_none():
    reg = ContentRegistry()
    reg.register("Page", Page)
    assert reg.load("Page", 3) is None


def test_registry_unknown_type():
    reg = ContentRegistry()
    with pytest.raises(UnknownContentType):
        reg.new("Nope")
    with pytest.raises(KeyError):
        reg.load("Nope", 1)


def test_registry_requires_name():
    with pytest.raises(ValueError):
        ContentRegistry().register("  ", Page)


def test_page_editor_hides_tags_from_contributors():
    page = Page(title="About", slug="about", tags=["featured"])
    contributor = page.marshal_editor("contributor")
    editor = page.marshal_editor("editor")

    assert b'<div style="display:none;"><div class="input-field col s12"><label class="active">Tags</label>' in contributor
    assert b"display:none" not in editor
    assert b'value="About"' in editor
    assert b"approve-post\" type=\"submit\"" not in editor


def test_submission_is_mergeable_and_shows_approval():
    sub = Submission(title="Guest post", submitter_email="guest@example.com")
    assert isinstance(sub, Mergeable)
    doc = sub.marshal_editor("editor")
    assert b'approve-post" type="submit"' in doc
    assert b'value="guest@example.com"' in doc
    assert b"delete-post\" type=\"submit\"" not in doc


def test_submission_approve_marks_item():
    sub = Submission(id=4)
    sub.approve(request=None)
    assert sub.approved is True


def test_plain_page_is_not_mergeable():
    assert not isinstance(Page(), Mergeable)
