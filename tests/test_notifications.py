"""Tests for perch.notifications: flash banner rendering."""

import re
from enum import Enum

import pytest
from kida.utils.html import Markup

from perch.flash import FlashMessages
from perch.notifications import flash_class, render_notifications


class Flash(Enum):
    ALERT = "alert"


def _render(key: object, message: str, **options: str) -> str:
    return str(render_notifications({key: message}, **options))


# Bootstrap 3 uses alert-danger, Bootstrap 2 alert-error
CASES = [
    ("success", r"alert alert-success", "flash is success"),
    ("notice", r"alert alert-info", "flash is notice"),
    ("error", r"alert alert-danger alert-error", "flash is error"),
    ("alert", r"alert alert-danger alert-error", "flash is alert"),
    ("custom", r"alert alert-custom", "flash is custom"),
]


class TestCategoryClasses:
    @pytest.mark.parametrize(("key", "expected_class", "message"), CASES)
    def test_prints_class(self, key: str, expected_class: str, message: str) -> None:
        assert re.search(expected_class, _render(key, message))

    @pytest.mark.parametrize(("key", "expected_class", "message"), CASES)
    def test_prints_message(self, key: str, expected_class: str, message: str) -> None:
        assert message in _render(key, message)

    def test_enum_key(self) -> None:
        assert "alert alert-danger alert-error" in _render(Flash.ALERT, "boom")

    def test_flash_class(self) -> None:
        assert flash_class("notice") == "alert alert-info"
        assert flash_class("warning") == "alert alert-warning"


class TestBanner:
    def test_can_fade_in(self) -> None:
        assert "fade in" in _render("alert", "not important")

    def test_can_be_dismissed(self) -> None:
        assert re.search(r"data-dismiss=.*alert", _render("alert", "not important"))

    def test_default_button(self) -> None:
        html = _render("alert", "not important")
        assert ">x</button>" in html
        assert 'button type="button" class="close"' in html

    def test_empty_button_content_override(self) -> None:
        html = _render("alert", "not important", button_content="")
        assert 'button type="button" class="close"' in html
        assert "></button>" in html

    def test_button_content_override(self) -> None:
        html = _render("alert", "not important", button_content="&times;")
        assert ">&times;</button>" in html

    def test_button_class_override(self) -> None:
        html = _render("alert", "not important", button_class="abc def")
        assert 'button type="button" class="abc def"' in html

    def test_full_fragment(self) -> None:
        assert _render("success", "Saved.") == (
            '<div class="alert alert-success fade in">'
            '<button type="button" class="close" data-dismiss="alert">x</button>'
            "Saved.</div>"
        )


class TestRendering:
    def test_insertion_order(self) -> None:
        html = str(render_notifications({"notice": "first", "error": "second"}))
        assert html.index("first") < html.index("second")
        assert html.count("<div") == 2

    def test_accepts_pairs(self) -> None:
        html = str(render_notifications([("notice", "one"), ("success", "two")]))
        assert "one" in html
        assert "two" in html

    def test_accepts_flash_store(self) -> None:
        html = str(render_notifications(FlashMessages({"notice": "from store"})))
        assert "from store" in html

    def test_skips_timedout(self) -> None:
        assert render_notifications({"timedout": "not important"}) == ""

    def test_skips_timedout_even_when_not_listed(self) -> None:
        assert render_notifications({"timedout": "x"}, ignored=()) == ""

    def test_skips_extra_ignored(self) -> None:
        html = str(render_notifications({"debug": "x", "notice": "y"}, ignored={"debug"}))
        assert "alert-debug" not in html
        assert "alert-info" in html

    @pytest.mark.parametrize("message", ["", "   ", None])
    def test_skips_blank_messages(self, message: str | None) -> None:
        assert render_notifications({"notice": message}) == ""

    def test_empty_store(self) -> None:
        result = render_notifications({})
        assert result == ""
        assert isinstance(result, Markup)

    def test_is_markup(self) -> None:
        result = render_notifications({"alert": "not important"})
        assert isinstance(result, Markup)
        assert hasattr(result, "__html__")


class TestSanitization:
    def test_strips_script_and_content(self) -> None:
        html = _render("alert", "<script>alert('XSS')</script>")
        assert "<script>" not in html
        assert "alert('XSS')" not in html

    def test_strips_anchor_keeps_text(self) -> None:
        html = _render("alert", '<a href="https://example.org">example page</a>')
        assert '<a href="https://example.org">example page</a>' not in html
        assert "<a " not in html
        assert "example page" in html

    def test_strips_images(self) -> None:
        html = _render("alert", 'Look <img src="https://example.org/image.jpg" />')
        assert "<img" not in html
        assert "Look" in html

    def test_message_made_blank_by_sanitizing_still_renders_banner(self) -> None:
        html = _render("alert", "<script>alert('XSS')</script>")
        assert "alert alert-danger" in html
