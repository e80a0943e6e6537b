"""Tests for the drawing primitives and the contact bar."""

from __future__ import annotations

import pytest

from resume_pdf.api.schemas.resume import ContactInfo
from resume_pdf.constants.layout_constants import (
    CONTENT_WIDTH,
    INK,
    LINK,
    MARGIN,
    PAGE_HEIGHT,
    PAGE_WIDTH,
    SUBTLE,
)
from resume_pdf.layout.cursor import FlowCursor
from resume_pdf.layout.document import LayoutDocument, Rule, TextRun
from resume_pdf.layout.metrics import FontVariant
from resume_pdf.layout.renderers import ContactItem, Renderer, build_contact_items

R = FontVariant.REGULAR
B = FontVariant.BOLD
I = FontVariant.ITALIC  # noqa: E741

TOP = PAGE_HEIGHT - MARGIN


@pytest.fixture
def document() -> LayoutDocument:
    return LayoutDocument()


@pytest.fixture
def renderer(document: LayoutDocument, metrics) -> Renderer:
    return Renderer(FlowCursor(document), metrics)


def _runs(document: LayoutDocument) -> list[TextRun]:
    return document.text_runs


def _rules(document: LayoutDocument) -> list[Rule]:
    return [op for page in document.pages for op in page.operations if isinstance(op, Rule)]


class TestLines:
    """Tests for line, centered and two_column."""

    def test_line_draws_at_cursor_and_advances(self, renderer, document) -> None:
        renderer.line("Hello", I, 10, 55, SUBTLE, 4)

        (run,) = _runs(document)
        assert run == TextRun("Hello", 55, TOP, I, 10, SUBTLE)
        assert renderer.cursor.y == pytest.approx(TOP - 13 - 4)

    def test_line_breaks_page_when_needed(self, renderer, document) -> None:
        renderer.cursor.y = MARGIN + 5
        renderer.line("Hello", R, 10, MARGIN)

        assert len(document.pages) == 2
        assert document.pages[0].operations == []
        assert document.pages[1].text_runs[0].y == TOP

    def test_centered_x(self, renderer, document) -> None:
        renderer.centered("Centered", B, 24, 0)

        (run,) = _runs(document)
        assert run.x == pytest.approx((PAGE_WIDTH - 8 * 12) / 2)
        assert renderer.cursor.y == pytest.approx(TOP - 24 * 1.3)

    def test_two_column_shares_baseline(self, renderer, document) -> None:
        renderer.two_column("Engineer, Acme", B, "2020 – 2021", R, 10, 1)

        left, right = _runs(document)
        assert left.x == MARGIN
        assert left.y == right.y == TOP
        assert left.color == INK
        assert right.color == SUBTLE
        assert right.x == pytest.approx(PAGE_WIDTH - MARGIN - 11 * 5)
        assert renderer.cursor.y == pytest.approx(TOP - 13 - 1)


class TestSectionHeader:
    """Tests for section_header."""

    def test_title_rule_and_spacing(self, renderer, document) -> None:
        renderer.section_header("Experience")

        (title,) = _runs(document)
        (rule,) = _rules(document)
        assert title.text == "EXPERIENCE"
        assert title.font is B
        assert title.size == 10.5
        assert title.y == pytest.approx(TOP - 8)
        assert (rule.x0, rule.x1) == (MARGIN, PAGE_WIDTH - MARGIN)
        assert rule.y0 == rule.y1 == pytest.approx(TOP - 12)
        assert renderer.cursor.y == pytest.approx(TOP - 27)

    def test_moves_to_new_page_when_near_bottom(self, renderer, document) -> None:
        renderer.cursor.y = MARGIN + 20
        renderer.section_header("Skills")

        assert len(document.pages) == 2
        assert document.pages[1].text_runs[0].y == TOP


class TestWrappedBlocks:
    """Tests for wrapped, bulleted_paragraph and labelled_list."""

    def test_wrapped_indents_and_applies_gap_once(self, renderer, document, metrics) -> None:
        text = " ".join(["word"] * 60)
        renderer.wrapped(text, R, 10, indent=20, gap=4)

        runs = _runs(document)
        assert len(runs) > 1
        assert all(run.x == MARGIN + 20 for run in runs)
        assert all(metrics.width(run.text, R, 10) <= CONTENT_WIDTH - 20 for run in runs)
        assert renderer.cursor.y == pytest.approx(TOP - len(runs) * 13.5 - 4)

    def test_bullet_marker_only_on_first_line(self, renderer, document) -> None:
        text = " ".join(["bullet"] * 50)
        renderer.bulleted_paragraph(text, R, 10.5)

        runs = _runs(document)
        markers = [run for run in runs if run.text == "•"]
        lines = [run for run in runs if run.text != "•"]
        assert len(lines) >= 2
        assert len(markers) == 1
        assert markers[0].x == MARGIN + 2
        assert markers[0].y == lines[0].y
        assert all(run.x == MARGIN + 14 for run in lines)

    def test_bullet_split_across_pages(self, renderer, document) -> None:
        line_height = 10.5 * 1.35
        renderer.cursor.y = MARGIN + line_height + 1
        renderer.bulleted_paragraph(" ".join(["bullet"] * 50), R, 10.5)

        assert len(document.pages) == 2
        first, second = document.pages
        assert [run.text for run in first.text_runs][0] == "•"
        assert all(run.text != "•" for run in second.text_runs)
        assert second.text_runs[0].y == TOP

    def test_labelled_list_hanging_indent(self, renderer, document) -> None:
        skills = ", ".join(f"Skill{i}" for i in range(40))
        renderer.labelled_list("Languages: ", skills, 10.5, gap=3)

        label, *lines = _runs(document)
        label_width = len("Languages: ") * 10.5 * 0.5
        assert label.font is B
        assert label.x == MARGIN
        assert len(lines) >= 2
        assert lines[0].y == label.y
        assert all(run.x == pytest.approx(MARGIN + label_width) for run in lines)
        assert lines[1].y < lines[0].y

    def test_labelled_list_with_no_items_draws_label(self, renderer, document) -> None:
        renderer.labelled_list("Empty: ", "", 10.5)
        assert [run.text for run in _runs(document)] == ["Empty: "]


class TestBuildContactItems:
    """Tests for build_contact_items."""

    def test_none_contact(self) -> None:
        assert build_contact_items(None) == []

    def test_order_and_flags(self) -> None:
        items = build_contact_items(
            ContactInfo(
                github="https://github.com/me",
                email="me@example.com",
                linkedin="https://linkedin.com/in/me",
                website="https://me.dev",
            )
        )
        assert [i.label for i in items] == ["me@example.com", "Personal site", "LinkedIn", "GitHub"]
        assert items[0] == ContactItem("me@example.com", "mailto:me@example.com", is_link=False)
        assert [i.is_link for i in items] == [False, True, True, True]

    def test_skips_missing_fields(self) -> None:
        items = build_contact_items(ContactInfo(linkedin="https://linkedin.com/in/me"))
        assert items == [ContactItem("LinkedIn", "https://linkedin.com/in/me", is_link=True)]

    def test_skips_blank_fields(self) -> None:
        items = build_contact_items(
            ContactInfo(email="", website="  ", linkedin=None, github="https://github.com/me")
        )
        assert items == [ContactItem("GitHub", "https://github.com/me", is_link=True)]


class TestContactBar:
    """Tests for the contact bar."""

    ITEMS = [
        ContactItem("me@example.com", "mailto:me@example.com"),
        ContactItem("Personal site", "https://me.dev", is_link=True),
        ContactItem("GitHub", "https://github.com/me", is_link=True),
    ]

    def test_row_is_centered(self, renderer, document, metrics) -> None:
        left = renderer.contact_bar(self.ITEMS)

        widths = [metrics.width(item.label, R, 9) for item in self.ITEMS]
        separator = metrics.width("   |   ", R, 9)
        expected = (PAGE_WIDTH - (sum(widths) + separator * 2)) / 2
        assert left == pytest.approx(expected)
        assert _runs(document)[0].x == pytest.approx(expected)

    def test_items_and_separators_left_to_right(self, renderer, document) -> None:
        renderer.contact_bar(self.ITEMS)

        runs = _runs(document)
        assert [run.text for run in runs] == [
            "me@example.com",
            "   |   ",
            "Personal site",
            "   |   ",
            "GitHub",
        ]
        xs = [run.x for run in runs]
        assert xs == sorted(xs)
        assert len({run.y for run in runs}) == 1

    def test_one_annotation_per_link(self, renderer, document) -> None:
        renderer.contact_bar(self.ITEMS)

        annotations = document.pages[0].annotations
        assert len(annotations) == sum(item.is_link for item in self.ITEMS)
        assert [a.target for a in annotations] == ["https://me.dev", "https://github.com/me"]

    def test_link_rect_and_underline(self, renderer, document) -> None:
        renderer.contact_bar(self.ITEMS)

        site_run = next(run for run in _runs(document) if run.text == "Personal site")
        site_width = len("Personal site") * 4.5
        annotation = document.pages[0].annotations[0]
        x0, y0, x1, y1 = annotation.rect
        assert x0 == pytest.approx(site_run.x)
        assert x1 - x0 == pytest.approx(site_width)
        assert y0 == pytest.approx(site_run.y - 2)
        assert y1 - y0 == pytest.approx(9 + 4)
        assert site_run.color == LINK

        underlines = _rules(document)
        assert len(underlines) == 2
        assert underlines[0].y0 == pytest.approx(site_run.y - 1)
        assert underlines[0].x1 - underlines[0].x0 == pytest.approx(site_width)

    def test_advances_like_a_line_plus_gap(self, renderer) -> None:
        renderer.contact_bar(self.ITEMS)
        assert renderer.cursor.y == pytest.approx(TOP - 9 * 1.3 - 12)

    def test_empty_bar_draws_nothing(self, renderer, document) -> None:
        assert renderer.contact_bar([]) is None
        assert document.pages[0].operations == []
        assert renderer.cursor.y == TOP
