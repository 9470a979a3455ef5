from __future__ import annotations

from reportlab.pdfbase import pdfmetrics

from rapporto_cassette.core.models import Section
from rapporto_cassette.services.pdf.checklist.measure import (
    caption_lines,
    estimate_section_height,
    fit_to_width,
    wrap_text,
)
from rapporto_cassette.services.pdf.checklist.models import Placement, PlacementState
from rapporto_cassette.services.pdf.checklist.style import DEFAULT_STYLE
from rapporto_cassette.services.pdf.checklist.table import draw_section
from tests.helpers import RecordingCanvas


def char_width(text: str, font_name: str, font_size: float) -> float:
    return float(len(text))


SAMPLE_TEXTS = [
    "Cassetta di primo soccorso con guanti sterili monouso e garze",
    "  spazi   multipli\tdentro   il testo  ",
    "parola",
    "supercalifragilistichespiralidoso breve testo dopo",
    "a b c d e f g h i j k l m n o p q r s t u v w x y z",
]


def test_empty_text_yields_no_lines():
    assert wrap_text("", 100, "Helvetica", 10) == []
    assert wrap_text("   ", 100, "Helvetica", 10) == []


def test_wrap_respects_limit_with_safety_margin():
    lines = wrap_text("aaa bbb ccc ddd", 20, "x", 1, safety_margin=15, string_width=char_width)
    assert lines == ["aaa", "bbb", "ccc", "ddd"]
    lines = wrap_text("aaa bbb ccc ddd", 25, "x", 1, safety_margin=15, string_width=char_width)
    assert lines == ["aaa bbb", "ccc ddd"]


def test_overlong_word_gets_its_own_line():
    lines = wrap_text("ok lunghissimaparola ok", 20, "x", 1, safety_margin=10, string_width=char_width)
    assert lines == ["ok", "lunghissimaparola", "ok"]


def test_wrapping_is_total_and_bounded():
    for text in SAMPLE_TEXTS:
        for max_width in (40, 80, 150, 400):
            lines = wrap_text(text, max_width, "Helvetica", 10)
            assert " ".join(lines) == " ".join(text.split())
            for line in lines:
                width = pdfmetrics.stringWidth(line, "Helvetica", 10)
                assert width <= max_width - 15 or " " not in line


def test_wrapping_is_idempotent():
    for text in SAMPLE_TEXTS:
        lines = wrap_text(text, 120, "Helvetica", 10)
        assert [wrap_text(line, 120, "Helvetica", 10) for line in lines] == [[line] for line in lines]


def test_fit_to_width_keeps_short_text():
    assert fit_to_width("Garza", 10, "x", 1, string_width=char_width) == "Garza"
    assert fit_to_width("", 10, "x", 1, string_width=char_width) == ""


def test_fit_to_width_cuts_with_ellipsis():
    assert fit_to_width("LOTTOABCD", 8, "x", 1, string_width=char_width) == "LOTTO..."
    assert fit_to_width("ab cdefgh", 6, "x", 1, string_width=char_width) == "ab..."
    assert fit_to_width("LOTTOABCD", 2, "x", 1, string_width=char_width) == ""

    fitted = fit_to_width("MED-0001-STERILE", 24.6, "Helvetica", 5.5)
    assert fitted.endswith("...")
    assert pdfmetrics.stringWidth(fitted, "Helvetica", 5.5) <= 24.6


def test_estimate_grows_with_items(make_section):
    small = estimate_section_height(make_section(count=1))
    large = estimate_section_height(make_section(count=6))
    assert large - small >= 5 * DEFAULT_STYLE.item_spacing


def test_estimate_accounts_for_blocked_heading(make_item):
    plain = Section(title="K1", items=[make_item("Garza"), make_item("Lacci")])
    blocked = Section(title="K1", items=[make_item("Garza"), make_item("Lacci", recall=True)])
    assert estimate_section_height(blocked) > estimate_section_height(plain)


def test_caption_wraps_inside_column(make_item):
    section = Section(
        title="K1",
        location="Reparto manutenzione straordinaria piano interrato",
        responsible="Responsabile della sicurezza aziendale",
        items=[make_item()],
    )
    lines = caption_lines(section)
    assert len(lines) > 1
    assert " ".join(lines) == section.caption()


def _drawn_extent(canvas: RecordingCanvas) -> tuple[float, float]:
    ys: list[float] = []
    for args, _ in canvas.named("rect"):
        ys.extend([args[1], args[1] + args[3]])
    for args, _ in canvas.named("line"):
        ys.extend([args[1], args[3]])
    for args, _ in canvas.named("drawString"):
        ys.append(args[1])
    return min(ys), max(ys)


def test_estimate_never_underestimates_drawn_height(make_item):
    cases = [
        Section(title="Vuoto"),
        Section(title="K1", items=[make_item("Garza", days=4)]),
        Section(
            title="K2",
            location="Laboratorio chimico con nome molto lungo per forzare l'a capo",
            items=[make_item(f"Articolo {index}", days=index) for index in range(12)]
            + [make_item(f"Bloccato {index}", quarantine=True) for index in range(5)],
        ),
    ]
    for section in cases:
        height = estimate_section_height(section)
        placement = Placement(page_index=0, column=1, y=700, height=height, state=PlacementState.ON_PAGE_HAS_ROOM)
        canvas = RecordingCanvas()
        draw_section(canvas, section=section, placement=placement, style=DEFAULT_STYLE)
        lowest, highest = _drawn_extent(canvas)
        assert highest <= placement.y
        assert lowest >= placement.bottom
