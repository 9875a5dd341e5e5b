import pytest

from quiz_canvas.core.layout_engine import LayoutEngine, column_count, compute_layout
from quiz_canvas.core.models import Rect

VIEWPORTS = [
    (360, 360),
    (599, 480),
    (600, 600),
    (800, 600),
    (1000, 700),
    (1001, 400),
    (1280, 720),
    (1920, 1080),
    (400, 1200),
]


def test_design_resolution_uses_design_values():
    geometry = compute_layout(800, 600)

    assert geometry.scale == 1.0
    assert geometry.margin == 50
    assert geometry.gap == 24
    assert geometry.title_size == 40
    assert geometry.subtitle_size == 24
    assert geometry.question_size == 24
    assert geometry.option_text_size == 20
    assert geometry.button_height == 50
    assert geometry.button_corner == 8
    assert geometry.question_origin == pytest.approx((50, 60))
    assert geometry.options_top == pytest.approx(60 + 24 * 3)


def test_small_viewport_clamps_to_floors():
    geometry = compute_layout(400, 300)

    assert geometry.scale == 0.5
    assert geometry.margin == 25
    assert geometry.gap == 12
    assert geometry.title_size == 20
    assert geometry.subtitle_size == 12
    assert geometry.question_size == 14
    assert geometry.option_text_size == 12
    assert geometry.button_height == 36
    assert geometry.button_corner == 4


def test_scale_follows_the_tighter_dimension():
    assert compute_layout(1600, 600).scale == 1.0
    assert compute_layout(800, 1200).scale == 1.0
    assert compute_layout(400, 600).scale == 0.5


@pytest.mark.parametrize(
    ("width", "columns"),
    [(400, 1), (599, 1), (600, 1), (800, 1), (1000, 1), (1001, 2), (1920, 2)],
)
def test_only_wide_viewports_use_two_columns(width, columns):
    assert column_count(width) == columns
    assert compute_layout(width, 600).columns == columns


@pytest.mark.parametrize(("width", "height"), VIEWPORTS)
def test_option_rects_stay_inside_the_viewport(width, height):
    geometry = compute_layout(width, height)

    assert len(geometry.option_rects) == 4
    for rect in geometry.option_rects:
        assert rect.x >= geometry.margin - 1e-9
        assert rect.right <= width - geometry.margin + 1e-9
        assert rect.y >= geometry.options_top - 1e-9
        assert rect.bottom <= height


@pytest.mark.parametrize(("width", "height"), VIEWPORTS)
def test_rects_in_the_same_row_do_not_overlap(width, height):
    geometry = compute_layout(width, height)

    rows: dict[float, list[Rect]] = {}
    for rect in geometry.option_rects:
        rows.setdefault(rect.y, []).append(rect)
    for row in rows.values():
        row.sort(key=lambda r: r.x)
        for left, right in zip(row, row[1:]):
            assert left.right < right.x


def test_two_column_layout_fills_rows_left_to_right():
    rects = compute_layout(1200, 800).option_rects

    assert rects[0].y == rects[1].y
    assert rects[2].y == rects[3].y
    assert rects[0].x == rects[2].x
    assert rects[1].x > rects[0].x
    assert rects[2].y > rects[0].y


def test_single_column_layout_stacks_options():
    geometry = compute_layout(800, 600)
    rects = geometry.option_rects

    assert len({rect.x for rect in rects}) == 1
    assert all(rect.w == 800 - 2 * geometry.margin for rect in rects)
    pitch = geometry.button_height + geometry.gap
    for upper, lower in zip(rects, rects[1:]):
        assert lower.y - upper.y == pytest.approx(pitch)


def test_rect_count_matches_option_count():
    assert len(compute_layout(800, 600, option_count=3).option_rects) == 3
    assert compute_layout(800, 600, option_count=0).option_rects == ()


def test_hit_test_is_strict_on_every_edge():
    rect = Rect(10, 20, 100, 50)

    assert rect.contains(60, 45)
    assert not rect.contains(10, 45)
    assert not rect.contains(110, 45)
    assert not rect.contains(60, 20)
    assert not rect.contains(60, 70)
    assert not rect.contains(10, 20)
    assert rect.contains(10.001, 20.001)


def test_option_at_returns_minus_one_outside_and_on_edges():
    geometry = compute_layout(800, 600)
    first = geometry.option_rects[0]

    assert geometry.option_at(first.x + 1, first.y + 1) == 0
    assert geometry.option_at(first.x, first.y + 1) == -1
    assert geometry.option_at(5, 5) == -1
    # Point in the gap between two stacked buttons.
    assert geometry.option_at(first.x + 1, first.bottom + geometry.gap / 2) == -1


def test_resize_is_idempotent():
    engine = LayoutEngine(800, 600)
    engine.layout_question(0, 4)

    first = engine.resize(1024, 768)
    second = engine.resize(1024, 768)

    assert first == second
    assert first.option_rects == second.option_rects


def test_resize_keeps_question_binding():
    engine = LayoutEngine(800, 600)
    engine.layout_question(2, 3)

    geometry = engine.resize(1200, 900)

    assert geometry.question_index == 2
    assert len(geometry.option_rects) == 3
    assert geometry.columns == 2
    assert engine.viewport_size == (1200, 900)


def test_layout_question_rebinds_geometry():
    engine = LayoutEngine(800, 600)
    assert engine.geometry.question_index is None

    geometry = engine.layout_question(1, 4)

    assert geometry.question_index == 1
    assert engine.geometry is geometry
