"""
Tests for overlay geometry.

Covers:
- Reference values at 1080x1920
- Proportional scaling at other resolutions
"""
import pytest

from services.overlay_layout import OverlayLayout


class TestOverlayLayout:

    @pytest.fixture
    def layout(self):
        return OverlayLayout.for_canvas(1080, 1920)

    def test_frame_is_centred_square(self, layout):
        assert layout.side == 540
        assert layout.frame_x == 270
        assert layout.frame_y == 690

    def test_margin_and_fonts(self, layout):
        assert layout.margin == pytest.approx(32.4)
        assert layout.date_font_size == 24
        assert layout.stats_font_size == 31

    def test_border_and_shadow(self, layout):
        assert layout.border_width == 6
        assert layout.shadow_blur == pytest.approx(15)
        assert layout.shadow_offset == 3

    def test_frame_box_straddles_edge(self, layout):
        assert layout.frame_box == (267, 687, 812, 1232)

    def test_stats_row(self, layout):
        assert layout.stats_y == pytest.approx(690 + 540 - 32.4)
        assert layout.column_width == 180
        assert [layout.column_center(i) for i in range(3)] == [360, 540, 720]

    def test_top_text_anchors(self, layout):
        date_x, date_y = layout.date_anchor
        sec_x, sec_y = layout.secondary_anchor
        assert date_x == pytest.approx(810 - 32.4)
        assert sec_x == pytest.approx(270 + 32.4)
        assert date_y == sec_y == pytest.approx(690 + 32.4 + 24)

    def test_default_is_output_canvas(self):
        assert OverlayLayout.for_canvas().canvas_size == (1080, 1920)

    def test_double_resolution_scales_everything(self, layout):
        big = OverlayLayout.for_canvas(2160, 3840)
        assert big.side == 2 * layout.side
        assert big.margin == pytest.approx(2 * layout.margin)
        assert big.border_width == 2 * layout.border_width
        assert big.shadow_offset == 2 * layout.shadow_offset
        assert big.shadow_blur == pytest.approx(2 * layout.shadow_blur)
        assert big.date_font_size == 49
        assert big.stats_font_size == 63
