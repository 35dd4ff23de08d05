import pytest

from vecdraw.colours import Palette, rgb
from vecdraw.framebuffer import Framebuffer, PixelFormat, Viewport, escape_time


def test_default_pixel_format_keeps_rrggbb_layout():
    assert PixelFormat().pack(Palette.RED) == Palette.RED


def test_swapped_pixel_format_moves_red_to_low_byte():
    fmt = PixelFormat(red_offset=0, green_offset=8, blue_offset=16)
    assert fmt.pack(0x112233) == 0x332211


def test_pixel_reaches_front_only_after_swap():
    fb = Framebuffer(4, 3)
    fb.set_pixel(2, 1, Palette.CYAN)
    assert fb.get_pixel(2, 1) == Palette.CYAN
    assert fb.front_pixel(2, 1) == 0
    fb.swap()
    assert fb.front_pixel(2, 1) == Palette.CYAN


def test_fill_sets_every_pixel():
    fb = Framebuffer(5, 4)
    fb.fill(Palette.BLUE)
    assert {fb.get_pixel(x, y) for x in range(5) for y in range(4)} == {Palette.BLUE}


def test_write_past_end_is_dropped():
    fb = Framebuffer(3, 2)
    fb.set_pixel(0, 2, Palette.RED)
    fb.set_pixel(3, 1, Palette.RED)
    assert all(fb.get_pixel(x, y) == 0 for x in range(3) for y in range(2))


def test_get_pixel_out_of_range_raises():
    fb = Framebuffer(3, 2)
    with pytest.raises(IndexError):
        fb.get_pixel(3, 0)
    with pytest.raises(IndexError):
        fb.front_pixel(0, -1)


def test_invalid_dimensions_rejected():
    with pytest.raises(ValueError):
        Framebuffer(0, 10)


def test_viewport_quit_and_pan():
    vp = Viewport()
    start_top, start_bottom, start_left = vp.top, vp.bottom, vp.left
    assert vp.move("w") is True
    assert vp.top == pytest.approx(start_top + vp.step)
    assert vp.bottom == pytest.approx(start_bottom + vp.step)
    vp.move("s")
    assert vp.top == pytest.approx(start_top)
    vp.move("d")
    assert vp.left == pytest.approx(start_left - vp.step)
    assert vp.move("q") is False


def test_viewport_ignores_other_keys():
    vp = Viewport()
    before = (vp.left, vp.right, vp.top, vp.bottom)
    assert vp.move("x") is True
    assert (vp.left, vp.right, vp.top, vp.bottom) == before


def test_escape_time_marks_origin_as_inside_set():
    fb = Framebuffer(4, 4)
    escape_time(fb, Viewport(left=-0.5, right=0.5, top=0.5, bottom=-0.5), max_iter=32)
    assert fb.get_pixel(2, 2) == Palette.BLACK
    assert fb.get_pixel(0, 0) == Palette.BLACK


def test_escape_time_far_points_escape_after_one_iteration():
    fb = Framebuffer(3, 2)
    escape_time(fb, Viewport(left=10.0, right=11.0, top=10.0, bottom=9.0), max_iter=16)
    expected = rgb(1 / 16)
    assert {fb.get_pixel(x, y) for x in range(3) for y in range(2)} == {expected}