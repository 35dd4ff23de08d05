import pytest

from vecdraw.colours import Colour, Palette, rgb


def _channels(value):
    return value & 0xFF, (value >> 8) & 0xFF, (value >> 16) & 0xFF


def test_rgb_start_of_ramp_is_pure_red_low_byte():
    assert rgb(0.0) == 0x0000FF


def test_rgb_end_of_ramp_is_outside_every_step():
    assert rgb(1.0) == 0


@pytest.mark.parametrize("step", range(0, 1000, 7))
def test_rgb_stays_within_24_bits(step):
    assert 0 <= rgb(step / 1000) <= 0xFFFFFF


def test_rgb_first_sextant_raises_green_only():
    ratios = [i / 2000 for i in range(0, 333)]
    values = [_channels(rgb(r)) for r in ratios]
    assert all(red == 255 and blue == 0 for red, _, blue in values)
    greens = [green for _, green, _ in values]
    assert greens == sorted(greens)


def test_rgb_last_sextant_lowers_blue_with_full_red():
    ratios = [5 / 6 + i / 20000 for i in range(1, 3000)]
    values = [_channels(rgb(r)) for r in ratios]
    assert all(red == 255 and green == 0 for red, green, _ in values)
    blues = [blue for _, _, blue in values]
    assert blues == sorted(blues, reverse=True)


def test_palette_lookup_by_value_gives_usable_ints():
    bright_white = Palette(0xFFFFFF)
    black = Palette(0x010101)
    assert bright_white is Palette.BRIGHT_WHITE
    assert bright_white | black == Palette.BRIGHT_WHITE


def test_colour_lookup_by_value_round_trips_with_full_alpha():
    for member in Colour:
        looked_up = Colour(int(member))
        assert looked_up is member
        assert looked_up & 0xFF == 0xFF