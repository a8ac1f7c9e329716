"""
Tests for tile color derivation.
"""

from unittest import TestCase, main

import numpy as np

from slidingtiles.core.colors import (
    BASE_COLORS,
    LUMINANCE_THRESHOLD,
    THEME,
    TileColors,
    derive_colors,
    interpolate,
    parse_hex,
    relative_luminance,
    to_hex,
)


class TestDeriveColors(TestCase):
    """Palette cycling, interpolation and text contrast."""

    def test_first_tile(self):
        """2 uses the first base color with dark text."""
        self.assertEqual(derive_colors(2), TileColors(background='#F2BA0D', text='#072931'))

    def test_interpolated_tile(self):
        """4 sits one third of the way from yellow to magenta."""
        self.assertEqual(derive_colors(4), TileColors(background='#F37F1E', text=THEME.text_dark))

    def test_second_base_color(self):
        """16 starts the magenta step, dark enough for light text."""
        self.assertEqual(derive_colors(16), TileColors(background='#F50A40', text=THEME.text_light))

    def test_text_colors_come_from_theme(self):
        """Text colors are the theme's strings as declared, lowercase included."""
        self.assertEqual(derive_colors(16).text, '#f2ba0d')
        self.assertEqual(derive_colors(2).text, '#072931')
        self.assertEqual(THEME.cell, '#92cdb9')

    def test_every_third_power_is_a_base_color(self):
        """2**(1 + 3k) is exactly base color k, cycling after four."""
        for step in range(8):
            value = 2 ** (1 + 3 * step)
            self.assertEqual(derive_colors(value).background, BASE_COLORS[step % 4])

    def test_palette_cycles(self):
        """The palette repeats every twelve powers."""
        for power in range(1, 13):
            self.assertEqual(derive_colors(2**power), derive_colors(2 ** (power + 12)))

    def test_deterministic(self):
        """Same value, same colors."""
        for power in range(1, 31):
            self.assertEqual(derive_colors(2**power), derive_colors(2**power))

    def test_text_follows_luminance(self):
        """Light text at or below the threshold, dark text above."""
        for power in range(1, 31):
            colors = derive_colors(2**power)
            luminance = relative_luminance(parse_hex(colors.background))
            expected = THEME.text_light if luminance <= LUMINANCE_THRESHOLD else THEME.text_dark
            self.assertEqual(colors.text, expected, msg=f'value {2**power}')

    def test_background_format(self):
        """Backgrounds are uppercase #RRGGBB strings."""
        for power in range(1, 20):
            background = derive_colors(2**power).background
            self.assertRegex(background, r'^#[0-9A-F]{6}$')

    def test_rejects_invalid_values(self):
        """Only powers of two from 2 upwards have a color."""
        for value in (0, 1, 3, 6, -2, 2.0):
            with self.assertRaises(ValueError):
                derive_colors(value)

    def test_accepts_numpy_integers(self):
        """Values read from a numpy board work too."""
        self.assertEqual(derive_colors(np.int64(8)), derive_colors(8))


class TestColorHelpers(TestCase):
    """Hex parsing, formatting and interpolation."""

    def test_hex_round_trip(self):
        """Parsing then formatting gives the uppercase color back."""
        self.assertEqual(to_hex(parse_hex('#6a0dad')), '#6A0DAD')

    def test_parse_rejects_bad_length(self):
        """Only six hex digits are accepted."""
        with self.assertRaises(ValueError):
            parse_hex('#FFF')

    def test_interpolate_rounds_and_clamps(self):
        """Channels are rounded half away from zero and stay in [0, 255]."""
        start = np.array([0.0, 255.0, 10.0])
        end = np.array([1.0, 255.0, 11.0])
        np.testing.assert_array_equal(interpolate(start, end, 0.5), [1, 255, 11])

    def test_luminance_bounds(self):
        """Black is 0, white is 1."""
        self.assertAlmostEqual(relative_luminance(parse_hex('#000000')), 0.0)
        self.assertAlmostEqual(relative_luminance(parse_hex('#FFFFFF')), 1.0)


if __name__ == '__main__':
    main()
