"""HSL colour helpers for oscillators, curves, and guides."""

import colorsys

WHITE = (255, 255, 255)


def hsl_to_rgb(
    hue: float, saturation: float = 1.0, lightness: float = 0.75
) -> tuple[int, int, int]:
    """
    Convert a CSS-style HSL colour to an RGB tuple.

    Args:
        hue: Degrees; wrapped into [0, 360).
        saturation: 0-1.
        lightness: 0-1.
    """
    r, g, b = colorsys.hls_to_rgb((hue % 360) / 360, lightness, saturation)
    return (round(r * 255), round(g * 255), round(b * 255))

