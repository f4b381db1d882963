import math

from trading_card.models import CardPalette

LIGHT_TINT_FACTOR = 0.8
MEDIUM_TINT_FACTOR = 0.5


def parse_hex_color(hex_color: str) -> tuple[int, int, int]:
    """Parse `#rrggbb`, `rrggbb` or `#rgb` into an RGB triple.

    Raises:
        ValueError: If the value is not a hex RGB color.
    """

    value = hex_color.strip().removeprefix("#")
    if len(value) == 3:
        value = "".join(channel * 2 for channel in value)
    if len(value) != 6:
        raise ValueError(f"Invalid hex color: {hex_color!r}")

    try:
        return (int(value[0:2], 16), int(value[2:4], 16), int(value[4:6], 16))
    except ValueError as exc:
        raise ValueError(f"Invalid hex color: {hex_color!r}") from exc


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def lighten(hex_color: str, factor: float = LIGHT_TINT_FACTOR) -> str:
    """Blend a color with white by `factor` and return it as a CSS rgb()."""

    if not 0 <= factor <= 1:
        raise ValueError("factor must be between 0 and 1")

    red, green, blue = (
        _round_half_up(channel + (255 - channel) * factor)
        for channel in parse_hex_color(hex_color)
    )
    return f"rgb({red},{green},{blue})"


def tint_pair(hex_color: str) -> CardPalette:
    return CardPalette(
        light=lighten(hex_color, LIGHT_TINT_FACTOR),
        medium=lighten(hex_color, MEDIUM_TINT_FACTOR),
    )
