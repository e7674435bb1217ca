from __future__ import annotations

from dataclasses import dataclass

from PIL import ImageColor

from asciiwriter.errors import StyleError


RGBA = tuple[int, int, int, int]

BLACK: RGBA = (0, 0, 0, 255)


def parse_color(value: str | None) -> RGBA | None:
    """Parse a CSS-ish color string into RGBA.

    Accepts hex (#rgb, #rgba, #rrggbb, #rrggbbaa), named colors and the
    functional forms Pillow understands. Empty or "none" means no color.
    """

    if value is None:
        return None
    text = value.strip()
    if not text or text.lower() == "none":
        return None
    try:
        parsed = ImageColor.getrgb(text)
    except ValueError as exc:
        raise StyleError(f"unrecognized color: {value!r}") from exc
    if len(parsed) == 3:
        r, g, b = parsed
        return (r, g, b, 255)
    r, g, b, a = parsed
    return (r, g, b, a)


def color(name: str) -> RGBA:
    """Like parse_color, for callers that always have a color."""
    parsed = parse_color(name)
    if parsed is None:
        raise StyleError(f"expected a color, got {name!r}")
    return parsed


@dataclass(frozen=True)
class StyleAttr:
    """Per-call drawing style.

    Only `fill_color` and `font_size` influence the character grid: the fill
    color picks the terminal color of fill glyphs and the font size doubles as
    the scale (source units per cell). Stroke color, line width and corner
    rounding are accepted for backends that can use them.
    """

    line_color: RGBA = BLACK
    line_width: int = 2
    fill_color: RGBA | None = None
    rounded: int = 0
    font_size: float = 14.0

    @classmethod
    def from_mapping(cls, raw: dict[str, object]) -> StyleAttr:
        """Build a style from loosely-typed values (color strings, numbers)."""
        unknown = set(raw) - {"line_color", "line_width", "fill_color", "rounded", "font_size"}
        if unknown:
            raise StyleError(f"unknown style field(s): {', '.join(sorted(unknown))}")
        line_color = _coerce_color(raw.get("line_color", BLACK))
        try:
            line_width = int(raw.get("line_width", 2))  # type: ignore[arg-type]
            rounded = int(raw.get("rounded", 0))  # type: ignore[arg-type]
            font_size = float(raw.get("font_size", 14.0))  # type: ignore[arg-type]
        except (TypeError, ValueError) as exc:
            raise StyleError(f"invalid numeric style field: {exc}") from exc
        return cls(
            line_color=line_color if line_color is not None else BLACK,
            line_width=line_width,
            fill_color=_coerce_color(raw.get("fill_color")),
            rounded=rounded,
            font_size=font_size,
        )


def _coerce_color(value: object) -> RGBA | None:
    if value is None or isinstance(value, str):
        return parse_color(value)
    if isinstance(value, (tuple, list)) and len(value) in (3, 4):
        try:
            channels = [int(v) for v in value]
        except (TypeError, ValueError) as exc:
            raise StyleError(f"invalid color channels: {value!r}") from exc
        if any(c < 0 or c > 255 for c in channels):
            raise StyleError(f"color channels must be in [0, 255]: {value!r}")
        if len(channels) == 3:
            channels.append(255)
        r, g, b, a = channels
        return (r, g, b, a)
    raise StyleError(f"unsupported color value: {value!r}")
