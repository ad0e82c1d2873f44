from fastapi import APIRouter
from color_converter.internal.colors import hex_to_rgb, rgb_to_hex
from color_converter.internal.models import RgbResponse, HexResponse, ErrorResponse
import re


# Same literals a browser's Number() accepts, ASCII digits only
DECIMAL_PATTERN = re.compile(r"[+-]?([0-9]+\.?[0-9]*|\.[0-9]+)([eE][+-]?[0-9]+)?", re.ASCII)
PREFIXED_PATTERN = re.compile(r"0[xX][0-9a-fA-F]+|0[oO][0-7]+|0[bB][01]+", re.ASCII)

router = APIRouter(
    tags=["convert"],
    responses={400: {"model": ErrorResponse}},
)


def parse_number(raw: str) -> float | None:
    """Turn a path segment into a number, or None when it isn't one.

    Blank means 0 and ``0x``/``0o``/``0b`` literals are read in their base.
    None is left for rgb_to_hex to reject, so every bad channel ends up as
    the same InvalidRgb error.
    """
    raw = raw.strip()
    if not raw:
        return 0.0
    if PREFIXED_PATTERN.fullmatch(raw):
        return float(int(raw, 0))
    if DECIMAL_PATTERN.fullmatch(raw):
        return float(raw)
    return None


@router.get("/hextorgb/{hex_color}", response_model=RgbResponse)
def get_rgb(hex_color: str):
    return hex_to_rgb(hex_color).as_dict()


@router.get("/rgbtohex/{r}/{g}/{b}", response_model=HexResponse)
def get_hex(r: str, g: str, b: str):
    return {
        "hex": rgb_to_hex(parse_number(r), parse_number(g), parse_number(b))
    }
