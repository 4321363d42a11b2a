"""Colour reduction for displays that are not true-colour 24-bit."""

from __future__ import annotations

Shifts = tuple[int, int, int, int, int, int]


def _mask_shape(mask: int) -> tuple[int, int]:
    """Return (offset of the lowest set bit, number of contiguous set bits)."""
    if mask <= 0:
        raise ValueError("colour mask must be a positive bit mask")
    offset = 0
    while not mask & 1:
        mask >>= 1
        offset += 1
    width = 0
    while mask & 1:
        mask >>= 1
        width += 1
    return offset, width


def mask_shifts(red_mask: int, green_mask: int, blue_mask: int) -> Shifts:
    """Describe the channel masks of a visual.

    Returns ``(red_offset, red_bits, green_offset, green_bits, blue_offset,
    blue_bits)``: for each mask, where its lowest set bit lies and how many
    set bits follow it.
    """
    red = _mask_shape(red_mask)
    green = _mask_shape(green_mask)
    blue = _mask_shape(blue_mask)
    return (*red, *green, *blue)


def reduce_color(color: int, depth: int, shifts: Shifts) -> int:
    """Convert ``0xRRGGBB`` to a pixel value for a visual of ``depth`` bits.

    Colours pass through unchanged at a depth of 24 or more. Otherwise each
    channel is cut down to the width of its mask and moved to the mask's
    offset, as given by :func:`mask_shifts`.
    """
    if depth >= 24:
        return color
    red = (color >> 8) & 0xFF00
    green = color & 0xFF00
    blue = (color << 8) & 0xFF00
    red_off, red_bits, green_off, green_bits, blue_off, blue_bits = shifts
    return (
        ((red >> (16 - red_bits)) << red_off)
        + ((green >> (16 - green_bits)) << green_off)
        + ((blue >> (16 - blue_bits)) << blue_off)
    )