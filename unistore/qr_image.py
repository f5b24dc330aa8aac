"""Pixel-level image operations: adaptive thresholding and flood filling."""

from __future__ import annotations

from collections.abc import Callable, MutableSequence

PIXEL_WHITE = 0
PIXEL_BLACK = 1
PIXEL_REGION = 2

_THRESHOLD_S_DEN = 8
_THRESHOLD_T = 5

SpanFunc = Callable[[int, int, int], None]


def _check_size(pixels: MutableSequence[int], width: int, height: int) -> None:
    if width <= 0 or height <= 0:
        raise ValueError(f"invalid image size {width}x{height}")
    if len(pixels) < width * height:
        raise ValueError(
            f"{len(pixels)} pixels is too few for a {width}x{height} image"
        )


def threshold(pixels: MutableSequence[int], width: int, height: int) -> None:
    """Binarise a greyscale image in place.

    Each pixel becomes PIXEL_BLACK if it is darker than a running local
    average taken along the row in both directions, else PIXEL_WHITE.
    """
    _check_size(pixels, width, height)
    threshold_s = width // _THRESHOLD_S_DEN
    if threshold_s == 0:
        raise ValueError(f"image width must be at least {_THRESHOLD_S_DEN}")

    avg_w = 0
    avg_u = 0
    for y in range(height):
        base = y * width
        row_average = [0] * width

        for x in range(width):
            if y & 1:
                w, u = x, width - 1 - x
            else:
                w, u = width - 1 - x, x

            avg_w = (avg_w * (threshold_s - 1)) // threshold_s + pixels[base + w]
            avg_u = (avg_u * (threshold_s - 1)) // threshold_s + pixels[base + u]
            row_average[w] += avg_w
            row_average[u] += avg_u

        for x, average in enumerate(row_average):
            limit = average * (100 - _THRESHOLD_T) // (200 * threshold_s)
            pixels[base + x] = PIXEL_BLACK if pixels[base + x] < limit else PIXEL_WHITE


def flood_fill(
    pixels: MutableSequence[int],
    width: int,
    height: int,
    x: int,
    y: int,
    source: int,
    target: int,
    span_func: SpanFunc | None = None,
) -> None:
    """Recolour the 4-connected area of ``source`` pixels around (x, y).

    ``span_func(y, left, right)`` is called for every horizontal span filled.
    """
    _check_size(pixels, width, height)
    if source == target:
        raise ValueError("source and target colours must differ")
    if not (0 <= x < width and 0 <= y < height):
        raise IndexError(f"seed ({x}, {y}) outside a {width}x{height} image")

    stack = [(x, y)]
    while stack:
        sx, sy = stack.pop()
        base = sy * width

        left = right = sx
        while left > 0 and pixels[base + left - 1] == source:
            left -= 1
        while right < width - 1 and pixels[base + right + 1] == source:
            right += 1

        for i in range(left, right + 1):
            pixels[base + i] = target

        if span_func is not None:
            span_func(sy, left, right)

        for ny in (sy - 1, sy + 1):
            if 0 <= ny < height:
                nbase = ny * width
                stack.extend(
                    (i, ny)
                    for i in range(left, right + 1)
                    if pixels[nbase + i] == source
                )