"""Basic drawing primitives for SKYGATE frame buffers."""

from typing import Sequence, Tuple
import math
import numpy as np
from numpy.typing import NDArray

# Type aliases
Color = Tuple[int, int, int]
Point = Tuple[float, float]
Buffer = NDArray[np.uint8]


def new_buffer(width: int, height: int) -> Buffer:
    """Allocate a black (height, width, 3) frame buffer."""
    return np.zeros((height, width, 3), dtype=np.uint8)


def fill(buffer: Buffer, color: Color) -> None:
    """Fill entire buffer with color."""
    buffer[:, :] = color


def draw_rect(
    buffer: Buffer,
    x: int,
    y: int,
    width: int,
    height: int,
    color: Color,
    filled: bool = True,
    thickness: int = 1,
) -> None:
    """Draw a rectangle on the buffer.

    Args:
        buffer: Target numpy array (height, width, 3)
        x: Left edge x coordinate
        y: Top edge y coordinate
        width: Rectangle width
        height: Rectangle height
        color: RGB color tuple
        filled: If True, fill rectangle; if False, draw outline only
        thickness: Line thickness for outline (when filled=False)
    """
    h, w = buffer.shape[:2]

    # Clamp to buffer bounds
    x1 = max(0, min(x, w))
    y1 = max(0, min(y, h))
    x2 = max(0, min(x + width, w))
    y2 = max(0, min(y + height, h))

    if filled:
        buffer[y1:y2, x1:x2] = color
    else:
        for t in range(thickness):
            if y1 + t < h:
                buffer[y1 + t, x1:x2] = color
            if y2 - 1 - t >= 0:
                buffer[y2 - 1 - t, x1:x2] = color
            if x1 + t < w:
                buffer[y1:y2, x1 + t] = color
            if x2 - 1 - t >= 0:
                buffer[y1:y2, x2 - 1 - t] = color


def draw_circle(
    buffer: Buffer,
    cx: int,
    cy: int,
    radius: int,
    color: Color,
    filled: bool = True,
    thickness: int = 1,
) -> None:
    """Draw a circle (or ring) on the buffer.

    Only the circle's bounding box is touched.
    """
    h, w = buffer.shape[:2]
    x1, x2 = max(0, cx - radius), min(w, cx + radius + 1)
    y1, y2 = max(0, cy - radius), min(h, cy + radius + 1)
    if x1 >= x2 or y1 >= y2:
        return

    y_indices, x_indices = np.ogrid[y1:y2, x1:x2]
    dist_sq = (x_indices - cx) ** 2 + (y_indices - cy) ** 2
    mask = dist_sq <= radius ** 2
    if not filled:
        inner = max(0, radius - thickness)
        mask &= dist_sq > inner ** 2
    buffer[y1:y2, x1:x2][mask] = color


def draw_line(
    buffer: Buffer,
    x1: int,
    y1: int,
    x2: int,
    y2: int,
    color: Color,
    thickness: int = 1,
) -> None:
    """Draw a line using Bresenham's algorithm.

    Args:
        buffer: Target numpy array (height, width, 3)
        x1, y1: Start point
        x2, y2: End point
        color: RGB color tuple
        thickness: Line thickness in pixels
    """
    h, w = buffer.shape[:2]

    dx = abs(x2 - x1)
    dy = abs(y2 - y1)
    sx = 1 if x1 < x2 else -1
    sy = 1 if y1 < y2 else -1
    err = dx - dy

    x, y = x1, y1

    while True:
        for tx in range(-thickness // 2, (thickness + 1) // 2):
            for ty in range(-thickness // 2, (thickness + 1) // 2):
                px, py = x + tx, y + ty
                if 0 <= px < w and 0 <= py < h:
                    buffer[py, px] = color

        if x == x2 and y == y2:
            break

        e2 = 2 * err
        if e2 > -dy:
            err -= dy
            x += sx
        if e2 < dx:
            err += dx
            y += sy


def draw_polygon(buffer: Buffer, points: Sequence[Point], color: Color) -> None:
    """Fill a polygon using the even-odd rule over its bounding box."""
    if len(points) < 3:
        return
    h, w = buffer.shape[:2]
    xs = np.array([p[0] for p in points], dtype=np.float64)
    ys = np.array([p[1] for p in points], dtype=np.float64)

    x1, x2 = max(0, int(math.floor(xs.min()))), min(w, int(math.ceil(xs.max())) + 1)
    y1, y2 = max(0, int(math.floor(ys.min()))), min(h, int(math.ceil(ys.max())) + 1)
    if x1 >= x2 or y1 >= y2:
        return

    py, px = np.mgrid[y1:y2, x1:x2]
    px = px + 0.5
    py = py + 0.5
    inside = np.zeros(px.shape, dtype=bool)

    j = len(points) - 1
    for i in range(len(points)):
        xi, yi, xj, yj = xs[i], ys[i], xs[j], ys[j]
        if yi != yj:
            crosses = (yi > py) != (yj > py)
            x_at = (xj - xi) * (py - yi) / (yj - yi) + xi
            inside ^= crosses & (px < x_at)
        j = i

    buffer[y1:y2, x1:x2][inside] = color


def star_points(cx: float, cy: float, outer: float, inner: float, spikes: int) -> list[Point]:
    """Vertices of a star alternating outer and inner radius."""
    points = []
    for i in range(spikes * 2):
        radius = outer if i % 2 == 0 else inner
        angle = i * math.pi / spikes
        points.append((cx + math.cos(angle) * radius, cy + math.sin(angle) * radius))
    return points


def draw_star(
    buffer: Buffer,
    cx: float,
    cy: float,
    outer: float,
    inner: float,
    spikes: int,
    color: Color,
) -> None:
    """Fill a star polygon."""
    draw_polygon(buffer, star_points(cx, cy, outer, inner, spikes), color)
