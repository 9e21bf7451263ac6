# helpers.py

import numpy as np


def calculate_distance(p1, p2):
    """Calculates the Euclidean distance between two points."""
    return float(np.linalg.norm(np.array(p1, dtype=float) - np.array(p2, dtype=float)))


def clamp(value, low, high):
    return max(low, min(high, value))


def rects_intersect(a, b):
    """
    Checks whether two axis-aligned rectangles overlap.

    Args:
        a: (x, y, width, height) of the first rectangle.
        b: (x, y, width, height) of the second rectangle.

    Returns:
        True when the interiors overlap. Rectangles that only share an edge
        do not intersect.
    """
    ax, ay, aw, ah = a
    bx, by, bw, bh = b
    if aw <= 0 or ah <= 0 or bw <= 0 or bh <= 0:
        return False
    return ax < bx + bw and bx < ax + aw and ay < by + bh and by < ay + ah


def centered_rect(x, y, size):
    """Returns the (x, y, w, h) rectangle of a square of `size` centered at (x, y)."""
    return (int(x - size // 2), int(y - size // 2), size, size)


def random_point(rng, margin_x, margin_y, width, height):
    """Picks an integer point inside the field, keeping `margin` away from each edge."""
    x = rng.randrange(width - margin_x * 2) + margin_x
    y = rng.randrange(height - margin_y * 2) + margin_y
    return float(x), float(y)
