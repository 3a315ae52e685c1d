"""Geometry helpers for cell-based (tiled) coordinate spaces."""

from __future__ import annotations

import math


def are_coords_in_rect(x: int, y: int, rx: int, ry: int, w: int, h: int) -> bool:
    return rx <= x < rx + w and ry <= y < ry + h


def are_coords_in_range(fx: int, fy: int, tx: int, ty: int, r: int) -> bool:
    """Border-inclusive range check using a slightly wider, cell-friendly circle."""
    return (fx - tx) ** 2 + (fy - ty) ** 2 - r * r < r


def are_coords_in_range_from_rect(fx: int, fy: int, tx: int, ty: int, w: int, h: int, r: int) -> bool:
    """True if any cell of the rectangle is within range of (fx, fy)."""
    return are_rects_in_range(fx, fy, 1, 1, tx, ty, w, h, r)


def are_rects_in_range(
    x1: int, y1: int, w1: int, h1: int, x2: int, y2: int, w2: int, h2: int, r: int
) -> bool:
    x1b = x1 + w1 - 1
    x2b = x2 + w2 - 1
    y1b = y1 + h1 - 1
    y2b = y2 + h2 - 1

    left = x2b < x1
    right = x1b < x2
    bottom = y1b < y2
    top = y2b < y1
    if top and left:
        return are_coords_in_range(x1, y1, x2b, y2b, r)
    if left and bottom:
        return are_coords_in_range(x1, y1b, x2b, y2, r)
    if bottom and right:
        return are_coords_in_range(x1b, y1b, x2, y2, r)
    if right and top:
        return are_coords_in_range(x1b, y1, x2, y2b, r)
    if left:
        return x1 - x2b <= r
    if right:
        return x2 - x1b <= r
    if bottom:
        return y2 - y1b <= r
    if top:
        return y1 - y2b <= r
    return True


def get_cell_nearest_to_rect_from(rx: int, ry: int, w: int, h: int, fx: int, fy: int) -> tuple[int, int]:
    """Return the cell just outside the rectangle nearest to (fx, fy)."""
    left = fx < rx
    right = fx > rx + w - 1
    bottom = fy > ry + h - 1
    top = fy < ry
    if top and left:
        return rx - 1, ry - 1
    if left and bottom:
        return rx - 1, ry + h
    if bottom and right:
        return rx + w, ry + h
    if right and top:
        return rx + w, ry - 1
    if left:
        return rx - 1, fy
    if right:
        return rx + w, fy
    if bottom:
        return fx, ry + h
    if top:
        return fx, ry - 1
    return fx, fy


def are_two_cell_rects_overlapping(
    x1: int, y1: int, w1: int, h1: int, x2: int, y2: int, w2: int, h2: int
) -> bool:
    """Overlap test where a single cell is a 1x1 rectangle."""
    right1 = x1 + w1 - 1
    bot1 = y1 + h1 - 1
    right2 = x2 + w2 - 1
    bot2 = y2 + h2 - 1
    return not (x2 > right1 or right2 < x1 or y2 > bot1 or bot2 < y1)


def are_coords_in_sector(
    x: int, y: int, origin_x: int, origin_y: int, dir_x: int, dir_y: int, angle: int
) -> bool:
    """True if (x, y) lies in the sector of ``angle`` degrees facing (dir_x, dir_y)."""
    if x == origin_x and y == origin_y:
        return True
    inverse = False
    if angle > 180:
        if angle >= 360:
            return True
        angle = 360 - angle
        inverse = True
        dir_x, dir_y = -dir_x, -dir_y
    half_angle = math.pi * (angle / 2) / 180
    cent_x, cent_y = x - origin_x, y - origin_y
    center_angle = math.atan2(dir_y, dir_x)
    angle_to_coords = math.atan2(cent_y, cent_x)
    if cent_x < 0 and cent_y < 0 and dir_y >= 0:
        angle_to_coords += 2 * math.pi
    lies_within = center_angle - half_angle <= angle_to_coords <= center_angle + half_angle
    return lies_within != inverse