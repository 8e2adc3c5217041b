"""Signed-area (shoelace) metrics for a single closed ring.

Works on planar points. The ring may be open or closed: a repeated closing
vertex contributes a zero term. Area is reported as an absolute value and
the centroid divides by the signed area, so the result does not depend on
winding direction or on which vertex the ring starts at.

Degenerate rings (fewer than three distinct vertices, collinear vertices,
or |area| below the threshold) yield ``None``; they never raise.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

from region_labels.core.constants import DEGENERATE_AREA_EPSILON, MIN_DISTINCT_RING_POINTS


@dataclass(frozen=True, slots=True)
class RingMetrics:
    """Area and area-weighted centroid of a ring (planar units)."""

    area: float
    centroid_x: float
    centroid_y: float


def ring_metrics(
    points: Sequence[Sequence[float]],
    *,
    epsilon: float = DEGENERATE_AREA_EPSILON,
) -> RingMetrics | None:
    """Compute area and centroid of a planar ring with the shoelace formula.

    Args:
        points: Ring vertices as ``(x, y)`` pairs (tuples or lists).
        epsilon: Rings with ``|signed area| < epsilon`` are degenerate.

    Returns:
        ``RingMetrics`` or ``None`` for a degenerate ring.
    """
    ring = [(p[0], p[1]) for p in points]
    if len(set(ring)) < MIN_DISTINCT_RING_POINTS:
        return None

    # Summing relative to the first vertex keeps the cross products small
    # for rings far from the projection origin.
    ox, oy = ring[0]

    a = 0.0
    cx = 0.0
    cy = 0.0
    j = len(ring) - 1
    for i in range(len(ring)):
        xj, yj = ring[j][0] - ox, ring[j][1] - oy
        xi, yi = ring[i][0] - ox, ring[i][1] - oy
        f = xj * yi - xi * yj
        a += f
        cx += (xj + xi) * f
        cy += (yj + yi) * f
        j = i
    a *= 0.5

    if not math.isfinite(a) or abs(a) < epsilon:
        return None

    cx /= 6 * a
    cy /= 6 * a
    return RingMetrics(area=abs(a), centroid_x=cx + ox, centroid_y=cy + oy)
