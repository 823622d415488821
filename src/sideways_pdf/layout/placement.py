"""
Module: layout.placement

Purpose:
    Compute rotated anchor positions for the lines of one output page.

Key Functions:
    - place(): Map each line of a page to a TextRun

Geometry:
    Every line anchors at y = margin. The first line anchors at
    x = width - margin and each following line steps one leading to
    the left. The rotation angle is the same for every run.

Used By:
    - layout.assembler: Builds PagePlans
"""

from __future__ import annotations

from typing import List, Sequence

from .config import InvalidConfigurationError, PageGeometry, RotationDirection
from .models import Line, TextRun


def place(
    page: Sequence[Line],
    geometry: PageGeometry,
    leading: float,
    rotation: RotationDirection,
) -> List[TextRun]:
    """
    Position every line of a page.

    Args:
        page: Lines of one output page, in order
        geometry: Output page geometry
        leading: Step between line anchors in points
        rotation: Rotation applied to every run

    Returns:
        One TextRun per line, index 0..k-1.

    Raises:
        InvalidConfigurationError: If the page holds more lines than fit
            across the page width at this leading.
    """
    capacity = geometry.max_lines_per_page(leading)
    if len(page) > capacity:
        raise InvalidConfigurationError(
            f"{len(page)} lines exceed page capacity of {capacity} at leading {leading}"
        )

    x0 = geometry.width - geometry.margin
    y = geometry.margin
    angle = rotation.angle

    return [
        TextRun(text=line, x=x0 - i * leading, y=y, angle=angle)
        for i, line in enumerate(page)
    ]
