"""Image reconstruction filters."""

from __future__ import annotations

import math
from abc import abstractmethod
from typing import Optional

from noripath.objects import ClassType, NoriObject, register_class
from noripath.properties import PropertyList


class ReconstructionFilter(NoriObject):
    """A one-dimensional, separable filter with a finite ``radius``."""

    radius: float = 0.0

    @property
    def class_type(self) -> ClassType:
        return ClassType.RECONSTRUCTION_FILTER

    @abstractmethod
    def eval(self, x: float) -> float:
        """Evaluate the filter at offset ``x`` from the pixel centre."""


@register_class("gaussian")
class GaussianFilter(ReconstructionFilter):
    """Windowed Gaussian with configurable radius and standard deviation."""

    def __init__(self, properties: Optional[PropertyList] = None) -> None:
        props = properties if properties is not None else PropertyList()
        self.radius = props.get_float("radius", 2.0)
        self.stddev = props.get_float("stddev", 0.5)

    def eval(self, x: float) -> float:
        alpha = -1.0 / (2.0 * self.stddev * self.stddev)
        return max(
            0.0,
            math.exp(alpha * x * x) - math.exp(alpha * self.radius * self.radius),
        )

    def __str__(self) -> str:
        return f"GaussianFilter[radius={self.radius:f}, stddev={self.stddev:f}]"


@register_class("mitchell")
class MitchellNetravaliFilter(ReconstructionFilter):
    """Separable cubic filter of Mitchell and Netravali with parameters B and C."""

    def __init__(self, properties: Optional[PropertyList] = None) -> None:
        props = properties if properties is not None else PropertyList()
        self.radius = props.get_float("radius", 2.0)
        self.b = props.get_float("B", 1.0 / 3.0)
        self.c = props.get_float("C", 1.0 / 3.0)

    def eval(self, x: float) -> float:
        x = abs(2.0 * x / self.radius)
        x2 = x * x
        x3 = x2 * x
        b, c = self.b, self.c
        if x < 1:
            return (1.0 / 6.0) * (
                (12 - 9 * b - 6 * c) * x3 + (-18 + 12 * b + 6 * c) * x2 + (6 - 2 * b)
            )
        if x < 2:
            return (1.0 / 6.0) * (
                (-b - 6 * c) * x3
                + (6 * b + 30 * c) * x2
                + (-12 * b - 48 * c) * x
                + (8 * b + 24 * c)
            )
        return 0.0

    def __str__(self) -> str:
        return (
            f"MitchellNetravaliFilter[radius={self.radius:f}, "
            f"B={self.b:f}, C={self.c:f}]"
        )


@register_class("tent")
class TentFilter(ReconstructionFilter):
    """Triangle filter of radius one."""

    def __init__(self, properties: Optional[PropertyList] = None) -> None:
        self.radius = 1.0

    def eval(self, x: float) -> float:
        return max(0.0, 1.0 - abs(x))

    def __str__(self) -> str:
        return "TentFilter[]"


@register_class("box")
class BoxFilter(ReconstructionFilter):
    """Box filter of radius one half: fastest, but prone to aliasing."""

    def __init__(self, properties: Optional[PropertyList] = None) -> None:
        self.radius = 0.5

    def eval(self, x: float) -> float:
        return 1.0

    def __str__(self) -> str:
        return "BoxFilter[]"