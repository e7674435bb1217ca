from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Sequence, TypeAlias

from asciiwriter.geometry import Point
from asciiwriter.style import StyleAttr


ClipHandle: TypeAlias = int
PathSegment: TypeAlias = tuple[Point, Point]


@dataclass(frozen=True)
class ClipRegion:
    origin: Point
    size: Point
    corner_radius: int = 0


class RenderBackend(ABC):
    """Draw-call contract a layout engine renders through.

    Coordinates are source units with Y growing downward. Implementations
    must accept any geometry without raising.
    """

    @abstractmethod
    def draw_rect(
        self,
        origin: Point,
        size: Point,
        style: StyleAttr,
        properties: str | None = None,
        clip: ClipHandle | None = None,
    ) -> None:
        raise NotImplementedError

    @abstractmethod
    def draw_circle(self, center: Point, size: Point, style: StyleAttr, properties: str | None = None) -> None:
        raise NotImplementedError

    @abstractmethod
    def draw_line(self, start: Point, end: Point, style: StyleAttr, properties: str | None = None) -> None:
        raise NotImplementedError

    @abstractmethod
    def draw_text(self, anchor: Point, text: str, style: StyleAttr) -> None:
        raise NotImplementedError

    @abstractmethod
    def draw_arrow(
        self,
        path: Sequence[PathSegment],
        dashed: bool,
        heads: tuple[bool, bool],
        style: StyleAttr,
        properties: str | None = None,
        label: str = "",
    ) -> None:
        """`path` holds (anchor, control) pairs; text backends may ignore controls."""
        raise NotImplementedError

    @abstractmethod
    def create_clip(self, origin: Point, size: Point, corner_radius: int = 0) -> ClipHandle:
        raise NotImplementedError
