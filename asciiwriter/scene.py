from __future__ import annotations

from dataclasses import dataclass
import json
import logging
from pathlib import Path
from typing import Any, Sequence, TypeAlias

from asciiwriter.backend import PathSegment, RenderBackend
from asciiwriter.errors import SceneError, StyleError
from asciiwriter.geometry import Point
from asciiwriter.style import StyleAttr


LOGGER = logging.getLogger(__name__)


@dataclass(frozen=True)
class RectCommand:
    origin: Point
    size: Point
    style: StyleAttr
    properties: str | None = None
    clip: int | None = None


@dataclass(frozen=True)
class CircleCommand:
    center: Point
    size: Point
    style: StyleAttr
    properties: str | None = None


@dataclass(frozen=True)
class LineCommand:
    start: Point
    end: Point
    style: StyleAttr
    properties: str | None = None


@dataclass(frozen=True)
class TextCommand:
    anchor: Point
    text: str
    style: StyleAttr


@dataclass(frozen=True)
class ArrowCommand:
    path: tuple[PathSegment, ...]
    dashed: bool
    heads: tuple[bool, bool]
    style: StyleAttr
    properties: str | None = None
    label: str = ""


@dataclass(frozen=True)
class ClipCommand:
    origin: Point
    size: Point
    corner_radius: int = 0


SceneCommand: TypeAlias = RectCommand | CircleCommand | LineCommand | TextCommand | ArrowCommand | ClipCommand


def load_scene(path: str | Path) -> tuple[SceneCommand, ...]:
    scene_path = Path(path)
    try:
        text = scene_path.read_text(encoding="utf-8")
    except OSError as exc:
        raise SceneError(f"cannot read scene {scene_path}: {exc}") from exc
    return loads_scene(text)


def loads_scene(text: str) -> tuple[SceneCommand, ...]:
    try:
        raw = json.loads(text)
    except json.JSONDecodeError as exc:
        raise SceneError(f"invalid scene JSON: {exc}") from exc
    return parse_scene(raw)


def parse_scene(raw: Any) -> tuple[SceneCommand, ...]:
    if not isinstance(raw, dict) or not isinstance(raw.get("commands"), list):
        raise SceneError("scene must be an object with a `commands` list")
    commands: list[SceneCommand] = []
    clip_count = 0
    for index, entry in enumerate(raw["commands"]):
        try:
            command = _parse_command(entry)
        except (SceneError, StyleError) as exc:
            raise SceneError(str(exc), index=index) from exc
        if isinstance(command, ClipCommand):
            clip_count += 1
        elif isinstance(command, RectCommand) and command.clip is not None and not 0 <= command.clip < clip_count:
            raise SceneError(f"clip {command.clip} is not defined before use", index=index)
        commands.append(command)
    return tuple(commands)


def replay(commands: Sequence[SceneCommand], backend: RenderBackend) -> list[int]:
    """Issue `commands` against `backend` in order. Returns the clip handles it handed out.

    Rect `clip` fields are scene-local indices and are translated to the
    backend's handles.
    """
    handles: list[int] = []
    for command in commands:
        if isinstance(command, RectCommand):
            clip = handles[command.clip] if command.clip is not None and 0 <= command.clip < len(handles) else None
            backend.draw_rect(command.origin, command.size, command.style, command.properties, clip)
        elif isinstance(command, CircleCommand):
            backend.draw_circle(command.center, command.size, command.style, command.properties)
        elif isinstance(command, LineCommand):
            backend.draw_line(command.start, command.end, command.style, command.properties)
        elif isinstance(command, TextCommand):
            backend.draw_text(command.anchor, command.text, command.style)
        elif isinstance(command, ArrowCommand):
            backend.draw_arrow(
                command.path,
                command.dashed,
                command.heads,
                command.style,
                command.properties,
                command.label,
            )
        elif isinstance(command, ClipCommand):
            handles.append(backend.create_clip(command.origin, command.size, command.corner_radius))
    LOGGER.debug("replayed %d command(s)", len(commands))
    return handles


def _parse_command(entry: Any) -> SceneCommand:
    if not isinstance(entry, dict):
        raise SceneError("command must be an object")
    op = entry.get("op")
    if op == "rect":
        return RectCommand(
            origin=_point(entry, "origin"),
            size=_point(entry, "size"),
            style=_style(entry),
            properties=_optional_str(entry, "properties"),
            clip=_optional_int(entry, "clip"),
        )
    if op == "circle":
        return CircleCommand(
            center=_point(entry, "center"),
            size=_point(entry, "size"),
            style=_style(entry),
            properties=_optional_str(entry, "properties"),
        )
    if op == "line":
        return LineCommand(
            start=_point(entry, "start"),
            end=_point(entry, "end"),
            style=_style(entry),
            properties=_optional_str(entry, "properties"),
        )
    if op == "text":
        text = entry.get("text", "")
        if not isinstance(text, str):
            raise SceneError("`text` must be a string")
        return TextCommand(anchor=_point(entry, "anchor"), text=text, style=_style(entry))
    if op == "arrow":
        label = entry.get("label", "")
        if not isinstance(label, str):
            raise SceneError("`label` must be a string")
        return ArrowCommand(
            path=_path(entry.get("path")),
            dashed=_bool(entry, "dashed", False),
            heads=_heads(entry.get("heads", [False, False])),
            style=_style(entry),
            properties=_optional_str(entry, "properties"),
            label=label,
        )
    if op == "clip":
        radius = _optional_int(entry, "corner_radius")
        return ClipCommand(
            origin=_point(entry, "origin"),
            size=_point(entry, "size"),
            corner_radius=0 if radius is None else radius,
        )
    raise SceneError(f"unknown op: {op!r}")


def _point(entry: dict[str, Any], key: str) -> Point:
    return _coerce_point(entry.get(key), key)


def _coerce_point(value: Any, what: str) -> Point:
    if not isinstance(value, (list, tuple)) or len(value) != 2:
        raise SceneError(f"`{what}` must be a [x, y] pair")
    x, y = value
    if isinstance(x, bool) or isinstance(y, bool) or not isinstance(x, (int, float)) or not isinstance(y, (int, float)):
        raise SceneError(f"`{what}` coordinates must be numbers")
    return Point(float(x), float(y))


def _path(value: Any) -> tuple[PathSegment, ...]:
    if not isinstance(value, list):
        raise SceneError("`path` must be a list of [anchor, control] pairs")
    segments: list[PathSegment] = []
    for i, pair in enumerate(value):
        if not isinstance(pair, list) or len(pair) != 2:
            raise SceneError(f"`path[{i}]` must be an [anchor, control] pair")
        segments.append((_coerce_point(pair[0], f"path[{i}] anchor"), _coerce_point(pair[1], f"path[{i}] control")))
    return tuple(segments)


def _heads(value: Any) -> tuple[bool, bool]:
    if not isinstance(value, list) or len(value) != 2 or not all(isinstance(v, bool) for v in value):
        raise SceneError("`heads` must be a pair of booleans")
    return (value[0], value[1])


def _style(entry: dict[str, Any]) -> StyleAttr:
    raw = entry.get("style", {})
    if not isinstance(raw, dict):
        raise SceneError("`style` must be an object")
    return StyleAttr.from_mapping(raw)


def _bool(entry: dict[str, Any], key: str, default: bool) -> bool:
    value = entry.get(key, default)
    if not isinstance(value, bool):
        raise SceneError(f"`{key}` must be a boolean")
    return value


def _optional_str(entry: dict[str, Any], key: str) -> str | None:
    value = entry.get(key)
    if value is not None and not isinstance(value, str):
        raise SceneError(f"`{key}` must be a string")
    return value


def _optional_int(entry: dict[str, Any], key: str) -> int | None:
    value = entry.get(key)
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, int):
        raise SceneError(f"`{key}` must be an integer")
    return value
