from asciiwriter.backend import ClipHandle, ClipRegion, RenderBackend
from asciiwriter.config import WriterConfig, resolve_writer_config
from asciiwriter.errors import AsciiWriterError, ConfigError, SceneError, StyleError
from asciiwriter.geometry import Point
from asciiwriter.palette import TermColor, resolve_term_color
from asciiwriter.scene import load_scene, loads_scene, replay
from asciiwriter.style import StyleAttr, color, parse_color
from asciiwriter.writer import ASCIIWriter

__all__ = [
    "ASCIIWriter",
    "AsciiWriterError",
    "ClipHandle",
    "ClipRegion",
    "ConfigError",
    "Point",
    "RenderBackend",
    "SceneError",
    "StyleAttr",
    "StyleError",
    "TermColor",
    "WriterConfig",
    "color",
    "load_scene",
    "loads_scene",
    "parse_color",
    "replay",
    "resolve_term_color",
    "resolve_writer_config",
]
