from __future__ import annotations


class AsciiWriterError(ValueError):
    """Base class for errors raised by the outer surfaces (config, scenes, styles)."""


class StyleError(AsciiWriterError):
    pass


class ConfigError(AsciiWriterError):
    pass


class SceneError(AsciiWriterError):
    def __init__(self, message: str, *, index: int | None = None) -> None:
        if index is not None:
            message = f"command {index}: {message}"
        super().__init__(message)
        self.index = index
