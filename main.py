from __future__ import annotations

import argparse
import logging
from pathlib import Path
import sys

from asciiwriter import ASCIIWriter, load_scene, replay, resolve_writer_config
from asciiwriter.config import read_config_file
from asciiwriter.errors import ConfigError, SceneError


LOGGER = logging.getLogger("asciiwriter.cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="asciiwriter")
    sub = parser.add_subparsers(dest="command", required=True)

    render = sub.add_parser("render", help="Render a JSON scene of draw calls as text.")
    render.add_argument("scene", type=Path)
    render.add_argument("--out", type=Path, default=None, help="Write to this file instead of stdout.")
    mode = render.add_mutually_exclusive_group()
    mode.add_argument(
        "--terminal",
        dest="is_terminal",
        action="store_const",
        const=True,
        default=None,
        help="Fill shapes with block glyphs. Default: detected from stdout (off with --out).",
    )
    mode.add_argument("--plain", dest="is_terminal", action="store_const", const=False, help="Outlines only.")
    colors = render.add_mutually_exclusive_group()
    colors.add_argument("--colors", dest="use_colors", action="store_const", const=True, default=None)
    colors.add_argument("--no-colors", dest="use_colors", action="store_const", const=False)
    render.add_argument("--config", type=Path, default=None, help="TOML file with a [writer] table.")
    render.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="WARNING",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level), format="%(levelname)s %(name)s: %(message)s")

    if args.command == "render":
        try:
            return _render(args)
        except (ConfigError, SceneError) as exc:
            print(f"asciiwriter: {exc}", file=sys.stderr)
            return 2
    return 1


def _render(args: argparse.Namespace) -> int:
    settings = read_config_file(args.config) if args.config is not None else {}
    is_terminal = args.is_terminal if args.is_terminal is not None else settings.get("is_terminal")
    use_colors = args.use_colors if args.use_colors is not None else settings.get("use_colors")
    if is_terminal is None and args.out is not None:
        is_terminal = False
    config = resolve_writer_config(is_terminal, use_colors)
    LOGGER.info("rendering %s (terminal=%s, colors=%s)", args.scene, config.is_terminal, config.use_colors)

    commands = load_scene(args.scene)
    writer = ASCIIWriter.from_config(config)
    replay(commands, writer)
    text = writer.finalize()

    if args.out is None:
        sys.stdout.write(text)
    else:
        args.out.write_text(text, encoding="utf-8")
        LOGGER.info("wrote %dx%d grid to %s", writer.width, writer.height, args.out)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
