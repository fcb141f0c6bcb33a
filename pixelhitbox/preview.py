"""ASCII preview of pixel-exact outlines for quick inspection."""

from __future__ import annotations

import argparse
import logging
from collections.abc import Sequence

from pixelhitbox.api.logging import LoggingConfig
from pixelhitbox.api.shapes import CollisionShape
from pixelhitbox.geometry import WHITE, CircleSpec, Point2D, RectSpec
from pixelhitbox.rendering.outline import render_shape_outline, render_spec
from pixelhitbox.rendering.targets import PixelCanvas
from pixelhitbox.runtime.config import load_outline_config
from pixelhitbox.runtime.logging import LOG_FORMATS, configure_logging, shutdown_logging
from pixelhitbox.shapes.colliders import CircleCollider, Hitbox

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="pixelhitbox",
        description="Print a pixel-exact outline as ASCII art.",
    )
    parser.add_argument("--width", type=int, default=24, help="Canvas width in pixels.")
    parser.add_argument("--height", type=int, default=24, help="Canvas height in pixels.")
    parser.add_argument("--log-level", default=None, help="Defaults to PIXELHITBOX_LOG_LEVEL.")
    parser.add_argument("--log-file", default=None, help="Also write log records to this file.")
    parser.add_argument(
        "--log-format",
        choices=LOG_FORMATS,
        default="json",
        help="Record format for --log-file.",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    for name, help_text in (
        ("rect", "Rounded hollow rectangle."),
        ("hitbox", "Traced outline of a box collider."),
    ):
        cmd = sub.add_parser(name, help=help_text)
        cmd.add_argument("x", type=float)
        cmd.add_argument("y", type=float)
        cmd.add_argument("w", type=float)
        cmd.add_argument("h", type=float)

    for name, help_text in (
        ("circle", "Analytic circle outline."),
        ("circle-hitbox", "Traced outline of a disk collider."),
    ):
        cmd = sub.add_parser(name, help=help_text)
        cmd.add_argument("cx", type=float)
        cmd.add_argument("cy", type=float)
        cmd.add_argument("radius", type=float)
    return parser


def render_preview(args: argparse.Namespace) -> PixelCanvas:
    """Render the requested outline onto a fresh canvas."""
    canvas = PixelCanvas(args.width, args.height)
    if args.command == "rect":
        render_spec(canvas, RectSpec(args.x, args.y, args.w, args.h), WHITE)
    elif args.command == "circle":
        render_spec(canvas, CircleSpec(Point2D(args.cx, args.cy), args.radius), WHITE)
    else:
        shape: CollisionShape
        if args.command == "hitbox":
            shape = Hitbox(args.x, args.y, args.w, args.h)
        else:
            shape = CircleCollider(args.cx, args.cy, args.radius)
        render_shape_outline(canvas, shape, shape.outline_bounds(), WHITE)
    return canvas


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.width <= 0 or args.height <= 0:
        parser.error("--width and --height must be positive")
    configure_logging(
        LoggingConfig(
            level_name=args.log_level or load_outline_config().log_level,
            file_path=args.log_file,
            file_format=args.log_format,
        )
    )
    try:
        canvas = render_preview(args)
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug(
                "preview_rendered",
                extra={
                    "command": args.command,
                    "size": f"{args.width}x{args.height}",
                    "painted": len(canvas.painted(WHITE)),
                },
            )
        print(canvas.to_ascii())
    finally:
        shutdown_logging()
    return 0
