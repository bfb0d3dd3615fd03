#!/usr/bin/env python3
"""Render the demo sphere scene.

Three stages are available:
    gradient  scene-less test pattern
    spheres   demo spheres with flat diffuse colors
    lit       demo spheres shaded by a point light

Usage:
    python -m examples.render_spheres [options]

Options:
    --width WIDTH       Image width in pixels (default: 1024)
    --height HEIGHT     Image height in pixels (default: 768)
    --fov DEGREES       Field of view in degrees (default: 90)
    --stage STAGE       gradient, spheres or lit (default: lit)
    --output OUTPUT     Output file path, .ppm or .png (default: out.ppm)
    --arch ARCH         Taichi backend: cpu or gpu (default: cpu)
    --threads N         CPU worker threads (default: all cores)
    --debug             Run Taichi in debug mode (bounds and assertion checks)
    --verbose           Log debug output
    --quiet             Only log warnings and errors

Example:
    python -m examples.render_spheres --width 320 --height 240 --stage spheres
"""

from __future__ import annotations

import argparse
import logging
import math
import sys
from pathlib import Path

import taichi as ti

from tinyray.utils.logconfig import setup_logging

STAGES = ("gradient", "spheres", "lit")

logger = logging.getLogger("tinyray.render_spheres")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments."""
    parser = argparse.ArgumentParser(
        description="Render the demo sphere scene.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--width",
        type=int,
        default=1024,
        help="Image width in pixels (default: 1024)",
    )
    parser.add_argument(
        "--height",
        type=int,
        default=768,
        help="Image height in pixels (default: 768)",
    )
    parser.add_argument(
        "--fov",
        type=float,
        default=90.0,
        help="Field of view in degrees (default: 90)",
    )
    parser.add_argument(
        "--stage",
        choices=STAGES,
        default="lit",
        help="What to render (default: lit)",
    )
    parser.add_argument(
        "--output",
        type=str,
        default="out.ppm",
        help="Output file path, .ppm or .png (default: out.ppm)",
    )
    parser.add_argument(
        "--arch",
        choices=("cpu", "gpu"),
        default="cpu",
        help="Taichi backend (default: cpu)",
    )
    parser.add_argument(
        "--threads",
        type=int,
        default=None,
        help="CPU worker threads (default: all cores)",
    )
    parser.add_argument(
        "--debug",
        action="store_true",
        help="Run Taichi in debug mode with bounds and assertion checks",
    )
    verbosity = parser.add_mutually_exclusive_group()
    verbosity.add_argument("--verbose", action="store_true", help="Log debug output")
    verbosity.add_argument("--quiet", action="store_true", help="Only log warnings and errors")
    return parser.parse_args(argv)


def render_stage(
    stage: str,
    width: int = 1024,
    height: int = 768,
    fov_degrees: float = 90.0,
    output_path: str = "out.ppm",
) -> Path:
    """Render one stage of the demo and save it.

    Args:
        stage: One of "gradient", "spheres" or "lit".
        width: Image width in pixels.
        height: Image height in pixels.
        fov_degrees: Field of view in degrees.
        output_path: Output file path (.ppm or .png).

    Returns:
        Path to the saved image file.
    """
    # Lazy imports so that Taichi is initialized first
    from tinyray.core.config import RenderConfig
    from tinyray.core.integrator import render, render_gradient
    from tinyray.preview.export import save_image
    from tinyray.scene.demo import create_demo_scene

    config = RenderConfig(width=width, height=height, fov=math.radians(fov_degrees))

    if stage == "gradient":
        framebuffer = render_gradient(config)
    else:
        scene = create_demo_scene(lit=stage == "lit")
        framebuffer = render(scene, config)

    return save_image(framebuffer, config.width, config.height, output_path)


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    args = parse_args(argv)

    level = logging.INFO
    if args.verbose:
        level = logging.DEBUG
    elif args.quiet:
        level = logging.WARNING
    setup_logging("tinyray", level=level)

    init_kwargs = {}
    if args.threads is not None:
        init_kwargs["cpu_max_num_threads"] = args.threads
    if args.debug:
        init_kwargs["debug"] = True
    ti.init(arch=ti.gpu if args.arch == "gpu" else ti.cpu, **init_kwargs)

    try:
        output = render_stage(
            args.stage,
            width=args.width,
            height=args.height,
            fov_degrees=args.fov,
            output_path=args.output,
        )
    except (OSError, ValueError, RuntimeError) as e:
        logger.error("Render failed: %s", e)
        return 1

    logger.info("Saved to: %s", output.absolute())
    return 0


if __name__ == "__main__":
    sys.exit(main())
