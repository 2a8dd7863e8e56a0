#!/usr/bin/env python3
"""
Command line entry point: load a mesh, render it, write the image
"""
import argparse
import logging
import sys
import time

from meshtracer.config import COMPOSITING_POLICIES, RenderConfig
from meshtracer.core import Renderer, Scene
from meshtracer.image import save_image, show_image
from meshtracer.mesh import load_mesh

logger = logging.getLogger("meshtracer")


def parse_arguments(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Ray-cast a triangle mesh with shadows and reflections")
    parser.add_argument("mesh", help="Path to the OBJ mesh file")
    parser.add_argument("-o", "--output", default="render.png",
                        help="Output image path; the extension selects the format (default: render.png)")
    parser.add_argument("--width", type=int, help="Image width in pixels")
    parser.add_argument("--height", type=int, help="Image height in pixels")
    parser.add_argument("--workers", type=int,
                        help="Number of render processes (default: one per CPU)")
    parser.add_argument("--light", type=float, nargs=3, metavar=("X", "Y", "Z"),
                        help="Light position")
    parser.add_argument("--light-color", type=float, nargs=3, metavar=("R", "G", "B"),
                        help="Light color, components in [0, 1]")
    parser.add_argument("--max-depth", type=int, help="Maximum number of reflection bounces")
    parser.add_argument("--compositing", choices=COMPOSITING_POLICIES,
                        help="How bounce contributions are combined")
    parser.add_argument("--scalar", action="store_true",
                        help="Intersect triangles one at a time instead of with numpy batches")
    parser.add_argument("--show", action="store_true", help="Display the result with matplotlib")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log per-row progress")
    return parser.parse_args(argv)


def build_config(args: argparse.Namespace) -> RenderConfig:
    return RenderConfig.from_settings(
        width=args.width,
        height=args.height,
        workers=args.workers,
        light_position=args.light,
        light_color=args.light_color,
        max_bounce_depth=args.max_depth,
        compositing=args.compositing,
        vectorized=False if args.scalar else None,
    )


def main(argv=None) -> int:
    args = parse_arguments(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        config = build_config(args)
        mesh = load_mesh(args.mesh)
    except (OSError, ValueError) as e:
        logger.error(f"Cannot start render: {e}")
        return 1

    start_time = time.time()
    scene = Scene.from_mesh(mesh, epsilon=config.intersection_epsilon,
                            vectorized=config.vectorized)
    framebuffer = Renderer(scene, config).render()

    try:
        save_image(framebuffer, args.output)
    except OSError as e:
        logger.error(f"{e}")
        return 1

    logger.info(f"Done in {time.time() - start_time:.2f}s")
    if args.show:
        show_image(framebuffer, title=str(args.mesh))
    return 0


if __name__ == "__main__":
    sys.exit(main())
