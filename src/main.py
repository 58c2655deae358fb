# main.py
import argparse
import random
import sys
from core.config import DEFAULT_WORKERS, QUALITY_LEVELS
from renderer.raytracer import Renderer, RenderError
from scenes.presets import SCENES, build_scene

def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Render a stock scene to an image file.")
    parser.add_argument("scene", nargs="?", default="final_scene", choices=sorted(SCENES))
    parser.add_argument("-o", "--output", default="image.ppm",
                        help="output path; .ppm is written as plain PPM, other extensions via Pillow")
    parser.add_argument("-q", "--quality", choices=sorted(QUALITY_LEVELS),
                        help="override the scene's samples per pixel and depth")
    parser.add_argument("-j", "--workers", type=int, default=DEFAULT_WORKERS)
    parser.add_argument("--seed", type=int, default=None,
                        help="seed for scene generation and sampling (reproducible output)")
    parser.add_argument("--quiet", action="store_true")
    return parser.parse_args(argv)

def main(argv=None) -> int:
    args = parse_args(argv)
    rng = random.Random(args.seed) if args.seed is not None else random

    try:
        scene = build_scene(args.scene, rng)
        if args.quality:
            scene = scene.with_quality(**QUALITY_LEVELS[args.quality])
            print(f"Quality set to: {args.quality}")

        renderer = Renderer(scene, n_workers=args.workers, seed=args.seed, verbose=not args.quiet)
        renderer.render_to_file(args.output)
    except (ValueError, RenderError, OSError) as e:
        print(f"Error during rendering: {e}", file=sys.stderr)
        return 1
    return 0

if __name__ == "__main__":
    sys.exit(main())
