#!/usr/bin/env python3
"""
SkyCast - A minimal Python ray caster

Renders the sky gradient as plain PPM to stdout:

    python main.py > image.ppm
"""

import sys

from skycast.renderer import Renderer, RenderSettings


def main():
    """Main entry point."""
    renderer = Renderer(RenderSettings())

    def progress_callback(remaining: int):
        print(f'\rScanlines remaining: {remaining} ', end='', file=sys.stderr, flush=True)

    renderer.set_progress_callback(progress_callback)

    renderer.render(sys.stdout)
    sys.stdout.flush()

    print("\nDone.", file=sys.stderr)
    return 0


if __name__ == '__main__':
    sys.exit(main())
