"""Command-line entry point for wave mesh generation.

Usage:
    python -m wavemesh [options] [mesh]

Writes ``<mesh>_surf.obj`` (surface with UVs) and ``<mesh>.obj`` (closed
volume).
"""

from __future__ import annotations

import argparse
import logging
import sys

from wavemesh.config import DEFAULT_SAMPLES
from wavemesh.exceptions import ConfigurationError, WaveMeshError
from wavemesh.geometry.range import Range
from wavemesh.io.writers import save_wave_meshes
from wavemesh.logging_config import setup_logging
from wavemesh.mesh.builder import WaveMeshBuilder

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_USAGE = 1
EXIT_CONFIG = 2
EXIT_GENERATION = 3

EPILOG = """\
Notes:
  - a,b arguments can be passed a single constant value a
  - if a value is given for an axis but not the other,
    then the same value is used for the other axis
  - defaults: freq=10 amplitude=1 x=y=z=1 nx=ny=100
  - the surface mesh only has the meshing of the top grid
  - the frequency ranges expect a mesh on [0;1]^2, x/y are used to stretch it
  - negative ranges need the attached form, e.g. -fx=-1,2

Equation:
  h(xp,yp) = A(xp,yp) * (sin(2pi Fx(xp) xp) + sin(2pi Fy(yp) yp))
  with A = ax(xp) + ay(yp), then shifted so that min(h) = z

Example:
  python -m wavemesh -x 10.0 -fx 10.0,100.0 -fy 10.0 -ax 0.0,2.0 -ay 2.0 wave
"""


class _ArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that reports usage errors with exit code 1."""

    def error(self, message: str):
        self.print_usage(sys.stderr)
        self.exit(EXIT_USAGE, f"{self.prog}: error: {message}\n")


def _range_arg(text: str) -> Range:
    try:
        return Range.parse(text)
    except ValueError as e:
        raise argparse.ArgumentTypeError(str(e)) from e


def build_parser() -> argparse.ArgumentParser:
    """Build the CLI argument parser."""
    parser = _ArgumentParser(
        prog="wavemesh",
        description=(
            "Generate a sinusoidal wave surface mesh and its extruded volume. "
            "Outputs mesh.obj (volume) and mesh_surf.obj (surface)."
        ),
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        allow_abbrev=False,
    )

    parser.add_argument("-x", dest="dx", type=float, default=1.0, metavar="dx",
                        help="mesh width")
    parser.add_argument("-y", dest="dy", type=float, default=1.0, metavar="dy",
                        help="mesh height")
    parser.add_argument("-z", dest="dz", type=float, default=1.0, metavar="dz",
                        help="base altitude")
    parser.add_argument("-fx", type=_range_arg, default=None, metavar="a,b",
                        help="frequency range on x axis over [0;1] stretched to [0;dx]")
    parser.add_argument("-fy", type=_range_arg, default=None, metavar="a,b",
                        help="frequency range on y axis over [0;1] stretched to [0;dy]")
    parser.add_argument("-ax", type=_range_arg, default=None, metavar="a,b",
                        help="amplitude range on x axis")
    parser.add_argument("-ay", type=_range_arg, default=None, metavar="a,b",
                        help="amplitude range on y axis")
    parser.add_argument("-sx", dest="nx", type=int, default=DEFAULT_SAMPLES,
                        metavar="nx", help="number of samples on the x axis")
    parser.add_argument("-sy", dest="ny", type=int, default=None, metavar="ny",
                        help="number of samples on the y axis (default: nx)")
    parser.add_argument("-abs", dest="absolute", action="store_true",
                        help="use absolute version of sinusoids")
    parser.add_argument("-arclength", dest="arclength_uv", action="store_true",
                        help="use arc-length normalization uv mapping")
    parser.add_argument("-normuv", dest="normalize_uv", action="store_true",
                        help="normalize UV locations to be within [0;1]^2")
    parser.add_argument("-v", "--verbose", action="store_true",
                        help="enable debug logging")
    parser.add_argument("mesh", nargs="?", default="mesh",
                        help="output base name (default: mesh)")

    return parser


def main(argv: list[str] | None = None) -> int:
    """Run the wave mesh generator.

    Args:
        argv: Command-line arguments without the program name. Defaults to
            sys.argv[1:].

    Returns:
        Process exit code: 0 on success, 2 for invalid parameter values,
        3 when the mesh cannot be generated from valid parameters. Usage
        errors exit with code 1 through the parser.
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.mesh.startswith("-"):
        parser.error("Mesh name cannot start with -")

    setup_logging(logging.DEBUG if args.verbose else logging.INFO)

    builder = (
        WaveMeshBuilder()
        .set_size(args.dx, args.dy, args.dz)
        .set_samples(args.nx, args.ny)
        .set_frequency(args.fx, args.fy)
        .set_amplitude(args.ax, args.ay)
        .use_absolute(args.absolute)
        .use_arclength_uv(args.arclength_uv)
        .normalize_uv(args.normalize_uv)
    )

    try:
        meshes = builder.build()
        surface_path, volume_path = save_wave_meshes(meshes, args.mesh)
    except ConfigurationError as e:
        parser.print_usage(sys.stderr)
        print(f"{parser.prog}: {e}", file=sys.stderr)
        return EXIT_CONFIG
    except WaveMeshError as e:
        print(f"{parser.prog}: {e}", file=sys.stderr)
        return EXIT_GENERATION

    logger.info("Surface mesh written to %s", surface_path)
    logger.info("Volume mesh written to %s", volume_path)
    return EXIT_OK


if __name__ == "__main__":
    sys.exit(main())
