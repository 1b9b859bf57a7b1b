import argparse
import logging
import sys
from pathlib import Path

from convex_decomp.decompose import decompose, deviation
from convex_decomp.errors import DecompositionError
from convex_decomp.mesh import export_pieces
from convex_decomp.parser import DEFAULT_TARGET_CRS, load_polygons
from convex_decomp.types import Polygon


def _parse_points(text: str) -> Polygon:
    points = []
    for pair in text.split():
        try:
            x, y = pair.split(",")
            points.append((float(x), float(y)))
        except ValueError:
            raise ValueError(f"invalid point '{pair}', expected x,y") from None
    return Polygon.from_points(points)


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(prog="convex_decomp", description="Hertel-Mehlhorn convex decomposition")
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--points", type=str, help='counter-clockwise boundary, e.g. "0,0 4,0 4,4 0,4"')
    source.add_argument("--gml", type=Path, help="GML file; every gml:Polygon exterior is decomposed")
    parser.add_argument("--source-crs", type=str, default=None, help="CRS of geographic GML coordinates")
    parser.add_argument("--target-crs", type=str, default=DEFAULT_TARGET_CRS, help="planar CRS for reprojection")
    parser.add_argument("--precision", type=int, default=None, help="round input coordinates to this many decimals")
    parser.add_argument("--output", type=Path, default=None, help="mesh file for the convex pieces (.stl, .ply, .obj)")
    parser.add_argument("--verbose", action="store_true", help="log triangulation and merge steps")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(levelname)s - %(message)s",
    )

    if args.points is not None:
        try:
            polygons = [_parse_points(args.points)]
        except ValueError as e:
            parser.error(str(e))
    else:
        polygons = load_polygons(args.gml, source_crs=args.source_crs, target_crs=args.target_crs)

    all_pieces = []
    for i, polygon in enumerate(polygons):
        logging.info(f"Decompose polygon {i}: {len(polygon)} vertices")
        try:
            pieces = decompose(polygon, precision=args.precision)
        except DecompositionError as e:
            logging.error(f"Polygon {i}: {e}")
            return 1

        logging.info(f"Polygon {i}: {len(pieces)} convex pieces, area deviation {deviation(polygon, pieces):.3g}")
        for j, piece in enumerate(pieces):
            print(f"{i}.{j}: {piece.coords()}")
        all_pieces.extend(pieces)

    if args.output is not None:
        logging.info(f"Export: {args.output}")
        export_pieces(all_pieces, args.output)

    return 0


if __name__ == "__main__":
    sys.exit(main())
