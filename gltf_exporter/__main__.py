import argparse
import logging
import sys
from pathlib import Path

from gltf_exporter import ExportOptions, LoggingReporter, export_gltf, load_store


def _parse_arguments(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="gltf_exporter",
        description="Exports a scene tree described in a JSON file to a binary glTF file.",
    )
    parser.add_argument("tree", type=Path, help="JSON file describing the scene tree")
    parser.add_argument("output", type=Path, help="destination .glb file")
    parser.add_argument(
        "--no-attributes",
        action="store_true",
        help="don't export group attributes as node extras",
    )
    parser.add_argument(
        "--reference-layout",
        action="store_true",
        help="write unpadded chunks with the placeholder total length",
    )
    parser.add_argument(
        "--dump-json",
        action="store_true",
        help="print the pretty-printed document to stdout",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    arguments = _parse_arguments(argv)
    logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")

    try:
        store = load_store(arguments.tree)
    except (OSError, ValueError, KeyError, AttributeError) as exception:
        print(f"Cannot load the tree from {str(arguments.tree)!r}: {exception}")
        return 1

    print(f"Working with {arguments.tree}...")

    options = ExportOptions(
        include_attributes=not arguments.no_attributes,
        reference_layout=arguments.reference_layout,
        debug_stream=sys.stdout if arguments.dump_json else None,
    )
    if not export_gltf(store, LoggingReporter(), arguments.output, options):
        return 1

    print(f' - Exported! Saved to the "{arguments.output}".')
    return 0


if __name__ == "__main__":
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        sys.exit(0)
