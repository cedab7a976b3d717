"""
Asset manifest generator - scans the image assets of a front-end project and
writes a JSON tree describing them.

Each category directory (faces, clothes, etc) under the profile's assets
directory becomes a list of nodes:

    {"id": "hair", "label": "Hair", "type": "folder", "children": [...]}
    {"id": "short", "label": "Short", "type": "image", "value": "faces/hair/short.png"}

A missing category produces an empty list.

Usage (CLI):
    generate-assets [--profile public|src-assets] [--root DIR] [--output FILE]

Usage (library):
    from asset_manifest.generate_manifest import build_manifest
    manifest = build_manifest(PROFILES["public"], "/path/to/project")
"""

import argparse
import logging
import posixpath
import sys
from pathlib import Path
from typing import Optional, Sequence

from pydantic import ValidationError

from asset_manifest.components.node import Manifest
from asset_manifest.components.scanner import scan_directory
from asset_manifest.config import CATEGORIES, PROFILES, Profile, Settings

logger = logging.getLogger(__name__)


def build_manifest(profile: Profile, root: str | Path) -> Manifest:
    """Scan every category under *root* using *profile* and return the manifest."""
    assets_dir = Path(root) / profile.assets_dir
    result = {}

    for category in CATEGORIES:
        category_dir = assets_dir / category
        if not category_dir.is_dir():
            logger.debug("No %s directory at %s", category, category_dir)
            result[category] = []
            continue

        if profile.path_prefix:
            relative_path = posixpath.join(profile.path_prefix, category)
        else:
            relative_path = category
        result[category] = scan_directory(
            category_dir,
            relative_path,
            ignore_files=profile.ignore_files,
            path_style=profile.path_style,
        )

    return Manifest(**result)


def generate_assets(settings: Settings) -> Path:
    """Build the manifest for *settings* and overwrite the output file with it."""
    profile = settings.get_profile()
    manifest = build_manifest(profile, settings.root)

    output_path = settings.output_path
    output_path.write_bytes(manifest.to_json().encode("utf-8"))
    logger.info("Assets generated successfully: %s", output_path)
    return output_path


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(
        description="Scan image asset folders and write the front-end asset manifest."
    )
    parser.add_argument(
        "--profile",
        choices=sorted(PROFILES),
        help="Asset layout to scan (default: public)",
    )
    parser.add_argument(
        "--root",
        metavar="DIR",
        help="Project root holding the assets directory and src/ (default: current directory)",
    )
    parser.add_argument(
        "--output",
        "-o",
        metavar="FILE",
        help="Write JSON output to FILE, relative to the project root",
    )
    parser.add_argument("--verbose", "-v", action="store_true", help="Log skipped entries")
    args = parser.parse_args(argv)

    overrides = {}
    if args.profile:
        overrides["profile"] = args.profile
    if args.root:
        overrides["root"] = args.root
    if args.output:
        overrides["output_file"] = args.output
    if args.verbose:
        overrides["log_level"] = "DEBUG"
    try:
        settings = Settings(**overrides)
    except ValidationError as e:
        parser.error(f"invalid settings: {e}")

    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    try:
        generate_assets(settings)
    except OSError as e:
        logger.error("Failed to generate assets: %s", e)
        sys.exit(1)


if __name__ == "__main__":
    main()
