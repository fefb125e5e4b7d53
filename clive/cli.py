"""Command line parsing: which images to show and where triaged ones go."""

from __future__ import annotations
import argparse
from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from . import __version__
from .config import DEFAULT_DEST_FOLDER, DEFAULT_PATTERN
from .image_utils import find_images


@dataclass
class Args:
    """Resolved command line arguments."""
    files: List[str] = field(default_factory=list)
    dest_folder: str = DEFAULT_DEST_FOLDER
    pattern: str = DEFAULT_PATTERN


def build_parser() -> argparse.ArgumentParser:
    p = argparse.ArgumentParser(
        prog="clive",
        description="A simple Command Line Image Viewer Executable",
    )
    p.add_argument(
        "path", nargs="?", default=DEFAULT_PATTERN,
        help="The directory or files to search for image files "
             "(glob pattern, default: %(default)s)",
    )
    p.add_argument(
        "-f", "--dest-folder", dest="dest_folder", default=DEFAULT_DEST_FOLDER,
        help="Destination folder for moving files to (default: %(default)s)",
    )
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return p


def parse_args(argv: Optional[Sequence[str]] = None) -> Args:
    """Parse ``argv`` and resolve the image list.

    Exits through argparse on invalid usage.
    """
    ns = build_parser().parse_args(argv)
    return Args(
        files=find_images(ns.path),
        dest_folder=ns.dest_folder,
        pattern=ns.path,
    )
