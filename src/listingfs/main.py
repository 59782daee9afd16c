"""
Main entry point: mount a listing file as a read-only filesystem.
"""
import argparse
import logging
import sys
from typing import List, Optional

from .config import Config, DEFAULT_LISTING_FILE, load_config
from .errors import ConfigError, ListingIOError
from .fs_operations import FSOperations

logger = logging.getLogger(__name__)

LISTING_EXAMPLE = """\
Listing file format should be as follows:
/a/b/c.txt
/a/c/e.dat
/a/c/f.mp4
"""


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="listingfs",
        description="Mount a read-only filesystem described by a listing file",
        epilog=LISTING_EXAMPLE,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("mountpoint", nargs="?", help="Directory to mount the filesystem at")
    parser.add_argument("--listing-file", help="Text file with one path per line")
    parser.add_argument("--config", help="JSON configuration file")
    parser.add_argument("--label", dest="content_label",
                        help="Text that follows ' is in ' in file contents "
                             "(defaults to the listing file path)")
    parser.add_argument("-f", "--foreground", action="store_true", default=None,
                        help="Stay in the foreground")
    parser.add_argument("-s", "--single-thread", dest="nothreads", action="store_true",
                        default=None, help="Serve requests from a single thread")
    parser.add_argument("--allow-other", action="store_true", default=None,
                        help="Let other users access the mount")
    parser.add_argument("-d", "--debug", action="store_true", default=None,
                        help="Log every filesystem call")
    return parser


def resolve_config(args: argparse.Namespace) -> Config:
    """Merge command line arguments over the configuration file, if any."""
    config = load_config(args.config) if args.config else Config()
    for field in ("mountpoint", "listing_file", "content_label",
                  "foreground", "nothreads", "allow_other", "debug"):
        value = getattr(args, field)
        if value is not None:
            setattr(config, field, value)
    return config


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        config = resolve_config(args)
    except ConfigError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    logging.basicConfig(
        level=logging.DEBUG if config.debug else logging.INFO,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    if not config.mountpoint:
        logger.error("No mountpoint specified")
        return 1
    if config.listing_file == DEFAULT_LISTING_FILE:
        logger.warning("No listing file given, the filesystem will be empty")

    try:
        fs = FSOperations(config.listing_file, config.label)
    except ListingIOError as e:
        logger.error(f"{e}")
        return 1

    # fusepy loads libfuse on import
    from .fuse_interface import mount

    try:
        mount(
            config.mountpoint,
            fs,
            foreground=config.foreground,
            nothreads=config.nothreads,
            allow_other=config.allow_other,
        )
    except RuntimeError as e:
        logger.error(f"Mount failed: {e}")
        return 1
    return 0


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
