import argparse
import logging
import sys

from bannerpic.banner import compose_banner, write_banner
from bannerpic.charsets import PRESETS
from bannerpic.converter import image_to_ascii
from bannerpic.errors import BannerError
from bannerpic.fonts import DEFAULT_WIDTH, FIGLET_FONTS, render_text
from bannerpic.options import RenderOptions

logger = logging.getLogger(__name__)

DEFAULTS = RenderOptions()


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="bannerpic", description="Render images and text as ASCII banners")
    parser.add_argument("-v", "--verbose", action="store_true", default=False, help="Log debug output to stderr")
    # Also accepted after the subcommand; absent there, the top-level value stands
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument(
        "-v", "--verbose", action="store_true", default=argparse.SUPPRESS, help="Log debug output to stderr"
    )
    sub = parser.add_subparsers(dest="command", required=True)

    image = sub.add_parser("image", parents=[common], help="Convert an image to character art")
    image.add_argument("image", help="Path to input image")
    image.add_argument(
        "-w", "--width", type=int, default=DEFAULTS.target_width, help="Output width in columns (default: 80)"
    )
    image.add_argument(
        "-c", "--contrast", type=float, default=DEFAULTS.contrast, help="Contrast multiplier (default: 1.2)"
    )
    image.add_argument(
        "-b", "--brightness", type=int, default=DEFAULTS.brightness, help="Brightness offset (default: 0)"
    )
    image.add_argument("-i", "--invert", action="store_true", default=False, help="Swap light and dark")
    image.add_argument(
        "-r",
        "--ramp",
        default="standard",
        help=f"Ramp preset ({', '.join(PRESETS)}) or literal characters, darkest first (default: standard)",
    )
    _add_output_args(image)

    text = sub.add_parser("text", parents=[common], help="Render text as block letters")
    text.add_argument("text", help="Text to render")
    text.add_argument("-f", "--font", default="Standard", help="FIGlet font name (default: Standard)")
    text.add_argument(
        "-w", "--width", type=int, default=DEFAULT_WIDTH, help=f"Wrap width in columns (default: {DEFAULT_WIDTH})"
    )
    _add_output_args(text)

    sub.add_parser("fonts", parents=[common], help="List the built-in font choices")
    sub.add_parser("ramps", parents=[common], help="List the character ramp presets")
    return parser


def _add_output_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("-s", "--slogan", default="", help="Line of text centred under the banner")
    parser.add_argument("-o", "--output", default=None, help="Write to this file (e.g. banner.txt) instead of stdout")


def _emit(art: str, width: int, args: argparse.Namespace) -> None:
    banner = compose_banner(art, args.slogan, width)
    if args.output:
        path = write_banner(args.output, banner)
        logger.info("Wrote %s", path)
    else:
        print(banner)


def main(argv: list[str] | None = None) -> int:
    args = _build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
    )

    try:
        if args.command == "image":
            options = RenderOptions(
                target_width=args.width,
                contrast=args.contrast,
                brightness=args.brightness,
                inverted=args.invert,
                ramp=args.ramp,
            )
            _emit(image_to_ascii(args.image, options), options.target_width, args)
        elif args.command == "text":
            art = render_text(args.text, args.font, args.width)
            _emit(art, max((len(line) for line in art.splitlines()), default=0), args)
        elif args.command == "fonts":
            for name, font in FIGLET_FONTS.items():
                print(f"{name:<12} {font}")
        elif args.command == "ramps":
            for name, ramp in PRESETS.items():
                print(f"{name:<9} {ramp!r}")
    except BannerError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
