import argparse
import logging
import sys

from .errors import EncodingError, GenerateError
from .image import image_classes
from .symbology import encode, get_encoding, symbologies


logger = logging.getLogger(__name__)


def positive_int(value):
    number = int(value)
    if number <= 0:
        raise argparse.ArgumentTypeError(
            "{!r} is not a positive number".format(value)
        )
    return number


def non_negative_int(value):
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(
            "{!r} can't be negative".format(value)
        )
    return number


parser = argparse.ArgumentParser(
    prog="barcodec",
    description="Generate an image of barcode",
)
parser.add_argument(
    "--symbology",
    type=str.lower,
    default="code128",
    choices=symbologies(),
    help="Type of barcode used."
)
parser.add_argument(
    "--file-type",
    type=str,
    default="png",
    choices=sorted(image_classes),
    help="Generated image filetype."
)
parser.add_argument(
    "--scale",
    type=positive_int,
    default=None,
    help="Width of the narrowest bar, in pixels or characters."
)
parser.add_argument(
    "--barcode-height",
    type=positive_int,
    default=None,
    help="Barcode height, in pixels or text rows."
)
parser.add_argument(
    "--quiet-zone",
    type=non_negative_int,
    default=None,
    help="Blank modules on each side of the barcode."
)
parser.add_argument(
    "--no-check",
    action="store_true",
    help="Leave out the optional check character "
         "(code39) or check digit (itf)."
)
parser.add_argument(
    "--verbose",
    action="store_true",
    help="Log debugging information."
)
parser.add_argument(
    "content",
    type=str,
    help="Content of barcode."
)
parser.add_argument(
    "out",
    type=str,
    help="Output path, - for standard output."
)

# symbologies with a check character that can be switched off
check_options = {
    "code39": "check_character",
    "itf": "check_digit",
}


def main(cmd_args=None):
    args = parser.parse_args(cmd_args)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s"
    )

    options = {}
    if args.no_check:
        option = check_options.get(args.symbology)
        if option is None:
            logger.warning("%s has no optional check character, "
                           "--no-check ignored",
                           get_encoding(args.symbology).name)
        else:
            options[option] = False

    image_class = image_classes[args.file_type]
    try:
        modules = encode(args.symbology, args.content, **options)
        image = image_class(
            data_bits=modules,
            barcode_height=args.barcode_height,
            scale=args.scale,
            quiet_zone=args.quiet_zone,
        )
        output = image.generate()
    except (EncodingError, GenerateError) as e:
        parser.error(str(e))

    if args.out == "-":
        if isinstance(output, bytes):
            sys.stdout.buffer.write(output)
        else:
            sys.stdout.write(output)
            if not output.endswith("\n"):
                sys.stdout.write("\n")
        sys.stdout.flush()
    else:
        with open(args.out, image.file_open_mode) as image_file:
            image_file.write(output)
        logger.debug("Wrote %s image to %s", args.file_type, args.out)


if __name__ == "__main__":
    main()
