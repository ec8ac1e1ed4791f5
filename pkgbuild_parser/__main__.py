import sys

from pkgbuild_parser.cli import main

if __name__ == "__main__":
    sys.exit(main())
