"""Entry point for memban CLI."""

import sys

from memban.cli import build_parser


def main():
    parser = build_parser()
    args = parser.parse_args()
    sys.exit(args.func(args))


if __name__ == "__main__":
    main()
