"""Entry point for `python -m iconthemes`."""

import sys


def main():
    from iconthemes.app import run_app
    sys.exit(run_app())


if __name__ == "__main__":
    main()
