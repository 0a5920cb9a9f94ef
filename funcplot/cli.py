"""Command line entry point: read an expression and draw its graph."""

from __future__ import annotations

import argparse
import math
import sys

from funcplot.notation import infix_to_postfix
from funcplot.plotting import plot_function
from funcplot.validation import tildas, validate

XMIN = 0.0
XMAX = 4 * math.pi
YMIN = 1.0
YMAX = -1.0


def main(argv: list[str] | None = None) -> int:
    """Read one expression from standard input, echo it and plot it, or print n/a."""
    parser = argparse.ArgumentParser(
        prog="funcplot",
        description="Read a function of x from standard input and plot it over [0, 4pi].",
    )
    parser.parse_args(argv)

    line = sys.stdin.readline()
    if not line:
        return 0
    expression = line.split("\n", 1)[0]
    print(expression)
    if validate(expression):
        plot_function(infix_to_postfix(tildas(expression)), XMIN, XMAX, YMIN, YMAX)
    else:
        sys.stdout.write("n/a")
    return 0


if __name__ == "__main__":
    sys.exit(main())