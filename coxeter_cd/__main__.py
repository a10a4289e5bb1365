import argparse
import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence

from coxeter_cd import (
    CDError,
    circumradius,
    describe_diagram,
    format_diagram,
    format_matrix,
    generator,
    normals,
    parse_many,
)
from coxeter_cd.printer import format_vector

logger = logging.getLogger(__name__)


def _configure_logging(level: str) -> None:
    log_level = getattr(logging, level.upper(), logging.INFO)
    logging.basicConfig(
        level=log_level,
        format="%(levelname)s:%(name)s:%(message)s",
    )


def _read_diagrams(args: argparse.Namespace) -> List[str]:
    texts = list(args.diagrams)
    if args.file:
        for line in Path(args.file).read_text(encoding="utf-8").splitlines():
            line = line.strip()
            if line and not line.startswith("#"):
                texts.append(line)
    return texts


def main(argv: Optional[Sequence[str]] = None) -> None:
    parser = argparse.ArgumentParser(
        description="Parse Coxeter diagrams and report their matrices and geometry"
    )
    parser.add_argument("diagrams", nargs="*", help="Diagrams in CD notation, e.g. x3o3o")
    parser.add_argument("--file", help="Read additional diagrams from a file, one per line")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        help="Logging level (default: WARNING)",
    )
    parser.add_argument(
        "--precision",
        type=int,
        default=6,
        help="Significant digits in printed numbers (default: 6)",
    )
    args = parser.parse_args(argv)

    _configure_logging(args.log_level)

    texts = _read_diagrams(args)
    if not texts:
        parser.error("no diagrams given")

    failures = 0
    for text, result in parse_many(texts):
        print(f"Diagram: {text}")
        if isinstance(result, CDError):
            failures += 1
            print(f"Error: {result}")
            print()
            continue

        cox = result.cox()
        node_vector = result.node_vector()
        try:
            canonical = format_diagram(result)
        except ValueError as exc:
            logger.warning("Cannot write %r back in CD notation: %s", text, exc)
            canonical = "none"
        print(f"Canonical: {canonical}")
        print(describe_diagram(result), end="")
        print("Coxeter matrix:")
        print(format_matrix(cox.as_array(), args.precision))
        print("Normals:")
        print(format_matrix(normals(cox), args.precision))
        radius = circumradius(cox, node_vector)
        print("Circumradius: " + ("none" if radius is None else f"{radius:.{args.precision}g}"))
        point = generator(cox, node_vector)
        print("Generator: " + ("none" if point is None else format_vector(point, args.precision)))
        print()

    if failures:
        logger.error("%d of %d diagram(s) failed to parse", failures, len(texts))
        sys.exit(1)


if __name__ == "__main__":
    main()
