"""Example: circumradii of unit-edge regular polytopes from their diagrams."""

from coxeter_cd import parse_diagram

DIAGRAMS = {
    "pentagon": "x5o",
    "tetrahedron": "x3o3o",
    "cube": "x4o3o",
    "dodecahedron": "x5o3o",
    "tesseract": "x4o3o3o",
    "600-cell": "o5o3o3x",
    "hexagonal tiling": "x6o3o",
}


def main() -> None:
    for name, text in DIAGRAMS.items():
        diagram = parse_diagram(text)
        radius = diagram.circumradius()
        generator = diagram.generator()
        shown = "none" if radius is None else f"{radius:.6f}"
        print(f"{name:>18} {text:<10} circumradius={shown} generator={generator}")


if __name__ == "__main__":
    main()
