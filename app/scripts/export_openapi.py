"""
Write the API's OpenAPI document to a JSON file for static hosting. Run from project root:
  python -m app.scripts.export_openapi [OUTPUT_PATH]
Defaults to public/swagger.json.
"""
import argparse
import json
import sys
from pathlib import Path

DEFAULT_OUTPUT = Path("public") / "swagger.json"


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Export the OpenAPI schema as JSON.")
    parser.add_argument("output", nargs="?", type=Path, default=DEFAULT_OUTPUT)
    args = parser.parse_args(argv)

    from app.main import app

    output: Path = args.output
    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(json.dumps(app.openapi(), indent=2), encoding="utf-8")
    print(f"Wrote OpenAPI schema to {output}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
