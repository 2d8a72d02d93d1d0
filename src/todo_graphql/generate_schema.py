"""
Utility script to write the GraphQL schema of the API as SDL.

This script imports the strawberry schema and prints it to
interfaces/schema.graphql so that clients and documentation tools can consume
a stable contract without running the server.

Usage:
    python -m todo_graphql.generate_schema [OUTPUT_PATH]

Notes:
- Without OUTPUT_PATH the file is written to ./interfaces/schema.graphql
"""
from __future__ import annotations

import os
import sys
from typing import Optional

from strawberry.printer import print_schema

from .graphql_schema import schema

DEFAULT_OUTPUT = os.path.join("interfaces", "schema.graphql")


# PUBLIC_INTERFACE
def generate_schema(out_path: Optional[str] = None) -> str:
    """Write the schema SDL to out_path (creating directories as needed) and return the path."""
    path = out_path or DEFAULT_OUTPUT
    os.makedirs(os.path.dirname(path) or ".", exist_ok=True)
    with open(path, "w", encoding="utf-8") as f:
        f.write(print_schema(schema))
        f.write("\n")
    return path


def main() -> None:
    path = generate_schema(sys.argv[1] if len(sys.argv) > 1 else None)
    print(f"Wrote GraphQL schema to: {path}")


if __name__ == "__main__":
    main()
