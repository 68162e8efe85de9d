#!/usr/bin/env python3
"""Example: reformatting documentation comments

Demonstrates parsing a module comment, reflowing it to two page widths,
and reading back the @docs groups used to order a module's exports.

Usage:
    python examples/01_quickstart.py

Requirements:
    pip install elmdoc
"""
from __future__ import annotations

import elmdoc

MODULE_COMMENT = """{-| A library for working with dictionaries: mappings from unique keys to
values.   Keys can be any comparable type, including tuples and lists of
comparable values.

# Build
@docs empty, singleton, insert
@docs update, remove

# Query
@docs isEmpty, member, get, size

Insertion, removal and query operations all take O(log n) time.

    fromList [ ( "Tom", 39 ), ( "Sue", 27 ) ]
        |> get "Tom"

-}"""


def main() -> None:
    print(f"elmdoc version: {elmdoc.__version__}")

    # Step 1: Parse the comment body
    comment = elmdoc.parse_file_comment(elmdoc.strip_delimiters(MODULE_COMMENT))
    print(f"\nParsed {len(comment)} part(s):")
    for part in comment.parts():
        print(f"  {type(part).__name__}")

    # Step 2: Render at two widths
    for width in (80, 40):
        text, groups = elmdoc.pretty_file_comment(width, comment)
        print(f"\nWidth {width}:")
        print(text)

    # Step 3: Export groups do not depend on the width
    print("\n@docs groups:")
    for index, names in enumerate(groups, start=1):
        print(f"  {index}. {', '.join(names)}")

    # Step 4: Idempotency check: formatting twice gives the same result
    once = elmdoc.format_comment(MODULE_COMMENT, width=60, kind="file")
    twice = elmdoc.format_comment(once, width=60, kind="file")
    print(f"\nIdempotent: {once == twice}")


if __name__ == "__main__":
    main()
