"""Quickstart example for lexcursor.

Builds a small tokenizer for assignment statements on top of Cursor and
shows how a scan error is reported with line/column context.

Run: python examples/quickstart.py
"""

import re

from lexcursor import Cursor, ScanError
from lexcursor.constants import INLINE_WHITESPACE

OPERATORS = ["==", "=", "+", "-", "*", "/", "(", ")"]
NUMBER = re.compile(r"^\d+(?:\.\d+)?")
IDENTIFIER = re.compile(r"^[A-Za-z_]\w*")


def tokenize(source: str) -> list[tuple[str, str, str]]:
    """Split source into (kind, text, "line:column") tokens."""
    cursor = Cursor(source)
    tokens: list[tuple[str, str, str]] = []

    while not cursor.is_eof:
        if cursor.skip_chars(INLINE_WHITESPACE):
            continue

        position = str(cursor.position)

        if cursor.skip_line_end():
            tokens.append(("NEWLINE", "\\n", position))
        elif cursor.starts_with("#"):
            # Comments run to the end of the line
            comment = cursor.current_line[cursor.position.column - 1 :]
            cursor.advance(len(comment))
        elif (op := cursor.find_first_matched(OPERATORS)) is not None:
            tokens.append(("OP", op, position))
        elif (match := cursor.match_pattern(NUMBER)) is not None:
            tokens.append(("NUMBER", match.group(), position))
            cursor.advance(match.end())
        elif (match := cursor.match_pattern(IDENTIFIER)) is not None:
            tokens.append(("NAME", match.group(), position))
            cursor.advance(match.end())
        else:
            raise cursor.error()

    return tokens


# Example 1: Tokenize a small program
print("=" * 50)
print("Example 1: Tokenizing")
print("=" * 50)

program = """\
width = 20  # columns
height = (width * 3) / 4
"""

for kind, text, position in tokenize(program):
    print(f"{position:>6}  {kind:<8} {text}")
# Output starts with:
#    1:1  NAME     width
#    1:7  OP       =

# Example 2: Ordered alternatives
print("\n" + "=" * 50)
print("Example 2: First match wins")
print("=" * 50)

cursor = Cursor("==")
print(cursor.find_first_matched(["=", "=="]), cursor.offset)
# Output: = 1
cursor.rewind()
print(cursor.find_first_matched(["==", "="]), cursor.offset)
# Output: == 2

# Example 3: Reporting a scan error
print("\n" + "=" * 50)
print("Example 3: Scan errors")
print("=" * 50)

try:
    tokenize("total = 1 +\nrate = 2 $ 3\n")
except ScanError as error:
    print(error)
    print()
    print(error.format_with_context(context_lines=1))

# Example 4: A required pattern that does not match
print("\n" + "=" * 50)
print("Example 4: Pattern errors")
print("=" * 50)

cursor = Cursor("rate = x2")
cursor.seek(7)
if cursor.match_pattern(NUMBER) is None:
    print(cursor.error(pattern=NUMBER))
# Output: error[PATTERN_NOT_MATCHED]: Input does not match pattern ...

print("\n" + "=" * 50)
print("[SUCCESS] All examples completed successfully!")
print("=" * 50)
