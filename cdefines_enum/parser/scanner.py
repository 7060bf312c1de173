# parser/scanner.py

from typing import Iterator, NamedTuple

from cdefines_enum.errors import GenerationError
from cdefines_enum.parser.primitives import DEFINE_DIRECTIVE


class DefinePair(NamedTuple):
    name: str
    value: str
    line_number: int


def scan_defines(text: str, source_label: str = "<content>") -> Iterator[DefinePair]:
    """
    Yield a DefinePair for every `#define NAME VALUE` line in `text`.

    Lines that do not start with `#define` are skipped. A `#define` line
    without a name or value token is a hard error, since it means the
    header itself is malformed. Tokens after the value are ignored.
    """
    for line_number, line in enumerate(text.splitlines(), start=1):
        tokens = line.split()
        if not tokens or tokens[0] != DEFINE_DIRECTIVE:
            continue

        if len(tokens) < 2:
            raise GenerationError(
                f"[CDefines][scan] {source_label}:{line_number}: missing define name"
            )
        if len(tokens) < 3:
            raise GenerationError(
                f"[CDefines][scan] {source_label}:{line_number}: "
                f"missing define value for '{tokens[1]}'"
            )

        yield DefinePair(tokens[1], tokens[2], line_number)
