# parser/symbols.py

import sys
from dataclasses import dataclass, field
from typing import Callable, Dict, Iterable, Optional

from cdefines_enum.errors import GenerationError
from cdefines_enum.parser.literals import parse_value
from cdefines_enum.parser.scanner import DefinePair


@dataclass
class SymbolTable:
    """
    Normalized name -> resolved value, in the order the names were found.

    `has_duplicates` only ever goes from False to True. It is set as soon as
    an alias is seen, or at the end when two names share a value.
    """
    symbols: Dict[str, int] = field(default_factory=dict)
    has_duplicates: bool = False

    def distinct_values(self) -> int:
        return len(set(self.symbols.values()))


def build_symbol_table(pairs: Iterable[DefinePair],
                       normalize: Callable[[str], str],
                       parse: Callable[[str], Optional[int]] = parse_value,
                       verbose: bool = False) -> SymbolTable:
    """
    Resolve scanned define pairs into a SymbolTable.

    A value that is not a numeric literal is looked up as the name of an
    earlier define. References must point backwards in the file; a name
    used before it is defined is an error.
    """
    table = SymbolTable()

    for pair in pairs:
        name  = normalize(pair.name)
        value = parse(pair.value)

        if value is None:
            referenced = normalize(pair.value)
            # aliases always count as duplicates
            table.has_duplicates = True
            if referenced not in table.symbols:
                raise GenerationError(
                    f"[CDefines][symbols] line {pair.line_number}: "
                    f"{name} is defined ahead of {referenced}"
                )
            value = table.symbols[referenced]
            if verbose:
                print(f"[CDefines][symbols]   {name} -> {referenced} ({value})", file=sys.stderr)
        elif verbose:
            print(f"[CDefines][symbols]   {name} = {value}", file=sys.stderr)

        if name in table.symbols:
            print(
                f"[CDefines][symbols] Warning: line {pair.line_number}: '{pair.name}' "
                f"normalizes to '{name}', replacing its earlier value {table.symbols[name]}",
                file=sys.stderr
            )
        table.symbols[name] = value

    if not table.has_duplicates and table.distinct_values() != len(table.symbols):
        table.has_duplicates = True

    if verbose:
        print(
            f"[CDefines][symbols] {len(table.symbols)} symbols, "
            f"{table.distinct_values()} distinct values, "
            f"duplicates: {table.has_duplicates}",
            file=sys.stderr
        )

    return table
