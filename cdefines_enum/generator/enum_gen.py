# generator/enum_gen.py

import sys
from dataclasses import dataclass
from typing import Tuple, Union

from cdefines_enum.errors import GenerationError
from cdefines_enum.generator.enum_templates import (
    is_valid_member_name,
    render_dense_enum,
    render_module,
    render_sparse_enum
)
from cdefines_enum.parser.names import make_normalizer
from cdefines_enum.parser.scanner import scan_defines
from cdefines_enum.parser.symbols import SymbolTable, build_symbol_table


@dataclass(frozen=True)
class DenseLayout:
    """Every member's own value is its integer; no two members share one."""
    members: Tuple[Tuple[str, int], ...]


@dataclass(frozen=True)
class SparseLayout:
    """
    Members carry ordinals only. `members` maps name -> integer (several
    names may share an integer) and `inverse` maps integer -> the first
    name that has it.
    """
    members: Tuple[Tuple[str, int], ...]
    inverse: Tuple[Tuple[int, str], ...]


Layout = Union[DenseLayout, SparseLayout]


@dataclass(frozen=True)
class GeneratedEnum:
    enum_name: str
    source: str
    table: SymbolTable
    layout: Layout


def choose_layout(table: SymbolTable, sort_members: bool = False, enum_name: str = "") -> Layout:
    """
    Pick the representation for the whole table at once: dense when every
    value is unique and no alias was used, sparse otherwise.
    """
    members = list(table.symbols.items())
    if sort_members:
        members.sort(key=lambda item: item[0])

    for name, _ in members:
        if not is_valid_member_name(name, enum_name):
            raise GenerationError(
                f"[CDefines][generate] '{name}' cannot be used as an enum member name; "
                "adjust remove_prefix/remove_suffix or the case option"
            )

    if not table.has_duplicates:
        return DenseLayout(members=tuple(members))

    inverse = {}
    for name, value in members:
        inverse.setdefault(value, name)
    return SparseLayout(members=tuple(members), inverse=tuple(inverse.items()))


def render_enum_source(enum_name: str, layout: Layout, source_label: str = "<content>") -> str:
    if isinstance(layout, DenseLayout):
        enum_class = render_dense_enum(enum_name, layout.members)
    else:
        enum_class = render_sparse_enum(enum_name, layout.members, layout.inverse)
    return render_module(enum_class, source_label)


def generate_enum(config, verbose: bool = False) -> GeneratedEnum:
    """
    Run the whole pipeline for one EnumConfig: scan the define lines,
    resolve them into a symbol table, choose a layout and render the
    Python module source.
    """
    if verbose:
        print(f"[CDefines][generate] Generating '{config.enum_name}' from {config.source_label}", file=sys.stderr)

    pairs = scan_defines(config.source_text, config.source_label)
    table = build_symbol_table(pairs, make_normalizer(config), verbose=verbose)
    layout = choose_layout(table, config.sort_members, config.enum_name)

    if verbose:
        kind = "dense" if isinstance(layout, DenseLayout) else "sparse"
        print(f"[CDefines][generate]   → {len(layout.members)} members, {kind} layout", file=sys.stderr)
        if not layout.members:
            print(f"[CDefines][generate]   → No #define lines found in {config.source_label}", file=sys.stderr)

    source = render_enum_source(config.enum_name, layout, config.source_label)
    return GeneratedEnum(enum_name=config.enum_name, source=source, table=table, layout=layout)
