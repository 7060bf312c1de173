from cdefines_enum.config.loader import EnumConfig, build_enum_config, load_config
from cdefines_enum.errors import ConfigError, GenerationError
from cdefines_enum.generator.enum_gen import (
    DenseLayout,
    GeneratedEnum,
    SparseLayout,
    choose_layout,
    generate_enum,
    render_enum_source
)
from cdefines_enum.parser.literals import parse_value
from cdefines_enum.parser.names import CaseMode, normalize_name
from cdefines_enum.parser.scanner import DefinePair, scan_defines
from cdefines_enum.parser.symbols import SymbolTable, build_symbol_table

__version__ = "0.1.0"
