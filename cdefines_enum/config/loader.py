import json
import keyword
import os
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from cdefines_enum.errors import ConfigError
from cdefines_enum.parser.names import CaseMode

REQUIRED_KEYS = [
    "enums"
]

STRING_KEYS = ("name", "content", "include_file", "remove_prefix", "remove_suffix", "output")
BOOL_KEYS   = ("to_upper", "to_lower", "sort_members")
ENUM_KEYS   = set(STRING_KEYS) | set(BOOL_KEYS)


@dataclass(frozen=True)
class EnumConfig:
    enum_name: str
    source_text: str
    remove_prefix: str = ""
    remove_suffix: str = ""
    case_mode: CaseMode = CaseMode.NONE
    sort_members: bool = False
    source_label: str = "<content>"
    output: Optional[str] = None


def build_enum_config(raw: dict, base_dir=None) -> EnumConfig:
    """
    Validate one enum entry and turn it into an EnumConfig.

    The define text comes either inline from `content` or from the file
    named by `include_file` (relative paths resolve against `base_dir`).
    """
    if not isinstance(raw, dict):
        raise ConfigError(f"[CDefines][config] Enum entry must be an object, got {type(raw).__name__}.")

    unknown = sorted(set(raw) - ENUM_KEYS)
    if unknown:
        raise ConfigError(f"[CDefines][config] Unknown enum option(s): {', '.join(unknown)}")

    for key in STRING_KEYS:
        if key in raw and not isinstance(raw[key], str):
            raise ConfigError(f"[CDefines][config] `{key}` must be a string, got {type(raw[key]).__name__}.")
    for key in BOOL_KEYS:
        if key in raw and not isinstance(raw[key], bool):
            raise ConfigError(f"[CDefines][config] `{key}` must be a bool, got {type(raw[key]).__name__}.")

    # Enum name
    enum_name = raw.get("name")
    if not enum_name:
        raise ConfigError("[CDefines][config] Missing enum `name`.")
    if not enum_name.isidentifier() or keyword.iskeyword(enum_name) or enum_name.startswith("_"):
        raise ConfigError(f"[CDefines][config] `name` is not a usable class name: {enum_name!r}")

    # Define text
    if "content" in raw and "include_file" in raw:
        raise ConfigError(f"[CDefines][config] '{enum_name}': give either `content` or `include_file`, not both.")
    if "content" in raw:
        source_text  = raw["content"]
        source_label = "<content>"
    elif "include_file" in raw:
        include_path = Path(raw["include_file"])
        if not include_path.is_absolute() and base_dir is not None:
            include_path = Path(base_dir) / include_path
        include_path = Path(os.path.normpath(include_path))
        if not include_path.exists():
            raise ConfigError(f"[CDefines][config] '{enum_name}': include_file not found: {include_path}")
        source_text  = include_path.read_text(encoding="utf-8")
        source_label = str(include_path)
    else:
        raise ConfigError(f"[CDefines][config] '{enum_name}': content is missing.")

    # Case folding
    to_upper = raw.get("to_upper", False)
    to_lower = raw.get("to_lower", False)
    if to_upper and to_lower:
        raise ConfigError(f"[CDefines][config] '{enum_name}': `to_upper` and `to_lower` are mutually exclusive.")
    if to_lower:
        case_mode = CaseMode.LOWER
    elif to_upper:
        case_mode = CaseMode.UPPER
    else:
        case_mode = CaseMode.NONE

    return EnumConfig(
        enum_name=enum_name,
        source_text=source_text,
        remove_prefix=raw.get("remove_prefix", ""),
        remove_suffix=raw.get("remove_suffix", ""),
        case_mode=case_mode,
        sort_members=raw.get("sort_members", False),
        source_label=source_label,
        output=raw.get("output")
    )


def load_config(path):
    """
    Loads and validates a generator config.json file.
    Applies defaults and turns every entry of `enums` into an EnumConfig.
    """
    if not os.path.exists(path):
        raise FileNotFoundError(f"Config file not found: {path}")

    with open(path, "r", encoding="utf-8") as file:
        try:
            raw = json.load(file)
        except json.JSONDecodeError as error:
            raise ConfigError(f"[CDefines][config] {path} is not valid JSON: {error}") from error

    if not isinstance(raw, dict):
        raise ConfigError(f"[CDefines][config] {path} must contain a JSON object.")

    # Validate required keys
    for key in REQUIRED_KEYS:
        if key not in raw:
            raise ConfigError(f"[CDefines][config] Missing required config key: {key}")

    if not isinstance(raw["enums"], list) or not raw["enums"]:
        raise ConfigError("[CDefines][config] `enums` must be a non-empty list.")

    config_dir = Path(path).resolve().parent

    # Optional fields
    raw.setdefault("output_dir", str(config_dir))
    raw.setdefault("verbose_logging", False)

    if not isinstance(raw["output_dir"], str):
        raise ConfigError("[CDefines][config] `output_dir` must be a string.")
    if not isinstance(raw["verbose_logging"], bool):
        raise ConfigError("[CDefines][config] `verbose_logging` must be a bool.")

    raw["output_dir"] = os.path.normpath(config_dir / raw["output_dir"])
    raw["enums"] = [build_enum_config(entry, base_dir=config_dir) for entry in raw["enums"]]

    names = [entry.enum_name for entry in raw["enums"]]
    duplicates = sorted({name for name in names if names.count(name) > 1})
    if duplicates:
        raise ConfigError(f"[CDefines][config] Enum name(s) configured more than once: {', '.join(duplicates)}")

    if raw["verbose_logging"]:
        print(f"[CDefines][config] Loaded {len(names)} enum(s) from {path}", file=sys.stderr)

    return raw
