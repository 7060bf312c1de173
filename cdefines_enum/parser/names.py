# parser/names.py

import enum
from functools import partial


class CaseMode(enum.Enum):
    NONE  = "none"
    LOWER = "lower"
    UPPER = "upper"


def normalize_name(name: str,
                   prefix: str = "",
                   suffix: str = "",
                   case_mode: CaseMode = CaseMode.NONE) -> str:
    """
    Turn a raw define name into a member name: drop `prefix` and `suffix`
    when they match exactly, then fold case according to `case_mode`.
    """
    if prefix and name.startswith(prefix):
        name = name[len(prefix):]
    if suffix and name.endswith(suffix):
        name = name[:-len(suffix)]

    if case_mode is CaseMode.LOWER:
        return name.lower()
    if case_mode is CaseMode.UPPER:
        return name.upper()
    return name


def make_normalizer(config):
    """Bind the name options of an EnumConfig into a one-argument callable."""
    return partial(normalize_name,
                   prefix=config.remove_prefix,
                   suffix=config.remove_suffix,
                   case_mode=config.case_mode)
