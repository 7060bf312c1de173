from string import Template
import keyword

# --- Templates ---
template_module = Template("""# GENERATED FILE - DO NOT ALTER
# Generated by cdefines-enum from $Source
import enum


$EnumClass
""")
template_dense_enum = Template('''class $EnumName(enum.Enum):
$Members

    @classmethod
    def from_value(cls, value):
        """Return the member whose value is `value`, or None."""
        return _${EnumName}_BY_VALUE.get(value)

    def to_value(self):
        return self.value


_${EnumName}_BY_VALUE = {
$ByValue
}''')
template_sparse_enum = Template('''class $EnumName(enum.Enum):
$Members

    @classmethod
    def from_value(cls, value):
        """
        Return the member for `value`, or None.

        Some members share a value; the first one listed is returned for it.
        """
        return _${EnumName}_BY_VALUE.get(value)

    def to_value(self):
        return _${EnumName}_TO_VALUE[self]


_${EnumName}_TO_VALUE = {
$ToValue
}

_${EnumName}_BY_VALUE = {
$ByValue
}''')
template_member = Template("    $Name = $Value")
template_by_value = Template("    $Value: $EnumName.$Name,")
template_to_value = Template("    $EnumName.$Name: $Value,")

# Names taken by the generated class itself
RESERVED_MEMBER_NAMES = {"from_value", "to_value", "mro"}


def is_valid_member_name(name: str, enum_name: str = "") -> bool:
    """
    True when `name` can be declared as an enum member in the generated
    class `enum_name`: a plain identifier, not a keyword, not a
    _sunder_/__dunder__ or private name, and not one of the generated methods.
    """
    if not name.isidentifier() or keyword.iskeyword(name):
        return False
    if name.startswith("__"):
        return False
    # _Name__x is a private attribute of class Name, not a member
    if enum_name and name.startswith(f"_{enum_name}__"):
        return False
    if name.startswith("_") and name.endswith("_"):
        return False
    return name not in RESERVED_MEMBER_NAMES


# --- Render Functions ---
def render_dense_enum(enum_name: str, members) -> str:
    return template_dense_enum.substitute(
        EnumName=enum_name,
        Members="\n".join(template_member.substitute(Name=n, Value=v) for n, v in members),
        ByValue="\n".join(
            template_by_value.substitute(Value=v, EnumName=enum_name, Name=n) for n, v in members
        )
    )

def render_sparse_enum(enum_name: str, members, inverse) -> str:
    return template_sparse_enum.substitute(
        EnumName=enum_name,
        Members="\n".join(
            template_member.substitute(Name=n, Value=ordinal)
            for ordinal, (n, _) in enumerate(members)
        ),
        ToValue="\n".join(
            template_to_value.substitute(EnumName=enum_name, Name=n, Value=v) for n, v in members
        ),
        ByValue="\n".join(
            template_by_value.substitute(Value=v, EnumName=enum_name, Name=n) for v, n in inverse
        )
    )

def render_module(enum_class: str, source_label: str) -> str:
    return template_module.substitute(Source=source_label, EnumClass=enum_class)
