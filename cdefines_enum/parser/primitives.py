# parser/primitives.py

import struct

# ——— Define-line tokens ———
DEFINE_DIRECTIVE = "#define"

# ——— Host integer width ———
# Literal values must fit the host's native unsigned integer (size_t / usize).
NATIVE_UINT_BITS = struct.calcsize("P") * 8
NATIVE_UINT_MAX  = (1 << NATIVE_UINT_BITS) - 1
