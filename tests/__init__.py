import importlib.util
import os
import tempfile

from cdefines_enum.generator.output_manager import write_generated_module


def load_generated_enum(generated):
    """Write the generated module to a temp dir, import it and return the enum class."""
    with tempfile.TemporaryDirectory() as tmp:
        path = write_generated_module(generated, os.path.join(tmp, f"{generated.enum_name.lower()}.py"))
        spec = importlib.util.spec_from_file_location(f"generated_{generated.enum_name.lower()}", path)
        module = importlib.util.module_from_spec(spec)
        spec.loader.exec_module(module)
    return getattr(module, generated.enum_name)
