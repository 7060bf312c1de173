import sys
from pathlib import Path


def write_generated_module(generated, output_path, verbose: bool = False) -> str:
    """
    Writes the generated enum module to `output_path`, creating parent
    directories as needed.
    Returns the path that was written.
    """
    destination_path = Path(output_path)
    destination_path.parent.mkdir(parents=True, exist_ok=True)
    destination_path.write_text(generated.source, encoding="utf-8")

    if verbose:
        print(f"[CDefines][output] Wrote {generated.enum_name} to {destination_path}", file=sys.stderr)

    return str(destination_path)
