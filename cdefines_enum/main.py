import argparse
import os
import sys
from typing import Optional, Sequence

from cdefines_enum.config.loader import build_enum_config, load_config
from cdefines_enum.errors import ConfigError, GenerationError
from cdefines_enum.generator.enum_gen import generate_enum
from cdefines_enum.generator.output_manager import write_generated_module


def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="cdefines-enum",
        description="Generate a Python enum from the #define lines of a C header."
    )
    parser.add_argument("name", nargs="?", help="Name of the generated enum class.")
    parser.add_argument("header", nargs="?", help="Header to scan for #define lines ('-' reads stdin).")
    parser.add_argument("-c", "--config", help="JSON config describing one or more enums.")
    parser.add_argument("--remove-prefix", default="", help="Prefix stripped from every define name.")
    parser.add_argument("--remove-suffix", default="", help="Suffix stripped from every define name.")
    case_group = parser.add_mutually_exclusive_group()
    case_group.add_argument("--to-lower", action="store_true", help="Lowercase member names.")
    case_group.add_argument("--to-upper", action="store_true", help="Uppercase member names.")
    parser.add_argument("--sort", action="store_true", help="Emit members sorted by name.")
    parser.add_argument("-o", "--output", help="Write the module here instead of stdout.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log each generation step.")

    args = parser.parse_args(argv)
    if args.config and (args.name or args.header):
        parser.error("--config cannot be combined with NAME/HEADER")
    if not args.config and not (args.name and args.header):
        parser.error("either --config or both NAME and HEADER are required")
    return args


def config_from_args(args: argparse.Namespace) -> dict:
    """Build the same shape load_config returns, for a single enum given on the command line."""
    raw = {
        "name":          args.name,
        "remove_prefix": args.remove_prefix,
        "remove_suffix": args.remove_suffix,
        "to_lower":      args.to_lower,
        "to_upper":      args.to_upper,
        "sort_members":  args.sort
    }
    if args.header == "-":
        raw["content"] = sys.stdin.read()
    else:
        raw["include_file"] = args.header
    if args.output:
        raw["output"] = args.output

    return {
        "enums":           [build_enum_config(raw, base_dir=os.getcwd())],
        "output_dir":      os.getcwd(),
        "verbose_logging": args.verbose
    }


def run(config: dict) -> list:
    """Generate every configured enum; returns the written paths."""
    verbose = config.get("verbose_logging", False)
    written = []

    if verbose:
        print(f"[CDefines][main] Generating {len(config['enums'])} enum(s)", file=sys.stderr)

    for enum_config in config["enums"]:
        generated = generate_enum(enum_config, verbose=verbose)
        if enum_config.output:
            output_path = os.path.join(config["output_dir"], enum_config.output)
            written.append(write_generated_module(generated, output_path, verbose=verbose))
        else:
            sys.stdout.write(generated.source)

    if verbose:
        print("[CDefines][main] Generation complete", file=sys.stderr)
    return written


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = parse_args(argv)
    try:
        if args.config:
            config = load_config(args.config)
            if args.verbose:
                config["verbose_logging"] = True
        else:
            config = config_from_args(args)
        run(config)
    except (ConfigError, GenerationError, OSError) as error:
        print(f"[CDefines][main] Error: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
