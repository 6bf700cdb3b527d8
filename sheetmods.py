import argparse
import os
import sys

from compiler import compile_directory, directory_tree, set_verbose
from sheetcore.config import load_config
from sheetcore.errors import StyleModuleError
from sheetcore.sources import collect_modules


def log(message):
    """Log informational messages to stderr."""
    print(f"\033[92m\033[1mINFO:\033[0m {message}", file=sys.stderr)


def fail(message):
    print(f"Error: {message}", file=sys.stderr)
    sys.exit(1)


def check_source(source):
    if not os.path.isdir(source):
        fail(f"Directory '{source}' not found.")


def cmd_build(args):
    set_verbose(args.verbose)
    check_source(args.source)
    try:
        config = load_config(args.source)
        css = compile_directory(args.source, args.entry)
    except StyleModuleError as e:
        fail(f"Build Failed:\n{e}")

    output = args.output or config.output
    if not output or output == "-":
        sys.stdout.write(css + "\n")
        return
    output_dir = os.path.dirname(output)
    if output_dir and not os.path.exists(output_dir):
        os.makedirs(output_dir)
    with open(output, 'w') as f:
        f.write(css + "\n")
    log(f"Wrote {output}")


def cmd_tree(args):
    """Print the resolved tree as JSON."""
    set_verbose(args.verbose)
    check_source(args.source)
    try:
        tree = directory_tree(args.source, args.entry)
    except StyleModuleError as e:
        fail(f"Resolution Failed:\n{e}")
    print(tree.model_dump_json(indent=2, exclude_none=True))


def cmd_list(args):
    set_verbose(args.verbose)
    check_source(args.source)
    try:
        config = load_config(args.source)
        modules = collect_modules(args.source, tuple(config.extensions))
    except StyleModuleError as e:
        fail(f"Listing Failed:\n{e}")
    for specifier in sorted(modules):
        entry = modules[specifier]
        if isinstance(entry, str):
            print(f"{specifier} -> {entry}")
        else:
            print(specifier)
    log(f"{len(modules)} module specifiers found.")


def main(argv=None):
    parser = argparse.ArgumentParser(description="Style-sheet module resolver")
    parser.add_argument("--verbose", action="store_true", help="Enable verbose output (sent to stderr)")
    subparsers = parser.add_subparsers(dest="command")

    build = subparsers.add_parser("build", help="Resolve modules and print the merged style sheet")
    build.add_argument("source", help="Directory holding the modules")
    build.add_argument("--entry", help="Entry module specifier (default: from sheetmods.json or 'index')")
    build.add_argument("--output", help="Output file (default: stdout)")

    tree = subparsers.add_parser("tree", help="Print the resolved tree as JSON")
    tree.add_argument("source", help="Directory holding the modules")
    tree.add_argument("--entry", help="Entry module specifier")

    subparsers.add_parser("list", help="List module specifiers found in a directory").add_argument(
        "source", help="Directory holding the modules")

    args = parser.parse_args(argv)

    if args.command == "build": cmd_build(args)
    elif args.command == "tree": cmd_tree(args)
    elif args.command == "list": cmd_list(args)
    else: parser.print_help()


if __name__ == "__main__":
    main()
