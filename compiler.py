import logging
import sys

from sheetcore.config import load_config
from sheetcore.errors import StyleModuleError
from sheetcore.loader import DEFAULT_ENTRY, resolve_modules
from sheetcore.printer import stringify
from sheetcore.sources import collect_modules

# Global verbose flag
_VERBOSE = False
_HANDLER = None


def set_verbose(value):
    """Set the global verbose flag and route sheetcore debug logs to stderr."""
    global _VERBOSE, _HANDLER
    _VERBOSE = value
    logger = logging.getLogger("sheetcore")
    if _HANDLER is not None:
        logger.removeHandler(_HANDLER)
        _HANDLER = None
    if value:
        _HANDLER = logging.StreamHandler(sys.stderr)
        _HANDLER.setFormatter(logging.Formatter("\033[94mDEBUG:\033[0m %(name)s: %(message)s"))
        logger.addHandler(_HANDLER)
    logger.setLevel(logging.DEBUG if value else logging.NOTSET)


def debug_log(message):
    """Log a debug message to stderr if verbose mode is enabled."""
    if _VERBOSE:
        print(f"\033[94mDEBUG:\033[0m {message}", file=sys.stderr)


def resolve_tree(modules, entry=DEFAULT_ENTRY):
    """Resolve ``entry`` to a Stylesheet, wrapping unexpected failures."""
    debug_log(f"Resolving entry: {entry} ({len(modules)} modules)")
    try:
        return resolve_modules(modules, entry)
    except StyleModuleError:
        raise  # Re-raise our custom errors
    except OSError as e:
        raise StyleModuleError(f"could not read module source: {e}") from e
    except Exception as e:
        raise StyleModuleError(f"resolution error: {e}") from e


def compile_modules(modules, entry=DEFAULT_ENTRY):
    """Resolve ``entry`` from a module table and return the style sheet text."""
    tree = resolve_tree(modules, entry)
    return stringify(tree)


def compile_directory(directory, entry=None):
    """
    Compile the modules found under ``directory``.

    The entry point comes from ``entry``, then sheetmods.json, then 'index'.
    """
    config = load_config(directory)
    modules = collect_modules(directory, tuple(config.extensions))
    debug_log(f"Collected {len(modules)} module specifiers from {directory}")
    return compile_modules(modules, entry or config.entry)


def directory_tree(directory, entry=None):
    """Resolved Stylesheet for ``directory``, for tooling that wants the tree."""
    config = load_config(directory)
    modules = collect_modules(directory, tuple(config.extensions))
    return resolve_tree(modules, entry or config.entry)
