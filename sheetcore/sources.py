"""
Directory transport for style-sheet modules.

Builds the module table the loader consumes from files on disk, so the
resolver itself never touches the filesystem.
"""
import os

DEFAULT_EXTENSIONS = ('.css', '.styl')


class SourceFile:
    """Zero-argument producer reading one file; ``source`` names it in diagnostics."""
    def __init__(self, path, source):
        self.path = path
        self.source = source

    def __call__(self):
        with open(self.path, 'r', encoding='utf-8') as f:
            return f.read()

    def __repr__(self):
        return f"SourceFile({self.source!r})"


def collect_modules(root, extensions=DEFAULT_EXTENSIONS):
    """
    Map every style-sheet file under ``root`` to a module specifier.

    ``pkg/sub/file.css`` is registered as ``pkg/sub/file``. An ``index`` file
    also registers its directory as an alias, so ``pkg`` loads
    ``pkg/index``. Vendored packages under ``pkg/deps/`` follow the same rule.

    Args:
        root: Directory to scan recursively
        extensions: File suffixes treated as modules

    Returns:
        Dict of specifier -> SourceFile or alias string

    Raises:
        FileNotFoundError: If ``root`` is not a directory
    """
    root = os.path.abspath(root)
    if not os.path.isdir(root):
        raise FileNotFoundError(f"Source directory not found: {root}")

    modules = {}
    for dirpath, dirnames, filenames in os.walk(root):
        dirnames.sort()
        rel_dir = os.path.relpath(dirpath, root).replace(os.sep, '/')
        for filename in sorted(filenames):
            stem, ext = os.path.splitext(filename)
            if ext not in extensions:
                continue
            specifier = stem if rel_dir == '.' else f"{rel_dir}/{stem}"
            relative_file = filename if rel_dir == '.' else f"{rel_dir}/{filename}"
            modules[specifier] = SourceFile(os.path.join(dirpath, filename), relative_file)
            if stem == 'index' and rel_dir != '.':
                modules.setdefault(rel_dir, specifier)
    return modules
