"""Module specifier resolution."""
import posixpath


def resolve_path(current, target):
    """
    Resolve ``target`` against the module path ``current``.

    Specifiers that do not start with '.' name a package-root module and are
    returned unchanged. Relative ones are joined to the directory of
    ``current`` with '.' and '..' collapsed, e.g. ``resolve_path('pkg/a/index',
    '../b')`` gives ``'pkg/b'``.
    """
    if not target.startswith('.'):
        return target
    base = posixpath.dirname('/' + current)
    return posixpath.normpath(posixpath.join(base, target)).lstrip('/')


def package_of(path):
    """Top-level package segment of a module path ('pkg/a/b' -> 'pkg')."""
    return path.split('/')[0]
