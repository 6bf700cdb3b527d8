"""
Error types raised while loading and resolving style-sheet modules.

Every failure is fatal: the first error aborts the whole load and no partial
tree is returned.
"""


class StyleModuleError(Exception):
    """Base error for module resolution, carrying an optional source position."""
    def __init__(self, message, position=None):
        self.message = message
        self.position = position  # sheetcore.nodes.Position or None
        super().__init__(self._format_error())

    def _format_error(self):
        """Append '<source>:<line>:<column>' when the position is known."""
        if self.position is None:
            return self.message
        return f"{self.message} at {self.position}"


class StyleSyntaxError(StyleModuleError):
    """The source text of a module could not be parsed."""


class ModuleNotFound(StyleModuleError):
    """A specifier is not in the module table, even under '<parent>/deps/'."""
    def __init__(self, path, position=None):
        self.path = path
        super().__init__(f"could not find module '{path}'", position)


class RequireNotFound(StyleModuleError):
    """A content or variable reference names an alias that was never required."""
    def __init__(self, alias, position=None):
        self.alias = alias
        super().__init__(f"'${alias}' has not been required", position)


class ExportNotFound(StyleModuleError):
    """A required module does not export the referenced name."""
    def __init__(self, alias, name, position=None):
        self.alias = alias
        self.name = name
        super().__init__(f"'${alias}/{name}' has not been exported", position)


class VariableNotFound(StyleModuleError):
    """A local variable is undeclared or empty."""
    def __init__(self, name, position=None, exporting=False):
        self.name = name
        if exporting:
            message = f"cannot export undefined variable '${name}'"
        else:
            message = f"could not resolve variable '${name}'"
        super().__init__(message, position)


class CircularRequire(StyleModuleError):
    """A module requires itself, directly or through other modules."""
    def __init__(self, chain, position=None):
        self.chain = list(chain)
        super().__init__(f"circular require: {' -> '.join(self.chain)}", position)


class ConfigError(StyleModuleError):
    """sheetmods.json is not valid JSON or has invalid settings."""
