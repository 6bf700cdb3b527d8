"""
Variable resolution.

Replaces ``$name`` and ``$alias/name`` tokens with values from the current
module's Locals table or from the Export table of a module it required.
"""
from sheetcore.errors import ExportNotFound, RequireNotFound, VariableNotFound
from sheetcore.values import VARIABLE_PATTERN, ExportReference, reference


class VariableResolver:
    """Looks names up in the tables of one module record within a load session."""

    def __init__(self, session, record):
        self.session = session
        self.record = record

    def substitute(self, text, position=None):
        """Replace every variable token in ``text``, left to right."""
        return VARIABLE_PATTERN.sub(
            lambda match: self.resolve(reference(match.group(1)), position),
            text,
        )

    def resolve(self, ref, position=None):
        if isinstance(ref, ExportReference):
            return self.resolve_export(ref, position).render()
        return self.resolve_local(ref.name, position)

    def required(self, alias, position=None):
        """Module record bound to ``alias`` by a :require block of this module."""
        path = self.record.requires.get(alias)
        if path is None:
            raise RequireNotFound(alias, position)
        return self.session.cache[path]

    def resolve_export(self, ref, position=None):
        module = self.required(ref.alias, position)
        value = module.exports.get(ref.name)
        if value is None or not value.render():
            raise ExportNotFound(ref.alias, ref.name, position)
        return value

    def resolve_local(self, name, position=None, exporting=False):
        value = self.record.locals.get(name)
        if not value:
            raise VariableNotFound(name, position, exporting=exporting)
        return value
