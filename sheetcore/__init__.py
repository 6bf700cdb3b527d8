# sheetmods - Core Resolver Components
"""
Core modules for the style-sheet module resolver:
- errors: Error taxonomy with source positions
- grammar: Lark grammar for block-syntax style sheets
- transformer: Parse tree to node conversion
- whitespace: Indentation syntax to block syntax
- loader: Load session, module cache and placeholder hoisting
- walker: Rule classification, symbol tables and content splicing
- variables: $name and $alias/name resolution
- printer: Node tree back to text
- sources: Module table from a directory of files
"""

from .errors import (
    CircularRequire,
    ExportNotFound,
    ModuleNotFound,
    RequireNotFound,
    StyleModuleError,
    StyleSyntaxError,
    VariableNotFound,
)
from .loader import LoadSession, resolve_modules
from .printer import stringify
from .sources import collect_modules
from .transformer import parse_stylesheet

__all__ = [
    'CircularRequire',
    'ExportNotFound',
    'ModuleNotFound',
    'RequireNotFound',
    'StyleModuleError',
    'StyleSyntaxError',
    'VariableNotFound',
    'LoadSession',
    'resolve_modules',
    'stringify',
    'collect_modules',
    'parse_stylesheet',
]
