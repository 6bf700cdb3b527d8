"""
Style-sheet tree.

Pydantic models for the document the parser produces, the resolver rewrites
and the printer serializes. The ``type`` field tags each node kind.
"""
from typing import Annotated, List, Literal, Optional, Union

from pydantic import BaseModel, Field


class Position(BaseModel):
    """Source location of a rule or declaration."""
    source: str
    line: int
    column: int

    def __str__(self):
        return f"{self.source}:{self.line}:{self.column}"


class Comment(BaseModel):
    type: Literal["comment"] = "comment"
    comment: str
    position: Optional[Position] = None


class Declaration(BaseModel):
    type: Literal["declaration"] = "declaration"
    property: str
    value: str
    position: Optional[Position] = None


DeclarationItem = Annotated[Union[Declaration, Comment], Field(discriminator="type")]


class Rule(BaseModel):
    """A selector list with a declaration block."""
    type: Literal["rule"] = "rule"
    selectors: List[str]
    declarations: List[DeclarationItem] = []
    position: Optional[Position] = None


class Keyframe(BaseModel):
    """One frame of a keyframes rule, e.g. 'from' or '50%, 100%'."""
    type: Literal["keyframe"] = "keyframe"
    values: List[str]
    declarations: List[DeclarationItem] = []
    position: Optional[Position] = None


class Keyframes(BaseModel):
    type: Literal["keyframes"] = "keyframes"
    name: str
    vendor: str = ""
    keyframes: List[Annotated[Union[Keyframe, Comment], Field(discriminator="type")]] = []
    position: Optional[Position] = None


class GroupRule(BaseModel):
    """Conditional-group container (@media, @supports, @document, @host)."""
    type: Literal["media", "supports", "document", "host"]
    prelude: str = ""
    vendor: str = ""
    rules: List["StyleNode"] = []
    position: Optional[Position] = None


class AtBlock(BaseModel):
    """At-rule holding declarations directly (@font-face, @page)."""
    type: Literal["font-face", "page"]
    prelude: str = ""
    declarations: List[DeclarationItem] = []
    position: Optional[Position] = None


class AtStatement(BaseModel):
    """Block-less at-rule such as @import, @charset or @namespace."""
    type: Literal["statement"] = "statement"
    keyword: str
    prelude: str = ""
    position: Optional[Position] = None


StyleNode = Annotated[
    Union[Comment, Rule, Keyframes, GroupRule, AtBlock, AtStatement],
    Field(discriminator="type"),
]

GroupRule.model_rebuild()


class Stylesheet(BaseModel):
    """Top-level document of one module (or of a fully resolved load)."""
    source: str
    rules: List[StyleNode] = []
