"""Template AST nodes.

Immutable, frozen dataclasses describing a parsed template. Every node
carries ``lineno`` and ``col_offset`` for diagnostics.

Node Categories:
- **Structure**: Template, Import, FromImport
- **Macros**: Def, DefParam, CallBlock
- **Control flow**: If, For, AsyncFor, Match
- **Bindings**: Set, Let, Export, Capture
- **Output**: Output, Data
- **Expressions**: Name, Const, Getattr, FuncCall, Filter, Test, Lambda, ...
"""

from __future__ import annotations

from macrolint.nodes.base import Node
from macrolint.nodes.control_flow import AsyncFor, For, If, Match
from macrolint.nodes.expressions import (
    BinOp,
    Const,
    Expr,
    Filter,
    FuncCall,
    Getattr,
    Lambda,
    List,
    Name,
    Test,
    Tuple,
)
from macrolint.nodes.functions import CallBlock, Def, DefParam
from macrolint.nodes.output import Data, Output
from macrolint.nodes.structure import FromImport, Import, Template
from macrolint.nodes.variables import Capture, Export, Let, Set

__all__ = [
    "AsyncFor",
    "BinOp",
    "CallBlock",
    "Capture",
    "Const",
    "Data",
    "Def",
    "DefParam",
    "Export",
    "Expr",
    "Filter",
    "For",
    "FromImport",
    "FuncCall",
    "Getattr",
    "If",
    "Import",
    "Lambda",
    "Let",
    "List",
    "Match",
    "Name",
    "Node",
    "Output",
    "Set",
    "Template",
    "Test",
    "Tuple",
]
