"""
RBI generator: a small namespace/class/method builder that renders Sorbet RBI text.

Used by RbiDeclarationEmitter. Names are validated at creation time so a bad
declaration fails before anything is written.
"""

import re
from dataclasses import dataclass, field
from typing import Optional, Sequence

from aasm_rbi.domain.constants import RBI_INDENT
from aasm_rbi.domain.errors import InvalidDeclarationError

METHOD_NAME_RE = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*[?!=]?$")
CONSTANT_PATH_RE = re.compile(r"^(::)?[A-Z][A-Za-z0-9_]*(::[A-Z][A-Za-z0-9_]*)*$")


@dataclass(frozen=True)
class RbiParameter:
    """A method parameter. keyword_splat renders as **name."""

    name: str
    type: Optional[str] = None
    keyword_splat: bool = False

    def to_def_param(self) -> str:
        return f"**{self.name}" if self.keyword_splat else self.name

    def to_sig_param(self) -> str:
        return f"{self.name}: {self.type or 'T.untyped'}"


@dataclass(frozen=True)
class RbiMethod:
    name: str
    parameters: tuple[RbiParameter, ...] = ()
    return_type: Optional[str] = None

    def render_sig(self) -> str:
        parts: list[str] = []
        if self.parameters:
            joined = ", ".join(p.to_sig_param() for p in self.parameters)
            parts.append(f"params({joined})")
        parts.append(f"returns({self.return_type})" if self.return_type else "void")
        return "sig { " + ".".join(parts) + " }"

    def render_def(self) -> str:
        if self.parameters:
            joined = ", ".join(p.to_def_param() for p in self.parameters)
            return f"def {self.name}({joined}); end"
        return f"def {self.name}; end"

    def render(self, indent: str) -> list[str]:
        return [indent + self.render_sig(), indent + self.render_def()]


@dataclass
class RbiClass:
    """A class scope collecting methods in creation order."""

    name: str
    methods: list[RbiMethod] = field(default_factory=list)

    def create_method(
        self,
        name: str,
        parameters: Sequence[RbiParameter] = (),
        return_type: Optional[str] = None,
    ) -> RbiMethod:
        """Declare a method. Raises InvalidDeclarationError for names Ruby cannot define."""
        if not METHOD_NAME_RE.match(name):
            raise InvalidDeclarationError(
                f"'{name}' is not a valid Ruby method name (in class {self.name})"
            )
        for param in parameters:
            if not METHOD_NAME_RE.match(param.name) or param.name[-1] in "?!=":
                raise InvalidDeclarationError(
                    f"'{param.name}' is not a valid parameter name (method {name})"
                )
        method = RbiMethod(name=name, parameters=tuple(parameters), return_type=return_type)
        self.methods.append(method)
        return method

    def render(self, level: int = 0) -> list[str]:
        indent = RBI_INDENT * level
        lines = [f"{indent}class {self.name}"]
        for i, method in enumerate(self.methods):
            if i:
                lines.append("")
            lines.extend(method.render(indent + RBI_INDENT))
        lines.append(f"{indent}end")
        return lines


@dataclass
class RbiNamespace:
    """Root of an RBI file: header comments plus top-level classes."""

    header: list[str] = field(default_factory=list)
    classes: list[RbiClass] = field(default_factory=list)

    def create_class(self, name: str) -> RbiClass:
        """Open a class scope. Raises InvalidDeclarationError unless name is a constant path."""
        if not CONSTANT_PATH_RE.match(name):
            raise InvalidDeclarationError(f"'{name}' is not a valid Ruby constant path")
        rbi_class = RbiClass(name=name)
        self.classes.append(rbi_class)
        return rbi_class

    def render(self) -> str:
        lines = list(self.header)
        for rbi_class in self.classes:
            if lines:
                lines.append("")
            lines.extend(rbi_class.render())
        return "\n".join(lines) + "\n"
