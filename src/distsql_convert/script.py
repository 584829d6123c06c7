"""Statement buffer that assembles the final DistSQL script."""

from __future__ import annotations
from dataclasses import dataclass, field
from typing import Iterable, List, Optional

from . import constants


@dataclass(frozen=True)
class Statement:
    """One DistSQL statement: a head followed by comma-joined items."""

    head: str
    items: List[str] = field(default_factory=list)

    def render(self) -> str:
        """Render the statement with its terminator."""
        return f"{self.head}{constants.COMMA.join(self.items)}{constants.SEMI}"


class ScriptAssembler:
    """Collects statements in call order and joins them into a script."""

    def __init__(self, line_separator: str = constants.LINE_SEPARATOR):
        self.line_separator = line_separator
        self._statements: List[Statement] = []

    def append(self, statement: Optional[Statement]) -> None:
        if statement is not None:
            self._statements.append(statement)

    def extend(self, statements: Iterable[Statement]) -> None:
        for statement in statements:
            self.append(statement)

    @property
    def statements(self) -> List[Statement]:
        return list(self._statements)

    def __len__(self) -> int:
        return len(self._statements)

    def build(self) -> str:
        """Join all statements, each followed by a line break."""
        script = "".join(statement.render() + constants.LINE_SEPARATOR for statement in self._statements)
        if self.line_separator != constants.LINE_SEPARATOR:
            script = script.replace(constants.LINE_SEPARATOR, self.line_separator)
        return script
