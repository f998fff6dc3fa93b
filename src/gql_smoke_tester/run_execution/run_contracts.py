"""Run execution entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from gql_smoke_tester.operation_synthesis import OperationKind


@dataclass(frozen=True)
class GenerationRequest:
    """Input contract for one generation run."""

    input_path: Path
    include_mutations: bool = False


@dataclass(frozen=True)
class GeneratedOperation:
    """One synthesized operation for a root field."""

    operation_kind: OperationKind
    field_name: str
    text: str


@dataclass(frozen=True)
class GenerationOutcome:
    """Output contract for one completed run."""

    operations: tuple[GeneratedOperation, ...]
    notices: tuple[str, ...] = ()

    @property
    def operation_texts(self) -> tuple[str, ...]:
        return tuple(operation.text for operation in self.operations)
