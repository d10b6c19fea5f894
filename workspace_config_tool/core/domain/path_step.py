# workspace_config_tool/core/domain/path_step.py

"""Steps of a parsed path expression"""

# Standard library imports
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class KeyStep:
    """Selects an entry of a mapping by key"""

    key: str

    def __str__(self) -> str:
        return self.key


@dataclass(frozen=True, slots=True)
class IndexStep:
    """Selects an entry of a sequence by position"""

    index: int

    def __post_init__(self) -> None:
        if self.index < 0:
            raise ValueError(f"Index must be non-negative, got {self.index}")

    def __str__(self) -> str:
        return f"[{self.index}]"


type PathStep = KeyStep | IndexStep

# Ordered route from the document root; empty means the root itself
type JSONPath = list[PathStep]

__all__ = ["IndexStep", "JSONPath", "KeyStep", "PathStep"]
