from dataclasses import dataclass


@dataclass(frozen=True)
class RunResult:
    puzzle: str
    value: int
    elapsed: float
