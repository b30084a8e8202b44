from dataclasses import dataclass


@dataclass(frozen=True)
class ForecastIssue:
    message: str


@dataclass(frozen=True)
class RosterRowError(ForecastIssue):
    row_number: int
    field: str | None = None
