"""Data contracts for compound interest projections."""

from enum import Enum
from typing import Any, Dict, List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, computed_field, field_validator


class Frequency(str, Enum):
    NONE = "none"
    ANNUAL = "annual"
    MONTHLY = "monthly"
    FORTNIGHTLY = "fortnightly"
    WEEKLY = "weekly"


class ProjectionInput(BaseModel):
    """Inputs required to compute a projection.

    Out-of-range values are accepted here; `project` clamps them.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", allow_inf_nan=False)

    starting_balance: float = Field(0.0, description="Lump sum present at year 0.")
    contribution_amount: float = Field(0.0, description="Deposit made every period.")
    contribution_frequency: Frequency = Frequency.MONTHLY
    annual_rate: float = Field(
        ...,
        description="Annual interest rate expressed as a decimal (e.g. 0.05 for 5%).",
    )
    horizon_years: int = Field(..., description="Number of years to project.")


class YearPoint(BaseModel):
    """State of the investment as of the end of one year."""

    model_config = ConfigDict(frozen=True)

    year_index: int = Field(..., ge=0)
    total_value: float
    total_invested: float
    total_interest: float

    @computed_field  # type: ignore[misc]
    @property
    def label(self) -> str:
        return f"Year {self.year_index}"


class ProjectionResult(BaseModel):
    """Year-by-year series plus the totals at the end of the horizon."""

    model_config = ConfigDict(frozen=True)

    horizon_years: int
    periods_per_year: int
    series: List[YearPoint]
    final_total_value: float
    final_total_invested: float
    final_total_interest: float

    def labels(self) -> List[str]:
        return [point.label for point in self.series]

    def values(self) -> List[float]:
        return [point.total_value for point in self.series]

    def invested(self) -> List[float]:
        return [point.total_invested for point in self.series]

    def interest(self) -> List[float]:
        return [point.total_interest for point in self.series]


class ResultSummary(BaseModel):
    """Currency strings shown under the form."""

    model_config = ConfigDict(frozen=True)

    total_value: str
    total_interest: str
    total_invested: str


class ProjectionForm(BaseModel):
    """Raw calculator fields as typed by the user."""

    model_config = ConfigDict(populate_by_name=True)

    starting_balance: Optional[str] = Field(None, alias="startingBalance")
    contribution_amount: Optional[str] = Field(None, alias="contributionAmount")
    contribution_frequency: Optional[str] = Field(None, alias="contributionFrequency")
    interest_rate: Optional[str] = Field(None, alias="interestRate")
    years: Optional[str] = None
    include_interest: bool = Field(False, alias="includeInterest")

    @field_validator(
        "starting_balance",
        "contribution_amount",
        "contribution_frequency",
        "interest_rate",
        "years",
        mode="before",
    )
    @classmethod
    def _coerce_numbers_to_text(cls, value: Union[str, int, float, None]) -> Any:
        # JSON clients may send numbers; the reader only deals with text
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return value


class ProjectionResponse(BaseModel):
    input: ProjectionInput
    result: ProjectionResult
    summary: ResultSummary
    chart: Dict[str, Any]
