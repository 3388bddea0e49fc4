import re
from typing import Any, List, Literal, Optional
from pydantic import BaseModel, ConfigDict, Field, field_validator

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")

ActionType = Literal["devis", "creneau"]


def is_valid_email(value: Any) -> bool:
    return isinstance(value, str) and EMAIL_PATTERN.match(value) is not None


def display_text(value: Any) -> str:
    """String form of a form value the way the browser serialized it."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)


class QuoteTotals(BaseModel):
    model_config = ConfigDict(extra="ignore")

    # Any JSON value is accepted and shown through display_text
    estimate_eur_text: Any = None
    week_eur_text: Any = None
    month_eur_text: Any = None


class QuoteRequest(BaseModel):
    """
    Form submission from the simulator.

    Only ``client_email`` is checked. Every other field is coerced into
    something printable, so odd values still produce an email.
    """

    model_config = ConfigDict(extra="ignore")

    client_email: str

    subject: Optional[str] = None
    summary: Optional[str] = None
    html: Optional[str] = None
    action_type: ActionType = "devis"

    spaces: List[Any] = Field(default_factory=list)
    days_per_week: Any = None
    hours_per_day: Any = None
    postal_city: Any = None
    totals: QuoteTotals = Field(default_factory=QuoteTotals)

    @field_validator("client_email", mode="before")
    @classmethod
    def check_email_shape(cls, value):
        if not is_valid_email(value):
            raise ValueError("client_email must look like name@domain.tld")
        return value

    @field_validator("subject", "summary", mode="before")
    @classmethod
    def coerce_text(cls, value):
        if value is None or isinstance(value, str):
            return value
        # false, 0 and empty containers count as "not provided"
        if not value:
            return None
        return display_text(value)

    @field_validator("html", mode="before")
    @classmethod
    def html_only_as_text(cls, value):
        return value if isinstance(value, str) else None

    @field_validator("action_type", mode="before")
    @classmethod
    def default_action_type(cls, value):
        if isinstance(value, str) and value.strip() == "creneau":
            return "creneau"
        return "devis"

    @field_validator("spaces", mode="before")
    @classmethod
    def default_spaces(cls, value):
        if isinstance(value, (list, tuple)):
            return list(value)
        return []

    @field_validator("totals", mode="before")
    @classmethod
    def default_totals(cls, value):
        if isinstance(value, (dict, QuoteTotals)):
            return value
        return {}
