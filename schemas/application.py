from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ApplicationSubmit(BaseModel):
    """
    Application intake body. Only the applicant identity is required; every other
    field (amount, purpose, documents, ...) is kept in model_extra and stored opaquely.
    """
    applicant_email: str = Field(..., alias="applicantEmail", min_length=1)

    model_config = {"populate_by_name": True, "extra": "allow"}

    @property
    def payload(self) -> dict[str, Any]:
        return dict(self.model_extra or {})
