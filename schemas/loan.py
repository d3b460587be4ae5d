from typing import Any

from pydantic import RootModel


class LoanCreate(RootModel[dict[str, Any]]):
    """Loan offer terms; any JSON object is accepted."""
