from pydantic import BaseModel, ConfigDict

from utils.formatter_utils import ZERO_VALUE_HEX


class GovernanceAction(BaseModel):
    """One call the governance contract performs when the proposal is executed."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    target: str
    input_data: str
    # No action attaches native currency
    value: str = ZERO_VALUE_HEX
