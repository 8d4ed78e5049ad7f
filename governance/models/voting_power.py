from pydantic import BaseModel, ConfigDict


class VotingPower(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    voting_supply: float
    voting_power: float
