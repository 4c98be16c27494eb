from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from lknic.components.nic.config import (
    DEFAULT_MINIMUM_LEGAL_AGE,
    DEFAULT_OLDEST_VALID_BIRTH_YEAR,
    NICConfig,
)


class NICRulesSection(BaseModel):
    model_config = ConfigDict(extra="forbid")

    minimum_legal_age: int = Field(DEFAULT_MINIMUM_LEGAL_AGE, ge=0)
    oldest_valid_birth_year: int = Field(DEFAULT_OLDEST_VALID_BIRTH_YEAR, ge=1)

    def to_config(self) -> NICConfig:
        return NICConfig(
            minimum_legal_age=self.minimum_legal_age,
            oldest_valid_birth_year=self.oldest_valid_birth_year,
        )


class NICRules(BaseModel):
    model_config = ConfigDict(extra="forbid")

    schema_version: Literal[1]
    nic: NICRulesSection = Field(default_factory=NICRulesSection)
