"""Rule model."""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

RuleType = Literal["rule", "documentation"]


class Rule(BaseModel):
    """A single markdown guideline with its metadata.

    `parent` is a free-form group label used only to group rules in generated
    output. `content` is the markdown body below the front matter, verbatim.
    """

    model_config = ConfigDict(frozen=True)

    id: str = Field(..., min_length=1)
    parent: str | None = None
    name: str = Field(..., min_length=1)
    description: str | None = None
    type: RuleType
    content: str
