"""Session and request models shared across the client and handlers."""
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field


Color = Literal[
    "berry_red", "red", "orange", "yellow", "olive_green", "lime_green",
    "green", "mint_green", "teal", "sky_blue", "light_blue", "blue",
    "grape", "violet", "lavender", "magenta", "salmon", "charcoal", "grey", "taupe",
]

ViewStyle = Literal["list", "board"]


class AuthorizationContext(BaseModel):
    """Identity and credentials of the user behind an MCP session.

    Supplied once when the session starts and never refreshed.
    """

    model_config = ConfigDict(frozen=True)

    access_token: str = Field(repr=False)
    email: str = ""
    full_name: str = ""


class Destination(BaseModel):
    """Target location for a moved task."""

    project_id: Optional[str] = None
    section_id: Optional[str] = None
    parent_id: Optional[str] = None

    def is_empty(self) -> bool:
        return not (self.project_id or self.section_id or self.parent_id)

    def to_args(self) -> dict[str, str]:
        """Populated fields only, as item_move command arguments."""
        return {k: v for k, v in self.model_dump().items() if v}
