"""Member page entity."""
from pydantic import BaseModel, Field


class MemberPage(BaseModel):
    """One page of a list operation (topics or subscriptions)."""
    members: list[dict[str, str]] = Field(default_factory=list)
    next_token: str | None = None
    """Pass to the next list call to continue; None on the last page."""
    
    def __len__(self) -> int:
        return len(self.members)
