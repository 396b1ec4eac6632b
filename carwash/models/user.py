from pydantic import BaseModel
from typing import Optional


class SessionUser(BaseModel):
    """Identity kept in the signed session cookie."""
    id: int
    email: str
    full_name: Optional[str] = None

    @property
    def display_name(self) -> str:
        return self.full_name or self.email
