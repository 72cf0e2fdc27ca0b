"""Pydantic models for profile feature."""

from datetime import UTC, datetime

from pydantic import BaseModel, ConfigDict, Field

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


class UserProfile(BaseModel):
    """
    Profile document stored alongside an account.

    Serializes to a flat JSON object with exactly three keys:
    ``{"nickname": str, "email": str, "createdAt": int}``.

    Example:
        >>> profile = UserProfile.create("neo", "neo@example.com")
        >>> UserProfile.from_json(profile.to_json()) == profile
        True
    """

    model_config = ConfigDict(populate_by_name=True)

    nickname: str = ""
    email: str = ""
    created_at: int = Field(0, alias="createdAt", ge=INT64_MIN, le=INT64_MAX)

    @classmethod
    def create(cls, nickname: str, email: str) -> "UserProfile":
        """Build a profile stamped with the current UTC time in unix seconds."""
        return cls(
            nickname=nickname,
            email=email,
            created_at=int(datetime.now(UTC).timestamp()),
        )

    def to_json(self) -> str:
        return self.model_dump_json(by_alias=True)

    @classmethod
    def from_json(cls, data: str | bytes) -> "UserProfile":
        """
        Parse a stored profile document.

        Only the JSON keys are recognised: a snake_case "created_at" key is
        ignored like any other unknown key.
        """
        return cls.model_validate_json(data, by_alias=True, by_name=False)
