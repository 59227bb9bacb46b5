"""Models for Redmine users derived from project memberships."""

from typing import Any

from pydantic import BaseModel, Field


class MembershipRole(BaseModel):
    """A role granted through a project membership."""

    id: int
    name: str | None = None
    inherited: bool | None = None


class ProjectUser(BaseModel):
    """A project member, projected from a Redmine membership record."""

    id: int
    name: str | None = None
    login: str | None = None
    firstname: str | None = None
    lastname: str | None = None
    mail: str | None = None
    roles: list[MembershipRole] = Field(default_factory=list)

    @classmethod
    def from_membership(cls, membership: dict[str, Any]) -> "ProjectUser | None":
        """Build a user from a membership, or None for group memberships.

        Args:
            membership: Raw membership object from ``/projects/{id}/memberships.json``

        Returns:
            ProjectUser carrying the membership's roles, or None when the
            membership has no embedded user
        """
        user = membership.get("user")
        if not user:
            return None
        return cls(
            id=user["id"],
            name=user.get("name"),
            login=user.get("login"),
            firstname=user.get("firstname"),
            lastname=user.get("lastname"),
            mail=user.get("mail"),
            roles=[MembershipRole(**role) for role in membership.get("roles", [])],
        )

    def to_simplified_dict(self) -> dict[str, Any]:
        """Convert to a JSON-ready dictionary, omitting unknown attributes."""
        return self.model_dump(exclude_none=True)
