"""Tests for the project user model."""

from mcp_redmine.models.users import MembershipRole, ProjectUser
from tests.utils.factories import RedmineMembershipFactory


def test_from_membership():
    membership = RedmineMembershipFactory.create(
        7,
        roles=[{"id": 3, "name": "Developer", "inherited": True}],
        user={"login": "jdoe", "mail": "jdoe@example.com"},
    )

    user = ProjectUser.from_membership(membership)

    assert user is not None
    assert user.id == 7
    assert user.login == "jdoe"
    assert user.mail == "jdoe@example.com"
    assert user.roles == [MembershipRole(id=3, name="Developer", inherited=True)]


def test_from_group_membership():
    assert ProjectUser.from_membership(RedmineMembershipFactory.create_group()) is None


def test_from_membership_without_roles():
    user = ProjectUser.from_membership({"id": 1, "user": {"id": 9, "name": "Nine"}})

    assert user is not None
    assert user.roles == []


def test_to_simplified_dict_omits_unknown_attributes():
    user = ProjectUser(id=7, name="User 7", roles=[MembershipRole(id=3, name="Dev")])

    assert user.to_simplified_dict() == {
        "id": 7,
        "name": "User 7",
        "roles": [{"id": 3, "name": "Dev"}],
    }
