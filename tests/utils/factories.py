"""Test data factories for creating consistent Redmine payloads."""

from typing import Any


class RedmineIssueFactory:
    """Factory for creating Redmine issue test data."""

    @staticmethod
    def create(issue_id: int = 1, **overrides) -> dict[str, Any]:
        """Create a Redmine issue with default values."""
        defaults = {
            "id": issue_id,
            "project": {"id": 1, "name": "Test Project"},
            "tracker": {"id": 1, "name": "Bug"},
            "status": {"id": 1, "name": "New"},
            "priority": {"id": 2, "name": "Normal"},
            "author": {"id": 5, "name": "Test Author"},
            "subject": "Test Issue",
            "description": "Test issue description",
            "done_ratio": 0,
            "created_on": "2024-01-01T12:00:00Z",
            "updated_on": "2024-01-01T12:00:00Z",
        }
        return deep_merge(defaults, overrides)

    @staticmethod
    def create_list(count: int = 2, **envelope) -> dict[str, Any]:
        """Create an issues listing envelope."""
        issues = [RedmineIssueFactory.create(i) for i in range(1, count + 1)]
        return {
            "issues": issues,
            "total_count": count,
            "offset": 0,
            "limit": 25,
            **envelope,
        }


class RedmineMembershipFactory:
    """Factory for creating Redmine project membership test data."""

    @staticmethod
    def create(
        user_id: int = 7,
        roles: list[dict[str, Any]] | None = None,
        **overrides,
    ) -> dict[str, Any]:
        """Create a user membership."""
        defaults = {
            "id": 100 + user_id,
            "project": {"id": 1, "name": "Test Project"},
            "user": {"id": user_id, "name": f"User {user_id}"},
            "roles": roles if roles is not None else [{"id": 3, "name": "Developer"}],
        }
        return deep_merge(defaults, overrides)

    @staticmethod
    def create_group(group_id: int = 20) -> dict[str, Any]:
        """Create a group membership, which carries no user."""
        return {
            "id": 200 + group_id,
            "project": {"id": 1, "name": "Test Project"},
            "group": {"id": group_id, "name": f"Group {group_id}"},
            "roles": [{"id": 4, "name": "Reporter"}],
        }


class RedmineTimeEntryFactory:
    """Factory for creating Redmine time entry test data."""

    @staticmethod
    def create(entry_id: int = 1, **overrides) -> dict[str, Any]:
        """Create a time entry with default values."""
        defaults = {
            "id": entry_id,
            "project": {"id": 1, "name": "Test Project"},
            "issue": {"id": 1},
            "user": {"id": 5, "name": "Test User"},
            "activity": {"id": 9, "name": "Development"},
            "hours": 2.5,
            "comments": "",
            "spent_on": "2024-01-02",
        }
        return deep_merge(defaults, overrides)


def deep_merge(base: dict[str, Any], override: dict[str, Any]) -> dict[str, Any]:
    """Deep merge two dictionaries."""
    result = base.copy()
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = deep_merge(result[key], value)
        else:
            result[key] = value
    return result
