"""Domain enumerations for the CRM.

Enums represent fixed sets of domain values (entity types, permission scopes).
"""

from enum import Enum


class EntityType(str, Enum):
    """CRM record types that can be searched or merged into templates."""

    COMPANY = "Company"
    CONTACT = "Contact"
    DEAL = "Deal"
    LEAD = "Lead"
    PRODUCT = "Product"
    ACTIVITY = "Activity"
    QUOTE = "Quote"
    REQUEST = "Request"


class PermissionScope(str, Enum):
    """How much of an entity type a user may see.

    NONE hides the type entirely; OWN limits to records the user owns;
    TEAM to records owned by anyone sharing a team with the user; ALL is
    unrestricted.
    """

    NONE = "none"
    OWN = "own"
    TEAM = "team"
    ALL = "all"

    @classmethod
    def values(cls) -> list[str]:
        """Return all valid scope values as strings.

        Returns:
            List of enum value strings (e.g. for settings validation).
        """
        return [scope.value for scope in cls]
