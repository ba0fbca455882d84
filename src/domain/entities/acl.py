"""Access-control permissions and policies."""

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import StrEnum
from uuid import UUID


class AclPermission(StrEnum):
    """Permissions that can be granted on a user group."""

    READ_USER_GROUPS = "read:userGroups"
    MANAGE_USER_GROUPS = "manage:userGroups"
    DELETE_USER_GROUPS = "delete:userGroups"


@dataclass(frozen=True)
class Policy:
    """Grants one permission to a set of users."""

    permission: AclPermission
    user_ids: frozenset[UUID] = field(default_factory=frozenset)


def is_permitted(
    policies: Iterable[Policy],
    permission: AclPermission | None,
    user_id: UUID | None,
) -> bool:
    """Check whether ``user_id`` holds ``permission`` under ``policies``.

    A ``None`` permission means the caller asked for no check at all.
    """
    if permission is None:
        return True
    if user_id is None:
        return False
    return any(
        policy.permission == permission and user_id in policy.user_ids
        for policy in policies
    )


def default_policies(owner_id: UUID) -> tuple[Policy, ...]:
    """Policies for a newly created user group: the creator gets everything."""
    owners = frozenset({owner_id})
    return tuple(Policy(permission=perm, user_ids=owners) for perm in AclPermission)
