"""Topic permission flattening."""
from typing import Iterable, Mapping, Sequence, Union

from pydantic import ValidationError

from sns_client.domain.entities.permission import Permission
from sns_client.infra.common.errors import InvalidArgumentError

PermissionInput = Union[Mapping[Union[str, int], Union[str, Sequence[str]]], Iterable[Permission]]


def normalize_permissions(permissions: PermissionInput) -> list[Permission]:
    """
    Normalize permission input into Permission entities.
    
    Accepts either Permission instances or a mapping of account ID to a
    single action name or a list of action names.
    
    Raises:
        InvalidArgumentError: If an account ID or action is not a string
    """
    if not isinstance(permissions, Mapping):
        return list(permissions)
    try:
        return [
            Permission(account_id=account_id, actions=actions)
            for account_id, actions in permissions.items()
        ]
    except ValidationError as e:
        raise InvalidArgumentError(f"Invalid permissions: {e.error_count()} invalid value(s)") from e


def flatten_permissions(permissions: PermissionInput) -> list[tuple[str, str]]:
    """
    Expand permissions into (account_id, action) pairs.
    
    Order follows the input: accounts in iteration order, then actions in
    list order within an account.
    """
    return [
        (permission.account_id, action)
        for permission in normalize_permissions(permissions)
        for action in permission.actions
    ]


def permission_params(pairs: Sequence[tuple[str, str]]) -> dict[str, str]:
    """Render flattened pairs as 1-indexed member parameters."""
    params: dict[str, str] = {}
    for index, (account_id, action) in enumerate(pairs, start=1):
        params[f"ActionName.member.{index}"] = action
        params[f"AWSAccountID.member.{index}"] = account_id
    return params
