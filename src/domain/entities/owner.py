"""
Polymorphic owner reference.

Goals and transactions belong either to a single user or to a vault. The
owner is a tagged union, so "no owner" and "two owners" cannot be expressed.
"""

from typing import Annotated, Literal, Union
from uuid import UUID

from pydantic import BaseModel, Field

from .enums import OwnerType


class UserOwner(BaseModel):
    kind: Literal["user"] = "user"
    id: UUID


class VaultOwner(BaseModel):
    kind: Literal["vault"] = "vault"
    id: UUID


Owner = Annotated[Union[UserOwner, VaultOwner], Field(discriminator="kind")]


def owner_from_columns(owner_type: OwnerType, owner_id: UUID) -> Union[UserOwner, VaultOwner]:
    """Rebuild the tagged owner from its (discriminant, id) storage columns"""
    if owner_type == OwnerType.vault:
        return VaultOwner(id=owner_id)
    return UserOwner(id=owner_id)


def owner_to_columns(owner: Union[UserOwner, VaultOwner]) -> tuple[OwnerType, UUID]:
    return OwnerType(owner.kind), owner.id
