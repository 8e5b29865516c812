"""
Typed views over decoded vault payloads.

The client returns plain dicts with the service's own keys. These models are
optional: validate a dict when attribute access and parsed dates are wanted.
Unknown keys are kept.

    page = VaultListPage.model_validate(glacier.list_vaults())
    for vault in page.vaults:
        print(vault.name, vault.size_in_bytes)
"""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class VaultDescription(BaseModel):
    """One vault as described by GET /-/vaults/{name} or listed by GET /-/vaults."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    name: str = Field(alias="VaultName")
    arn: str | None = Field(default=None, alias="VaultARN")
    creation_date: datetime | None = Field(default=None, alias="CreationDate")
    last_inventory_date: datetime | None = Field(default=None, alias="LastInventoryDate")
    number_of_archives: int = Field(default=0, alias="NumberOfArchives")
    size_in_bytes: int = Field(default=0, alias="SizeInBytes")


class VaultListPage(BaseModel):
    """One page of GET /-/vaults."""

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    vaults: list[VaultDescription] = Field(default_factory=list, alias="VaultList")
    marker: str | None = Field(default=None, alias="Marker")

    @property
    def has_more(self) -> bool:
        return self.marker is not None
