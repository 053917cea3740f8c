from __future__ import annotations

from dataclasses import dataclass
from typing import Annotated, Generic, Literal, Optional, TypeVar, Union

from pydantic import AnyUrl, BaseModel, ConfigDict, Field, field_validator

ConfigT = TypeVar("ConfigT")


class ManualProvisioning(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid", coerce_numbers_to_str=True)

    source: Literal["manual"] = "manual"
    device_connection_string: str


class DpsProvisioning(BaseModel):
    """
    Provisioning through the device provisioning service.

    The registration id is resolved elsewhere, only the service endpoint and scope live here.
    """

    model_config = ConfigDict(frozen=True, extra="forbid", coerce_numbers_to_str=True)

    source: Literal["dps"] = "dps"
    global_endpoint: str
    scope_id: str


Provisioning = Annotated[Union[ManualProvisioning, DpsProvisioning], Field(discriminator="source")]


class ModuleSpec(BaseModel, Generic[ConfigT]):
    """
    The first workload the daemon launches.

    Left mutable so the daemon can patch resolved identifiers in before starting it.
    """

    model_config = ConfigDict(extra="ignore", validate_assignment=True, coerce_numbers_to_str=True)

    name: str
    type: str
    env: dict[str, str]
    config: ConfigT

    @field_validator("name", "type")
    @classmethod
    def _not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("must not be empty")
        return value


class Settings(BaseModel, Generic[ConfigT]):
    """
    Effective daemon settings after merging the optional config file over the defaults.

    Only `runtime` may change after loading (through the ModuleSpec it returns). Because that
    part stays mutable, instances are not hashable. Unknown keys in the document are ignored.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    provisioning: Provisioning
    runtime: ModuleSpec[ConfigT]
    hostname: str
    workload_uri: AnyUrl
    management_uri: AnyUrl
    docker_uri: AnyUrl


@dataclass(frozen=True, slots=True)
class ConfigLoadRequest:
    """
    Inputs for a configuration loader.

    Without a `path` the result is the embedded defaults, otherwise the file merged over them.
    """

    path: Optional[str] = None
