"""Schemas of the responses from the management service."""

import dataclasses
from typing import ClassVar

from marshmallow import EXCLUDE, Schema
from marshmallow_dataclass import dataclass

from catalog_service_cli.internal import entities


def _key(name: str) -> dict[str, str]:
    """Metadata mapping a field to its key in the response body."""
    return {"data_key": name}


@dataclass
class ServiceAttrModel:
    """Schema of the attributes of a service."""

    class Meta:
        unknown = EXCLUDE

    service_uuid: str = dataclasses.field(metadata=_key("ServiceUUID"))
    service_status: str = dataclasses.field(metadata=_key("ServiceStatus"))
    replicas: int = dataclasses.field(metadata=_key("Replicas"))
    cluster_name: str = dataclasses.field(metadata=_key("ClusterName"))
    service_name: str = dataclasses.field(metadata=_key("ServiceName"))
    domain_name: str = dataclasses.field(default="", metadata=_key("DomainName"))
    last_modified: int = dataclasses.field(default=0, metadata=_key("LastModified"))

    Schema: ClassVar[type[Schema]] = Schema  # To prevent confusing type checkers

    def to_entity(self) -> entities.ServiceAttributes:
        """Map the schema to the domain entity."""
        return entities.ServiceAttributes(
            service_uuid=self.service_uuid,
            service_name=self.service_name,
            cluster=self.cluster_name,
            status=self.service_status,
            replicas=self.replicas,
            domain_name=self.domain_name,
            last_modified=self.last_modified,
        )


@dataclass
class MemberConfigModel:
    """Schema of a reference to the config file of a member."""

    class Meta:
        unknown = EXCLUDE

    file_name: str = dataclasses.field(metadata=_key("FileName"))
    file_id: str = dataclasses.field(metadata=_key("FileID"))
    file_md5: str = dataclasses.field(default="", metadata=_key("FileMD5"))

    Schema: ClassVar[type[Schema]] = Schema  # To prevent confusing type checkers


@dataclass
class ServiceMemberModel:
    """Schema of a member of a service."""

    class Meta:
        unknown = EXCLUDE

    service_uuid: str = dataclasses.field(metadata=_key("ServiceUUID"))
    member_name: str = dataclasses.field(metadata=_key("MemberName"))
    volume_id: str = dataclasses.field(metadata=_key("VolumeID"))
    available_zone: str = dataclasses.field(default="", metadata=_key("AvailableZone"))
    configs: list[MemberConfigModel] | None = dataclasses.field(
        default=None, metadata=_key("Configs"),
    )

    Schema: ClassVar[type[Schema]] = Schema  # To prevent confusing type checkers

    def to_entity(self) -> entities.ServiceMember:
        """Map the schema to the domain entity."""
        return entities.ServiceMember(
            service_uuid=self.service_uuid,
            member_name=self.member_name,
            volume_id=self.volume_id,
            availability_zone=self.available_zone,
            configs=tuple(
                entities.MemberConfig(file_name=c.file_name, file_id=c.file_id, file_md5=c.file_md5)
                for c in self.configs or []
            ),
        )


@dataclass
class ConfigFileModel:
    """Schema of a config file."""

    class Meta:
        unknown = EXCLUDE

    service_uuid: str = dataclasses.field(metadata=_key("ServiceUUID"))
    file_id: str = dataclasses.field(metadata=_key("FileID"))
    file_name: str = dataclasses.field(metadata=_key("FileName"))
    content: str = dataclasses.field(metadata=_key("Content"))
    file_md5: str = dataclasses.field(default="", metadata=_key("FileMD5"))

    Schema: ClassVar[type[Schema]] = Schema  # To prevent confusing type checkers

    def to_entity(self) -> entities.ConfigFile:
        """Map the schema to the domain entity."""
        return entities.ConfigFile(
            service_uuid=self.service_uuid,
            file_id=self.file_id,
            file_name=self.file_name,
            content=self.content,
            file_md5=self.file_md5,
        )


@dataclass
class CheckServiceInitResponse:
    """Schema of the response to an initialization check."""

    class Meta:
        unknown = EXCLUDE

    initialized: bool = dataclasses.field(metadata=_key("Initialized"))
    status_message: str = dataclasses.field(default="", metadata=_key("StatusMessage"))

    Schema: ClassVar[type[Schema]] = Schema  # To prevent confusing type checkers


@dataclass
class ListServiceResponse:
    """Schema of the response to listing services."""

    class Meta:
        unknown = EXCLUDE

    services: list[ServiceAttrModel] | None = dataclasses.field(
        default=None, metadata=_key("Services"),
    )

    Schema: ClassVar[type[Schema]] = Schema  # To prevent confusing type checkers


@dataclass
class GetServiceAttributesResponse:
    """Schema of the response to getting a service."""

    class Meta:
        unknown = EXCLUDE

    service: ServiceAttrModel = dataclasses.field(metadata=_key("Service"))

    Schema: ClassVar[type[Schema]] = Schema  # To prevent confusing type checkers


@dataclass
class ListServiceMemberResponse:
    """Schema of the response to listing the members of a service."""

    class Meta:
        unknown = EXCLUDE

    members: list[ServiceMemberModel] | None = dataclasses.field(
        default=None, metadata=_key("ServiceMembers"),
    )

    Schema: ClassVar[type[Schema]] = Schema  # To prevent confusing type checkers


@dataclass
class GetConfigFileResponse:
    """Schema of the response to getting a config file."""

    class Meta:
        unknown = EXCLUDE

    config: ConfigFileModel = dataclasses.field(metadata=_key("Config"))

    Schema: ClassVar[type[Schema]] = Schema  # To prevent confusing type checkers
