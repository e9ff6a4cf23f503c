"""Domain entities describing services as reported by the control plane.

A catalog service consists of one or more *members*: the replicas
of the database, each bound to a single durable storage volume and
to a set of configuration files held by the control plane.
"""

import dataclasses


@dataclasses.dataclass(slots=True, frozen=True)
class ServiceAttributes:
    """Metadata describing a created service."""

    service_uuid: str
    service_name: str
    cluster: str
    status: str
    replicas: int
    domain_name: str = ""
    last_modified: int = 0

    def __str__(self) -> str:
        """Return a pretty-printed string representation of the attributes."""
        return "".join(
            (
                f"{self.service_name} (uuid {self.service_uuid}) ",
                f"on cluster {self.cluster}: {self.status}, ",
                f"{self.replicas} replica(s)",
                f", domain {self.domain_name}" if self.domain_name else "",
            ),
        )


@dataclasses.dataclass(slots=True, frozen=True)
class MemberConfig:
    """Reference to a configuration file of a service member."""

    file_name: str
    file_id: str
    file_md5: str = ""

    def __str__(self) -> str:
        """Return a string representation of the reference."""
        return f"{self.file_name} (fileid {self.file_id}, md5 {self.file_md5})"


@dataclasses.dataclass(slots=True, frozen=True)
class ServiceMember:
    """One replica of a service and the volume it stores its data on."""

    service_uuid: str
    member_name: str
    volume_id: str
    availability_zone: str = ""
    configs: tuple[MemberConfig, ...] = ()

    def __str__(self) -> str:
        """Return a string representation of the member."""
        return (
            f"{self.member_name} (volume {self.volume_id}"
            f"{', zone ' + self.availability_zone if self.availability_zone else ''})"
        )


@dataclasses.dataclass(slots=True, frozen=True)
class ConfigFile:
    """A configuration file, identified by its service UUID and file ID."""

    service_uuid: str
    file_id: str
    file_name: str
    content: str
    file_md5: str = ""
