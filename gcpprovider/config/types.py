"""Component configuration of the GCP provider controller."""

from __future__ import annotations

import copy
from dataclasses import dataclass, field
from typing import Any, Mapping

GROUP_NAME = "gcp.provider.extensions.config.gardener.cloud"
VERSION = "v1alpha1"
API_VERSION = f"{GROUP_NAME}/{VERSION}"
KIND = "ControllerConfiguration"

_TYPE_META_KEYS = ("apiVersion", "kind")


def _mapping(data: Any, path: str) -> Mapping[str, Any]:
    if data is None:
        return {}
    if not isinstance(data, Mapping):
        raise ValueError(f"{path or '<root>'}: expected an object")
    return data


def _optional_str(data: Mapping[str, Any], key: str, path: str) -> str | None:
    value = data.get(key)
    if value is not None and not isinstance(value, str):
        raise ValueError(f"{path}.{key}: expected a string")
    return value


def _optional_object(data: Mapping[str, Any], key: str) -> dict[str, Any] | None:
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, Mapping):
        raise ValueError(f"{key}: expected an object")
    return copy.deepcopy(dict(value))


@dataclass
class ETCDStorage:
    """Storage settings for etcd-main volume claims."""

    class_name: str | None = None
    capacity: str | None = None

    @classmethod
    def _from_dict(cls, data: Any) -> ETCDStorage:
        data = _mapping(data, "etcd.storage")
        capacity = data.get("capacity")
        if capacity is not None:
            if isinstance(capacity, bool) or not isinstance(capacity, (str, int, float)):
                raise ValueError("etcd.storage.capacity: expected a quantity")
            capacity = str(capacity)
        return cls(
            class_name=_optional_str(data, "className", "etcd.storage"),
            capacity=capacity,
        )

    def _to_dict(self) -> dict[str, Any]:
        out: dict[str, Any] = {}
        if self.class_name is not None:
            out["className"] = self.class_name
        if self.capacity is not None:
            out["capacity"] = self.capacity
        return out


@dataclass
class ETCDBackup:
    """Backup settings for etcd."""

    schedule: str | None = None

    @classmethod
    def _from_dict(cls, data: Any) -> ETCDBackup:
        data = _mapping(data, "etcd.backup")
        return cls(schedule=_optional_str(data, "schedule", "etcd.backup"))

    def _to_dict(self) -> dict[str, Any]:
        return {} if self.schedule is None else {"schedule": self.schedule}


@dataclass
class ETCD:
    """etcd settings."""

    storage: ETCDStorage = field(default_factory=ETCDStorage)
    backup: ETCDBackup = field(default_factory=ETCDBackup)

    @classmethod
    def _from_dict(cls, data: Any) -> ETCD:
        data = _mapping(data, "etcd")
        return cls(
            storage=ETCDStorage._from_dict(data.get("storage")),
            backup=ETCDBackup._from_dict(data.get("backup")),
        )

    def _to_dict(self) -> dict[str, Any]:
        return {"storage": self.storage._to_dict(), "backup": self.backup._to_dict()}


@dataclass
class ControllerConfiguration:
    """Configuration of the GCP provider controller."""

    client_connection: dict[str, Any] | None = None
    etcd: ETCD = field(default_factory=ETCD)
    health_check_config: dict[str, Any] | None = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any] | None) -> ControllerConfiguration:
        """Build a configuration from its versioned JSON form; unknown fields are ignored."""
        data = _mapping(data, "")
        for key in _TYPE_META_KEYS:
            value = data.get(key)
            if value is not None and not isinstance(value, str):
                raise ValueError(f"{key}: expected a string")
        return cls(
            client_connection=_optional_object(data, "clientConnection"),
            etcd=ETCD._from_dict(data.get("etcd")),
            health_check_config=_optional_object(data, "healthCheckConfig"),
        )

    def to_dict(self) -> dict[str, Any]:
        """Return the versioned JSON form of this configuration."""
        out: dict[str, Any] = {"apiVersion": API_VERSION, "kind": KIND}
        if self.client_connection is not None:
            out["clientConnection"] = copy.deepcopy(self.client_connection)
        out["etcd"] = self.etcd._to_dict()
        if self.health_check_config is not None:
            out["healthCheckConfig"] = copy.deepcopy(self.health_check_config)
        return out