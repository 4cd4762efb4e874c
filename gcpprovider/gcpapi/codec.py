"""Conversion of GCP provider types to and from their versioned JSON form."""

from __future__ import annotations

import dataclasses
import enum
from dataclasses import dataclass
from typing import Any, Mapping

from gcpprovider.gcpapi.types import (
    GROUP_NAME,
    KNOWN_TYPES,
    VPC,
    CloudControllerManagerConfig,
    CloudNAT,
    CloudProfileConfig,
    CloudRouter,
    ControlPlaneConfig,
    FlowLogs,
    InfrastructureConfig,
    InfrastructureStatus,
    MachineImage,
    MachineImages,
    MachineImageVersion,
    NatIP,
    NatIPName,
    NetworkConfig,
    NetworkStatus,
    ServiceAccount,
    Subnet,
    SubnetPurpose,
    Volume,
    WorkerConfig,
    WorkerStatus,
)

VERSION = "v1alpha1"
API_VERSION = f"{GROUP_NAME}/{VERSION}"

_TYPE_META_KEYS = frozenset({"apiVersion", "kind"})
_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1


class CodecError(ValueError):
    """Raised when data cannot be converted to or from a provider type."""


class _Omit(enum.Enum):
    NEVER = "never"
    IF_NONE = "if_none"
    IF_EMPTY = "if_empty"


class _Scalar(enum.Enum):
    STRING = "string"
    INT32 = "int32"
    FLOAT = "float"
    BOOL_MAP = "bool_map"
    PURPOSE = "purpose"


@dataclass(frozen=True)
class _ListOf:
    item: Any


@dataclass(frozen=True)
class _Field:
    attr: str
    key: str
    kind: Any
    omit: _Omit = _Omit.NEVER


_S = _Scalar
_O = _Omit

_FIELDS: dict[type, tuple[_Field, ...]] = {
    MachineImageVersion: (
        _Field("version", "version", _S.STRING),
        _Field("image", "image", _S.STRING),
    ),
    MachineImages: (
        _Field("name", "name", _S.STRING),
        _Field("versions", "versions", _ListOf(MachineImageVersion)),
    ),
    CloudProfileConfig: (
        _Field("machine_images", "machineImages", _ListOf(MachineImages)),
    ),
    CloudControllerManagerConfig: (
        _Field("feature_gates", "featureGates", _S.BOOL_MAP, _O.IF_EMPTY),
    ),
    ControlPlaneConfig: (
        _Field("zone", "zone", _S.STRING),
        _Field("cloud_controller_manager", "cloudControllerManager", CloudControllerManagerConfig, _O.IF_NONE),
    ),
    Subnet: (
        _Field("name", "name", _S.STRING),
        _Field("purpose", "purpose", _S.PURPOSE),
    ),
    CloudRouter: (
        _Field("name", "name", _S.STRING, _O.IF_EMPTY),
    ),
    VPC: (
        _Field("name", "name", _S.STRING, _O.IF_EMPTY),
        _Field("cloud_router", "cloudRouter", CloudRouter, _O.IF_NONE),
    ),
    NatIP: (
        _Field("ip", "ip", _S.STRING),
    ),
    NatIPName: (
        _Field("name", "name", _S.STRING),
    ),
    CloudNAT: (
        _Field("min_ports_per_vm", "minPortsPerVM", _S.INT32, _O.IF_NONE),
        _Field("nat_ip_names", "natIPNames", _ListOf(NatIPName), _O.IF_EMPTY),
    ),
    FlowLogs: (
        _Field("aggregation_interval", "aggregationInterval", _S.STRING, _O.IF_NONE),
        _Field("flow_sampling", "flowSampling", _S.FLOAT, _O.IF_NONE),
        _Field("metadata", "metadata", _S.STRING, _O.IF_NONE),
    ),
    NetworkConfig: (
        _Field("vpc", "vpc", VPC, _O.IF_NONE),
        _Field("cloud_nat", "cloudNAT", CloudNAT, _O.IF_NONE),
        _Field("internal", "internal", _S.STRING, _O.IF_NONE),
        _Field("worker", "worker", _S.STRING),
        _Field("workers", "workers", _S.STRING),
        _Field("flow_logs", "flowLogs", FlowLogs, _O.IF_NONE),
    ),
    InfrastructureConfig: (
        _Field("networks", "networks", NetworkConfig),
    ),
    NetworkStatus: (
        _Field("vpc", "vpc", VPC),
        _Field("subnets", "subnets", _ListOf(Subnet)),
        _Field("nat_ips", "natIPs", _ListOf(NatIP), _O.IF_EMPTY),
    ),
    InfrastructureStatus: (
        _Field("networks", "networks", NetworkStatus),
        _Field("service_account_email", "serviceAccountEmail", _S.STRING),
    ),
    Volume: (
        _Field("local_ssd_interface", "interface", _S.STRING, _O.IF_NONE),
    ),
    ServiceAccount: (
        _Field("email", "email", _S.STRING),
        _Field("scopes", "scopes", _ListOf(_S.STRING)),
    ),
    WorkerConfig: (
        _Field("volume", "volume", Volume, _O.IF_NONE),
        _Field("service_account", "serviceAccount", ServiceAccount, _O.IF_NONE),
    ),
    MachineImage: (
        _Field("name", "name", _S.STRING),
        _Field("version", "version", _S.STRING),
        _Field("image", "image", _S.STRING),
    ),
    WorkerStatus: (
        _Field("machine_images", "machineImages", _ListOf(MachineImage), _O.IF_EMPTY),
    ),
}


def _spec(cls: type) -> tuple[_Field, ...]:
    try:
        return _FIELDS[cls]
    except (KeyError, TypeError):
        raise CodecError(f"unsupported type {cls!r}") from None


def _json_type(value: Any) -> str:
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "bool"
    if isinstance(value, (int, float)):
        return "number"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (list, tuple)):
        return "array"
    if isinstance(value, Mapping):
        return "object"
    return type(value).__name__


def _join(path: str, key: str) -> str:
    return f"{path}.{key}" if path else key


# ---------------------------------------------------------------- encoding


def _encode(kind: Any, value: Any) -> Any:
    if value is None:
        return None
    if isinstance(kind, _ListOf):
        return [_encode(kind.item, item) for item in value]
    if kind is _S.BOOL_MAP:
        return {str(k): bool(v) for k, v in value.items()}
    if kind is _S.PURPOSE:
        return value.value if isinstance(value, SubnetPurpose) else value
    if kind is _S.FLOAT:
        return float(value)
    if isinstance(kind, type) and dataclasses.is_dataclass(kind):
        return to_dict(value)
    return value


def to_dict(obj: Any) -> dict[str, Any]:
    """Return the versioned JSON representation of a provider object."""
    out: dict[str, Any] = {}
    for f in _spec(type(obj)):
        value = getattr(obj, f.attr)
        if f.omit is _O.IF_NONE and value is None:
            continue
        if f.omit is _O.IF_EMPTY and not value:
            continue
        encoded = _encode(f.kind, value)
        if encoded is None and isinstance(f.kind, _ListOf):
            encoded = []
        out[f.key] = encoded
    return out


# ---------------------------------------------------------------- decoding


def _zero(kind: Any) -> Any:
    if isinstance(kind, _ListOf):
        return []
    if kind is _S.BOOL_MAP:
        return {}
    if kind in (_S.STRING, _S.PURPOSE):
        return ""
    if kind is _S.INT32:
        return 0
    if kind is _S.FLOAT:
        return 0.0
    return kind()


def _type_error(path: str, expected: str, value: Any) -> CodecError:
    return CodecError(f"{path or '<root>'}: expected {expected}, got {_json_type(value)}")


def _decode(kind: Any, value: Any, path: str, strict: bool) -> Any:
    if value is None:
        return None
    if isinstance(kind, _ListOf):
        if not isinstance(value, (list, tuple)):
            raise _type_error(path, "array", value)
        result = []
        for i, item in enumerate(value):
            decoded = _decode(kind.item, item, f"{path}[{i}]", strict)
            result.append(_zero(kind.item) if decoded is None else decoded)
        return result
    if kind is _S.BOOL_MAP:
        if not isinstance(value, Mapping):
            raise _type_error(path, "object", value)
        gates = {}
        for key, flag in value.items():
            if flag is None:
                flag = False
            elif not isinstance(flag, bool):
                raise _type_error(_join(path, str(key)), "bool", flag)
            gates[str(key)] = flag
        return gates
    if kind is _S.STRING:
        if not isinstance(value, str):
            raise _type_error(path, "string", value)
        return value
    if kind is _S.PURPOSE:
        if not isinstance(value, str):
            raise _type_error(path, "string", value)
        try:
            return SubnetPurpose(value)
        except ValueError:
            return value
    if kind is _S.INT32:
        if isinstance(value, bool) or not isinstance(value, int):
            raise _type_error(path, "integer", value)
        if not _INT32_MIN <= value <= _INT32_MAX:
            raise CodecError(f"{path}: number {value} overflows int32")
        return value
    if kind is _S.FLOAT:
        if isinstance(value, bool) or not isinstance(value, (int, float)):
            raise _type_error(path, "number", value)
        return float(value)
    return _decode_struct(kind, value, path, strict)


def _decode_struct(cls: type, data: Any, path: str, strict: bool) -> Any:
    spec = _spec(cls)
    if not isinstance(data, Mapping):
        raise _type_error(path, "object", data)
    by_key = {f.key: f for f in spec}
    kwargs: dict[str, Any] = {}
    for key, value in data.items():
        f = by_key.get(key)
        if f is None:
            if key in _TYPE_META_KEYS and cls in KNOWN_TYPES:
                if value is not None and not isinstance(value, str):
                    raise _type_error(_join(path, key), "string", value)
                continue
            if strict:
                raise CodecError(f'unknown field "{_join(path, str(key))}"')
            continue
        decoded = _decode(f.kind, value, _join(path, key), strict)
        if decoded is not None:
            kwargs[f.attr] = decoded
    return cls(**kwargs)


def from_dict(cls: type, data: Mapping[str, Any], strict: bool = False) -> Any:
    """Build a provider object of type ``cls`` from its versioned JSON form.

    In strict mode unknown fields are rejected; otherwise they are ignored.
    """
    return _decode_struct(cls, data, "", strict)