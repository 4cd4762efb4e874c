"""Decoding and encoding of GCP provider objects carried as raw JSON or YAML."""

from __future__ import annotations

import json
from typing import Any, Mapping

import yaml

from gcpprovider.gcpapi.codec import API_VERSION, CodecError, from_dict, to_dict
from gcpprovider.gcpapi.types import (
    KNOWN_TYPES,
    CloudProfileConfig,
    InfrastructureConfig,
    InfrastructureStatus,
)

_KINDS: dict[str, type] = {cls.__name__: cls for cls in KNOWN_TYPES}


class DecodeError(ValueError):
    """Raised when raw data cannot be decoded into a provider object."""


class _StrictLoader(yaml.SafeLoader):
    """A YAML loader that rejects duplicate keys in a mapping."""


def _construct_unique_mapping(loader: yaml.SafeLoader, node: yaml.MappingNode, deep: bool = False) -> dict:
    loader.flatten_mapping(node)
    seen: set[Any] = set()
    for key_node, _ in node.value:
        key = loader.construct_object(key_node, deep=deep)
        try:
            duplicated = key in seen
        except TypeError:
            continue
        if duplicated:
            raise yaml.constructor.ConstructorError(
                None, None, f"duplicate field {key!r}", key_node.start_mark
            )
        seen.add(key)
    return loader.construct_mapping(node, deep=deep)


_StrictLoader.add_constructor(
    yaml.resolver.BaseResolver.DEFAULT_MAPPING_TAG, _construct_unique_mapping
)


def _load(data: bytes | str | Mapping[str, Any], strict: bool) -> Mapping[str, Any]:
    if isinstance(data, Mapping):
        return data
    if not data:
        raise DecodeError("no data to decode")
    loader = _StrictLoader if strict else yaml.SafeLoader
    try:
        document = yaml.load(data, Loader=loader)
    except yaml.YAMLError as exc:
        raise DecodeError(str(exc)) from exc
    if not isinstance(document, Mapping):
        raise DecodeError("expected an object")
    return document


def decode(data: bytes | str | Mapping[str, Any], strict: bool = True) -> Any:
    """Decode a versioned provider object from JSON or YAML.

    The type is chosen by the object's ``apiVersion`` and ``kind``. In strict
    mode unknown and duplicate fields are rejected.
    """
    document = _load(data, strict)
    kind = document.get("kind")
    if not kind:
        raise DecodeError("Object 'Kind' is missing")
    api_version = document.get("apiVersion")
    if not api_version:
        raise DecodeError("Object 'apiVersion' is missing")
    cls = _KINDS.get(kind) if isinstance(kind, str) else None
    if api_version != API_VERSION or cls is None:
        raise DecodeError(f'no kind "{kind}" is registered for version "{api_version}"')
    try:
        return from_dict(cls, document, strict)
    except CodecError as exc:
        raise DecodeError(str(exc)) from exc


def encode(obj: Any) -> bytes:
    """Encode a provider object as versioned JSON."""
    if type(obj) not in KNOWN_TYPES:
        raise TypeError(f"cannot encode object of type {type(obj).__name__}")
    document = {"apiVersion": API_VERSION, "kind": type(obj).__name__, **to_dict(obj)}
    return json.dumps(document).encode()


def _decode_into(data: bytes | str | Mapping[str, Any], cls: type, strict: bool) -> Any:
    obj = decode(data, strict)
    if not isinstance(obj, cls):
        raise DecodeError(f"expected {cls.__name__}, got {type(obj).__name__}")
    return obj


def infrastructure_config_from_infrastructure(
    provider_config: bytes | str | Mapping[str, Any] | None,
) -> InfrastructureConfig:
    """Decode the InfrastructureConfig from an Infrastructure's provider config."""
    if provider_config is None:
        raise DecodeError("provider config is not set on the infrastructure resource")
    return _decode_into(provider_config, InfrastructureConfig, strict=True)


def infrastructure_status_from_raw(
    raw: bytes | str | Mapping[str, Any] | None,
) -> InfrastructureStatus:
    """Decode the InfrastructureStatus from an Infrastructure's provider status."""
    if raw is None:
        raise DecodeError("provider status is not set on the infrastructure resource")
    return _decode_into(raw, InfrastructureStatus, strict=False)


def cloud_profile_config_from_cluster(
    provider_config: bytes | str | Mapping[str, Any] | None,
    cloud_profile_name: str,
) -> CloudProfileConfig | None:
    """Decode the provider config of a cluster's cloud profile, if it has one."""
    if provider_config is None:
        return None
    try:
        return _decode_into(provider_config, CloudProfileConfig, strict=True)
    except DecodeError as exc:
        raise DecodeError(
            f"could not decode providerConfig of cloudProfile for '{cloud_profile_name}': {exc}"
        ) from exc