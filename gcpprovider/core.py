"""Shoot and cloud profile data that the GCP validations inspect."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Iterable


@dataclass
class Networking:
    """Network settings of a shoot."""

    type: str = ""
    nodes: str | None = None
    pods: str | None = None
    services: str | None = None


@dataclass
class Volume:
    """The root volume of a worker machine."""

    name: str | None = None
    type: str | None = None
    volume_size: str = ""
    encrypted: bool | None = None


@dataclass
class DataVolume:
    """An additional volume attached to a worker machine."""

    name: str = ""
    type: str | None = None
    volume_size: str = ""
    encrypted: bool | None = None


@dataclass
class WorkerKubernetes:
    """Kubernetes settings of a worker pool."""

    version: str | None = None


@dataclass
class Worker:
    """A worker pool of a shoot."""

    name: str = ""
    minimum: int = 0
    maximum: int = 0
    volume: Volume | None = None
    data_volumes: list[DataVolume] = field(default_factory=list)
    zones: list[str] = field(default_factory=list)
    kubernetes: WorkerKubernetes | None = None


@dataclass
class ExpirableVersion:
    """A version that may carry an expiration date and a classification."""

    version: str = ""
    expiration_date: datetime | None = None
    classification: str | None = None


@dataclass
class MachineImageVersion(ExpirableVersion):
    """A version of a machine image offered by a cloud profile."""

    cri: list[str] = field(default_factory=list)


@dataclass
class MachineImage:
    """A machine image offered by a cloud profile."""

    name: str = ""
    versions: list[MachineImageVersion] = field(default_factory=list)


def find_worker_by_name(workers: Iterable[Worker] | None, name: str) -> Worker | None:
    """Return the first worker with the given name, or None."""
    return next((worker for worker in workers or () if worker.name == name), None)


def to_expirable_versions(versions: Iterable[ExpirableVersion] | None) -> list[ExpirableVersion]:
    """Reduce machine image versions to their plain expirable versions."""
    return [
        ExpirableVersion(
            version=v.version,
            expiration_date=v.expiration_date,
            classification=v.classification,
        )
        for v in versions or ()
    ]