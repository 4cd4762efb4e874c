"""Loading of the controller configuration and the command line options for it."""

from __future__ import annotations

import argparse
import copy
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

import yaml

from gcpprovider.config.types import (
    ETCDBackup,
    ETCDStorage,
    GROUP_NAME,
    KIND,
    VERSION,
    ControllerConfiguration,
)

_DEFAULT_KIND = "Config"


class ConfigError(ValueError):
    """Raised when the controller configuration cannot be loaded."""


def _group_version(api_version: Any) -> tuple[str, str]:
    if not api_version:
        return GROUP_NAME, VERSION
    if not isinstance(api_version, str):
        raise ConfigError("apiVersion: expected a string")
    group, sep, version = api_version.rpartition("/")
    if not sep:
        return GROUP_NAME, version
    return group or GROUP_NAME, version or VERSION


def load(data: bytes | str) -> ControllerConfiguration:
    """Parse a controller configuration from YAML or JSON.

    Empty data yields an empty configuration.
    """
    if not data:
        return ControllerConfiguration()
    try:
        document = yaml.safe_load(data)
    except yaml.YAMLError as exc:
        raise ConfigError(str(exc)) from exc
    if not isinstance(document, dict):
        raise ConfigError("expected an object")

    kind = document.get("kind") or _DEFAULT_KIND
    group, version = _group_version(document.get("apiVersion"))
    if group != GROUP_NAME or version != VERSION or kind != KIND:
        raise ConfigError(f'no kind "{kind}" is registered for version "{group}/{version}"')
    try:
        return ControllerConfiguration.from_dict(document)
    except ValueError as exc:
        raise ConfigError(str(exc)) from exc


def load_from_file(filename: str | Path) -> ControllerConfiguration:
    """Read and parse a controller configuration file."""
    return load(Path(filename).read_bytes())


@dataclass
class Config:
    """A completed controller configuration."""

    config: ControllerConfiguration

    def options(self) -> ControllerConfiguration:
        """Return a copy of the controller configuration."""
        return copy.deepcopy(self.config)

    def etcd_storage(self) -> ETCDStorage:
        """Return a copy of the etcd storage configuration."""
        return copy.deepcopy(self.config.etcd.storage)

    def etcd_backup(self) -> ETCDBackup:
        """Return a copy of the etcd backup configuration."""
        return copy.deepcopy(self.config.etcd.backup)

    def health_check_config(self, default: Any = None) -> Any:
        """Return the health check configuration, or ``default`` if none is set."""
        if self.config.health_check_config is None:
            return default
        return copy.deepcopy(self.config.health_check_config)


@dataclass
class ConfigOptions:
    """Command line options that lead to a controller configuration."""

    config_file_path: str = ""
    _config: Config | None = field(default=None, repr=False, compare=False)

    def complete(self) -> None:
        """Load the configuration from the configured file."""
        if not self.config_file_path:
            raise ConfigError("config file path not set")
        self._config = Config(load_from_file(self.config_file_path))

    def completed(self) -> Config:
        """Return the completed configuration; ``complete`` must have succeeded."""
        if self._config is None:
            raise ConfigError("configuration has not been completed")
        return self._config

    def add_arguments(self, parser: argparse.ArgumentParser) -> None:
        """Register the ``--config-file`` option, bound to these options."""
        options = self

        class _StoreConfigFile(argparse.Action):
            def __call__(self, parser, namespace, values, option_string=None):
                setattr(namespace, self.dest, values)
                options.config_file_path = values

        parser.add_argument(
            "--config-file",
            dest="config_file_path",
            default=self.config_file_path,
            action=_StoreConfigFile,
            help="path to the controller manager configuration file",
        )