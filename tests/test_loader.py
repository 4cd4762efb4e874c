import argparse

import pytest
import yaml

from gcpprovider.config.loader import (
    Config,
    ConfigError,
    ConfigOptions,
    load,
    load_from_file,
)
from gcpprovider.config.types import (
    ETCD,
    ETCDBackup,
    ETCDStorage,
    ControllerConfiguration,
)

API_VERSION = "gcp.provider.extensions.config.gardener.cloud/v1alpha1"

SAMPLE = f"""\
apiVersion: {API_VERSION}
kind: ControllerConfiguration
clientConnection:
  acceptContentTypes: application/json
  qps: 100
etcd:
  storage:
    className: gardener.cloud-fast
    capacity: 25Gi
  backup:
    schedule: "0 */24 * * *"
healthCheckConfig:
  syncPeriod: 30s
"""


def _sample_config() -> ControllerConfiguration:
    return ControllerConfiguration(
        client_connection={"acceptContentTypes": "application/json", "qps": 100},
        etcd=ETCD(
            storage=ETCDStorage(class_name="gardener.cloud-fast", capacity="25Gi"),
            backup=ETCDBackup(schedule="0 */24 * * *"),
        ),
        health_check_config={"syncPeriod": "30s"},
    )


def test_load_empty_gives_empty_configuration():
    assert load(b"") == ControllerConfiguration()


def test_load_sample():
    assert load(SAMPLE) == _sample_config()


def test_load_bytes_equals_text():
    assert load(SAMPLE.encode()) == load(SAMPLE)


def test_load_without_api_version_uses_default_group_version():
    cfg = load("kind: ControllerConfiguration\netcd:\n  backup:\n    schedule: daily\n")
    assert cfg.etcd.backup.schedule == "daily"


def test_load_without_kind_fails():
    with pytest.raises(ConfigError, match="Config"):
        load(f"apiVersion: {API_VERSION}\n")


@pytest.mark.parametrize(
    "api_version",
    ["other.group/v1alpha1", "gcp.provider.extensions.config.gardener.cloud/v1"],
)
def test_load_wrong_version_fails(api_version):
    with pytest.raises(ConfigError):
        load(f"apiVersion: {api_version}\nkind: ControllerConfiguration\n")


@pytest.mark.parametrize("text", ["- a\n- b\n", "null\n", "etcd: [unclosed\n"])
def test_load_malformed_fails(text):
    with pytest.raises(ConfigError):
        load(text)


def test_load_bad_field_type_fails():
    with pytest.raises(ConfigError):
        load(f"apiVersion: {API_VERSION}\nkind: ControllerConfiguration\netcd:\n  backup:\n    schedule: [1]\n")


def test_round_trip_through_to_dict():
    cfg = _sample_config()
    assert load(yaml.safe_dump(cfg.to_dict())) == cfg


def test_load_from_file(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(SAMPLE)
    assert load_from_file(path) == _sample_config()


def test_load_from_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_from_file(tmp_path / "missing.yaml")


def test_complete_without_path():
    with pytest.raises(ConfigError, match="config file path not set"):
        ConfigOptions().complete()


def test_completed_before_complete():
    with pytest.raises(ConfigError):
        ConfigOptions().completed()


def test_complete_loads_file(tmp_path):
    path = tmp_path / "config.yaml"
    path.write_text(SAMPLE)
    options = ConfigOptions(config_file_path=str(path))
    options.complete()
    assert options.completed().options() == _sample_config()


def test_add_arguments_binds_option():
    options = ConfigOptions()
    parser = argparse.ArgumentParser()
    options.add_arguments(parser)
    namespace = parser.parse_args(["--config-file", "some/file.yaml"])
    assert options.config_file_path == "some/file.yaml"
    assert namespace.config_file_path == "some/file.yaml"


def test_add_arguments_default_is_empty():
    options = ConfigOptions()
    parser = argparse.ArgumentParser()
    options.add_arguments(parser)
    namespace = parser.parse_args([])
    assert namespace.config_file_path == ""
    assert options.config_file_path == ""


def test_options_returns_independent_copy():
    config = Config(_sample_config())
    copied = config.options()
    copied.etcd.backup.schedule = "changed"
    assert config.config.etcd.backup.schedule == "0 */24 * * *"


def test_etcd_storage_and_backup():
    config = Config(_sample_config())
    storage = config.etcd_storage()
    assert storage == ETCDStorage(class_name="gardener.cloud-fast", capacity="25Gi")
    storage.class_name = "other"
    assert config.config.etcd.storage.class_name == "gardener.cloud-fast"
    assert config.etcd_backup() == ETCDBackup(schedule="0 */24 * * *")


def test_health_check_config_set_and_default():
    assert Config(_sample_config()).health_check_config() == {"syncPeriod": "30s"}
    fallback = {"syncPeriod": "1m"}
    assert Config(ControllerConfiguration()).health_check_config(fallback) is fallback
    assert Config(ControllerConfiguration()).health_check_config() is None