# gcpprovider

Provider-specific API objects, their encoding, lookup helpers, controller
configuration loading and service-account secret validation for clusters
that run on Google Cloud Platform.

## What is in the package

- `gcpprovider.gcpapi.types`: dataclasses for the provider objects:
  `CloudProfileConfig`, `ControlPlaneConfig`, `InfrastructureConfig`,
  `InfrastructureStatus`, `WorkerConfig` and `WorkerStatus`, and the parts
  they are made of (`NetworkConfig`, `VPC`, `CloudRouter`, `CloudNAT`,
  `FlowLogs`, `Subnet`, `SubnetPurpose`, `ServiceAccount`, `MachineImage`
  and others).
- `gcpprovider.gcpapi.codec`: `to_dict` and `from_dict` convert those objects
  to and from their versioned JSON form (camelCase keys, empty optional fields
  left out). `from_dict(cls, data, strict=True)` rejects unknown fields;
  type mismatches raise `CodecError`.
- `gcpprovider.gcpapi.scheme`: `decode` reads a JSON or YAML document (bytes,
  text or an already parsed mapping) and picks the type from its `apiVersion`
  (`gcp.provider.extensions.gardener.cloud/v1alpha1`) and `kind`; in strict
  mode, the default, unknown and duplicate fields are rejected. `encode`
  writes an object back as JSON bytes. `infrastructure_config_from_infrastructure`
  (strict), `infrastructure_status_from_raw` (lenient) and
  `cloud_profile_config_from_cluster` (returns `None` when no provider config
  is given) decode the specific objects. Failures raise `DecodeError`.
- `gcpprovider.gcpapi.helper`: `find_subnet_by_purpose`, `find_machine_image`
  and `find_image_from_cloud_profile`, each raising `NotFoundError` when
  nothing matches.
- `gcpprovider.config.types`: `ControllerConfiguration` with its `ETCD`,
  `ETCDStorage` and `ETCDBackup` settings, plus `from_dict` and `to_dict`.
- `gcpprovider.config.loader`: `load` and `load_from_file` parse the
  controller configuration from YAML or JSON (empty data gives an empty
  configuration); `ConfigOptions` adds a `--config-file` option to an
  `argparse` parser and `Config` hands out copies of the loaded settings.
- `gcpprovider.validation.secret`: `validate_cloud_provider_secret` checks
  that secret data holds a `serviceaccount.json` entry whose `project_id`
  is a valid GCP project ID, and returns that ID.
- `gcpprovider.core`: plain dataclasses for shoot and cloud profile data
  (`Networking`, `Worker`, `Volume`, `DataVolume`, `MachineImage`, ...) with
  `find_worker_by_name` and `to_expirable_versions`.

## Installing

```
pip install .
```

Run the test suite with:

```
pip install ".[test]"
pytest
```

## Examples

Decoding a provider object and looking up a subnet:

```python
from gcpprovider.gcpapi.helper import find_subnet_by_purpose
from gcpprovider.gcpapi.scheme import infrastructure_status_from_raw
from gcpprovider.gcpapi.types import SubnetPurpose

raw = b"""
apiVersion: gcp.provider.extensions.gardener.cloud/v1alpha1
kind: InfrastructureStatus
networks:
  vpc:
    name: my-vpc
  subnets:
  - name: my-nodes
    purpose: nodes
serviceAccountEmail: robot@example.com
"""
status = infrastructure_status_from_raw(raw)
print(find_subnet_by_purpose(status.networks.subnets, SubnetPurpose.NODES).name)
```

Loading the controller configuration:

```python
from gcpprovider.config.loader import load

cfg = load(b"""
apiVersion: gcp.provider.extensions.config.gardener.cloud/v1alpha1
kind: ControllerConfiguration
etcd:
  storage:
    className: fast
    capacity: 25Gi
  backup:
    schedule: "0 */24 * * *"
""")
print(cfg.etcd.storage.class_name, cfg.etcd.backup.schedule)
```

`load` and `load_from_file` raise `ConfigError` when the document cannot be
decoded; `load_from_file` lets the usual `OSError` through when the file
cannot be read.

With `argparse`:

```python
import argparse
from gcpprovider.config.loader import ConfigOptions

options = ConfigOptions()
parser = argparse.ArgumentParser()
options.add_arguments(parser)
parser.parse_args(["--config-file", "componentconfig.yaml"])
options.complete()
storage = options.completed().etcd_storage()
```

Checking a secret:

```python
from gcpprovider.validation.secret import validate_cloud_provider_secret

project = validate_cloud_provider_secret(
    {"serviceaccount.json": b'{"project_id": "my-project"}'}
)
```

## What the package does not do

- It does not check the contents of infrastructure, control plane, worker or
  cloud profile configurations (CIDR ranges, zones, feature gates, volumes,
  service-account scopes). Those objects are only decoded and type-checked;
  the only validation offered is that of the service-account secret.
- It runs no controllers or webhooks, talks to no cluster and makes no calls
  to Google Cloud, and it installs no command-line program.