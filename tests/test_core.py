from gcpprovider.core import (
    ExpirableVersion,
    MachineImage,
    MachineImageVersion,
    Networking,
    Volume,
    Worker,
    find_worker_by_name,
    to_expirable_versions,
)


def _workers():
    return [
        Worker(name="foo", volume=Volume(type="some-type", volume_size="40Gi"), zones=["zone1"]),
        Worker(name="bar", volume=Volume(type="some-type", volume_size="40Gi"), zones=["zone1"]),
    ]


def test_find_worker_by_name_found():
    workers = _workers()
    assert find_worker_by_name(workers, "bar") is workers[1]


def test_find_worker_by_name_missing():
    assert find_worker_by_name(_workers(), "worker3") is None
    assert find_worker_by_name(None, "foo") is None


def test_find_worker_returns_first_match():
    workers = _workers() + [Worker(name="foo", zones=["zone2"])]
    assert find_worker_by_name(workers, "foo").zones == ["zone1"]


def test_to_expirable_versions():
    image = MachineImage(name="ubuntu", versions=[MachineImageVersion(version="1.2.3", cri=["containerd"])])
    assert to_expirable_versions(image.versions) == [ExpirableVersion(version="1.2.3")]


def test_to_expirable_versions_keeps_order_and_classification():
    versions = [MachineImageVersion(version="1.2.3"), MachineImageVersion(version="2.0.0", classification="preview")]
    result = to_expirable_versions(versions)
    assert [v.version for v in result] == ["1.2.3", "2.0.0"]
    assert result[1].classification == "preview"


def test_to_expirable_versions_empty():
    assert to_expirable_versions(None) == []


def test_worker_defaults_are_independent():
    a, b = Worker(name="a"), Worker(name="b")
    a.zones.append("zone1")
    assert b.zones == []
    assert a.kubernetes is None


def test_networking_nodes_default():
    assert Networking(nodes="1.2.3.4/5").nodes == "1.2.3.4/5"
    assert Networking().nodes is None