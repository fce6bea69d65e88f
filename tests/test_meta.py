from datetime import datetime, timezone

import pytest

from kubevirt_api.constants import ConditionStatus
from kubevirt_api.meta import (
    GROUP_VERSION,
    Affinity,
    Condition,
    GroupVersion,
    GroupVersionKind,
    ObjectMeta,
    Pod,
    ResourceRequirements,
)
from kubevirt_api.quantity import parse_quantity


def test_group_version_string_with_group():
    assert str(GroupVersion("snapshot.kubevirt.io", "v1alpha1")) == "snapshot.kubevirt.io/v1alpha1"


def test_group_version_string_without_group():
    assert str(GroupVersion("", "v1")) == "v1"


def test_kubevirt_group_version():
    assert str(GROUP_VERSION) == "kubevirt.io/v1"
    assert GROUP_VERSION.with_kind("VirtualMachine") == GroupVersionKind(
        "kubevirt.io", "v1", "VirtualMachine"
    )


def test_with_kind_keeps_group_and_version():
    gvk = GroupVersion("snapshot.kubevirt.io", "v1alpha1").with_kind("VirtualMachineSnapshot")
    assert gvk == GroupVersionKind("snapshot.kubevirt.io", "v1alpha1", "VirtualMachineSnapshot")


def test_object_meta_to_dict_omits_empty_fields():
    meta = ObjectMeta(name="testvmi", namespace="default")
    assert meta.to_dict() == {"name": "testvmi", "namespace": "default"}


def test_object_meta_to_dict_uses_wire_keys():
    meta = ObjectMeta(name="vm", self_link="/apis/x", uid="abc", resource_version="7")
    data = meta.to_dict()
    assert data["selfLink"] == "/apis/x"
    assert data["resourceVersion"] == "7"
    assert data["uid"] == "abc"


def test_object_meta_round_trip():
    meta = ObjectMeta(
        name="vm",
        namespace="ns",
        uid="abc",
        generation=3,
        creation_timestamp=datetime(2020, 1, 2, 3, 4, 5, tzinfo=timezone.utc),
        labels={"kubevirt.io/vm": "vm"},
        annotations={"kubevirt.io/domain": "vm"},
        finalizers=["foregroundDeleteVirtualMachine"],
    )
    assert ObjectMeta.from_dict(meta.to_dict()) == meta


def test_object_meta_from_empty_dict_is_default():
    assert ObjectMeta.from_dict({}) == ObjectMeta()
    assert ObjectMeta.from_dict(None) == ObjectMeta()


def test_resource_requirements_lookup():
    resources = ResourceRequirements(
        requests={"memory": parse_quantity("64M")},
        limits={"cpu": parse_quantity("1"), "memory": parse_quantity("64M")},
    )
    assert resources.memory("requests") == resources.memory("limits")
    assert resources.cpu("limits") == parse_quantity("1")
    assert resources.cpu("requests").is_zero()


def test_resource_requirements_default_is_requests():
    resources = ResourceRequirements(requests={"memory": parse_quantity("8192Ki")})
    assert resources.memory() == parse_quantity("8192Ki")
    assert resources.memory("limits").is_zero()


def test_resource_requirements_rejects_unknown_section():
    with pytest.raises(ValueError):
        ResourceRequirements().cpu("claims")


def test_condition_defaults():
    cond = Condition(type="LiveMigratable", status=ConditionStatus.TRUE)
    assert cond.reason == ""
    assert cond.last_probe_time is None
    assert cond.status == "True"


def test_pod_starts_without_affinity():
    pod = Pod()
    assert pod.spec.affinity is None
    pod.spec.affinity = Affinity()
    assert pod.spec.affinity.node_affinity is None
    assert pod.metadata == ObjectMeta()