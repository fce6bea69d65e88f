import pytest

from kubevirt_api.constants import ConditionStatus
from kubevirt_api.meta import GroupVersion
from kubevirt_api.vm import VirtualMachine
from kubevirt_api.snapshot import (
    GROUP_NAME,
    SCHEME_GROUP_VERSION,
    DeletionPolicy,
    Scheme,
    SnapshotCondition,
    SnapshotConditionType,
    SnapshotError,
    TypedLocalObjectReference,
    VirtualMachineRestore,
    VirtualMachineRestoreList,
    VirtualMachineRestoreSpec,
    VirtualMachineRestoreStatus,
    VirtualMachineSnapshot,
    VirtualMachineSnapshotContent,
    VirtualMachineSnapshotContentList,
    VirtualMachineSnapshotContentSpec,
    VirtualMachineSnapshotList,
    VirtualMachineSnapshotSpec,
    VirtualMachineSnapshotStatus,
    VolumeBackup,
    VolumeRestore,
    add_to_scheme,
    kind,
    resource,
)

REGISTERED = [
    VirtualMachineSnapshot,
    VirtualMachineSnapshotList,
    VirtualMachineSnapshotContent,
    VirtualMachineSnapshotContentList,
    VirtualMachineRestore,
    VirtualMachineRestoreList,
]


def test_group_version_fixed_by_source():
    assert GROUP_NAME == "snapshot.kubevirt.io"
    assert GroupVersion("snapshot.kubevirt.io", "v1alpha1") == SCHEME_GROUP_VERSION
    assert str(SCHEME_GROUP_VERSION) == "snapshot.kubevirt.io/v1alpha1"
    gvk = SCHEME_GROUP_VERSION.with_kind("VirtualMachineSnapshot")
    assert gvk.group == "snapshot.kubevirt.io"
    assert gvk.version == "v1alpha1"


def test_kind_is_group_qualified():
    gk = kind("VirtualMachineSnapshot")
    assert gk.group == GROUP_NAME
    assert gk.kind == "VirtualMachineSnapshot"
    assert str(gk).startswith("VirtualMachineSnapshot")
    assert str(gk).endswith(GROUP_NAME)


def test_resource_is_group_qualified():
    gr = resource("virtualmachinesnapshots")
    assert gr.group == GROUP_NAME
    assert gr.resource == "virtualmachinesnapshots"
    assert str(gr).endswith(GROUP_NAME)


@pytest.mark.parametrize("obj_type", REGISTERED)
def test_add_to_scheme_registers_types(obj_type):
    scheme = Scheme()
    add_to_scheme(scheme)
    assert scheme.lookup(SCHEME_GROUP_VERSION, obj_type.__name__) is obj_type


def test_add_to_scheme_records_group_version():
    scheme = Scheme()
    add_to_scheme(scheme)
    assert scheme.group_versions == (SCHEME_GROUP_VERSION,)


def test_add_to_scheme_twice_is_harmless():
    scheme = Scheme()
    add_to_scheme(scheme)
    add_to_scheme(scheme)
    assert scheme.group_versions == (SCHEME_GROUP_VERSION,)
    assert scheme.lookup(SCHEME_GROUP_VERSION, "VirtualMachineRestore") is VirtualMachineRestore


def test_lookup_unknown_kind_raises():
    scheme = Scheme()
    add_to_scheme(scheme)
    with pytest.raises(KeyError):
        scheme.lookup(SCHEME_GROUP_VERSION, "Nonexistent")


def test_lookup_other_version_raises():
    scheme = Scheme()
    add_to_scheme(scheme)
    with pytest.raises(KeyError):
        scheme.lookup(GroupVersion(GROUP_NAME, "v1"), "VirtualMachineSnapshot")


def test_double_registration_of_different_types_raises():
    scheme = Scheme()
    add_to_scheme(scheme)

    class VirtualMachineSnapshot:
        pass

    with pytest.raises(ValueError):
        scheme.add_known_types(SCHEME_GROUP_VERSION, VirtualMachineSnapshot)


def test_instances_register_their_type():
    scheme = Scheme()
    gv = GroupVersion("example.com", "v1")
    scheme.add_known_types(gv, VirtualMachineSnapshotList())
    assert scheme.lookup(gv, "VirtualMachineSnapshotList") is VirtualMachineSnapshotList


def test_enumeration_values():
    assert DeletionPolicy("Delete") is DeletionPolicy.DELETE
    assert DeletionPolicy("Retain") is DeletionPolicy.RETAIN
    assert SnapshotConditionType("Ready") is SnapshotConditionType.READY
    assert SnapshotConditionType("Progressing") is SnapshotConditionType.PROGRESSING
    with pytest.raises(ValueError):
        DeletionPolicy("Keep")


def test_snapshot_defaults():
    source = TypedLocalObjectReference(kind="VirtualMachine", name="vm1", api_group="kubevirt.io")
    snap = VirtualMachineSnapshot(spec=VirtualMachineSnapshotSpec(source=source))
    assert snap.status is None
    assert snap.spec.deletion_policy is None
    assert snap.spec.source.name == "vm1"
    assert snap.metadata.name == ""


def test_snapshot_status_holds_error_and_conditions():
    status = VirtualMachineSnapshotStatus(
        ready_to_use=False,
        error=SnapshotError(message="failed"),
        conditions=[
            SnapshotCondition(type=SnapshotConditionType.PROGRESSING, status=ConditionStatus.TRUE)
        ],
    )
    assert status.error.message == "failed"
    assert status.error.time is None
    assert status.conditions[0].status is ConditionStatus.TRUE
    assert VirtualMachineSnapshotStatus().conditions == []


def test_content_carries_virtual_machine_and_backups():
    vm = VirtualMachine(kind="VirtualMachine")
    content = VirtualMachineSnapshotContent(
        spec=VirtualMachineSnapshotContentSpec(
            virtual_machine_snapshot_name="snap",
            source_virtual_machine=vm,
            volume_backups=[VolumeBackup(volume_name="disk0", volume_snapshot_name="vs0")],
        )
    )
    assert content.spec.source_virtual_machine is vm
    assert content.spec.volume_backups[0].persistent_volume_claim.spec == {}
    assert content.status is None


def test_default_lists_are_independent():
    first = VirtualMachineSnapshotContentSpec()
    second = VirtualMachineSnapshotContentSpec()
    first.volume_backups.append(VolumeBackup(volume_name="disk0"))
    assert second.volume_backups == []


def test_restore():
    target = TypedLocalObjectReference(kind="VirtualMachine", name="vm1")
    restore = VirtualMachineRestore(
        spec=VirtualMachineRestoreSpec(target=target, virtual_machine_snapshot_name="snap"),
        status=VirtualMachineRestoreStatus(
            restores=[VolumeRestore("disk0", "pvc0", "vs0")], complete=True
        ),
    )
    assert restore.spec.target.api_group is None
    assert restore.status.complete is True
    assert restore.status.restores[0].data_volume_name is None
    assert restore.status.deleted_data_volumes == []
    assert VirtualMachineRestoreList().items == []
    assert VirtualMachineSnapshotContentList().items == []