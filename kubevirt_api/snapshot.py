"""Snapshot and restore objects of virtual machines, and their API group registration."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, NamedTuple

from kubevirt_api.constants import ConditionStatus, _StrEnum
from kubevirt_api.meta import GroupVersion, GroupVersionKind, ListMeta, ObjectMeta
from kubevirt_api.vm import VirtualMachine

GROUP_NAME = "snapshot.kubevirt.io"

SCHEME_GROUP_VERSION = GroupVersion(GROUP_NAME, "v1alpha1")


class _GroupKind(NamedTuple):
    group: str
    kind: str

    def __str__(self) -> str:
        if not self.group:
            return self.kind
        return f"{self.kind}.{self.group}"


class _GroupResource(NamedTuple):
    group: str
    resource: str

    def __str__(self) -> str:
        if not self.group:
            return self.resource
        return f"{self.resource}.{self.group}"


def kind(name: str) -> _GroupKind:
    """Qualify an unqualified kind with the snapshot API group."""
    return _GroupKind(SCHEME_GROUP_VERSION.group, name)


def resource(name: str) -> _GroupResource:
    """Qualify an unqualified resource with the snapshot API group."""
    return _GroupResource(SCHEME_GROUP_VERSION.group, name)


class DeletionPolicy(_StrEnum):
    """What happens to the snapshot content when its snapshot is deleted."""

    DELETE = "Delete"
    RETAIN = "Retain"


class SnapshotConditionType(_StrEnum):
    READY = "Ready"
    PROGRESSING = "Progressing"


@dataclass
class SnapshotError:
    """The last error met during a snapshot or restore."""

    time: datetime | None = None
    message: str | None = None


@dataclass
class SnapshotCondition:
    """One observed condition of a snapshot or restore."""

    type: SnapshotConditionType
    status: ConditionStatus
    last_probe_time: datetime | None = None
    last_transition_time: datetime | None = None
    reason: str = ""
    message: str = ""


@dataclass
class TypedLocalObjectReference:
    """A reference to an object of a given kind in the same namespace."""

    kind: str
    name: str
    api_group: str | None = None


@dataclass
class VirtualMachineSnapshotSpec:
    """The machine to snapshot and what to do with the content on deletion."""

    source: TypedLocalObjectReference
    deletion_policy: DeletionPolicy | None = None


@dataclass
class VirtualMachineSnapshotStatus:
    """Progress of a snapshot."""

    source_uid: str | None = None
    virtual_machine_snapshot_content_name: str | None = None
    creation_time: datetime | None = None
    ready_to_use: bool | None = None
    error: SnapshotError | None = None
    conditions: list[SnapshotCondition] = field(default_factory=list)


@dataclass
class VirtualMachineSnapshot:
    """The operation of taking a snapshot of a virtual machine."""

    spec: VirtualMachineSnapshotSpec
    metadata: ObjectMeta = field(default_factory=ObjectMeta)
    status: VirtualMachineSnapshotStatus | None = None
    api_version: str = ""
    kind: str = ""


@dataclass
class VirtualMachineSnapshotList:
    """A list of virtual machine snapshots."""

    items: list[VirtualMachineSnapshot] = field(default_factory=list)
    metadata: ListMeta = field(default_factory=ListMeta)
    api_version: str = ""
    kind: str = ""


@dataclass
class PersistentVolumeClaim:
    """A claim's metadata and its specification, kept in wire form."""

    metadata: ObjectMeta = field(default_factory=ObjectMeta)
    spec: dict[str, Any] = field(default_factory=dict)


@dataclass
class VolumeBackup:
    """What is needed to restore one persistent volume claim."""

    volume_name: str
    persistent_volume_claim: PersistentVolumeClaim = field(default_factory=PersistentVolumeClaim)
    volume_snapshot_name: str | None = None


@dataclass
class VirtualMachineSnapshotContentSpec:
    """The snapshotted machine and the backups of its volumes."""

    virtual_machine_snapshot_name: str | None = None
    source_virtual_machine: VirtualMachine | None = None
    volume_backups: list[VolumeBackup] = field(default_factory=list)


@dataclass
class VolumeSnapshotStatus:
    """Progress of the snapshot of one volume."""

    volume_snapshot_name: str
    creation_time: datetime | None = None
    ready_to_use: bool | None = None
    error: SnapshotError | None = None


@dataclass
class VirtualMachineSnapshotContentStatus:
    """Progress of the snapshot content."""

    creation_time: datetime | None = None
    ready_to_use: bool | None = None
    error: SnapshotError | None = None
    volume_snapshot_status: list[VolumeSnapshotStatus] = field(default_factory=list)


@dataclass
class VirtualMachineSnapshotContent:
    """The data held by a snapshot."""

    spec: VirtualMachineSnapshotContentSpec = field(
        default_factory=VirtualMachineSnapshotContentSpec
    )
    metadata: ObjectMeta = field(default_factory=ObjectMeta)
    status: VirtualMachineSnapshotContentStatus | None = None
    api_version: str = ""
    kind: str = ""


@dataclass
class VirtualMachineSnapshotContentList:
    """A list of snapshot contents."""

    items: list[VirtualMachineSnapshotContent] = field(default_factory=list)
    metadata: ListMeta = field(default_factory=ListMeta)
    api_version: str = ""
    kind: str = ""


@dataclass
class VolumeRestore:
    """What is needed to restore one persistent volume claim from a volume snapshot."""

    volume_name: str
    persistent_volume_claim_name: str
    volume_snapshot_name: str
    data_volume_name: str | None = None


@dataclass
class VirtualMachineRestoreSpec:
    """The machine to restore and the snapshot to restore it from."""

    target: TypedLocalObjectReference
    virtual_machine_snapshot_name: str


@dataclass
class VirtualMachineRestoreStatus:
    """Progress of a restore."""

    restores: list[VolumeRestore] = field(default_factory=list)
    restore_time: datetime | None = None
    deleted_data_volumes: list[str] = field(default_factory=list)
    complete: bool | None = None
    conditions: list[SnapshotCondition] = field(default_factory=list)


@dataclass
class VirtualMachineRestore:
    """The operation of restoring a virtual machine from a snapshot."""

    spec: VirtualMachineRestoreSpec
    metadata: ObjectMeta = field(default_factory=ObjectMeta)
    status: VirtualMachineRestoreStatus | None = None
    api_version: str = ""
    kind: str = ""


@dataclass
class VirtualMachineRestoreList:
    """A list of virtual machine restores."""

    items: list[VirtualMachineRestore] = field(default_factory=list)
    metadata: ListMeta = field(default_factory=ListMeta)
    api_version: str = ""
    kind: str = ""


class Scheme:
    """A registry mapping group versions and kinds to the types that represent them."""

    def __init__(self) -> None:
        self._types: dict[GroupVersionKind, type] = {}
        self._group_versions: list[GroupVersion] = []

    @property
    def group_versions(self) -> tuple[GroupVersion, ...]:
        """The group versions that have types registered, in registration order."""
        return tuple(self._group_versions)

    def add_known_types(self, group_version: GroupVersion, *args: Any) -> None:
        """Register types, or the types of the given objects, under their class names."""
        for arg in args:
            obj_type = arg if isinstance(arg, type) else type(arg)
            gvk = group_version.with_kind(obj_type.__name__)
            existing = self._types.get(gvk)
            if existing is not None and existing is not obj_type:
                raise ValueError(f"double registration of different types for {gvk}")
            self._types[gvk] = obj_type
        if group_version not in self._group_versions:
            self._group_versions.append(group_version)

    def lookup(self, group_version: GroupVersion, kind: str) -> type:
        """The type registered for a kind, raising KeyError when there is none."""
        try:
            return self._types[group_version.with_kind(kind)]
        except KeyError:
            raise KeyError(f"no kind {kind!r} is registered for version {group_version}") from None


def add_to_scheme(scheme: Scheme) -> None:
    """Register the snapshot API group version and its types with ``scheme``."""
    scheme.add_known_types(
        SCHEME_GROUP_VERSION,
        VirtualMachineSnapshot,
        VirtualMachineSnapshotList,
        VirtualMachineSnapshotContent,
        VirtualMachineSnapshotContentList,
        VirtualMachineRestore,
        VirtualMachineRestoreList,
    )