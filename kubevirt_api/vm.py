"""Virtual machines, instance replica sets, presets and migrations."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Any

from kubevirt_api.constants import (
    NAMESPACE_DEFAULT,
    MigrationPhase,
    RunStrategy,
    StateChangeRequestAction,
)
from kubevirt_api.meta import (
    GROUP_VERSION,
    Condition,
    LabelSelector,
    ListMeta,
    ObjectMeta,
)
from kubevirt_api.vmi import DomainSpec, VirtualMachineInstanceSpec

VIRTUAL_MACHINE_KIND = "VirtualMachine"
REPLICA_SET_KIND = "VirtualMachineInstanceReplicaSet"
PRESET_KIND = "VirtualMachineInstancePreset"
MIGRATION_KIND = "VirtualMachineInstanceMigration"


class RunStrategyConflictError(ValueError):
    """Raised when a machine sets both ``running`` and ``run_strategy``."""


@dataclass
class TemplateSpec:
    """The template from which virtual machine instances are created."""

    metadata: ObjectMeta = field(default_factory=ObjectMeta)
    spec: VirtualMachineInstanceSpec = field(default_factory=VirtualMachineInstanceSpec)


@dataclass
class DataVolumeTemplateSpec:
    """A data volume created for, and tied to the life-cycle of, a virtual machine."""

    metadata: ObjectMeta = field(default_factory=ObjectMeta)
    spec: dict[str, Any] = field(default_factory=dict)
    status: dict[str, Any] | None = None
    api_version: str = ""
    kind: str = ""


@dataclass
class StateChangeRequest:
    """An action to be taken on an instance, such as starting or stopping it."""

    action: StateChangeRequestAction
    data: dict[str, str] = field(default_factory=dict)
    uid: str | None = None


@dataclass
class VolumeRequest:
    """A request to hot-plug or unplug a volume; options are kept in wire form."""

    add_volume_options: dict[str, Any] | None = None
    remove_volume_options: dict[str, Any] | None = None


@dataclass
class VolumeSnapshotStatus:
    """Whether a volume of the machine supports snapshots, and why not if it does not."""

    name: str
    enabled: bool
    reason: str = ""


@dataclass
class VirtualMachineSpec:
    """How a virtual machine should look and whether it should run."""

    template: TemplateSpec | None = None
    running: bool | None = None
    run_strategy: RunStrategy | None = None
    data_volume_templates: list[DataVolumeTemplateSpec] = field(default_factory=list)


@dataclass
class VirtualMachineStatus:
    """What the controller reports about a virtual machine."""

    snapshot_in_progress: str | None = None
    created: bool = False
    ready: bool = False
    conditions: list[Condition] = field(default_factory=list)
    state_change_requests: list[StateChangeRequest] = field(default_factory=list)
    volume_requests: list[VolumeRequest] = field(default_factory=list)
    volume_snapshot_statuses: list[VolumeSnapshotStatus] = field(default_factory=list)


@dataclass
class VirtualMachine:
    """A virtual machine which may or may not have a running instance."""

    metadata: ObjectMeta = field(default_factory=ObjectMeta)
    spec: VirtualMachineSpec = field(default_factory=VirtualMachineSpec)
    status: VirtualMachineStatus = field(default_factory=VirtualMachineStatus)
    api_version: str = ""
    kind: str = ""

    def run_strategy(self) -> RunStrategy:
        """The effective run strategy; ``running`` maps to Always or Halted."""
        running = self.spec.running
        strategy = self.spec.run_strategy
        if running is not None and strategy is not None:
            raise RunStrategyConflictError("running and runstrategy are mutually exclusive")
        if running is not None:
            return RunStrategy.ALWAYS if running else RunStrategy.HALTED
        if strategy is not None:
            return RunStrategy(strategy)
        return RunStrategy.HALTED


@dataclass
class VirtualMachineList:
    """A list of virtual machines."""

    items: list[VirtualMachine] = field(default_factory=list)
    metadata: ListMeta = field(default_factory=ListMeta)
    api_version: str = ""
    kind: str = ""

    def __iter__(self) -> Iterator[VirtualMachine]:
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)


@dataclass
class ReplicaSetSpec:
    """Desired replica count, selector and template of an instance replica set."""

    selector: LabelSelector | None = None
    template: TemplateSpec | None = None
    replicas: int | None = None
    paused: bool = False


@dataclass
class ReplicaSetStatus:
    """Observed replica counts and conditions of an instance replica set."""

    replicas: int = 0
    ready_replicas: int = 0
    conditions: list[Condition] = field(default_factory=list)
    label_selector: str = ""


@dataclass
class VirtualMachineInstanceReplicaSet:
    """Keeps a number of identical instances running."""

    metadata: ObjectMeta = field(default_factory=ObjectMeta)
    spec: ReplicaSetSpec = field(default_factory=ReplicaSetSpec)
    status: ReplicaSetStatus = field(default_factory=ReplicaSetStatus)
    api_version: str = ""
    kind: str = ""


@dataclass
class PresetSpec:
    """A label selector and the domain settings applied to matching instances."""

    selector: LabelSelector = field(default_factory=LabelSelector)
    domain: DomainSpec | None = None


@dataclass
class VirtualMachineInstancePreset:
    """Domain defaults applied to instances that match a selector."""

    metadata: ObjectMeta = field(default_factory=ObjectMeta)
    spec: PresetSpec = field(default_factory=PresetSpec)
    api_version: str = ""
    kind: str = ""


@dataclass
class MigrationSpec:
    """The instance to migrate; it must live in the migration's namespace."""

    vmi_name: str = ""


@dataclass
class MigrationStatus:
    """Phase and conditions of a migration."""

    phase: MigrationPhase = MigrationPhase.UNSET
    conditions: list[Condition] = field(default_factory=list)


@dataclass
class VirtualMachineInstanceMigration:
    """Tracks the migration of an instance to another host."""

    metadata: ObjectMeta = field(default_factory=ObjectMeta)
    spec: MigrationSpec = field(default_factory=MigrationSpec)
    status: MigrationStatus = field(default_factory=MigrationStatus)
    api_version: str = ""
    kind: str = ""

    def is_final(self) -> bool:
        """Whether the migration has completed, successfully or not."""
        return self.status.phase in (MigrationPhase.FAILED, MigrationPhase.SUCCEEDED)

    def is_running(self) -> bool:
        return self.status.phase not in (
            MigrationPhase.FAILED,
            MigrationPhase.PENDING,
            MigrationPhase.UNSET,
            MigrationPhase.SUCCEEDED,
        )

    def target_is_created(self) -> bool:
        """Whether the target pod should already have been created."""
        return self.status.phase not in (MigrationPhase.UNSET, MigrationPhase.PENDING)

    def target_is_handed_off(self) -> bool:
        """Whether the migration has been handed off to the instance controllers."""
        return self.status.phase not in (
            MigrationPhase.UNSET,
            MigrationPhase.PENDING,
            MigrationPhase.SCHEDULING,
            MigrationPhase.SCHEDULED,
        )


def new_virtual_machine_preset(name: str, selector: LabelSelector) -> VirtualMachineInstancePreset:
    """A preset in the default namespace with an empty domain."""
    return VirtualMachineInstancePreset(
        metadata=ObjectMeta(name=name, namespace=NAMESPACE_DEFAULT),
        spec=PresetSpec(selector=selector, domain=DomainSpec()),
        api_version=str(GROUP_VERSION),
        kind=PRESET_KIND,
    )