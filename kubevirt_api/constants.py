"""Enumerations and well-known label and annotation names of the virtualization API."""

from __future__ import annotations

from enum import Enum


class _StrEnum(str, Enum):
    def __str__(self) -> str:
        return self.value


DEFAULT_GRACE_PERIOD_SECONDS = 30
NAMESPACE_DEFAULT = "default"


class ConditionStatus(_StrEnum):
    TRUE = "True"
    FALSE = "False"
    UNKNOWN = "Unknown"


class VirtualMachineInstancePhase(_StrEnum):
    UNSET = ""
    PENDING = "Pending"
    SCHEDULING = "Scheduling"
    SCHEDULED = "Scheduled"
    RUNNING = "Running"
    SUCCEEDED = "Succeeded"
    FAILED = "Failed"
    UNKNOWN = "Unknown"


class VolumePhase(_StrEnum):
    PENDING = "Pending"
    BOUND = "Bound"
    ATTACHED_TO_NODE = "AttachedToNode"
    MOUNTED = "MountedToPod"
    READY = "Ready"
    DETACHING = "Detaching"
    UNMOUNTED = "UnMountedFromPod"


class VirtualMachineInstanceConditionType(_StrEnum):
    PROVISIONING = "Provisioning"
    READY = "Ready"
    SYNCHRONIZED = "Synchronized"
    PAUSED = "Paused"
    AGENT_CONNECTED = "AgentConnected"
    ACCESS_CREDENTIALS_SYNCHRONIZED = "AccessCredentialsSynchronized"
    UNSUPPORTED_AGENT = "AgentVersionNotSupported"
    IS_MIGRATABLE = "LiveMigratable"


REASON_DISKS_NOT_MIGRATABLE = "DisksNotLiveMigratable"
REASON_INTERFACE_NOT_MIGRATABLE = "InterfaceNotLiveMigratable"
REASON_HOTPLUG_NOT_MIGRATABLE = "HotplugNotLiveMigratable"
POD_TERMINATING_REASON = "PodTerminating"
MIGRATION_ABORT_REQUESTED = "migrationAbortRequested"


class MigrationAbortStatus(_StrEnum):
    SUCCEEDED = "Succeeded"
    FAILED = "Failed"
    IN_PROGRESS = "Aborting"


class MigrationMode(_StrEnum):
    PRE_COPY = "PreCopy"
    POST_COPY = "PostCopy"


class MigrationMethod(_StrEnum):
    BLOCK = "BlockMigration"
    LIVE = "LiveMigration"


class MigrationPhase(_StrEnum):
    UNSET = ""
    PENDING = "Pending"
    SCHEDULING = "Scheduling"
    SCHEDULED = "Scheduled"
    PREPARING_TARGET = "PreparingTarget"
    TARGET_READY = "TargetReady"
    RUNNING = "Running"
    SUCCEEDED = "Succeeded"
    FAILED = "Failed"


class RunStrategy(_StrEnum):
    UNKNOWN = ""
    ALWAYS = "Always"
    HALTED = "Halted"
    MANUAL = "Manual"
    RERUN_ON_FAILURE = "RerunOnFailure"


class SyncEvent(_StrEnum):
    CREATED = "Created"
    DELETED = "Deleted"
    PRESET_FAILED = "PresetFailed"
    OVERRIDE = "Override"
    STARTED = "Started"
    SHUTTING_DOWN = "ShuttingDown"
    STOPPED = "Stopped"
    PREPARING_TARGET = "PreparingTarget"
    MIGRATING = "Migrating"
    MIGRATED = "Migrated"
    SYNC_FAILED = "SyncFailed"
    RESUMED = "Resumed"
    ACCESS_CREDENTIALS_SYNC_FAILED = "AccessCredentialsSyncFailed"
    ACCESS_CREDENTIALS_SYNC_SUCCESS = "AccessCredentialsSyncSuccess"


class EvictionStrategy(_StrEnum):
    LIVE_MIGRATE = "LiveMigrate"


class StateChangeRequestAction(_StrEnum):
    START = "Start"
    STOP = "Stop"
    RENAME = "Rename"


class VirtualMachineConditionType(_StrEnum):
    FAILURE = "Failure"
    READY = "Ready"
    PAUSED = "Paused"
    RENAME_OPERATION = "RenameOperation"


class ReplicaSetConditionType(_StrEnum):
    REPLICA_FAILURE = "ReplicaFailure"
    REPLICA_PAUSED = "ReplicaPaused"


class HostDiskType(_StrEnum):
    EXISTS_OR_CREATE = "DiskOrCreate"
    EXISTS = "Disk"


class NetworkInterfaceType(_StrEnum):
    BRIDGE = "bridge"
    SLIRP = "slirp"
    MASQUERADE = "masquerade"


class DriverCache(_StrEnum):
    NONE = "none"
    WRITE_THROUGH = "writethrough"


class DriverIO(_StrEnum):
    THREADS = "threads"
    NATIVE = "native"
    DEFAULT = "default"


class PatchType(_StrEnum):
    JSON = "json"
    MERGE = "merge"
    STRATEGIC_MERGE = "strategic"


class UninstallStrategy(_StrEnum):
    REMOVE_WORKLOADS = "RemoveWorkloads"
    BLOCK_IF_WORKLOADS_EXIST = "BlockUninstallIfWorkloadsExist"


class KubeVirtPhase(_StrEnum):
    DEPLOYING = "Deploying"
    DEPLOYED = "Deployed"
    DELETING = "Deleting"
    DELETED = "Deleted"


class KubeVirtConditionType(_StrEnum):
    SYNCHRONIZED = "Synchronized"
    CREATED = "Created"
    AVAILABLE = "Available"
    PROGRESSING = "Progressing"
    DEGRADED = "Degraded"


APP_LABEL = "kubevirt.io"
DOMAIN_ANNOTATION = "kubevirt.io/domain"
MIGRATION_JOB_NAME_ANNOTATION = "kubevirt.io/migrationJobName"
CONTROLLER_API_LATEST_VERSION_OBSERVED_ANNOTATION = "kubevirt.io/latest-observed-api-version"
CONTROLLER_API_STORAGE_VERSION_OBSERVED_ANNOTATION = "kubevirt.io/storage-observed-api-version"
CREATED_BY_LABEL = "kubevirt.io/created-by"
MIGRATION_JOB_LABEL = "kubevirt.io/migrationJobUID"
NODE_NAME_LABEL = "kubevirt.io/nodeName"
MIGRATION_TARGET_NODE_NAME_LABEL = "kubevirt.io/migrationTargetNodeName"
EVACUATION_MIGRATION_ANNOTATION = "kubevirt.io/evacuationMigration"
NODE_SCHEDULABLE = "kubevirt.io/schedulable"
VIRT_HANDLER_HEARTBEAT = "kubevirt.io/heartbeat"
APP_LABEL_PREFIX = "app.kubernetes.io"
APP_NAME_LABEL = APP_LABEL_PREFIX + "/name"
APP_VERSION_LABEL = APP_LABEL_PREFIX + "/version"
APP_PART_OF_LABEL = APP_LABEL_PREFIX + "/part-of"
APP_COMPONENT_LABEL = APP_LABEL_PREFIX + "/component"
APP_COMPONENT = "kubevirt"
MANAGED_BY_LABEL = APP_LABEL_PREFIX + "/managed-by"
MANAGED_BY_LABEL_OPERATOR_VALUE = "kubevirt-operator"
INSTALL_STRATEGY_VERSION_ANNOTATION = "kubevirt.io/install-strategy-version"
INSTALL_STRATEGY_REGISTRY_ANNOTATION = "kubevirt.io/install-strategy-registry"
INSTALL_STRATEGY_IDENTIFIER_ANNOTATION = "kubevirt.io/install-strategy-identifier"
KUBEVIRT_CUSTOMIZE_COMPONENT_ANNOTATION_HASH = "kubevirt.io/customizer-identifier"
KUBEVIRT_GENERATION_ANNOTATION = "kubevirt.io/generation"
EPHEMERAL_BACKUP_OBJECT = "kubevirt.io/ephemeral-backup-object"
EPHEMERAL_PROVISIONING_OBJECT = "kubevirt.io/ephemeral-provisioning"
INSTALL_STRATEGY_LABEL = "kubevirt.io/install-strategy"
VIRTUAL_MACHINE_INSTANCE_FINALIZER = "foregroundDeleteVirtualMachine"
VIRTUAL_MACHINE_INSTANCE_MIGRATION_FINALIZER = "kubevirt.io/migrationJobFinalize"
CPU_MANAGER = "cpumanager"
IGNITION_ANNOTATION = "kubevirt.io/ignitiondata"
PLACE_PCI_DEVICES_ON_ROOT_COMPLEX = "kubevirt.io/placePCIDevicesOnRootComplex"
VIRTUAL_MACHINE_LABEL = APP_LABEL + "/vm"
MEMFD_MEMORY_BACKEND = "kubevirt.io/memfd"