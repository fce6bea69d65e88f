"""Deployment configuration of the virtualization operator and guest agent data."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, TypeVar

from kubevirt_api.constants import (
    ConditionStatus,
    KubeVirtConditionType,
    KubeVirtPhase,
    PatchType,
    UninstallStrategy,
)
from kubevirt_api.meta import Condition, ObjectMeta
from kubevirt_api.quantity import Quantity, parse_quantity
from kubevirt_api.vmi import GuestOSInfo

KUBEVIRT_KIND = "KubeVirt"

_TIME_FORMAT = "%Y-%m-%dT%H:%M:%SZ"
_E = TypeVar("_E", bound=Enum)


def _is_empty(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, (str, bool, int, float, list, dict)):
        return not value
    return False


def _omit_empty(data: dict[str, Any]) -> dict[str, Any]:
    """Drop zero values, as optional non-pointer fields are left out on the wire."""
    return {key: value for key, value in data.items() if not _is_empty(value)}


def _omit_none(data: dict[str, Any]) -> dict[str, Any]:
    """Drop only absent values, as optional pointer fields are left out on the wire."""
    return {key: value for key, value in data.items() if value is not None}


def _time_to_str(moment: datetime | None) -> str | None:
    if moment is None:
        return None
    if moment.tzinfo is not None:
        moment = moment.astimezone(timezone.utc)
    return moment.strftime(_TIME_FORMAT)


def _time_from_str(text: str | None) -> datetime | None:
    if not text:
        return None
    return datetime.strptime(text, _TIME_FORMAT).replace(tzinfo=timezone.utc)


def _quantity_to_str(quantity: Quantity | None) -> str | None:
    return None if quantity is None else str(quantity)


def _quantity_from(value: Any) -> Quantity | None:
    return None if value is None else parse_quantity(str(value))


def _enum_or_none(enum_cls: type[_E], value: Any) -> _E | None:
    if value is None or value == "":
        return None
    return enum_cls(value)


def _enum_or_raw(enum_cls: type[_E], value: str) -> _E | str:
    try:
        return enum_cls(value)
    except ValueError:
        return value


def _int_or_none(value: Any) -> int | None:
    return None if value is None else int(value)


def _bool_or_none(value: Any) -> bool | None:
    return None if value is None else bool(value)


def _condition_to_dict(condition: Condition) -> dict[str, Any]:
    result = {"type": str(condition.type), "status": str(condition.status)}
    result.update(
        _omit_empty(
            {
                "lastProbeTime": _time_to_str(condition.last_probe_time),
                "lastTransitionTime": _time_to_str(condition.last_transition_time),
                "reason": condition.reason,
                "message": condition.message,
            }
        )
    )
    return result


def _condition_from_dict(data: dict[str, Any]) -> Condition:
    return Condition(
        type=_enum_or_raw(KubeVirtConditionType, data.get("type", "")),
        status=ConditionStatus(data.get("status", "Unknown")),
        last_probe_time=_time_from_str(data.get("lastProbeTime")),
        last_transition_time=_time_from_str(data.get("lastTransitionTime")),
        reason=data.get("reason", ""),
        message=data.get("message", ""),
    )


@dataclass
class Probe:
    """A periodic health check of an instance; the action is kept in wire form."""

    http_get: dict[str, Any] | None = None
    tcp_socket: dict[str, Any] | None = None
    initial_delay_seconds: int = 0
    timeout_seconds: int = 0
    period_seconds: int = 0
    success_threshold: int = 0
    failure_threshold: int = 0

    def _to_dict(self) -> dict[str, Any]:
        result = _omit_none({"httpGet": self.http_get, "tcpSocket": self.tcp_socket})
        result.update(
            _omit_empty(
                {
                    "initialDelaySeconds": self.initial_delay_seconds,
                    "timeoutSeconds": self.timeout_seconds,
                    "periodSeconds": self.period_seconds,
                    "successThreshold": self.success_threshold,
                    "failureThreshold": self.failure_threshold,
                }
            )
        )
        return result

    @classmethod
    def _from_dict(cls, data: dict[str, Any] | None) -> Probe:
        data = data or {}
        return cls(
            http_get=data.get("httpGet"),
            tcp_socket=data.get("tcpSocket"),
            initial_delay_seconds=int(data.get("initialDelaySeconds", 0)),
            timeout_seconds=int(data.get("timeoutSeconds", 0)),
            period_seconds=int(data.get("periodSeconds", 0)),
            success_threshold=int(data.get("successThreshold", 0)),
            failure_threshold=int(data.get("failureThreshold", 0)),
        )


@dataclass
class SelfSignConfiguration:
    """Rotation intervals of self-signed certificates, as duration strings."""

    ca_rotate_interval: str | None = None
    cert_rotate_interval: str | None = None
    ca_overlap_interval: str | None = None

    def _to_dict(self) -> dict[str, Any]:
        return _omit_none(
            {
                "caRotateInterval": self.ca_rotate_interval,
                "certRotateInterval": self.cert_rotate_interval,
                "caOverlapInterval": self.ca_overlap_interval,
            }
        )

    @classmethod
    def _from_dict(cls, data: dict[str, Any]) -> SelfSignConfiguration:
        return cls(
            ca_rotate_interval=data.get("caRotateInterval"),
            cert_rotate_interval=data.get("certRotateInterval"),
            ca_overlap_interval=data.get("caOverlapInterval"),
        )


@dataclass
class CustomizeComponentsPatch:
    """A patch applied to one of the resources the operator deploys."""

    resource_name: str = ""
    resource_type: str = ""
    patch: str = ""
    type: PatchType | None = None

    def _to_dict(self) -> dict[str, Any]:
        return _omit_empty(
            {
                "resourceName": self.resource_name,
                "resourceType": self.resource_type,
                "patch": self.patch,
                "type": None if self.type is None else str(self.type),
            }
        )

    @classmethod
    def _from_dict(cls, data: dict[str, Any]) -> CustomizeComponentsPatch:
        return cls(
            resource_name=data.get("resourceName", ""),
            resource_type=data.get("resourceType", ""),
            patch=data.get("patch", ""),
            type=_enum_or_none(PatchType, data.get("type")),
        )


@dataclass
class MigrationConfiguration:
    """Cluster-wide live migration options."""

    node_drain_taint_key: str | None = None
    parallel_outbound_migrations_per_node: int | None = None
    parallel_migrations_per_cluster: int | None = None
    allow_auto_converge: bool | None = None
    bandwidth_per_migration: Quantity | None = None
    completion_timeout_per_gib: int | None = None
    progress_timeout: int | None = None
    unsafe_migration_override: bool | None = None
    allow_post_copy: bool | None = None

    def _to_dict(self) -> dict[str, Any]:
        return _omit_none(
            {
                "nodeDrainTaintKey": self.node_drain_taint_key,
                "parallelOutboundMigrationsPerNode": self.parallel_outbound_migrations_per_node,
                "parallelMigrationsPerCluster": self.parallel_migrations_per_cluster,
                "allowAutoConverge": self.allow_auto_converge,
                "bandwidthPerMigration": _quantity_to_str(self.bandwidth_per_migration),
                "completionTimeoutPerGiB": self.completion_timeout_per_gib,
                "progressTimeout": self.progress_timeout,
                "unsafeMigrationOverride": self.unsafe_migration_override,
                "allowPostCopy": self.allow_post_copy,
            }
        )

    @classmethod
    def _from_dict(cls, data: dict[str, Any]) -> MigrationConfiguration:
        return cls(
            node_drain_taint_key=data.get("nodeDrainTaintKey"),
            parallel_outbound_migrations_per_node=_int_or_none(
                data.get("parallelOutboundMigrationsPerNode")
            ),
            parallel_migrations_per_cluster=_int_or_none(data.get("parallelMigrationsPerCluster")),
            allow_auto_converge=_bool_or_none(data.get("allowAutoConverge")),
            bandwidth_per_migration=_quantity_from(data.get("bandwidthPerMigration")),
            completion_timeout_per_gib=_int_or_none(data.get("completionTimeoutPerGiB")),
            progress_timeout=_int_or_none(data.get("progressTimeout")),
            unsafe_migration_override=_bool_or_none(data.get("unsafeMigrationOverride")),
            allow_post_copy=_bool_or_none(data.get("allowPostCopy")),
        )


@dataclass
class DeveloperConfiguration:
    """Developer options such as feature gates and overcommit ratios."""

    feature_gates: list[str] = field(default_factory=list)
    less_pvc_space_toleration: int = 0
    memory_overcommit: int = 0
    node_selectors: dict[str, str] = field(default_factory=dict)
    use_emulation: bool = False
    cpu_allocation_ratio: int = 0

    def _to_dict(self) -> dict[str, Any]:
        return _omit_empty(
            {
                "featureGates": list(self.feature_gates),
                "pvcTolerateLessSpaceUpToPercent": self.less_pvc_space_toleration,
                "memoryOvercommit": self.memory_overcommit,
                "nodeSelectors": dict(self.node_selectors),
                "useEmulation": self.use_emulation,
                "cpuAllocationRatio": self.cpu_allocation_ratio,
            }
        )

    @classmethod
    def _from_dict(cls, data: dict[str, Any]) -> DeveloperConfiguration:
        return cls(
            feature_gates=list(data.get("featureGates") or []),
            less_pvc_space_toleration=int(data.get("pvcTolerateLessSpaceUpToPercent", 0)),
            memory_overcommit=int(data.get("memoryOvercommit", 0)),
            node_selectors=dict(data.get("nodeSelectors") or {}),
            use_emulation=bool(data.get("useEmulation", False)),
            cpu_allocation_ratio=int(data.get("cpuAllocationRatio", 0)),
        )


@dataclass
class NetworkConfiguration:
    """Cluster-wide network interface options."""

    network_interface: str = ""
    permit_slirp_interface: bool | None = None
    permit_bridge_interface_on_pod_network: bool | None = None

    def _to_dict(self) -> dict[str, Any]:
        result = _omit_empty({"defaultNetworkInterface": self.network_interface})
        result.update(
            _omit_none(
                {
                    "permitSlirpInterface": self.permit_slirp_interface,
                    "permitBridgeInterfaceOnPodNetwork": self.permit_bridge_interface_on_pod_network,
                }
            )
        )
        return result

    @classmethod
    def _from_dict(cls, data: dict[str, Any]) -> NetworkConfiguration:
        return cls(
            network_interface=data.get("defaultNetworkInterface", ""),
            permit_slirp_interface=_bool_or_none(data.get("permitSlirpInterface")),
            permit_bridge_interface_on_pod_network=_bool_or_none(
                data.get("permitBridgeInterfaceOnPodNetwork")
            ),
        )


_SMBIOS_KEYS = ("manufacturer", "product", "version", "sku", "family")


@dataclass
class SMBiosConfiguration:
    """SMBIOS values presented to guests."""

    manufacturer: str = ""
    product: str = ""
    version: str = ""
    sku: str = ""
    family: str = ""

    def _to_dict(self) -> dict[str, Any]:
        return _omit_empty({key: getattr(self, key) for key in _SMBIOS_KEYS})

    @classmethod
    def _from_dict(cls, data: dict[str, Any]) -> SMBiosConfiguration:
        return cls(**{key: data.get(key, "") for key in _SMBIOS_KEYS})


@dataclass
class PciHostDevice:
    """A host PCI device allowed for passthrough."""

    pci_vendor_selector: str
    resource_name: str
    external_resource_provider: bool = False

    def _to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {
            "pciVendorSelector": self.pci_vendor_selector,
            "resourceName": self.resource_name,
        }
        if self.external_resource_provider:
            result["externalResourceProvider"] = True
        return result

    @classmethod
    def _from_dict(cls, data: dict[str, Any]) -> PciHostDevice:
        return cls(
            pci_vendor_selector=data.get("pciVendorSelector", ""),
            resource_name=data.get("resourceName", ""),
            external_resource_provider=bool(data.get("externalResourceProvider", False)),
        )


@dataclass
class MediatedHostDevice:
    """A host mediated device allowed for passthrough."""

    mdev_name_selector: str
    resource_name: str
    external_resource_provider: bool = False

    def _to_dict(self) -> dict[str, Any]:
        result: dict[str, Any] = {
            "mdevNameSelector": self.mdev_name_selector,
            "resourceName": self.resource_name,
        }
        if self.external_resource_provider:
            result["externalResourceProvider"] = True
        return result

    @classmethod
    def _from_dict(cls, data: dict[str, Any]) -> MediatedHostDevice:
        return cls(
            mdev_name_selector=data.get("mdevNameSelector", ""),
            resource_name=data.get("resourceName", ""),
            external_resource_provider=bool(data.get("externalResourceProvider", False)),
        )


@dataclass
class PermittedHostDevices:
    """Devices that instances may be given directly."""

    pci_host_devices: list[PciHostDevice] = field(default_factory=list)
    mediated_devices: list[MediatedHostDevice] = field(default_factory=list)

    def _to_dict(self) -> dict[str, Any]:
        return _omit_empty(
            {
                "pciHostDevices": [d._to_dict() for d in self.pci_host_devices],
                "mediatedDevices": [d._to_dict() for d in self.mediated_devices],
            }
        )

    @classmethod
    def _from_dict(cls, data: dict[str, Any]) -> PermittedHostDevices:
        return cls(
            pci_host_devices=[PciHostDevice._from_dict(d) for d in data.get("pciHostDevices") or []],
            mediated_devices=[
                MediatedHostDevice._from_dict(d) for d in data.get("mediatedDevices") or []
            ],
        )


@dataclass
class KubeVirtConfiguration:
    """All cluster-wide virtualization settings."""

    cpu_model: str = ""
    cpu_request: Quantity | None = None
    developer_configuration: DeveloperConfiguration | None = None
    emulated_machines: list[str] = field(default_factory=list)
    image_pull_policy: str = ""
    migration_configuration: MigrationConfiguration | None = None
    machine_type: str = ""
    network_configuration: NetworkConfiguration | None = None
    ovmf_path: str = ""
    selinux_launcher_type: str = ""
    smbios_config: SMBiosConfiguration | None = None
    supported_guest_agent_versions: list[str] = field(default_factory=list)
    mem_balloon_stats_period: int | None = None
    permitted_host_devices: PermittedHostDevices | None = None

    def _to_dict(self) -> dict[str, Any]:
        def nested(value: Any) -> dict[str, Any] | None:
            return None if value is None else value._to_dict()

        result = _omit_empty(
            {
                "cpuModel": self.cpu_model,
                "emulatedMachines": list(self.emulated_machines),
                "imagePullPolicy": self.image_pull_policy,
                "machineType": self.machine_type,
                "ovmfPath": self.ovmf_path,
                "selinuxLauncherType": self.selinux_launcher_type,
                "supportedGuestAgentVersions": list(self.supported_guest_agent_versions),
            }
        )
        result.update(
            _omit_none(
                {
                    "cpuRequest": _quantity_to_str(self.cpu_request),
                    "developerConfiguration": nested(self.developer_configuration),
                    "migrations": nested(self.migration_configuration),
                    "network": nested(self.network_configuration),
                    "smbios": nested(self.smbios_config),
                    "memBalloonStatsPeriod": self.mem_balloon_stats_period,
                    "permittedHostDevices": nested(self.permitted_host_devices),
                }
            )
        )
        return result

    @classmethod
    def _from_dict(cls, data: dict[str, Any] | None) -> KubeVirtConfiguration:
        data = data or {}

        def nested(kind: Any, key: str) -> Any:
            value = data.get(key)
            return None if value is None else kind._from_dict(value)

        return cls(
            cpu_model=data.get("cpuModel", ""),
            cpu_request=_quantity_from(data.get("cpuRequest")),
            developer_configuration=nested(DeveloperConfiguration, "developerConfiguration"),
            emulated_machines=list(data.get("emulatedMachines") or []),
            image_pull_policy=data.get("imagePullPolicy", ""),
            migration_configuration=nested(MigrationConfiguration, "migrations"),
            machine_type=data.get("machineType", ""),
            network_configuration=nested(NetworkConfiguration, "network"),
            ovmf_path=data.get("ovmfPath", ""),
            selinux_launcher_type=data.get("selinuxLauncherType", ""),
            smbios_config=nested(SMBiosConfiguration, "smbios"),
            supported_guest_agent_versions=list(data.get("supportedGuestAgentVersions") or []),
            mem_balloon_stats_period=_int_or_none(data.get("memBalloonStatsPeriod")),
            permitted_host_devices=nested(PermittedHostDevices, "permittedHostDevices"),
        )


@dataclass
class KubeVirtSpec:
    """How the operator should deploy the virtualization components."""

    image_tag: str = ""
    image_registry: str = ""
    image_pull_policy: str = ""
    monitor_namespace: str = ""
    monitor_account: str = ""
    uninstall_strategy: UninstallStrategy | None = None
    certificate_rotation_self_signed: SelfSignConfiguration | None = None
    product_version: str = ""
    product_name: str = ""
    configuration: KubeVirtConfiguration = field(default_factory=KubeVirtConfiguration)
    infra: dict[str, Any] | None = None
    workloads: dict[str, Any] | None = None
    customize_components: list[CustomizeComponentsPatch] = field(default_factory=list)

    def _to_dict(self) -> dict[str, Any]:
        result = _omit_empty(
            {
                "imageTag": self.image_tag,
                "imageRegistry": self.image_registry,
                "imagePullPolicy": self.image_pull_policy,
                "monitorNamespace": self.monitor_namespace,
                "monitorAccount": self.monitor_account,
                "uninstallStrategy": None
                if self.uninstall_strategy is None
                else str(self.uninstall_strategy),
                "productVersion": self.product_version,
                "productName": self.product_name,
            }
        )
        rotation: dict[str, Any] = {}
        if self.certificate_rotation_self_signed is not None:
            rotation["selfSigned"] = self.certificate_rotation_self_signed._to_dict()
        result["certificateRotateStrategy"] = rotation
        result["configuration"] = self.configuration._to_dict()
        result.update(_omit_none({"infra": self.infra, "workloads": self.workloads}))
        customize: dict[str, Any] = {}
        if self.customize_components:
            customize["patches"] = [p._to_dict() for p in self.customize_components]
        result["customizeComponents"] = customize
        return result

    @classmethod
    def _from_dict(cls, data: dict[str, Any] | None) -> KubeVirtSpec:
        data = data or {}
        self_signed = (data.get("certificateRotateStrategy") or {}).get("selfSigned")
        patches = (data.get("customizeComponents") or {}).get("patches") or []
        return cls(
            image_tag=data.get("imageTag", ""),
            image_registry=data.get("imageRegistry", ""),
            image_pull_policy=data.get("imagePullPolicy", ""),
            monitor_namespace=data.get("monitorNamespace", ""),
            monitor_account=data.get("monitorAccount", ""),
            uninstall_strategy=_enum_or_none(UninstallStrategy, data.get("uninstallStrategy")),
            certificate_rotation_self_signed=None
            if self_signed is None
            else SelfSignConfiguration._from_dict(self_signed),
            product_version=data.get("productVersion", ""),
            product_name=data.get("productName", ""),
            configuration=KubeVirtConfiguration._from_dict(data.get("configuration")),
            infra=data.get("infra"),
            workloads=data.get("workloads"),
            customize_components=[CustomizeComponentsPatch._from_dict(p) for p in patches],
        )


_STATUS_KEYS = (
    ("operator_version", "operatorVersion"),
    ("target_kubevirt_registry", "targetKubeVirtRegistry"),
    ("target_kubevirt_version", "targetKubeVirtVersion"),
    ("target_deployment_config", "targetDeploymentConfig"),
    ("target_deployment_id", "targetDeploymentID"),
    ("observed_kubevirt_registry", "observedKubeVirtRegistry"),
    ("observed_kubevirt_version", "observedKubeVirtVersion"),
    ("observed_deployment_config", "observedDeploymentConfig"),
    ("observed_deployment_id", "observedDeploymentID"),
)


@dataclass
class KubeVirtStatus:
    """What the operator reports about a deployment."""

    phase: KubeVirtPhase | None = None
    conditions: list[Condition] = field(default_factory=list)
    operator_version: str = ""
    target_kubevirt_registry: str = ""
    target_kubevirt_version: str = ""
    target_deployment_config: str = ""
    target_deployment_id: str = ""
    observed_kubevirt_registry: str = ""
    observed_kubevirt_version: str = ""
    observed_deployment_config: str = ""
    observed_deployment_id: str = ""

    def _to_dict(self) -> dict[str, Any]:
        values: dict[str, Any] = {
            "phase": None if self.phase is None else str(self.phase),
            "conditions": [_condition_to_dict(c) for c in self.conditions],
        }
        values.update({key: getattr(self, attr) for attr, key in _STATUS_KEYS})
        return _omit_empty(values)

    @classmethod
    def _from_dict(cls, data: dict[str, Any] | None) -> KubeVirtStatus:
        data = data or {}
        return cls(
            phase=_enum_or_none(KubeVirtPhase, data.get("phase")),
            conditions=[_condition_from_dict(c) for c in data.get("conditions") or []],
            **{attr: data.get(key, "") for attr, key in _STATUS_KEYS},
        )


@dataclass
class KubeVirt:
    """The object from which the operator deploys all virtualization resources."""

    metadata: ObjectMeta = field(default_factory=ObjectMeta)
    spec: KubeVirtSpec = field(default_factory=KubeVirtSpec)
    status: KubeVirtStatus = field(default_factory=KubeVirtStatus)
    api_version: str = ""
    kind: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the wire form."""
        result = _omit_empty({"apiVersion": self.api_version, "kind": self.kind})
        metadata = self.metadata.to_dict()
        if metadata:
            result["metadata"] = metadata
        result["spec"] = self.spec._to_dict()
        result["status"] = self.status._to_dict()
        return result

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> KubeVirt:
        """Build from the wire form; unknown enumeration values raise ValueError."""
        if not isinstance(data, dict):
            raise TypeError("a KubeVirt object must be a mapping")
        return cls(
            metadata=ObjectMeta.from_dict(data.get("metadata")),
            spec=KubeVirtSpec._from_dict(data.get("spec")),
            status=KubeVirtStatus._from_dict(data.get("status")),
            api_version=data.get("apiVersion", ""),
            kind=data.get("kind", ""),
        )


@dataclass
class RestartOptions:
    """Options of a restart; a grace period of zero restarts immediately."""

    grace_period_seconds: int | None = None
    api_version: str = ""
    kind: str = ""


@dataclass
class GuestOSUser:
    """A user logged in to the guest."""

    user_name: str
    domain: str = ""
    login_time: float = 0.0

    @classmethod
    def _from_dict(cls, data: dict[str, Any]) -> GuestOSUser:
        return cls(
            user_name=data.get("userName", ""),
            domain=data.get("domain", ""),
            login_time=float(data.get("loginTime", 0.0)),
        )


@dataclass
class GuestFileSystem:
    """A mounted guest file system and its usage."""

    disk_name: str
    mount_point: str
    file_system_type: str
    used_bytes: int = 0
    total_bytes: int = 0

    @classmethod
    def _from_dict(cls, data: dict[str, Any]) -> GuestFileSystem:
        return cls(
            disk_name=data.get("diskName", ""),
            mount_point=data.get("mountPoint", ""),
            file_system_type=data.get("fileSystemType", ""),
            used_bytes=int(data.get("usedBytes", 0)),
            total_bytes=int(data.get("totalBytes", 0)),
        )


@dataclass
class GuestAgentInfo:
    """Information reported by the agent installed in the guest."""

    ga_version: str = ""
    hostname: str = ""
    os: GuestOSInfo = field(default_factory=GuestOSInfo)
    timezone: str = ""
    user_list: list[GuestOSUser] = field(default_factory=list)
    filesystems: list[GuestFileSystem] = field(default_factory=list)
    api_version: str = ""
    kind: str = ""

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> GuestAgentInfo:
        """Build from the wire form reported by the guest agent."""
        fs_info = data.get("fsInfo") or {}
        return cls(
            ga_version=data.get("guestAgentVersion", ""),
            hostname=data.get("hostname", ""),
            os=GuestOSInfo._from_dict(data.get("os")),
            timezone=data.get("timezone", ""),
            user_list=[GuestOSUser._from_dict(u) for u in data.get("userList") or []],
            filesystems=[GuestFileSystem._from_dict(d) for d in fs_info.get("disks") or []],
            api_version=data.get("apiVersion", ""),
            kind=data.get("kind", ""),
        )


@dataclass
class RenameOptions:
    """Options of a rename operation."""

    new_name: str
    old_name: str | None = None
    api_version: str = ""
    kind: str = ""


@dataclass
class AddVolumeOptions:
    """A volume and disk to hot-plug; disk and source are kept in wire form."""

    name: str
    disk: dict[str, Any] | None = None
    volume_source: dict[str, Any] | None = None


@dataclass
class RemoveVolumeOptions:
    """The name of the disk and volume to hot-unplug."""

    name: str