"""Virtual machine instances: their specification, status and helper constructors."""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, TypeVar

from kubevirt_api.constants import (
    NAMESPACE_DEFAULT,
    ConditionStatus,
    EvictionStrategy,
    MigrationAbortStatus,
    MigrationMethod,
    MigrationMode,
    VirtualMachineInstanceConditionType,
    VirtualMachineInstancePhase,
    VolumePhase,
)
from kubevirt_api.meta import (
    GROUP_VERSION,
    NODE_SELECTOR_OP_NOT_IN,
    RESOURCE_MEMORY,
    Affinity,
    Condition,
    ListMeta,
    NodeAffinity,
    NodeSelector,
    NodeSelectorRequirement,
    NodeSelectorTerm,
    ObjectMeta,
    Pod,
    ResourceRequirements,
)
from kubevirt_api.quantity import Quantity, parse_quantity

KIND = "VirtualMachineInstance"
HOSTNAME_LABEL = "kubernetes.io/hostname"

_TIME_FORMAT = "%Y-%m-%dT%H:%M:%SZ"
_E = TypeVar("_E", bound=Enum)


def _empty(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, (str, bool, int, float, list, dict)):
        return not value
    return False


def _omit_empty(data: dict[str, Any]) -> dict[str, Any]:
    return {key: value for key, value in data.items() if not _empty(value)}


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


def _enum_or_none(enum_cls: type[_E], value: Any) -> _E | None:
    if value is None:
        return None
    return enum_cls(value)


def _enum_or_raw(enum_cls: type[_E], value: str) -> _E | str:
    try:
        return enum_cls(value)
    except ValueError:
        return value


def _resources_to_dict(resources: ResourceRequirements) -> dict[str, Any]:
    return _omit_empty(
        {
            "requests": {name: str(q) for name, q in resources.requests.items()},
            "limits": {name: str(q) for name, q in resources.limits.items()},
        }
    )


def _resources_from_dict(data: dict[str, Any] | None) -> ResourceRequirements:
    data = data or {}
    return ResourceRequirements(
        requests={k: parse_quantity(str(v)) for k, v in (data.get("requests") or {}).items()},
        limits={k: parse_quantity(str(v)) for k, v in (data.get("limits") or {}).items()},
    )


def _requirement_to_dict(requirement: NodeSelectorRequirement) -> dict[str, Any]:
    return _omit_empty(
        {"key": requirement.key, "operator": requirement.operator, "values": list(requirement.values)}
    )


def _requirement_from_dict(data: dict[str, Any]) -> NodeSelectorRequirement:
    return NodeSelectorRequirement(
        key=data.get("key", ""),
        operator=data.get("operator", ""),
        values=list(data.get("values") or []),
    )


def _term_to_dict(term: NodeSelectorTerm) -> dict[str, Any]:
    result: dict[str, Any] = {}
    if term.match_expressions:
        result["matchExpressions"] = [_requirement_to_dict(r) for r in term.match_expressions]
    if term.match_fields:
        result["matchFields"] = [_requirement_to_dict(r) for r in term.match_fields]
    return result


def _term_from_dict(data: dict[str, Any]) -> NodeSelectorTerm:
    expressions = data.get("matchExpressions")
    fields = data.get("matchFields")
    return NodeSelectorTerm(
        match_expressions=None if expressions is None else [_requirement_from_dict(r) for r in expressions],
        match_fields=None if fields is None else [_requirement_from_dict(r) for r in fields],
    )


def _affinity_to_dict(affinity: Affinity) -> dict[str, Any]:
    result: dict[str, Any] = {}
    node_affinity = affinity.node_affinity
    if node_affinity is not None:
        node: dict[str, Any] = {}
        required = node_affinity.required_during_scheduling_ignored_during_execution
        if required is not None:
            node["requiredDuringSchedulingIgnoredDuringExecution"] = {
                "nodeSelectorTerms": [_term_to_dict(t) for t in required.node_selector_terms]
            }
        if node_affinity.preferred_during_scheduling_ignored_during_execution:
            node["preferredDuringSchedulingIgnoredDuringExecution"] = list(
                node_affinity.preferred_during_scheduling_ignored_during_execution
            )
        result["nodeAffinity"] = node
    if affinity.pod_affinity is not None:
        result["podAffinity"] = dict(affinity.pod_affinity)
    if affinity.pod_anti_affinity is not None:
        result["podAntiAffinity"] = dict(affinity.pod_anti_affinity)
    return result


def _affinity_from_dict(data: dict[str, Any] | None) -> Affinity | None:
    if data is None:
        return None
    node_affinity = None
    node = data.get("nodeAffinity")
    if node is not None:
        required = node.get("requiredDuringSchedulingIgnoredDuringExecution")
        node_affinity = NodeAffinity(
            required_during_scheduling_ignored_during_execution=None
            if required is None
            else NodeSelector([_term_from_dict(t) for t in required.get("nodeSelectorTerms") or []]),
            preferred_during_scheduling_ignored_during_execution=list(
                node.get("preferredDuringSchedulingIgnoredDuringExecution") or []
            ),
        )
    pod_affinity = data.get("podAffinity")
    pod_anti_affinity = data.get("podAntiAffinity")
    return Affinity(
        node_affinity=node_affinity,
        pod_affinity=None if pod_affinity is None else dict(pod_affinity),
        pod_anti_affinity=None if pod_anti_affinity is None else dict(pod_anti_affinity),
    )


def _condition_to_dict(condition: Condition) -> dict[str, Any]:
    return _omit_empty(
        {
            "type": str(condition.type),
            "status": str(condition.status),
            "lastProbeTime": _time_to_str(condition.last_probe_time),
            "lastTransitionTime": _time_to_str(condition.last_transition_time),
            "reason": condition.reason,
            "message": condition.message,
        }
    ) | {"type": str(condition.type), "status": str(condition.status)}


def _condition_from_dict(data: dict[str, Any]) -> Condition:
    return Condition(
        type=_enum_or_raw(VirtualMachineInstanceConditionType, data.get("type", "")),
        status=ConditionStatus(data.get("status", "Unknown")),
        last_probe_time=_time_from_str(data.get("lastProbeTime")),
        last_transition_time=_time_from_str(data.get("lastTransitionTime")),
        reason=data.get("reason", ""),
        message=data.get("message", ""),
    )


@dataclass
class CPU:
    """Virtual CPU topology and placement of an instance."""

    cores: int = 0
    sockets: int = 0
    threads: int = 0
    model: str = ""
    dedicated_cpu_placement: bool = False

    def _to_dict(self) -> dict[str, Any]:
        return _omit_empty(
            {
                "cores": self.cores,
                "sockets": self.sockets,
                "threads": self.threads,
                "model": self.model,
                "dedicatedCpuPlacement": self.dedicated_cpu_placement,
            }
        )

    @classmethod
    def _from_dict(cls, data: dict[str, Any]) -> CPU:
        return cls(
            cores=int(data.get("cores", 0)),
            sockets=int(data.get("sockets", 0)),
            threads=int(data.get("threads", 0)),
            model=data.get("model", ""),
            dedicated_cpu_placement=bool(data.get("dedicatedCpuPlacement", False)),
        )


@dataclass
class DomainSpec:
    """The virtual hardware of an instance; fields not modelled here are kept in ``extra``."""

    resources: ResourceRequirements = field(default_factory=ResourceRequirements)
    cpu: CPU | None = None
    extra: dict[str, Any] = field(default_factory=dict)

    def _to_dict(self) -> dict[str, Any]:
        result = dict(self.extra)
        result["resources"] = _resources_to_dict(self.resources)
        if self.cpu is not None:
            result["cpu"] = self.cpu._to_dict()
        return result

    @classmethod
    def _from_dict(cls, data: dict[str, Any] | None) -> DomainSpec:
        data = dict(data or {})
        resources = _resources_from_dict(data.pop("resources", None))
        cpu_data = data.pop("cpu", None)
        return cls(
            resources=resources,
            cpu=None if cpu_data is None else CPU._from_dict(cpu_data),
            extra=data,
        )


@dataclass
class HotplugVolumeStatus:
    """The pod that attaches a hot-plugged volume to the node."""

    attach_pod_name: str = ""
    attach_pod_uid: str = ""

    def _to_dict(self) -> dict[str, Any]:
        return _omit_empty({"attachPodName": self.attach_pod_name, "attachPodUID": self.attach_pod_uid})

    @classmethod
    def _from_dict(cls, data: dict[str, Any]) -> HotplugVolumeStatus:
        return cls(attach_pod_name=data.get("attachPodName", ""), attach_pod_uid=data.get("attachPodUID", ""))


@dataclass
class VolumeStatus:
    """The state of one volume attached to an instance."""

    name: str
    target: str
    phase: VolumePhase | None = None
    reason: str = ""
    message: str = ""
    hotplug_volume: HotplugVolumeStatus | None = None

    def _to_dict(self) -> dict[str, Any]:
        result = {"name": self.name, "target": self.target}
        result.update(
            _omit_empty(
                {
                    "phase": None if self.phase is None else str(self.phase),
                    "reason": self.reason,
                    "message": self.message,
                    "hotplugVolume": None if self.hotplug_volume is None else self.hotplug_volume._to_dict(),
                }
            )
        )
        return result

    @classmethod
    def _from_dict(cls, data: dict[str, Any]) -> VolumeStatus:
        hotplug = data.get("hotplugVolume")
        return cls(
            name=data.get("name", ""),
            target=data.get("target", ""),
            phase=_enum_or_none(VolumePhase, data.get("phase") or None),
            reason=data.get("reason", ""),
            message=data.get("message", ""),
            hotplug_volume=None if hotplug is None else HotplugVolumeStatus._from_dict(hotplug),
        )


@dataclass
class NetworkInterfaceStatus:
    """Addresses and names of one network interface of an instance."""

    ip: str = ""
    mac: str = ""
    name: str = ""
    ips: list[str] = field(default_factory=list)
    interface_name: str = ""

    def _to_dict(self) -> dict[str, Any]:
        return _omit_empty(
            {
                "ipAddress": self.ip,
                "mac": self.mac,
                "name": self.name,
                "ipAddresses": list(self.ips),
                "interfaceName": self.interface_name,
            }
        )

    @classmethod
    def _from_dict(cls, data: dict[str, Any]) -> NetworkInterfaceStatus:
        return cls(
            ip=data.get("ipAddress", ""),
            mac=data.get("mac", ""),
            name=data.get("name", ""),
            ips=list(data.get("ipAddresses") or []),
            interface_name=data.get("interfaceName", ""),
        )


_GUEST_OS_KEYS = (
    ("name", "name"),
    ("kernel_release", "kernelRelease"),
    ("version", "version"),
    ("pretty_name", "prettyName"),
    ("version_id", "versionId"),
    ("kernel_version", "kernelVersion"),
    ("machine", "machine"),
    ("id", "id"),
)


@dataclass
class GuestOSInfo:
    """Operating system details reported by the guest."""

    name: str = ""
    kernel_release: str = ""
    version: str = ""
    pretty_name: str = ""
    version_id: str = ""
    kernel_version: str = ""
    machine: str = ""
    id: str = ""

    def _to_dict(self) -> dict[str, Any]:
        return _omit_empty({key: getattr(self, attr) for attr, key in _GUEST_OS_KEYS})

    @classmethod
    def _from_dict(cls, data: dict[str, Any] | None) -> GuestOSInfo:
        data = data or {}
        return cls(**{attr: data.get(key, "") for attr, key in _GUEST_OS_KEYS})


@dataclass
class MigrationState:
    """Progress of a live migration of an instance."""

    start_timestamp: datetime | None = None
    end_timestamp: datetime | None = None
    target_node_domain_detected: bool = False
    target_node_address: str = ""
    target_direct_migration_node_ports: dict[str, int] = field(default_factory=dict)
    target_node: str = ""
    target_pod: str = ""
    source_node: str = ""
    completed: bool = False
    failed: bool = False
    abort_requested: bool = False
    abort_status: MigrationAbortStatus | None = None
    migration_uid: str = ""
    mode: MigrationMode | None = None

    def _to_dict(self) -> dict[str, Any]:
        return _omit_empty(
            {
                "startTimestamp": _time_to_str(self.start_timestamp),
                "endTimestamp": _time_to_str(self.end_timestamp),
                "targetNodeDomainDetected": self.target_node_domain_detected,
                "targetNodeAddress": self.target_node_address,
                "targetDirectMigrationNodePorts": dict(self.target_direct_migration_node_ports),
                "targetNode": self.target_node,
                "targetPod": self.target_pod,
                "sourceNode": self.source_node,
                "completed": self.completed,
                "failed": self.failed,
                "abortRequested": self.abort_requested,
                "abortStatus": None if self.abort_status is None else str(self.abort_status),
                "migrationUid": self.migration_uid,
                "mode": None if self.mode is None else str(self.mode),
            }
        )

    @classmethod
    def _from_dict(cls, data: dict[str, Any]) -> MigrationState:
        return cls(
            start_timestamp=_time_from_str(data.get("startTimestamp")),
            end_timestamp=_time_from_str(data.get("endTimestamp")),
            target_node_domain_detected=bool(data.get("targetNodeDomainDetected", False)),
            target_node_address=data.get("targetNodeAddress", ""),
            target_direct_migration_node_ports={
                k: int(v) for k, v in (data.get("targetDirectMigrationNodePorts") or {}).items()
            },
            target_node=data.get("targetNode", ""),
            target_pod=data.get("targetPod", ""),
            source_node=data.get("sourceNode", ""),
            completed=bool(data.get("completed", False)),
            failed=bool(data.get("failed", False)),
            abort_requested=bool(data.get("abortRequested", False)),
            abort_status=_enum_or_none(MigrationAbortStatus, data.get("abortStatus") or None),
            migration_uid=data.get("migrationUid", ""),
            mode=_enum_or_none(MigrationMode, data.get("mode") or None),
        )


@dataclass
class VirtualMachineInstanceSpec:
    """The desired shape and placement of an instance."""

    domain: DomainSpec = field(default_factory=DomainSpec)
    priority_class_name: str = ""
    node_selector: dict[str, str] = field(default_factory=dict)
    affinity: Affinity | None = None
    scheduler_name: str = ""
    tolerations: list[dict[str, Any]] = field(default_factory=list)
    eviction_strategy: EvictionStrategy | None = None
    termination_grace_period_seconds: int | None = None
    volumes: list[dict[str, Any]] = field(default_factory=list)
    liveness_probe: dict[str, Any] | None = None
    readiness_probe: dict[str, Any] | None = None
    hostname: str = ""
    subdomain: str = ""
    networks: list[dict[str, Any]] = field(default_factory=list)
    dns_policy: str = ""
    dns_config: dict[str, Any] | None = None
    access_credentials: list[dict[str, Any]] = field(default_factory=list)

    def _to_dict(self) -> dict[str, Any]:
        result = _omit_empty(
            {
                "priorityClassName": self.priority_class_name,
                "nodeSelector": dict(self.node_selector),
                "affinity": None if self.affinity is None else _affinity_to_dict(self.affinity),
                "schedulerName": self.scheduler_name,
                "tolerations": list(self.tolerations),
                "evictionStrategy": None if self.eviction_strategy is None else str(self.eviction_strategy),
                "volumes": list(self.volumes),
                "livenessProbe": self.liveness_probe,
                "readinessProbe": self.readiness_probe,
                "hostname": self.hostname,
                "subdomain": self.subdomain,
                "networks": list(self.networks),
                "dnsPolicy": self.dns_policy,
                "dnsConfig": self.dns_config,
                "accessCredentials": list(self.access_credentials),
            }
        )
        if self.affinity is not None:
            result["affinity"] = _affinity_to_dict(self.affinity)
        if self.termination_grace_period_seconds is not None:
            result["terminationGracePeriodSeconds"] = self.termination_grace_period_seconds
        result["domain"] = self.domain._to_dict()
        return result

    @classmethod
    def _from_dict(cls, data: dict[str, Any] | None) -> VirtualMachineInstanceSpec:
        data = data or {}
        grace = data.get("terminationGracePeriodSeconds")
        return cls(
            domain=DomainSpec._from_dict(data.get("domain")),
            priority_class_name=data.get("priorityClassName", ""),
            node_selector=dict(data.get("nodeSelector") or {}),
            affinity=_affinity_from_dict(data.get("affinity")),
            scheduler_name=data.get("schedulerName", ""),
            tolerations=list(data.get("tolerations") or []),
            eviction_strategy=_enum_or_none(EvictionStrategy, data.get("evictionStrategy")),
            termination_grace_period_seconds=None if grace is None else int(grace),
            volumes=list(data.get("volumes") or []),
            liveness_probe=data.get("livenessProbe"),
            readiness_probe=data.get("readinessProbe"),
            hostname=data.get("hostname", ""),
            subdomain=data.get("subdomain", ""),
            networks=list(data.get("networks") or []),
            dns_policy=data.get("dnsPolicy", ""),
            dns_config=data.get("dnsConfig"),
            access_credentials=list(data.get("accessCredentials") or []),
        )


@dataclass
class VirtualMachineInstanceStatus:
    """What is currently known about a running or scheduled instance."""

    node_name: str = ""
    reason: str = ""
    conditions: list[Condition] = field(default_factory=list)
    phase: VirtualMachineInstancePhase = VirtualMachineInstancePhase.UNSET
    interfaces: list[NetworkInterfaceStatus] = field(default_factory=list)
    guest_os_info: GuestOSInfo = field(default_factory=GuestOSInfo)
    migration_state: MigrationState | None = None
    migration_method: MigrationMethod | None = None
    qos_class: str | None = None
    evacuation_node_name: str = ""
    active_pods: dict[str, str] = field(default_factory=dict)
    volume_status: list[VolumeStatus] = field(default_factory=list)

    def _to_dict(self) -> dict[str, Any]:
        result = _omit_empty(
            {
                "nodeName": self.node_name,
                "reason": self.reason,
                "conditions": [_condition_to_dict(c) for c in self.conditions],
                "phase": str(self.phase),
                "interfaces": [i._to_dict() for i in self.interfaces],
                "migrationState": None if self.migration_state is None else self.migration_state._to_dict(),
                "migrationMethod": None if self.migration_method is None else str(self.migration_method),
                "qosClass": self.qos_class,
                "evacuationNodeName": self.evacuation_node_name,
                "activePods": dict(self.active_pods),
                "volumeStatus": [v._to_dict() for v in self.volume_status],
            }
        )
        result["guestOSInfo"] = self.guest_os_info._to_dict()
        return result

    @classmethod
    def _from_dict(cls, data: dict[str, Any] | None) -> VirtualMachineInstanceStatus:
        data = data or {}
        migration_state = data.get("migrationState")
        return cls(
            node_name=data.get("nodeName", ""),
            reason=data.get("reason", ""),
            conditions=[_condition_from_dict(c) for c in data.get("conditions") or []],
            phase=VirtualMachineInstancePhase(data.get("phase", "")),
            interfaces=[NetworkInterfaceStatus._from_dict(i) for i in data.get("interfaces") or []],
            guest_os_info=GuestOSInfo._from_dict(data.get("guestOSInfo")),
            migration_state=None if migration_state is None else MigrationState._from_dict(migration_state),
            migration_method=_enum_or_none(MigrationMethod, data.get("migrationMethod") or None),
            qos_class=data.get("qosClass"),
            evacuation_node_name=data.get("evacuationNodeName", ""),
            active_pods=dict(data.get("activePods") or {}),
            volume_status=[VolumeStatus._from_dict(v) for v in data.get("volumeStatus") or []],
        )


@dataclass
class VirtualMachineInstance:
    """A virtual machine in the runtime environment of the cluster."""

    metadata: ObjectMeta = field(default_factory=ObjectMeta)
    spec: VirtualMachineInstanceSpec = field(default_factory=VirtualMachineInstanceSpec)
    status: VirtualMachineInstanceStatus = field(default_factory=VirtualMachineInstanceStatus)
    api_version: str = ""
    kind: str = ""

    def is_scheduling(self) -> bool:
        return self.status.phase == VirtualMachineInstancePhase.SCHEDULING

    def is_scheduled(self) -> bool:
        return self.status.phase == VirtualMachineInstancePhase.SCHEDULED

    def is_running(self) -> bool:
        return self.status.phase == VirtualMachineInstancePhase.RUNNING

    def is_marked_for_eviction(self) -> bool:
        return self.status.evacuation_node_name != ""

    def is_migratable(self) -> bool:
        return any(
            cond.type == VirtualMachineInstanceConditionType.IS_MIGRATABLE
            and cond.status == ConditionStatus.TRUE
            for cond in self.status.conditions
        )

    def is_evictable(self) -> bool:
        return self.spec.eviction_strategy == EvictionStrategy.LIVE_MIGRATE

    def is_final(self) -> bool:
        return self.status.phase in (
            VirtualMachineInstancePhase.FAILED,
            VirtualMachineInstancePhase.SUCCEEDED,
        )

    def is_unknown(self) -> bool:
        return self.status.phase == VirtualMachineInstancePhase.UNKNOWN

    def is_unprocessed(self) -> bool:
        return self.status.phase in (
            VirtualMachineInstancePhase.PENDING,
            VirtualMachineInstancePhase.UNSET,
        )

    def is_cpu_dedicated(self) -> bool:
        """Whether CPU pinning has been requested."""
        cpu = self.spec.domain.cpu
        return cpu is not None and cpu.dedicated_cpu_placement

    def wants_qos_guaranteed(self) -> bool:
        """Whether CPU and memory requests equal their limits, both non-zero."""
        resources = self.spec.domain.resources
        memory = resources.memory("requests")
        cpu = resources.cpu("requests")
        return (
            not memory.is_zero()
            and memory.compare(resources.memory("limits")) == 0
            and not cpu.is_zero()
            and cpu.compare(resources.cpu("limits")) == 0
        )

    def _to_dict(self) -> dict[str, Any]:
        result = _omit_empty({"apiVersion": self.api_version, "kind": self.kind})
        metadata = self.metadata.to_dict()
        if metadata:
            result["metadata"] = metadata
        result["spec"] = self.spec._to_dict()
        result["status"] = self.status._to_dict()
        return result

    @classmethod
    def _from_dict(cls, data: dict[str, Any]) -> VirtualMachineInstance:
        return cls(
            metadata=ObjectMeta.from_dict(data.get("metadata")),
            spec=VirtualMachineInstanceSpec._from_dict(data.get("spec")),
            status=VirtualMachineInstanceStatus._from_dict(data.get("status")),
            api_version=data.get("apiVersion", ""),
            kind=data.get("kind", ""),
        )

    def to_json(self) -> str:
        """Serialize the instance to its JSON wire form."""
        return json.dumps(self._to_dict())

    @classmethod
    def from_json(cls, data: str | bytes) -> VirtualMachineInstance:
        """Build an instance from its JSON wire form."""
        decoded = json.loads(data)
        if not isinstance(decoded, dict):
            raise ValueError("a virtual machine instance must be a JSON object")
        return cls._from_dict(decoded)


@dataclass
class VirtualMachineInstanceList:
    """A list of virtual machine instances."""

    items: list[VirtualMachineInstance] = field(default_factory=list)
    metadata: ListMeta = field(default_factory=ListMeta)
    api_version: str = ""
    kind: str = ""

    def __iter__(self):
        return iter(self.items)

    def __len__(self) -> int:
        return len(self.items)


def new_vmi(name: str, uid: str) -> VirtualMachineInstance:
    """A new instance in the default namespace with the given name and UID."""
    return VirtualMachineInstance(
        metadata=ObjectMeta(name=name, uid=uid, namespace=NAMESPACE_DEFAULT),
        api_version=str(GROUP_VERSION),
        kind=KIND,
    )


def new_vmi_reference(name: str, namespace: str = NAMESPACE_DEFAULT) -> VirtualMachineInstance:
    """An instance that only names and locates an object, with its self link set."""
    self_link = f"/apis/{GROUP_VERSION}/namespaces/{namespace}/virtualmachineinstances/{name}"
    return VirtualMachineInstance(
        metadata=ObjectMeta(name=name, namespace=namespace, self_link=self_link),
        api_version=str(GROUP_VERSION),
        kind=KIND,
    )


def new_vmi_reference_with_uuid(namespace: str, name: str, uid: str) -> VirtualMachineInstance:
    """A reference instance that also carries a UID."""
    vmi = new_vmi_reference(name, namespace)
    vmi.metadata.uid = uid
    return vmi


def new_minimal_vmi(name: str, namespace: str = NAMESPACE_DEFAULT) -> VirtualMachineInstance:
    """A reference instance requesting 8192Ki of memory; the name must not be empty."""
    if not name:
        raise ValueError("name must not be empty")
    vmi = new_vmi_reference(name, namespace)
    vmi.spec = VirtualMachineInstanceSpec(domain=DomainSpec())
    vmi.spec.domain.resources.requests = {RESOURCE_MEMORY: parse_quantity("8192Ki")}
    vmi.api_version = str(GROUP_VERSION)
    vmi.kind = KIND
    return vmi


def prepare_vmi_node_anti_affinity_requirement(vmi: VirtualMachineInstance) -> NodeSelectorRequirement:
    """A requirement that keeps a pod off the node the instance runs on."""
    return NodeSelectorRequirement(
        key=HOSTNAME_LABEL,
        operator=NODE_SELECTOR_OP_NOT_IN,
        values=[vmi.status.node_name],
    )


def update_anti_affinity_from_vmi_node(pod: Pod, vmi: VirtualMachineInstance) -> Affinity:
    """Add anti-affinity for the instance's node to every required node selector term of the pod."""
    spec = pod.spec
    if spec.affinity is None:
        spec.affinity = Affinity()
    if spec.affinity.node_affinity is None:
        spec.affinity.node_affinity = NodeAffinity()
    node_affinity = spec.affinity.node_affinity
    if node_affinity.required_during_scheduling_ignored_during_execution is None:
        node_affinity.required_during_scheduling_ignored_during_execution = NodeSelector()

    selector = node_affinity.required_during_scheduling_ignored_during_execution
    if not selector.node_selector_terms:
        selector.node_selector_terms.append(NodeSelectorTerm())

    for term in selector.node_selector_terms:
        if term.match_expressions is None:
            term.match_expressions = []
        term.match_expressions.append(prepare_vmi_node_anti_affinity_requirement(vmi))

    return spec.affinity


__all__ = [
    "CPU",
    "DomainSpec",
    "GuestOSInfo",
    "HotplugVolumeStatus",
    "MigrationState",
    "NetworkInterfaceStatus",
    "Quantity",
    "VirtualMachineInstance",
    "VirtualMachineInstanceList",
    "VirtualMachineInstanceSpec",
    "VirtualMachineInstanceStatus",
    "VolumeStatus",
    "new_minimal_vmi",
    "new_vmi",
    "new_vmi_reference",
    "new_vmi_reference_with_uuid",
    "prepare_vmi_node_anti_affinity_requirement",
    "update_anti_affinity_from_vmi_node",
]