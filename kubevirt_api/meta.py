"""Object metadata, group versions, resource requirements and node affinity types."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

from kubevirt_api.constants import APP_LABEL, ConditionStatus
from kubevirt_api.quantity import Quantity

RESOURCE_CPU = "cpu"
RESOURCE_MEMORY = "memory"

NODE_SELECTOR_OP_IN = "In"
NODE_SELECTOR_OP_NOT_IN = "NotIn"
NODE_SELECTOR_OP_EXISTS = "Exists"
NODE_SELECTOR_OP_DOES_NOT_EXIST = "DoesNotExist"
NODE_SELECTOR_OP_GT = "Gt"
NODE_SELECTOR_OP_LT = "Lt"

_TIME_FORMAT = "%Y-%m-%dT%H:%M:%SZ"


def _format_time(moment: datetime) -> str:
    if moment.tzinfo is not None:
        moment = moment.astimezone(timezone.utc)
    return moment.strftime(_TIME_FORMAT)


def _parse_time(text: str | None) -> datetime | None:
    if not text:
        return None
    return datetime.strptime(text, _TIME_FORMAT).replace(tzinfo=timezone.utc)


@dataclass(frozen=True)
class GroupVersion:
    """An API group together with one of its versions."""

    group: str
    version: str

    def __str__(self) -> str:
        if not self.group:
            return self.version
        return f"{self.group}/{self.version}"

    def with_kind(self, kind: str) -> GroupVersionKind:
        return GroupVersionKind(self.group, self.version, kind)


@dataclass(frozen=True)
class GroupVersionKind:
    """A kind of object within an API group version."""

    group: str
    version: str
    kind: str


GROUP_VERSION = GroupVersion(APP_LABEL, "v1")


@dataclass
class TypeMeta:
    """The API version and kind of a serialized object."""

    api_version: str = ""
    kind: str = ""


@dataclass
class ObjectMeta:
    """Metadata that every persisted object carries."""

    name: str = ""
    generate_name: str = ""
    namespace: str = ""
    self_link: str = ""
    uid: str = ""
    resource_version: str = ""
    generation: int = 0
    creation_timestamp: datetime | None = None
    labels: dict[str, str] = field(default_factory=dict)
    annotations: dict[str, str] = field(default_factory=dict)
    finalizers: list[str] = field(default_factory=list)

    _KEYS = (
        ("name", "name"),
        ("generate_name", "generateName"),
        ("namespace", "namespace"),
        ("self_link", "selfLink"),
        ("uid", "uid"),
        ("resource_version", "resourceVersion"),
        ("generation", "generation"),
    )

    def to_dict(self) -> dict[str, Any]:
        """Serialize to the wire form, leaving out empty fields."""
        result: dict[str, Any] = {}
        for attr, key in self._KEYS:
            value = getattr(self, attr)
            if value:
                result[key] = value
        if self.creation_timestamp is not None:
            result["creationTimestamp"] = _format_time(self.creation_timestamp)
        if self.labels:
            result["labels"] = dict(self.labels)
        if self.annotations:
            result["annotations"] = dict(self.annotations)
        if self.finalizers:
            result["finalizers"] = list(self.finalizers)
        return result

    @classmethod
    def from_dict(cls, data: dict[str, Any] | None) -> ObjectMeta:
        """Build metadata from its wire form; missing fields take their defaults."""
        data = data or {}
        kwargs: dict[str, Any] = {
            attr: data[key] for attr, key in cls._KEYS if data.get(key) is not None
        }
        return cls(
            **kwargs,
            creation_timestamp=_parse_time(data.get("creationTimestamp")),
            labels=dict(data.get("labels") or {}),
            annotations=dict(data.get("annotations") or {}),
            finalizers=list(data.get("finalizers") or []),
        )


@dataclass
class ListMeta:
    """Metadata of a list of objects."""

    self_link: str = ""
    resource_version: str = ""
    continue_token: str = ""


@dataclass
class LabelSelector:
    """A label query: every label must match and every expression must hold."""

    match_labels: dict[str, str] = field(default_factory=dict)
    match_expressions: list[dict[str, Any]] = field(default_factory=list)


@dataclass
class Condition:
    """One observed condition of an object."""

    type: str
    status: ConditionStatus
    last_probe_time: datetime | None = None
    last_transition_time: datetime | None = None
    reason: str = ""
    message: str = ""


@dataclass
class ResourceRequirements:
    """Requested and limiting amounts of compute resources."""

    requests: dict[str, Quantity] = field(default_factory=dict)
    limits: dict[str, Quantity] = field(default_factory=dict)

    def _lookup(self, which: str, resource_name: str) -> Quantity:
        if which == "requests":
            table = self.requests
        elif which == "limits":
            table = self.limits
        else:
            raise ValueError(f"expected 'requests' or 'limits', got {which!r}")
        return table.get(resource_name, Quantity.zero())

    def memory(self, which: str = "requests") -> Quantity:
        """Memory in ``requests`` or ``limits``; zero when not given."""
        return self._lookup(which, RESOURCE_MEMORY)

    def cpu(self, which: str = "requests") -> Quantity:
        """CPU in ``requests`` or ``limits``; zero when not given."""
        return self._lookup(which, RESOURCE_CPU)


@dataclass
class NodeSelectorRequirement:
    """A key, an operator and the values the operator applies to."""

    key: str = ""
    operator: str = ""
    values: list[str] = field(default_factory=list)


@dataclass
class NodeSelectorTerm:
    """Requirements that must all hold for a node to match."""

    match_expressions: list[NodeSelectorRequirement] | None = None
    match_fields: list[NodeSelectorRequirement] | None = None


@dataclass
class NodeSelector:
    """Terms of which at least one must hold for a node to match."""

    node_selector_terms: list[NodeSelectorTerm] = field(default_factory=list)


@dataclass
class NodeAffinity:
    """Node scheduling rules."""

    required_during_scheduling_ignored_during_execution: NodeSelector | None = None
    preferred_during_scheduling_ignored_during_execution: list[dict[str, Any]] = field(
        default_factory=list
    )


@dataclass
class Affinity:
    """All scheduling affinity rules of a pod or instance."""

    node_affinity: NodeAffinity | None = None
    pod_affinity: dict[str, Any] | None = None
    pod_anti_affinity: dict[str, Any] | None = None


@dataclass
class PodSpec:
    """The parts of a pod specification this API works with."""

    affinity: Affinity | None = None
    node_selector: dict[str, str] = field(default_factory=dict)


@dataclass
class Pod:
    """A pod with its metadata and specification."""

    metadata: ObjectMeta = field(default_factory=ObjectMeta)
    spec: PodSpec = field(default_factory=PodSpec)