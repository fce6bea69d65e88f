# kubevirt-api

Plain Python data models for the virtual machine API: virtual machine
instances, virtual machines, instance replica sets, presets, migrations, the
cluster-wide `KubeVirt` deployment object and the snapshot/restore API group.

The package has no runtime dependencies. Objects are dataclasses, and
enumerations are string-valued enums in `kubevirt_api.constants`.

## Installation

```
pip install .
```

## Modules

- `kubevirt_api.quantity` – `Quantity` and `parse_quantity()` for resource
  amounts such as `8192Ki`, `64M` or `500m`, held as exact fractions.
- `kubevirt_api.constants` – phases, condition types, run strategies and other
  enumerations, plus well-known label and annotation names.
- `kubevirt_api.meta` – `GroupVersion`, `ObjectMeta`, `ResourceRequirements`,
  node affinity types and a minimal `Pod`.
- `kubevirt_api.vmi` – `VirtualMachineInstance`, its spec and status, and
  helper constructors.
- `kubevirt_api.vm` – `VirtualMachine`, `VirtualMachineInstanceReplicaSet`,
  `VirtualMachineInstancePreset` and `VirtualMachineInstanceMigration`.
- `kubevirt_api.kubevirt` – the `KubeVirt` deployment object and its
  configuration, guest agent reports and volume hot-plug options.
- `kubevirt_api.snapshot` – snapshot, snapshot content and restore objects,
  and a small `Scheme` type registry.

## Usage

### Virtual machine instances

```python
from kubevirt_api.vmi import new_minimal_vmi, update_anti_affinity_from_vmi_node
from kubevirt_api.meta import Pod
from kubevirt_api.constants import VirtualMachineInstancePhase

vmi = new_minimal_vmi("testvmi")          # requests 8192Ki of memory
vmi.status.phase = VirtualMachineInstancePhase.RUNNING
assert vmi.is_running()

vmi.status.node_name = "test-node"
affinity = update_anti_affinity_from_vmi_node(Pod(), vmi)
term = affinity.node_affinity.required_during_scheduling_ignored_during_execution.node_selector_terms[0]
print(term.match_expressions[0].values)   # ['test-node']

text = vmi.to_json()
same = type(vmi).from_json(text)
```

`update_anti_affinity_from_vmi_node()` adds a `NotIn` requirement on
`kubernetes.io/hostname` to every required node selector term of the pod,
creating one term if there is none. `wants_qos_guaranteed()` reports whether
CPU and memory requests are non-zero and equal to their limits. Other checks
on an instance are `is_scheduling()`, `is_scheduled()`, `is_final()`,
`is_unknown()`, `is_unprocessed()`, `is_migratable()`, `is_evictable()`,
`is_marked_for_eviction()` and `is_cpu_dedicated()`.

`new_minimal_vmi()` raises `ValueError` when the name is empty.

### Virtual machines and run strategies

```python
from kubevirt_api.vm import VirtualMachine, RunStrategyConflictError
from kubevirt_api.constants import RunStrategy

vm = VirtualMachine()
vm.spec.running = True
assert vm.run_strategy() is RunStrategy.ALWAYS

vm.spec.run_strategy = RunStrategy.MANUAL
try:
    vm.run_strategy()
except RunStrategyConflictError:
    print("running and runStrategy are mutually exclusive")
```

`running=False` maps to `RunStrategy.HALTED`; with neither field set, the run
strategy is `RunStrategy.HALTED`.

### Migrations

`VirtualMachineInstanceMigration` offers `is_final()`, `is_running()`,
`target_is_created()` and `target_is_handed_off()`, all derived from the
migration phase.

### Cluster configuration

`kubevirt_api.kubevirt.KubeVirt` models the deployment object with its
configuration (migrations, developer options, network, SMBIOS, permitted host
devices) and converts to and from its wire form with `to_dict()` and
`KubeVirt.from_dict()`. `GuestAgentInfo.from_dict()` reads guest agent
reports, including users and file systems.

### Snapshots

```python
from kubevirt_api.snapshot import Scheme, SCHEME_GROUP_VERSION, add_to_scheme, kind, resource

scheme = Scheme()
add_to_scheme(scheme)
snapshot_type = scheme.lookup(SCHEME_GROUP_VERSION, "VirtualMachineSnapshot")
print(kind("VirtualMachineSnapshot"))       # VirtualMachineSnapshot.snapshot.kubevirt.io
print(resource("virtualmachinesnapshots"))  # virtualmachinesnapshots.snapshot.kubevirt.io
```

`Scheme.lookup()` raises `KeyError` for an unregistered kind, and
`Scheme.add_known_types()` raises `ValueError` when a different type is
registered again under the same kind.

## What this package does not do

It only models API objects. It has no client: it does not connect to a
cluster, and cannot list, create, update or delete objects there, nor open
consoles. Only `VirtualMachineInstance` (`to_json()` / `from_json()`) and
`KubeVirt` (`to_dict()` / `from_dict()`) convert to and from the wire form;
virtual machines, replica sets, presets, migrations and snapshot objects are
plain dataclasses without serialization. The domain specification keeps
everything other than resources and CPU as raw dictionaries.

## Running the tests

```
pip install .[test]
pytest
```