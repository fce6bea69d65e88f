import pytest

from kubevirt_api.constants import MigrationPhase, RunStrategy
from kubevirt_api.meta import LabelSelector
from kubevirt_api.vm import (
    MigrationStatus,
    RunStrategyConflictError,
    VirtualMachine,
    VirtualMachineInstanceMigration,
    VirtualMachineList,
    VirtualMachineSpec,
    new_virtual_machine_preset,
)


@pytest.fixture
def vm():
    return VirtualMachine(api_version="kubevirt.io/v1", kind="VirtualMachine")


def test_fails_if_both_running_and_run_strategy(vm):
    vm.spec.running = False
    vm.spec.run_strategy = RunStrategy.ALWAYS
    with pytest.raises(RunStrategyConflictError):
        vm.run_strategy()


def test_conflict_error_is_value_error(vm):
    vm.spec.running = True
    vm.spec.run_strategy = RunStrategy.HALTED
    with pytest.raises(ValueError, match="mutually exclusive"):
        vm.run_strategy()


def test_running_false_is_halted(vm):
    vm.spec.running = False
    assert vm.run_strategy() == RunStrategy.HALTED


def test_running_true_is_always(vm):
    vm.spec.running = True
    assert vm.run_strategy() == RunStrategy.ALWAYS


@pytest.mark.parametrize(
    "strategy",
    [RunStrategy.ALWAYS, RunStrategy.HALTED, RunStrategy.MANUAL, RunStrategy.RERUN_ON_FAILURE],
)
def test_returns_run_strategy(vm, strategy):
    vm.spec.run_strategy = strategy
    assert vm.run_strategy() == strategy


def test_defaults_to_halted(vm):
    assert vm.run_strategy() == RunStrategy.HALTED


def test_string_strategy_is_normalised():
    machine = VirtualMachine(spec=VirtualMachineSpec(run_strategy="Manual"))
    assert machine.run_strategy() is RunStrategy.MANUAL


def _migration(phase):
    return VirtualMachineInstanceMigration(status=MigrationStatus(phase=phase))


@pytest.mark.parametrize(
    "phase, final, running, created, handed_off",
    [
        (MigrationPhase.UNSET, False, False, False, False),
        (MigrationPhase.PENDING, False, False, False, False),
        (MigrationPhase.SCHEDULING, False, True, True, False),
        (MigrationPhase.SCHEDULED, False, True, True, False),
        (MigrationPhase.PREPARING_TARGET, False, True, True, True),
        (MigrationPhase.TARGET_READY, False, True, True, True),
        (MigrationPhase.RUNNING, False, True, True, True),
        (MigrationPhase.SUCCEEDED, True, False, True, True),
        (MigrationPhase.FAILED, True, False, True, True),
    ],
)
def test_migration_phase_predicates(phase, final, running, created, handed_off):
    migration = _migration(phase)
    assert migration.is_final() is final
    assert migration.is_running() is running
    assert migration.target_is_created() is created
    assert migration.target_is_handed_off() is handed_off


def test_new_virtual_machine_preset():
    selector = LabelSelector(match_labels={"flavor": "small"})
    preset = new_virtual_machine_preset("small", selector)
    assert preset.metadata.name == "small"
    assert preset.metadata.namespace == "default"
    assert preset.api_version == "kubevirt.io/v1"
    assert preset.kind == "VirtualMachineInstancePreset"
    assert preset.spec.selector.match_labels == {"flavor": "small"}
    assert preset.spec.domain is not None
    assert preset.spec.domain.cpu is None


def test_virtual_machine_list_iterates():
    machines = [VirtualMachine(), VirtualMachine()]
    listing = VirtualMachineList(items=machines)
    assert len(listing) == 2
    assert list(listing) == machines