from datetime import datetime, timezone

import pytest

from kubevirt_api.constants import (
    ConditionStatus,
    KubeVirtConditionType,
    KubeVirtPhase,
    PatchType,
    UninstallStrategy,
)
from kubevirt_api.kubevirt import (
    CustomizeComponentsPatch,
    DeveloperConfiguration,
    GuestAgentInfo,
    KubeVirt,
    KubeVirtConfiguration,
    KubeVirtSpec,
    KubeVirtStatus,
    MediatedHostDevice,
    MigrationConfiguration,
    NetworkConfiguration,
    PciHostDevice,
    PermittedHostDevices,
    SelfSignConfiguration,
    SMBiosConfiguration,
)
from kubevirt_api.meta import Condition, ObjectMeta
from kubevirt_api.quantity import parse_quantity


def _full_kubevirt() -> KubeVirt:
    return KubeVirt(
        metadata=ObjectMeta(name="kubevirt", namespace="kubevirt"),
        api_version="kubevirt.io/v1",
        kind="KubeVirt",
        spec=KubeVirtSpec(
            image_tag="v0.35.0",
            image_registry="registry.example.com",
            image_pull_policy="IfNotPresent",
            monitor_namespace="openshift-monitor",
            monitor_account="prometheus-k8s",
            uninstall_strategy=UninstallStrategy.BLOCK_IF_WORKLOADS_EXIST,
            certificate_rotation_self_signed=SelfSignConfiguration(ca_rotate_interval="48h"),
            product_version="1.0",
            product_name="product",
            configuration=KubeVirtConfiguration(
                cpu_model="host-model",
                cpu_request=parse_quantity("100m"),
                developer_configuration=DeveloperConfiguration(
                    feature_gates=["LiveMigration"], memory_overcommit=150
                ),
                emulated_machines=["q35*"],
                migration_configuration=MigrationConfiguration(
                    bandwidth_per_migration=parse_quantity("64Mi"),
                    allow_post_copy=False,
                    parallel_migrations_per_cluster=5,
                ),
                network_configuration=NetworkConfiguration(
                    network_interface="bridge", permit_slirp_interface=True
                ),
                smbios_config=SMBiosConfiguration(manufacturer="Vendor", family="Family"),
                supported_guest_agent_versions=["4.*"],
                mem_balloon_stats_period=10,
                permitted_host_devices=PermittedHostDevices(
                    pci_host_devices=[PciHostDevice("10DE:1EB8", "nvidia.com/TU104GL")],
                    mediated_devices=[
                        MediatedHostDevice("GRID T4-1Q", "nvidia.com/GRID_T4-1Q", True)
                    ],
                ),
            ),
            infra={"nodePlacement": {"nodeSelector": {"role": "infra"}}},
            customize_components=[
                CustomizeComponentsPatch(
                    resource_name="virt-api",
                    resource_type="Deployment",
                    patch='{"spec":{"replicas":1}}',
                    type=PatchType.STRATEGIC_MERGE,
                )
            ],
        ),
        status=KubeVirtStatus(
            phase=KubeVirtPhase.DEPLOYED,
            conditions=[
                Condition(
                    type=KubeVirtConditionType.AVAILABLE,
                    status=ConditionStatus.TRUE,
                    last_transition_time=datetime(2020, 5, 1, 12, 0, 0, tzinfo=timezone.utc),
                    reason="AllComponentsReady",
                )
            ],
            operator_version="v0.35.0",
            observed_kubevirt_version="v0.35.0",
        ),
    )


def test_default_round_trip():
    original = KubeVirt()
    assert KubeVirt.from_dict(original.to_dict()) == original


def test_full_round_trip():
    original = _full_kubevirt()
    assert KubeVirt.from_dict(original.to_dict()) == original


def test_wire_keys_follow_the_api():
    data = _full_kubevirt().to_dict()
    configuration = data["spec"]["configuration"]
    assert "migrations" in configuration
    assert configuration["network"]["defaultNetworkInterface"] == "bridge"
    assert configuration["developerConfiguration"]["featureGates"] == ["LiveMigration"]
    assert data["spec"]["uninstallStrategy"] == "BlockUninstallIfWorkloadsExist"
    assert data["spec"]["customizeComponents"]["patches"][0]["type"] == "strategic"


def test_pointer_false_is_kept_but_empty_strings_are_dropped():
    data = _full_kubevirt().to_dict()
    migrations = data["spec"]["configuration"]["migrations"]
    assert migrations["allowPostCopy"] is False
    assert "allowAutoConverge" not in migrations
    assert "ovmfPath" not in data["spec"]["configuration"]


def test_empty_spec_keeps_struct_fields():
    data = KubeVirt().to_dict()
    assert data["spec"]["configuration"] == {}
    assert data["spec"]["certificateRotateStrategy"] == {}
    assert "imageTag" not in data["spec"]
    assert "metadata" not in data


def test_quantities_are_parsed():
    kv = KubeVirt.from_dict(
        {"spec": {"configuration": {"cpuRequest": "100m", "migrations": {"bandwidthPerMigration": "64Mi"}}}}
    )
    assert kv.spec.configuration.cpu_request.compare(parse_quantity("100m")) == 0
    bandwidth = kv.spec.configuration.migration_configuration.bandwidth_per_migration
    assert bandwidth == parse_quantity("64Mi")


def test_status_is_parsed():
    kv = KubeVirt.from_dict(
        {"status": {"phase": "Deploying", "conditions": [{"type": "Degraded", "status": "False"}]}}
    )
    assert kv.status.phase is KubeVirtPhase.DEPLOYING
    assert kv.status.conditions[0].type is KubeVirtConditionType.DEGRADED
    assert kv.status.conditions[0].status is ConditionStatus.FALSE


def test_unknown_uninstall_strategy_raises():
    with pytest.raises(ValueError):
        KubeVirt.from_dict({"spec": {"uninstallStrategy": "Sometimes"}})


def test_from_dict_rejects_non_mapping():
    with pytest.raises(TypeError):
        KubeVirt.from_dict(["spec"])


def test_guest_agent_info_from_dict():
    info = GuestAgentInfo.from_dict(
        {
            "guestAgentVersion": "4.1",
            "hostname": "guest.example.com",
            "os": {"name": "Fedora", "versionId": "32"},
            "timezone": "UTC, 0",
            "userList": [{"userName": "alice", "loginTime": 1589000000.5}],
            "fsInfo": {
                "disks": [
                    {
                        "diskName": "vda1",
                        "mountPoint": "/",
                        "fileSystemType": "ext4",
                        "usedBytes": 1024,
                        "totalBytes": 4096,
                    }
                ]
            },
        }
    )
    assert info.ga_version == "4.1"
    assert info.hostname == "guest.example.com"
    assert info.os.name == "Fedora"
    assert info.os.version_id == "32"
    assert info.user_list[0].user_name == "alice"
    assert info.user_list[0].login_time == 1589000000.5
    assert info.filesystems[0].mount_point == "/"
    assert info.filesystems[0].total_bytes == 4096


def test_guest_agent_info_defaults():
    info = GuestAgentInfo.from_dict({})
    assert info.ga_version == ""
    assert info.user_list == []
    assert info.filesystems == []
    assert info.os.name == ""