# tests/core/test_snapshot.py
"""
hack_core_tracer.core.snapshotモジュールの単体テスト。
"""
import dataclasses

import pytest

from hack_core_tracer.core.state import CpuState
from hack_core_tracer.core.snapshot import (
    AluResult,
    BusAccess,
    BusAccessType,
    CpuOutputs,
    Metadata,
    Operation,
    Snapshot,
)

# @intent:test_suite 1サイクルの動作を記録する不変スナップショットデータ構造の検証。


def _make_snapshot(**kwargs) -> Snapshot:
    return Snapshot(
        state=CpuState(a=1, d=2, pc=3),
        operation=Operation(instruction_hex="EC10", mnemonic="D=A"),
        outputs=CpuOutputs(memory_write_value=1, write_enabled=False, memory_address=1, next_instruction_address=3),
        alu=AluResult(out=1, zr=False, ng=False),
        metadata=Metadata(cycle_count=1),
        **kwargs
    )


class TestBusAccess:
    # @intent:test_case_enum BusAccessTypeのメンバーが正しく定義されていることを検証します。
    def test_bus_access_type_members(self):
        assert BusAccessType.READ.value == "READ"
        assert BusAccessType.WRITE.value == "WRITE"

    def test_bus_access_is_immutable(self):
        access = BusAccess(address=0x0010, data=0x1234, access_type=BusAccessType.WRITE)
        with pytest.raises(dataclasses.FrozenInstanceError):
            access.data = 0


class TestSnapshot:
    def test_snapshot_fields(self):
        snapshot = _make_snapshot()
        assert snapshot.state.pc == 3
        assert snapshot.operation.mnemonic == "D=A"
        assert snapshot.outputs.next_instruction_address == 3
        assert snapshot.alu.out == 1
        assert snapshot.metadata.cycle_count == 1
        assert snapshot.metadata.symbol_info is None

    def test_snapshot_is_immutable(self):
        snapshot = _make_snapshot()
        with pytest.raises(dataclasses.FrozenInstanceError):
            snapshot.state = CpuState()

    # @intent:test_case_default_factory bus_activityのデフォルトがインスタンスごとに独立したリストであることを検証します。
    def test_default_bus_activity_is_not_shared(self):
        first = _make_snapshot()
        second = _make_snapshot()
        assert first.bus_activity == []
        assert first.bus_activity is not second.bus_activity
