# hack_core_tracer/core/snapshot.py
"""
1サイクル分の実行結果の不変スナップショット

このモジュールは、1クロック分のCPU動作（コミット後の状態、組み合わせ出力、
ALUの結果、要求されたメモリアクセス）を記録した不変のデータ構造を定義します。
インスペクタへの情報提供と、トレース時の状態記録に用いる責務を負います。
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from hack_core_tracer.core.state import CpuState


# @intent:responsibility メモリインターフェース上のアクセス種別を定義します。
class BusAccessType(Enum):
    READ = "READ"
    WRITE = "WRITE"


# @intent:responsibility 1サイクル中にコアが要求した単一のメモリアクセスを記録します。
# @intent:rationale コア自身はメモリを持たないため、これは「実行された」アクセスではなく
#                  外部ドライバに対して要求されたアクセスの記録です。
@dataclass(frozen=True)
class BusAccess:
    address: int  # 15bit address
    data: int  # 16bit value
    access_type: BusAccessType


# @intent:responsibility 実行された命令の詳細を記録します。
@dataclass(frozen=True)
class Operation:
    """
    実行された命令語（HEX）と、その逆アセンブル結果を記録するデータクラス。
    """
    instruction_hex: str  # 例: "EC10"
    mnemonic: str  # 例: "D=D+A;JGT"


# @intent:responsibility ALUの一時的な演算結果を記録します。
@dataclass(frozen=True)
class AluResult:
    out: int  # 16bit
    zr: bool  # out == 0
    ng: bool  # out の最上位ビット


# @intent:responsibility 1サイクル分のメモリインターフェース出力を記録します。
@dataclass(frozen=True)
class CpuOutputs:
    """
    memory_write_value / write_enabled / memory_address はサイクル中の組み合わせ出力、
    next_instruction_address はそのサイクルの更新を反映したPCです。
    """
    memory_write_value: int
    write_enabled: bool
    memory_address: int
    next_instruction_address: int


# @intent:responsibility 実行に関するメタデータを記録します。
@dataclass(frozen=True)
class Metadata:
    """
    実行に関するメタデータ（累計サイクル数、シンボル情報など）を記録するデータクラス。
    """
    cycle_count: int
    symbol_info: Optional[str] = None  # 例: "LOOP: D;JGT"


# @intent:responsibility ある1サイクルにおけるCPUの完全な動作を不変に記録します。
@dataclass(frozen=True)
class Snapshot:
    """
    1クロック分のCPU動作を記録した不変のデータ構造。
    stateはサイクル境界でコミットされた後の状態です。
    """
    state: CpuState
    operation: Operation
    outputs: CpuOutputs
    alu: AluResult
    metadata: Metadata
    bus_activity: List[BusAccess] = field(default_factory=list)

    # @intent:rationale リストなどのミュータブルなフィールドはdefault_factoryを使用し、
    #                  インスタンスごとに新しいリストが生成されるようにする。
