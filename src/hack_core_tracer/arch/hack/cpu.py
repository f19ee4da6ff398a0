# src/hack_core_tracer/arch/hack/cpu.py
"""
Hack CPUエミュレーションの中心モジュール。

デコーダ、ALU、A/Dレジスタ、プログラムカウンタを1サイクル単位で結線します。
1サイクルは「評価（純粋な組み合わせ計算）」と「コミット（A, D, PCの同時更新）」の
2段階に分かれており、評価中に読まれるレジスタ値は常にサイクル開始時点のものです。
"""
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Tuple

from hack_core_tracer.arch.hack import alu
from hack_core_tracer.arch.hack import disassembler
from hack_core_tracer.arch.hack.decoder import ControlFields, decode
from hack_core_tracer.arch.hack.registers import Register, ProgramCounter
from hack_core_tracer.common.types import SymbolMap, RegisterLayoutInfo, RegisterInfo
from hack_core_tracer.core.snapshot import (
    AluResult,
    BusAccess,
    BusAccessType,
    CpuOutputs,
    Metadata,
    Operation,
    Snapshot,
)
from hack_core_tracer.core.state import CpuState, WORD_BITS, WORD_MASK, ADDRESS_BITS, ADDRESS_MASK


# @intent:responsibility 1サイクル分の評価結果（まだコミットされていない次状態を含む）を保持します。
@dataclass(frozen=True)
class Evaluation:
    instruction: int
    fields: ControlFields
    alu: AluResult
    outputs: CpuOutputs
    next_state: CpuState
    jump: bool
    bus_activity: List[BusAccess] = field(default_factory=list)


# @intent:responsibility Hack CPUの1サイクル動作と、インスペクタ向けのAPIを提供する。
class HackCpu:
    """
    Hack CPUをエミュレートするクラス。
    命令メモリやデータメモリは持たず、外部ドライバが毎サイクル命令語とinMを供給します。
    """
    def __init__(self):
        self._a = Register(WORD_BITS)
        self._d = Register(WORD_BITS)
        self._pc = ProgramCounter(ADDRESS_BITS)
        self._cycle_count: int = 0
        self._last_alu: Optional[AluResult] = None
        self._symbol_map: SymbolMap = {}
        self._reverse_symbol_map: Dict[int, str] = {}
        # @intent:rationale レジスタはこのクラスだけが更新する。外部からの参照はget_state()を介して行う。

    # @intent:responsibility シンボルマップを設定します。
    def set_symbol_map(self, symbol_map: SymbolMap) -> None:
        """
        シンボルマップ（名前と命令アドレスの対応表）を設定します。
        """
        self._symbol_map = symbol_map
        # 逆引きマップを作成して、PCからラベルを素早く引けるようにする
        self._reverse_symbol_map = {addr: name for name, addr in symbol_map.items()}

    def get_symbol_map(self) -> SymbolMap:
        return self._symbol_map

    # @intent:responsibility 電源投入時の状態（A = D = PC = 0）に戻します。
    # @intent:rationale step()のreset入力はPCだけを0にする信号であり、このメソッドとは別物です。
    def reset(self) -> None:
        self._a = Register(WORD_BITS)
        self._d = Register(WORD_BITS)
        self._pc = ProgramCounter(ADDRESS_BITS)
        self._cycle_count = 0
        self._last_alu = None

    # @intent:responsibility 現在コミットされているCPUの状態を返します。
    def get_state(self) -> CpuState:
        return CpuState(a=self._a.out, d=self._d.out, pc=self._pc.out)

    # @intent:responsibility 外部（Config層）から状態を直接設定します。値は各レジスタの幅に切り詰められます。
    def set_state(self, state: CpuState) -> None:
        self._a.latch(state.a)
        self._d.latch(state.d)
        self._pc.latch(state.pc)

    @property
    def cycle_count(self) -> int:
        return self._cycle_count

    # @intent:responsibility 現在の状態におけるアドレス出力（Aの下位15bit）を返します。
    @property
    def memory_address(self) -> int:
        return self._a.out & ADDRESS_MASK

    # @intent:responsibility 1サイクル分の組み合わせ計算を行います。CPUの状態は一切変更しません。
    # @intent:pre-condition instruction, memory_read_valueは任意の整数でよく、下位16bitのみを使用します。
    def evaluate(self, instruction: int, memory_read_value: int = 0, reset: bool = False) -> Evaluation:
        """
        命令語・inM・reset入力と現在の状態から、このサイクルの出力と次状態を計算します。
        """
        instruction &= WORD_MASK
        in_m = memory_read_value & WORD_MASK
        fields = decode(instruction)

        a = self._a.out
        d = self._d.out
        address = a & ADDRESS_MASK

        # ALU: 左オペランドは常にD、右オペランドはAかinM
        y = in_m if fields.source_m else a
        result = alu.compute(d, y, fields.zx, fields.nx, fields.zy, fields.ny, fields.f, fields.no)

        # Aレジスタ: アドレスロード命令はリテラル、計算命令はALU出力
        load_a = fields.is_address_load or (fields.is_compute and fields.load_a)
        a_in = result.out if fields.is_compute else fields.address

        load_d = fields.is_compute and fields.load_d
        write_enabled = fields.is_compute and fields.write_m

        # 正・ゼロ・負は互いに排他な分類
        positive = not result.zr and not result.ng
        jump = fields.is_compute and (
            (result.ng and fields.jump_lt)
            or (result.zr and fields.jump_eq)
            or (positive and fields.jump_gt)
        )

        next_state = CpuState(
            a=self._a.next_value(a_in, load_a),
            d=self._d.next_value(result.out, load_d),
            pc=self._pc.next_value(a, jump, reset),
        )

        outputs = CpuOutputs(
            memory_write_value=result.out,
            write_enabled=write_enabled,
            memory_address=address,
            next_instruction_address=next_state.pc,
        )

        bus_activity = []
        if fields.is_compute and fields.source_m:
            bus_activity.append(BusAccess(address=address, data=in_m, access_type=BusAccessType.READ))
        if write_enabled:
            bus_activity.append(BusAccess(address=address, data=result.out, access_type=BusAccessType.WRITE))

        return Evaluation(
            instruction=instruction,
            fields=fields,
            alu=result,
            outputs=outputs,
            next_state=next_state,
            jump=jump,
            bus_activity=bus_activity,
        )

    # @intent:responsibility 評価結果をサイクル境界で一括してコミットします。
    # @intent:pre-condition evaluationは現在の状態に対してevaluate()で得られたものである必要があります。
    def commit(self, evaluation: Evaluation) -> None:
        next_state = evaluation.next_state
        self._a.latch(next_state.a)
        self._d.latch(next_state.d)
        self._pc.latch(next_state.pc)
        self._last_alu = evaluation.alu
        self._cycle_count += 1

    # @intent:responsibility CPUを1クロック進め、その結果のスナップショットを返します。
    # @intent:rationale 評価→コミット→Snapshot生成の順で行い、出力計算中にコミット済みの値を読まないことを保証します。
    def step(self, instruction: int, memory_read_value: int = 0, reset: bool = False) -> Snapshot:
        """
        CPUを1クロック進め、そのサイクルの出力とコミット後の状態を含むSnapshotを返します。
        """
        initial_pc = self._pc.out
        evaluation = self.evaluate(instruction, memory_read_value, reset)
        self.commit(evaluation)
        return self._create_snapshot(initial_pc, evaluation)

    # @intent:responsibility スナップショットを生成します。
    def _create_snapshot(self, initial_pc: int, evaluation: Evaluation) -> Snapshot:
        mnemonic = disassembler.disassemble_instruction(evaluation.instruction)
        operation = Operation(instruction_hex=f"{evaluation.instruction:04X}", mnemonic=mnemonic)

        symbol_label = self._reverse_symbol_map.get(initial_pc, "")
        symbol_info = f"{symbol_label}: " if symbol_label else ""
        symbol_info += mnemonic

        return Snapshot(
            state=self.get_state(),
            operation=operation,
            outputs=evaluation.outputs,
            alu=evaluation.alu,
            metadata=Metadata(cycle_count=self._cycle_count, symbol_info=symbol_info),
            bus_activity=list(evaluation.bus_activity),
        )

    # @intent:responsibility レジスタマップ（インスペクタ表示用）を返す。
    def get_register_map(self) -> Dict[str, int]:
        state = self.get_state()
        return {
            "A": state.a,
            "D": state.d,
            "PC": state.pc,
        }

    # @intent:responsibility 直前のサイクルのALUフラグを返す。まだ1サイクルも実行していなければ全てFalse。
    def get_flag_state(self) -> Dict[str, bool]:
        if self._last_alu is None:
            return {"ZR": False, "NG": False}
        return {"ZR": self._last_alu.zr, "NG": self._last_alu.ng}

    # @intent:responsibility レジスタレイアウト定義を返す。
    def get_register_layout(self) -> List[RegisterLayoutInfo]:
        return [
            RegisterLayoutInfo("Registers", [
                RegisterInfo("A", WORD_BITS),
                RegisterInfo("D", WORD_BITS),
            ]),
            RegisterLayoutInfo("Pointers", [
                RegisterInfo("PC", ADDRESS_BITS),
            ]),
        ]

    # @intent:responsibility 与えられた命令列の逆アセンブル結果を返す。
    def disassemble(self, instructions: Sequence[int], start_addr: int = 0) -> List[Tuple[int, str, str]]:
        return disassembler.disassemble(instructions, start_addr)
