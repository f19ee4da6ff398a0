"""
Hack命令デコーダ。

16bitの命令語を、名前付きの制御フィールドに分解します。
全ての16bitパターンが有効な命令であり、デコードが失敗することはありません。
"""
from typing import NamedTuple

from hack_core_tracer.core.state import WORD_MASK, ADDRESS_MASK

# @intent:constant 命令語の各フィールドのビット位置。
KIND_BIT = 15
SOURCE_BIT = 12


# @intent:data_structure 命令語から取り出した制御フィールドの集合。
# @intent:rationale 各フィールドは命令語のビットをそのまま写したものです。
#                  アドレスロード命令で dest/jump 位置のビットが立っていても、それを無効化するのは
#                  CPUの合成ロジック（is_computeとのAND）の責務とし、ハードウェアの配線と対応させます。
class ControlFields(NamedTuple):
    is_compute: bool  # bit 15
    address: int  # bits 14..0 (アドレスロード命令のリテラル)
    source_m: bool  # bit 12 (0=A, 1=inM)
    zx: bool  # bit 11
    nx: bool  # bit 10
    zy: bool  # bit 9
    ny: bool  # bit 8
    f: bool  # bit 7
    no: bool  # bit 6
    load_a: bool  # bit 5
    load_d: bool  # bit 4
    write_m: bool  # bit 3
    jump_lt: bool  # bit 2
    jump_eq: bool  # bit 1
    jump_gt: bool  # bit 0

    @property
    def is_address_load(self) -> bool:
        return not self.is_compute

    # @intent:responsibility ALU制御ビットを6bitコード（zxが最上位）として返します。
    @property
    def control_code(self) -> int:
        code = 0
        for bit in (self.zx, self.nx, self.zy, self.ny, self.f, self.no):
            code = (code << 1) | int(bit)
        return code

    # @intent:responsibility dest フィールド（A, D, M の順で上位から）を3bitで返します。
    @property
    def dest_code(self) -> int:
        return (int(self.load_a) << 2) | (int(self.load_d) << 1) | int(self.write_m)

    # @intent:responsibility jump フィールド（LT, EQ, GT の順で上位から）を3bitで返します。
    @property
    def jump_code(self) -> int:
        return (int(self.jump_lt) << 2) | (int(self.jump_eq) << 1) | int(self.jump_gt)


# @intent:responsibility 16bit命令語を制御フィールドに分解します。
# @intent:pre-condition instructionは任意の整数でよく、下位16bitのみを使用します。
def decode(instruction: int) -> ControlFields:
    """
    命令語をデコードし、ControlFieldsを返します。
    """
    word = instruction & WORD_MASK

    def bit(n: int) -> bool:
        return bool((word >> n) & 1)

    return ControlFields(
        is_compute=bit(KIND_BIT),
        address=word & ADDRESS_MASK,
        source_m=bit(SOURCE_BIT),
        zx=bit(11),
        nx=bit(10),
        zy=bit(9),
        ny=bit(8),
        f=bit(7),
        no=bit(6),
        load_a=bit(5),
        load_d=bit(4),
        write_m=bit(3),
        jump_lt=bit(2),
        jump_eq=bit(1),
        jump_gt=bit(0),
    )
