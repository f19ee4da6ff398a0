"""
Hack逆アセンブラモジュール。

命令語を Hack アセンブリのニーモニック形式（"@value" / "dest=comp;jump"）に変換します。
コアはメモリを持たないため、逆アセンブル対象の命令列は呼び出し側が渡します。
"""
from typing import List, Sequence, Tuple

from hack_core_tracer.arch.hack.alu import ALU_OPERATIONS
from hack_core_tracer.arch.hack.decoder import decode
from hack_core_tracer.core.state import WORD_MASK, ADDRESS_MASK

# @intent:constant dest フィールド（A, D, M の順で上位から）とジャンプフィールドのニーモニック。
DEST_MNEMONICS = ["", "M", "D", "MD", "A", "AM", "AD", "AMD"]
JUMP_MNEMONICS = ["", "JGT", "JEQ", "JGE", "JLT", "JNE", "JLE", "JMP"]


# @intent:responsibility ALU制御ビットとオペランド選択ビットから comp 部のニーモニックを返します。
# @intent:rationale 正準表に無い組み合わせも有効な命令なので、エラーにせずビット列をそのまま表記します。
def comp_mnemonic(control_code: int, source_m: bool) -> str:
    mnemonic = ALU_OPERATIONS.get(control_code)
    if mnemonic is None:
        return f"ALU<{int(source_m)}:{control_code:06b}>"
    if source_m:
        mnemonic = mnemonic.replace("A", "M")
    return mnemonic


# @intent:responsibility 単一の命令語を逆アセンブルします。
def disassemble_instruction(instruction: int) -> str:
    """
    命令語をニーモニック文字列に変換します。
    計算命令のbit 14..13は無視されます。
    """
    fields = decode(instruction)
    if fields.is_address_load:
        return f"@{fields.address}"

    text = comp_mnemonic(fields.control_code, fields.source_m)
    dest = DEST_MNEMONICS[fields.dest_code]
    if dest:
        text = f"{dest}={text}"
    jump = JUMP_MNEMONICS[fields.jump_code]
    if jump:
        text = f"{text};{jump}"
    return text


# @intent:responsibility 与えられた命令列を逆アセンブルし、アドレスとニーモニックのリストを返します。
def disassemble(instructions: Sequence[int], start_addr: int = 0) -> List[Tuple[int, str, str]]:
    """
    命令列を (アドレス, 16進ダンプ, ニーモニック) のタプルのリストに変換します。
    アドレスは15bitで折り返します。
    """
    result = []
    for offset, word in enumerate(instructions):
        addr = (start_addr + offset) & ADDRESS_MASK
        word &= WORD_MASK
        result.append((addr, f"{word:04X}", disassemble_instruction(word)))
    return result
