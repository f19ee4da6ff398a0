"""
Hack ALU (算術論理演算ユニット)。

6本の制御ビット（zx, nx, zy, ny, f, no）で2つの16bit入力から結果を計算し、
ゼロフラグ（zr）と負数フラグ（ng）を導出します。状態を持たない純粋関数です。
"""
from typing import Dict, Tuple

from hack_core_tracer.core.snapshot import AluResult
from hack_core_tracer.core.state import WORD_MASK, SIGN_BIT

# @intent:constant 制御ビットを6bitコード（zx nx zy ny f no の順、zxが最上位）として並べた正準演算表。
# ニーモニックは右オペランドをAとして表記します。Mを選択する命令では逆アセンブラがAをMに置換します。
ALU_OPERATIONS: Dict[int, str] = {
    0b101010: "0",
    0b111111: "1",
    0b111010: "-1",
    0b001100: "D",
    0b110000: "A",
    0b001101: "!D",
    0b110001: "!A",
    0b001111: "-D",
    0b110011: "-A",
    0b011111: "D+1",
    0b110111: "A+1",
    0b001110: "D-1",
    0b110010: "A-1",
    0b000010: "D+A",
    0b010011: "D-A",
    0b000111: "A-D",
    0b000000: "D&A",
    0b010101: "D|A",
}


# @intent:utility_function 6bitの制御コードを (zx, nx, zy, ny, f, no) のタプルに分解します。
def split_control_code(code: int) -> Tuple[bool, bool, bool, bool, bool, bool]:
    return (
        bool(code & 0b100000),
        bool(code & 0b010000),
        bool(code & 0b001000),
        bool(code & 0b000100),
        bool(code & 0b000010),
        bool(code & 0b000001),
    )


# @intent:responsibility 入力と制御ビットからALUの出力とフラグを計算します。
# @intent:pre-condition x, yは任意の整数でよく、16bitに切り詰めて扱います。
# @intent:post-condition outは常に0..0xFFFFの範囲に収まり、例外は発生しません。
def compute(x: int, y: int,
            zx: bool, nx: bool, zy: bool, ny: bool, f: bool, no: bool) -> AluResult:
    """
    Hack ALUの演算を行います。

    1. zxならxを0に、続いてnxならxをビット反転します。
    2. zy/nyについてもyに同様の処理を独立に行います。
    3. fなら16bit加算（桁あふれは切り捨て）、そうでなければビットAND。
    4. noなら結果をビット反転します。
    """
    x &= WORD_MASK
    y &= WORD_MASK

    if zx:
        x = 0
    if nx:
        x = ~x & WORD_MASK
    if zy:
        y = 0
    if ny:
        y = ~y & WORD_MASK

    if f:
        out = (x + y) & WORD_MASK
    else:
        out = x & y

    if no:
        out = ~out & WORD_MASK

    return AluResult(out=out, zr=out == 0, ng=(out & SIGN_BIT) != 0)


# @intent:responsibility 6bit制御コードを指定してALUを実行します。テストや逆アセンブラ補助用。
def compute_code(x: int, y: int, code: int) -> AluResult:
    """制御コード形式（zxが最上位ビット）でALUを実行します。"""
    return compute(x, y, *split_control_code(code))
