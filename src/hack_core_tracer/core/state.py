# hack_core_tracer/core/state.py
"""
Core Layer (CPU状態)

このモジュールは、CPUがサイクル境界でコミットする状態（A, D, PC）を保持する
データ構造と、語長・アドレス幅の定数を定義します。
"""
from dataclasses import dataclass, replace

# @intent:constant データ語とアドレスのビット幅。全ての演算はこの幅で折り返します。
WORD_BITS = 16
WORD_MASK = 0xFFFF
ADDRESS_BITS = 15
ADDRESS_MASK = 0x7FFF
SIGN_BIT = 0x8000


# @intent:utility_function 16bit語を2の補数として解釈した符号付き整数を返します（表示用）。
def to_signed(word: int) -> int:
    word &= WORD_MASK
    return word - 0x10000 if word & SIGN_BIT else word


# @intent:responsibility サイクル境界でコミットされたレジスタ状態を保持します。
# @intent:rationale frozen=Trueとし、スナップショットに格納した後で値が変化しないことを保証します。
#                  状態の更新は常にreplace()で新しいインスタンスを作って行います。
@dataclass(frozen=True)
class CpuState:
    """
    Hack CPUのレジスタ状態。
    a, dは16bit、pcは15bitの符号なし値として保持します。
    """
    a: int = 0x0000  # A register
    d: int = 0x0000  # D register
    pc: int = 0x0000  # Program Counter

    # @intent:responsibility dataclasses.replaceのラッパー。
    def replace(self, **changes) -> 'CpuState':
        return replace(self, **changes)

    # @intent:responsibility 負数フラグ表示などのため、Aを符号付きで返す。
    @property
    def signed_a(self) -> int:
        return to_signed(self.a)

    @property
    def signed_d(self) -> int:
        return to_signed(self.d)
