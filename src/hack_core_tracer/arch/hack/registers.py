"""
同期レジスタとプログラムカウンタ。

どちらも「次の値を計算する（純粋）」と「サイクル境界で値を確定する（latch）」の
2段階に分かれています。next_valueは現在値を変更しないため、同一サイクル中の読み出しは
常にサイクル開始時点の値を返します。
"""
from hack_core_tracer.core.state import WORD_BITS, ADDRESS_BITS


# @intent:responsibility ロードイネーブル付きの固定幅レジスタを表現します。
class Register:
    """
    ロードイネーブル付きの同期レジスタ。
    現在値（out）は常に参照可能で、更新はlatch()の呼び出し時のみ行われます。
    """
    # @intent:pre-condition widthは正の整数である必要があります。
    def __init__(self, width: int = WORD_BITS, value: int = 0):
        if not isinstance(width, int) or width <= 0:
            raise ValueError("Register width must be a positive integer.")
        self._width = width
        self._mask = (1 << width) - 1
        self._value = value & self._mask

    @property
    def width(self) -> int:
        return self._width

    # @intent:responsibility 現在保持している値を返します（組み合わせ出力）。
    @property
    def out(self) -> int:
        return self._value

    # @intent:responsibility ロード信号と入力から次サイクルの値を計算します。状態は変更しません。
    def next_value(self, data: int, load: bool) -> int:
        if load:
            return data & self._mask
        return self._value

    # @intent:responsibility サイクル境界で次の値を確定させます。
    def latch(self, value: int) -> None:
        self._value = value & self._mask

    # @intent:responsibility next_valueとlatchを1サイクル分まとめて行います。
    def tick(self, data: int, load: bool) -> int:
        """
        単体で使う場合の便宜メソッド。CPU内では全レジスタを同時にコミットするため使用しません。
        """
        self.latch(self.next_value(data, load))
        return self._value


# @intent:responsibility リセット・ロード・インクリメントを優先順位付きで行う15bitカウンタ。
class ProgramCounter(Register):
    """
    プログラムカウンタ。優先順位は reset > load > increment です。
    """
    def __init__(self, width: int = ADDRESS_BITS, value: int = 0):
        super().__init__(width, value)

    # @intent:responsibility 次サイクルのPCを計算します。3つの規則のうち必ず1つだけが適用されます。
    # @intent:post-condition 戻り値は常にPCの幅（15bit）に切り詰められています。
    def next_value(self, data: int, load: bool, reset: bool = False) -> int:
        if reset:
            return 0
        if load:
            return data & self._mask
        return (self._value + 1) & self._mask

    def tick(self, data: int, load: bool, reset: bool = False) -> int:
        self.latch(self.next_value(data, load, reset))
        return self._value
