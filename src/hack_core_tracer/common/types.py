"""
共通の型定義を提供するモジュール。
コア、アーキテクチャ層、Config層で共通して使用される型エイリアスなどを定義します。
"""
from typing import Dict, List, NamedTuple

# @intent:data_structure シンボル名とアドレスをマッピングする辞書の型エイリアス。
# Config層で読み込まれ、CPUがスナップショットのシンボル情報を組み立てる際に使用します。
SymbolMap = Dict[str, int]

# @intent:data_structure 単一のレジスタの表示定義。インスペクタがフィールドを動的に生成するために使用される。
class RegisterInfo(NamedTuple):
    name: str
    width: int  # ビット幅 (15 or 16)

# @intent:data_structure レジスタグループの表示定義。関連するレジスタ（例: "Registers", "Pointers"）をまとめる。
class RegisterLayoutInfo(NamedTuple):
    group_name: str
    registers: List[RegisterInfo]
