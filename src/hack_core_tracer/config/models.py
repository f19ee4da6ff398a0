from dataclasses import dataclass, field
from typing import Dict

@dataclass
class CpuInitialState:
    a: int = 0x0000
    d: int = 0x0000
    pc: int = 0x0000

@dataclass
class SystemConfig:
    architecture: str = "HACK"
    initial_state: CpuInitialState = field(default_factory=CpuInitialState)
    symbols: Dict[str, int] = field(default_factory=dict)  # ラベル名 -> 命令アドレス
