import warnings

from hack_core_tracer.arch.hack.cpu import HackCpu
from hack_core_tracer.core.state import CpuState, WORD_MASK, ADDRESS_MASK
from .models import SystemConfig, CpuInitialState

# @intent:responsibility システム構成（Config）に基づいてCPUを生成し、初期状態とシンボルを適用します。
class SystemBuilder:
    def build_system(self, config: SystemConfig) -> HackCpu:
        if config.architecture.upper() == "HACK":
            cpu = HackCpu()
        else:
            raise ValueError(f"Unsupported architecture: {config.architecture}")

        # 初期状態の適用
        self.apply_initial_state(cpu, config.initial_state)
        cpu.set_symbol_map(dict(config.symbols))

        return cpu

    # @intent:responsibility Configで定義された初期状態をCPUに適用します。
    # @intent:rationale 幅を超える値は拒否せず、警告を出したうえでレジスタの幅に切り詰めます。
    def apply_initial_state(self, cpu: HackCpu, config_state: CpuInitialState) -> None:
        """
        CPUをリセットし、Configから指定された初期値を適用します。
        """
        cpu.reset()

        cpu.set_state(CpuState(
            a=self._mask("a", config_state.a, WORD_MASK),
            d=self._mask("d", config_state.d, WORD_MASK),
            pc=self._mask("pc", config_state.pc, ADDRESS_MASK)
        ))

    def _mask(self, name: str, value: int, mask: int) -> int:
        masked = value & mask
        if masked != value:
            warnings.warn(
                f"Initial value {value:#x} for register '{name}' exceeds its width; truncated to {masked:#x}",
                UserWarning
            )
        return masked
