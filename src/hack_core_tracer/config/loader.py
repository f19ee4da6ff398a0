import yaml
from typing import Dict, Any
from .models import SystemConfig, CpuInitialState

class ConfigLoader:
    def load_from_file(self, path: str) -> SystemConfig:
        with open(path, 'r', encoding="utf-8") as f:
            data = yaml.safe_load(f)
        return self._parse_config(data or {})

    def _parse_config(self, data: Dict[str, Any]) -> SystemConfig:
        arch = str(data.get("architecture", "HACK"))

        # Parse Initial State
        initial_state_data = data.get("initial_state") or {}
        initial_state = CpuInitialState(
            a=self._parse_int(initial_state_data.get("a", 0)),
            d=self._parse_int(initial_state_data.get("d", 0)),
            pc=self._parse_int(initial_state_data.get("pc", 0))
        )

        # Parse Symbols
        symbols = {}
        for name, value in (data.get("symbols") or {}).items():
            symbols[str(name)] = self._parse_int(value)

        return SystemConfig(
            architecture=arch,
            initial_state=initial_state,
            symbols=symbols
        )

    def _parse_int(self, value: Any) -> int:
        # bool は int のサブクラスなので先に除外する
        if isinstance(value, bool):
            raise ValueError(f"Invalid integer format: {value}")
        if isinstance(value, int):
            return value
        if isinstance(value, str):
            text = value.strip()
            try:
                if text.lower().startswith("0x"):
                    return int(text, 16)
                return int(text)
            except ValueError:
                raise ValueError(f"Invalid integer format: {value}") from None
        raise ValueError(f"Invalid integer format: {value}")
