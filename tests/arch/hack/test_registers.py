# tests/arch/hack/test_registers.py
"""
hack_core_tracer.arch.hack.registersモジュールの単体テスト。
"""
import pytest

from hack_core_tracer.arch.hack.registers import Register, ProgramCounter

# @intent:test_suite ロードイネーブル付きレジスタと優先順位付きプログラムカウンタの動作を検証します。


class TestRegister:
    """
    Registerの単体テスト。
    """
    def test_init_default(self):
        reg = Register()
        assert reg.width == 16
        assert reg.out == 0

    def test_invalid_width(self):
        with pytest.raises(ValueError):
            Register(0)

    # @intent:test_case_hold load=0なら入力に関わらず値が保持されることを検証します。
    @pytest.mark.parametrize("data", [0x0000, 0x0001, 0x8000, 0xFFFF])
    def test_hold_when_not_loading(self, data):
        reg = Register(value=0x1234)
        assert reg.tick(data, load=False) == 0x1234
        assert reg.out == 0x1234

    # @intent:test_case_load load=1なら入力がそのまま採用されることを検証します。
    @pytest.mark.parametrize("data", [0x0000, 0x0001, 0x8000, 0xFFFF])
    def test_adopt_when_loading(self, data):
        reg = Register(value=0x1234)
        assert reg.tick(data, load=True) == data

    # @intent:test_case_phase next_valueが現在値を変更しないことを検証します。
    def test_next_value_is_pure(self):
        reg = Register(value=0x0042)
        assert reg.next_value(0x0099, load=True) == 0x0099
        assert reg.out == 0x0042
        reg.latch(0x0099)
        assert reg.out == 0x0099

    def test_value_is_truncated_to_width(self):
        reg = Register()
        reg.tick(0x1_2345, load=True)
        assert reg.out == 0x2345


class TestProgramCounter:
    """
    ProgramCounterの優先順位の検証。
    """
    @pytest.fixture
    def pc(self):
        return ProgramCounter(value=0x0123)

    def test_width(self, pc):
        assert pc.width == 15

    def test_reset_wins_over_load(self, pc):
        assert pc.next_value(0x0456, load=True, reset=True) == 0

    def test_reset_without_load(self, pc):
        assert pc.next_value(0x0456, load=False, reset=True) == 0

    def test_load_adopts_target(self, pc):
        assert pc.next_value(0x0456, load=True, reset=False) == 0x0456

    def test_load_truncates_target_to_15_bits(self, pc):
        assert pc.next_value(0xFFFF, load=True) == 0x7FFF

    def test_increment(self, pc):
        assert pc.next_value(0x0456, load=False) == 0x0124

    # @intent:test_case_wrap 0x7FFFからのインクリメントが0に折り返すことを検証します。
    def test_increment_wraps(self):
        pc = ProgramCounter(value=0x7FFF)
        assert pc.tick(0, load=False) == 0

    def test_present_value_visible_until_latch(self, pc):
        next_pc = pc.next_value(0, load=False)
        assert pc.out == 0x0123
        pc.latch(next_pc)
        assert pc.out == 0x0124
