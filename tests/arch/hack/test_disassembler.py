# tests/arch/hack/test_disassembler.py
"""
hack_core_tracer.arch.hack.disassemblerモジュールの単体テスト。
"""
import pytest

from hack_core_tracer.arch.hack.disassembler import comp_mnemonic, disassemble, disassemble_instruction

# @intent:test_suite 命令語からHackアセンブリ表記への変換を検証します。


class TestDisassembleInstruction:
    @pytest.mark.parametrize("word, expected", [
        (0x000A, "@10"),
        (0x7FFF, "@32767"),
        (0xE091, "D=D+A;JGT"),
        (0xEC10, "D=A"),
        (0xFC10, "D=M"),
        (0xE308, "M=D"),
        (0xEA87, "0;JMP"),
        (0xE301, "D;JGT"),
        (0xE390, "D=D-1"),
        (0xEDE8, "AM=A+1"),
        (0xFDF8, "AMD=M+1"),
        (0xE1D0, "D=A-D"),
        (0xF1D0, "D=M-D"),
        (0xF4D0, "D=D-M"),
        (0xF540, "D|M"),
    ])
    def test_known_instructions(self, word, expected):
        assert disassemble_instruction(word) == expected

    # @intent:test_case_ignored 計算命令のbit 14..13が無視されることを検証します。
    def test_bits_14_13_are_ignored(self):
        assert disassemble_instruction(0x8091) == disassemble_instruction(0xE091)

    # @intent:test_case_noncanonical 正準表に無い制御ビットはビット列として表記されることを検証します。
    def test_non_canonical_comp(self):
        assert disassemble_instruction(0xE800) == "ALU<0:100000>"
        assert comp_mnemonic(0b100000, True) == "ALU<1:100000>"

    @pytest.mark.parametrize("jump_bits, mnemonic", [
        (0b001, "JGT"), (0b010, "JEQ"), (0b011, "JGE"), (0b100, "JLT"),
        (0b101, "JNE"), (0b110, "JLE"), (0b111, "JMP"),
    ])
    def test_jump_mnemonics(self, jump_bits, mnemonic):
        assert disassemble_instruction(0xE300 | jump_bits) == f"D;{mnemonic}"


class TestDisassembleRange:
    def test_listing(self):
        listing = disassemble([0x0002, 0xEC10, 0x0003, 0xE090], start_addr=0x0010)
        assert listing == [
            (0x0010, "0002", "@2"),
            (0x0011, "EC10", "D=A"),
            (0x0012, "0003", "@3"),
            (0x0013, "E090", "D=D+A"),
        ]

    def test_address_wraps_at_15_bits(self):
        listing = disassemble([0x0000, 0x0001], start_addr=0x7FFF)
        assert [entry[0] for entry in listing] == [0x7FFF, 0x0000]

    def test_empty(self):
        assert disassemble([]) == []
