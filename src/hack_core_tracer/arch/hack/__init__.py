# src/hack_core_tracer/arch/hack/__init__.py
"""
Hack CPU Architecture Package
"""
from .cpu import HackCpu, Evaluation
from .decoder import ControlFields, decode
from .registers import Register, ProgramCounter
