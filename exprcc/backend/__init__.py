"""
exprcc Backend Package

Native code generation for exprcc expression trees.
"""

from .x86_codegen import X86CodeGenerator

__all__ = [
    "X86CodeGenerator",
]
