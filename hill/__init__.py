"""
HillCore Hill -- Polygraphic Cipher Tool
=========================================

Encrypts and decrypts A-Z text with the Hill cipher: blocks of n letters
are multiplied by an invertible n x n key matrix modulo 26.

Modules:
    - hill.core.alphabet: Letter <-> residue mapping
    - hill.core.modular: Residues and modular inverses
    - hill.core.matrix: Determinant, adjugate, products
    - hill.core.keys: Key matrix and inverse key matrix
    - hill.core.blocks: Padding and block splitting
    - hill.core.cipher: The HillCipher class
    - hill.core.engine: Orchestrator with tracing and logging
    - hill.parsers: Input sanitation
    - hill.output: Console and report output
    - hill.cli: Click-based command-line interface

References:
    - Hill, L. S. (1929). Cryptography in an Algebraic Alphabet.
      The American Mathematical Monthly, 36(6), 306-312.
"""

__version__ = "1.0.0"
__tool_name__ = "hill"
