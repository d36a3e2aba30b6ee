"""
Hill Core Data Models
======================

Pydantic models describing a key setup and the block-by-block trace of an
encryption or decryption run. They are produced by the orchestration
engine, rendered by the console output layer, and serialised verbatim by
the JSON report generator.

References:
    - Hill, L. S. (1929). Cryptography in an Algebraic Alphabet.
      The American Mathematical Monthly, 36(6), 306-312.
    - Pydantic v2 documentation. https://docs.pydantic.dev/latest/
"""

from __future__ import annotations

import enum

from pydantic import BaseModel, ConfigDict, Field, computed_field


# ===================================================================== #
#  Enumerations
# ===================================================================== #


class CipherMode(str, enum.Enum):
    """Direction of a cipher run."""

    ENCRYPT = "encrypt"
    DECRYPT = "decrypt"

    @property
    def source_label(self) -> str:
        """Vector label used for inputs (P for plaintext, C for ciphertext)."""
        return "P" if self is CipherMode.ENCRYPT else "C"

    @property
    def result_label(self) -> str:
        return "C" if self is CipherMode.ENCRYPT else "P"


# ===================================================================== #
#  Key Setup
# ===================================================================== #


class KeyDerivation(BaseModel):
    """Everything computed while turning a key string into K and K^-1.

    Attributes:
        key: Normalised (uppercase) key string.
        dimension: Block size n.
        key_matrix: K, row-major letter codes.
        determinant: det(K) over the integers.
        mod_determinant: det(K) mod 26.
        determinant_inverse: Multiplicative inverse of ``mod_determinant``.
        adjugate: adj(K) over the integers.
        inverse_matrix: K^-1 mod 26.
    """

    model_config = ConfigDict(frozen=True)

    key: str
    dimension: int = Field(..., gt=0)
    key_matrix: list[list[int]]
    determinant: int
    mod_determinant: int = Field(..., ge=0, lt=26)
    determinant_inverse: int = Field(..., ge=1, lt=26)
    adjugate: list[list[int]]
    inverse_matrix: list[list[int]]


# ===================================================================== #
#  Cipher Traces
# ===================================================================== #


class BlockStep(BaseModel):
    """One block pushed through the key (or inverse key) matrix.

    Attributes:
        index: 1-based block number.
        source_text: The n input letters.
        vector: Their letter codes.
        product: Matrix-vector product before reduction.
        reduced: ``product`` reduced mod 26.
        result_text: The n output letters.
    """

    model_config = ConfigDict(frozen=True)

    index: int = Field(..., ge=1)
    source_text: str
    vector: list[int]
    product: list[int]
    reduced: list[int]
    result_text: str


class CipherTrace(BaseModel):
    """Full record of a single encrypt or decrypt call.

    ``padded_text`` equals ``input_text`` for decryption. ``dropped_text``
    holds any trailing letters that did not fill a whole block during
    decryption; they are not part of the output.
    """

    mode: CipherMode
    dimension: int = Field(..., gt=0)
    input_text: str
    padded_text: str
    output_text: str
    dropped_text: str = ""
    steps: list[BlockStep] = Field(default_factory=list)
    elapsed_seconds: float = Field(default=0.0, ge=0.0)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def padding_added(self) -> int:
        """Number of padding letters appended before encryption."""
        return len(self.padded_text) - len(self.input_text)

    @property
    def block_count(self) -> int:
        return len(self.steps)


class RoundTripResult(BaseModel):
    """Key setup, encryption, and decryption of the resulting ciphertext."""

    key_setup: KeyDerivation
    encryption: CipherTrace
    decryption: CipherTrace

    @computed_field  # type: ignore[prop-decorator]
    @property
    def matches(self) -> bool:
        """True when decryption reproduces the padded plaintext exactly."""
        return self.decryption.output_text == self.encryption.padded_text
