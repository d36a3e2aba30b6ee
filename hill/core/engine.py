"""
Hill Engine
============

Orchestrator between user input and the :class:`HillCipher` core.
The engine sanitises raw input, builds the cipher, runs it block by
block, and returns pydantic traces suitable for console display and
JSON reports. It is the only layer of the tool that logs.

Architecture follows the Facade pattern (Gamma et al., 1994), providing
a simplified interface over the parser and cipher subsystems.

References:
    - Gamma, E., Helm, R., Johnson, R., & Vlissides, J. (1994).
      Design Patterns: Elements of Reusable Object-Oriented Software.
      Addison-Wesley.
    - Hill, L. S. (1929). Cryptography in an Algebraic Alphabet.
      The American Mathematical Monthly, 36(6), 306-312.
"""

from __future__ import annotations

from typing import Optional

from shared.config import HillCoreConfig
from shared.logger import HillLogger

from hill.core.blocks import blocks_to_text, pad_to_block_size
from hill.core.cipher import BlockTransform, HillCipher
from hill.core.keys import derive_key_schedule
from hill.core.models import (
    BlockStep,
    CipherMode,
    CipherTrace,
    KeyDerivation,
    RoundTripResult,
)
from hill.errors import HillError
from hill.parsers.input_parser import parse_dimension, sanitize_message, validate_key


class HillEngine:
    """Runs Hill cipher operations and records every intermediate step.

    Usage::

        engine = HillEngine()
        setup = engine.setup("HILL", 2)
        trace = engine.encrypt("help me")
        print(trace.output_text)
        result = engine.round_trip("attack at dawn")

    Attributes:
        config: HillCore configuration instance.
        logger: Logger for the Hill engine.
    """

    def __init__(
        self,
        config: Optional[HillCoreConfig] = None,
        logger: Optional[HillLogger] = None,
    ) -> None:
        self.config = config or HillCoreConfig()
        settings = self.config.global_settings
        self.logger = logger or HillLogger(
            "hill.engine",
            log_level=settings.log_level,
            log_file=settings.log_file or None,
            json_logs=settings.log_json,
        )
        self._cipher: Optional[HillCipher] = None
        self._key_setup: Optional[KeyDerivation] = None

    # ------------------------------------------------------------------ #
    #  Key Setup
    # ------------------------------------------------------------------ #

    @property
    def cipher(self) -> HillCipher:
        """The cipher built by :meth:`setup`."""
        if self._cipher is None:
            raise RuntimeError("no key configured; call setup() first")
        return self._cipher

    @property
    def key_setup(self) -> Optional[KeyDerivation]:
        return self._key_setup

    def setup(self, key: str, dimension: int | str) -> KeyDerivation:
        """Validate *key* and *dimension* and derive K and K^-1.

        Raises:
            InvalidDimension, InvalidCharacter, KeyLengthMismatch,
            MatrixNotInvertible: propagated after being logged.
        """
        with self.logger.operation("setup"):
            try:
                n = parse_dimension(dimension, self.config.hill.max_dimension)
                normalized = validate_key(key, n)
                derivation = derive_key_schedule(normalized, n)
                cipher = HillCipher.from_schedule(derivation)
            except HillError as exc:
                self.logger.debug(f"Key setup failed: {exc}")
                raise

            self.logger.info(
                f"Determinant of key matrix: {derivation.determinant} | "
                f"mod 26 -> {derivation.mod_determinant}",
                dimension=n,
            )
            self.logger.debug(
                f"Multiplicative inverse of determinant "
                f"({derivation.mod_determinant}) is: {derivation.determinant_inverse}"
            )

        self._cipher = cipher
        self._key_setup = derivation
        return derivation

    # ------------------------------------------------------------------ #
    #  Encryption / Decryption
    # ------------------------------------------------------------------ #

    def encrypt(self, message: str) -> CipherTrace:
        """Sanitise *message*, pad it and encrypt it block by block."""
        return self._run(CipherMode.ENCRYPT, message)

    def decrypt(self, ciphertext: str) -> CipherTrace:
        """Sanitise *ciphertext* and decrypt it block by block.

        Trailing letters that do not fill a block are reported in
        ``dropped_text`` and a warning is logged.
        """
        return self._run(CipherMode.DECRYPT, ciphertext)

    def round_trip(self, message: str) -> RoundTripResult:
        """Encrypt *message*, then decrypt the resulting ciphertext."""
        if self._key_setup is None:
            raise RuntimeError("no key configured; call setup() first")
        encryption = self.encrypt(message)
        decryption = self.decrypt(encryption.output_text)
        result = RoundTripResult(
            key_setup=self._key_setup,
            encryption=encryption,
            decryption=decryption,
        )
        if not result.matches:
            self.logger.warning(
                f"Round trip mismatch: {encryption.padded_text} -> "
                f"{decryption.output_text}"
            )
        return result

    def _run(self, mode: CipherMode, raw: str) -> CipherTrace:
        cipher = self.cipher
        n = cipher.dimension

        with self.logger.operation(mode.value):
            try:
                text = sanitize_message(raw)
                with self.logger.timed(f"{mode.value} ({len(text)} letters)") as timer:
                    if mode is CipherMode.ENCRYPT:
                        padded = pad_to_block_size(text, n) if text else text
                        transforms = cipher.encrypt_blocks(text)
                    else:
                        padded = text
                        transforms = cipher.decrypt_blocks(text)
            except HillError as exc:
                self.logger.debug(f"{mode.value.capitalize()} failed: {exc}")
                raise

            steps = [
                self._to_step(index, transform)
                for index, transform in enumerate(transforms, start=1)
            ]
            output = "".join(step.result_text for step in steps)
            dropped = padded[len(steps) * n:]

            if padded != text:
                self.logger.info(f"Message padded to '{padded}' for vectorization.")
            if dropped:
                self.logger.warning(
                    f"Ignoring {len(dropped)} trailing letter(s) '{dropped}' "
                    f"that do not fill a {n}-letter block"
                )
            self.logger.info(
                f"{mode.value.capitalize()}ed {len(steps)} block(s)",
                dimension=n,
            )

        return CipherTrace(
            mode=mode,
            dimension=n,
            input_text=text,
            padded_text=padded,
            output_text=output,
            dropped_text=dropped,
            steps=steps,
            elapsed_seconds=timer.elapsed,
        )

    @staticmethod
    def _to_step(index: int, transform: BlockTransform) -> BlockStep:
        vector = transform.source.tolist()
        reduced = transform.result.tolist()
        return BlockStep(
            index=index,
            source_text=blocks_to_text([transform.source]),
            vector=vector,
            product=transform.product.tolist(),
            reduced=reduced,
            result_text=blocks_to_text([transform.result]),
        )
