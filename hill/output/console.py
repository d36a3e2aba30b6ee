"""
Hill Console Output
====================

Rich-based console output for the Hill cipher tool. Renders the key
setup (key matrix, determinant, inverse key matrix) and the
block-by-block arithmetic of an encryption or decryption run the way a
classroom walkthrough would present it.

References:
    - Rich Library Documentation. https://rich.readthedocs.io/
"""

from __future__ import annotations

from typing import Optional

from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from shared.console import HillConsole
from hill.core.models import CipherMode, CipherTrace, KeyDerivation, RoundTripResult


_MODE_COLOURS: dict[CipherMode, str] = {
    CipherMode.ENCRYPT: "bright_green",
    CipherMode.DECRYPT: "bright_yellow",
}


class HillConsoleOutput:
    """Console formatters for Hill cipher results.

    Usage::

        console = HillConsole()
        output = HillConsoleOutput(console)
        output.display_key_setup(engine.setup("HILL", 2))
        output.display_trace(engine.encrypt("HELP"))
    """

    def __init__(self, console: Optional[HillConsole] = None) -> None:
        self.console = console or HillConsole()
        self._rich = self.console.rich

    # ------------------------------------------------------------------ #
    #  Key Setup
    # ------------------------------------------------------------------ #

    def display_key_setup(self, setup: KeyDerivation, *, show_adjugate: bool = False) -> None:
        """Show K, the determinant and its inverse, and K^-1."""
        self.console.section("Key Setup")

        self.console.matrix(setup.key_matrix, title="1. Key Matrix (Numerical):")
        self.console.blank()

        summary = Text()
        summary.append("Key: ", style="bold")
        summary.append(f"{setup.key}\n")
        summary.append("Determinant: ", style="bold")
        summary.append(f"{setup.determinant}  |  mod 26 -> {setup.mod_determinant}\n")
        summary.append("Inverse of determinant: ", style="bold")
        summary.append(f"{setup.determinant_inverse}")
        summary.append(
            f"  ({setup.mod_determinant} x {setup.determinant_inverse} = 1 mod 26)",
            style="hill.dim",
        )
        self._rich.print(Panel(summary, title="Determinant", border_style="cyan"))

        if show_adjugate:
            self.console.matrix(setup.adjugate, title="Adjugate adj(K):", style="cyan")
            self.console.blank()

        self.console.matrix(setup.inverse_matrix, title="2. Inverse Key Matrix (K⁻¹):")
        self.console.blank()

    # ------------------------------------------------------------------ #
    #  Cipher Trace
    # ------------------------------------------------------------------ #

    def display_trace(self, trace: CipherTrace, *, show_steps: bool = True) -> None:
        """Show the vectors of every block and the final text."""
        encrypting = trace.mode is CipherMode.ENCRYPT
        colour = _MODE_COLOURS[trace.mode]
        self.console.section("Encryption Process" if encrypting else "Decryption Process")

        label = "Plaintext" if encrypting else "Ciphertext"
        self.console.print(f"{label}: [bold]{trace.input_text}[/bold]")
        if trace.padding_added:
            self.console.info(f"Message padded to '{trace.padded_text}' for vectorization.")
        if trace.dropped_text:
            self.console.warning(
                f"Trailing letters '{trace.dropped_text}' do not fill a "
                f"{trace.dimension}-letter block and were ignored."
            )

        if show_steps and trace.steps:
            self._rich.print(self._steps_table(trace))

        result_label = "Encrypted" if encrypting else "Decrypted"
        self.console.blank()
        self.console.print(
            f"Final {result_label} Message: [bold {colour}]{trace.output_text}[/bold {colour}]"
        )
        self.console.blank()

    def _steps_table(self, trace: CipherTrace) -> Table:
        src = trace.mode.source_label
        dst = trace.mode.result_label
        matrix_name = "K" if trace.mode is CipherMode.ENCRYPT else "K⁻¹"

        tbl = Table(
            title=f"{matrix_name} · {src}  (mod 26)",
            border_style="bright_cyan",
            header_style="bold bright_magenta",
            show_lines=True,
        )
        tbl.add_column("#", style="dim", justify="right")
        tbl.add_column("Letters", style="bold")
        tbl.add_column(f"Vector {src}")
        tbl.add_column(f"{matrix_name} · {src}", justify="right")
        tbl.add_column(f"Vector {dst}")
        tbl.add_column("Letters", style=f"bold {_MODE_COLOURS[trace.mode]}")

        for step in trace.steps:
            tbl.add_row(
                f"{src}{step.index}",
                step.source_text,
                self._vector(step.vector),
                self._vector(step.product),
                self._vector(step.reduced),
                step.result_text,
            )
        return tbl

    @staticmethod
    def _vector(values: list[int]) -> str:
        return "[" + " ".join(str(v) for v in values) + "]ᵀ"

    # ------------------------------------------------------------------ #
    #  Round Trip
    # ------------------------------------------------------------------ #

    def display_round_trip(self, result: RoundTripResult, *, show_steps: bool = True) -> None:
        """Show key setup, encryption, decryption, and the verdict."""
        self.display_key_setup(result.key_setup)
        self.display_trace(result.encryption, show_steps=show_steps)
        self.display_trace(result.decryption, show_steps=show_steps)
        if result.matches:
            self.console.success("Decryption reproduced the (padded) plaintext.")
        else:
            self.console.error("Decryption did not reproduce the plaintext.")
