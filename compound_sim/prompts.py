"""Interactive front end for the Compound Drop Simulator.

Asks for every simulation parameter on the terminal and keeps asking until a
valid value is entered.
"""

from __future__ import annotations

import math
from typing import Callable

from compound_sim.constants import DROP_CATALOG, EXIT_OPTION
from compound_sim.models import DropSpec, SimulationInput

DROP_MENU = "\n".join(
    ["Select an option:"]
    + [f"{key}. {label}" for key, (label, _) in DROP_CATALOG.items()]
    + [f"{EXIT_OPTION}. Exit"]
)


class InteractivePrompter:
    """Builds a SimulationInput from line-based user answers.

    `input_fn` returns one line per call and `output_fn` displays one message;
    both default to the terminal.
    """

    def __init__(
        self,
        input_fn: Callable[[], str] | None = None,
        output_fn: Callable[[str], None] | None = None,
    ) -> None:
        self.input_fn = input_fn or input
        self.output_fn = output_fn or print

    def read_input(self, prompt: str) -> str:
        self.output_fn(prompt)
        return self.input_fn()

    def read_float(self, prompt: str) -> float:
        while True:
            answer = self.read_input(prompt).strip()
            try:
                return float(answer)
            except ValueError:
                self.output_fn("ERROR: Not a valid float. Please try again.")

    def read_unsigned_int(self, prompt: str) -> int:
        while True:
            answer = self.read_input(prompt).strip()
            if answer.isdecimal():
                return int(answer)
            self.output_fn("ERROR: Not a valid unsigned integer. Please try again.")

    def confirm(self, prompt: str) -> bool:
        return self.read_input(prompt).strip().lower() == "y"

    def read_contribution(self, prompt: str) -> float:
        while True:
            amount = self.read_float(prompt)
            if math.isfinite(amount) and amount > 0:
                return amount
            self.output_fn("ERROR: Contribution must be a positive amount. Please try again.")

    def read_horizon(self, prompt: str) -> int:
        while True:
            years = self.read_unsigned_int(prompt)
            if years >= 1:
                return years
            self.output_fn("ERROR: Horizon must be at least one year. Please try again.")

    def prompt_drops(self) -> list[DropSpec]:
        """Loop over the drop catalog menu until the exit option is chosen."""
        drops: list[DropSpec] = []
        while True:
            option = self.read_input(DROP_MENU).strip()
            if option == EXIT_OPTION:
                break
            if option not in DROP_CATALOG:
                self.output_fn("Invalid option. Please try again.")
                continue

            count = self.read_unsigned_int("How many?")
            _, severity = DROP_CATALOG[option]
            drops.append(DropSpec(severity=severity, occurrences=count))

        return drops

    def prompt_input(self) -> SimulationInput:
        monthly_contribution = self.read_contribution(
            "How much money do you expect to invest each month?"
        )
        annual_growth_rate = self.read_float(
            "What is the yearly return on investment of the stock? (e.g., 0.04)"
        )
        horizon_years = self.read_horizon(
            "How many years do you plan to compound this investment?"
        )
        if self.confirm("Do you want to add drops in the calculation? y/n"):
            drops = self.prompt_drops()
        else:
            drops = []

        return SimulationInput(
            monthly_contribution=monthly_contribution,
            annual_growth_rate=annual_growth_rate,
            horizon_years=horizon_years,
            drops=tuple(drops),
        )
