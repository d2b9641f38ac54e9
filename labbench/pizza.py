"""Pizza order planning for a party: how many of each size, area and cost."""

from __future__ import annotations

import sys
from dataclasses import dataclass

PI = 3.14159265

LARGE_DIAMETER = 20
MEDIUM_DIAMETER = 16
SMALL_DIAMETER = 12

LARGE_PRICE = 14.68
MEDIUM_PRICE = 11.48
SMALL_PRICE = 7.28

GUESTS_PER_LARGE = 7
GUESTS_PER_MEDIUM = 3


def _area(diameter: float) -> float:
    return (0.5 * diameter) ** 2 * PI


@dataclass(frozen=True)
class PizzaOrder:
    """Counts of large, medium and small pizzas for a number of guests."""

    guests: int
    large: int
    medium: int
    small: int

    @property
    def total_area(self) -> int:
        """Total area in whole square inches."""
        return int(
            self.large * _area(LARGE_DIAMETER)
            + self.medium * _area(MEDIUM_DIAMETER)
            + self.small * _area(SMALL_DIAMETER)
        )

    @property
    def area_per_guest(self) -> int:
        """Whole square inches of pizza per guest."""
        return self.total_area // self.guests


def plan_order(guests: int) -> PizzaOrder:
    """Large pizzas for every 7 guests, mediums for every 3, smalls for the rest."""
    if guests < 1:
        raise ValueError(f"number of guests must be positive, got {guests}")
    large, rest = divmod(guests, GUESTS_PER_LARGE)
    medium, small = divmod(rest, GUESTS_PER_MEDIUM)
    return PizzaOrder(guests, large, medium, small)


def total_cost(order: PizzaOrder, tip: float) -> float:
    """Price of the pizzas multiplied by the tip figure."""
    subtotal = (
        order.large * LARGE_PRICE
        + order.medium * MEDIUM_PRICE
        + order.small * SMALL_PRICE
    )
    return subtotal * tip


def main(argv: list[str] | None = None) -> int:
    """Ask for guests and a tip, then print the order and its cost."""
    try:
        print("Please enter the amount of guests you expect to have: ")
        order = plan_order(int(input().split()[0]))
        print(
            f"You will need {order.large} large pizzas, {order.medium} medium pizzas, "
            f"and {order.small} small pizzas."
        )
        print(
            f"A total of {order.total_area} square inches of pizza will be ordered. "
            f"{order.area_per_guest} inches per person."
        )
        print("Please enter the tip as a percentage. (ex.10 = 10%) : ")
        tip = float(input().split()[0])
        print()
        print(f"Your total cost will be: {total_cost(order, tip):g}")
    except (EOFError, IndexError, ValueError) as error:
        print(f"invalid input: {error}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())