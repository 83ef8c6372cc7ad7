from __future__ import annotations

from dataclasses import dataclass

from rich.table import Table

from price_slice.formatting import format_percent, format_rate, format_usd
from price_slice.preferences.types import Theme, UiPreferences
from price_slice.pricing.types import (
  Breakdown,
  CouponType,
  SanitizedInput,
  StackedSanitizedInput,
)


@dataclass(frozen=True, slots=True)
class TableStyle:
  header: str
  label: str
  reduction: str
  addition: str
  total: str


THEME_STYLES: dict[Theme, TableStyle] = {
  Theme.LIGHT: TableStyle(
    header="bold blue",
    label="black",
    reduction="dark_green",
    addition="dark_orange3",
    total="bold black",
  ),
  Theme.DARK: TableStyle(
    header="bold cyan",
    label="grey85",
    reduction="green",
    addition="yellow",
    total="bold white",
  ),
}


def _coupon_label(inputs: SanitizedInput | StackedSanitizedInput) -> str:
  if isinstance(inputs, SanitizedInput) and inputs.coupon_type == CouponType.PERCENT_OFF:
    return f"Coupon ({format_rate(inputs.coupon_percent)})"
  return "Coupon"


def render_breakdown(
  inputs: SanitizedInput | StackedSanitizedInput,
  breakdown: Breakdown,
  *,
  theme: Theme = Theme.LIGHT,
  show_advanced: bool = False,
) -> Table:
  """Build a rich table of every stage of a breakdown.

  The additional discount and coupon rows only appear when they change the
  result, unless ``show_advanced`` asks for them anyway.
  """

  style = THEME_STYLES[theme]
  table = Table(title="Price breakdown", header_style=style.header, show_lines=False)
  table.add_column("Stage", style=style.label)
  table.add_column("Amount", justify="right")

  table.add_row("Price", format_usd(inputs.price))
  table.add_row("Quantity", str(inputs.quantity))
  table.add_row("Subtotal", format_usd(breakdown.subtotal))
  table.add_row(
    f"Discount ({format_rate(inputs.discount_percent)})",
    f"-{format_usd(breakdown.discount_amount)}",
    style=style.reduction,
  )
  table.add_row("After discount", format_usd(breakdown.after_discount))

  if isinstance(inputs, StackedSanitizedInput) and (
    show_advanced or breakdown.additional_discount_amount != 0
  ):
    table.add_row(
      f"Additional discount ({format_rate(inputs.additional_discount_percent)})",
      f"-{format_usd(breakdown.additional_discount_amount)}",
      style=style.reduction,
    )
    table.add_row("After additional discount", format_usd(breakdown.after_additional_discount))

  if show_advanced or breakdown.coupon_applied != 0:
    table.add_row(
      _coupon_label(inputs), f"-{format_usd(breakdown.coupon_applied)}", style=style.reduction
    )
    table.add_row("After coupon", format_usd(breakdown.after_coupon))

  if inputs.include_tax:
    table.add_row(
      f"Tax ({format_rate(inputs.tax_rate)})",
      f"+{format_usd(breakdown.tax_amount)}",
      style=style.addition,
    )

  table.add_section()
  table.add_row("Total", format_usd(breakdown.total), style=style.total)
  table.add_row(
    "You save",
    f"{format_usd(breakdown.savings)} ({format_percent(breakdown.savings_percent)})",
    style=style.reduction,
  )
  return table


def render_preferences(preferences: UiPreferences) -> Table:
  style = THEME_STYLES[preferences.theme]
  table = Table(title="Preferences", header_style=style.header)
  table.add_column("Key", style=style.label)
  table.add_column("Value")
  for key, value in sorted(preferences.to_stored().items()):
    table.add_row(key, value)
  return table


__all__ = ["THEME_STYLES", "TableStyle", "render_breakdown", "render_preferences"]
