from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Callable, Sequence

import structlog
from clypi import Command, arg
from rich.console import Console
from typing_extensions import override

from price_slice.config import AppConfig, load_config, parse_coupon_model
from price_slice.display import render_breakdown, render_preferences
from price_slice.formatting import build_breakdown_text
from price_slice.preferences import PreferenceStore
from price_slice.pricing import (
  CouponModel,
  CouponType,
  RawInput,
  compute_breakdown,
  sanitize_for,
)

logger = structlog.get_logger(__name__)


def _coupon_model_parser() -> Callable[[Sequence[str] | str], CouponModel]:
  def _parser(raw: Sequence[str] | str) -> CouponModel:
    if isinstance(raw, str):
      return parse_coupon_model(raw)
    if not raw:
      raise ValueError("model value missing")
    return parse_coupon_model(raw[0])

  return _parser


@dataclass(frozen=True, slots=True)
class TaxSettings:
  include_tax: bool
  tax_rate: str


async def resolve_tax_settings(
  store: PreferenceStore,
  config: AppConfig,
  *,
  tax_rate: str | None,
  no_tax: bool,
) -> TaxSettings:
  """Merge command-line tax options with remembered preferences, saving any change."""

  preferences = await store.load()
  stored_rate = await store.get("tax_rate")
  settings = TaxSettings(
    include_tax=preferences.include_tax,
    tax_rate=preferences.tax_rate if stored_rate is not None else str(config.default_tax_rate),
  )
  if tax_rate is not None:
    settings = TaxSettings(include_tax=True, tax_rate=tax_rate)
    await store.set("tax_rate", tax_rate)
    await store.set("include_tax", "true")
  if no_tax:
    settings = TaxSettings(include_tax=False, tax_rate=settings.tax_rate)
    await store.set("include_tax", "false")
  return settings


def build_raw_input(
  *,
  price: str,
  discount: str,
  quantity: str,
  tax: TaxSettings,
  coupon: str | None,
  coupon_type: str | None,
  additional: str | None,
) -> RawInput:
  if coupon_type is None:
    coupon_type = CouponType.AMOUNT_OFF if coupon is not None else CouponType.NONE
  # One coupon box feeds both fields; the coupon type decides which one counts.
  return RawInput(
    price=price,
    discount_percent=discount,
    quantity=quantity,
    include_tax=tax.include_tax,
    tax_rate=tax.tax_rate,
    coupon_type=coupon_type,
    coupon_amount=coupon,
    coupon_percent=coupon,
    additional_discount_percent=additional,
  )


class Calc(Command):
  """Calculate the discounted price, coupon savings and tax for an item"""

  price: str = arg("0", help="Item price, e.g. '$49.99' or '1.234,50'")
  discount: str = arg("0", help="Discount percent, e.g. '25' or '25%'")
  quantity: str = arg("1", help="Number of items")
  tax_rate: str | None = arg(None, help="Sales tax percent; enables tax and is remembered")
  no_tax: bool = arg(False, help="Leave tax out (remembered)")
  coupon: str | None = arg(None, help="Coupon value, in dollars or percent depending on type")
  coupon_type: str | None = arg(None, help="Coupon type: none, $off or %off (mode model)")
  additional: str | None = arg(
    None, help="Additional percent off after the discount (stacked model)"
  )
  model: CouponModel | None = arg(
    None,
    help="Coupon model: 'mode' (coupon type) or 'stacked' (additional percent + flat coupon)",
    parser=_coupon_model_parser(),
  )
  text: bool = arg(False, help="Print a plain-text breakdown instead of a table")
  config: Path | None = arg(
    None, help="Path to config.yaml (defaults to ~/.config/price-slice/config.yaml)"
  )

  @override
  async def run(self) -> None:
    config = load_config(self.config.expanduser() if self.config else None)
    model = self.model if self.model is not None else config.coupon_model
    logger.debug(
      "config resolved",
      coupon_model=model.value,
      preferences_file=str(config.preferences_file),
    )
    store = PreferenceStore(config.preferences_file)
    tax = await resolve_tax_settings(store, config, tax_rate=self.tax_rate, no_tax=self.no_tax)
    raw = build_raw_input(
      price=self.price,
      discount=self.discount,
      quantity=self.quantity,
      tax=tax,
      coupon=self.coupon,
      coupon_type=self.coupon_type,
      additional=self.additional,
    )
    inputs = sanitize_for(model, raw)
    breakdown = compute_breakdown(inputs)

    if self.text:
      print(build_breakdown_text(inputs, breakdown))
      return
    preferences = await store.load()
    Console().print(
      render_breakdown(
        inputs,
        breakdown,
        theme=preferences.theme,
        show_advanced=preferences.advanced_open,
      )
    )


class Prefs(Command):
  """Show or change remembered calculator preferences"""

  update: str | None = arg(
    None, help="KEY=VALUE to store, e.g. 'theme=dark' or 'advanced_open=true'"
  )
  config: Path | None = arg(
    None, help="Path to config.yaml (defaults to ~/.config/price-slice/config.yaml)"
  )

  @override
  async def run(self) -> None:
    config = load_config(self.config.expanduser() if self.config else None)
    store = PreferenceStore(config.preferences_file)
    if self.update is not None:
      key, sep, value = self.update.partition("=")
      if not sep:
        raise ValueError(f"expected KEY=VALUE, got {self.update!r}")
      await store.set(key.strip(), value)
    Console().print(render_preferences(await store.load()))


class Cli(Command):
  """Price Slice discount and tax calculator."""

  subcommand: Calc | Prefs


def run() -> int:
  try:
    cmd = Cli.parse()
    cmd.start()
    return 0
  except KeyboardInterrupt:
    print("\nInterrupted by user (Ctrl+C). Exiting cleanly.")
    return 130


__all__ = ["run", "Cli", "Calc", "Prefs", "TaxSettings", "build_raw_input", "resolve_tax_settings"]
