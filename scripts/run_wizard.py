"""CLI that walks a promotion through the wizard.

Usage:
    # Build a promotion against the demo catalog and print the payload
    python -m scripts.run_wizard --name "Spring Sale" --product P1:25 --store "S1:Main St" --dry-run

    # Several products and stores, submit to the configured service
    python -m scripts.run_wizard --name "Summer" --account 001xx \
        --product P1:10 --product P6:15 \
        --store "S1:Main St" --store "S2:Harbour Rd"
"""

import argparse
import asyncio
import json
import sys
from typing import TypeVar

from promo_wizard.core.exceptions import NotFoundError
from promo_wizard.core.logging import setup_logging
from promo_wizard.services.catalog import MockCatalogClient
from promo_wizard.services.dto.selection import StoreSelection
from promo_wizard.services.dto.submission import PromotionPayload, SubmitResult
from promo_wizard.services.submission import BasePromotionSubmitter, get_promotion_submitter
from promo_wizard.wizard import LoggingWizardHost, WizardController
from promo_wizard.wizard.steps import ProductSelectionStep, PromotionDetailsStep, StoreSelectionStep
from promo_wizard.wizard.steps.base import WizardStepComponent

StepT = TypeVar("StepT", bound=WizardStepComponent)


class PrintingSubmitter(BasePromotionSubmitter):
    """Prints the payload instead of posting it."""

    async def save_promotion(self, payload: PromotionPayload) -> SubmitResult:
        print(json.dumps(payload.to_wire(), indent=2, ensure_ascii=False))
        return SubmitResult(message="Dry run: promotion not sent")


def parse_product(value: str) -> tuple[str, str]:
    product_id, _, discount = value.partition(":")
    if not product_id or not discount:
        raise argparse.ArgumentTypeError(f"expected ID:DISCOUNT, got {value!r}")
    return product_id, discount


def parse_store(value: str) -> StoreSelection:
    store_id, _, store_name = value.partition(":")
    if not store_id:
        raise argparse.ArgumentTypeError(f"expected ID:NAME, got {value!r}")
    return StoreSelection(store_id=store_id, store_name=store_name or store_id)


async def select_products(step: ProductSelectionStep, products: list[tuple[str, str]]) -> None:
    """Page through the catalog until every requested product is picked."""
    pending = dict(products)
    while True:
        for item in step.items:
            if item.id in pending:
                step.toggle_selection(item.id, True)
                step.edit_discount(item.id, pending.pop(item.id))
        if not pending or not await step.next_page():
            break
    if pending:
        raise NotFoundError(message=f"Products not in catalog: {', '.join(pending)}")


def active_step_as(controller: WizardController, step_type: type[StepT]) -> StepT | None:
    """Return the active step if it has the expected type, else print an error."""
    step = controller.active_step
    if not isinstance(step, step_type):
        print(f"Error: expected {step_type.__name__} on step {controller.current_step}, got {type(step).__name__}")
        return None
    return step


async def run(args: argparse.Namespace) -> int:
    """Drive one session. Returns process exit code."""
    host = LoggingWizardHost()
    submitter = PrintingSubmitter() if args.dry_run else get_promotion_submitter()
    controller = WizardController(
        catalog=MockCatalogClient(),
        submitter=submitter,
        host=host,
        record_id=args.account,
        available_stores=args.store,
    )

    await controller.open()

    details = active_step_as(controller, PromotionDetailsStep)
    if details is None:
        return 1
    details.set_name(args.name)
    if not await controller.next():
        print(f"Error: {controller.validation_message}")
        return 1

    products = active_step_as(controller, ProductSelectionStep)
    if products is None:
        return 1
    try:
        await select_products(products, args.product)
    except NotFoundError as e:
        print(f"Error: {e.message}")
        return 1
    if not await controller.next():
        print(f"Error: {controller.validation_message}")
        return 1

    stores = active_step_as(controller, StoreSelectionStep)
    if stores is None:
        return 1
    for store in args.store:
        stores.toggle_store(store, True)

    ok = await controller.submit()
    notification = host.last_notification
    if notification is not None:
        print(f"{notification.title}: {notification.message}")
    return 0 if ok else 1


def main() -> None:
    """Main entry point."""
    parser = argparse.ArgumentParser(
        description="Create a promotion through the wizard",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    parser.add_argument("--name", required=True, help="Promotion name")
    parser.add_argument("--account", default=None, help="Account record ID")
    parser.add_argument(
        "--product",
        type=parse_product,
        action="append",
        default=[],
        help="Product and discount as ID:DISCOUNT (repeatable)",
    )
    parser.add_argument(
        "--store",
        type=parse_store,
        action="append",
        default=[],
        help="Store as ID:NAME (repeatable)",
    )
    parser.add_argument("--dry-run", action="store_true", help="Print payload instead of submitting")
    parser.add_argument("--log-level", default=None, help="Override log level")

    args = parser.parse_args()
    setup_logging(level=args.log_level)
    sys.exit(asyncio.run(run(args)))


if __name__ == "__main__":
    main()
