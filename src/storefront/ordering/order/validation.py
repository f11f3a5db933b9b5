"""Order validation — required identity and line-item fields."""

from protean.exceptions import ValidationError

from storefront.ordering.order.order import Order


def validate_order(order: Order) -> list[str]:
    """Return the problems that prevent ``order`` from being stored."""
    problems = []
    if not order.customer_name:
        problems.append("customerName is required")
    if not order.email:
        problems.append("email is required")
    if not order.items:
        problems.append("items must contain at least one line item")

    for index, item in enumerate(order.items):
        if not item.name:
            problems.append(f"items[{index}].name is required")
        if not item.sku:
            problems.append(f"items[{index}].sku is required")

    return problems


def validate_batch(orders: list[Order]) -> None:
    """Reject the whole batch if any entry is invalid."""
    if not orders:
        raise ValidationError({"orders": ["At least one order is required"]})

    errors = {}
    for index, order in enumerate(orders):
        problems = validate_order(order)
        if problems:
            errors[f"orders[{index}]"] = problems

    if errors:
        raise ValidationError(errors)
