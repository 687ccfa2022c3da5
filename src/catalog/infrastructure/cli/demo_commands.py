"""CLI command that walks through the catalog end to end."""

from __future__ import annotations

import json

import click

from catalog.domain.exceptions import DomainException
from catalog.domain.model.admin_user import AdminUser
from catalog.domain.model.product import Product
from catalog.domain.model.user import User
from catalog.infrastructure.bootstrap import product_repository, product_service


def _display_products(title: str, products: list[Product], as_json: bool) -> None:
    """Shared formatting for a list of products."""
    click.echo(title)
    if as_json:
        click.echo(json.dumps([p.to_dict() for p in products], indent=2))
        return

    if not products:
        click.echo("  No products found.")
        return

    click.echo(f"  {'ID':<34} {'Name':<20} {'Price':>10} {'Owner':<10}")
    click.echo(f"  {'-'*77}")
    for p in products:
        click.echo(f"  {p.id:<34} {p.name:<20} {p.price:>10.2f} {p.owner:<10}")


def _run_demo(as_json: bool) -> None:
    user = User("Mona", "mona@example.com")
    admin = AdminUser.create("Ziad", "ziad@example.com")

    # User adds products (composition)
    phone_case = user.add_product("Phone Case", 10)
    power_bank = user.add_product("Power Bank", 30)
    user.add_product("Shoes", 55)
    _display_products("User products:", user.list_products(), as_json)

    user.update_product_price(phone_case.id, 12.5)
    click.echo(f"Updated price of {phone_case.name}: {phone_case.price:.2f}")

    admin.delete_product_from_user(user, power_bank.id)
    _display_products("After admin delete:", user.list_products(), as_json)

    repo = product_repository()
    service = product_service(repo)

    # Copy the user's products into the repository
    service.import_from_user(user)

    watch = service.add_new_product("Watch", 120, "Mona")
    _display_products("Service added:", [watch], as_json)

    service.discount(watch.id, 10)
    _display_products("After 10% discount:", [repo.get_by_id(watch.id)], as_json)

    found = service.search("sh")
    click.echo(f"Search 'sh': {', '.join(p.name for p in found)}")

    service.remove(watch.id)
    click.echo(
        f"After remove {watch.name}, all: "
        f"{', '.join(p.name for p in service.list_all())}"
    )


@click.command("demo")
@click.option("--json", "as_json", is_flag=True, help="Print products as JSON records.")
def demo(as_json: bool) -> None:
    """Run the scripted catalog walkthrough."""
    click.echo("=== Catalog Demo Start ===")

    try:
        _run_demo(as_json)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo("=== Catalog Demo End ===")
