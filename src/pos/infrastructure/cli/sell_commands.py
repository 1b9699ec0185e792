"""Interactive sell screen.

Reads raw keystrokes so a barcode scanner can be used directly: a scan
is typed into the scan decoder and finished by Enter.  Pressing ``:``
opens a command prompt; while it is open the decoder sees nothing,
just like a focused text field.

Prompt commands::

    add <code>        add one unit
    qty <code> <n>    set a line's quantity
    rm <code>         remove a line
    pay               check out and print the receipt
    clear             empty the cart
    quit              leave the sell screen
"""

from __future__ import annotations

import click

from pos.application.sell_session import SellSession
from pos.application.show_sales import to_sale_dto
from pos.domain.exceptions import DomainException
from pos.domain.service.scan_decoder import ENTER_KEY, KeyEvent
from pos.infrastructure.bootstrap import sell_session
from pos.infrastructure.cli.sale_commands import display_receipt
from pos.infrastructure.config import Settings

_COMMAND_KEY = ":"
_EXIT_KEYS = ("\x03", "\x04")  # Ctrl-C, Ctrl-D


def _display_cart(session: SellSession, settings: Settings) -> None:
    money = settings.money
    if session.cart.is_empty:
        click.echo("Cart is empty.")
        return
    click.echo(f"  {'Code':<12} {'Item':<20} {'Qty':>5} {'Total':>12}")
    for item in session.cart:
        click.echo(
            f"  {item.product_code:<12} {item.name:<20} {item.quantity:>5} "
            f"{money(item.line_total):>12}"
        )
    click.echo(f"  {'Total':<38} {money(session.cart.total):>12}")


def _line_id(session: SellSession, code: str) -> str | None:
    for item in session.cart:
        if item.product_code.casefold() == code.casefold():
            return item.product_id
    return None


def _run_command(session: SellSession, line: str, settings: Settings) -> bool:
    """Execute one prompt command.  Returns False when the operator quits."""
    parts = line.split()
    if not parts:
        return True
    command, args = parts[0].lower(), parts[1:]

    if command == "quit":
        return False
    if command == "pay":
        sale = session.checkout()
        if sale is None:
            click.echo("Nothing to check out.")
        else:
            display_receipt(to_sale_dto(sale), settings)
        return True
    if command == "clear":
        session.clear()
    elif command == "add" and len(args) == 1:
        if session.add_by_code(args[0]) is None:
            click.echo(f"No product with code '{args[0]}'.")
    elif command == "qty" and len(args) == 2:
        product_id = _line_id(session, args[0])
        if product_id is None:
            click.echo(f"'{args[0]}' is not in the cart.")
        else:
            session.set_quantity(product_id, args[1])
            session.leave_quantity_field(product_id)
    elif command == "rm" and len(args) == 1:
        product_id = _line_id(session, args[0])
        if product_id is not None:
            session.remove(product_id)
    else:
        click.echo(f"Unknown command: {line.strip()}")
        return True

    _display_cart(session, settings)
    return True


@click.command("sell")
@click.pass_obj
def sell(settings: Settings) -> None:
    """Open the sell screen (scan items, ':' for commands)."""
    session = sell_session(settings)
    click.echo("Scan items, or press ':' for a command (add, qty, rm, pay, clear, quit).")

    while True:
        try:
            char = click.getchar()
        except (KeyboardInterrupt, EOFError):
            break
        if not char or char in _EXIT_KEYS:
            break

        # Mid-scan, ':' is part of the code being scanned.
        if char == _COMMAND_KEY and not session.is_scanning():
            try:
                line = click.prompt(":", default="", show_default=False, prompt_suffix="")
            except click.Abort:
                break
            try:
                if not _run_command(session, line, settings):
                    break
            except DomainException as exc:
                click.echo(f"Error: {exc}")
            continue

        if char in ("\r", "\n"):
            cart_before = session.cart
            session.press_key(KeyEvent(ENTER_KEY))
            if session.cart != cart_before:
                _display_cart(session, settings)
        elif len(char) == 1 and char.isprintable():
            session.press_key(KeyEvent(char))
