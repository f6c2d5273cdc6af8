# Copyright 2026 UCP Authors
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
Deposit Checkout CLI - Command line interface to the order proxy.

Usage:
    python -m app --help
    python -m app serve
    python -m app deposit --amount 25.00 --email a@b.com --wallet <address>
    python -m app health
"""

import asyncio
import json
import sys
from decimal import Decimal
from typing import Optional

import click
import httpx

from backend.config import load_settings
from backend.constants import Constants
from backend.exceptions import ConfigurationError

from .amounts import AmountValidator
from .appearance import CHECKOUT_APPEARANCE
from .checkout import CheckoutInputs, CheckoutOrchestrator, CheckoutStatus
from .proxy_client import ProxyOrderClient

constants = Constants()

# Fix Windows console encoding
if sys.platform == 'win32':
    sys.stdout.reconfigure(encoding='utf-8', errors='replace')


def print_header(title: str):
    """Print a header with borders."""
    border = "=" * (len(title) + 4)
    print(f"\n{border}")
    print(f"| {title} |")
    print(f"{border}\n")


def print_success(msg: str):
    print(f"[OK] {msg}")


def print_error(msg: str):
    print(f"[ERROR] {msg}")


def print_info(msg: str):
    print(f"[INFO] {msg}")


async def run_deposit(
    proxy_url: str,
    amount: str,
    email: str,
    wallet: str,
    min_amount: Decimal,
    max_amount: Decimal,
) -> bool:
    """Run one checkout session against the proxy and show the result."""
    print_header("Deposit Checkout")

    client = ProxyOrderClient(base_url=proxy_url, timeout=30.0)
    orchestrator = CheckoutOrchestrator(
        creator=client,
        on_processing_payment=lambda: print_info("Payment processing..."),
        on_payment_completed=lambda: print_success("Payment completed"),
        amount_validator=AmountValidator(min_amount, max_amount),
        appearance=CHECKOUT_APPEARANCE,
    )

    try:
        inputs = CheckoutInputs(amount=amount, receipt_email=email, wallet_address=wallet)
        if await orchestrator.update(inputs):
            print_info("Order creation requested")
    finally:
        await client.aclose()

    view = orchestrator.render(constants.STEP_OPTIONS)

    if view.breakdown is not None:
        for label, value in view.breakdown.rows():
            print(f"   {label:<12} {value}")
        print()

    if not view.is_amount_valid:
        print_error(f"Amount must be between {min_amount} and {max_amount} with at most 2 decimals")
        return False

    if view.error:
        print_error(view.error)
        return False

    if orchestrator.status == CheckoutStatus.READY and view.embedded_checkout:
        print_success(f"Order {orchestrator.state.order_id} ready for payment")
        print_info("Embedded checkout props:")
        print(json.dumps(view.embedded_checkout.to_props(), indent=2))
        return True

    print_error(f"Unexpected checkout state: {orchestrator.status.value}")
    return False


async def run_health_check(proxy_url: str):
    """Probe the proxy health endpoint."""
    print_header("Proxy Health Check")

    try:
        async with httpx.AsyncClient(base_url=proxy_url, timeout=10.0) as client:
            response = await client.get("/health")

        if response.status_code == 200:
            data = response.json()
            print_success(f"Proxy responding ({data.get('environment')})")
            if data.get("configured"):
                print_success("Crossmint API key configured")
            else:
                print_error("Crossmint API key missing, orders will fail")
        else:
            print_error(f"Proxy returned {response.status_code}")

    except httpx.ConnectError:
        print_error(f"Cannot connect to proxy at {proxy_url}")
        print("[TIP] Make sure the proxy is running:")
        print("      python -m app serve")


@click.group()
def cli():
    """Deposit Checkout CLI"""
    pass


@cli.command()
@click.option("--host", default="localhost")
@click.option("--port", default=3000)
def serve(host: str, port: int):
    """Start the order proxy."""
    print_header("Starting Order Proxy")
    print(f"URL: http://{host}:{port}")
    print("Press Ctrl+C to stop\n")

    from backend.server import run_server
    run_server(host=host, port=port)


@cli.command()
@click.option("--amount", "-a", required=True, help="Fiat amount, e.g. 25.00")
@click.option("--email", "-e", required=True, help="Receipt email")
@click.option("--wallet", "-w", required=True, help="Destination wallet address")
@click.option("--proxy-url", default="http://localhost:3000", envvar="DEPOSIT_PROXY_URL")
def deposit(
    amount: str,
    email: str,
    wallet: str,
    proxy_url: str,
):
    """Create a deposit order and print the embedded checkout props.

    The accepted amount range comes from CHECKOUT_MIN_AMOUNT and
    CHECKOUT_MAX_AMOUNT, the same settings the proxy loads.
    """
    try:
        settings = load_settings()
    except ConfigurationError as e:
        raise click.BadParameter(str(e), param_hint="environment")

    ok = asyncio.run(
        run_deposit(proxy_url, amount, email, wallet, settings.min_amount, settings.max_amount)
    )
    if not ok:
        sys.exit(1)


@cli.command()
@click.option("--proxy-url", default="http://localhost:3000", envvar="DEPOSIT_PROXY_URL")
def health(proxy_url: Optional[str]):
    """Check that the order proxy is up."""
    asyncio.run(run_health_check(proxy_url))


if __name__ == "__main__":
    cli()
