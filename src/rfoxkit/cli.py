"""CLI entry point for rfoxkit."""

from __future__ import annotations

import asyncio
import logging
import sys
import time

import click
from web3 import Web3

from rfoxkit.config import load_config
from rfoxkit.errors import RfoxKitError
from rfoxkit.kit import RfoxKit
from rfoxkit.models.collection import VideoAssetDescriptor
from rfoxkit.models.config import NETWORKS


def _eth(wei: int | None, symbol: str = "ETH") -> str:
    if wei is None:
        return "-"
    return f"{Web3.from_wei(wei, 'ether')} {symbol}"


def _symbol(cfg) -> str:
    known = NETWORKS.get(cfg.chain_id)
    return known.currency_symbol if known else "ETH"


def _when(ts: int) -> str:
    if not ts:
        return "(not set)"
    return time.strftime("%Y-%m-%d %H:%M:%S", time.gmtime(ts)) + " UTC"


def _require_contract(cfg):
    """Exit with error if the collection is not configured."""
    if not cfg.contract_address or not cfg.collection_id:
        click.echo("Error: No collection configured.", err=True)
        click.echo(
            "Set RFOXKIT_CONTRACT_ADDRESS and RFOXKIT_COLLECTION_ID or [collection] in config.",
            err=True,
        )
        sys.exit(1)


def _require_secret(cfg):
    """Exit with error if no wallet secret is configured."""
    if not cfg.wallet_secret:
        click.echo("Error: No wallet secret configured.", err=True)
        click.echo("Set RFOXKIT_SECRET env var or [wallet] secret in config.", err=True)
        sys.exit(1)


async def _open_kit(cfg) -> RfoxKit:
    try:
        kit = await RfoxKit.create(cfg)
    except RfoxKitError as exc:
        click.echo(f"Error: {exc.message}", err=True)
        sys.exit(1)
    if kit is None:
        click.echo("Cancelled.", err=True)
        sys.exit(1)
    return kit


@click.group()
@click.option("-c", "--config", "config_path", default=None, help="Path to config TOML file")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, config_path: str | None, verbose: bool) -> None:
    """rfoxkit - mint NFTs from RFOX collections."""
    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path
    ctx.obj["verbose"] = verbose

    if verbose:
        level = logging.DEBUG
    else:
        configured = load_config(config_path).log_level.upper()
        level = getattr(logging, configured, logging.INFO)
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


# ── Configuration ──────────────────────────────────────


@cli.command()
@click.pass_context
def status(ctx: click.Context) -> None:
    """Show kit configuration."""
    cfg = load_config(ctx.obj["config_path"])
    click.echo(f"Variant:    {cfg.variant.value}")
    click.echo(f"Network:    {cfg.network} (chain {cfg.chain_id})")
    click.echo(f"RPC URL:    {cfg.effective_rpc_url or '(not set)'}")
    click.echo(f"Contract:   {cfg.contract_address or '(not set)'}")
    click.echo(f"Collection: {cfg.collection_id or '(not set)'}")
    click.echo(f"Asset:      {cfg.asset_id or '(not set)'}")
    click.echo(f"API:        {cfg.api_base_url or '(not set)'}{' [dev]' if cfg.dev else ''}")
    click.echo(f"Secret:     {'***configured***' if cfg.wallet_secret else '(not set)'}")


# ── Collection ─────────────────────────────────────────


@cli.command()
@click.pass_context
def info(ctx: click.Context) -> None:
    """Read collection details and the current sale phase."""
    cfg = load_config(ctx.obj["config_path"])
    _require_contract(cfg)
    symbol = _symbol(cfg)

    async def _info():
        kit = await _open_kit(cfg)
        try:
            d = kit.descriptor
            snap = kit.eligibility()

            click.echo(f"Variant:    {d.variant.value}")
            if not isinstance(d, VideoAssetDescriptor):
                click.echo(f"Supply:     {d.current_supply} / {d.max_supply}")
                click.echo(f"Sale start: {_when(d.sale_start)}")
                if hasattr(d, "public_sale_start"):
                    click.echo(f"Public:     {_when(d.public_sale_start)}")
                if hasattr(d, "sale_end"):
                    click.echo(f"Sale end:   {_when(d.sale_end) if d.sale_end else '(open)'}")
                if hasattr(d, "presale_price"):
                    click.echo(f"Presale:    {_eth(d.presale_price, symbol)}")
            click.echo(f"Price:      {_eth(d.public_price, symbol)}")
            click.echo(f"Phase:      {snap.phase.value}")
            click.echo(f"Unit price: {_eth(snap.unit_price, symbol)}")
            click.echo(f"Per tx:     {snap.per_tx_limit}")

            balance = await kit.wallet_balance()
            if balance is not None:
                click.echo(f"Wallet:     {kit.wallet_address}")
                click.echo(f"Balance:    {_eth(balance, symbol)}")
        finally:
            await kit.close()

    asyncio.run(_info())


@cli.command()
@click.pass_context
def proof(ctx: click.Context) -> None:
    """Resolve the presale proof for the configured wallet."""
    cfg = load_config(ctx.obj["config_path"])
    _require_contract(cfg)
    _require_secret(cfg)

    async def _proof():
        kit = await _open_kit(cfg)
        try:
            if kit.resolver is None:
                click.echo("This collection has no presale.")
                return
            hashes = await kit.resolve_proof()
            if not hashes:
                click.echo(f"{kit.wallet_address} is not on the allow-list.")
                return
            click.echo(f"Proof for {kit.wallet_address} ({len(hashes)} hashes):")
            for h in hashes:
                click.echo(f"  {h}")
        finally:
            await kit.close()

    asyncio.run(_proof())


@cli.command("video-minted")
@click.argument("video_id")
@click.pass_context
def video_minted(ctx: click.Context, video_id: str) -> None:
    """Check whether a video id has already been minted."""
    cfg = load_config(ctx.obj["config_path"])
    _require_contract(cfg)

    async def _check():
        kit = await _open_kit(cfg)
        try:
            used = await kit.is_video_minted(video_id)
        finally:
            await kit.close()
        click.echo(f"{video_id}: {'minted' if used else 'available'}")

    asyncio.run(_check())


# ── Mint ───────────────────────────────────────────────


@cli.command()
@click.argument("quantity", type=int)
@click.option("--yes", "-y", is_flag=True, help="Skip confirmation prompt")
@click.pass_context
def mint(ctx: click.Context, quantity: int, yes: bool) -> None:
    """Mint QUANTITY tokens in the current sale phase."""
    cfg = load_config(ctx.obj["config_path"])
    _require_contract(cfg)
    _require_secret(cfg)
    symbol = _symbol(cfg)

    async def _mint():
        kit = await _open_kit(cfg)
        try:
            snap = kit.eligibility()
            if snap.is_open:
                shown = min(quantity, snap.per_tx_limit)
                click.echo(
                    f"Phase {snap.phase.value}: {shown} x {_eth(snap.unit_price, symbol)}"
                    f" (limit {snap.per_tx_limit} per transaction)"
                )
                if not yes:
                    click.confirm("Submit mint transaction?", abort=True)

            return await kit.mint(quantity)
        finally:
            await kit.close()

    result = asyncio.run(_mint())
    if result.cancelled:
        click.echo("Cancelled.")
        return
    if not result.success:
        click.echo(f"Mint failed: {result.error}", err=True)
        sys.exit(1)

    click.echo(f"Minted {result.quantity} token(s) for {_eth(result.amount, symbol)}")
    click.echo(f"Transaction: {result.tx_hash}")


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
