"""Flask CLI commands for account store maintenance."""

from __future__ import annotations

import logging

import click
from flask.cli import with_appcontext

from profilehub.core.extensions import get_account_store, get_password_hasher
from profilehub.infra.file import JsonFileAccountStore
from profilehub.infra.sql import SqlAccountStore
from profilehub.services._shared.errors import ServiceError
from profilehub.services.registration.dto import UserRegistrationIn
from profilehub.services.registration.service import UserRegistrationService

LOGGER = logging.getLogger(__name__)


@click.group("accounts")
def accounts_cli() -> None:
    """Account store maintenance commands."""


@accounts_cli.command("init-store")
@with_appcontext
def init_store_command() -> None:
    """Create the relational schema or the accounts file for the active backend."""
    store = get_account_store()
    try:
        if isinstance(store, SqlAccountStore):
            store.ensure_schema()
            click.echo("accounts table ready.")
        elif isinstance(store, JsonFileAccountStore):
            store.ensure_file()
            click.echo(f"accounts file ready at {store.path}.")
        else:
            click.echo(f"Nothing to initialize for the {store.backend} backend.")
    except ServiceError as exc:
        raise click.ClickException(f"Initialization failed: {exc}") from exc


@accounts_cli.command("create")
@click.option("--full-name", required=True, help="Display name of the account holder.")
@click.option("--email", required=True, help="Login email; normalized before storage.")
@click.option("--password", required=True, prompt=True, hide_input=True, help="Raw password.")
@click.option("--headline", default=None, help="Optional professional headline.")
@with_appcontext
def create_command(full_name: str, email: str, password: str, headline: str | None) -> None:
    """Register an account through the registration service."""
    service = UserRegistrationService(store=get_account_store(), hasher=get_password_hasher())
    try:
        result = service.register(
            UserRegistrationIn(full_name=full_name, email=email, password=password, headline=headline)
        )
    except ServiceError as exc:
        raise click.ClickException(str(exc)) from exc
    LOGGER.info("cli.account_created", extra={"account_id": result.account.id})
    click.echo(f"Created account {result.account.id} for {result.account.email}.")
