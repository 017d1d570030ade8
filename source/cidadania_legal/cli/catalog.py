"""This module defines the 'catalog' command group, a terminal view of the static content."""

import json
from collections.abc import Sequence
from typing import Any

import click
from cidadania_legal.exceptions.validation import InvalidInputError
from cidadania_legal.models.content import CatalogCategory, CatalogEntry
from cidadania_legal.services import ContentCatalog


def _wants_json(ctx: click.Context) -> bool:
    return ctx.obj is not None and ctx.obj.output_format == "json"


def _echo_json(payload: Any) -> None:
    click.echo(json.dumps(payload, ensure_ascii=False, indent=2))


def _echo_categories(ctx: click.Context, categories: Sequence[CatalogCategory]) -> None:
    if _wants_json(ctx):
        _echo_json([category.model_dump(mode="json") for category in categories])
        return
    for category in categories:
        click.secho(category.label, bold=True)
        for entry in category.entries:
            click.echo(f"  - {entry.heading}")


@click.group("catalog")
def catalog_group() -> None:
    """Groups commands that browse the rights, glossary and support content."""
    pass


@catalog_group.command("categories")
@click.option("--glossario", "glossary", is_flag=True, help="List glossary categories instead of rights.")
@click.pass_context
def categories(ctx: click.Context, glossary: bool) -> None:
    """Lists every category with the headings of its entries.

    Args:
        ctx: The Click context object.
        glossary: If True, lists the glossary instead of the rights content.
    """
    catalog = ContentCatalog()
    _echo_categories(ctx, catalog.list_glossary() if glossary else catalog.list_categories())


@catalog_group.command("search")
@click.argument("query")
@click.option("--glossario", "glossary", is_flag=True, help="Search the glossary instead of rights.")
@click.pass_context
def search(ctx: click.Context, query: str, glossary: bool) -> None:
    """Searches the content, case-insensitively, by heading or body.

    Args:
        ctx: The Click context object.
        query: The text to look for.
        glossary: If True, searches the glossary instead of the rights content.
    """
    catalog = ContentCatalog()
    results = catalog.search_glossary(query) if glossary else catalog.search_categories(query)
    if not results and not _wants_json(ctx):
        click.secho(f'Nenhum termo encontrado para "{query}"', fg="yellow")
        return
    _echo_categories(ctx, results)


@catalog_group.command("faq")
@click.pass_context
def faq(ctx: click.Context) -> None:
    """Prints the frequently asked questions and their answers."""
    entries = ContentCatalog().list_faq()
    if _wants_json(ctx):
        _echo_json([entry.model_dump(mode="json") for entry in entries])
        return
    for entry in entries:
        click.secho(entry.question, bold=True)
        click.echo(f"  {entry.answer}")


@catalog_group.command("partners")
@click.pass_context
def partners(ctx: click.Context) -> None:
    """Prints the emergency numbers and the partner organizations."""
    catalog = ContentCatalog()
    if _wants_json(ctx):
        _echo_json(
            {
                "emergency_contacts": [contact.model_dump(mode="json") for contact in catalog.list_emergency_contacts()],
                "partners": [partner.model_dump(mode="json") for partner in catalog.list_partners()],
                "other_organizations": list(catalog.list_other_organizations()),
            }
        )
        return
    click.echo(" | ".join(str(contact) for contact in catalog.list_emergency_contacts()))
    for partner in catalog.list_partners():
        click.secho(partner.name, bold=True)
        click.echo(f"  {partner.description}")
        if partner.phone:
            click.echo(f"  Telefone: {partner.phone}")
        if partner.website:
            click.echo(f"  Site: {partner.website}")
    for name in catalog.list_other_organizations():
        click.echo(f"- {name}")


@catalog_group.command("show")
@click.argument("category_index", type=int)
@click.argument("entry_index", type=int)
@click.option("--glossario", "glossary", is_flag=True, help="Show a glossary term instead of a rights topic.")
@click.pass_context
def show(ctx: click.Context, category_index: int, entry_index: int, glossary: bool) -> None:
    """Prints the full text of one topic or term, addressed by position.

    Args:
        ctx: The Click context object.
        category_index: The position of the category, starting at zero.
        entry_index: The position of the entry inside the category.
        glossary: If True, reads the glossary instead of the rights content.
    """
    catalog = ContentCatalog()
    try:
        if glossary:
            entry: CatalogEntry = catalog.get_term(category_index, entry_index)
        else:
            entry = catalog.get_topic(category_index, entry_index)
    except InvalidInputError as e:
        click.secho(str(e), fg="red")
        raise click.Abort() from e

    if _wants_json(ctx):
        _echo_json({"heading": entry.heading, "body": entry.body})
        return
    click.secho(entry.heading, bold=True)
    click.echo(entry.body)
