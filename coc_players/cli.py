#!/usr/bin/env python3
"""
CLI interface for the coc_players library.
"""

import logging
from typing import Optional

import click

from .auth import TOKEN_ENV_VAR, load_api_base_url, load_api_token
from .config import Config
from .exceptions import COCError
from .players import COCPlayers


def setup_logging(verbose: bool = False) -> None:
    """Setup logging configuration."""
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )


def _load_player(token: Optional[str], tag: str, catalog_path: Optional[str]) -> COCPlayers:
    if not token:
        try:
            token = load_api_token()
        except RuntimeError as e:
            click.echo(f"❌ {e}", err=True)
            raise click.Abort()

    catalog = Config(catalog_path).get_catalog()
    return COCPlayers(token, tag, catalog=catalog, base_url=load_api_base_url())


@click.group()
@click.option('--verbose', '-v', is_flag=True, help='Enable verbose logging')
@click.option('--token', envvar=TOKEN_ENV_VAR, help=f'API token (defaults to ${TOKEN_ENV_VAR})')
@click.option('--catalog', 'catalog_path', type=click.Path(exists=True, dir_okay=False), help='Custom name catalog YAML')
@click.pass_context
def cli(ctx: click.Context, verbose: bool, token: Optional[str], catalog_path: Optional[str]):
    """coc-players - Clash of Clans player statistics."""
    setup_logging(verbose)
    ctx.ensure_object(dict)
    ctx.obj['token'] = token
    ctx.obj['catalog_path'] = catalog_path


@cli.command()
@click.argument('tag')
@click.pass_context
def player(ctx: click.Context, tag: str):
    """Show a summary of a player."""
    try:
        with _load_player(ctx.obj['token'], tag, ctx.obj['catalog_path']) as coc_player:
            click.echo(f"{coc_player.get_player_name()} ({coc_player.get_player_tag()})")
            click.echo(f"   Experience level: {coc_player.get_player_experience_level()}")
            click.echo(f"   Town hall: {coc_player.get_player_town_hall_level()}")
            click.echo(
                f"   Trophies: {coc_player.get_player_current_trophies()} "
                f"(best {coc_player.get_player_best_trophies()})"
            )
            if coc_player.is_in_clan():
                click.echo(
                    f"   Clan: {coc_player.get_player_clan_name()} "
                    f"({coc_player.get_player_clan_tag()}, level {coc_player.get_player_clan_level()})"
                )
            click.echo(f"   Troops unlocked: {len(coc_player.get_player_troops_information())}")
            click.echo(f"   Spells unlocked: {len(coc_player.get_player_spells_information())}")
            click.echo(f"   Heroes unlocked: {len(coc_player.get_player_heroes_information())}")

    except (COCError, ValueError) as e:
        click.echo(f"❌ Error: {e}", err=True)
        raise click.Abort()


@cli.command()
@click.argument('tag')
@click.argument('category', type=click.Choice(['troops', 'spells', 'heroes']))
@click.argument('name')
@click.option('--village', help="Pick one village when the name exists in both ('home' or 'builderBase')")
@click.pass_context
def unit(ctx: click.Context, tag: str, category: str, name: str, village: Optional[str]):
    """Show level, max level and village of one troop, spell or hero."""
    try:
        with _load_player(ctx.obj['token'], tag, ctx.obj['catalog_path']) as coc_player:
            entry = coc_player.get_single_unit_info(category, name, village)
            click.echo(f"{entry.name}: level {entry.level}/{entry.max_level} ({entry.village})")

    except (COCError, ValueError) as e:
        click.echo(f"❌ Error: {e}", err=True)
        raise click.Abort()


@cli.command()
@click.argument('category', required=False)
@click.option('--village', help="Only list one village ('home' or 'builderBase')")
@click.pass_context
def catalog(ctx: click.Context, category: Optional[str], village: Optional[str]):
    """List known names, or the categories when none is given."""
    try:
        config = Config(ctx.obj['catalog_path'])

        if category is None:
            click.echo("Available categories:")
            for name in config.list_categories():
                click.echo(f"  • {name}")
            return

        for name in config.get_names(category, village):
            click.echo(f"  • {name}")

    except ValueError as e:
        click.echo(f"❌ Error: {e}", err=True)
        raise click.Abort()


if __name__ == '__main__':
    cli()
