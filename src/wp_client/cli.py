"""CLI entry point for wp_client package."""
from __future__ import annotations

import json
import logging
from datetime import datetime
from typing import Any, Optional, Tuple

import click

from .bio import Xref
from .client import WikiPathwaysClient
from .config import ClientSettings

_DATE = click.DateTime(formats=["%Y-%m-%d", "%Y-%m-%dT%H:%M:%S"])


def _dump(result: Any) -> str:
    if isinstance(result, list):
        data = [_plain(r) for r in result]
    else:
        data = _plain(result)
    return json.dumps(data, indent=2)


def _plain(item: Any) -> Any:
    if hasattr(item, "model_dump"):
        return item.model_dump(mode="json", exclude_none=True)
    return item


@click.group()
@click.option("--url", envvar="WIKIPATHWAYS_URL", help="Webservice URL (default from settings).")
@click.option("--verbose", "-v", is_flag=True, help="Log remote calls.")
@click.pass_context
def main(ctx: click.Context, url: Optional[str], verbose: bool) -> None:
    """Query the WikiPathways webservice."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s | %(levelname)s | %(name)s | %(message)s",
    )
    if ctx.obj is None:
        ctx.obj = WikiPathwaysClient(base_url=url, settings=ClientSettings.from_env())


@main.command("organisms")
@click.pass_obj
def organisms_cmd(client: WikiPathwaysClient) -> None:
    """List the organisms that have pathways."""
    click.echo(_dump(client.list_organisms()))


@main.command("pathways")
@click.option("--organism", "-o", help="Latin name, e.g. 'Homo sapiens'.")
@click.pass_obj
def pathways_cmd(client: WikiPathwaysClient, organism: Optional[str]) -> None:
    """List pathways, optionally for one ORGANISM."""
    click.echo(_dump(client.list_pathways(organism)))


@main.command("info")
@click.argument("pathway_id")
@click.pass_obj
def info_cmd(client: WikiPathwaysClient, pathway_id: str) -> None:
    """Show info for PATHWAY_ID."""
    click.echo(_dump(client.get_pathway_info(pathway_id)))


@main.command("search")
@click.argument("query")
@click.option("--organism", "-o", help="Restrict to this organism.")
@click.pass_obj
def search_cmd(client: WikiPathwaysClient, query: str, organism: Optional[str]) -> None:
    """Full-text search for QUERY (quoted string)."""
    click.echo(_dump(client.find_pathways_by_text(query, organism)))


@main.command("xrefs")
@click.argument("tokens", nargs=-1, required=True, metavar="ID[:CODE]...")
@click.pass_obj
def xrefs_cmd(client: WikiPathwaysClient, tokens: Tuple[str, ...]) -> None:
    """Find pathways containing any of the given identifiers, e.g. 1234:L."""
    click.echo(_dump(client.find_pathways_by_xref(*[Xref.parse(t) for t in tokens])))


@main.command("history")
@click.argument("pathway_id")
@click.option("--since", type=_DATE, help="Only revisions after this date.")
@click.pass_obj
def history_cmd(client: WikiPathwaysClient, pathway_id: str, since: Optional[datetime]) -> None:
    """Show the revision history of PATHWAY_ID."""
    click.echo(_dump(client.get_pathway_history(pathway_id, since)))


@main.command("tags")
@click.argument("pathway_id")
@click.pass_obj
def tags_cmd(client: WikiPathwaysClient, pathway_id: str) -> None:
    """List the curation tags on PATHWAY_ID."""
    click.echo(_dump(client.get_curation_tags(pathway_id)))


@main.command("recent")
@click.option("--since", type=_DATE, required=True, help="Cutoff date (YYYY-MM-DD).")
@click.pass_obj
def recent_cmd(client: WikiPathwaysClient, since: datetime) -> None:
    """List pathways changed since a date."""
    click.echo(_dump(client.get_recent_changes(since)))


@main.command("save")
@click.argument("pathway_id")
@click.argument("path", type=click.Path(dir_okay=False, writable=True))
@click.option("--type", "file_type", default="gpml", show_default=True, help="gpml, png, svg, pdf, ...")
@click.option("--revision", default=0, show_default=True, type=click.IntRange(min=0), help="0 is the latest.")
@click.pass_obj
def save_cmd(client: WikiPathwaysClient, pathway_id: str, path: str, file_type: str, revision: int) -> None:
    """Download PATHWAY_ID as a file."""
    written = client.save_pathway_as(path, file_type, pathway_id, revision)
    click.echo(f"Saved {pathway_id} to {written}")


if __name__ == "__main__":
    main()
