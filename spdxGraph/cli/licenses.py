from __future__ import annotations

"""Inspect, verify and migrate license nodes in Turtle files."""

from pathlib import Path
from typing import List

import click
from tabulate import tabulate

from spdxGraph import __version__
from spdxGraph.config import ConfigError, load_config
from spdxGraph.kg.integrity import run_checks
from spdxGraph.kg.ontology import write_sorted_ttl
from spdxGraph.kg.store import GraphStore
from spdxGraph.license import License, LicenseMapper, LicenseValidationError


def _preview(value: str | None, width: int = 40) -> str:
    if not value:
        return ""
    flat = " ".join(value.split())
    return flat if len(flat) <= width else flat[: width - 3] + "..."


def _load(ttl: Path, config_path: Path | None) -> tuple[LicenseMapper, GraphStore, List[License]]:
    try:
        mapper = LicenseMapper(load_config(config_path))
        store = GraphStore.from_file(ttl)
        return mapper, store, mapper.load_all(store)
    except (ConfigError, LicenseValidationError) as exc:
        raise click.ClickException(str(exc))


def _find(licenses: List[License], license_id: str) -> License:
    for lic in licenses:
        if lic.license_id == license_id:
            return lic
    raise click.ClickException(f"No license with id {license_id!r}")


ttl_argument = click.argument("ttl", type=click.Path(exists=True, dir_okay=False, path_type=Path))
config_option = click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="YAML mapper config (defaults to $SPDXGRAPH_CONFIG).",
)


@click.group()
@click.version_option(__version__)
def main() -> None:
    """SPDX license graph tools."""


@main.command()
@ttl_argument
@config_option
@click.option("--id", "license_id", default=None, help="Only show this license id.")
def show(ttl: Path, config_path: Path | None, license_id: str | None) -> None:
    """Tabulate the licenses found in TTL."""
    _, _, licenses = _load(ttl, config_path)
    if license_id:
        licenses = [_find(licenses, license_id)]
    rows = [
        (
            lic.license_id,
            lic.name or "",
            "yes" if lic.osi_approved else "no",
            _preview(lic.standard_license_header),
            _preview(lic.standard_license_template),
        )
        for lic in licenses
    ]
    click.echo(tabulate(rows, headers=["ID", "Name", "OSI", "Header", "Template"]))


@main.command()
@ttl_argument
@config_option
def verify(ttl: Path, config_path: Path | None) -> None:
    """Report missing required fields; exits 1 when any are found."""
    _, _, licenses = _load(ttl, config_path)
    rows = [(str(lic.node), problem) for lic in licenses for problem in lic.verify()]
    if not rows:
        click.echo(f"{len(licenses)} license(s) verified, no problems")
        return
    click.echo(tabulate(rows, headers=["Node", "Problem"]))
    raise SystemExit(1)


@main.command()
@ttl_argument
@click.argument("id_a")
@click.argument("id_b")
@config_option
def compare(ttl: Path, id_a: str, id_b: str, config_path: Path | None) -> None:
    """Compare the license texts of ID_A and ID_B."""
    _, _, licenses = _load(ttl, config_path)
    first, second = _find(licenses, id_a), _find(licenses, id_b)
    click.echo("equivalent" if first.semantically_equivalent(second) else "not equivalent")


@main.command()
@ttl_argument
def integrity(ttl: Path) -> None:
    """Count graph-level license issues."""
    store = GraphStore.from_file(ttl)
    rows = [(issue.name, issue.count) for issue in run_checks(store.graph)]
    click.echo(tabulate(rows, headers=["Check", "Count"]))


@main.command()
@ttl_argument
@config_option
@click.option(
    "--out",
    "out_path",
    required=True,
    type=click.Path(dir_okay=False, path_type=Path),
    help="Where to write the migrated Turtle.",
)
def upgrade(ttl: Path, config_path: Path | None, out_path: Path) -> None:
    """Rewrite legacy predicates to their current names."""
    mapper, store, licenses = _load(ttl, config_path)
    rows = []
    for lic in licenses:
        migrated = mapper.upgrade(lic)
        if migrated:
            rows.append((lic.license_id, ", ".join(migrated)))
    write_sorted_ttl(store.graph, out_path)
    if rows:
        click.echo(tabulate(rows, headers=["ID", "Migrated fields"]))
    click.echo(f"Wrote {len(store)} triple(s) to {out_path}")


if __name__ == "__main__":
    main()
