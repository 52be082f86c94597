"""
Contextual help for URL-style addresses.

The router sends ``hcptf acme -h`` to ``organization:context -org=acme`` and
``hcptf acme prod -h`` to ``workspace:context -org=acme -workspace=prod``.
These commands list what can follow the address.
"""

from __future__ import annotations

import argparse

from rich.table import Table

from hcptf.cli.utils import get_console
from hcptf.router.keywords import DEFAULT_KEYWORDS, KeywordTable


def _table(title: str) -> Table:
    table = Table(title=title, show_header=True, header_style="bold", title_justify="left")
    table.add_column("Address")
    table.add_column("Command")
    return table


def organization_main(argv: list[str] | None = None, keywords: KeywordTable | None = None) -> int:
    """Entry point for ``organization:context``."""
    parser = argparse.ArgumentParser(
        prog="hcptf organization:context",
        description="Show what can follow an organization address",
    )
    parser.add_argument("-org", dest="org", required=True, help="Organization name")
    args = parser.parse_args(argv)
    keywords = keywords or DEFAULT_KEYWORDS
    org = args.org

    table = _table(f"Organization: {org}")
    table.add_row(f"hcptf {org}", f"organization show -name={org}")
    for keyword in sorted(keywords.org_collections):
        namespace = keywords.org_collections[keyword]
        table.add_row(f"hcptf {org} {keyword}", f"{namespace} list -org={org}")
    table.add_row(f"hcptf {org} <workspace>", f"workspace read -org={org} -name=<workspace>")

    console = get_console()
    console.print(table)
    console.print(f"Run 'hcptf {org} <workspace> -h' for workspace-level addresses.")
    return 0


def workspace_main(argv: list[str] | None = None, keywords: KeywordTable | None = None) -> int:
    """Entry point for ``workspace:context``."""
    parser = argparse.ArgumentParser(
        prog="hcptf workspace:context",
        description="Show what can follow a workspace address",
    )
    parser.add_argument("-org", dest="org", required=True, help="Organization name")
    parser.add_argument("-workspace", dest="workspace", required=True, help="Workspace name")
    args = parser.parse_args(argv)
    keywords = keywords or DEFAULT_KEYWORDS
    org, workspace = args.org, args.workspace
    base = f"hcptf {org} {workspace}"
    scope = f"-org={org} -workspace={workspace}"

    table = _table(f"Workspace: {org}/{workspace}")
    table.add_row(base, f"workspace read -org={org} -name={workspace}")
    for keyword in sorted(keywords.workspace_collections):
        namespace = keywords.workspace_collections[keyword]
        table.add_row(f"{base} {keyword}", f"{namespace} list {scope}")
        for verb in sorted(keywords.collection_verbs.get(keyword, ())):
            table.add_row(f"{base} {keyword} {verb}", f"{namespace} {verb} {scope}")

    run_id = f"{keywords.run_id_prefix}<id>"
    table.add_row(f"{base} {run_id}", f"run show -id={run_id}")
    for action in sorted(keywords.run_actions):
        entry = keywords.run_actions[action]
        flags = " ".join(entry.flags(org, workspace, run_id))
        table.add_row(f"{base} {run_id} {action}", f"{entry.namespace} {entry.verb} {flags}")

    get_console().print(table)
    return 0
