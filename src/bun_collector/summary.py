"""Human-readable Markdown summary of a collection report."""

from __future__ import annotations

from typing import Any


def render_summary(report: dict[str, Any]) -> str:
    """Return a Markdown string with totals and a table of production packages."""
    totals = report.get("totals", {})
    root = report.get("root", {})
    packages = report.get("packages", [])

    lines = []
    lines.append(f"# Production dependencies of {root.get('id', '(unknown project)')}")
    lines.append("")
    lines.append(
        f"Installed packages: {totals.get('packages', 0)} | "
        f"Production: {totals.get('production', 0)} | "
        f"Edges: {totals.get('edges', 0)}"
    )
    lines.append("")
    lines.append("| Package | Version | Reference | Path |")
    lines.append("| --- | --- | --- | --- |")

    has_rows = False
    for pkg in packages:
        if not pkg.get("production"):
            continue
        lines.append(
            f"| {pkg.get('name', '')} | {pkg.get('version', '')} | "
            f"{pkg.get('reference', '')} | {pkg.get('path', '')} |"
        )
        has_rows = True

    if not has_rows:
        lines.append("| (no production dependencies) | n/a | n/a | n/a |")

    return "\n".join(lines) + "\n"
