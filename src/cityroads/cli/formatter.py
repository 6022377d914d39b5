# src/cityroads/cli/formatter.py
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

# stdout is reserved for the extracted list, so all UI goes to stderr
console = Console(stderr=True)

class RoadFormatter:
    """
    RoadFormatter: renders the post-run report.
    Never writes to stdout.
    """

    def print_header(self, subtitle: str, version: str):
        console.print(Panel.fit(
            f"[bold cyan]CityRoads v{version}[/bold cyan]\n"
            "══════════════════════════════════════════",
            title=f"[bold white]{subtitle}[/bold white]",
            border_style="cyan"
        ))

    def print_report(self, report: dict, summary: dict):
        """
        Builds the match table, lists skipped lines, then prints the
        summary panel.
        """
        table = Table(title="Road Extraction Report", show_header=True, header_style="bold magenta")
        table.add_column("Line", justify="right", style="dim")
        table.add_column("Road Name", style="cyan")
        table.add_column("Result", justify="center")

        for m in report.get("matches", []):
            table.add_row(str(m.line_no), escape(m.name), "✅")
        for s in report.get("skipped", []):
            table.add_row(str(s.line_no), f"[yellow]{escape(s.reason)}[/yellow]", "⚠️")

        if table.row_count:
            console.print(table)

        status = summary["status"]
        status_color = "green" if status == "EXTRACTED" else "yellow" if status == "NO_MATCHES" else "red"
        console.print(Panel(
            f"[bold white]Summary Report[/bold white]\n"
            f"════════════════════════════════════════\n"
            f"Input:          {escape(str(report.get('input_path')))}\n"
            f"Lines Read:     {summary['lines_read']}\n"
            f"Roads Found:    [green]{summary['total_matches']}[/green]\n"
            f"Lines Skipped:  [yellow]{summary['skipped_lines']}[/yellow]\n"
            f"Status:         [{status_color}]{status}[/{status_color}]",
            border_style="dim"
        ))

    def print_error(self, message: str):
        console.print(f"[bold red]Error:[/bold red] {escape(message)}")
