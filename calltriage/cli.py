import glob
import json
from pathlib import Path
from typing import List

import typer
from rich.console import Console
from rich.table import Table

from .core import config
from .core.batch import run_batch
from .core.classifier import classify_record
from .core.export import export_csv, export_json
from .core.log import setup_logging
from .core.parser import RecordFormatError, load_records
from .core.rules import RuleSetError, load_rules
from .core.storage import (get_result, get_run, init_db, insert_results, insert_run, latest_run_id,
                           list_runs, results_for_run)

app = typer.Typer(help="Call triage CLI: classify call transcripts into lead / spam / operations / other")
console = Console()

LEVEL_STYLE = {"high": "green", "medium": "yellow", "low": "red"}

@app.callback()
def main(log_level: str = typer.Option(None, "--log-level", help="DEBUG, INFO, WARNING ...")):
    setup_logging(log_level)

def _load_rules(path: str):
    try:
        return load_rules(path or config.RULES_PATH)
    except RuleSetError as e:
        console.print(f"[red]{e}[/red]")
        raise typer.Exit(1)

def _expand(paths: List[str]) -> List[Path]:
    files: List[Path] = []
    for p in paths:
        if Path(p).is_file():
            files.append(Path(p))
        else:
            files += [Path(x) for x in sorted(glob.glob(p))]
    return files

def _result_table(title: str, results) -> Table:
    table = Table(title=title)
    table.add_column("Call ID", style="cyan")
    table.add_column("Category", style="magenta")
    table.add_column("Sub-category")
    table.add_column("Conf.", justify="right")
    table.add_column("Summary")
    for r in results:
        style = LEVEL_STYLE.get(r.confidence_level, "white")
        table.add_row(r.call_id, r.category, r.sub_category, f"[{style}]{r.confidence:.2f}[/{style}]", r.summary)
    return table

def _print_report(report: dict):
    table = Table(title=f"Report ({report.get('total', 0)} calls)")
    table.add_column("Category", style="magenta")
    table.add_column("Calls", justify="right")
    table.add_column("Avg conf.", justify="right")
    avg = report.get("avg_confidence", {})
    for cat, n in report.get("by_category", {}).items():
        if n:
            table.add_row(cat, str(n), f"{avg.get(cat, 0.0):.2f}")
    console.print(table)

    sources = report.get("by_source", {})
    if sources:
        st = Table(title="By source")
        st.add_column("Source", style="cyan")
        for col in ("Total", "Customer", "Spam", "Conversion"):
            st.add_column(col, justify="right")
        for name, s in sources.items():
            st.add_row(name, str(s["total"]), str(s["customer"]), str(s["spam"]), f"{s['conversion_rate']:.0%}")
        console.print(st)

    levels = report.get("confidence_levels", {})
    console.print("Confidence: " + ", ".join(f"{k} {v}" for k, v in levels.items()))
    console.print(f"Inbound spam rate: {report.get('spam_rate_inbound', 0.0):.1%}")
    reasons = report.get("incomplete_reasons", {})
    if reasons:
        console.print("Incomplete: " + ", ".join(f"{k} {v}" for k, v in reasons.items()))
    missed = report.get("missed_customer_leads", [])
    if missed:
        console.print(f"[yellow]Missed customer leads: {', '.join(missed)}[/yellow]")

@app.command()
def classify(paths: List[str] = typer.Argument(..., help="Call record files (.json, .jsonl, .csv) or globs"),
             out: str = typer.Option(None, help="Write results + report as JSON here"),
             csv: str = typer.Option(None, help="Write results as CSV here"),
             workers: int = typer.Option(config.BATCH_WORKERS, help="Worker threads"),
             rules: str = typer.Option(None, help="JSON rule catalogue (default: built-in)"),
             store: bool = typer.Option(True, "--store/--no-store", help="Save the run in the database"),
             progress: bool = typer.Option(True, "--progress/--no-progress")):
    files = _expand(paths)
    if not files:
        console.print("[red]No files matched[/red]")
        raise typer.Exit(1)
    records = []
    for f in files:
        try:
            records += load_records(str(f))
        except RecordFormatError as e:
            console.print(f"[red]{e}[/red]")
            raise typer.Exit(1)

    ruleset = _load_rules(rules)
    run = run_batch(records, ruleset=ruleset, workers=workers, progress=progress)
    console.print(_result_table(f"{len(run.results)} calls", run.results))
    _print_report(run.report)

    if out:
        export_json(out, run.results, run.report)
        console.print(f"Wrote {out}")
    if csv:
        export_csv(csv, run.results)
        console.print(f"Wrote {csv}")
    if store:
        init_db()
        run_id = insert_run(run.ruleset_version, len(run.results), run.report)
        insert_results(run_id, run.results)
        console.print(f"[bold green]Stored run {run_id}[/bold green]")

@app.command()
def check(text: str,
          duration: int = typer.Option(60, help="Call length in seconds"),
          direction: str = typer.Option("inbound"),
          answered: bool = typer.Option(True, "--answered/--unanswered"),
          rules: str = typer.Option(None, help="JSON rule catalogue (default: built-in)")):
    """Classify a single transcript given on the command line."""
    ruleset = _load_rules(rules)
    record = {"id": "cli", "transcript_text": text, "duration": duration,
              "direction": direction, "answered": answered}
    result = classify_record(record, ruleset)
    console.print_json(json.dumps(result.to_dict()))

def _resolve_run(run_id: str) -> str:
    init_db()
    target = latest_run_id() if run_id == "last" else run_id
    if not target:
        console.print("No runs stored yet.")
        raise typer.Exit(1)
    return target

@app.command()
def report(run_id: str = typer.Argument("last")):
    target = _resolve_run(run_id)
    run = get_run(target)
    if run is None:
        console.print(f"[red]No run {target}[/red]")
        raise typer.Exit(1)
    console.print(f"Run {run['run_id']} at {run['created_at']} (rules {run['ruleset_version']})")
    _print_report(run["report"])

@app.command()
def show(call_id: str, run: str = typer.Option("last", "--run", help="Run id (default: latest)")):
    target = _resolve_run(run)
    result = get_result(target, call_id)
    if result is None:
        console.print(f"[red]No result for {call_id} in run {target}[/red]")
        raise typer.Exit(1)
    console.print_json(json.dumps(result.to_dict()))

@app.command("list-runs")
def list_runs_cmd():
    init_db()
    rows = list_runs()
    if not rows:
        console.print("No runs stored yet.")
        raise typer.Exit(0)
    table = Table(title="Runs")
    table.add_column("Run ID", style="cyan")
    table.add_column("Created", style="magenta")
    table.add_column("Rules")
    table.add_column("Calls", justify="right")
    for rid, created, version, total in rows:
        table.add_row(rid, created, version, str(total))
    console.print(table)

@app.command("rules")
def rules_cmd(path: str = typer.Option(None, "--path", help="JSON rule catalogue (default: built-in)"),
              category: str = typer.Option(None, help="Only this category")):
    ruleset = _load_rules(path)
    table = Table(title=f"Rules {ruleset.version} ({len(ruleset)})")
    table.add_column("Category", style="magenta")
    table.add_column("Sub-category", style="cyan")
    table.add_column("Tier")
    table.add_column("Weight", justify="right")
    table.add_column("Criterion", overflow="fold")
    for r in (ruleset.for_category(category) if category else ruleset.rules):
        table.add_row(r.category, r.sub_category, r.tier, f"{r.weight:.2f}", r.criterion)
    console.print(table)

if __name__ == "__main__":
    app()
