# tools/ruleset_inspect.py

import argparse
from pathlib import Path

import numpy as np
from rich.console import Console
from rich.table import Table

from tools.machine_loader import load_machine, symbol_for

console = Console()


def _cell(transition):
    if transition is None:
        return "---"
    return f"{transition.write_symbol}{transition.direction}{transition.next_state}"


def transition_rows(definition):
    """Yield (state, [cell per symbol]) in row-major order, accept state included."""
    rules = definition["rules"]
    for state in range(definition["states"]):
        cells = [_cell(rules.lookup(str(state), symbol_for(symbol))) for symbol in range(definition["symbols"] + 1)]
        yield str(state), cells


def build_rich_table(definition):
    table = Table(title="Transition Table", show_header=True, header_style="bold magenta")
    table.add_column("State", justify="center")
    for symbol in range(definition["symbols"] + 1):
        table.add_column(symbol_for(symbol), justify="center")

    for state, cells in transition_rows(definition):
        label = f"{state} (accept)" if state in definition["accept_states"] else state
        table.add_row(label, *cells)
    return table


def to_latex(definition):
    num_columns = definition["symbols"] + 1
    lines = [r"\begin{array}{c|" + "c" * num_columns + "}"]
    lines.append("State/Symbol & " + " & ".join(f"\\text{{{symbol_for(i)}}}" for i in range(num_columns)) + r" \\ \hline")
    for state, cells in transition_rows(definition):
        lines.append(" & ".join([state] + cells) + r" \\")
    lines.append(r"\end{array}")
    return "\n".join(lines)


def export_array(definition, path):
    """Save the dense (states, symbols, 3) int32 transition array with numpy."""
    arr = definition["rules"].to_array(definition["states"], definition["symbols"] + 1)
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    np.save(path, arr)
    return arr


def main(argv=None):
    parser = argparse.ArgumentParser(description="Turing Machine Transition Table Inspector")
    parser.add_argument("machine", help="Path to machine description file")
    parser.add_argument("--latex", action="store_true", help="Also print the table as a LaTeX array")
    parser.add_argument("--export", help="Save the dense transition array to this .npy path")
    args = parser.parse_args(argv)

    definition = load_machine(args.machine)
    console.print(f"[cyan]Machine {args.machine}[/cyan]")
    console.print(f"  States: {definition['states']}")
    console.print(f"  Symbols: {definition['symbols']}")
    console.print(f"  Input: {definition['input']!r}")
    console.print(build_rich_table(definition))

    if args.latex:
        console.print("\n=== LaTeX Table ===", markup=False)
        console.print(to_latex(definition), markup=False, highlight=False)

    if args.export:
        export_array(definition, args.export)
        console.print(f"[green]Saved dense transition array to {args.export}[/green]")


if __name__ == "__main__":
    main()
