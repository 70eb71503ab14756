# app.py

import argparse
import sys
from datetime import datetime, timezone
from pathlib import Path

from rich.console import Console
from rich.prompt import Prompt, IntPrompt, Confirm

from config.config_loader import DEFAULT_CONFIG_PATH, default_config, load_config, validate_config
from logger.logger import JSONLogger
from simulator.runner import run_machine
from tools.machine_loader import build_machine, load_machine

console = Console()

# === Utilities ===
def resolve_config(config_path=None):
    """Load the given config file, the default one if present, or the built-in defaults."""
    if config_path:
        return load_config(config_path)
    if Path(DEFAULT_CONFIG_PATH).exists():
        return load_config(DEFAULT_CONFIG_PATH)
    return default_config()

def print_progress(radius):
    def on_progress(step_count, machine):
        console.print(f"Step {step_count} | State: {machine.current_state} | Tape: {machine.tape_snapshot(radius)}",
                      markup=False, highlight=False)
    return on_progress

def print_report(result, max_steps):
    if result["capped"]:
        console.print(f"[yellow]Terminating after {max_steps} steps - possible infinite loop[/yellow]")

    color = {"accept": "green", "reject": "red"}.get(result["outcome"], "yellow")
    elapsed = result["elapsed_seconds"]
    console.print(f"Machine halted in state: [{color}]{result['final_state']}[/{color}]")
    console.print(f"Final tape: {result['final_tape']}", markup=False, highlight=False)
    console.print(f"Output length: {result['output_length']}")
    console.print(f"Sum of output tape: {result['tape_sum']}")
    console.print(f"Steps taken: {result['steps_taken']:,}")
    console.print(f"Time taken: {elapsed * 1000:.3f} ms ({elapsed:.3f} s)")

def simulate_file(machine_path, config):
    definition = load_machine(machine_path)
    machine = build_machine(definition, blank=config["blank_symbol"])

    radius = config["snapshot_radius"]
    result = run_machine(
        machine,
        max_steps=config["max_steps"],
        progress_interval=config["progress_interval"],
        on_progress=print_progress(radius),
        radius=radius,
    )
    print_report(result, config["max_steps"])

    if config["log_results"]:
        logger = JSONLogger(config["output_directory"], config["log_file_prefix"])
        entry = {
            "machine_file": str(machine_path),
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "input": definition["input"],
        }
        entry.update(result)
        logger.log_run(entry)

    return result

def interactive_main(config):
    console.print("\n[bold cyan]Turing Machine Simulator[/bold cyan]")

    while True:
        machine_path = Prompt.ask("Machine file")
        config["max_steps"] = IntPrompt.ask("Max Steps", default=config["max_steps"])

        try:
            simulate_file(machine_path, config)
        except (FileNotFoundError, ValueError) as e:
            console.print(f"Error: {e}", style="red", markup=False)

        if not Confirm.ask("\nRun another machine?", default=False):
            console.print("[bold green]Goodbye![/bold green]")
            break

# === CLI Mode for Automation ===
def build_parser():
    parser = argparse.ArgumentParser(description="Deterministic single-tape Turing Machine Simulator")
    parser.add_argument("machine", nargs="?", help="Path to machine description file (omit for interactive mode)")
    parser.add_argument("--config", help=f"Path to runtime config JSON (default: {DEFAULT_CONFIG_PATH} if present)")
    parser.add_argument("--max-steps", type=int, help="Maximum steps before giving up")
    progress = parser.add_mutually_exclusive_group()
    progress.add_argument("--progress-interval", type=int, help="Print progress every N steps")
    progress.add_argument("--no-progress", action="store_true", help="Disable progress output")
    parser.add_argument("--radius", type=int, help="Tape snapshot radius around the head")
    parser.add_argument("--no-log", action="store_true", help="Do not write JSONL run logs")
    return parser

def apply_overrides(config, args):
    if args.max_steps is not None:
        config["max_steps"] = args.max_steps
    if args.progress_interval is not None:
        config["progress_interval"] = args.progress_interval
    if args.no_progress:
        config["progress_interval"] = None
    if args.radius is not None:
        config["snapshot_radius"] = args.radius
    if args.no_log:
        config["log_results"] = False
    validate_config(config)
    return config

def main(argv=None):
    args = build_parser().parse_args(argv)

    try:
        config = apply_overrides(resolve_config(args.config), args)
        if args.machine:
            simulate_file(args.machine, config)
        else:
            interactive_main(config)
    except (FileNotFoundError, ValueError, TypeError) as e:
        console.print(f"Error: {e}", style="red", markup=False)
        return 1
    return 0

if __name__ == "__main__":
    sys.exit(main())
