import time


def run_machine(machine, max_steps=1_000_000_000, progress_interval=None, on_progress=None, radius=10):
    """
    Drive machine.step() until it halts or max_steps transitions were applied.
    on_progress(step_count, machine) is called every progress_interval steps.
    Returns a result entry dict.
    """
    if max_steps < 0:
        raise ValueError(f"max_steps must be non-negative, got {max_steps}")
    if progress_interval is not None and progress_interval <= 0:
        raise ValueError(f"progress_interval must be positive or None, got {progress_interval}")

    steps = 0
    start = time.perf_counter()
    while steps < max_steps:
        if not machine.step():
            break
        steps += 1
        if progress_interval and on_progress and steps % progress_interval == 0:
            on_progress(steps, machine)
    elapsed = time.perf_counter() - start

    halted = machine.is_halted()
    return {
        "steps_taken": steps,
        "halted": halted,
        "outcome": machine.outcome(),
        "capped": not halted and steps >= max_steps,
        "final_state": machine.current_state,
        "final_tape": machine.tape_snapshot(radius),
        "output_length": machine.output_length(),
        "tape_sum": machine.tape_sum(),
        "elapsed_seconds": elapsed,
    }
