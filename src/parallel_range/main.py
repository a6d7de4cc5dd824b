import logging
import time
from typing import Optional

import typer
from rich import print
from rich.console import Console
from rich.table import Table

from parallel_range.config import config, detect_logical_cores
from parallel_range.core import RangeTaskError, partition
from parallel_range.core.runner import ParallelStrategy, SequentialStrategy
from parallel_range.utils.logging import setup_logging

# Create CLI app
app = typer.Typer(
    name="parallel-range",
    help="Inspect and exercise contiguous range partitioning",
    add_completion=False
)

console = Console()
logger = logging.getLogger(__name__)


@app.callback()
def callback():
    """parallel-range tools."""
    setup_logging()


@app.command()
def split(
    n: int = typer.Argument(..., min=0, help="Number of items to split up"),
    workers: Optional[int] = typer.Option(
        None, "--workers", "-w", min=1, help="Number of blocks (defaults to configured workers)"
    ),
):
    """Show how N items are split across workers."""
    workers = config.parallel.workers if workers is None else workers

    table = Table(title=f"{n} items over {workers} workers")
    table.add_column("worker", justify="right")
    table.add_column("start", justify="right")
    table.add_column("end", justify="right")
    table.add_column("size", justify="right")

    for worker_id, block in enumerate(partition(n, workers)):
        table.add_row(str(worker_id), str(block.start), str(block.end), str(block.size))

    console.print(table)


@app.command()
def info():
    """Show detected cores and effective settings."""
    print("[bold]Runtime:[/bold]")
    print(f"  Logical cores: {detect_logical_cores()}")
    print(f"  Workers: {config.parallel.workers}")
    print(f"  Thread name prefix: {config.parallel.thread_name_prefix}")
    print(f"  Log level: {config.logging.level}")


@app.command()
def bench(
    n: int = typer.Argument(..., min=0, help="Number of items to process"),
    workers: Optional[int] = typer.Option(
        None, "--workers", "-w", min=1, help="Number of workers (defaults to configured workers)"
    ),
    sequential: bool = typer.Option(
        False, "--sequential", "-s", help="Process on the calling thread"
    ),
):
    """Touch every index in [0, N) once and report coverage and timing."""
    strategy = SequentialStrategy() if sequential else ParallelStrategy(workers=workers)

    visited = bytearray(n)

    def touch(start: int, end: int) -> None:
        for i in range(start, end):
            visited[i] += 1

    started = time.perf_counter()
    try:
        strategy.run(n, touch)
    except RangeTaskError as e:
        logger.error(f"Benchmark failed: {e}", exc_info=True)
        print(f"[bold red]Error:[/bold red] {e}")
        raise typer.Exit(code=1)
    elapsed = time.perf_counter() - started

    missed = sum(1 for count in visited if count == 0)
    repeated = sum(1 for count in visited if count > 1)
    mode = "sequential" if sequential else f"parallel ({strategy.workers} workers)"

    print(f"[bold]Mode:[/bold] {mode}")
    print(f"  Items: {n}")
    print(f"  Missed: {missed}")
    print(f"  Repeated: {repeated}")
    print(f"  Elapsed: {elapsed * 1000:.2f} ms")

    if missed or repeated:
        raise typer.Exit(code=1)


if __name__ == "__main__":
    app()
