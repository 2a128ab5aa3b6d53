"""gei-archive CLI - Main commands."""
import asyncio
import logging
from pathlib import Path
from typing import Optional

import typer
from rich.console import Console
from rich.markup import escape
from rich.progress import Progress, TextColumn, BarColumn, TaskProgressColumn

from ..core.api.config import APIConfig, DEFAULT_BASE_URL

app = typer.Typer(
    name="gei-archive",
    help="Upload migration archives to GitHub owned storage",
    add_completion=False
)
console = Console()


def run_async(coro):
    """Run async function."""
    return asyncio.run(coro)


@app.callback()
def main():
    """Upload migration archives to GitHub owned storage."""


@app.command()
def upload(
    path: Path = typer.Argument(..., help="Archive file to upload"),
    owner_id: str = typer.Option(..., "--owner-id", "-o", help="Organization database id"),
    name: Optional[str] = typer.Option(None, "--name", "-n", help="Archive name (defaults to file name)"),
    token: Optional[str] = typer.Option(None, "--token", "-t", envvar="GH_PAT", help="GitHub access token"),
    base_url: str = typer.Option(DEFAULT_BASE_URL, "--base-url", help="Storage base URL"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logs"),
):
    """Upload an archive and print its content locator."""
    from gei_archive import ArchiveClient, ArchiveUploadError, setup_logging
    
    logging.basicConfig(format='%(asctime)s - %(levelname)s - %(message)s')
    setup_logging(logging.DEBUG if verbose else logging.WARNING)
    
    async def do_upload():
        with Progress(
            TextColumn("[bold blue]{task.description}"),
            BarColumn(),
            TaskProgressColumn(),
            console=console,
            transient=True
        ) as progress:
            task = progress.add_task(f"Uploading {name or path.name}", total=100)
            
            def on_progress(p):
                progress.update(task, completed=p.percentage)
            
            client = ArchiveClient(
                token=token,
                config=APIConfig(base_url=base_url),
                progress_callback=on_progress
            )
            async with client:
                return await client.upload_file(path, owner_id, name=name)
    
    try:
        locator = run_async(do_upload())
    except (ArchiveUploadError, FileNotFoundError) as e:
        console.print(f"[red]Upload failed:[/red] {escape(str(e))}")
        raise typer.Exit(1)
    
    console.print(locator)


if __name__ == "__main__":
    app()
