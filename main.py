#!/usr/bin/env python3
"""
PhiloTrans
==========
Philosophical English-Turkish translation studio backed by Gemini.

Usage:
    python main.py                      # Serve on the configured host/port
    python main.py --host 127.0.0.1 --port 8080
"""
import argparse
import sys
from pathlib import Path

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent))

from config import GEMINI_API_KEY, SERVER_HOST, SERVER_PORT
from philotrans.registry import model_table

console = Console()


def print_banner():
    """Print application banner"""
    banner = Text()
    banner.append("🪶 ", style="bold")
    banner.append("PhiloTrans", style="bold yellow")
    banner.append("\n")
    banner.append("Translate, analyze and imagine philosophical texts", style="dim")

    console.print(Panel(banner, border_style="yellow"))


def print_models():
    """Print the model used for each mode"""
    table = Table(title="Models", show_header=True, header_style="bold")
    table.add_column("Mode")
    table.add_column("Model", style="cyan")
    for mode, model in model_table().items():
        table.add_row(mode, model)
    console.print(table)


def validate_api_key():
    """Validate Gemini API key is set"""
    if not GEMINI_API_KEY:
        console.print(Panel(
            "[red]❌ GEMINI_API_KEY not found![/red]\n\n"
            "1. Get a key at [link=https://aistudio.google.com/apikey]https://aistudio.google.com/apikey[/link]\n"
            "2. Create a .env file in the project folder\n"
            "3. Add GEMINI_API_KEY=your-api-key-here\n\n"
            "Or: [cyan]export GEMINI_API_KEY=your-key[/cyan]",
            title="API Key Required",
            border_style="red"
        ))
        return False
    return True


def run():
    """CLI entry point"""
    parser = argparse.ArgumentParser(
        description="PhiloTrans - philosophical translation studio",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--host", default=SERVER_HOST, help=f"Bind address (default: {SERVER_HOST})")
    parser.add_argument("--port", type=int, default=SERVER_PORT, help=f"Port (default: {SERVER_PORT})")
    args = parser.parse_args()

    print_banner()
    if not validate_api_key():
        console.print("[yellow]⚠️ Starting without a key; use the key selection in the web UI[/yellow]")
    print_models()

    from server import run_server
    console.print(f"[green]✅ Serving on http://{args.host}:{args.port}[/green]")
    run_server(host=args.host, port=args.port)
    return 0


if __name__ == "__main__":
    sys.exit(run())
