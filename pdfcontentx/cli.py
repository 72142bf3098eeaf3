"""
Command-line interface for pdfcontentx.
"""

import sys

import click
from rich.console import Console
from rich.markup import escape

from pdfcontentx.config import WalkerConfig
from pdfcontentx.exceptions import PdfContentError
from pdfcontentx.handlers import OperationPrinter
from pdfcontentx.utils import get_logger
from pdfcontentx.walker import walk_document

LOGGER = get_logger("pdfcontentx.cli")

console = Console(highlight=False, emoji=False)
error_console = Console(stderr=True, highlight=False, emoji=False)


def _progress(message):
    console.print(message, markup=False, soft_wrap=True)


@click.command()
@click.argument('input_pdf', type=click.Path(dir_okay=False))
def cli(input_pdf):
    """
    Decode the page content streams of INPUT_PDF and print the operations
    that are not plain text or graphics state bookkeeping.

    Example:

        pdfcontentx document.pdf
    """
    config = WalkerConfig()
    printer = OperationPrinter(console, suppressed=config.suppressed)
    try:
        summary = walk_document(input_pdf, printer, config=config, progress=_progress)
    except PdfContentError as e:
        error_console.print(f"[bold red]✗ Error:[/bold red] {escape(e.message)}", soft_wrap=True)
        sys.exit(1)
    except Exception as e:
        error_console.print(f"[bold red]✗ Error:[/bold red] {escape(str(e))}", soft_wrap=True)
        sys.exit(1)

    LOGGER.debug(
        "Decoded %s operation(s) from %s content stream(s) on %s page(s)",
        summary.operations,
        summary.content_streams,
        summary.pages,
    )


def main():
    cli()


if __name__ == '__main__':
    main()
