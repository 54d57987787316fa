#! /usr/bin/env python
import logging

import click

from appgrid import defaults


@click.group()
def cli():
    pass


def _configure_logging(debug):
    logging.basicConfig(
        level=logging.DEBUG if debug else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@click.command("pages", help="Lay out the entries of a JSON file on grid pages and print them.")
@click.argument("filename", type=click.Path(exists=True))
@click.option("-c", "--cols", help="Cells across each page (default {})".format(defaults.DEFAULT_CELL_COUNT_X), type=int, default=defaults.DEFAULT_CELL_COUNT_X)
@click.option("-r", "--rows", help="Cells down each page (default {})".format(defaults.DEFAULT_CELL_COUNT_Y), type=int, default=defaults.DEFAULT_CELL_COUNT_Y)
@click.option("-f", "--filter", "filters", multiple=True, help="Only show entries with this flag (see 'appgrid list-flags'), repeatable")
@click.option("-p", "--page", help="Only print this page (starting from 0)", type=int, default=None)
@click.option("-w", "--width", help="Width of each cell in characters (default {})".format(defaults.TEXT_CELL_WIDTH), type=int, default=defaults.TEXT_CELL_WIDTH)
@click.option("--debug", is_flag=True, help="Show debug messages (default False)")
def pages(filename, cols, rows, filters, page, width, debug):
    import pydantic

    from .all_apps import AllAppsGrid
    from .filtering import describe_selector, parse_selector
    from .io import load_entries
    from .paginate import PageOutOfRangeError
    from .render import TextCellRenderer, draw_page

    _configure_logging(debug)

    try:
        selector = parse_selector(filters)
    except ValueError as e:
        raise click.BadParameter(str(e), param_hint="--filter")

    try:
        entries = load_entries(filename)
    except pydantic.ValidationError as e:
        raise click.UsageError("Could not read entries from {}:\n{}".format(filename, e))

    try:
        all_apps = AllAppsGrid(
            TextCellRenderer(width=width),
            cell_count_x=cols,
            cell_count_y=rows,
            app_filter=selector,
        )
    except pydantic.ValidationError:
        raise click.UsageError("--cols and --rows must be positive")
    all_apps.set_entries(entries)

    click.echo("{} entries, {} shown ({}), {} pages".format(
        len(all_apps.entries),
        len(all_apps.filtered_entries),
        describe_selector(selector),
        all_apps.page_count,
    ))

    page_indices = range(all_apps.page_count) if page is None else [page]
    for page_idx in page_indices:
        try:
            slots = all_apps.slots_for_page(page_idx)
        except PageOutOfRangeError as e:
            raise click.BadParameter(str(e), param_hint="--page")
        click.echo("Page {}".format(page_idx))
        click.echo(draw_page(slots, cols, rows, width=width))


@click.command("locate", help="Print the page, row and column of an item index.")
@click.argument("index", type=int)
@click.option("-c", "--cols", help="Cells across each page (default {})".format(defaults.DEFAULT_CELL_COUNT_X), type=int, default=defaults.DEFAULT_CELL_COUNT_X)
@click.option("-r", "--rows", help="Cells down each page (default {})".format(defaults.DEFAULT_CELL_COUNT_Y), type=int, default=defaults.DEFAULT_CELL_COUNT_Y)
def locate(index, cols, rows):
    import pydantic

    from .paginate import GridPaginator

    if index < 0:
        raise click.BadParameter("Index must not be negative", param_hint="INDEX")
    try:
        paginator = GridPaginator(cols=cols, rows=rows)
    except pydantic.ValidationError:
        raise click.UsageError("--cols and --rows must be positive")
    position = paginator.locate(index)
    click.echo("page={} row={} col={}".format(position.page, position.row, position.col))


@click.command(help="List flags entries can be filtered by")
def list_flags():
    from .entry import flag_names
    for name in flag_names():
        click.echo("  {}".format(name))


cli.add_command(pages)
cli.add_command(locate)
cli.add_command(list_flags)


if __name__ == "__main__":
    cli()
