"""tik CLI - Personal time tracker."""

from datetime import datetime

import click

from .adapters.file_store import FileLogStore
from .config import load_config
from .core.sessions import format_duration
from .workflows import count_today, record_entry, show_log

COUNT_COMMAND = "count"


def _now() -> datetime:
    return datetime.now()


@click.command(
    context_settings={"ignore_unknown_options": True, "help_option_names": []},
)
@click.argument("words", nargs=-1, type=click.UNPROCESSED)
def main(words: tuple[str, ...]):
    """Record what you're doing, or count today's tracked time.

    \b
    tik                 print the whole log
    tik count           stop the current session and print today's total
    tik <anything>      record <anything> at the current time
    """
    config = load_config()
    store = FileLogStore(config.data_file)

    if not words:
        click.echo(show_log(store), nl=False)
        return

    if words[0] == COUNT_COMMAND:
        try:
            total = count_today(store, now=_now())
        except OSError as e:
            click.echo(str(e))
            return
        click.echo(format_duration(total))
        return

    try:
        entry = record_entry(store, " ".join(words), now=_now())
    except OSError as e:
        click.echo(str(e))
        return
    click.echo(str(entry))


if __name__ == "__main__":
    main()
