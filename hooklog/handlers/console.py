"""Rich console handler for interactive use."""

from rich.console import Console
from rich.text import Text
from rich.theme import Theme

from hooklog.core.errors import HandlerError
from hooklog.levels import Level
from hooklog.record import Record

from .base import Context, StreamHandler
from .text import format_value


CUSTOM_THEME = Theme(
    {
        "info": "cyan",
        "warning": "yellow",
        "error": "bold red",
        "debug": "dim white",
        "timestamp": "dim cyan",
        "attr": "dim blue",
    }
)


def _level_style(level: int) -> str:
    if level >= Level.ERROR:
        return "error"
    if level >= Level.WARN:
        return "warning"
    if level >= Level.INFO:
        return "info"
    return "debug"


class ConsoleHandler(StreamHandler):
    """Renders records with colors through a rich console."""

    def __init__(
        self,
        console: Console | None = None,
        level: int = Level.INFO,
        add_timestamp: bool = True,
    ):
        self._console = console or Console(theme=CUSTOM_THEME, stderr=True)
        super().__init__(self._console.file, level=level, add_timestamp=add_timestamp)

    @property
    def console(self) -> Console:
        return self._console

    def render(self, ctx: Context, record: Record) -> Text:
        text = Text()
        if self._add_timestamp:
            text.append(f"[{record.time.strftime('%H:%M:%S')}] ", style="timestamp")
        text.append(f"{record.level_name:<5} ", style=_level_style(record.level))
        text.append(record.message)
        for groups, attr in self.collect_attrs(ctx, record):
            key = ".".join((*groups, attr.key))
            text.append(f" {key}=", style="attr")
            text.append(format_value(attr.value))
        return text

    def format(self, ctx: Context, record: Record) -> str:
        return self.render(ctx, record).plain

    def handle(self, ctx: Context, record: Record) -> None:
        text = self.render(ctx, record)
        with self._lock:
            try:
                self._console.print(text, soft_wrap=True)
            except (OSError, ValueError) as e:
                raise HandlerError(
                    f"Failed to write log record: {e}", handler=type(self).__name__
                ) from e
