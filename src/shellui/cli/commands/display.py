"""Commands that only write styled output."""

from typing import final, override

from shellui.cli.args.options import DemoArgs, GlyphsArgs, ParaArgs, StatusArgs
from shellui.cli.commands.executor import CommandExecutor
from shellui.shared.status import CustomStatus, Status
from shellui.shared.symbols import Glyph, resolve_symbol_style


@final
class GlyphsCommand(CommandExecutor[GlyphsArgs]):
    """Render every glyph in the requested (or active) symbol style."""

    @override
    def execute(self) -> int:
        style = self.args.style or resolve_symbol_style()
        self.ui.title(f"Symbol style: {style.value}")
        width = max(len(glyph.render(style)) for glyph in Glyph)
        for glyph in Glyph:
            self.ui.info(f"  {glyph.render(style):<{width}}  {glyph.value}")
        return 0


@final
class StatusCommand(CommandExecutor[StatusArgs]):
    """Write one status line."""

    @override
    def execute(self) -> int:
        self.ui.status(self.args.status, self.args.message)
        return 0


@final
class ParaCommand(CommandExecutor[ParaArgs]):
    """Word-wrap a file, or standard input, as a paragraph block."""

    @override
    def execute(self) -> int:
        if self.args.path is not None:
            text = self.args.path.read_text(encoding="utf-8")
        else:
            text = self.ui.shell.input.read()
        self.ui.para(text)
        return 0


_DEMO_CHUNK = 16 * 1024


@final
class DemoCommand(CommandExecutor[DemoArgs]):
    """Exercise every styled writer call plus a simulated byte transfer."""

    @override
    def execute(self) -> int:
        ui = self.ui
        ui.begin("shellui demo")
        ui.heading("Statuses")
        ui.status(Status.DOWNLOADING, f"{self.args.size} bytes")
        ui.status(Status.VERIFIED, "checksum")
        ui.status(CustomStatus(Glyph.CLOUD, "Syncing"), "remote cache")
        ui.br()

        ui.heading("Transfer")
        progress = ui.progress()
        if progress is None:
            ui.info("Output is not a terminal; progress display skipped.")
        else:
            with progress:
                progress.size(self.args.size)
                sent = 0
                while sent < self.args.size:
                    chunk = min(_DEMO_CHUNK, self.args.size - sent)
                    sent += progress.write(bytes(chunk))
                progress.flush()
        ui.br()

        ui.warn("Warnings go to standard error.")
        ui.end("Demo complete")
        return 0
