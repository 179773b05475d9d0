"""Commands that solicit input from the operator."""

from typing import final, override

from shellui.cli.args.options import AskArgs, ConfirmArgs, EditArgs
from shellui.cli.commands.executor import CommandExecutor


@final
class ConfirmCommand(CommandExecutor[ConfirmArgs]):
    """Ask a yes/no question, mapping the answer to the exit status."""

    @override
    def execute(self) -> int:
        return 0 if self.ui.prompt_yes_no(self.args.question, self.args.default) else 1


@final
class AskCommand(CommandExecutor[AskArgs]):
    """Ask a free-form question and echo the answer."""

    @override
    def execute(self) -> int:
        answer = self.ui.prompt_ask(self.args.question, self.args.default)
        self.ui.info(answer)
        return 0


@final
class EditCommand(CommandExecutor[EditArgs]):
    """Open the editor, optionally seeded from a file, and echo the result."""

    @override
    def execute(self) -> int:
        contents: list[str] = []
        if self.args.path is not None:
            contents.append(self.args.path.read_text(encoding="utf-8"))
        edited = self.ui.edit(contents)
        self.ui.info(edited.rstrip("\n"))
        return 0
