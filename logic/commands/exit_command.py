# logic/commands/exit_command.py

from logic.commands.command import Command, CommandResult
from models.model import Model


class ExitCommand(Command):
    COMMAND_WORD = "exit"

    MESSAGE_USAGE = f"{COMMAND_WORD}: Exits the program.\nExample: {COMMAND_WORD}"

    MESSAGE_EXIT_ACKNOWLEDGEMENT = "Exiting Tutee Book as requested ..."

    def execute(self, model: Model) -> CommandResult:
        return CommandResult(self.MESSAGE_EXIT_ACKNOWLEDGEMENT, exit=True)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, ExitCommand)

    def __hash__(self) -> int:
        return hash(ExitCommand)
