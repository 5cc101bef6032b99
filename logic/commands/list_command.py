# logic/commands/list_command.py

from logic.commands.command import Command, CommandResult
from models.model import Model
from models.predicates import PREDICATE_SHOW_ALL_TUTEES


class ListCommand(Command):
    COMMAND_WORD = "list"

    MESSAGE_USAGE = f"{COMMAND_WORD}: Lists all tutees.\nExample: {COMMAND_WORD}"

    MESSAGE_SUCCESS = "Listed all tutees"

    def execute(self, model: Model) -> CommandResult:
        model.update_filtered_tutee_list(PREDICATE_SHOW_ALL_TUTEES)
        return CommandResult(self.MESSAGE_SUCCESS, show_list=True)

    def __eq__(self, other: object) -> bool:
        return isinstance(other, ListCommand)

    def __hash__(self) -> int:
        return hash(ListCommand)
