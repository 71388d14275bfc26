"""
Chat command routing

Recognises Gemini dice commands in raw message text:

    !gd 5d6+2                     standard roll
    !gdr 5d6+7                    rollup roll
    !gds 4d6 / !gdl 4d6 / !gdu 4d6  success, luck and unluck rolls
    !wgd 5d6                      any command with a leading w is whispered to the GM
    !gd --help                    help
    !gd 5d6 --template Attack: %%ROLL%%
"""
import re
from typing import Optional

from models.command import ParsedCommand, RollCommand
from utils.logging import get_contextual_logger

logger = get_contextual_logger(__name__)

OPTION_SEPARATOR = re.compile(r'\s+--')
COMMAND_PATTERN = re.compile(r'^(?P<whisper>w?)(?P<name>gd\S*)(?:\s+(?P<expression>.*))?$', re.DOTALL | re.IGNORECASE)
TEMPLATE_OPTION = re.compile(r'^template\s+', re.IGNORECASE)

COMMANDS_BY_NAME = {command.value: command for command in RollCommand if command is not RollCommand.HELP}


def parse_command(text: str, prefix: str = '!') -> Optional[ParsedCommand]:
    """
    Route a message to a dice command.

    Returns:
        ParsedCommand, or None when the message is not a dice command at all.
        Unknown sub-commands, a help option or a missing expression all
        route to HELP.
    """
    if not text:
        return None

    parts = OPTION_SEPARATOR.split(text.strip())
    head = parts[0]
    if not head.startswith(prefix):
        return None

    match = COMMAND_PATTERN.match(head[len(prefix):])
    if not match:
        return None

    whisper = bool(match.group('whisper'))
    name = match.group('name').lower()
    expression = (match.group('expression') or '').strip() or None
    option = parts[1].strip() if len(parts) >= 2 else ''

    command = COMMANDS_BY_NAME.get(name, RollCommand.HELP)
    if option.lower() == 'help' or expression is None:
        command = RollCommand.HELP

    template = None
    if TEMPLATE_OPTION.match(option):
        template = TEMPLATE_OPTION.sub('', option, count=1)

    logger.debug("Routed dice command", command_name=command.value, whisper=whisper, expression=expression)

    return ParsedCommand(
        command=command,
        whisper=whisper,
        expression=expression if command is not RollCommand.HELP else None,
        template=template,
        raw=text,
    )
