import asyncio
import logging
import os
import shlex
from typing import List, Optional

from .operations import compress, decompress
from .ui import ConsoleUI
from .validators import is_existing_dir

log = logging.getLogger(__name__)

EXIT_COMMAND = ".exit"


class FileManager:
    """Holds the shell state and dispatches command lines to handlers"""
    def __init__(self, current_dir: str, ui: Optional[ConsoleUI] = None, username: str = "Anonymous"):
        self.current_dir = os.path.abspath(current_dir)
        self.ui = ui or ConsoleUI()
        self.username = username
        self.running = False

        self.commands = {
            "compress": (self.handle_compress, 1, 2),
            "decompress": (self.handle_decompress, 1, 2),
            "cd": (self.handle_cd, 1, 1),
            "up": (self.handle_up, 0, 0),
            EXIT_COMMAND: (self.handle_exit, 0, 0),
        }

    async def main(self, lines=None):
        """Run the read-eval loop until ``.exit`` or end of input

        ``lines`` replaces stdin when given, which is handy for scripting.
        """
        self.running = True
        self.ui.show_greeting(self.username)
        self.ui.show_current_dir(self.current_dir)

        line_iter = iter(lines) if lines is not None else None
        while self.running:
            if line_iter is None:
                line = await self.read_line()
            else:
                line = next(line_iter, None)
            if line is None:
                await self.handle_exit()
                break
            await self.execute(line)
            if self.running:
                self.ui.show_current_dir(self.current_dir)

    async def read_line(self) -> Optional[str]:
        try:
            return await asyncio.to_thread(input, "> ")
        except EOFError:
            return None

    async def execute(self, line: str):
        """Parse one command line and run the matching handler"""
        try:
            words = shlex.split(line)
        except ValueError as e:
            log.debug("Could not parse %r: %s", line, e)
            self.ui.report("invalid")
            return
        if not words:
            return

        name, args = words[0], words[1:]
        command = self.commands.get(name)
        if command is None:
            self.ui.report("invalid")
            self.ui.report(f"Unknown command {name}")
            self.ui.report("Available commands: ", ", ".join(self.available_commands()))
            return

        handler, min_args, max_args = command
        if not min_args <= len(args) <= max_args:
            self.ui.report("invalid")
            self.ui.report(f"Wrong number of arguments for {name}")
            return

        await handler(*args)

    async def handle_compress(self, source_file: str, dest_dir: str = ""):
        await compress(self, source_file, dest_dir)

    async def handle_decompress(self, source_file: str, dest_dir: str = ""):
        await decompress(self, source_file, dest_dir)

    async def handle_cd(self, path: str):
        target = os.path.abspath(os.path.join(self.current_dir, path))
        if not await is_existing_dir(target):
            self.ui.report("failed")
            self.ui.report(f"No such directory {target}")
            return
        self.current_dir = target

    async def handle_up(self):
        # dirname of the root is the root itself
        self.current_dir = os.path.dirname(self.current_dir)

    async def handle_exit(self):
        self.running = False
        self.ui.show_farewell(self.username)

    def available_commands(self) -> List[str]:
        return sorted(self.commands)
