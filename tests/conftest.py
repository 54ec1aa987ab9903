from pytest import fixture

from fileman.core import FileManager


class RecordingUI:
    """Collects reported messages instead of printing them"""

    def __init__(self):
        self.messages = []

    def report(self, *parts):
        self.messages.append("".join(str(part) for part in parts))

    def show_greeting(self, username):
        self.report("greeting ", username)

    def show_farewell(self, username):
        self.report("farewell ", username)

    def show_current_dir(self, current_dir):
        self.report("cwd ", current_dir)


@fixture
def path_work(tmp_path):
    """Stands in for the file manager's current directory."""
    return tmp_path


@fixture
def ui():
    return RecordingUI()


@fixture
def fm(path_work, ui):
    return FileManager(str(path_work), ui=ui, username="tester")
