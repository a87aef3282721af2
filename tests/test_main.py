import py_compile
from pathlib import Path

from follow_manager import main as main_mod

PACKAGE_DIR = Path(__file__).resolve().parent.parent / "follow_manager"


def test_entry_modules_compile() -> None:
    """The bot entry points should at least be syntactically valid."""
    for name in ("bot.py", "main.py", "ui/views.py", "ui/modals.py"):
        py_compile.compile(str(PACKAGE_DIR / name), doraise=True)


def test_main_requires_token(monkeypatch) -> None:
    """Without a token the process exits with status 2 before connecting."""
    monkeypatch.setenv("DISCORD_BOT_TOKEN", "")
    assert main_mod.main() == 2
