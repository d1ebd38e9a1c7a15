from posprinter import commands
from posprinter.commands import control
from posprinter.commands.control import BEL, ESC, FN, FS, GS, LF, RS
from posprinter.commands.starprnt import DRAWER_KICK


def test_control_code_values() -> None:
    assert (BEL, LF) == (0x07, 0x0A)
    assert (ESC, FS, GS, RS) == (0x1B, 0x1C, 0x1D, 0x1E)
    assert FN == ord("0")


def test_drawer_kick_is_bare_bel() -> None:
    assert DRAWER_KICK == bytes([BEL])


def test_all_exports_exist() -> None:
    for name in control.__all__:
        assert hasattr(control, name)
    for name in commands.__all__:
        assert hasattr(commands, name)
