"""
Pytest configuration og shared fixtures.
"""

from typing import Dict, List, Union

import pytest

from save_to_nas.config import Settings
from save_to_nas.dependencies import reset_singletons
from save_to_nas.services.command_runner import CommandResult


SHOWMOUNT_OUTPUT = """Export list for 10.0.0.50:
/volume1/Documents   10.0.0.0/24
/volume1/AI_Art      10.0.0.0/24
/volume1/Downloads   *
/volumeUSB1/usbshare *
"""

MOUNT_OUTPUT = """/dev/sda1 on / type ext4 (rw,relatime)
10.0.0.50:/volume1/Documents on /mnt/nas/Documents type nfs4 (rw,relatime,vers=4.1)
10.0.0.5:/volume1/Other on /mnt/other type nfs (rw)
"""


class FakeCommandRunner:
    """Records every command and answers by command name (sudo is skipped)."""

    def __init__(self):
        self.calls: List[List[str]] = []
        self.responses: Dict[str, Union[CommandResult, Exception]] = {}

    def on(self, name: str, stdout: str = "", returncode: int = 0, stderr: str = "") -> None:
        self.responses[name] = CommandResult(
            args=[name], returncode=returncode, stdout=stdout, stderr=stderr
        )

    def raise_on(self, name: str, error: Exception) -> None:
        self.responses[name] = error

    def command_names(self) -> List[str]:
        return [self._name(call) for call in self.calls]

    async def run(self, args) -> CommandResult:
        cmd = list(args)
        self.calls.append(cmd)
        response = self.responses.get(self._name(cmd))
        if isinstance(response, Exception):
            raise response
        if response is None:
            return CommandResult(args=cmd, returncode=0)
        return CommandResult(
            args=cmd,
            returncode=response.returncode,
            stdout=response.stdout,
            stderr=response.stderr,
        )

    async def run_privileged(self, args, use_sudo: bool = True) -> CommandResult:
        if use_sudo:
            return await self.run(["sudo", *args])
        return await self.run(args)

    @staticmethod
    def _name(cmd: List[str]) -> str:
        return cmd[1] if cmd and cmd[0] == "sudo" else cmd[0]


@pytest.fixture(autouse=True)
def clean_singletons():
    """Automatically reset singletons before hver test."""
    reset_singletons()
    yield
    reset_singletons()


@pytest.fixture
def mount_base(tmp_path):
    base = tmp_path / "nas"
    base.mkdir()
    return base


@pytest.fixture
def settings(mount_base):
    return Settings(
        _env_file=None,
        nas_ip="10.0.0.50",
        nas_mount_base=str(mount_base),
        nas_volume_prefix="/volume1",
    )


@pytest.fixture
def runner():
    return FakeCommandRunner()


@pytest.fixture
def showmount_output():
    return SHOWMOUNT_OUTPUT


@pytest.fixture
def mount_output(mount_base):
    return MOUNT_OUTPUT.replace("/mnt/nas", str(mount_base))
