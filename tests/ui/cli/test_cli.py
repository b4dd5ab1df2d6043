"""Tests for CLI functionality."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest
from pytest_mock import MockerFixture

from rpaths.ui.cli import CommandProcessor

if TYPE_CHECKING:
    from conftest import TreeBuilder


@pytest.fixture
def cli_env(tree: TreeBuilder) -> dict[str, str]:
    """Environment pointing the config at a temporary file with relocated sources."""

    config_file = tree.root / "config.toml"
    _ = config_file.write_text(
        f'default_dir = "{tree.root / "home" / ".paths.d"}"\n'
        f'system_dir = "{tree.root / "etc" / "paths.d"}"\n'
        f'system_file = "{tree.root / "etc" / "paths"}"\n',
        encoding="utf-8",
    )
    return {"RPATHS_CONFIG": str(config_file)}


def test_prints_resolved_path_without_newline(
    tree: TreeBuilder, cli_env: dict[str, str], capsys: pytest.CaptureFixture[str]
) -> None:
    first = tree.dir("targets/first")
    second = tree.dir("targets/second")
    _ = tree.link("mine/a", first)
    _ = tree.list_file("mine/b", [str(second)])
    _ = tree.link("home/.paths.d/c", tree.dir("targets/default"))

    CommandProcessor.process_command([str(tree.root / "mine"), "--no-default"], env=cli_env)

    assert capsys.readouterr().out == f"{first}:{second}"


def test_default_and_system_sources(
    tree: TreeBuilder, cli_env: dict[str, str], capsys: pytest.CaptureFixture[str]
) -> None:
    default_target = tree.dir("targets/default")
    _ = tree.link("home/.paths.d/c", default_target)
    _ = tree.list_file("etc/paths", ["/usr/bin", "/bin"])

    CommandProcessor.process_command(["--system"], env=cli_env)

    assert capsys.readouterr().out == f"{default_target}:/usr/bin:/bin"


def test_empty_default_prints_nothing(
    cli_env: dict[str, str], capsys: pytest.CaptureFixture[str]
) -> None:
    CommandProcessor.process_command([], env=cli_env)

    assert capsys.readouterr().out == ""


def test_use_env_reads_rpaths_dir(
    tree: TreeBuilder, cli_env: dict[str, str], capsys: pytest.CaptureFixture[str]
) -> None:
    target = tree.dir("targets/env")
    _ = tree.link("envdir/x", target)
    _ = tree.link("home/.paths.d/c", tree.dir("targets/default"))
    env = {**cli_env, "RPATHS_DIR": str(tree.root / "envdir")}

    CommandProcessor.process_command(["--use-env"], env=env)

    assert capsys.readouterr().out == str(target)


def test_use_env_without_variable_exits_1(
    cli_env: dict[str, str], capsys: pytest.CaptureFixture[str]
) -> None:
    with pytest.raises(SystemExit) as excinfo:
        CommandProcessor.process_command(["--use-env"], env=cli_env)

    assert excinfo.value.code == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "RPATHS_DIR" in captured.err


def test_invalid_config_exits_1(tree: TreeBuilder, capsys: pytest.CaptureFixture[str]) -> None:
    config_file = tree.root / "broken.toml"
    _ = config_file.write_text("nope = [\n", encoding="utf-8")

    with pytest.raises(SystemExit) as excinfo:
        CommandProcessor.process_command([], env={"RPATHS_CONFIG": str(config_file)})

    assert excinfo.value.code == 1
    assert capsys.readouterr().out == ""


def test_print_config(cli_env: dict[str, str], capsys: pytest.CaptureFixture[str]) -> None:
    CommandProcessor.process_command(["--print-config"], env=cli_env)

    out = capsys.readouterr().out
    assert out.startswith("# rpaths configuration file")
    assert "separator = \":\"" in out


def test_unexpected_errors_exit_1(cli_env: dict[str, str], mocker: MockerFixture) -> None:
    _ = mocker.patch(
        "rpaths.ui.cli.cli.ResolveCommand.execute",
        side_effect=RuntimeError("boom"),
    )

    with pytest.raises(SystemExit) as excinfo:
        CommandProcessor.process_command([], env=cli_env)

    assert excinfo.value.code == 1


def test_keyboard_interrupt_exits_130(cli_env: dict[str, str], mocker: MockerFixture) -> None:
    _ = mocker.patch(
        "rpaths.ui.cli.cli.ResolveCommand.execute",
        side_effect=KeyboardInterrupt,
    )

    with pytest.raises(SystemExit) as excinfo:
        CommandProcessor.process_command([], env=cli_env)

    assert excinfo.value.code == 130
