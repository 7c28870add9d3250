import pygame
import pytest

from fildefer.app import action_for_key, hud_lines, main
from fildefer.controls import Action


def test_hud_lines_start_with_title_and_end_with_exit():
    lines = hud_lines()
    assert lines[0][2] == "controls:"
    assert lines[-1][2] == "exit:       esc"


def test_hud_lines_share_column_and_go_downwards():
    lines = hud_lines()
    assert len({x for x, _, _ in lines}) == 1
    ys = [y for _, y, _ in lines]
    assert ys == sorted(ys)
    assert len(set(ys)) == len(ys)


@pytest.mark.parametrize(
    "key, action",
    [
        (pygame.K_ESCAPE, Action.QUIT),
        (pygame.K_UP, Action.ROTATE_UP),
        (pygame.K_DOWN, Action.ROTATE_DOWN),
        (pygame.K_LEFT, Action.ROTATE_LEFT),
        (pygame.K_RIGHT, Action.ROTATE_RIGHT),
        (pygame.K_KP_PLUS, Action.ZOOM_IN),
        (pygame.K_MINUS, Action.ZOOM_OUT),
        (pygame.K_z, Action.Z_PLUS),
        (pygame.K_x, Action.Z_MINUS),
        (pygame.K_r, Action.RESET),
    ],
)
def test_action_for_key(key, action):
    assert action_for_key(key) is action


def test_unbound_key_has_no_action():
    assert action_for_key(pygame.K_q) is None


def test_main_without_arguments_prints_usage(capsys):
    assert main([]) == 1
    assert "Usage" in capsys.readouterr().err


def test_main_with_too_many_arguments_fails(capsys):
    assert main(["a.fdf", "b.fdf"]) == 1
    assert "Usage" in capsys.readouterr().err


def test_main_with_missing_file_reports_error(tmp_path, capsys):
    assert main([str(tmp_path / "missing.fdf")]) == 1
    assert "Error" in capsys.readouterr().err


def test_main_with_ragged_map_reports_error(tmp_path, capsys):
    path = tmp_path / "ragged.fdf"
    path.write_text("0 0 0\n0 0\n")
    assert main([str(path)]) == 1
    assert "Error" in capsys.readouterr().err