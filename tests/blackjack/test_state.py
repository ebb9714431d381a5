import pytest

from termjack.blackjack.state import (
    MENU_ORDER,
    Choice,
    GameOver,
    GameResult,
    Presenting,
    Selecting,
    Stage,
    Standing,
    Starting,
    cycle_choice,
    phase_to_dict,
)


def test_menu_order():
    assert MENU_ORDER == (Choice.HIT, Choice.STAND, Choice.SURRENDER)


@pytest.mark.parametrize("choice", list(Choice))
def test_three_steps_return_to_start(choice):
    assert cycle_choice(cycle_choice(cycle_choice(choice, 1), 1), 1) == choice
    assert cycle_choice(cycle_choice(cycle_choice(choice, -1), -1), -1) == choice


@pytest.mark.parametrize("choice", list(Choice))
def test_up_and_down_are_inverse(choice):
    assert cycle_choice(cycle_choice(choice, 1), -1) == choice


def test_phases_compare_by_value():
    assert Selecting(Choice.HIT) == Selecting(Choice.HIT)
    assert Selecting(Choice.HIT) != Selecting(Choice.STAND)
    assert Standing() == Standing()
    assert Standing() != Presenting()
    assert Starting() == Starting(Stage.FIRST)


def test_phases_are_immutable():
    phase = GameOver(GameResult.WIN)
    with pytest.raises(AttributeError):
        phase.result = GameResult.LOSE


def test_choice_str():
    assert [str(choice) for choice in MENU_ORDER] == ["Hit", "Stand", "Surrender"]


@pytest.mark.parametrize(
    "phase, expected",
    [
        (Starting(Stage.THIRD), {"phase": "Starting", "stage": "THIRD"}),
        (Presenting(), {"phase": "Presenting"}),
        (Selecting(Choice.SURRENDER), {"phase": "Selecting", "choice": "SURRENDER"}),
        (Standing(), {"phase": "Standing"}),
        (GameOver(GameResult.TIE), {"phase": "GameOver", "result": "TIE"}),
    ],
)
def test_phase_to_dict(phase, expected):
    assert phase_to_dict(phase) == expected
