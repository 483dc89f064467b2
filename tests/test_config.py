import pytest

from junction_checkers.config import ConfigError, GameConfig, parse_player


def test_defaults_are_valid():
    config = GameConfig().validate()

    assert config.first_player == 1
    assert config.starting_health == 1
    assert config.layout[1] == ((0, 0), (0, 2), (0, 4), (1, 1), (1, 3))
    assert config.layout[-1] == ((8, 0), (8, 2), (8, 4), (7, 1), (7, 3))


def test_from_env_reads_overrides():
    config = GameConfig.from_env({"JUNCTION_FIRST_PLAYER": "2", "JUNCTION_STARTING_HEALTH": "3"})

    assert config.first_player == -1
    assert config.starting_health == 3


def test_from_env_ignores_blank_values():
    config = GameConfig.from_env({"JUNCTION_FIRST_PLAYER": "  "})

    assert config.first_player == 1


def test_from_env_rejects_bad_health():
    with pytest.raises(ConfigError):
        GameConfig.from_env({"JUNCTION_STARTING_HEALTH": "lots"})
    with pytest.raises(ConfigError):
        GameConfig.from_env({"JUNCTION_STARTING_HEALTH": "0"})


def test_parse_player():
    assert parse_player("1") == 1
    assert parse_player("+1") == 1
    assert parse_player("2") == -1
    assert parse_player("-1") == -1
    with pytest.raises(ConfigError):
        parse_player("3")


@pytest.mark.parametrize(
    "layout",
    [
        {1: ((0, 0),), -1: ((0, 0),)},
        {1: ((9, 0),)},
        {2: ((0, 0),)},
    ],
)
def test_invalid_layouts_are_rejected(layout):
    with pytest.raises(ConfigError):
        GameConfig(layout=layout).validate()


def test_invalid_first_player_is_rejected():
    with pytest.raises(ConfigError):
        GameConfig(first_player=0).validate()
