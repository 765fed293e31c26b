import logging
from pathlib import Path

import pytest

from py_unitsgame import basicConfig, Tuning, loadEasyTuning, loadHardTuning


class TestConfigLoader:

    @pytest.mark.parametrize(
        "test_name, config_func, expected_decay",
        [
            ("env", basicConfig, 0.8),
            ("manual", lambda: basicConfig(tuning={'decay': 0.7}), 0.7),
            ("easy", loadEasyTuning, 0.9),
            ("hard", loadHardTuning, 0.6),
        ],
    )
    def test_tuning_load(self, test_name, config_func, expected_decay):
        config_func()
        assert Tuning.decay == pytest.approx(expected_decay)
        assert Tuning.divisor == pytest.approx(1.9)
        assert Tuning.floor == pytest.approx(1.0)

    def test_tuning_load_manual_checks(self):
        basicConfig(tuning={'divisor': 3, 'floor': 0.5})
        assert Tuning.divisor == 3.0
        assert isinstance(Tuning.divisor, float)
        assert Tuning.floor == 0.5
        assert Tuning.decay == 0.8

    def test_restore_defaults(self):
        loadHardTuning()
        Tuning.restore_defaults()
        assert (Tuning.divisor, Tuning.decay, Tuning.floor) == (1.9, 0.8, 1.0)

    def test_repr(self):
        assert repr(Tuning) == 'divisor = 1.9\ndecay = 0.8\nfloor = 1.0'


def test_basic_config_mutual_exclusion_error():
    with pytest.raises(ValueError):
        basicConfig(filename="dummy.toml", tuning={"decay": 0.5})


@pytest.mark.parametrize(
    "tuning",
    [
        {"divisor": 1},
        {"divisor": 0.5},
        {"decay": 0},
        {"decay": 1},
        {"decay": 1.5},
        {"floor": 0},
        {"floor": -1},
        {"floor": "1"},
        {"decay": True},
    ],
    ids=repr,
)
def test_invalid_tuning_values(tuning):
    with pytest.raises(ValueError):
        basicConfig(tuning=tuning)
    assert (Tuning.divisor, Tuning.decay, Tuning.floor) == (1.9, 0.8, 1.0)


@pytest.mark.parametrize(
    "tuning",
    [
        {"decay": 0.5, "floor": -1},
        {"divisor": 3, "decay": 0.7, "floor": "2"},
        {"floor": 2, "divisor": 1},
    ],
    ids=repr,
)
def test_invalid_tuning_leaves_all_values_unchanged(tuning):
    with pytest.raises(ValueError):
        basicConfig(tuning=tuning)
    assert (Tuning.divisor, Tuning.decay, Tuning.floor) == (1.9, 0.8, 1.0)


def test_invalid_value_in_file_leaves_tuning_unchanged(tmp_path: Path):
    cfg = tmp_path / "mixed.toml"
    cfg.write_text("[pyug.tuning]\ndivisor = 2.5\ndecay = 0.5\nfloor = 0\n")
    with pytest.raises(ValueError):
        basicConfig(str(cfg))
    assert (Tuning.divisor, Tuning.decay, Tuning.floor) == (1.9, 0.8, 1.0)


def test_unknown_tuning_attribute_is_ignored(caplog):
    with caplog.at_level(logging.WARNING, logger='py_unitsgame'):
        basicConfig(tuning={'speed': 2, 'set': 1, 'decay': 0.5})
    assert "speed" in caplog.text
    assert "not found in tuning" in caplog.text
    assert callable(Tuning.set)
    assert Tuning.decay == 0.5


def test_load_config_searches_upwards(monkeypatch, tmp_path: Path):
    # tmp/a/b with pyug.toml placed in tmp/a
    a = tmp_path / "a"
    b = a / "b"
    b.mkdir(parents=True)
    (a / "pyug.toml").write_text("""
[pyug.tuning]
decay = 0.75
""".strip())

    with monkeypatch.context() as m:
        m.chdir(str(b))
        basicConfig()
        assert Tuning.decay == 0.75


def test_hidden_config_takes_precedence(monkeypatch, tmp_path: Path):
    (tmp_path / ".pyug.toml").write_text("[pyug.tuning]\nfloor = 2\n")
    (tmp_path / "pyug.toml").write_text("[pyug.tuning]\nfloor = 3\n")
    with monkeypatch.context() as m:
        m.chdir(str(tmp_path))
        basicConfig()
    assert Tuning.floor == 2.0


def test_explicit_filename(tmp_path: Path):
    cfg = tmp_path / "custom.toml"
    cfg.write_text("[pyug.tuning]\ndivisor = 2.5\ndecay = 0.5\n")
    basicConfig(str(cfg))
    assert Tuning.divisor == 2.5
    assert Tuning.decay == 0.5


@pytest.mark.parametrize(
    "content, message",
    [
        ("[other]\nvalue = 1\n", "no `pyug` section"),
        ("[pyug]\nname = 'x'\n", "no `pyug.tuning` section"),
    ],
)
def test_missing_sections_warn(tmp_path: Path, caplog, content, message):
    cfg = tmp_path / "partial.toml"
    cfg.write_text(content)
    with caplog.at_level(logging.WARNING, logger='py_unitsgame'):
        basicConfig(str(cfg))
    assert message in caplog.text
    assert Tuning.decay == 0.8

    caplog.clear()
    with caplog.at_level(logging.WARNING, logger='py_unitsgame'):
        basicConfig(str(cfg), suppress_warnings=True)
    assert message not in caplog.text


def test_invalid_value_in_file(tmp_path: Path):
    cfg = tmp_path / "bad.toml"
    cfg.write_text("[pyug.tuning]\ndecay = 2\n")
    with pytest.raises(ValueError):
        basicConfig(str(cfg))


def test_malformed_file(tmp_path: Path):
    cfg = tmp_path / "broken.toml"
    cfg.write_text("[pyug.tuning\ndecay = \n")
    # TOMLDecodeError is a ValueError subclass
    with pytest.raises(ValueError):
        basicConfig(str(cfg))


def test_missing_file(tmp_path: Path):
    with pytest.raises(OSError):
        basicConfig(str(tmp_path / "absent.toml"))
