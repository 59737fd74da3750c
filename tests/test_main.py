import json

from fivednine.main import main


def test_missing_config_argument(capsys):
    assert main([]) == -1
    assert "Required argument: --config" in capsys.readouterr().err


def test_config_argument_without_value(capsys):
    assert main(["--config"]) == -1
    assert "Required argument: --config" in capsys.readouterr().err


def test_missing_config_file(tmp_path, capsys):
    assert main(["--config", str(tmp_path / "absent.json")]) == -1
    assert "Failed to parse configuration file" in capsys.readouterr().err


def test_config_missing_key(tmp_path, capsys):
    path = tmp_path / "config.json"
    path.write_text(json.dumps({"textures_path": "t", "shaders_path": "s"}))
    assert main(["--config", str(path)]) == -1
    err = capsys.readouterr().err
    assert "missing required key: 'gamesdb_path'" in err
    assert "Failed to parse configuration file" in err