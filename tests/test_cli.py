from fivednine.cli import CommandLineArgument, CommandLineArgumentParser


def test_named_value_is_found():
    parser = CommandLineArgumentParser(["--config", "app.json"])
    argument = parser.find_argument("config")
    assert argument == CommandLineArgument("config", "app.json")
    assert argument.as_string() == "app.json"


def test_several_arguments():
    parser = CommandLineArgumentParser(["--a", "1", "--b", "2"])
    assert parser.find_argument("a").as_string() == "1"
    assert parser.find_argument("b").as_string() == "2"


def test_flag_without_value_is_skipped():
    parser = CommandLineArgumentParser(["--verbose", "--config", "x"])
    assert parser.find_argument("verbose") is None
    assert parser.find_argument("config").as_string() == "x"


def test_trailing_name_has_no_value():
    parser = CommandLineArgumentParser(["--config"])
    assert parser.find_argument("config") is None


def test_leading_positional_is_ignored():
    parser = CommandLineArgumentParser(["stray", "--k", "v"])
    assert parser.find_argument("stray") is None
    assert parser.find_argument("k").as_string() == "v"


def test_value_after_value_is_ignored():
    parser = CommandLineArgumentParser(["--k", "v", "w"])
    assert parser.find_argument("k").as_string() == "v"
    assert parser.find_argument("w") is None


def test_double_dash_alone_is_a_value():
    parser = CommandLineArgumentParser(["--name", "--"])
    assert parser.find_argument("name").as_string() == "--"


def test_first_duplicate_wins():
    parser = CommandLineArgumentParser(["--k", "first", "--k", "second"])
    assert parser.find_argument("k").as_string() == "first"


def test_lookup_is_case_sensitive():
    parser = CommandLineArgumentParser(["--config", "x"])
    assert parser.find_argument("Config") is None