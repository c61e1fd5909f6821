import pytest

from rcconfig import (
    ABSENT,
    PRESENT_FLAG,
    MappingEnvironment,
    MatchError,
    OptionSpec,
    ResolvedValue,
    Schema,
    ValueKind,
    resolve,
)


def test_parse_single_param(schema, env_var):
    config = resolve(
        schema, ["bin", "--testparam", "param1"], env_var, MappingEnvironment()
    )
    assert config["testparam"] == ResolvedValue(ValueKind.VALUES, ("param1",))
    assert config["testswitch"] is ABSENT
    assert config["testparam2"] == ABSENT
    assert config.single("testparam") == "param1"


def test_parse_multiple_params(schema, env_var):
    config = resolve(
        schema,
        ["bin", "--testswitch", "--testparam", "param1", "--testparam2", "param2"],
        env_var,
        MappingEnvironment(),
    )
    assert config["testswitch"] == PRESENT_FLAG
    assert config.is_present("testswitch")
    assert config.single("testparam") == "param1"
    assert config.single("testparam2") == "param2"
    assert config["testmultiple"] == ABSENT


def test_parameters_absent(env_var):
    schema = Schema.build(
        "Test Tool",
        options=[
            OptionSpec("testparam", default="udtarine"),
            OptionSpec("testparam2"),
            OptionSpec("testswitch", takes_argument=False),
            OptionSpec("testmultiple", default="3", repeatable=True),
        ],
    )
    config = resolve(schema, ["bin"], env_var, MappingEnvironment())
    assert not config.is_present("testswitch")
    assert config.single("testparam") == "udtarine"
    assert not config.is_present("testparam2")
    assert config.single("testmultiple") == "3"


def test_parse_from_file_only(schema, env_var, config_file):
    environment = config_file("--testparam\nfromfile\n")
    config = resolve(schema, ["bin"], env_var, environment)
    assert config["testparam"] == ResolvedValue.of(["fromfile"])


def test_override_value_from_file(schema, env_var, config_file):
    environment = config_file("--testparam\nfromfile\n--testparam2\nfromfile2\n")
    config = resolve(schema, ["bin", "--testparam", "param1"], env_var, environment)
    assert config.single("testparam") == "param1"
    assert config.single("testparam2") == "fromfile2"


def test_multiple_values(schema, env_var):
    config = resolve(
        schema,
        ["bin", "--testmultiple", "1", "--testmultiple", "2", "--testmultiple", "3"],
        env_var,
        MappingEnvironment(),
    )
    assert config.values_of("testmultiple") == ("1", "2", "3")
    assert len(config["testmultiple"].values) == 3


def test_flag_from_file(schema, env_var, config_file):
    environment = config_file("# enable the switch\n--testswitch\n")
    config = resolve(schema, ["bin"], env_var, environment)
    assert config["testswitch"] == PRESENT_FLAG


def test_required_option_from_file(env_var, config_file):
    schema = Schema.build("tool", options=[OptionSpec("name", required=True)])
    environment = config_file("--name\nfromfile\n")
    config = resolve(schema, ["bin"], env_var, environment)
    assert config.single("name") == "fromfile"


def test_required_option_missing(env_var, config_file):
    schema = Schema.build("tool", options=[OptionSpec("name", required=True)])
    with pytest.raises(MatchError, match="--name"):
        resolve(schema, ["bin"], env_var, MappingEnvironment())

    environment = config_file("# nothing here\n")
    with pytest.raises(MatchError, match="--name"):
        resolve(schema, ["bin"], env_var, environment)


def test_required_option_missing_with_bypass(env_var, config_file):
    schema = Schema.build("tool", options=[OptionSpec("name", required=True)])
    environment = config_file("--name\nfromfile\n")
    with pytest.raises(MatchError, match="--name"):
        resolve(schema, ["bin", "--no-config"], env_var, environment)


def test_unknown_option_in_file(schema, env_var, config_file):
    environment = config_file("--bogus\n")
    with pytest.raises(MatchError, match="--bogus"):
        resolve(schema, ["bin"], env_var, environment)


def test_unknown_option_on_command_line(schema, env_var, config_file):
    environment = config_file("--testparam\nfromfile\n")
    with pytest.raises(MatchError, match="--bogus"):
        resolve(schema, ["bin", "--bogus"], env_var, environment)


def test_file_cannot_repair_invalid_command_line(schema, env_var, config_file):
    environment = config_file("--testparam\n")
    with pytest.raises(MatchError, match="unrecognized arguments: stray"):
        resolve(schema, ["bin", "stray"], env_var, environment)


def test_file_cannot_supply_missing_command_line_value(env_var, config_file):
    schema = Schema.build(
        "tool", options=[OptionSpec("name", required=True), OptionSpec("port")]
    )
    environment = config_file("--name\nfromfile\n--port\n")
    with pytest.raises(MatchError, match="--port"):
        resolve(schema, ["bin", "--port"], env_var, environment)


def test_malformed_bypass_flag_reports_original_error(schema, env_var, config_file):
    environment = config_file("--testswitch\n")
    with pytest.raises(MatchError, match="ignored explicit argument"):
        resolve(schema, ["bin", "--bogus", "--no-config=yes"], env_var, environment)


def test_file_access_error_falls_back(schema, env_var, tmp_path):
    environment = MappingEnvironment({env_var: str(tmp_path / "missing.conf")})
    config = resolve(schema, ["bin", "--testparam", "param1"], env_var, environment)
    assert config.single("testparam") == "param1"
    assert config["testparam2"] == ABSENT


def test_line_errors_keep_partial_tokens(schema, env_var, config_file):
    environment = config_file(b"--testparam2\n\xff\xfe\nfromfile\n")
    config = resolve(schema, ["bin"], env_var, environment)
    assert config.single("testparam2") == "fromfile"


def test_empty_argv(schema, env_var):
    with pytest.raises(ValueError):
        resolve(schema, [], env_var, MappingEnvironment())


def test_resolve_defaults_to_sys_argv(schema, env_var, monkeypatch):
    monkeypatch.setattr("sys.argv", ["bin", "--testparam", "argv"])
    config = resolve(schema, None, env_var, MappingEnvironment())
    assert config.single("testparam") == "argv"
