import pytest

from rcconfig.environment import MappingEnvironment
from rcconfig.schema import OptionSpec, Schema

ENV_VAR = "TESTTOOL_CONFIG"


@pytest.fixture
def schema() -> Schema:
    """Value option, second value option, switch and repeatable option."""
    return Schema.build(
        "Test Tool",
        "0.1",
        "blabla",
        [
            OptionSpec("testparam", help="Testhelp", documentation="Testdoc"),
            OptionSpec("testparam2", help="test2", documentation="test2"),
            OptionSpec(
                "testswitch",
                takes_argument=False,
                help="a switch that can be provided - or not",
            ),
            OptionSpec(
                "testmultiple",
                repeatable=True,
                help="A parameter that can be specified multiple times.",
            ),
        ],
    )


@pytest.fixture
def env_var() -> str:
    return ENV_VAR


@pytest.fixture
def config_file(tmp_path):
    """Write an rc file and return an environment pointing at it."""

    def _write(content: str | bytes) -> MappingEnvironment:
        path = tmp_path / "config1.conf"
        if isinstance(content, bytes):
            path.write_bytes(content)
        else:
            path.write_text(content)
        return MappingEnvironment({ENV_VAR: str(path)})

    return _write
