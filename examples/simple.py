"""
Resolve options from the command line and $SIMPLE_CONFIG.

    printf -- '--greeting\nHowdy\n--name\nfile\n' > /tmp/simple.conf
    SIMPLE_CONFIG=/tmp/simple.conf python examples/simple.py --name cli --loud
"""
import logging
import sys
from dataclasses import dataclass

from rcconfig import OptionSpec, ResolvedConfig, Schema, build
from rcconfig.utils import setup_logging


@dataclass
class Greeting:
    greeting: str
    names: tuple[str, ...]
    loud: bool


class GreetingConfig:
    GREETING = OptionSpec("greeting", default="Hello", help="How to greet.")
    NAME = OptionSpec("name", repeatable=True, help="Who to greet.")
    LOUD = OptionSpec("loud", takes_argument=False, help="Shout the greeting.")

    def describe(self) -> Schema:
        return Schema.build(
            "simple",
            "0.1",
            "Greets people.",
            [self.GREETING, self.NAME, self.LOUD],
        )

    def materialize(self, config: ResolvedConfig) -> Greeting:
        return Greeting(
            greeting=config.single(self.GREETING),
            names=config.values_of(self.NAME) or ("world",),
            loud=config.is_present(self.LOUD),
        )


if __name__ == "__main__":
    setup_logging(mode="cli", console_log_level=logging.DEBUG)
    greeting = build(GreetingConfig(), sys.argv, "SIMPLE_CONFIG")
    for name in greeting.names:
        message = f"{greeting.greeting}, {name}!"
        print(message.upper() if greeting.loud else message)
