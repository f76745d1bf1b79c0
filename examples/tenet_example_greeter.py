"""Example: declaring scenarios as data.

Run with:
    tenet run examples.tenet_example_greeter:SCENARIOS

Run the suite-based variant with invocation notes:
    tenet run examples.tenet_example_greeter:greeter_scenarios --debug
"""

import sys

import tenet
from tenet.comparators import contains, length, startswith


class Greeter:
    def __init__(self, prefix: str = "Hello"):
        self.prefix = prefix

    def greet(self, name: str) -> str:
        message = f"{self.prefix}, {name}!"
        print(message)
        return message

    def greet_many(self, names: list[str]) -> list[str]:
        return [self.greet(name) for name in names]

    def remember(self, seen: list[str], name: str) -> None:
        seen.append(name)

    def refuse(self, name: str) -> str:
        sys.stderr.write(f"not greeting {name}\n")
        raise PermissionError(name)


SCENARIOS = [
    {
        "name": "greet prints and returns",
        "call": {"type": Greeter, "method": "greet"},
        "args": ["Ada"],
        "expected": {"stdout": "Hello, Ada!\n", "lives": True, "return_value": "Hello, Ada!"},
    },
    {
        "name": "custom prefix",
        "call": {"type": Greeter, "construct": {"prefix": "Hi"}, "method": "greet"},
        "args": {"name": "Bob"},
        "expected": {"return_value": startswith("Hi")},
    },
    {
        "name": "greet many",
        "call": {"type": Greeter, "method": "greet_many"},
        "args": [["a", "b", "c"]],
        "expected": {"return_value": length(3), "stdout": contains("Hello, b!")},
    },
    {
        "name": "remember appends",
        "call": {"type": Greeter, "method": "remember"},
        "args": [[], "Cy"],
        "expected": {"mutates": [["Cy"], "Cy"]},
    },
    {
        "name": "refuse raises",
        "call": {"type": Greeter, "method": "refuse"},
        "args": ["Dee"],
        "expected": {"dies": True, "throws": PermissionError, "stderr": "not greeting Dee\n"},
    },
]


def greeter_scenarios() -> list[tenet.Scenario]:
    """Same greeter, shared call defaults."""
    suite = tenet.Suite(type=Greeter, construct={"prefix": "Hey"}, method="greet")
    return suite.scenarios(
        [
            {"name": "hey ada", "args": ["Ada"], "expected": {"return_value": "Hey, Ada!"}},
            {"name": "hey bob", "args": ["Bob"], "expected": {"stdout": "Hey, Bob!\n"}},
        ]
    )
