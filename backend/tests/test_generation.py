"""Tests for prompt rendering, answer parsing and the sketch generator."""

import asyncio
from types import SimpleNamespace

import httpx
import pytest
from openai import APIConnectionError

from workbench.ai.generator import GenerationError, SketchGenerator
from workbench.ai.parsing import MISSING_CODE, MISSING_WIRING, parse_solution
from workbench.ai.prompts import describe_circuit, describe_components, sketch_generation_prompts
from workbench.schemas.circuit import BOARD_ID, Component, Terminal, Wire


GOOD_ANSWER = """### Wiring Instructions
1. Connect the LED anode to the resistor.
2. Connect the resistor to pin 13.

### Arduino Code
```cpp
void setup() { pinMode(13, OUTPUT); }
void loop() {}
```
"""


def _components() -> list[Component]:
    return [
        Component(id="led-1", type="led", label="Red LED"),
        Component(id="res-1", type="resistor", label="220R"),
    ]


def _wires() -> list[Wire]:
    return [
        Wire(
            id="w1",
            start=Terminal(component_id=BOARD_ID, terminal_id="pin-13"),
            end=Terminal(component_id="res-1", terminal_id="t2"),
        ),
        Wire(
            id="w2",
            start=Terminal(component_id="led-1", terminal_id="anode"),
            end=Terminal(component_id="ghost", terminal_id="t1"),
        ),
    ]


class FakeCompletions:
    def __init__(self, answers):
        self.answers = list(answers)
        self.calls = []

    async def create(self, **kwargs):
        self.calls.append(kwargs)
        answer = self.answers.pop(0)
        if isinstance(answer, Exception):
            raise answer
        message = SimpleNamespace(content=answer)
        return SimpleNamespace(choices=[SimpleNamespace(message=message)])


def _fake_client(*answers) -> SimpleNamespace:
    completions = FakeCompletions(answers)
    return SimpleNamespace(chat=SimpleNamespace(completions=completions))


# ─── Prompts ───


class TestPrompts:
    def test_no_wires(self):
        assert describe_circuit(_components(), []) == "No components are wired."

    def test_wire_sentences(self):
        text = describe_circuit(_components(), _wires())
        assert text == (
            "Arduino pin 13 is connected to 220R terminal t2. "
            "Red LED terminal anode is connected to a component terminal t1."
        )

    def test_component_list(self):
        assert describe_components(_components()) == "Red LED (led), 220R (resistor)"
        assert describe_components([]) == "none"

    def test_generation_prompt_contains_goal(self):
        system, user = sketch_generation_prompts("blink fast", _components(), [])
        assert "### Arduino Code" in system
        assert "blink fast" in user
        assert "No components are wired." in user


# ─── Parsing ───


class TestParsing:
    def test_full_answer(self):
        solution = parse_solution(GOOD_ANSWER)
        assert solution.wiring.startswith("1. Connect the LED anode")
        assert solution.code.startswith("void setup()")
        assert "```" not in solution.code

    def test_code_block_without_heading(self):
        solution = parse_solution("Here you go:\n```c++\nvoid loop() {}\n```")
        assert solution.code == "void loop() {}"
        assert solution.wiring == MISSING_WIRING

    def test_nothing_usable(self):
        solution = parse_solution("sorry")
        assert solution.code == MISSING_CODE
        assert solution.wiring == MISSING_WIRING


# ─── Generator ───


class TestSketchGenerator:
    def test_first_attempt_succeeds(self):
        client = _fake_client(GOOD_ANSWER)
        generator = SketchGenerator(client, model="test-model", temperature=0.2)
        solution = asyncio.run(generator.generate("blink", _components(), _wires()))

        assert "pinMode(13, OUTPUT)" in solution.code
        calls = client.chat.completions.calls
        assert len(calls) == 1
        assert calls[0]["model"] == "test-model"
        assert calls[0]["temperature"] == 0.2

    def test_retries_until_code_block(self):
        client = _fake_client("no code here", GOOD_ANSWER)
        generator = SketchGenerator(client)
        solution = asyncio.run(generator.generate("blink", _components(), []))

        assert "pinMode" in solution.code
        calls = client.chat.completions.calls
        assert len(calls) == 2
        assert "no code here" in calls[1]["messages"][1]["content"]

    def test_placeholder_after_exhausting_retries(self):
        client = _fake_client("a", "b", "c")
        generator = SketchGenerator(client, max_retries=3)
        solution = asyncio.run(generator.generate("blink", [], []))
        assert solution.code == MISSING_CODE
        assert len(client.chat.completions.calls) == 3

    def test_api_error_is_wrapped(self):
        request = httpx.Request("POST", "https://example.invalid/v1/chat/completions")
        client = _fake_client(APIConnectionError(request=request))
        generator = SketchGenerator(client)
        with pytest.raises(GenerationError) as excinfo:
            asyncio.run(generator.generate("blink", [], []))
        assert isinstance(excinfo.value.cause, APIConnectionError)
