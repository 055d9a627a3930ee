"""
- Scripted line source: feeds canned input lines to the console, then None (end of input)
- Output collector: a write() that stores lines instead of printing them
- Keeps MASTERMIND_* env vars from the real shell out of every test
"""
import pytest


class ScriptedInput:
    """Callable like input(): returns the next canned line, then None forever."""

    def __init__(self, lines):
        self.lines = list(lines)
        self.prompts = []

    def __call__(self, prompt):
        self.prompts.append(prompt)
        if not self.lines:
            return None
        return self.lines.pop(0)


@pytest.fixture
def scripted_input():
    def make(*lines):
        return ScriptedInput(lines)
    return make


@pytest.fixture
def output():
    return []


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    monkeypatch.delenv("MASTERMIND_CODE", raising=False)
    monkeypatch.delenv("MASTERMIND_MAX_ATTEMPTS", raising=False)
    yield
