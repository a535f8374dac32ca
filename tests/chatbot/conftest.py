import types

import pytest


class FakeCompletions:
    """Stand-in for ``AsyncOpenAI().chat.completions``."""

    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls: list[dict] = []

    async def create(self, **kwargs):
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        return self.response


class FakeAsyncOpenAI:
    def __init__(self, completions: FakeCompletions):
        self.chat = types.SimpleNamespace(completions=completions)
        self.closed = False

    async def __aenter__(self):
        return self

    async def __aexit__(self, *_exc):
        self.closed = True


def make_completion(*contents):
    choices = [
        types.SimpleNamespace(
            index=i,
            message=types.SimpleNamespace(role="assistant", content=content),
        )
        for i, content in enumerate(contents)
    ]
    return types.SimpleNamespace(choices=choices)


@pytest.fixture
def fake_openai():
    """Fixture: factory returning (client, completions) for a canned response or error."""

    def _factory(*contents, error=None):
        completions = FakeCompletions(response=make_completion(*contents), error=error)
        return FakeAsyncOpenAI(completions), completions

    return _factory
