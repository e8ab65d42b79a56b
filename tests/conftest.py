import io
from types import SimpleNamespace

import pytest
import requests


class SlowBody(io.RawIOBase):
    """Response body that advances a fake clock by `delay` per byte read."""

    def __init__(self, data: bytes, clock, delay: float):
        self._data = io.BytesIO(data)
        self._clock = clock
        self._delay = delay

    def readable(self):
        return True

    def read(self, size=-1):
        self._clock.now += self._delay
        return self._data.read(1)


class FakeClock:
    def __init__(self):
        self.now = 0.0

    def __call__(self):
        return self.now


def make_response(text: str = "", status_code: int = 200, encoding: str = "utf-8", raw=None):
    """A real requests.Response backed by an in-memory body."""
    resp = requests.Response()
    resp.status_code = status_code
    resp.encoding = encoding
    resp.raw = raw if raw is not None else io.BytesIO(text.encode(encoding))
    return resp


@pytest.fixture
def fake_get(monkeypatch):
    """Patch requests.get; set .response or .error before the call."""
    state = SimpleNamespace(response=make_response(), error=None, calls=[])

    def _get(url, **kwargs):
        state.calls.append((url, kwargs))
        if state.error is not None:
            raise state.error
        return state.response

    monkeypatch.setattr(requests, "get", _get)
    return state


def chat_completion(content):
    message = SimpleNamespace(content=content)
    return SimpleNamespace(choices=[SimpleNamespace(message=message)])


class StubCompletions:
    def __init__(self, reply=None, error=None):
        self.reply = reply
        self.error = error
        self.calls = []

    def create(self, **kwargs):
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        return self.reply


def stub_client(reply=None, error=None):
    completions = StubCompletions(reply=reply, error=error)
    return SimpleNamespace(chat=SimpleNamespace(completions=completions))


ARTICLE_HTML = """
<html>
  <head>
    <title>  City Council Approves Budget </title>
    <meta name="description" content="The council voted on Tuesday.">
    <style>body { color: red; }</style>
  </head>
  <body>
    <header>Site header</header>
    <nav>Home | World | Sport</nav>
    <script>var tracking = "SHOCKING";</script>
    <article>
      <p>The   city council
      approved the annual budget.</p>
      <p>Members discussed road repairs.</p>
    </article>
    <footer>Copyright notice</footer>
  </body>
</html>
"""


@pytest.fixture(autouse=True)
def fresh_remote_classifier():
    """The shared classifier reads Config on first use; rebuild it per test."""
    from newscheck.services.llm_agent import get_remote_classifier

    get_remote_classifier.cache_clear()
    yield
    get_remote_classifier.cache_clear()
