import pytest


class FakeEncoder:
    """Stands in for ffmpeg: records each call and fails the paths it is told to."""

    def __init__(self, failing=()):
        self.failing = set(failing)
        self.calls = []

    def encode(self, input_path, output_path):
        self.calls.append((input_path, output_path))
        return input_path not in self.failing


@pytest.fixture
def make_encoder():
    return FakeEncoder


@pytest.fixture
def fake_encoder(make_encoder):
    return make_encoder()


@pytest.fixture
def workdir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    return tmp_path
