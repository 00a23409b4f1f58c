"""
Tests for the command line entry point.
"""

import asyncio

import pytest

from page_mirror import main as cli
from page_mirror.errors import FatalFetchError
from page_mirror.mirror.pipeline import MirrorResult


@pytest.mark.parametrize("raw, expected", [
    ("example.com", "https://example.com"),
    ("  example.com/page  ", "https://example.com/page"),
    ("http://example.com", "http://example.com"),
    ("https://example.com/a", "https://example.com/a"),
])
def test_normalize_target(raw, expected):
    assert cli.normalize_target(raw) == expected


def test_parse_arguments_flags():
    args = cli.parse_arguments(["-p", "demo", "-t", "example.com", "--timeout", "5", "-q"])

    assert args.project == "demo"
    assert args.target == "example.com"
    assert args.timeout == 5.0
    assert args.quiet is True


class RecordingPipeline:
    """Replaces MirrorPipeline and records how it was built."""

    instances = []
    error = None

    def __init__(self, url, project_dir, timeout, show_progress):
        self.base_url = url
        self.project_dir = project_dir
        self.timeout = timeout
        RecordingPipeline.instances.append(self)

    async def run(self):
        if RecordingPipeline.error is not None:
            raise RecordingPipeline.error
        return MirrorResult(base_url=self.base_url, project_dir=self.project_dir)


@pytest.fixture
def recording_pipeline(monkeypatch):
    RecordingPipeline.instances = []
    RecordingPipeline.error = None
    monkeypatch.setattr(cli, "MirrorPipeline", RecordingPipeline)
    return RecordingPipeline


def test_main_runs_pipeline_with_flags(recording_pipeline):
    code = asyncio.run(cli.main(["-p", "demo", "-t", "example.com", "-q"]))

    assert code == 0
    pipeline = recording_pipeline.instances[0]
    assert pipeline.base_url == "https://example.com"
    assert pipeline.project_dir == "demo"


def test_main_prompts_for_missing_values(recording_pipeline, monkeypatch):
    answers = iter(["demo", "example.com/page"])
    monkeypatch.setattr(cli, "prompt_value", lambda prompt: next(answers))

    code = asyncio.run(cli.main(["-q"]))

    assert code == 0
    assert recording_pipeline.instances[0].base_url == "https://example.com/page"


def test_main_requires_project_and_target(recording_pipeline, monkeypatch):
    monkeypatch.setattr(cli, "prompt_value", lambda prompt: "")

    code = asyncio.run(cli.main(["-q", "-p", "demo"]))

    assert code == 1
    assert recording_pipeline.instances == []


def test_main_reports_fatal_errors(recording_pipeline):
    recording_pipeline.error = FatalFetchError("https://example.com")

    code = asyncio.run(cli.main(["-q", "-p", "demo", "-t", "example.com"]))

    assert code == 1
