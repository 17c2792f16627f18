"""Shared pytest fixtures."""

from collections.abc import Callable
from pathlib import Path
from typing import Any
from unittest.mock import Mock

import pytest

from notice_gate.model import (
    JsonSettingsStore,
    LegalNotice,
    MemorySettingsStore,
    NoticeOutcome,
)


# === Helper classes ===


class RecordingTaskQueue:
    """
    UI task queue that holds tasks until told to run them.

    Stands in for the Tk event loop so tests can check that nothing runs
    at schedule time.
    """

    def __init__(self) -> None:
        self.pending: list[Callable[[], None]] = []

    def schedule(self, fn: Callable[[], None]) -> None:
        self.pending.append(fn)

    def run_pending(self) -> None:
        """Run every queued task, including ones queued while running."""
        while self.pending:
            self.pending.pop(0)()


class ScriptedPrompt:
    """Prompt whose show() returns a preset outcome."""

    def __init__(self, owner: Any, notice: LegalNotice, outcome: NoticeOutcome):
        self.owner = owner
        self.notice = notice
        self.outcome = outcome
        self.show_count = 0

    def show(self) -> NoticeOutcome:
        self.show_count += 1
        return self.outcome


class ScriptedPromptFactory:
    """Prompt factory that records every prompt it builds."""

    def __init__(self, outcome: NoticeOutcome = NoticeOutcome.ACCEPTED) -> None:
        self.outcome = outcome
        self.prompts: list[ScriptedPrompt] = []

    def __call__(self, owner: Any, notice: LegalNotice) -> ScriptedPrompt:
        prompt = ScriptedPrompt(owner, notice, self.outcome)
        self.prompts.append(prompt)
        return prompt


# === Path Fixtures ===


@pytest.fixture
def fixtures_path() -> Path:
    """Path to test fixtures directory."""
    return Path(__file__).parent / "fixtures"


@pytest.fixture
def config_fixtures_path(fixtures_path: Path) -> Path:
    """Path to config fixtures."""
    return fixtures_path / "config"


@pytest.fixture
def settings_path(tmp_path: Path) -> Path:
    """Location for a settings file that does not exist yet."""
    return tmp_path / "settings" / "options.json"


# === Model Fixtures ===


@pytest.fixture
def sample_notice() -> LegalNotice:
    """Legal notice used by gate tests."""
    return LegalNotice(
        title="Sample Plugin",
        message="<b>Terms</b><br>Declining disables the plugin.",
        settings_key="SampleLegalNotice",
    )


@pytest.fixture
def json_settings(settings_path: Path) -> JsonSettingsStore:
    """Settings store backed by a fresh JSON file."""
    return JsonSettingsStore(settings_path)


@pytest.fixture
def memory_settings() -> MemorySettingsStore:
    """Empty in-memory settings store."""
    return MemorySettingsStore()


# === Gate Collaborator Fixtures ===


@pytest.fixture
def mock_lifecycle() -> Mock:
    """Mock HostLifecycle recording disable and restart calls."""
    lifecycle = Mock()
    lifecycle.restart.return_value = True
    return lifecycle


@pytest.fixture
def task_queue() -> RecordingTaskQueue:
    """UI task queue that runs nothing until asked."""
    return RecordingTaskQueue()


@pytest.fixture
def prompt_factory() -> ScriptedPromptFactory:
    """Prompt factory answering ACCEPTED unless reconfigured."""
    return ScriptedPromptFactory()


@pytest.fixture
def consent_gate(
    sample_notice: LegalNotice,
    json_settings: JsonSettingsStore,
    mock_lifecycle: Mock,
    task_queue: RecordingTaskQueue,
    prompt_factory: ScriptedPromptFactory,
):
    """ConsentGate wired to a JSON settings file and scripted prompt."""
    from notice_gate.presenter import ConsentGate

    return ConsentGate(
        plugin_id="sample",
        notice=sample_notice,
        settings=json_settings,
        lifecycle=mock_lifecycle,
        ui_queue=task_queue,
        prompt_factory=prompt_factory,
    )
